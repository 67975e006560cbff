# mcp_tool_search/errors.py
"""Errors raised by the ranking engine.

None of these are retried inside the engine and none are turned into an
empty result; they propagate to the caller of the search.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base class for every failed search or index load."""


class InvalidQueryError(SearchError):
    """The query could not be compiled (e.g. a malformed regular expression)."""

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        self.reason = reason
        super().__init__(f"Invalid pattern '{query}': {reason}")


class UnknownModeError(SearchError):
    """The orchestrator was asked for a mode that is not registered."""

    def __init__(self, mode: str, available: list[str]) -> None:
        self.mode = mode
        self.available = available
        super().__init__(
            f"Unknown search mode '{mode}'. Available: {', '.join(available)}"
        )


class MissingEmbeddingsError(SearchError):
    """Semantic ranking was requested but the collection has no usable vectors."""


class ProviderFailureError(SearchError):
    """The embedding provider failed, timed out, or is not available."""


class IndexLoadError(SearchError):
    """An index file exists but could not be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load index {path}: {reason}")
