# mcp_tool_search/search/base.py
"""The contract every search strategy implements."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from mcp_tool_search.index.models import IndexedTool, ToolCollection
from mcp_tool_search.search.models import SearchResult


@runtime_checkable
class SearchStrategy(Protocol):
    """A ranking strategy held in the orchestrator's registry.

    ``initialize`` and ``dispose`` must be idempotent; ``search`` returns
    results ordered by descending score, each score in [0, 1].
    """

    name: str

    async def initialize(self) -> None: ...

    async def search(
        self,
        query: str,
        collection: ToolCollection,
        limit: int | None = None,
    ) -> list[SearchResult]: ...

    async def dispose(self) -> None: ...


def rank(
    scored: Iterable[tuple[IndexedTool, float]],
    limit: int | None = None,
) -> list[SearchResult]:
    """Sort by descending score, break ties by ascending tool name, truncate."""
    ordered = sorted(scored, key=lambda item: (-item[1], item[0].name))
    if limit is not None:
        ordered = ordered[:limit]
    return [SearchResult.from_indexed(tool, score) for tool, score in ordered]
