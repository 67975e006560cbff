"""Configuration enums - no magic strings!"""

from __future__ import annotations

from enum import Enum


class SearchMode(str, Enum):
    """Built-in search modes."""

    PATTERN = "pattern"
    BM25 = "bm25"
    EMBEDDING = "embedding"
    HYBRID = "hybrid"


class IndexScope(str, Enum):
    """Index storage scopes.

    - project: {cwd}/.please/mcp/index.json
    - user: ~/.please/mcp/index.json
    """

    PROJECT = "project"
    USER = "user"


class CliScope(str, Enum):
    """Scopes accepted on the command line; ALL spans both index scopes."""

    PROJECT = "project"
    USER = "user"
    ALL = "all"


class ConfigScope(str, Enum):
    """Configuration file scopes used for fingerprinting."""

    LOCAL = "local"
    PROJECT = "project"
    USER = "user"


class EmbeddingProviderType(str, Enum):
    """Embedding provider types known by name."""

    LOCAL = "local"
    OPENAI = "openai"
    VOYAGE = "voyage"


class ConfigSource(str, Enum):
    """Configuration value source for priority resolution."""

    CLI = "cli"
    ENV = "env"
    FILE = "file"
    DEFAULT = "default"


def is_index_scope(value: object) -> bool:
    """Return True if value names an index scope."""
    return value in {scope.value for scope in IndexScope}


def is_cli_scope(value: object) -> bool:
    """Return True if value names a CLI scope (index scopes plus 'all')."""
    return value in {scope.value for scope in CliScope}
