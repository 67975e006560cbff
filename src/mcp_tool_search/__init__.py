"""mcp-tool-search - ranking engine for MCP tool descriptions.

Pattern, BM25, embedding and hybrid (RRF) search over project- and
user-scoped tool indexes.
"""

from mcp_tool_search.errors import (
    IndexLoadError,
    InvalidQueryError,
    MissingEmbeddingsError,
    ProviderFailureError,
    SearchError,
    UnknownModeError,
)
from mcp_tool_search.index import (
    BM25Stats,
    IndexedTool,
    PersistedIndex,
    ToolCollection,
    ToolDefinition,
    has_any_embeddings,
    load_collection,
    load_index,
    merge_collection,
    merge_indexed_tools,
    select_bm25_stats,
)
from mcp_tool_search.search.models import SearchOptions, SearchResult, ToolReference
from mcp_tool_search.search.orchestrator import SearchOrchestrator
from mcp_tool_search.search.tokenizer import tokenize
from mcp_tool_search.embedding import EmbeddingProvider, EmbeddingProviderRegistry
from mcp_tool_search.context import SearchContext

__all__ = [
    # Errors
    "SearchError",
    "InvalidQueryError",
    "UnknownModeError",
    "MissingEmbeddingsError",
    "ProviderFailureError",
    "IndexLoadError",
    # Document model
    "ToolDefinition",
    "IndexedTool",
    "BM25Stats",
    "PersistedIndex",
    "ToolCollection",
    # Scope merge and loading
    "merge_indexed_tools",
    "select_bm25_stats",
    "has_any_embeddings",
    "merge_collection",
    "load_index",
    "load_collection",
    # Search
    "tokenize",
    "SearchOptions",
    "SearchResult",
    "ToolReference",
    "SearchOrchestrator",
    # Embeddings
    "EmbeddingProvider",
    "EmbeddingProviderRegistry",
    # Context
    "SearchContext",
]
