"""Index document model, scope merging and index loading."""

from mcp_tool_search.index.models import (
    BM25Stats,
    IndexedTool,
    PersistedIndex,
    ToolCollection,
    ToolDefinition,
)
from mcp_tool_search.index.merge import (
    has_any_embeddings,
    merge_collection,
    merge_indexed_tools,
    select_bm25_stats,
)
from mcp_tool_search.index.scope import (
    get_index_path,
    load_collection,
    load_index,
    load_scoped_indexes,
)

__all__ = [
    # Models
    "ToolDefinition",
    "IndexedTool",
    "BM25Stats",
    "PersistedIndex",
    "ToolCollection",
    # Scope merge
    "merge_indexed_tools",
    "select_bm25_stats",
    "has_any_embeddings",
    "merge_collection",
    # Loading
    "get_index_path",
    "load_index",
    "load_scoped_indexes",
    "load_collection",
]
