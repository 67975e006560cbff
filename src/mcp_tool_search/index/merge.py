# mcp_tool_search/index/merge.py
"""Merging project-level and user-level indexes into one collection.

Project tools override user tools with the same name. An overridden tool
keeps the position the user index gave it; project-only tools are
appended in project order. Corpus statistics are taken from one scope
only (project first) and are never combined numerically.

All functions are total, never mutate their inputs, and return fresh
objects.
"""

from __future__ import annotations

import logging

from mcp_tool_search.index.models import (
    BM25Stats,
    IndexedTool,
    PersistedIndex,
    ToolCollection,
)

logger = logging.getLogger(__name__)


def merge_indexed_tools(
    project: PersistedIndex | None,
    user: PersistedIndex | None,
) -> list[IndexedTool]:
    """Merge tools from both scopes, deduplicated by tool name."""
    # dict assignment to an existing key keeps its insertion position
    merged: dict[str, IndexedTool] = {}
    overrides = 0

    if user is not None:
        for indexed in user.tools:
            merged[indexed.name] = indexed

    if project is not None:
        for indexed in project.tools:
            if indexed.name in merged:
                logger.debug(
                    f"Tool '{indexed.name}' from project overrides user version"
                )
                overrides += 1
            merged[indexed.name] = indexed

    if overrides:
        logger.debug(
            f"Merged indexes: {overrides} tool(s) overridden by project scope"
        )

    return list(merged.values())


def select_bm25_stats(
    project: PersistedIndex | None,
    user: PersistedIndex | None,
) -> BM25Stats:
    """Project statistics if present, else user statistics, else zeros."""
    if project is not None:
        return project.bm25_stats.model_copy()
    if user is not None:
        return user.bm25_stats.model_copy()
    return BM25Stats.empty()


def has_any_embeddings(
    project: PersistedIndex | None,
    user: PersistedIndex | None,
) -> bool:
    """True if either present index was built with embeddings."""
    return bool(
        (project is not None and project.has_embeddings)
        or (user is not None and user.has_embeddings)
    )


def merge_collection(
    project: PersistedIndex | None,
    user: PersistedIndex | None,
) -> ToolCollection:
    """Build the query-ready collection for the two scopes."""
    return ToolCollection(
        tools=merge_indexed_tools(project, user),
        stats=select_bm25_stats(project, user),
        has_embeddings=has_any_embeddings(project, user),
    )
