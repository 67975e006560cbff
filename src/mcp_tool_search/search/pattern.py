# mcp_tool_search/search/pattern.py
"""Regular-expression search over each tool's searchable text."""

from __future__ import annotations

import logging
import re

from mcp_tool_search.config.enums import SearchMode
from mcp_tool_search.errors import InvalidQueryError
from mcp_tool_search.index.models import IndexedTool, ToolCollection
from mcp_tool_search.search.base import rank
from mcp_tool_search.search.models import SearchResult

logger = logging.getLogger(__name__)

MATCH_SCORE = 1.0


def compile_pattern(query: str) -> re.Pattern[str]:
    """Compile a query case-insensitively, raising InvalidQueryError on bad syntax."""
    try:
        return re.compile(query, re.IGNORECASE)
    except re.error as exc:
        raise InvalidQueryError(query, str(exc)) from exc


class PatternStrategy:
    """Every match scores 1.0; non-matches are excluded rather than scored 0."""

    name = SearchMode.PATTERN.value

    async def initialize(self) -> None:
        return None

    async def dispose(self) -> None:
        return None

    async def search(
        self,
        query: str,
        collection: ToolCollection,
        limit: int | None = None,
    ) -> list[SearchResult]:
        return self.match(query, collection.tools, limit)

    def match(
        self,
        query: str,
        tools: list[IndexedTool],
        limit: int | None = None,
    ) -> list[SearchResult]:
        pattern = compile_pattern(query)
        matches = [
            (tool, MATCH_SCORE) for tool in tools if pattern.search(tool.searchable_text)
        ]
        logger.debug(f"Pattern '{query}' matched {len(matches)}/{len(tools)} tools")
        return rank(matches, limit)
