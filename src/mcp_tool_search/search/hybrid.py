# mcp_tool_search/search/hybrid.py
"""Hybrid search: BM25 and semantic ranking fused with Reciprocal Rank Fusion.

RRF(d) = sum(1 / (k + rank_i(d))) over each ranked list where d appears.
Ranks are 1-based; a list that does not contain d contributes nothing.
Fused scores are divided by the best fused score, so the top result is 1.0.
"""

from __future__ import annotations

import asyncio
import logging

from mcp_tool_search.config.defaults import HYBRID_OVERFETCH_FACTOR, RRF_K
from mcp_tool_search.config.enums import SearchMode
from mcp_tool_search.index.models import ToolCollection
from mcp_tool_search.search.bm25 import BM25Strategy
from mcp_tool_search.search.models import SearchResult
from mcp_tool_search.search.semantic import SemanticStrategy

logger = logging.getLogger(__name__)


def reciprocal_rank_fusion(
    rankings: list[list[SearchResult]],
    k: int = RRF_K,
) -> list[SearchResult]:
    """Fuse ranked lists into one normalized, deterministically ordered list."""
    fused: dict[str, float] = {}
    hits: dict[str, SearchResult] = {}

    for ranking in rankings:
        for position, result in enumerate(ranking, start=1):
            fused[result.name] = fused.get(result.name, 0.0) + 1.0 / (k + position)
            hits.setdefault(result.name, result)

    if not fused:
        return []

    best = max(fused.values())
    ordered = sorted(fused.items(), key=lambda item: (-item[1], item[0]))
    return [
        hits[name].model_copy(update={"score": score / best})
        for name, score in ordered
    ]


class HybridStrategy:
    """Runs BM25 and semantic search concurrently and fuses their rankings."""

    name = SearchMode.HYBRID.value

    def __init__(
        self,
        lexical: BM25Strategy,
        semantic: SemanticStrategy,
        rrf_k: int = RRF_K,
        overfetch: int = HYBRID_OVERFETCH_FACTOR,
    ) -> None:
        self._lexical = lexical
        self._semantic = semantic
        self._rrf_k = rrf_k
        self._overfetch = overfetch

    async def initialize(self) -> None:
        await self._semantic.initialize()

    async def dispose(self) -> None:
        await self._semantic.dispose()

    async def search(
        self,
        query: str,
        collection: ToolCollection,
        limit: int | None = None,
    ) -> list[SearchResult]:
        # Fail before launching either sub-search
        self._semantic.validate_collection(collection)

        candidates = limit * self._overfetch if limit is not None else None

        lexical = asyncio.create_task(
            self._lexical.search(query, collection, candidates), name="hybrid_bm25"
        )
        semantic = asyncio.create_task(
            self._semantic.search(query, collection, candidates),
            name="hybrid_embedding",
        )
        try:
            lexical_results, semantic_results = await asyncio.gather(lexical, semantic)
        except BaseException:
            # No partial fusion: stop whichever side is still running
            for task in (lexical, semantic):
                task.cancel()
            # Collect both outcomes so a second failure is not left unretrieved
            await asyncio.gather(lexical, semantic, return_exceptions=True)
            raise

        logger.debug(
            f"Hybrid query='{query}': {len(lexical_results)} bm25, "
            f"{len(semantic_results)} embedding candidates"
        )
        fused = reciprocal_rank_fusion([lexical_results, semantic_results], self._rrf_k)
        return fused[:limit] if limit is not None else fused
