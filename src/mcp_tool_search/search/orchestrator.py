# mcp_tool_search/search/orchestrator.py
"""SearchOrchestrator - dispatches a query to the strategy for its mode.

Holds a registry of mode name -> strategy, initializes each strategy
lazily on first use, and applies the same post-filter to every mode:
drop results below the threshold, then keep the first top_k.

Lifecycle calls (initialize/dispose) are not safe to run concurrently with
an in-flight search on the same strategy; callers serialize them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from mcp_tool_search.config.defaults import DEFAULT_EMBED_TIMEOUT
from mcp_tool_search.embedding.provider import EmbeddingProvider
from mcp_tool_search.errors import UnknownModeError
from mcp_tool_search.index.models import ToolCollection
from mcp_tool_search.search.base import SearchStrategy
from mcp_tool_search.search.bm25 import BM25Strategy
from mcp_tool_search.search.hybrid import HybridStrategy
from mcp_tool_search.search.models import SearchOptions, SearchResult
from mcp_tool_search.search.pattern import PatternStrategy
from mcp_tool_search.search.semantic import SemanticStrategy

logger = logging.getLogger(__name__)


def apply_post_filter(
    results: list[SearchResult], threshold: float, top_k: int
) -> list[SearchResult]:
    """Drop results scoring below threshold and truncate, keeping order."""
    return [r for r in results if r.score >= threshold][:top_k]


class SearchOrchestrator:
    """Registry of search strategies with a uniform dispatch contract."""

    def __init__(self, strategies: dict[str, SearchStrategy] | None = None) -> None:
        self._strategies: dict[str, SearchStrategy] = dict(strategies or {})
        self._initialized: set[str] = set()
        self._disposed = False

    @classmethod
    def with_defaults(
        cls,
        provider: EmbeddingProvider | None = None,
        embed_timeout: float = DEFAULT_EMBED_TIMEOUT,
        provider_factory: Callable[[], EmbeddingProvider] | None = None,
    ) -> SearchOrchestrator:
        """Register pattern, bm25, embedding and hybrid.

        Hybrid shares the bm25 and embedding instances, so the provider is
        initialized and disposed once no matter which modes are used. A
        provider_factory is only called on the first embedding or hybrid query.
        """
        lexical = BM25Strategy()
        semantic = SemanticStrategy(
            provider, timeout=embed_timeout, provider_factory=provider_factory
        )
        return cls(
            {
                PatternStrategy.name: PatternStrategy(),
                lexical.name: lexical,
                semantic.name: semantic,
                HybridStrategy.name: HybridStrategy(lexical, semantic),
            }
        )

    # ================================================================
    # Registry
    # ================================================================

    @property
    def modes(self) -> list[str]:
        return list(self._strategies)

    def register(
        self, mode: str, strategy: SearchStrategy
    ) -> SearchStrategy | None:
        """Register an additional mode (or replace an existing one).

        Returns the replaced strategy, which is not disposed here: it may still
        be shared with other modes (hybrid shares bm25 and embedding), so the
        caller owns it and disposes it when appropriate.
        """
        previous = self._strategies.get(mode)
        if previous is not None:
            logger.info(f"Replacing search strategy for mode '{mode}'")
            self._initialized.discard(mode)
        self._strategies[mode] = strategy
        return previous

    def get_strategy(self, mode: str) -> SearchStrategy:
        strategy = self._strategies.get(mode)
        if strategy is None:
            raise UnknownModeError(mode, self.modes)
        return strategy

    # ================================================================
    # Dispatch
    # ================================================================

    async def dispatch(
        self,
        query: str,
        collection: ToolCollection,
        options: SearchOptions | None = None,
    ) -> list[SearchResult]:
        """Run the query with the strategy registered for options.mode."""
        options = options or SearchOptions()
        strategy = self.get_strategy(options.mode)

        if options.mode not in self._initialized:
            logger.debug(f"Initializing search strategy '{options.mode}'")
            await strategy.initialize()
            self._initialized.add(options.mode)
            # A strategy initialized after dispose needs releasing again
            self._disposed = False

        logger.debug(
            f"Dispatching query='{query}' mode={options.mode} top_k={options.top_k} "
            f"threshold={options.threshold} over {len(collection)} tools"
        )
        results = await strategy.search(query, collection, options.top_k)
        return apply_post_filter(results, options.threshold, options.top_k)

    # ================================================================
    # Lifecycle
    # ================================================================

    async def dispose(self) -> None:
        """Release every registered strategy once; a later dispatch re-arms it."""
        if self._disposed:
            return
        self._disposed = True

        seen: set[int] = set()
        for mode, strategy in self._strategies.items():
            if id(strategy) in seen:
                continue
            seen.add(id(strategy))
            try:
                await strategy.dispose()
            except Exception as e:
                logger.warning(f"Error disposing search strategy '{mode}': {e}")
        self._initialized.clear()
        logger.debug("Search orchestrator disposed")
