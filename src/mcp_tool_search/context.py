# mcp_tool_search/context.py
"""SearchContext - everything a host needs to run searches, built once.

Replaces ambient globals: the provider registry, the resolved
configuration and the orchestrator are owned here and passed explicitly.
"""

from __future__ import annotations

import logging
from functools import partial
from types import TracebackType

from mcp_tool_search.config.models import SearchConfig
from mcp_tool_search.config.runtime import RuntimeConfig
from mcp_tool_search.embedding.provider import EmbeddingProvider
from mcp_tool_search.embedding.registry import EmbeddingProviderRegistry
from mcp_tool_search.index.models import ToolCollection
from mcp_tool_search.search.models import SearchOptions, SearchResult
from mcp_tool_search.search.orchestrator import SearchOrchestrator

logger = logging.getLogger(__name__)


class SearchContext:
    """Owns configuration, provider registry and orchestrator for one process."""

    def __init__(
        self,
        config: SearchConfig,
        registry: EmbeddingProviderRegistry,
        orchestrator: SearchOrchestrator,
        provider: EmbeddingProvider | None = None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.orchestrator = orchestrator
        self.provider = provider

    @classmethod
    def create(
        cls,
        config: SearchConfig | None = None,
        registry: EmbeddingProviderRegistry | None = None,
        provider: EmbeddingProvider | None = None,
        embed_timeout: float | None = None,
    ) -> SearchContext:
        """Build the context.

        An explicit provider wins; otherwise the configured provider (if
        any) is created through the registry on the first embedding or
        hybrid query, so lexical searches work without a registered factory.
        The embed timeout defaults to the environment, then the config file.
        """
        config = config or SearchConfig()
        registry = registry or EmbeddingProviderRegistry()

        provider_factory = None
        if provider is None and config.embedding_provider is not None:
            provider_factory = partial(registry.create, config.embedding_provider)

        if embed_timeout is None:
            embed_timeout = RuntimeConfig(config).resolve_embed_timeout().value

        orchestrator = SearchOrchestrator.with_defaults(
            provider=provider,
            embed_timeout=embed_timeout,
            provider_factory=provider_factory,
        )
        logger.debug(
            f"Search context ready: modes={orchestrator.modes}, "
            f"provider={provider.name if provider else None}, "
            f"embed_timeout={embed_timeout}s"
        )
        return cls(config, registry, orchestrator, provider)

    def default_options(self) -> SearchOptions:
        return SearchOptions(
            mode=self.config.default_search_mode,
            top_k=self.config.default_top_k,
            threshold=self.config.default_threshold,
        )

    async def search(
        self,
        query: str,
        collection: ToolCollection,
        options: SearchOptions | None = None,
    ) -> list[SearchResult]:
        return await self.orchestrator.dispatch(
            query, collection, options or self.default_options()
        )

    async def close(self) -> None:
        await self.orchestrator.dispose()

    async def __aenter__(self) -> SearchContext:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
