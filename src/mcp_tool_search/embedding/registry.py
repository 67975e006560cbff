# mcp_tool_search/embedding/registry.py
"""Registry mapping provider types to factories.

There is no process-wide default instance: a registry is constructed once
at startup (see SearchContext) and passed to whatever needs it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from mcp_tool_search.config.models import EmbeddingProviderConfig
from mcp_tool_search.embedding.provider import EmbeddingProvider
from mcp_tool_search.errors import ProviderFailureError

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[EmbeddingProviderConfig], EmbeddingProvider]
"""Builds a provider from its configuration."""


class EmbeddingProviderRegistry:
    """Creates embedding providers from configuration."""

    def __init__(self) -> None:
        self._factories: dict[str, ProviderFactory] = {}

    def register(self, provider_type: str, factory: ProviderFactory) -> None:
        """Register (or replace) the factory for a provider type."""
        if provider_type in self._factories:
            logger.debug(f"Replacing embedding provider factory '{provider_type}'")
        self._factories[provider_type] = factory

    def unregister(self, provider_type: str) -> None:
        self._factories.pop(provider_type, None)

    def is_registered(self, provider_type: str) -> bool:
        return provider_type in self._factories

    def available_types(self) -> list[str]:
        """Registered provider types, in registration order."""
        return list(self._factories)

    def create(self, config: EmbeddingProviderConfig) -> EmbeddingProvider:
        """Create a provider for the configured type."""
        factory = self._factories.get(config.type)
        if factory is None:
            available = ", ".join(self.available_types()) or "none"
            raise ProviderFailureError(
                f"No embedding provider registered for type '{config.type}' "
                f"(available: {available})"
            )

        try:
            provider = factory(config)
        except Exception as exc:
            raise ProviderFailureError(
                f"Failed to create embedding provider '{config.type}': {exc}"
            ) from exc

        logger.info(
            f"Created embedding provider '{provider.name}' ({provider.dimensions} dimensions)"
        )
        return provider
