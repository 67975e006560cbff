# mcp_tool_search/search/semantic.py
"""Vector similarity search using an external embedding provider.

Cosine similarity in [-1, 1] is mapped to a score in [0, 1] via
(cosine + 1) / 2. The whole candidate set is scanned per query.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import numpy as np

from mcp_tool_search.config.defaults import DEFAULT_EMBED_TIMEOUT
from mcp_tool_search.config.enums import SearchMode
from mcp_tool_search.embedding.provider import EmbeddingProvider
from mcp_tool_search.errors import (
    MissingEmbeddingsError,
    ProviderFailureError,
    SearchError,
)
from mcp_tool_search.index.models import IndexedTool, ToolCollection
from mcp_tool_search.search.base import rank
from mcp_tool_search.search.models import SearchResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def cosine_similarities(query: list[float], vectors: list[list[float]]) -> np.ndarray:
    """Cosine of the query against each vector; zero vectors give 0."""
    matrix = np.asarray(vectors, dtype=np.float64)
    q = np.asarray(query, dtype=np.float64)

    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(q)
    dots = matrix @ q
    with np.errstate(divide="ignore", invalid="ignore"):
        cosines = np.where(norms > 0, dots / norms, 0.0)
    return np.clip(cosines, -1.0, 1.0)


class SemanticStrategy:
    """Ranks tools by cosine similarity to the embedded query.

    The provider is either given directly or built on first use by
    ``provider_factory``, so lexical modes never touch provider setup.
    """

    name = SearchMode.EMBEDDING.value

    def __init__(
        self,
        provider: EmbeddingProvider | None = None,
        timeout: float = DEFAULT_EMBED_TIMEOUT,
        provider_factory: Callable[[], EmbeddingProvider] | None = None,
    ) -> None:
        self._provider = provider
        self._provider_factory = provider_factory
        self._timeout = timeout
        self._initialized = False

    @property
    def provider(self) -> EmbeddingProvider | None:
        return self._provider

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def _require_provider(self) -> EmbeddingProvider:
        """Return the provider, building it from the factory the first time."""
        if self._provider is None and self._provider_factory is not None:
            self._provider = self._provider_factory()
            logger.debug(f"Embedding provider '{self._provider.name}' created")
        if self._provider is None:
            raise ProviderFailureError("No embedding provider configured")
        return self._provider

    async def initialize(self) -> None:
        if self._initialized:
            return
        if self._provider is None and self._provider_factory is None:
            return
        provider = self._require_provider()
        await self._call(provider.initialize(), "initialize")
        self._initialized = True
        logger.debug(f"Embedding provider '{provider.name}' initialized")

    async def dispose(self) -> None:
        if not self._initialized or self._provider is None:
            return
        self._initialized = False
        await self._provider.dispose()
        logger.debug(f"Embedding provider '{self._provider.name}' disposed")

    def validate_collection(self, collection: ToolCollection) -> list[IndexedTool]:
        """Check the collection can be ranked semantically; return tools with vectors.

        Runs before any scoring work. Tools without a stored vector (from a
        scope indexed without embeddings) are left out.
        """
        if not collection.has_embeddings:
            raise MissingEmbeddingsError(
                "Index was built without embeddings; rebuild it with an "
                "embedding provider to use embedding or hybrid search"
            )
        provider = self._require_provider()

        dimensions = provider.dimensions
        candidates: list[IndexedTool] = []
        for tool in collection.tools:
            if tool.embedding is None:
                continue
            if len(tool.embedding) != dimensions:
                raise MissingEmbeddingsError(
                    f"Embedding for tool '{tool.name}' has {len(tool.embedding)} "
                    f"dimensions but provider '{provider.name}' produces {dimensions}"
                )
            candidates.append(tool)

        if not candidates:
            raise MissingEmbeddingsError("No tool in the index has a stored embedding")
        return candidates

    async def search(
        self,
        query: str,
        collection: ToolCollection,
        limit: int | None = None,
    ) -> list[SearchResult]:
        candidates = self.validate_collection(collection)
        provider = self._require_provider()

        query_vector = await self._call(provider.embed(query), "embed")
        if len(query_vector) != provider.dimensions:
            raise ProviderFailureError(
                f"Provider '{provider.name}' returned a {len(query_vector)}-"
                f"dimensional vector, expected {provider.dimensions}"
            )

        cosines = cosine_similarities(
            query_vector, [tool.embedding or [] for tool in candidates]
        )
        scored = [
            (tool, (float(cosine) + 1.0) / 2.0)
            for tool, cosine in zip(candidates, cosines)
        ]
        logger.debug(f"Semantic query='{query}' scored {len(scored)} tools")
        return rank(scored, limit)

    async def _call(self, awaitable: Awaitable[T], operation: str) -> T:
        """Await a provider call with a timeout, translating failures."""
        name = self._provider.name if self._provider is not None else "unknown"
        try:
            return await asyncio.wait_for(awaitable, timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise ProviderFailureError(
                f"Embedding provider '{name}' timed out after {self._timeout}s during {operation}"
            ) from exc
        except SearchError:
            raise
        except Exception as exc:
            logger.warning(f"Embedding provider '{name}' {operation} failed: {exc}")
            raise ProviderFailureError(
                f"Embedding provider '{name}' failed during {operation}: {exc}"
            ) from exc
