"""Protocol for embedding providers - the engine only depends on this contract.

Provider runtimes (local models, OpenAI, Voyage AI, ...) live outside the
ranking engine and register themselves with an EmbeddingProviderRegistry.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Converts text into fixed-length vectors.

    ``initialize`` and ``dispose`` are invoked at most once each by the
    engine. Every coroutine may fail; retries are the provider's business.
    """

    @property
    def name(self) -> str:
        """Provider identifier recorded in the index (e.g. 'local:all-MiniLM-L6-v2')."""
        ...

    @property
    def dimensions(self) -> int:
        """Length of every vector this provider produces."""
        ...

    async def initialize(self) -> None:
        """Load models / open connections."""
        ...

    async def embed(self, text: str) -> list[float]:
        """Embed a single text."""
        ...

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Embed several texts, preserving order."""
        ...

    async def dispose(self) -> None:
        """Release models / connections."""
        ...
