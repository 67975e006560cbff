"""Common test fixtures and utilities for mcp-tool-search tests."""

from __future__ import annotations

import asyncio

import pytest

from mcp_tool_search.index.models import (
    IndexedTool,
    PersistedIndex,
    ToolCollection,
    ToolDefinition,
)


class FakeEmbeddingProvider:
    """Deterministic provider: looks vectors up in a table, counts lifecycle calls."""

    def __init__(
        self,
        vectors: dict[str, list[float]] | None = None,
        dimensions: int = 3,
        fail_with: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.name = "fake"
        self.dimensions = dimensions
        self.vectors = vectors or {}
        self.fail_with = fail_with
        self.delay = delay
        self.initialize_calls = 0
        self.dispose_calls = 0
        self.embed_calls: list[str] = []

    async def initialize(self) -> None:
        self.initialize_calls += 1

    async def embed(self, text: str) -> list[float]:
        self.embed_calls.append(text)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            raise self.fail_with
        return self.vectors.get(text, [1.0] + [0.0] * (self.dimensions - 1))

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        return [await self.embed(text) for text in texts]

    async def dispose(self) -> None:
        self.dispose_calls += 1


def make_tool(
    name: str,
    description: str | None = None,
    server: str = "test-server",
    embedding: list[float] | None = None,
    title: str | None = None,
) -> IndexedTool:
    """Build an IndexedTool through the shared tokenizer."""
    return IndexedTool.from_tool(
        ToolDefinition(name=name, title=title, description=description),
        server_name=server,
        embedding=embedding,
    )


def make_index(
    tools: list[IndexedTool], dimensions: int | None = None
) -> PersistedIndex:
    """Build an index (with statistics) from tools."""
    has_vectors = any(t.embedding is not None for t in tools)
    return PersistedIndex.build(
        tools,
        embedding_provider="fake" if has_vectors else None,
        embedding_dimensions=dimensions if has_vectors else None,
    )


@pytest.fixture
def file_tools() -> list[IndexedTool]:
    """read_file / write_file pair without embeddings."""
    return [
        make_tool("read_file", "Read contents of a file"),
        make_tool("write_file", "Write contents to a file"),
    ]


@pytest.fixture
def file_collection(file_tools: list[IndexedTool]) -> ToolCollection:
    return ToolCollection.from_index(make_index(file_tools))


@pytest.fixture
def embedded_tools() -> list[IndexedTool]:
    """Three tools whose vectors point in distinct directions."""
    return [
        make_tool("read_file", "Read contents of a file", embedding=[1.0, 0.0, 0.0]),
        make_tool("write_file", "Write contents to a file", embedding=[0.0, 1.0, 0.0]),
        make_tool("list_dir", "List a directory", embedding=[-1.0, 0.0, 0.0]),
    ]


@pytest.fixture
def embedded_collection(embedded_tools: list[IndexedTool]) -> ToolCollection:
    return ToolCollection.from_index(make_index(embedded_tools, dimensions=3))


@pytest.fixture
def fake_provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider(
        vectors={
            "read": [1.0, 0.0, 0.0],
            "write": [0.0, 1.0, 0.0],
        }
    )
