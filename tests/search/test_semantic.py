# tests/search/test_semantic.py
"""Tests for embedding-based search."""

import numpy as np
import pytest

from mcp_tool_search.errors import MissingEmbeddingsError, ProviderFailureError
from mcp_tool_search.index.models import ToolCollection
from mcp_tool_search.search.semantic import SemanticStrategy, cosine_similarities
from tests.conftest import FakeEmbeddingProvider, make_index, make_tool


class TestCosineSimilarities:
    def test_basic_directions(self):
        cosines = cosine_similarities(
            [1.0, 0.0], [[1.0, 0.0], [0.0, 1.0], [-1.0, 0.0]]
        )
        np.testing.assert_allclose(cosines, [1.0, 0.0, -1.0])

    def test_zero_vector_gives_zero(self):
        cosines = cosine_similarities([1.0, 0.0], [[0.0, 0.0]])
        assert cosines[0] == 0.0
        cosines = cosine_similarities([0.0, 0.0], [[1.0, 0.0]])
        assert cosines[0] == 0.0

    def test_magnitude_ignored(self):
        cosines = cosine_similarities([2.0, 0.0], [[10.0, 0.0]])
        assert cosines[0] == pytest.approx(1.0)


class TestSemanticSearch:
    """Tests for SemanticStrategy.search."""

    @pytest.mark.asyncio
    async def test_scores_mapped_to_unit_interval(
        self, fake_provider, embedded_collection
    ):
        strategy = SemanticStrategy(fake_provider)
        results = await strategy.search("read", embedded_collection)
        assert [r.name for r in results] == ["read_file", "write_file", "list_dir"]
        assert [r.score for r in results] == pytest.approx([1.0, 0.5, 0.0])
        assert fake_provider.embed_calls == ["read"]

    @pytest.mark.asyncio
    async def test_limit(self, fake_provider, embedded_collection):
        strategy = SemanticStrategy(fake_provider)
        results = await strategy.search("write", embedded_collection, limit=1)
        assert [r.name for r in results] == ["write_file"]

    @pytest.mark.asyncio
    async def test_tools_without_vectors_skipped(self, fake_provider):
        tools = [
            make_tool("read_file", "Read a file", embedding=[1.0, 0.0, 0.0]),
            make_tool("legacy_tool", "No vector here"),
        ]
        collection = ToolCollection.from_index(make_index(tools, dimensions=3))
        results = await SemanticStrategy(fake_provider).search("read", collection)
        assert [r.name for r in results] == ["read_file"]


class TestSemanticFailures:
    """Failure modes surface as typed errors."""

    @pytest.mark.asyncio
    async def test_index_without_embeddings(self, fake_provider, file_collection):
        strategy = SemanticStrategy(fake_provider)
        with pytest.raises(MissingEmbeddingsError):
            await strategy.search("read", file_collection)
        assert fake_provider.embed_calls == []

    @pytest.mark.asyncio
    async def test_dimension_mismatch(self, embedded_collection):
        provider = FakeEmbeddingProvider(dimensions=4)
        with pytest.raises(MissingEmbeddingsError):
            await SemanticStrategy(provider).search("read", embedded_collection)
        assert provider.embed_calls == []

    @pytest.mark.asyncio
    async def test_no_provider(self, embedded_collection):
        with pytest.raises(ProviderFailureError):
            await SemanticStrategy(None).search("read", embedded_collection)

    @pytest.mark.asyncio
    async def test_provider_error_wrapped(self, embedded_collection):
        provider = FakeEmbeddingProvider(fail_with=RuntimeError("model crashed"))
        with pytest.raises(ProviderFailureError) as exc_info:
            await SemanticStrategy(provider).search("read", embedded_collection)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "model crashed" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_provider_timeout(self, embedded_collection):
        provider = FakeEmbeddingProvider(delay=0.5)
        strategy = SemanticStrategy(provider, timeout=0.01)
        with pytest.raises(ProviderFailureError) as exc_info:
            await strategy.search("read", embedded_collection)
        assert "timed out" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_wrong_query_vector_length(self, embedded_collection):
        provider = FakeEmbeddingProvider(vectors={"read": [1.0, 0.0]})
        with pytest.raises(ProviderFailureError):
            await SemanticStrategy(provider).search("read", embedded_collection)


class TestSemanticLifecycle:
    """initialize/dispose are idempotent."""

    @pytest.mark.asyncio
    async def test_initialize_once(self, fake_provider):
        strategy = SemanticStrategy(fake_provider)
        await strategy.initialize()
        await strategy.initialize()
        assert fake_provider.initialize_calls == 1
        assert strategy.is_initialized

    @pytest.mark.asyncio
    async def test_dispose_once(self, fake_provider):
        strategy = SemanticStrategy(fake_provider)
        await strategy.initialize()
        await strategy.dispose()
        await strategy.dispose()
        assert fake_provider.dispose_calls == 1
        assert not strategy.is_initialized

    @pytest.mark.asyncio
    async def test_dispose_without_initialize(self, fake_provider):
        await SemanticStrategy(fake_provider).dispose()
        assert fake_provider.dispose_calls == 0

    @pytest.mark.asyncio
    async def test_no_provider_lifecycle_is_noop(self):
        strategy = SemanticStrategy(None)
        await strategy.initialize()
        await strategy.dispose()
        assert not strategy.is_initialized


class TestLazyProvider:
    """A provider factory is only called when semantic search is used."""

    @pytest.mark.asyncio
    async def test_factory_called_on_first_use(self, embedded_collection):
        created: list[FakeEmbeddingProvider] = []

        def factory() -> FakeEmbeddingProvider:
            provider = FakeEmbeddingProvider()
            created.append(provider)
            return provider

        strategy = SemanticStrategy(provider_factory=factory)
        assert created == []

        await strategy.initialize()
        await strategy.search("read", embedded_collection)
        await strategy.search("read", embedded_collection)

        assert len(created) == 1
        assert strategy.provider is created[0]
        assert created[0].initialize_calls == 1

    @pytest.mark.asyncio
    async def test_factory_failure(self, embedded_collection):
        def factory():
            raise ProviderFailureError("No embedding provider registered for type 'local'")

        strategy = SemanticStrategy(provider_factory=factory)
        with pytest.raises(ProviderFailureError):
            await strategy.initialize()
        with pytest.raises(ProviderFailureError):
            await strategy.search("read", embedded_collection)

    @pytest.mark.asyncio
    async def test_missing_embeddings_checked_before_factory(self, file_collection):
        calls: list[int] = []

        def factory():
            calls.append(1)
            return FakeEmbeddingProvider()

        with pytest.raises(MissingEmbeddingsError):
            await SemanticStrategy(provider_factory=factory).search(
                "read", file_collection
            )
        assert calls == []
