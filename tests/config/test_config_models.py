# tests/config/test_config_models.py
"""Tests for configuration models and enums."""

import json

import pytest
from pydantic import ValidationError

from mcp_tool_search.config.enums import is_cli_scope, is_index_scope
from mcp_tool_search.config.models import (
    ConfigOverride,
    EmbeddingProviderConfig,
    SearchConfig,
)


class TestScopeGuards:
    def test_index_scope(self):
        assert is_index_scope("project")
        assert is_index_scope("user")
        assert not is_index_scope("all")
        assert not is_index_scope(None)

    def test_cli_scope(self):
        assert is_cli_scope("all")
        assert is_cli_scope("project")
        assert not is_cli_scope("global")


class TestEmbeddingProviderConfig:
    def test_aliases(self):
        config = EmbeddingProviderConfig.model_validate(
            {"type": "openai", "apiKey": "sk-test", "apiBase": "http://localhost"}
        )
        assert config.api_key == "sk-test"
        assert config.api_base == "http://localhost"

    def test_api_key_hidden_from_repr(self):
        config = EmbeddingProviderConfig(type="openai", api_key="sk-very-secret")
        assert "sk-very-secret" not in repr(config)

    def test_dimensions_positive(self):
        with pytest.raises(ValidationError):
            EmbeddingProviderConfig(dimensions=0)


class TestSearchConfig:
    """Tests for SearchConfig."""

    def test_defaults(self):
        config = SearchConfig()
        assert config.default_search_mode == "bm25"
        assert config.default_top_k == 10
        assert config.default_threshold == 0.0
        assert config.embedding_provider is None

    def test_mode_normalized(self):
        assert SearchConfig(default_search_mode=" Hybrid ").default_search_mode == "hybrid"

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            SearchConfig(default_top_k=0)
        with pytest.raises(ValidationError):
            SearchConfig(default_threshold=2.0)

    def test_load_missing_file(self, tmp_path):
        assert SearchConfig.load_sync(tmp_path / "mcp.json") == SearchConfig()

    def test_load_file_ignores_server_entries(self, tmp_path):
        path = tmp_path / "mcp.json"
        path.write_text(
            json.dumps(
                {
                    "mcpServers": {"fs": {"command": "npx"}},
                    "defaultSearchMode": "embedding",
                    "defaultTopK": 5,
                    "embeddingProvider": {"type": "local", "dimensions": 384},
                }
            )
        )
        config = SearchConfig.load_sync(path)
        assert config.default_search_mode == "embedding"
        assert config.default_top_k == 5
        assert config.embedding_provider.dimensions == 384

    @pytest.mark.asyncio
    async def test_load_async(self, tmp_path):
        path = tmp_path / "mcp.json"
        path.write_text(json.dumps({"defaultThreshold": 0.3}))
        config = await SearchConfig.load_async(path)
        assert config.default_threshold == 0.3


class TestConfigOverride:
    def test_defaults_are_none(self):
        override = ConfigOverride()
        assert override.mode is None
        assert override.top_k is None
        assert override.threshold is None

    def test_validation(self):
        with pytest.raises(ValidationError):
            ConfigOverride(top_k=-1)
