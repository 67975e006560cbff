# tests/config/test_env_vars.py
"""Tests for environment variable helpers."""

import pytest

from mcp_tool_search.config.env_vars import (
    EnvVar,
    get_env,
    get_env_float,
    get_env_int,
    is_debug_enabled,
)


class TestGetEnv:
    def test_unset_returns_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(EnvVar.SEARCH_MODE.value, raising=False)
        assert get_env(EnvVar.SEARCH_MODE) is None
        assert get_env(EnvVar.SEARCH_MODE, "bm25") == "bm25"

    def test_set(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_SEARCH_MODE", "hybrid")
        assert get_env(EnvVar.SEARCH_MODE) == "hybrid"


class TestTypedGetters:
    """Tests for int/float conversion."""

    def test_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_SEARCH_TOP_K", "7")
        assert get_env_int(EnvVar.SEARCH_TOP_K) == 7

    def test_int_invalid_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_SEARCH_TOP_K", "seven")
        assert get_env_int(EnvVar.SEARCH_TOP_K, 10) == 10

    def test_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_SEARCH_THRESHOLD", "0.25")
        assert get_env_float(EnvVar.SEARCH_THRESHOLD) == 0.25

    def test_float_invalid_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_SEARCH_THRESHOLD", "high")
        assert get_env_float(EnvVar.SEARCH_THRESHOLD) is None


class TestDebugFlag:
    def test_exact_true_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_GATEWAY_DEBUG", "true")
        assert is_debug_enabled()
        monkeypatch.setenv("MCP_GATEWAY_DEBUG", "1")
        assert not is_debug_enabled()
        monkeypatch.delenv("MCP_GATEWAY_DEBUG")
        assert not is_debug_enabled()
