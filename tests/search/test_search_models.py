# tests/search/test_search_models.py
"""Tests for SearchOptions and SearchResult."""

import pytest
from pydantic import ValidationError

from mcp_tool_search.search.models import SearchOptions, SearchResult
from tests.conftest import make_tool


class TestSearchOptions:
    def test_defaults(self):
        options = SearchOptions()
        assert options.mode == "bm25"
        assert options.top_k == 10
        assert options.threshold == 0.0

    def test_alias(self):
        assert SearchOptions(topK=3).top_k == 3

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            SearchOptions(top_k=0)
        with pytest.raises(ValidationError):
            SearchOptions(threshold=1.5)


class TestSearchResult:
    def test_from_indexed(self):
        indexed = make_tool("read_file", "Read a file", server="fs", title="Read")
        result = SearchResult.from_indexed(indexed, 0.8)
        assert result.name == "read_file"
        assert result.tool.server_name == "fs"
        assert result.tool.title == "Read"

    def test_to_dict(self):
        result = SearchResult.from_indexed(make_tool("read_file", "Read"), 1.0)
        assert result.to_dict() == {
            "name": "read_file",
            "serverName": "test-server",
            "title": None,
            "description": "Read",
            "score": 1.0,
        }
