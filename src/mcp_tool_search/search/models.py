# mcp_tool_search/search/models.py
"""Search request and result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mcp_tool_search.config.defaults import (
    DEFAULT_SEARCH_MODE,
    DEFAULT_THRESHOLD,
    DEFAULT_TOP_K,
)
from mcp_tool_search.index.models import IndexedTool


class SearchOptions(BaseModel):
    """Per-query options supplied by the caller."""

    mode: str = DEFAULT_SEARCH_MODE
    top_k: int = Field(default=DEFAULT_TOP_K, gt=0, alias="topK")
    threshold: float = Field(default=DEFAULT_THRESHOLD, ge=0.0, le=1.0)

    model_config = {"frozen": True, "populate_by_name": True}


class ToolReference(BaseModel):
    """Points at an IndexedTool by name and owning server."""

    name: str
    server_name: str = Field(alias="serverName")
    title: str | None = None
    description: str | None = None

    model_config = {"frozen": True, "populate_by_name": True}


class SearchResult(BaseModel):
    """One ranked hit. Produced fresh per query, never persisted."""

    tool: ToolReference
    score: float

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        return self.tool.name

    @classmethod
    def from_indexed(cls, indexed: IndexedTool, score: float) -> SearchResult:
        return cls(
            tool=ToolReference(
                name=indexed.tool.name,
                server_name=indexed.server_name,
                title=indexed.tool.title,
                description=indexed.tool.description,
            ),
            score=score,
        )

    def to_dict(self) -> dict[str, object]:
        """Flat dict used by the CLI --json output."""
        return {
            "name": self.tool.name,
            "serverName": self.tool.server_name,
            "title": self.tool.title,
            "description": self.tool.description,
            "score": self.score,
        }
