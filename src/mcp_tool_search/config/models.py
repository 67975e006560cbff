"""Pydantic configuration models - immutable, type safe."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from mcp_tool_search.config.defaults import (
    DEFAULT_EMBED_TIMEOUT,
    DEFAULT_SEARCH_MODE,
    DEFAULT_THRESHOLD,
    DEFAULT_TOP_K,
)
from mcp_tool_search.config.enums import EmbeddingProviderType

logger = logging.getLogger(__name__)


class EmbeddingProviderConfig(BaseModel):
    """Embedding provider configuration.

    ``type`` is one of the EmbeddingProviderType values or the name of a
    custom factory registered with the provider registry.
    """

    type: str = EmbeddingProviderType.LOCAL.value
    model: str | None = None
    api_key: str | None = Field(default=None, alias="apiKey", repr=False)
    api_base: str | None = Field(default=None, alias="apiBase")
    dimensions: int | None = Field(default=None, gt=0)
    options: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True}


class SearchConfig(BaseModel):
    """Search configuration loaded from a config file.

    RuntimeConfig wraps this with CLI/env overrides.
    """

    default_search_mode: str = Field(
        default=DEFAULT_SEARCH_MODE, alias="defaultSearchMode"
    )
    default_top_k: int = Field(default=DEFAULT_TOP_K, gt=0, alias="defaultTopK")
    default_threshold: float = Field(
        default=DEFAULT_THRESHOLD, ge=0.0, le=1.0, alias="defaultThreshold"
    )
    embedding_provider: EmbeddingProviderConfig | None = Field(
        default=None, alias="embeddingProvider"
    )
    embed_timeout: float = Field(
        default=DEFAULT_EMBED_TIMEOUT, gt=0, alias="embedTimeout"
    )

    # Config files also carry server definitions; those belong elsewhere
    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @field_validator("default_search_mode")
    @classmethod
    def normalize_mode(cls, v: str) -> str:
        return v.strip().lower()

    @classmethod
    def load_sync(cls, config_path: Path) -> SearchConfig:
        """Load from a JSON file; a missing file yields the defaults."""
        if not config_path.exists():
            logger.debug(f"No config file at {config_path}, using defaults")
            return cls()

        data = json.loads(config_path.read_text(encoding="utf-8"))
        return cls.model_validate(data)

    @classmethod
    async def load_async(cls, config_path: Path) -> SearchConfig:
        """Async load, reading the file off the event loop."""
        return await asyncio.to_thread(cls.load_sync, config_path)


class ConfigOverride(BaseModel):
    """Values given explicitly on the command line (highest priority)."""

    mode: str | None = None
    top_k: int | None = Field(default=None, gt=0)
    threshold: float | None = Field(default=None, ge=0.0, le=1.0)

    model_config = {"frozen": True}
