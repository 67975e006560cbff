"""Runtime configuration resolver - type safe, no magic strings."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from pydantic import BaseModel

from mcp_tool_search.config.enums import ConfigSource
from mcp_tool_search.config.env_vars import (
    EnvVar,
    get_env,
    get_env_float,
    get_env_int,
)
from mcp_tool_search.config.models import ConfigOverride, SearchConfig
from mcp_tool_search.search.models import SearchOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResolvedValue(BaseModel, Generic[T]):
    """A configuration value with its source for debugging."""

    value: T
    source: ConfigSource

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class RuntimeConfig:
    """Resolves search options with 4-tier priority.

    Priority (highest to lowest):
    1. CLI overrides (ConfigOverride)
    2. Environment variables
    3. File config (SearchConfig)
    4. Defaults
    """

    def __init__(
        self,
        file_config: SearchConfig | None = None,
        cli_overrides: ConfigOverride | None = None,
    ):
        self._file_config = file_config or SearchConfig()
        self._cli_overrides = cli_overrides or ConfigOverride()

    @property
    def file_config(self) -> SearchConfig:
        return self._file_config

    def _file_source(self, field: str) -> ConfigSource:
        if field in self._file_config.model_fields_set:
            return ConfigSource.FILE
        return ConfigSource.DEFAULT

    def resolve_mode(self) -> ResolvedValue[str]:
        if self._cli_overrides.mode is not None:
            return ResolvedValue(value=self._cli_overrides.mode, source=ConfigSource.CLI)

        env_value = get_env(EnvVar.SEARCH_MODE)
        if env_value:
            logger.debug(f"Search mode from ENV: {env_value}")
            return ResolvedValue(value=env_value.strip().lower(), source=ConfigSource.ENV)

        return ResolvedValue(
            value=self._file_config.default_search_mode,
            source=self._file_source("default_search_mode"),
        )

    def resolve_top_k(self) -> ResolvedValue[int]:
        if self._cli_overrides.top_k is not None:
            return ResolvedValue(value=self._cli_overrides.top_k, source=ConfigSource.CLI)

        env_value = get_env_int(EnvVar.SEARCH_TOP_K)
        if env_value is not None and env_value > 0:
            logger.debug(f"Top-k from ENV: {env_value}")
            return ResolvedValue(value=env_value, source=ConfigSource.ENV)

        return ResolvedValue(
            value=self._file_config.default_top_k,
            source=self._file_source("default_top_k"),
        )

    def resolve_threshold(self) -> ResolvedValue[float]:
        if self._cli_overrides.threshold is not None:
            return ResolvedValue(
                value=self._cli_overrides.threshold, source=ConfigSource.CLI
            )

        env_value = get_env_float(EnvVar.SEARCH_THRESHOLD)
        if env_value is not None and 0.0 <= env_value <= 1.0:
            logger.debug(f"Threshold from ENV: {env_value}")
            return ResolvedValue(value=env_value, source=ConfigSource.ENV)

        return ResolvedValue(
            value=self._file_config.default_threshold,
            source=self._file_source("default_threshold"),
        )

    def resolve_embed_timeout(self) -> ResolvedValue[float]:
        env_value = get_env_float(EnvVar.EMBED_TIMEOUT)
        if env_value is not None and env_value > 0:
            return ResolvedValue(value=env_value, source=ConfigSource.ENV)

        return ResolvedValue(
            value=self._file_config.embed_timeout,
            source=self._file_source("embed_timeout"),
        )

    def get_search_options(self) -> SearchOptions:
        """Resolved options for one query."""
        return SearchOptions(
            mode=self.resolve_mode().value,
            top_k=self.resolve_top_k().value,
            threshold=self.resolve_threshold().value,
        )
