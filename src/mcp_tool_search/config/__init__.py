"""
Configuration management for mcp-tool-search.

Pydantic-based, immutable configuration. RuntimeConfig lives in
``mcp_tool_search.config.runtime`` (it depends on the search models).
"""

from mcp_tool_search.config.enums import (
    CliScope,
    ConfigScope,
    ConfigSource,
    EmbeddingProviderType,
    IndexScope,
    SearchMode,
    is_cli_scope,
    is_index_scope,
)
from mcp_tool_search.config.env_vars import EnvVar, get_env, is_debug_enabled
from mcp_tool_search.config.models import (
    ConfigOverride,
    EmbeddingProviderConfig,
    SearchConfig,
)
from mcp_tool_search.config.logging import setup_logging

__all__ = [
    # Models
    "SearchConfig",
    "EmbeddingProviderConfig",
    "ConfigOverride",
    # Enums
    "SearchMode",
    "IndexScope",
    "CliScope",
    "ConfigScope",
    "ConfigSource",
    "EmbeddingProviderType",
    "is_index_scope",
    "is_cli_scope",
    # Environment
    "EnvVar",
    "get_env",
    "is_debug_enabled",
    # Logging
    "setup_logging",
]
