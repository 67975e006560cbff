"""Environment variable names - centralized, type-safe, no magic strings!

All environment variable access should go through this module.
"""

from __future__ import annotations

import os
from enum import Enum


class EnvVar(str, Enum):
    """All environment variable names used by mcp-tool-search."""

    # ================================================================
    # Search Configuration
    # ================================================================
    SEARCH_MODE = "MCP_SEARCH_MODE"
    SEARCH_TOP_K = "MCP_SEARCH_TOP_K"
    SEARCH_THRESHOLD = "MCP_SEARCH_THRESHOLD"
    EMBED_TIMEOUT = "MCP_SEARCH_EMBED_TIMEOUT"

    # ================================================================
    # Diagnostics
    # ================================================================
    GATEWAY_DEBUG = "MCP_GATEWAY_DEBUG"
    LOG_LEVEL = "MCP_SEARCH_LOG_LEVEL"


# ================================================================
# Type-Safe Helper Functions
# ================================================================


def get_env(var: EnvVar, default: str | None = None) -> str | None:
    """Get environment variable value (type-safe).

    Example:
        >>> mode = get_env(EnvVar.SEARCH_MODE, "bm25")
    """
    return os.getenv(var.value, default)


def get_env_int(var: EnvVar, default: int | None = None) -> int | None:
    """Get environment variable as integer, or default if unset or invalid."""
    value = get_env(var)
    if value is None:
        return default

    try:
        return int(value)
    except ValueError:
        return default


def get_env_float(var: EnvVar, default: float | None = None) -> float | None:
    """Get environment variable as float, or default if unset or invalid."""
    value = get_env(var)
    if value is None:
        return default

    try:
        return float(value)
    except ValueError:
        return default


def is_debug_enabled() -> bool:
    """Return True when MCP_GATEWAY_DEBUG is exactly 'true'."""
    return get_env(EnvVar.GATEWAY_DEBUG) == "true"
