"""Default configuration values - no magic numbers.

All default values should be defined here, not hardcoded in the code.
"""

from __future__ import annotations


# ================================================================
# Search Defaults
# ================================================================

DEFAULT_SEARCH_MODE = "bm25"
"""Default search mode when the caller does not choose one."""

DEFAULT_TOP_K = 10
"""Default maximum number of results returned by a search."""

DEFAULT_THRESHOLD = 0.0
"""Default minimum score; 0 keeps every ranked result."""


# ================================================================
# Ranking Constants
# ================================================================

BM25_K1 = 1.2
"""BM25 term-frequency saturation."""

BM25_B = 0.75
"""BM25 document-length normalization."""

RRF_K = 60
"""Reciprocal Rank Fusion damping constant."""

HYBRID_OVERFETCH_FACTOR = 3
"""Each hybrid sub-search is asked for this many times top_k candidates."""

MIN_TOKEN_LENGTH = 2
"""Tokens shorter than this are dropped by the tokenizer."""


# ================================================================
# Embedding Defaults
# ================================================================

DEFAULT_EMBED_TIMEOUT = 30.0
"""Default timeout (seconds) for a single embedding provider call."""


# ================================================================
# Path Defaults
# ================================================================

CONFIG_DIRNAME = ".please"
"""Directory holding configuration and indexes (project root or home)."""

INDEX_SUBDIR = "mcp"
"""Sub-directory of CONFIG_DIRNAME that holds the index file."""

INDEX_FILENAME = "index.json"
"""Index file name."""

PROJECT_CONFIG_FILENAME = "mcp.json"
"""Shared configuration file (project and user scope)."""

LOCAL_CONFIG_FILENAME = "mcp.local.json"
"""Per-checkout configuration file (local scope)."""


# ================================================================
# Logging Defaults
# ================================================================

DEFAULT_LOG_LEVEL = "WARNING"
"""Default log level."""

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024
"""Rotate the log file after 10 MiB."""

DEFAULT_LOG_BACKUP_COUNT = 3
"""Number of rotated log files kept."""


# ================================================================
# Application Constants
# ================================================================

NAMESPACE = "mcp_tool_search"
"""Application logger namespace."""
