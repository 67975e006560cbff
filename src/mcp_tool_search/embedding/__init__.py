"""Embedding provider contract and registry."""

from mcp_tool_search.embedding.provider import EmbeddingProvider
from mcp_tool_search.embedding.registry import EmbeddingProviderRegistry, ProviderFactory

__all__ = [
    "EmbeddingProvider",
    "EmbeddingProviderRegistry",
    "ProviderFactory",
]
