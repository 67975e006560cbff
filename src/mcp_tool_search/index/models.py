# mcp_tool_search/index/models.py
"""Document model shared by every search strategy.

Field aliases follow the index file format (camelCase), so a persisted
index validates directly with ``PersistedIndex.model_validate_json``.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, model_validator

from mcp_tool_search.search.tokenizer import build_searchable_text, tokenize


def _empty_object_schema() -> dict[str, Any]:
    return {"type": "object", "properties": {}}


# ──────────────────────────────────────────────────────────────────────────────
# Tools
# ──────────────────────────────────────────────────────────────────────────────
class ToolDefinition(BaseModel):
    """A tool as described by its upstream server. Immutable once loaded."""

    name: str
    title: str | None = None
    description: str | None = None
    input_schema: dict[str, Any] = Field(
        default_factory=_empty_object_schema, alias="inputSchema"
    )

    model_config = {"frozen": True, "populate_by_name": True}


class IndexedTool(BaseModel):
    """A tool plus everything derived from it at index-build time."""

    tool: ToolDefinition
    searchable_text: str = Field(alias="searchableText")
    tokens: list[str] = Field(default_factory=list)
    embedding: list[float] | None = None
    server_name: str = Field(alias="serverName")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def name(self) -> str:
        return self.tool.name

    @classmethod
    def from_tool(
        cls,
        tool: ToolDefinition,
        server_name: str,
        embedding: list[float] | None = None,
    ) -> IndexedTool:
        """Derive searchable text and tokens with the shared tokenizer."""
        text = build_searchable_text(tool.name, tool.title, tool.description)
        return cls(
            tool=tool,
            searchable_text=text,
            tokens=tokenize(text),
            embedding=embedding,
            server_name=server_name,
        )


# ──────────────────────────────────────────────────────────────────────────────
# Corpus statistics
# ──────────────────────────────────────────────────────────────────────────────
class BM25Stats(BaseModel):
    """Corpus statistics consumed by BM25. Never partially updated."""

    avg_doc_length: float = Field(default=0.0, ge=0, alias="avgDocLength")
    document_frequencies: dict[str, int] = Field(
        default_factory=dict, alias="documentFrequencies"
    )
    total_documents: int = Field(default=0, ge=0, alias="totalDocuments")

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def empty(cls) -> BM25Stats:
        """Zero-valued statistics used when no index is available."""
        return cls()

    @classmethod
    def from_token_lists(cls, token_lists: list[list[str]]) -> BM25Stats:
        """Compute statistics for a corpus given each document's tokens."""
        if not token_lists:
            return cls.empty()

        frequencies: Counter[str] = Counter()
        for tokens in token_lists:
            frequencies.update(set(tokens))

        total_length = sum(len(tokens) for tokens in token_lists)
        return cls(
            avg_doc_length=total_length / len(token_lists),
            document_frequencies=dict(frequencies),
            total_documents=len(token_lists),
        )


# ──────────────────────────────────────────────────────────────────────────────
# Persisted index
# ──────────────────────────────────────────────────────────────────────────────
class PersistedIndex(BaseModel):
    """One scope's index as built by the indexer. Read-only after load."""

    version: str = "1.0.0"
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="createdAt"
    )
    embedding_provider: str | None = Field(default=None, alias="embeddingProvider")
    embedding_dimensions: int | None = Field(
        default=None, ge=1, alias="embeddingDimensions"
    )
    tools: list[IndexedTool] = Field(default_factory=list)
    bm25_stats: BM25Stats = Field(default_factory=BM25Stats, alias="bm25Stats")
    has_embeddings: bool = Field(default=False, alias="hasEmbeddings")

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="after")
    def _check_embedding_dimensions(self) -> PersistedIndex:
        if not self.has_embeddings or self.embedding_dimensions is None:
            return self
        for indexed in self.tools:
            if (
                indexed.embedding is not None
                and len(indexed.embedding) != self.embedding_dimensions
            ):
                raise ValueError(
                    f"Tool '{indexed.name}' has an embedding of length "
                    f"{len(indexed.embedding)}, expected {self.embedding_dimensions}"
                )
        return self

    @classmethod
    def build(
        cls,
        tools: list[IndexedTool],
        embedding_provider: str | None = None,
        embedding_dimensions: int | None = None,
    ) -> PersistedIndex:
        """Assemble an index from already-derived tools, computing statistics."""
        return cls(
            embedding_provider=embedding_provider,
            embedding_dimensions=embedding_dimensions,
            tools=list(tools),
            bm25_stats=BM25Stats.from_token_lists([t.tokens for t in tools]),
            has_embeddings=any(t.embedding is not None for t in tools),
        )


# ──────────────────────────────────────────────────────────────────────────────
# Query-ready collection
# ──────────────────────────────────────────────────────────────────────────────
class ToolCollection(BaseModel):
    """The logical document collection a query runs against.

    Produced by scope merge (or from a single index); owns fresh lists and
    never aliases the indexes it came from.
    """

    tools: list[IndexedTool] = Field(default_factory=list)
    stats: BM25Stats = Field(default_factory=BM25Stats)
    has_embeddings: bool = False

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.tools)

    @classmethod
    def from_index(cls, index: PersistedIndex | None) -> ToolCollection:
        """Wrap a single index (or nothing) as a collection."""
        if index is None:
            return cls()
        return cls(
            tools=list(index.tools),
            stats=index.bm25_stats,
            has_embeddings=index.has_embeddings,
        )
