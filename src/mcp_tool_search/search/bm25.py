# mcp_tool_search/search/bm25.py
"""BM25 lexical ranking over the tokenized corpus.

score(doc) = sum over query terms of
    IDF(t) * tf * (k1 + 1) / (tf + k1 * (1 - b + b * |doc| / avgdl))

IDF(t) = ln(1 + (N - df + 0.5) / (df + 0.5)), which stays finite and
positive for terms the corpus has never seen (df = 0).

Raw scores are divided by the best raw score so the top hit scores 1.0.
Tools that share no term with the query are still returned, scoring 0.0.
"""

from __future__ import annotations

import logging
import math
from collections import Counter

from mcp_tool_search.config.defaults import BM25_B, BM25_K1
from mcp_tool_search.config.enums import SearchMode
from mcp_tool_search.index.models import BM25Stats, IndexedTool, ToolCollection
from mcp_tool_search.search.models import SearchResult
from mcp_tool_search.search.tokenizer import tokenize

logger = logging.getLogger(__name__)


def idf(term: str, stats: BM25Stats) -> float:
    """Inverse document frequency of a term (0 df gives the maximum weight)."""
    total = stats.total_documents
    # df can never exceed N for consistent statistics
    df = min(stats.document_frequencies.get(term, 0), total)
    return math.log(1 + (total - df + 0.5) / (df + 0.5))


def score_document(
    query_terms: list[str],
    tokens: list[str],
    stats: BM25Stats,
    k1: float = BM25_K1,
    b: float = BM25_B,
) -> float:
    """Raw BM25 score of one document for the given query terms."""
    if not tokens:
        return 0.0

    frequencies = Counter(tokens)
    doc_length = len(tokens)
    length_ratio = (
        doc_length / stats.avg_doc_length if stats.avg_doc_length > 0 else 1.0
    )

    score = 0.0
    for term in query_terms:
        tf = frequencies.get(term, 0)
        if tf == 0:
            continue
        numerator = tf * (k1 + 1)
        denominator = tf + k1 * (1 - b + b * length_ratio)
        score += idf(term, stats) * numerator / denominator
    return score


class BM25Strategy:
    """Lexical ranking with the collection's (single-scope) corpus statistics."""

    name = SearchMode.BM25.value

    def __init__(self, k1: float = BM25_K1, b: float = BM25_B) -> None:
        self.k1 = k1
        self.b = b

    async def initialize(self) -> None:
        return None

    async def dispose(self) -> None:
        return None

    async def search(
        self,
        query: str,
        collection: ToolCollection,
        limit: int | None = None,
    ) -> list[SearchResult]:
        return self.rank(query, collection.tools, collection.stats, limit)

    def rank(
        self,
        query: str,
        tools: list[IndexedTool],
        stats: BM25Stats,
        limit: int | None = None,
    ) -> list[SearchResult]:
        query_terms = tokenize(query)
        if not query_terms:
            return []

        logger.debug(f"BM25 query='{query}' -> terms={query_terms}")

        raw = [
            (tool, score_document(query_terms, tool.tokens, stats, self.k1, self.b))
            for tool in tools
        ]
        # Ties are broken on the raw score, before normalization
        raw.sort(key=lambda item: (-item[1], item[0].name))
        if limit is not None:
            raw = raw[:limit]

        best = raw[0][1] if raw else 0.0
        return [
            SearchResult.from_indexed(tool, score / best if best > 0 else 0.0)
            for tool, score in raw
        ]
