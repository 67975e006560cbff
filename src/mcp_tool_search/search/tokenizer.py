# mcp_tool_search/search/tokenizer.py
"""Text normalization shared by index building and querying.

The same function must tokenize documents and queries; any divergence
silently corrupts every lexical score.

Handles:
- snake_case: read_file -> [read, file]
- camelCase: readFile -> [read, file]
- kebab-case: read-file -> [read, file]
- dot.notation: fs.read -> [fs, read]
- punctuation and whitespace of any kind
"""

from __future__ import annotations

import re

from mcp_tool_search.config.defaults import MIN_TOKEN_LENGTH

# lowercase/digit followed by uppercase marks a camelCase boundary
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
# underscores count as separators even though \w includes them
_SEPARATORS = re.compile(r"[\W_]+")


def tokenize(text: str | None) -> list[str]:
    """Tokenize text into an ordered list of normalized terms.

    Pure and deterministic. Terms shorter than MIN_TOKEN_LENGTH are dropped.
    """
    if not text:
        return []

    text = _CAMEL_BOUNDARY.sub(r"\1 \2", text).lower()
    return [t for t in _SEPARATORS.split(text) if len(t) >= MIN_TOKEN_LENGTH]


def build_searchable_text(
    name: str, title: str | None = None, description: str | None = None
) -> str:
    """Concatenate name, title and description into the text that gets indexed."""
    parts = (name, title, description)
    return " ".join(p.strip() for p in parts if p and p.strip())
