# mcp_tool_search/index/scope.py
"""Index scopes: where each scope's index lives and how it is loaded.

- project: {cwd}/.please/mcp/index.json
- user:    ~/.please/mcp/index.json
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from mcp_tool_search.config.defaults import CONFIG_DIRNAME, INDEX_FILENAME, INDEX_SUBDIR
from mcp_tool_search.config.enums import CliScope, IndexScope
from mcp_tool_search.errors import IndexLoadError
from mcp_tool_search.index.merge import merge_collection
from mcp_tool_search.index.models import PersistedIndex, ToolCollection

logger = logging.getLogger(__name__)


def get_index_path(
    scope: IndexScope,
    cwd: Path | None = None,
    home: Path | None = None,
) -> Path:
    """Return the index file path for a scope."""
    if scope is IndexScope.PROJECT:
        base = cwd or Path.cwd()
    else:
        base = home or Path.home()
    return base / CONFIG_DIRNAME / INDEX_SUBDIR / INDEX_FILENAME


def load_index(path: Path) -> PersistedIndex | None:
    """Load an index file; a missing file is not an error and yields None."""
    if not path.exists():
        logger.debug(f"No index at {path}")
        return None

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise IndexLoadError(str(path), str(exc)) from exc

    try:
        index = PersistedIndex.model_validate_json(raw)
    except ValidationError as exc:
        raise IndexLoadError(str(path), f"{exc.error_count()} validation error(s)") from exc

    logger.debug(
        f"Loaded index {path}: {len(index.tools)} tools, embeddings={index.has_embeddings}"
    )
    return index


def load_scoped_indexes(
    scope: CliScope = CliScope.ALL,
    cwd: Path | None = None,
    home: Path | None = None,
) -> tuple[PersistedIndex | None, PersistedIndex | None]:
    """Load (project, user) indexes for the requested scope; unrequested ones are None."""
    project = None
    user = None
    if scope in (CliScope.PROJECT, CliScope.ALL):
        project = load_index(get_index_path(IndexScope.PROJECT, cwd, home))
    if scope in (CliScope.USER, CliScope.ALL):
        user = load_index(get_index_path(IndexScope.USER, cwd, home))
    return project, user


def load_collection(
    scope: CliScope = CliScope.ALL,
    cwd: Path | None = None,
    home: Path | None = None,
) -> ToolCollection:
    """Load the scope(s) and merge them into one query-ready collection."""
    project, user = load_scoped_indexes(scope, cwd, home)
    return merge_collection(project, user)
