# mcp_tool_search/config/fingerprint.py
"""Configuration file fingerprints, used to detect when an index is stale.

An index records the fingerprints of the configs it was built from; if a
fingerprint changes the index should be regenerated.
"""

from __future__ import annotations

import hashlib
import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from pydantic import BaseModel

from mcp_tool_search.config.defaults import (
    CONFIG_DIRNAME,
    LOCAL_CONFIG_FILENAME,
    PROJECT_CONFIG_FILENAME,
)
from mcp_tool_search.config.enums import ConfigScope

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "mcp-tool-search"


class ConfigFingerprint(BaseModel):
    """Content hash and modification time of one config file."""

    exists: bool
    hash: str | None = None
    mtime: float | None = None

    model_config = {"frozen": True}

    def matches(self, other: ConfigFingerprint) -> bool:
        """Same existence and content (mtime alone does not invalidate)."""
        return self.exists == other.exists and self.hash == other.hash


class ConfigFingerprints(BaseModel):
    """Fingerprints for every config scope."""

    local: ConfigFingerprint
    project: ConfigFingerprint
    user: ConfigFingerprint

    model_config = {"frozen": True}

    def matches(self, other: ConfigFingerprints) -> bool:
        return (
            self.local.matches(other.local)
            and self.project.matches(other.project)
            and self.user.matches(other.user)
        )


def get_config_path(
    scope: ConfigScope,
    cwd: Path | None = None,
    home: Path | None = None,
) -> Path:
    """Config file path for a scope (project and local live under cwd, user under home)."""
    if scope is ConfigScope.USER:
        return (home or Path.home()) / CONFIG_DIRNAME / PROJECT_CONFIG_FILENAME
    base = cwd or Path.cwd()
    if scope is ConfigScope.PROJECT:
        return base / CONFIG_DIRNAME / PROJECT_CONFIG_FILENAME
    return base / CONFIG_DIRNAME / LOCAL_CONFIG_FILENAME


def create_config_fingerprint(path: Path) -> ConfigFingerprint:
    """Fingerprint a file; missing or unreadable files report exists=False."""
    if not path.exists():
        return ConfigFingerprint(exists=False)

    try:
        content = path.read_bytes()
        mtime_ms = path.stat().st_mtime * 1000
    except OSError as e:
        logger.debug(f"Could not fingerprint {path}: {e}")
        return ConfigFingerprint(exists=False)

    return ConfigFingerprint(
        exists=True,
        hash=hashlib.sha256(content).hexdigest(),
        mtime=mtime_ms,
    )


def create_all_config_fingerprints(
    cwd: Path | None = None,
    home: Path | None = None,
) -> ConfigFingerprints:
    """Fingerprint the local, project and user config files."""
    return ConfigFingerprints(
        local=create_config_fingerprint(get_config_path(ConfigScope.LOCAL, cwd, home)),
        project=create_config_fingerprint(
            get_config_path(ConfigScope.PROJECT, cwd, home)
        ),
        user=create_config_fingerprint(get_config_path(ConfigScope.USER, cwd, home)),
    )


def get_package_version() -> str:
    """Installed package version, or 'unknown' when running from a source tree."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "unknown"
