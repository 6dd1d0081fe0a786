# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing the collaborators consumed by the install pipeline."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from .models import Release


@runtime_checkable
class ReleaseSource(Protocol):
    """List the releases of a repository, newest first."""

    def list_releases(self, owner: str, repo: str) -> Sequence[Release]:
        """Return the releases published for ``owner/repo`` in service order."""
        ...


@runtime_checkable
class ToolCacheStore(Protocol):
    """Persist extracted tool directories keyed by tool name and version."""

    def find(self, tool: str, version: str) -> Path | None:
        """Return the cached directory for ``tool``/``version`` or ``None``."""
        ...

    def cache_dir(self, source: Path, tool: str, version: str) -> Path:
        """Store ``source`` under ``tool``/``version`` and return the cached path."""
        ...


@runtime_checkable
class ArchiveFetcher(Protocol):
    """Download and unpack release archives."""

    def download(self, url: str) -> Path:
        """Fetch ``url`` into a local file and return its path."""
        ...

    def extract_tar(self, archive: Path, target_dir_name: str) -> Path:
        """Extract a gzipped tarball into ``target_dir_name`` and return the directory."""
        ...


@runtime_checkable
class PathPublisher(Protocol):
    """Expose a directory on the executable search path of later pipeline steps."""

    def add_path(self, directory: Path) -> None:
        """Prepend ``directory`` to the search path."""
        ...


__all__ = ["ArchiveFetcher", "PathPublisher", "ReleaseSource", "ToolCacheStore"]
