# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runner tool cache compatible with the layout used by hosted runners.

Entries live at ``<root>/<tool>/<version>/<arch>`` and only count as present
once the sibling ``<arch>.complete`` marker exists, so an interrupted copy is
never reported as a cache hit.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Final

from .actions import debug
from .errors import ToolCacheError
from .platforms import HostIdentifiers

COMPLETE_SUFFIX: Final[str] = ".complete"


class ToolCache:
    """Filesystem-backed tool cache rooted at ``root``."""

    def __init__(self, root: Path, *, arch: str | None = None) -> None:
        self.root = root
        self.arch = arch or HostIdentifiers.detect().arch

    def entry_path(self, tool: str, version: str) -> Path:
        """Return the directory an entry for ``tool``/``version`` occupies."""

        if not tool:
            raise ToolCacheError("tool name must not be empty")
        if not version:
            raise ToolCacheError("tool version must not be empty")
        return self.root / tool / version.strip() / self.arch

    @staticmethod
    def _marker(entry: Path) -> Path:
        return entry.with_name(f"{entry.name}{COMPLETE_SUFFIX}")

    def find(self, tool: str, version: str) -> Path | None:
        """Return the cached directory for ``tool``/``version`` when complete."""

        entry = self.entry_path(tool, version)
        if entry.is_dir() and self._marker(entry).is_file():
            debug(f"Found tool in cache {tool} {version} {self.arch}")
            return entry
        debug(f"Tool not found in cache: {tool} {version} {self.arch}")
        return None

    def cache_dir(self, source: Path, tool: str, version: str) -> Path:
        """Copy the contents of ``source`` into the cache and mark the entry complete.

        Args:
            source: Directory holding the extracted tool.
            tool: Tool name used as the first cache key component.
            version: Version string used as the second cache key component.

        Returns:
            Path: Canonical cached directory.

        Raises:
            ToolCacheError: If ``source`` is not a directory or the copy fails.
        """

        if not source.is_dir():
            raise ToolCacheError(f"Cannot cache {tool}: {source} is not a directory")
        entry = self.entry_path(tool, version)
        marker = self._marker(entry)
        debug(f"Caching tool {tool} {version} {self.arch} from {source}")

        try:
            marker.unlink(missing_ok=True)
            if entry.exists():
                shutil.rmtree(entry)
            entry.parent.mkdir(parents=True, exist_ok=True)
            shutil.copytree(source, entry, symlinks=True)
            marker.write_text("", encoding="utf-8")
        except OSError as exc:
            raise ToolCacheError(f"Failed to cache {tool} {version} in {entry}: {exc}") from exc
        return entry


__all__ = ["COMPLETE_SUFFIX", "ToolCache"]
