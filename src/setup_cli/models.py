# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models shared by the resolution and install stages."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

InstallOutcome = Literal["cache-hit", "downloaded"]


class Release(BaseModel):
    """Published release as returned by the release listing endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    tag_name: str
    prerelease: bool = False

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> Release:
        """Build a release from one entry of the GitHub API response."""

        return cls.model_validate(payload)


@dataclass(frozen=True, slots=True)
class ArchiveLocator:
    """Everything derived from the resolved version and target needed to fetch an archive."""

    full_version: str
    package_name: str
    url: str
    extract_dir_name: str


@dataclass(frozen=True, slots=True)
class InstallResult:
    """Outcome of a single install run."""

    directory: Path
    outcome: InstallOutcome
    locator: ArchiveLocator

    @property
    def cache_hit(self) -> bool:
        return self.outcome == "cache-hit"


__all__ = ["ArchiveLocator", "InstallOutcome", "InstallResult", "Release"]
