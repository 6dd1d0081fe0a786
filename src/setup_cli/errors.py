# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while resolving and installing a tool."""

from __future__ import annotations


class SetupCliError(RuntimeError):
    """Base class for every fatal error raised by the install pipeline."""


class MissingRequiredInputError(SetupCliError):
    """Raised when a required step input is absent or blank."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Input required and not supplied: {name}")
        self.name = name


class NoReleasesFoundError(SetupCliError):
    """Raised when the repository publishes no releases at all."""

    def __init__(self, owner: str, repo: str, *, message: str | None = None) -> None:
        super().__init__(message or f"No releases found in {owner}/{repo}")
        self.owner = owner
        self.repo = repo


class NoStableReleaseFoundError(NoReleasesFoundError):
    """Raised when every published release is flagged as a prerelease."""

    def __init__(self, owner: str, repo: str) -> None:
        super().__init__(
            owner,
            repo,
            message=f"No releases (excluding prereleases) found in {owner}/{repo}",
        )


class InvalidVersionError(SetupCliError):
    """Raised when a version string cannot be coerced into ``major.minor.patch``."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid version provided: '{raw}'")
        self.raw = raw


class ReleaseLookupError(SetupCliError):
    """Raised when the release listing request fails or returns malformed data."""


class ArchiveError(SetupCliError):
    """Raised when an archive cannot be downloaded or extracted."""


class ToolCacheError(SetupCliError):
    """Raised when the tool cache cannot be read from or written to."""


class PathPublishError(SetupCliError):
    """Raised when a directory cannot be added to the search path of later steps."""


__all__ = [
    "ArchiveError",
    "InvalidVersionError",
    "MissingRequiredInputError",
    "NoReleasesFoundError",
    "NoStableReleaseFoundError",
    "PathPublishError",
    "ReleaseLookupError",
    "SetupCliError",
    "ToolCacheError",
]
