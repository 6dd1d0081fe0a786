# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve and normalise the version of the tool to install."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final

from packaging.version import InvalidVersion, Version

from .errors import InvalidVersionError, NoReleasesFoundError, NoStableReleaseFoundError
from .interfaces import ReleaseSource
from .models import Release

# Up to three numeric components, each at most 16 digits, not embedded in a longer number.
COERCE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?<!\d)(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?!\d)",
)
MAX_COMPONENT: Final[int] = 2**53 - 1


def strip_tag_prefix(tag_name: str) -> str:
    """Drop a single leading ``v`` from a release tag."""

    return tag_name[1:] if tag_name.startswith("v") else tag_name


def select_stable_release(releases: Sequence[Release], *, owner: str, repo: str) -> str:
    """Return the version of the first non-prerelease entry in ``releases``.

    Args:
        releases: Releases in the order the listing service returned them.
        owner: Repository owner used in error messages.
        repo: Repository name used in error messages.

    Returns:
        str: Tag name of the selected release without its ``v`` prefix.

    Raises:
        NoReleasesFoundError: If ``releases`` is empty.
        NoStableReleaseFoundError: If every entry is a prerelease or the
            selected tag is empty.
    """

    if not releases:
        raise NoReleasesFoundError(owner, repo)
    stable = next((release for release in releases if not release.prerelease), None)
    version = strip_tag_prefix(stable.tag_name) if stable is not None else ""
    if not version:
        raise NoStableReleaseFoundError(owner, repo)
    return version


def resolve_version(
    owner: str,
    repo: str,
    *,
    explicit: str | None,
    source: ReleaseSource,
) -> str:
    """Return the raw version to install.

    An explicit version is returned untouched and the release source is not
    consulted; otherwise the latest stable release is looked up once.
    """

    if explicit:
        return explicit
    return select_stable_release(source.list_releases(owner, repo), owner=owner, repo=repo)


def coerce_semver(raw: str) -> str:
    """Coerce ``raw`` into a strict ``major.minor.patch`` version string.

    The first numeric run of up to three components is taken, missing minor
    and patch parts default to zero and anything after the patch component
    (pre-release or build identifiers included) is dropped, so ``1.7``
    becomes ``1.7.0`` and ``1.8.0-beta2`` becomes ``1.8.0``.

    Args:
        raw: Version string from the step input or a release tag.

    Returns:
        str: Normalised semantic version.

    Raises:
        InvalidVersionError: If ``raw`` holds no usable numeric component.
    """

    match = COERCE_PATTERN.search(raw)
    if match is None:
        raise InvalidVersionError(raw)
    parts = tuple(int(group) if group is not None else 0 for group in match.groups())
    if any(part > MAX_COMPONENT for part in parts):
        raise InvalidVersionError(raw)
    candidate = ".".join(str(part) for part in parts)
    try:
        Version(candidate)
    except InvalidVersion as exc:  # pragma: no cover - digits always parse
        raise InvalidVersionError(raw) from exc
    return candidate


__all__ = [
    "coerce_semver",
    "resolve_version",
    "select_stable_release",
    "strip_tag_prefix",
]
