# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve, download, cache and publish a release-archive command-line tool."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from .archive import TAR_GZ_SUFFIX, HttpArchiveFetcher
from .config import ActionInputs, RunnerSettings
from .github import GitHubReleaseSource
from .interfaces import ArchiveFetcher, PathPublisher, ReleaseSource, ToolCacheStore
from .models import ArchiveLocator, InstallOutcome, InstallResult
from .naming import package_name
from .platforms import HostIdentifiers, TargetDescriptor
from .publisher import GithubPathPublisher
from .tool_cache import ToolCache
from .versioning import coerce_semver, resolve_version

DOWNLOAD_BASE_URL: Final[str] = "https://github.com"

Announce = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class InstallPlan:
    """Resolved version, target and archive locator for one tool."""

    owner: str
    repo: str
    cli_name: str
    version: str
    target: TargetDescriptor
    locator: ArchiveLocator


@dataclass(slots=True)
class InstallServices:
    """Collaborators used by :func:`run_install`."""

    releases: ReleaseSource
    cache: ToolCacheStore
    fetcher: ArchiveFetcher
    publisher: PathPublisher

    @classmethod
    def from_settings(cls, settings: RunnerSettings, *, token: str | None) -> InstallServices:
        """Wire the runner-backed collaborators described by ``settings``."""

        return cls(
            releases=GitHubReleaseSource(token, api_url=settings.api_url, timeout=settings.timeout),
            cache=ToolCache(settings.tool_cache_root),
            fetcher=HttpArchiveFetcher(
                temp_dir=settings.temp_dir,
                work_dir=settings.work_dir,
                timeout=settings.timeout,
            ),
            publisher=GithubPathPublisher(settings.github_path),
        )


def download_url(owner: str, repo: str, version: str, package: str) -> str:
    """Return the release asset URL for ``package`` at tag ``v<version>``."""

    return f"{DOWNLOAD_BASE_URL}/{owner}/{repo}/releases/download/v{version}/{package}{TAR_GZ_SUFFIX}"


def build_locator(
    *,
    owner: str,
    repo: str,
    cli_name: str,
    version: str,
    target: TargetDescriptor,
    template: str | None = None,
) -> ArchiveLocator:
    """Derive the cache key, archive name and download URL for a resolved version."""

    full_version = f"{version}-{target.os}"
    package = package_name(
        name=cli_name,
        version=version,
        os=target.os,
        arch=target.arch,
        template=template,
    )
    return ArchiveLocator(
        full_version=full_version,
        package_name=package,
        url=download_url(owner, repo, version, package),
        extract_dir_name=f"{cli_name}-{full_version}",
    )


def plan_install(
    inputs: ActionInputs,
    *,
    host: HostIdentifiers,
    releases: ReleaseSource,
) -> InstallPlan:
    """Resolve everything needed to install the tool described by ``inputs``.

    The release source is only consulted when ``inputs.version`` is unset.

    Raises:
        NoReleasesFoundError: If no release can be selected.
        InvalidVersionError: If the version cannot be coerced to ``major.minor.patch``.
    """

    raw_version = resolve_version(
        inputs.owner,
        inputs.repo,
        explicit=inputs.version,
        source=releases,
    )
    version = coerce_semver(raw_version)
    target = TargetDescriptor.from_host(host)
    return InstallPlan(
        owner=inputs.owner,
        repo=inputs.repo,
        cli_name=inputs.cli_name,
        version=version,
        target=target,
        locator=build_locator(
            owner=inputs.owner,
            repo=inputs.repo,
            cli_name=inputs.cli_name,
            version=version,
            target=target,
            template=inputs.package_name_template,
        ),
    )


def install_tool(
    plan: InstallPlan,
    *,
    cache: ToolCacheStore,
    fetcher: ArchiveFetcher,
    publisher: PathPublisher,
    announce: Announce | None = None,
) -> InstallResult:
    """Install ``plan`` from the cache or from its release archive and publish it.

    On a cache miss the archive is downloaded, extracted into a directory
    named ``<cli_name>-<full_version>`` and stored in the cache; the cached
    directory is what gets published. Collaborator failures propagate.
    """

    locator = plan.locator
    if announce is not None:
        announce(f"Installing {plan.cli_name} version {locator.full_version}")

    outcome: InstallOutcome
    directory = cache.find(plan.cli_name, locator.full_version)
    if directory:
        outcome = "cache-hit"
    else:
        archive = fetcher.download(locator.url)
        extracted = fetcher.extract_tar(archive, locator.extract_dir_name)
        directory = cache.cache_dir(extracted, plan.cli_name, locator.full_version)
        outcome = "downloaded"

    publisher.add_path(directory)
    return InstallResult(directory=directory, outcome=outcome, locator=locator)


def run_install(
    inputs: ActionInputs,
    *,
    services: InstallServices,
    host: HostIdentifiers | None = None,
    announce: Announce | None = None,
) -> InstallResult:
    """Run the whole pipeline for ``inputs`` and return the published directory."""

    plan = plan_install(inputs, host=host or HostIdentifiers.detect(), releases=services.releases)
    return install_tool(
        plan,
        cache=services.cache,
        fetcher=services.fetcher,
        publisher=services.publisher,
        announce=announce,
    )


__all__ = [
    "DOWNLOAD_BASE_URL",
    "InstallPlan",
    "InstallServices",
    "build_locator",
    "download_url",
    "install_tool",
    "plan_install",
    "run_install",
]
