# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures providing in-memory install collaborators."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from setup_cli.logging import reset_consoles
from setup_cli.installer import InstallServices
from setup_cli.models import Release


@dataclass
class FakeReleaseSource:
    releases: list[Release] = field(default_factory=list)
    calls: list[tuple[str, str]] = field(default_factory=list)

    def list_releases(self, owner: str, repo: str) -> Sequence[Release]:
        self.calls.append((owner, repo))
        return list(self.releases)


@dataclass
class FakeToolCache:
    cached_path: Path = Path("/path/to/extracted/demo-cli")
    entries: dict[tuple[str, str], Path] = field(default_factory=dict)
    find_calls: list[tuple[str, str]] = field(default_factory=list)
    cache_calls: list[tuple[Path, str, str]] = field(default_factory=list)

    def find(self, tool: str, version: str) -> Path | None:
        self.find_calls.append((tool, version))
        return self.entries.get((tool, version))

    def cache_dir(self, source: Path, tool: str, version: str) -> Path:
        self.cache_calls.append((source, tool, version))
        self.entries[(tool, version)] = self.cached_path
        return self.cached_path


@dataclass
class FakeFetcher:
    downloaded_path: Path = Path("./demo-cli-downloaded")
    extracted_path: Path = Path("./demo-cli-extracted-local")
    downloads: list[str] = field(default_factory=list)
    extractions: list[tuple[Path, str]] = field(default_factory=list)

    def download(self, url: str) -> Path:
        self.downloads.append(url)
        return self.downloaded_path

    def extract_tar(self, archive: Path, target_dir_name: str) -> Path:
        self.extractions.append((archive, target_dir_name))
        return self.extracted_path


@dataclass
class FakePublisher:
    paths: list[Path] = field(default_factory=list)

    def add_path(self, directory: Path) -> None:
        self.paths.append(directory)


@pytest.fixture
def release_source() -> FakeReleaseSource:
    return FakeReleaseSource()


@pytest.fixture
def tool_cache() -> FakeToolCache:
    return FakeToolCache()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()


@pytest.fixture
def services(
    release_source: FakeReleaseSource,
    tool_cache: FakeToolCache,
    fetcher: FakeFetcher,
    publisher: FakePublisher,
) -> InstallServices:
    return InstallServices(
        releases=release_source,
        cache=tool_cache,
        fetcher=fetcher,
        publisher=publisher,
    )


@pytest.fixture(autouse=True)
def _isolated_runner_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop runner variables so tests never write to a real runner's files."""

    for name in (
        "GITHUB_PATH",
        "GITHUB_API_URL",
        "RUNNER_TEMP",
        "RUNNER_TOOL_CACHE",
        "INPUT_OWNER",
        "INPUT_REPO",
        "INPUT_CLI_NAME",
        "INPUT_VERSION",
        "INPUT_PACKAGE_NAME_TEMPLATE",
        "INPUT_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_consoles()
