# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for archive download and extraction."""

from __future__ import annotations

import io
import tarfile
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest
import requests

from setup_cli.archive import HttpArchiveFetcher
from setup_cli.errors import ArchiveError


def _tarball(members: dict[str, bytes]) -> bytes:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for name, content in members.items():
            info = tarfile.TarInfo(name)
            info.size = len(content)
            info.mode = 0o755
            archive.addfile(info, io.BytesIO(content))
    return buffer.getvalue()


@dataclass
class _StreamResponse:
    body: bytes
    status_code: int = 200

    def __enter__(self) -> _StreamResponse:
        return self

    def __exit__(self, *exc: object) -> None:
        return None

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Not Found")

    def iter_content(self, chunk_size: int) -> Iterator[bytes]:
        for start in range(0, len(self.body), chunk_size):
            yield self.body[start : start + chunk_size]


@dataclass
class _Session:
    response: _StreamResponse
    calls: list[tuple[str, bool, float]] = field(default_factory=list)

    def get(self, url: str, *, stream: bool, timeout: float) -> _StreamResponse:
        self.calls.append((url, stream, timeout))
        return self.response


def test_download_writes_body_into_temp_dir(tmp_path: Path) -> None:
    body = _tarball({"demo": b"binary"})
    session = _Session(_StreamResponse(body))
    fetcher = HttpArchiveFetcher(temp_dir=tmp_path / "tmp", work_dir=tmp_path, timeout=7, session=session)

    path = fetcher.download("https://github.com/o/r/releases/download/v1.0.0/demo_linux_amd64.tar.gz")

    assert path.parent == tmp_path / "tmp"
    assert path.read_bytes() == body
    assert session.calls == [("https://github.com/o/r/releases/download/v1.0.0/demo_linux_amd64.tar.gz", True, 7)]


def test_download_failure_leaves_no_partial_file(tmp_path: Path) -> None:
    session = _Session(_StreamResponse(b"", status_code=404))
    fetcher = HttpArchiveFetcher(temp_dir=tmp_path / "tmp", work_dir=tmp_path, session=session)

    with pytest.raises(ArchiveError, match="Failed to download"):
        fetcher.download("https://example.invalid/demo.tar.gz")

    assert list((tmp_path / "tmp").iterdir()) == []


def test_extract_tar_into_named_directory(tmp_path: Path) -> None:
    archive = tmp_path / "archive"
    archive.write_bytes(_tarball({"demo": b"binary", "docs/README.md": b"# demo"}))
    fetcher = HttpArchiveFetcher(temp_dir=tmp_path / "tmp", work_dir=tmp_path / "work")

    extracted = fetcher.extract_tar(archive, "demo-1.7.0-linux")

    assert extracted == tmp_path / "work" / "demo-1.7.0-linux"
    assert (extracted / "demo").read_bytes() == b"binary"
    assert (extracted / "docs" / "README.md").read_bytes() == b"# demo"


def test_extract_tar_rejects_path_traversal(tmp_path: Path) -> None:
    archive = tmp_path / "archive"
    archive.write_bytes(_tarball({"../escape": b"nope"}))
    fetcher = HttpArchiveFetcher(temp_dir=tmp_path / "tmp", work_dir=tmp_path / "work")

    with pytest.raises(ArchiveError):
        fetcher.extract_tar(archive, "demo-1.7.0-linux")

    assert not (tmp_path / "work" / "escape").exists()


def test_extract_tar_rejects_non_archives(tmp_path: Path) -> None:
    archive = tmp_path / "archive"
    archive.write_bytes(b"<html>not a tarball</html>")
    fetcher = HttpArchiveFetcher(temp_dir=tmp_path / "tmp", work_dir=tmp_path / "work")

    with pytest.raises(ArchiveError, match="Failed to extract"):
        fetcher.extract_tar(archive, "demo")


def test_extract_tar_clears_leftovers(tmp_path: Path) -> None:
    archive = tmp_path / "archive"
    archive.write_bytes(_tarball({"demo": b"binary"}))
    leftover = tmp_path / "work" / "demo-1.7.0-linux" / "stale"
    leftover.parent.mkdir(parents=True)
    leftover.write_text("old", encoding="utf-8")
    fetcher = HttpArchiveFetcher(temp_dir=tmp_path / "tmp", work_dir=tmp_path / "work")

    extracted = fetcher.extract_tar(archive, "demo-1.7.0-linux")

    assert (extracted / "demo").read_bytes() == b"binary"
    assert not leftover.exists()
