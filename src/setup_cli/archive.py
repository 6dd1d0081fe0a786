# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Download release archives over HTTP and unpack ``.tar.gz`` payloads."""

from __future__ import annotations

import shutil
import tarfile
import uuid
from pathlib import Path
from typing import Final

import requests

from .actions import debug
from .config import DEFAULT_TIMEOUT_SECONDS
from .errors import ArchiveError

TAR_GZ_SUFFIX: Final[str] = ".tar.gz"
_CHUNK_SIZE: Final[int] = 64 * 1024


class HttpArchiveFetcher:
    """Fetch archives into ``temp_dir`` and extract them below ``work_dir``."""

    def __init__(
        self,
        *,
        temp_dir: Path,
        work_dir: Path,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._temp_dir = temp_dir
        self._work_dir = work_dir
        self._timeout = timeout
        self._session = session or requests.Session()

    def download(self, url: str) -> Path:
        """Stream ``url`` into a uniquely named file under the temp directory.

        Raises:
            ArchiveError: If the request fails; partial files are removed.
        """

        self._temp_dir.mkdir(parents=True, exist_ok=True)
        destination = self._temp_dir / uuid.uuid4().hex
        debug(f"Downloading {url}")
        debug(f"Destination {destination}")
        try:
            with self._session.get(url, stream=True, timeout=self._timeout) as response:
                response.raise_for_status()
                with destination.open("wb") as handle:
                    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                        if chunk:
                            handle.write(chunk)
        except (requests.RequestException, OSError) as exc:
            destination.unlink(missing_ok=True)
            raise ArchiveError(f"Failed to download {url}: {exc}") from exc
        return destination

    def extract_tar(self, archive: Path, target_dir_name: str) -> Path:
        """Extract the gzipped tarball ``archive`` into ``work_dir/target_dir_name``.

        Any leftovers from an earlier run are removed first. Members are
        extracted with the ``data`` filter so nothing lands outside the target
        directory.

        Raises:
            ArchiveError: If the file is not a readable gzipped tarball.
        """

        destination = self._work_dir / target_dir_name
        debug(f"Extracting {archive} into {destination}")
        try:
            if destination.exists():
                shutil.rmtree(destination)
            destination.mkdir(parents=True)
            with tarfile.open(archive, "r:gz") as bundle:
                bundle.extractall(destination, filter="data")
        except (tarfile.TarError, OSError) as exc:
            raise ArchiveError(f"Failed to extract {archive}: {exc}") from exc
        return destination


__all__ = ["TAR_GZ_SUFFIX", "HttpArchiveFetcher"]
