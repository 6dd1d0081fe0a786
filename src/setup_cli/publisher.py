# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Publish installed tool directories on the pipeline's ``PATH``."""

from __future__ import annotations

import os
from collections.abc import MutableMapping
from pathlib import Path

from .actions import append_file_command, issue_command
from .errors import PathPublishError


class GithubPathPublisher:
    """Add directories to ``PATH`` for this process and for later workflow steps.

    When the runner provides a ``GITHUB_PATH`` file the directory is appended
    to it; older runners receive the ``::add-path::`` workflow command instead.
    """

    def __init__(
        self,
        github_path: Path | None,
        *,
        environ: MutableMapping[str, str] | None = None,
    ) -> None:
        self._github_path = github_path
        self._environ = os.environ if environ is None else environ

    def add_path(self, directory: Path) -> None:
        """Prepend ``directory`` to ``PATH``.

        Raises:
            PathPublishError: If the ``GITHUB_PATH`` file cannot be written.
        """

        entry = str(directory)
        if self._github_path is not None:
            try:
                append_file_command(self._github_path, entry)
            except OSError as exc:
                raise PathPublishError(f"Failed to add {entry} to {self._github_path}: {exc}") from exc
        else:
            issue_command("add-path", entry)
        current = self._environ.get("PATH", "")
        self._environ["PATH"] = f"{entry}{os.pathsep}{current}" if current else entry


__all__ = ["GithubPathPublisher"]
