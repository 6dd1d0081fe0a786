# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers that speak the GitHub Actions runner protocol.

Step inputs arrive as ``INPUT_<NAME>`` environment variables, annotations and
debug lines are written to stdout as ``::command::`` workflow commands, and
persistent environment changes are appended to the files the runner exposes
through ``GITHUB_*`` variables.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from .errors import MissingRequiredInputError

INPUT_PREFIX: Final[str] = "INPUT_"
GITHUB_PATH_ENV: Final[str] = "GITHUB_PATH"


def input_env_name(name: str) -> str:
    """Return the environment variable carrying the step input ``name``."""

    return f"{INPUT_PREFIX}{name.replace(' ', '_').upper()}"


def get_input(
    name: str,
    *,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the trimmed value of step input ``name``.

    Args:
        name: Input name as declared by the step.
        required: Raise when the input is missing or blank.
        environ: Environment mapping to read; defaults to ``os.environ``.

    Returns:
        str: Trimmed input value, or an empty string when unset.

    Raises:
        MissingRequiredInputError: If ``required`` and the value is blank.
    """

    env = os.environ if environ is None else environ
    value = env.get(input_env_name(name), "").strip()
    if required and not value:
        raise MissingRequiredInputError(name)
    return value


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_command(command: str, message: str) -> str:
    """Render a workflow command line such as ``::error::message``."""

    return f"::{command}::{_escape_data(message)}"


def issue_command(command: str, message: str) -> None:
    """Write a workflow command to stdout."""

    print(format_command(command, message), flush=True)


def error(message: str) -> None:
    """Emit an ``::error::`` annotation."""

    issue_command("error", message)


def debug(message: str) -> None:
    """Emit a ``::debug::`` line, shown only when step debugging is enabled."""

    issue_command("debug", message)


def append_file_command(path: Path, message: str) -> None:
    """Append ``message`` as a new line to the runner command file at ``path``."""

    with path.open("a", encoding="utf-8") as handle:
        handle.write(f"{message}{os.linesep}")


__all__ = [
    "GITHUB_PATH_ENV",
    "INPUT_PREFIX",
    "append_file_command",
    "debug",
    "error",
    "format_command",
    "get_input",
    "input_env_name",
    "issue_command",
]
