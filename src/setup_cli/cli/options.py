# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer option declarations shared by the install and plan commands.

Flags take precedence over the ``INPUT_*`` variables the runner sets for
each step input; see :func:`setup_cli.config.load_inputs`.
"""

from __future__ import annotations

from typing import Annotated

import typer

from ..naming import DEFAULT_PACKAGE_NAME_TEMPLATE

OWNER_OPTION = Annotated[
    str | None,
    typer.Option("--owner", help="Repository owner or organisation."),
]
REPO_OPTION = Annotated[
    str | None,
    typer.Option("--repo", help="Repository publishing the releases."),
]
CLI_NAME_OPTION = Annotated[
    str | None,
    typer.Option(
        "--cli-name",
        help="Tool name used in archive names and as the cache key.",
    ),
]
VERSION_OPTION = Annotated[
    str | None,
    typer.Option(
        "--version",
        help="Version to install; the latest stable release is used when omitted.",
    ),
]
TEMPLATE_OPTION = Annotated[
    str | None,
    typer.Option(
        "--package-name-template",
        help=f"Archive name template (default: {DEFAULT_PACKAGE_NAME_TEMPLATE}).",
    ),
]
TOKEN_OPTION = Annotated[
    str | None,
    typer.Option(
        "--token",
        help="Token used to list releases.",
        show_default=False,
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output."),
]

__all__ = [
    "CLI_NAME_OPTION",
    "EMOJI_OPTION",
    "OWNER_OPTION",
    "REPO_OPTION",
    "TEMPLATE_OPTION",
    "TOKEN_OPTION",
    "VERSION_OPTION",
]
