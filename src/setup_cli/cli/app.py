# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .install import install_command
from .plan import plan_command

app = typer.Typer(
    help="Install command-line tools published as GitHub release archives.",
    add_completion=False,
    no_args_is_help=True,
)
app.command(name="install")(install_command)
app.command(name="plan")(plan_command)

__all__ = ["app"]
