# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, input assembly)."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from .. import actions
from ..config import ActionInputs, load_inputs
from ..errors import SetupCliError
from ..logging import fail, info, ok, warn


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool

    def info(self, message: str) -> None:
        info(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        ok(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        warn(message, use_emoji=self.use_emoji)

    def fail(self, message: str) -> None:
        """Log a failure and raise the matching ``::error::`` annotation."""

        fail(message, use_emoji=self.use_emoji)
        actions.error(message)


def build_cli_logger(*, emoji: bool) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference."""

    return CLILogger(use_emoji=emoji)


def build_inputs(
    *,
    owner: str | None,
    repo: str | None,
    cli_name: str | None,
    version: str | None,
    package_name_template: str | None,
    token: str | None,
) -> ActionInputs:
    """Assemble validated step inputs, letting CLI flags override ``INPUT_*`` values.

    Raises:
        MissingRequiredInputError: If owner, repo or cli_name is blank.
    """

    return load_inputs(
        overrides={
            "owner": owner,
            "repo": repo,
            "cli_name": cli_name,
            "version": version,
            "package_name_template": package_name_template,
            "token": token,
        },
    )


def exit_on_error(exc: SetupCliError, logger: CLILogger) -> typer.Exit:
    """Report ``exc`` and return the ``typer.Exit`` the caller should raise."""

    logger.fail(str(exc))
    return typer.Exit(code=1)


__all__ = ["CLILogger", "build_cli_logger", "build_inputs", "exit_on_error"]
