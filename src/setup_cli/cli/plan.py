# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `setup-cli plan` command."""

from __future__ import annotations

import typer

from ..config import RunnerSettings
from ..errors import SetupCliError
from ..github import GitHubReleaseSource
from ..installer import plan_install
from ..platforms import HostIdentifiers
from .install import warn_unknown_placeholders
from .options import (
    CLI_NAME_OPTION,
    EMOJI_OPTION,
    OWNER_OPTION,
    REPO_OPTION,
    TEMPLATE_OPTION,
    TOKEN_OPTION,
    VERSION_OPTION,
)
from .shared import build_cli_logger, build_inputs, exit_on_error


def plan_command(
    owner: OWNER_OPTION = None,
    repo: REPO_OPTION = None,
    cli_name: CLI_NAME_OPTION = None,
    version: VERSION_OPTION = None,
    package_name_template: TEMPLATE_OPTION = None,
    token: TOKEN_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Show the version, archive and URL that `install` would use, without installing."""
    logger = build_cli_logger(emoji=emoji)
    try:
        inputs = build_inputs(
            owner=owner,
            repo=repo,
            cli_name=cli_name,
            version=version,
            package_name_template=package_name_template,
            token=token,
        )
        warn_unknown_placeholders(inputs, logger)
        settings = RunnerSettings.from_environ()
        plan = plan_install(
            inputs,
            host=HostIdentifiers.detect(),
            releases=GitHubReleaseSource(inputs.token, api_url=settings.api_url, timeout=settings.timeout),
        )
    except SetupCliError as exc:
        raise exit_on_error(exc, logger) from exc

    locator = plan.locator
    typer.echo(f"version: {plan.version}")
    typer.echo(f"target: {plan.target.os}/{plan.target.arch}")
    typer.echo(f"cache key: {plan.cli_name} {locator.full_version}")
    typer.echo(f"package: {locator.package_name}")
    typer.echo(f"url: {locator.url}")


__all__ = ["plan_command"]
