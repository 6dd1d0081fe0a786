# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `setup-cli install` command."""

from __future__ import annotations

from ..config import ActionInputs, RunnerSettings
from ..errors import SetupCliError
from ..installer import InstallServices, run_install
from ..naming import unknown_placeholders
from ..platforms import HostIdentifiers
from .options import (
    CLI_NAME_OPTION,
    EMOJI_OPTION,
    OWNER_OPTION,
    REPO_OPTION,
    TEMPLATE_OPTION,
    TOKEN_OPTION,
    VERSION_OPTION,
)
from .shared import CLILogger, build_cli_logger, build_inputs, exit_on_error


def create_services(inputs: ActionInputs) -> InstallServices:
    """Return runner-backed collaborators for ``inputs``."""

    return InstallServices.from_settings(RunnerSettings.from_environ(), token=inputs.token)


def warn_unknown_placeholders(inputs: ActionInputs, logger: CLILogger) -> None:
    for key in unknown_placeholders(inputs.package_name_template):
        logger.warn(f"Placeholder '{{{{{key}}}}}' in package_name_template is not recognised and renders empty")


def install_command(
    owner: OWNER_OPTION = None,
    repo: REPO_OPTION = None,
    cli_name: CLI_NAME_OPTION = None,
    version: VERSION_OPTION = None,
    package_name_template: TEMPLATE_OPTION = None,
    token: TOKEN_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Install a tool from its GitHub release archive and add it to PATH."""
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
        result = run_install(
            inputs,
            services=create_services(inputs),
            host=HostIdentifiers.detect(),
            announce=logger.info,
        )
    except SetupCliError as exc:
        raise exit_on_error(exc, logger) from exc

    if result.cache_hit:
        logger.info(f"Using cached {inputs.cli_name} from {result.directory}")
    else:
        logger.info(f"Downloaded {result.locator.url}")
    logger.ok(f"Added {result.directory} to PATH")


__all__ = ["create_services", "install_command"]
