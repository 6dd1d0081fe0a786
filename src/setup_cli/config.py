# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Step inputs and runner settings collected once at start-up."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .actions import GITHUB_PATH_ENV, get_input
from .errors import MissingRequiredInputError
from .naming import DEFAULT_PACKAGE_NAME_TEMPLATE

DEFAULT_API_URL: Final[str] = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 60.0
_FALLBACK_ROOT_NAME: Final[str] = "setup-cli"

REQUIRED_INPUTS: Final[tuple[str, ...]] = ("owner", "repo", "cli_name")


class ActionInputs(BaseModel):
    """Configuration values supplied to the step."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    cli_name: str
    version: str | None = None
    package_name_template: str = DEFAULT_PACKAGE_NAME_TEMPLATE
    token: str | None = Field(default=None, repr=False)

    @field_validator("owner", "repo", "cli_name", mode="before")
    @classmethod
    def _strip_required(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("version", "token", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        return value

    @field_validator("package_name_template", mode="before")
    @classmethod
    def _default_template(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_PACKAGE_NAME_TEMPLATE
        return value

    @model_validator(mode="after")
    def _require_identity(self) -> ActionInputs:
        for name in REQUIRED_INPUTS:
            if not getattr(self, name):
                raise MissingRequiredInputError(name)
        return self


INPUT_NAMES: Final[tuple[str, ...]] = (*REQUIRED_INPUTS, "version", "package_name_template", "token")


def load_inputs(
    environ: Mapping[str, str] | None = None,
    *,
    overrides: Mapping[str, str | None] | None = None,
) -> ActionInputs:
    """Collect step inputs from ``INPUT_*`` variables.

    A non-blank entry in ``overrides`` (typically a CLI flag) wins over the
    matching variable. Required inputs are checked before anything else
    happens so that a misconfigured step fails without touching the network.

    Args:
        environ: Environment mapping to read; defaults to ``os.environ``.
        overrides: Values keyed by input name that take precedence.

    Returns:
        ActionInputs: Validated step configuration.

    Raises:
        MissingRequiredInputError: If ``owner``, ``repo`` or ``cli_name`` is blank.
    """

    given = overrides or {}
    values: dict[str, str] = {}
    for name in INPUT_NAMES:
        override = (given.get(name) or "").strip()
        values[name] = override or get_input(name, required=name in REQUIRED_INPUTS, environ=environ)
    return ActionInputs(**values)


class RunnerSettings(BaseModel):
    """Runner-provided locations and HTTP settings used by the collaborators."""

    model_config = ConfigDict(frozen=True)

    tool_cache_root: Path
    temp_dir: Path
    work_dir: Path
    github_path: Path | None = None
    api_url: str = DEFAULT_API_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        work_dir: Path | None = None,
    ) -> RunnerSettings:
        """Build settings from the runner environment variables.

        ``RUNNER_TOOL_CACHE`` and ``RUNNER_TEMP`` fall back to directories under
        the system temp dir so the command also works outside a runner.
        """

        env = os.environ if environ is None else environ
        fallback = Path(tempfile.gettempdir()) / _FALLBACK_ROOT_NAME
        github_path = env.get(GITHUB_PATH_ENV, "").strip()
        return cls(
            tool_cache_root=Path(env.get("RUNNER_TOOL_CACHE") or fallback / "tool-cache"),
            temp_dir=Path(env.get("RUNNER_TEMP") or fallback / "tmp"),
            work_dir=work_dir or Path.cwd(),
            github_path=Path(github_path) if github_path else None,
            api_url=(env.get("GITHUB_API_URL") or DEFAULT_API_URL).rstrip("/"),
        )


__all__ = [
    "DEFAULT_API_URL",
    "INPUT_NAMES",
    "REQUIRED_INPUTS",
    "ActionInputs",
    "RunnerSettings",
    "load_inputs",
]
