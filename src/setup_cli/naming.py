# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render release archive names from ``{{placeholder}}`` templates."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Final

DEFAULT_PACKAGE_NAME_TEMPLATE: Final[str] = "{{name}}_{{os}}_{{arch}}"
LEGACY_PACKAGE_NAME_TEMPLATE: Final[str] = "{{name}}_{{version}}_{{os}}_{{arch}}"
KNOWN_PLACEHOLDERS: Final[frozenset[str]] = frozenset({"name", "version", "os", "arch"})

_PLACEHOLDER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class _PlaceholderValues(dict[str, str]):
    """Mapping that resolves unknown placeholders to an empty string."""

    def __missing__(self, key: str) -> str:
        return ""


def render_template(template: str, values: Mapping[str, str]) -> str:
    """Substitute every ``{{key}}`` token in ``template`` in a single pass.

    Substituted values are never rescanned, and placeholders without a value
    render as the empty string.

    Args:
        template: Template text containing ``{{placeholder}}`` tokens.
        values: Placeholder name to substitution value.

    Returns:
        str: Rendered text.
    """

    lookup = _PlaceholderValues(values)
    return _PLACEHOLDER_PATTERN.sub(lambda match: lookup[match.group(1)], template)


def unknown_placeholders(template: str) -> tuple[str, ...]:
    """Return placeholder names in ``template`` that :func:`package_name` never fills."""

    seen: dict[str, None] = {}
    for match in _PLACEHOLDER_PATTERN.finditer(template):
        key = match.group(1)
        if key not in KNOWN_PLACEHOLDERS:
            seen.setdefault(key, None)
    return tuple(seen)


def package_name(
    *,
    name: str,
    version: str,
    os: str,
    arch: str,
    template: str | None = None,
) -> str:
    """Return the archive base name (without ``.tar.gz``) for a release asset."""

    return render_template(
        template or DEFAULT_PACKAGE_NAME_TEMPLATE,
        {"name": name, "version": version, "os": os, "arch": arch},
    )


__all__ = [
    "DEFAULT_PACKAGE_NAME_TEMPLATE",
    "KNOWN_PLACEHOLDERS",
    "LEGACY_PACKAGE_NAME_TEMPLATE",
    "package_name",
    "render_template",
    "unknown_placeholders",
]
