# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for archive name templating."""

from __future__ import annotations

from setup_cli.naming import (
    LEGACY_PACKAGE_NAME_TEMPLATE,
    package_name,
    render_template,
    unknown_placeholders,
)


def test_default_template() -> None:
    assert package_name(name="demo", version="1.7.0", os="linux", arch="amd64") == "demo_linux_amd64"


def test_legacy_template_includes_version() -> None:
    rendered = package_name(
        name="demo",
        version="1.7.0",
        os="linux",
        arch="amd64",
        template=LEGACY_PACKAGE_NAME_TEMPLATE,
    )

    assert rendered == "demo_1.7.0_linux_amd64"


def test_repeated_and_spaced_placeholders() -> None:
    assert render_template("{{ name }}-{{name}}.{{os}}", {"name": "gh", "os": "darwin"}) == "gh-gh.darwin"


def test_unknown_placeholder_renders_empty() -> None:
    assert render_template("{{name}}_{{flavour}}_x", {"name": "demo"}) == "demo__x"
    assert unknown_placeholders("{{name}}_{{flavour}}_{{flavour}}_{{libc}}") == ("flavour", "libc")


def test_substituted_values_are_not_rescanned() -> None:
    assert render_template("{{name}}", {"name": "{{os}}", "os": "linux"}) == "{{os}}"


def test_text_without_placeholders_is_untouched() -> None:
    assert render_template("tool-{name}-{{", {"name": "x"}) == "tool-{name}-{{"
