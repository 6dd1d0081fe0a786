# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for host platform and architecture mapping."""

from __future__ import annotations

import pytest

from setup_cli.platforms import HostIdentifiers, TargetDescriptor, map_arch, map_platform, normalize_machine


@pytest.mark.parametrize(
    ("platform", "expected"),
    [
        ("win32", "windows"),
        ("darwin", "darwin"),
        ("linux", "linux"),
        ("freebsd", "linux"),
        ("default", "linux"),
    ],
)
def test_map_platform_falls_back_to_linux(platform: str, expected: str) -> None:
    assert map_platform(platform) == expected


@pytest.mark.parametrize(("arch", "expected"), [("x64", "amd64"), ("arm64", "arm64"), ("amd64", "amd64")])
def test_map_arch(arch: str, expected: str) -> None:
    assert map_arch(arch) == expected


@pytest.mark.parametrize(
    ("machine", "expected"),
    [("x86_64", "x64"), ("AMD64", "x64"), ("aarch64", "arm64"), ("arm64", "arm64"), ("riscv64", "riscv64")],
)
def test_normalize_machine(machine: str, expected: str) -> None:
    assert normalize_machine(machine) == expected


def test_target_descriptor_from_host() -> None:
    target = TargetDescriptor.from_host(HostIdentifiers(platform="win32", arch="x64"))

    assert target == TargetDescriptor(os="windows", arch="amd64")


def test_detect_reads_interpreter(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("setup_cli.platforms.sys.platform", "darwin")
    monkeypatch.setattr("setup_cli.platforms.platform.machine", lambda: "x86_64")

    assert HostIdentifiers.detect() == HostIdentifiers(platform="darwin", arch="x64")
