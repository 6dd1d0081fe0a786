# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Map host platform and architecture identifiers onto release asset names."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from typing import Final

WINDOWS: Final[str] = "windows"
DARWIN: Final[str] = "darwin"
LINUX: Final[str] = "linux"
AMD64: Final[str] = "amd64"

_MACHINE_ALIASES: Final[dict[str, str]] = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
}


@dataclass(frozen=True, slots=True)
class HostIdentifiers:
    """Raw platform and architecture identifiers reported by the host."""

    platform: str
    arch: str

    @classmethod
    def detect(cls) -> HostIdentifiers:
        """Read identifiers from the running interpreter."""

        return cls(platform=sys.platform, arch=normalize_machine(platform.machine()))


@dataclass(frozen=True, slots=True)
class TargetDescriptor:
    """Operating system and architecture in the vendor naming vocabulary."""

    os: str
    arch: str

    @classmethod
    def from_host(cls, host: HostIdentifiers) -> TargetDescriptor:
        return cls(os=map_platform(host.platform), arch=map_arch(host.arch))


def normalize_machine(machine: str) -> str:
    """Return the short architecture identifier for ``platform.machine()`` output.

    Args:
        machine: Raw machine string, e.g. ``x86_64`` or ``AMD64``.

    Returns:
        str: ``x64``/``arm64``/``ia32`` for known aliases, otherwise the
        lower-cased input.
    """

    normalized = machine.strip().lower()
    return _MACHINE_ALIASES.get(normalized, normalized)


def map_platform(value: str) -> str:
    """Return the asset OS name for the host platform ``value``.

    Anything other than Windows or macOS is treated as Linux.
    """

    if value == "win32":
        return WINDOWS
    if value == DARWIN:
        return DARWIN
    return LINUX


def map_arch(value: str) -> str:
    """Return the asset architecture name for the host architecture ``value``."""

    if value == "x64":
        return AMD64
    return value


__all__ = [
    "AMD64",
    "DARWIN",
    "LINUX",
    "WINDOWS",
    "HostIdentifiers",
    "TargetDescriptor",
    "map_arch",
    "map_platform",
    "normalize_machine",
]
