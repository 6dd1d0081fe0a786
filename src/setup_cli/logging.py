# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console messages with optional colour and emoji support.

Messages go to stdout through Rich consoles shared per colour/emoji preset;
on a runner they end up in the step log next to the workflow commands from
:mod:`setup_cli.actions`.
"""

from __future__ import annotations

import sys
from typing import Final, Literal

from rich.console import Console
from rich.text import Text

Level = Literal["info", "ok", "warn", "fail"]

# level -> (emoji prefix, rich style)
_LEVELS: Final[dict[Level, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "bold red"),
}

# (color, emoji, tty) -> console
_CONSOLES: dict[tuple[bool, bool, bool], Console] = {}


def stdout_is_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def console_for(*, color: bool, emoji: bool) -> Console:
    """Return the shared console for a colour/emoji preset.

    Colour is only switched on when stdout is a terminal; runner logs and
    captured output stay plain text.
    """

    tty = stdout_is_tty()
    key = (color, emoji, tty)
    console = _CONSOLES.get(key)
    if console is None:
        styled = color and tty
        console = Console(
            color_system="auto" if styled else None,
            force_terminal=tty,
            no_color=not styled,
            emoji=emoji,
            highlight=False,
            soft_wrap=True,
        )
        _CONSOLES[key] = console
    return console


def reset_consoles() -> None:
    """Forget shared consoles so the next message rebinds to the current stdout."""

    _CONSOLES.clear()


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise an empty string."""

    return symbol if enable else ""


def emit(level: Level, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` styled for ``level``.

    Args:
        level: Message severity selecting the emoji prefix and colour.
        msg: Message text; Rich markup in it is not interpreted.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    symbol, style = _LEVELS[level]
    color_enabled = stdout_is_tty() if use_color is None else use_color
    text = Text(f"{emoji(symbol, use_emoji)}{msg}")
    if color_enabled:
        text.stylize(style)
    console_for(color=color_enabled, emoji=use_emoji).print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit("info", msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit("ok", msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit("warn", msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit("fail", msg, use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "Level",
    "console_for",
    "emit",
    "emoji",
    "fail",
    "info",
    "ok",
    "reset_consoles",
    "stdout_is_tty",
    "warn",
]
