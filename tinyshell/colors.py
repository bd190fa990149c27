"""Console text colours."""

from __future__ import annotations

import sys
from enum import IntEnum


class ConsoleColor(IntEnum):
    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    YELLOW = 6
    WHITE = 7
    GRAY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    LIGHT_MAGENTA = 13
    LIGHT_YELLOW = 14
    BRIGHT_WHITE = 15


def _ansi_code(color: ConsoleColor) -> str:
    # Console attributes use bit 0 for blue and bit 2 for red; ANSI swaps them.
    value = int(color)
    base = ((value & 4) >> 2) | (value & 2) | ((value & 1) << 2)
    offset = 90 if value & 8 else 30
    return f"\x1b[{offset + base}m"


def parse_color(name: str) -> ConsoleColor:
    """Return the colour with the given lower-case name, or white."""
    try:
        return ConsoleColor[name.upper()] if name == name.lower() else ConsoleColor.WHITE
    except KeyError:
        return ConsoleColor.WHITE


def set_color(color: ConsoleColor | int) -> None:
    sys.stdout.write(_ansi_code(ConsoleColor(color)))
    sys.stdout.flush()


def reset_color() -> None:
    set_color(ConsoleColor.WHITE)