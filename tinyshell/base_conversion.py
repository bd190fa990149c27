"""Conversion of numbers between bases 2 to 36."""

from __future__ import annotations

import string
import sys
from collections.abc import Sequence

DIGITS = string.digits + string.ascii_uppercase
_VALUES = {char: value for value, char in enumerate(DIGITS)}
MIN_BASE = 2
MAX_BASE = 36


def is_valid_number_for_base(number: str, base: int) -> bool:
    """Tell whether every character of ``number`` is a digit of ``base``."""
    for char in number:
        value = _VALUES.get(char.upper())
        if value is None or value >= base:
            return False
    return True


def convert_base(number: str, from_base: int, to_base: int) -> str:
    """Convert ``number`` written in ``from_base`` to its form in ``to_base``."""
    if not (MIN_BASE <= from_base <= MAX_BASE and MIN_BASE <= to_base <= MAX_BASE):
        raise ValueError("Base must be between 2 and 36.")
    if not is_valid_number_for_base(number, from_base):
        raise ValueError(
            f"Invalid number for the given base: {number} for base {from_base}"
        )
    value = int(number, from_base) if number else 0
    digits: list[str] = []
    while value > 0:
        value, remainder = divmod(value, to_base)
        digits.append(DIGITS[remainder])
    return "".join(reversed(digits)) or "0"


def handle_base_conversion(args: Sequence[str]) -> None:
    """Run ``convert <number> from <base> to <base>``."""
    if len(args) != 5 or args[1] != "from" or args[3] != "to":
        print("Usage: convert <number> from <from_base> to <to_base>", file=sys.stderr)
        return
    try:
        from_base = int(args[2])
        to_base = int(args[4])
    except ValueError:
        print("Usage: convert <number> from <from_base> to <to_base>", file=sys.stderr)
        return
    if not (MIN_BASE <= from_base <= MAX_BASE and MIN_BASE <= to_base <= MAX_BASE):
        print("Base must be between 2 and 36.", file=sys.stderr)
        return
    try:
        result = convert_base(args[0], from_base, to_base)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return
    print(f"Result: {result}")