"""Count seconds aloud, pausing between each."""

from __future__ import annotations

import re
import sys
import time

SPAN = 2

_INTEGER = re.compile(r"\s*[+-]?\d+")


def parse_count(text: str) -> int:
    """Parse a base-10 integer; anything left over makes it invalid."""
    if text == "":
        return 0
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"Invalid argument: {text}")
    return int(text)


def count(n: int, span: float = SPAN) -> None:
    """Print ``Second i.`` for i from 0 to n, sleeping ``span`` seconds after each."""
    for second in range(n + 1):
        print(f"Second {second}.", flush=True)
        time.sleep(span)


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: counter <number>")
        return 1
    try:
        n = parse_count(args[0])
    except ValueError as exc:
        print(exc)
        return 1
    count(n)
    return 0


if __name__ == "__main__":
    sys.exit(main())