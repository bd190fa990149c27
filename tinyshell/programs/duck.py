"""A duck swimming across the terminal."""

from __future__ import annotations

import itertools
import sys
import time

CLEAR = "\033[H\033[J"
DEFAULT_WIDTH = 80
DEFAULT_DELAY = 0.1
WAVE = "~" * 18


def render_duck(position: int, quack: int) -> str:
    """Return the three lines of one frame, each ending in a newline."""
    head = "__(.)< QUACK" if quack % 10 == 0 else "__(.)<"
    return (
        " " * position + head + "\n"
        + " " * position + "\\___)   \n"
        + " " * max(position - 6, 0) + WAVE + "\n"
    )


def animate(width: int = DEFAULT_WIDTH, frames: int | None = None, delay: float = DEFAULT_DELAY) -> None:
    """Draw ``frames`` frames (forever when None), wrapping at ``width``."""
    counter = itertools.count() if frames is None else range(frames)
    position = 0
    for quack in counter:
        sys.stdout.write(CLEAR + render_duck(position, quack))
        sys.stdout.flush()
        position += 1
        if position >= width:
            position = 0
        time.sleep(delay)


def main(argv=None) -> int:
    try:
        animate()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())