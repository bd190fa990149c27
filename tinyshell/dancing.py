"""A small dancing-face animation."""

from __future__ import annotations

import itertools
import sys
import time
from collections.abc import Iterator

DANCE_MOVES = (
    " ~~(^-^~~)",
    " ~~(^-^)~~",
    " (~~^-^)~~",
)
DEFAULT_LINES = 30
DEFAULT_DELAY = 0.5


def dance_frames(lines: int = DEFAULT_LINES) -> Iterator[str]:
    """Yield ``lines`` frames, cycling through the dance moves."""
    return itertools.islice(itertools.cycle(DANCE_MOVES), max(lines, 0))


def dancing(lines: int = DEFAULT_LINES, delay: float = DEFAULT_DELAY) -> None:
    """Draw each frame over the previous one, pausing ``delay`` seconds."""
    for frame in dance_frames(lines):
        sys.stdout.write(frame + "\r")
        sys.stdout.flush()
        time.sleep(delay)