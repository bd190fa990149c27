"""A child program that idles for a while and exits."""

from __future__ import annotations

import sys
import time

SLEEP_SECONDS = 10


def main(argv=None) -> int:
    time.sleep(SLEEP_SECONDS)
    return 0


if __name__ == "__main__":
    sys.exit(main())