"""Running a command after a delay."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Callable, Sequence

Executor = Callable[[str, list], None]


def schedule_command(args: Sequence[str], execute: Executor) -> threading.Thread | None:
    """Handle ``after <number> s <command> [args...]``; return the waiting thread."""
    if len(args) < 3 or args[1] != "s":
        print("Usage: after <number> s <command>", file=sys.stderr)
        return None
    try:
        delay = int(args[0])
    except ValueError:
        print(f"Invalid number: {args[0]}", file=sys.stderr)
        return None

    command = args[2]
    command_args = list(args[3:])

    def run() -> None:
        time.sleep(max(delay, 0))
        print("\nThe thread is completed!")
        execute(command, command_args)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    print(f"Scheduled command '{command}' to run after {delay} seconds.")
    return thread