"""Repeating a list of commands a number of times."""

from __future__ import annotations

from collections.abc import Callable, Sequence

Executor = Callable[[str, list], None]

USAGE = "Usage: loop <number_of_iterations> <command1> & <command2> & ..."


class LoopError(ValueError):
    """Raised when a loop command is malformed."""


def split_commands(args: Sequence[str]) -> list[list[str]]:
    """Split tokens into commands at each ``&``, dropping empty commands."""
    commands: list[list[str]] = []
    current: list[str] = []
    for arg in args:
        if arg == "&":
            if current:
                commands.append(current)
                current = []
        else:
            current.append(arg)
    if current:
        commands.append(current)
    return commands


def handle_loop(args: Sequence[str], execute: Executor) -> None:
    """Run ``loop <n> <command> & <command> ...`` through ``execute``."""
    if len(args) < 2:
        raise LoopError(USAGE)
    try:
        iterations = int(args[0])
    except ValueError:
        raise LoopError("Invalid number of iterations.") from None
    commands = split_commands(args[1:])
    for _ in range(iterations):
        for name, *rest in commands:
            execute(name, rest)