"""History of the commands typed into the shell."""

from __future__ import annotations

import os

DEFAULT_HISTORY_FILE = "history.txt"


class CommandHistory:
    """Keeps entered commands in memory and appends them to a file."""

    def __init__(self, history_file: str | os.PathLike = DEFAULT_HISTORY_FILE) -> None:
        self.history_file = history_file
        self.entries: list[str] = []

    def add(self, command: str) -> None:
        self.entries.append(command)
        try:
            with open(self.history_file, "a", encoding="utf-8") as handle:
                handle.write(command + "\n")
        except OSError:
            pass

    def show(self) -> None:
        for command in self.entries:
            print(command)

    def load(self) -> None:
        """Append the commands stored in the history file, if it exists."""
        try:
            with open(self.history_file, encoding="utf-8") as handle:
                self.entries.extend(handle.read().splitlines())
        except OSError:
            pass

    def clear(self) -> None:
        """Forget all commands and empty the history file."""
        self.entries.clear()
        try:
            with open(self.history_file, "w", encoding="utf-8"):
                pass
        except OSError:
            pass