"""Moving around the file system: cd, dir and pwd."""

from __future__ import annotations

import os
from collections.abc import Sequence


def _quoted(path) -> str:
    text = os.fspath(path).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def change_directory(args: Sequence[str]) -> None:
    if len(args) != 1:
        print("Usage: cd <directory_path>")
        return
    path = args[0]
    if not os.path.isdir(path):
        print(f"Directory does not exist: {_quoted(path)}")
        return
    os.chdir(path)
    print(f"Changed directory to {_quoted(path)}")


def list_directory_contents(args: Sequence[str]) -> None:
    """List a directory (the current one by default); directories end in '/'."""
    path = args[0] if len(args) == 1 else "."
    if not os.path.isdir(path):
        print(f"Directory does not exist: {_quoted(path)}")
        return
    for entry in sorted(os.scandir(path), key=lambda item: item.name):
        print(entry.name + ("/" if entry.is_dir() else ""))


def print_working_directory(args: Sequence[str] = ()) -> None:
    print(os.getcwd())