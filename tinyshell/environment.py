"""Environment variable management for the shell."""

from __future__ import annotations

import os
import sys
from collections.abc import MutableMapping


class EnvironmentManager:
    """Reads and changes environment variables and the PATH list."""

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        self.environ: MutableMapping[str, str] = os.environ if environ is None else environ
        self.separator = os.pathsep

    def get_env(self, var: str) -> str:
        """Return the value of ``var``, or an empty string when it is unset."""
        return self.environ.get(var, "")

    def set_env(self, var: str, value: str) -> None:
        """Set ``var``; if ``value`` names a set variable, its value is copied."""
        self.environ[var] = self.get_env(value) or value

    def unset_env(self, var: str) -> None:
        self.environ.pop(var, None)
        print(f"Unset variable {var}")

    def print_env(self, var: str) -> None:
        value = self.get_env(var)
        if value:
            print(f"{var} = {value}")
        else:
            print(f"{var} is not set.")

    def add_to_path(self, path: str) -> None:
        current = self.get_env("PATH")
        if path in current:
            print(f"{path} is already in PATH.")
            return
        new_path = f"{current}{self.separator}{path}" if current else path
        self.set_env("PATH", new_path)
        print(f"Added {path} to PATH.")

    def remove_from_path(self, path: str) -> None:
        current = self.get_env("PATH")
        pos = current.find(path)
        if pos < 0:
            print(f"{path} is not in PATH.")
            return
        end = pos + len(path)
        if pos > 0 and current[pos - 1] == self.separator:
            new_path = current[: pos - 1] + current[end:]
        elif end < len(current) and current[end] == self.separator:
            new_path = current[:pos] + current[end + 1 :]
        else:
            new_path = current[:pos] + current[end:]
        self.set_env("PATH", new_path)
        print(f"Removed {path} from PATH.")

    def is_in_path(self, path: str) -> bool:
        return path in self.get_env("PATH")

    def list_all_env(self) -> None:
        for name, value in self.environ.items():
            print(f"{name}={value}")

    def save_env_to_file(self, filename: str) -> None:
        try:
            with open(filename, "w", encoding="utf-8") as handle:
                for name, value in self.environ.items():
                    handle.write(f"{name}={value}\n")
        except OSError:
            print(f"Could not open file for writing: {filename}", file=sys.stderr)
            return
        print(f"Environment variables saved to {filename}")

    def load_env_from_file(self, filename: str) -> None:
        try:
            with open(filename, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError:
            print(f"Could not open file for reading: {filename}", file=sys.stderr)
            return
        for line in lines:
            name, sep, value = line.partition("=")
            if sep:
                self.set_env(name, value)
        print(f"Environment variables loaded from {filename}")