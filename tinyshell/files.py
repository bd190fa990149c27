"""File commands: writing, reading, copying and inspecting files."""

from __future__ import annotations

import errno
import os
import shutil
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path, PurePath

SUPPORTED_COMMANDS = frozenset({"write_file", "read_file", "file_size", "open", "rename"})
PAGE_SIZE = 5

_END_MESSAGE = "End of reading. Returning to shell..."
_INTERRUPTED_MESSAGE = "\nReading interrupted. Returning to shell..."
_MORE_PROMPT = "[READ MORE] (Press any key to continue, Ctrl+C to quit)..."


def _err(message: str) -> None:
    print(message, file=sys.stderr)


def _quoted(path) -> str:
    text = os.fspath(path).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def _read_lines(filename: str) -> list[str]:
    """Read a file as lines, without their line endings."""
    with open(filename, encoding="utf-8", errors="replace") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _count_lines(data: bytes) -> int:
    count = data.count(b"\n")
    if data and not data.endswith(b"\n"):
        count += 1
    return count


def _wait_for_key() -> bool:
    """Wait for the user; return False when reading should stop."""
    try:
        input()
    except (KeyboardInterrupt, EOFError):
        return False
    return True


def _open_with_default_app(path: str) -> None:
    if sys.platform.startswith("win"):
        os.startfile(path)  # type: ignore[attr-defined]
    elif sys.platform == "darwin":
        subprocess.Popen(["open", path])
    else:
        subprocess.Popen(["xdg-open", path])


class FileManager:
    """Carries out the shell's file commands."""

    supported_commands = SUPPORTED_COMMANDS

    def __init__(self, pause: Callable[[], bool] | None = None) -> None:
        self.pause = pause or _wait_for_key

    def write_file(self, args: Sequence[str]) -> None:
        """``write_file <content> <filename> [~HEAD | ~FOOT | ~LINE N]``."""
        if len(args) < 2:
            _err("Usage: write_file <content> <filename> [~HEAD | ~FOOT | ~LINE N]")
            return
        content, filename = args[0], args[1]

        if len(args) == 2:
            try:
                with open(filename, "a", encoding="utf-8") as handle:
                    handle.write(content + "\n")
            except OSError:
                _err(f"Failed to open file: {filename}")
                return
        elif len(args) == 3 or (len(args) == 4 and args[2] == "~LINE"):
            position = args[2]
            try:
                lines = _read_lines(filename)
            except OSError:
                _err(f"Failed to open file: {filename}")
                return
            if position == "~HEAD":
                lines.insert(0, content)
            elif position == "~FOOT":
                lines.append(content)
            elif position == "~LINE":
                if len(args) != 4:
                    _err("Usage: write_file <content> <filename> ~LINE N")
                    return
                index = int(args[3]) - 1
                if 0 <= index < len(lines):
                    lines.insert(index, content)
                else:
                    lines.append(content)
            try:
                with open(filename, "w", encoding="utf-8") as handle:
                    handle.writelines(f"{line}\n" for line in lines)
            except OSError:
                _err(f"Failed to open file for writing: {filename}")
                return
        else:
            _err("Invalid number of arguments.")
            return

        print(f"Successfully wrote to file: {filename}")

    def read_file(self, args: Sequence[str]) -> None:
        """``read_file <filename> [~HEAD N | ~FOOT N | ~RANGE M N | ~LINE N]``."""
        if not 1 <= len(args) <= 4:
            _err("Usage: read_file <filename> [~HEAD N | ~FOOT N | ~RANGE M N | ~LINE N]")
            return
        filename = args[0]
        try:
            lines = _read_lines(filename)
        except OSError:
            _err(f"Could not open file: {filename}")
            return

        if len(args) == 1:
            self._print_lines_with_pause(lines)
            return

        position = args[1]
        if position == "~HEAD":
            if len(args) != 3:
                _err("Usage: read_file <filename> ~HEAD N")
                return
            count = int(args[2])
            self._print_lines(lines[:count] if count >= 0 else lines)
        elif position == "~FOOT":
            if len(args) != 3:
                _err("Usage: read_file <filename> ~FOOT N")
                return
            count = int(args[2])
            self._print_lines(lines[max(len(lines) - count, 0):] if count >= 0 else [])
        elif position == "~RANGE":
            if len(args) != 4:
                _err("Usage: read_file <filename> ~RANGE M N")
                return
            start = int(args[2]) - 1
            end = int(args[3]) - 1
            if 0 <= start <= end < len(lines):
                self._print_lines(lines[start:end + 1])
            else:
                _err("Invalid line range.")
        elif position == "~LINE":
            if len(args) != 3:
                _err("Usage: read_file <filename> ~LINE N")
                return
            index = int(args[2]) - 1
            if 0 <= index < len(lines):
                self._print_lines(lines[index:index + 1])
            else:
                _err("Line number out of range.")
        else:
            _err("Invalid position format.")

    def show_file_size(self, file_name: str) -> None:
        """Print the size in bytes and the number of lines of a file."""
        try:
            size = os.path.getsize(file_name)
            line_count = _count_lines(Path(file_name).read_bytes())
        except OSError as exc:
            _err(f"Error: {exc}")
            return
        print(f"Size of file {file_name}: {size} bytes")
        print(f"Number of lines in file {file_name}: {line_count}")

    def open_file(self, args: Sequence[str]) -> None:
        """Open a file with the application the system associates with it."""
        if len(args) != 1:
            print("Usage: open <file_path>")
            return
        try:
            _open_with_default_app(args[0])
        except OSError as exc:
            _err(f"Error: {exc}")

    def rename_file(self, args: Sequence[str]) -> None:
        if len(args) != 2:
            print("Usage: rename <old_file_path> <new_file_path>")
            return
        old_path, new_path = args
        if not os.path.exists(old_path):
            print(f"File does not exist: {_quoted(old_path)}")
            return
        try:
            os.replace(old_path, new_path)
        except OSError as exc:
            _err(f"Error: {exc}")
            return
        print(f"File renamed from {_quoted(old_path)} to {_quoted(new_path)}")

    def create_file(self, file_names: Sequence[str]) -> None:
        """Create (or truncate) each named file."""
        for name in file_names:
            try:
                with open(name, "w", encoding="utf-8"):
                    pass
            except OSError:
                _err(f"Failed to create file: {name}")
                continue
            print(f"File created successfully: {name}")

    def delete_file(self, file_names: Sequence[str]) -> None:
        """Delete each named file or empty directory."""
        for name in file_names:
            path = Path(name)
            try:
                if path.is_dir() and not path.is_symlink():
                    path.rmdir()
                else:
                    path.unlink()
            except OSError:
                _err(f"Failed to delete file: {name}")
                continue
            print(f"File deleted successfully: {name}")

    def check_file_existence(self, file_names: Sequence[str]) -> None:
        for name in file_names:
            if os.path.exists(name):
                print(f"File exists: {name}")
            else:
                print(f"File does not exist: {name}")

    def print_file_extensions(self, file_names: Sequence[str]) -> None:
        for name in file_names:
            print(f"Extension of file {name}: {_quoted(PurePath(name).suffix)}")

    def copy_file(self, args: Sequence[str]) -> None:
        """Copy a file; the destination must not exist yet."""
        if len(args) != 2:
            print("Usage: copy_file <source_file_path> <destination_file_path>")
            return
        source, destination = args
        try:
            if os.path.exists(destination):
                raise FileExistsError(errno.EEXIST, "File exists", destination)
            shutil.copyfile(source, destination)
        except OSError as exc:
            _err(f"Error: {exc}")
            return
        print(f"File copied successfully from {source} to {destination}")

    def move_file(self, args: Sequence[str]) -> None:
        if len(args) != 2:
            print("Usage: move_file <source_file_path> <destination_file_path>")
            return
        source, destination = args
        try:
            os.replace(source, destination)
        except OSError as exc:
            _err(f"Error: {exc}")
            return
        print(f"File moved successfully from {source} to {destination}")

    def list_files_with_extension(self, args: Sequence[str]) -> None:
        """List regular files in a directory, optionally of one extension."""
        if not args or len(args) > 2:
            print("Usage: list_file <directory> <extension>")
            return
        directory = args[0]
        extension = args[1] if len(args) == 2 else None
        try:
            entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
        except OSError as exc:
            _err(f"Error: {exc}")
            return
        for entry in entries:
            if not entry.is_file():
                continue
            if extension is None or PurePath(entry.name).suffix == extension:
                print(_quoted(entry.name))

    def _print_lines(self, lines: Sequence[str]) -> None:
        for line in lines:
            print(line)
        print(_END_MESSAGE)

    def _print_lines_with_pause(self, lines: Sequence[str]) -> None:
        total = len(lines)
        try:
            for number, line in enumerate(lines, 1):
                print(line)
                if number % PAGE_SIZE == 0 and number < total:
                    print(_MORE_PROMPT)
                    if not self.pause():
                        print(_INTERRUPTED_MESSAGE)
                        return
        except KeyboardInterrupt:
            print(_INTERRUPTED_MESSAGE)
            return
        print(_END_MESSAGE)