"""The list of commands the shell understands."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_SEPARATOR = ("--------------------", "--------------------")

_SECTIONS: tuple[tuple[tuple[str, str], ...], ...] = (
    (
        ("delete", "Delete a directory"),
        ("move", "Move a directory"),
        ("list_tree", "List the directory tree"),
        ("create", "Create a directory"),
        ("copy", "Copy a directory"),
        ("open", "Open a file"),
        ("rename", "Rename a file"),
    ),
    (
        ("start_foreground", "Start a process in foreground"),
        ("start_background", "Start a process in background"),
        ("terminate", "Terminate a process"),
        ("list_processes", "List running processes"),
        ("child", "Start a child process"),
        ("manage_threads", "Manage threads"),
        ("list_children", "Print all children processes"),
        ("suspend", "Suspend a process"),
        ("resume", "Resume a process"),
        ("after", "Schedule a command"),
    ),
    (
        ("run", "Run a script"),
        ("calculator", "Open the calculator"),
        ("time", "Show system time"),
        ("date", "Show system date"),
        ("uptime", "Show system uptime"),
        ("cpuinfo", "Show CPU information"),
        ("meminfo", "Show memory information"),
        ("diskinfo", "Show disk information"),
        ("osinfo", "Show os information"),
        ("list_drivers", "List all drivers"),
    ),
    (
        ("change_color", "Change text color"),
        ("calculate", "Calculate expression value"),
        ("function", "Define a function"),
        ("evaluate", "Evaluate a function"),
        ("if else", "Conditional execution"),
        ("loop", "Loop expression"),
        ("convert", "Number base convertion"),
        ("alias", "Create command alias"),
        ("unalias", "Remove command alias"),
        ("bookmark", "Bookmark management"),
    ),
    (
        ("add_path", "Add a path to PATH"),
        ("remove_path", "Remove a path from PATH"),
        ("print_env", "Print environment variable"),
        ("set_env", "Set environment variable"),
        ("unset_env", "Unset environment variable"),
        ("is_in_path", "Check if a path is in PATH"),
        ("list_env", "List all environment variables"),
        ("save_env", "Save environment variables to file"),
        ("load_env", "Load environment variables from file"),
    ),
    (
        ("write_file", "Write content to file"),
        ("read_file", "Read content from file"),
        ("copy_file", "Copy a file from source to destination"),
        ("file_size", "Get file size"),
    ),
    (
        ("dancing", "Show dancing faces"),
        ("tictactoe", "Start a Tic-Tac-Toe game"),
        ("duck", "Show a duck"),
        ("ronaldo", "Sundaythekingplays"),
        (
            "run_producer_consumer",
            "Run producer-consumer <num_of_producer> <num_of_consumer> "
            "<product_by_producer> <size_of_buffer>",
        ),
        ("random_fact", "Show a random fact"),
    ),
    (
        ("cd", "Change directory"),
        ("dir", "List directory contents"),
        ("pwd", "Print working directory"),
        ("exit", "Exit the shell"),
        ("help", "Show this help message"),
        ("history", "Show history"),
        ("clear", "Clear screen"),
        ("clear_history", "Clear history"),
    ),
)


def help_text() -> str:
    """Return the help table, one line per command, ending in a newline."""
    separator = f"{_SEPARATOR[0]:<20}{_SEPARATOR[1]}"
    lines = [f"{'Command':<20}: Description"]
    for section in _SECTIONS:
        lines.append(separator)
        lines.extend(f"{name:<20}: {description}" for name, description in section)
    return "\n".join(lines) + "\n"


def show_help(args: Sequence[str] = ()) -> None:
    if args:
        print("Usage: help", file=sys.stderr)
        return
    sys.stdout.write(help_text())