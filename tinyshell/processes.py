"""Starting, listing, suspending and terminating processes."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from collections.abc import Sequence

import psutil

SUPPORTED_COMMANDS = frozenset(
    {
        "start_foreground",
        "start_background",
        "tictactoe",
        "duck",
        "countdown",
        "child",
        "suspend",
        "resume",
        "list_processes",
        "terminate",
        "list_children",
    }
)

BACKGROUND_PROBE_DELAY = 1.0


def _err(message: str) -> None:
    print(message, file=sys.stderr)


def _program_command(name: str, *params: str) -> list[str]:
    """Command line that runs one of the bundled programs."""
    return [sys.executable, "-m", f"tinyshell.programs.{name}", *params]


def _parse_pid(text: str) -> int | None:
    try:
        pid = int(text)
    except ValueError:
        pid = -1
    if pid < 0:
        _err(f"Invalid PID: {text}")
        return None
    return pid


def _background_options() -> dict:
    if sys.platform.startswith("win"):
        return {"creationflags": subprocess.CREATE_NEW_PROCESS_GROUP}
    return {"start_new_session": True}


class ProcessManager:
    """Carries out the shell's process commands."""

    supported_commands = SUPPORTED_COMMANDS

    def __init__(self, probe_delay: float = BACKGROUND_PROBE_DELAY) -> None:
        self.probe_delay = probe_delay
        self.background: list[subprocess.Popen] = []

    def find_all_child_processes(self, parent_pid: int) -> list[int]:
        """Return the PIDs of every process whose parent is ``parent_pid``."""
        children = []
        for proc in psutil.process_iter(["pid", "ppid"]):
            if proc.info.get("ppid") == parent_pid and proc.info.get("pid") != parent_pid:
                children.append(proc.info["pid"])
        return children

    def find_child_process(self, parent_pid: int) -> int:
        """Return the PID of one child of ``parent_pid``, or 0 when it has none."""
        children = self.find_all_child_processes(parent_pid)
        return children[0] if children else 0

    def wait_for_child_processes(self, parent_pid: int) -> None:
        """Wait for every child of ``parent_pid`` and, in turn, their children."""
        for pid in sorted(set(self.find_all_child_processes(parent_pid))):
            try:
                psutil.Process(pid).wait()
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                continue
            self.wait_for_child_processes(pid)

    def start_process_foreground(self, args: Sequence[str]) -> int | None:
        """Run a program, wait for it and its children; return its exit code."""
        if not args:
            _err("Usage: start_foreground <command>")
            return None
        try:
            proc = subprocess.Popen(list(args))
        except OSError as exc:
            _err(f"Failed to start process: {exc}")
            return None
        code = proc.wait()
        self.wait_for_child_processes(proc.pid)
        return code

    def start_process_background(self, args: Sequence[str]) -> int | None:
        """Start a program in its own process group; return its PID."""
        if not args:
            print("Usage: start <executable_path> [arguments...]")
            return None
        try:
            proc = subprocess.Popen(list(args), **_background_options())
        except OSError as exc:
            _err(f"Failed to start process: {exc}")
            return None
        self.background.append(proc)
        print(f"Started process with PID: {proc.pid}")
        time.sleep(self.probe_delay)
        child = self.find_child_process(proc.pid)
        if child:
            print(f"Detected child process with PID: {child}")
        else:
            print(f"No child process detected for PID: {proc.pid}")
        return proc.pid

    def start_tic_tac_toe(self) -> int | None:
        return self.start_process_foreground(_program_command("tictactoe"))

    def start_duck(self) -> int | None:
        return self.start_process_foreground(_program_command("duck"))

    def start_producer_consumer(self, params: Sequence[str]) -> int | None:
        return self.start_process_foreground(_program_command("producer_consumer", *params))

    def start_child_process(self) -> int | None:
        return self.start_process_background(_program_command("child"))

    def _signal_process(self, args: Sequence[str], command: str, suspend: bool) -> bool:
        if len(args) != 1:
            _err(f"Usage: {command} <PID>")
            return False
        pid = _parse_pid(args[0])
        if pid is None:
            return False
        try:
            proc = psutil.Process(pid)
            if suspend:
                proc.suspend()
            else:
                proc.resume()
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            _err("System error!")
            return False
        return True

    def suspend_process(self, args: Sequence[str]) -> bool:
        """Suspend the process with the given PID."""
        return self._signal_process(args, "suspend", suspend=True)

    def resume_process(self, args: Sequence[str]) -> bool:
        """Resume a suspended process with the given PID."""
        return self._signal_process(args, "resume", suspend=False)

    def list_processes(self, args: Sequence[str] = ()) -> None:
        print(f"{'PID':<8}{'Process Name':<50}Status")
        print("-" * 51)
        for proc in psutil.process_iter(["pid", "name", "status"]):
            info = proc.info
            status = info.get("status")
            if status is None:
                label = "Access Denied"
            elif status in (psutil.STATUS_ZOMBIE, psutil.STATUS_DEAD):
                label = "Terminated"
            else:
                label = "Running"
            print(f"{info['pid']:<8}{info.get('name') or '':<50}{label}")

    def terminate_process(self, args: Sequence[str]) -> bool:
        if len(args) != 1:
            print("Usage: terminate <pid>")
            return False
        pid = _parse_pid(args[0])
        if pid is None:
            return False
        try:
            proc = psutil.Process(pid)
        except psutil.NoSuchProcess as exc:
            _err(f"Failed to open process for querying and termination: {exc}")
            _err("Invalid parameter. The process might not exist.")
            return False
        except psutil.AccessDenied as exc:
            _err(f"Failed to open process for querying and termination: {exc}")
            _err("Access denied. Please run the shell as administrator.")
            return False
        try:
            proc.terminate()
        except (psutil.NoSuchProcess, psutil.AccessDenied) as exc:
            _err(f"Failed to terminate process: {exc}")
            return False
        print(f"Terminated process with PID: {pid}")
        return True

    def print_all_child_processes(self, args: Sequence[str]) -> None:
        if len(args) != 1:
            _err("Usage: list_children <parentPID>")
            return
        parent = _parse_pid(args[0])
        if parent is None:
            return
        children = self.find_all_child_processes(parent)
        if not children:
            print(f"No child processes found for PID: {parent}")
            return
        print(f"Child processes of PID {parent}:")
        for pid in children:
            print(f"  PID: {pid}")


__all__ = ["ProcessManager", "SUPPORTED_COMMANDS", "os"]