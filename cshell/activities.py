"""The ``activities`` builtin: list the shell's background jobs."""

from __future__ import annotations

from typing import Iterable

from .bgqueue import BackgroundProcess
from .proclore import PROC_ROOT, parse_stat
from .state import ShellState

import os


def process_state(pid: int, proc_root: str = PROC_ROOT) -> str:
    """``Stopped``, ``Running``, or ``Unknown`` when the process cannot be read."""
    try:
        with open(os.path.join(proc_root, str(pid), "stat"), encoding="utf-8", errors="replace") as handle:
            fields = parse_stat(handle.readline())
    except (OSError, ValueError):
        return "Unknown"
    return "Stopped" if fields["state"] == "T" else "Running"


def format_activities(processes: Iterable[BackgroundProcess], proc_root: str = PROC_ROOT) -> str:
    """One line per job, ordered by command."""
    ordered = sorted(processes, key=lambda process: process.command)
    return "".join(
        f"[{p.pid}] : {p.command} - {process_state(p.pid, proc_root)}\n" for p in ordered
    )


def activities_command(state: ShellState) -> None:
    """Print the background jobs of the shell."""
    if state.background.is_empty():
        print("No other processes is running.")
        return
    print(format_activities(state.background), end="")