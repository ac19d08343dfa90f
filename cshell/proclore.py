"""The ``proclore`` builtin: show facts about a process from ``/proc``."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from .state import ShellState

PROC_ROOT = "/proc"


@dataclass
class ProcessInfo:
    """What ``proclore`` reports about one process."""

    pid: int
    status: str
    process_group: int
    virtual_memory: int
    executable: str
    foreground: bool


def parse_stat(text: str) -> dict[str, int | str]:
    """Pick the fields ``proclore`` needs out of a ``/proc/<pid>/stat`` line."""
    try:
        open_paren = text.index("(")
        close_paren = text.rindex(")")
        rest = text[close_paren + 1:].split()
        return {
            "pid": int(text[:open_paren]),
            "comm": text[open_paren + 1:close_paren],
            "state": rest[0],
            "ppid": int(rest[1]),
            "pgrp": int(rest[2]),
            "tpgid": int(rest[5]),
            "vsize": int(rest[20]),
        }
    except (ValueError, IndexError) as exc:
        raise ValueError(f"malformed stat line: {text!r}") from exc


def read_process_info(pid: int, proc_root: str = PROC_ROOT) -> ProcessInfo:
    """Gather status, group, memory and executable of ``pid``."""
    base = os.path.join(proc_root, str(pid))
    with open(os.path.join(base, "stat"), encoding="utf-8", errors="replace") as handle:
        fields = parse_stat(handle.readline())
    try:
        executable = os.readlink(os.path.join(base, "exe"))
    except OSError:
        executable = "Unknown"
    return ProcessInfo(
        pid=pid,
        status=str(fields["state"]),
        process_group=int(fields["pgrp"]),
        virtual_memory=int(fields["vsize"]),
        executable=executable,
        foreground=fields["tpgid"] == fields["pgrp"],
    )


def proclore_command(state: ShellState, args: list[str]) -> None:
    """Print the report for the given pid, or for the shell itself."""
    if args:
        try:
            pid = int(args[0])
        except ValueError:
            pid = 0
    else:
        pid = state.shell_pid
    try:
        info = read_process_info(pid)
    except (OSError, ValueError) as exc:
        print(f"Error opening stat file: {getattr(exc, 'strerror', None) or exc}", file=sys.stderr)
        return
    print(f"pid : {info.pid}")
    print(f"process status : {info.status}{'+' if info.foreground else ' '}")
    print(f"Process Group : {info.process_group}")
    print(f"Virtual memory : {info.virtual_memory}")
    print(f"executable path : {info.executable}")