"""The ``neonate`` builtin: print the newest pid until ``x`` is pressed."""

from __future__ import annotations

import math
import os
import re
import select
import sys
import termios
import time
from contextlib import contextmanager
from typing import Iterator

PROC_ROOT = "/proc"

_LEADING_INT = re.compile(r"\d+")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def most_recent_pid(proc_root: str = PROC_ROOT) -> int | None:
    """The largest pid listed under ``proc_root``, or None when there is none."""
    pids = [
        int(match.group())
        for name in os.listdir(proc_root)
        if (match := _LEADING_INT.match(name))
    ]
    return max(pids, default=None)


def parse_interval(args: list[str]) -> int:
    """Seconds between reports, from arguments of the form ``-n <seconds>``."""
    if not args or args[0] != "-n":
        raise ValueError("invalid command!")
    if len(args) < 2:
        raise ValueError("Invalid time")
    match = _LEADING_FLOAT.match(args[1])
    value = float(match.group(1)) if match else 0.0
    if not math.isfinite(value) or int(value) < 0 or not value.is_integer():
        raise ValueError("Invalid time")
    return int(value)


@contextmanager
def _unbuffered_input(fd: int) -> Iterator[None]:
    if not os.isatty(fd):
        yield
        return
    original = termios.tcgetattr(fd)
    changed = termios.tcgetattr(fd)
    changed[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, changed)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)


def neonate_command(args: list[str]) -> None:
    """Print the newest pid every interval until ``x`` is read from input."""
    try:
        interval = parse_interval(args)
    except ValueError as exc:
        print(exc)
        return
    print(f"time : {interval}", end="")
    fd = sys.stdin.fileno()
    with _unbuffered_input(fd):
        print("Press 'x' to exit", flush=True)
        while True:
            try:
                pid = most_recent_pid()
            except OSError as exc:
                print(f"ERROR: Could not open /proc directory: {exc.strerror or exc}", file=sys.stderr)
                pid = None
            if pid is not None:
                print(pid, flush=True)
            ready, _, _ = select.select([fd], [], [], 0)
            if ready:
                key = os.read(fd, 1)
                if key in (b"x", b""):
                    break
            time.sleep(interval)