"""Running programs that are not builtins in the foreground."""

from __future__ import annotations

import os
import sys
import time
from typing import NamedTuple

from .state import ForegroundJob, ShellState

SLOW_THRESHOLD = 2
MAX_ARGS = 99


class _Outcome(NamedTuple):
    status: int
    seconds: int
    label: str | None


def run_foreground(state: ShellState, command: str) -> _Outcome:
    """Run ``command`` and wait until it ends or stops.

    The result holds the raw wait status, the whole seconds it took and, when it
    took more than two seconds, the command to show in the next prompt.
    """
    args = [part for part in command.split(" ") if part][:MAX_ARGS]
    if not args:
        raise ValueError("empty command")
    sys.stdout.flush()
    sys.stderr.flush()
    pid = os.fork()
    if pid == 0:
        try:
            os.execvp(args[0], args)
        except OSError as exc:
            os.write(2, f"Command execution failed: {exc.strerror or exc}\n".encode())
        finally:
            os._exit(1)
    start = int(time.time())
    state.foreground = ForegroundJob(pid, command, float(start))
    try:
        _, status = os.waitpid(pid, os.WUNTRACED)
    finally:
        state.clear_foreground()
    seconds = int(time.time()) - start
    label = command if seconds > SLOW_THRESHOLD else None
    return _Outcome(status, seconds, label)