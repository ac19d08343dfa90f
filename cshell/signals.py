"""Keyboard signal handling: Ctrl-C, Ctrl-Z and end of input."""

from __future__ import annotations

import os
import signal
import sys

from .bgqueue import BackgroundQueueFull
from .state import ShellState


def install_handlers(state: ShellState) -> None:
    """Route SIGINT and SIGTSTP to the foreground job of ``state``."""
    signal.signal(signal.SIGINT, lambda signum, frame: handle_sigint(state))
    signal.signal(signal.SIGTSTP, lambda signum, frame: handle_sigtstp(state))


def handle_sigint(state: ShellState) -> int | None:
    """Interrupt the foreground job; return its pid, or None when there is none."""
    if not state.has_foreground():
        print("No foreground process to interrupt.")
        return None
    pid = state.foreground.pid
    try:
        os.kill(pid, signal.SIGINT)
    except ProcessLookupError:
        pass
    print(f"Process {pid} interrupted by Ctrl-C")
    return pid


def handle_sigtstp(state: ShellState) -> int | None:
    """Stop the foreground job and move it to the background queue."""
    if not state.has_foreground():
        print("No foreground process to stop.")
        return None
    job = state.foreground
    try:
        os.kill(job.pid, signal.SIGSTOP)
    except OSError as exc:
        print(f"kill didn't work: {exc.strerror or exc}", file=sys.stderr)
        return None
    print(f"Process {job.pid} stopped by Ctrl-Z")
    try:
        state.background.enqueue(job.pid, job.command, "Stopped")
    except BackgroundQueueFull as exc:
        print(exc)
    state.clear_foreground()
    return job.pid


def handle_eof(state: ShellState) -> None:
    """Kill every background job, say goodbye and leave the shell."""
    while not state.background.is_empty():
        process = state.background.dequeue()
        try:
            os.kill(process.pid, signal.SIGKILL)
        except OSError:
            pass
    print("Namaste!")
    sys.exit(0)