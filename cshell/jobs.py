"""The ``fg``, ``bg`` and ``ping`` builtins for the shell's background jobs."""

from __future__ import annotations

import os
import re
import signal
import sys
import termios

from .state import ForegroundJob, ShellState

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Leading integer of ``text``, or 0 when it has none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_pid_arg(args: list[str]) -> int:
    """The process id named by the first argument."""
    if not args:
        raise ValueError("missing process id")
    return _atoi(args[0])


def _wait_in_foreground(pid: int) -> None:
    """Hand the terminal to ``pid``, resume it and wait until it stops or ends."""
    interactive = os.isatty(0)
    settings = None
    if interactive:
        try:
            settings = termios.tcgetattr(0)
            os.tcsetpgrp(0, os.getpgid(pid))
        except (OSError, termios.error) as exc:
            print(f"tcsetpgrp: {exc}", file=sys.stderr)
            return
    try:
        os.kill(pid, signal.SIGCONT)
        os.waitpid(pid, os.WUNTRACED)
    except (ProcessLookupError, ChildProcessError):
        pass
    finally:
        if interactive:
            previous = signal.signal(signal.SIGTTOU, signal.SIG_IGN)
            try:
                os.tcsetpgrp(0, os.getpgrp())
                termios.tcsetattr(0, termios.TCSADRAIN, settings)
            except (OSError, termios.error) as exc:
                print(f"tcsetpgrp: {exc}", file=sys.stderr)
            finally:
                signal.signal(signal.SIGTTOU, previous)


def fg_command(state: ShellState, args: list[str]) -> bool:
    """Bring a background job to the foreground; return whether it was found."""
    pid = parse_pid_arg(args)
    process = state.background.find(pid)
    if process is None:
        print("No such process found")
        return False
    state.foreground = ForegroundJob(pid, process.command)
    try:
        _wait_in_foreground(pid)
    finally:
        state.clear_foreground()
    return True


def bg_command(state: ShellState, args: list[str]) -> bool:
    """Resume a stopped background job; return whether it was found."""
    pid = parse_pid_arg(args)
    process = state.background.find(pid)
    if process is None:
        print(f"No such process found with PID: {pid}")
        return False
    if process.state == "Stopped":
        try:
            os.kill(pid, signal.SIGCONT)
        except OSError as exc:
            print(f"Error sending SIGCONT: {exc.strerror or exc}", file=sys.stderr)
            return True
        print(f"Process [{pid}] {process.command} is now running in the background.")
        process.state = "Running"
    else:
        print(f"Process [{pid}] {process.command} is already running.")
    return True


def ping_command(state: ShellState, args: list[str]) -> bool:
    """Send a signal number to a background job; return whether it was sent."""
    pid = parse_pid_arg(args)
    if len(args) < 2:
        raise ValueError("missing signal number")
    sig_num = _atoi(args[1])
    if state.background.find(pid) is None:
        print(f"No process found with pid {pid}")
        return False
    try:
        os.kill(pid, sig_num)
    except (OSError, ValueError, OverflowError) as exc:
        print(f"Error sending signal: {getattr(exc, 'strerror', None) or exc}", file=sys.stderr)
        return False
    print(f"Sent signal {sig_num} to process with pid {pid}")
    return True