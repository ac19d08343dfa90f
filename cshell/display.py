"""Building the interactive prompt."""

from __future__ import annotations

import socket

from .state import MAX_LENGTH, ShellState


def format_prompt(
    username: str,
    hostname: str,
    home: str,
    cwd: str,
    last_command: str | None = None,
) -> str:
    """Render ``<user@host:path> ``, with the home prefix shown as ``~``."""
    path = "~" + cwd[len(home):] if cwd.startswith(home) else cwd
    suffix = f" {last_command}" if last_command else ""
    return f"<{username}@{hostname}:{path}{suffix}> "[: MAX_LENGTH - 1]


def prompt(state: ShellState, last_command: str | None = None) -> str:
    """The prompt for the current state of the shell."""
    return format_prompt(state.username, socket.gethostname(), state.home, state.cwd, last_command)