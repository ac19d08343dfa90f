"""Command history kept in memory and appended to a file."""

from __future__ import annotations

import os
from collections import deque

LOG_SIZE = 15
_WHITESPACE = " \t\n\v\f\r"


class History:
    """The most recent commands, bounded in number and persisted to ``path``."""

    def __init__(self, path: str | os.PathLike, size: int = LOG_SIZE) -> None:
        self.path = os.fspath(path)
        self.size = size
        self._commands: deque[str] = deque(maxlen=size)
        self.load()

    def load(self) -> None:
        """Replace the in-memory history with the last lines of the file."""
        self._commands = deque(maxlen=self.size)
        try:
            with open(self.path, encoding="utf-8", errors="replace") as handle:
                for line in handle:
                    self._commands.append(line.rstrip("\n"))
        except FileNotFoundError:
            pass

    def add(self, command: str) -> bool:
        """Record a command; return whether it was recorded."""
        command = command.rstrip(_WHITESPACE)
        if not command:
            return False
        if self._commands and self._commands[-1].strip(_WHITESPACE) == command.strip(_WHITESPACE):
            return False
        if "log" in command:
            return False
        self._commands.append(command)
        try:
            with open(self.path, "a", encoding="utf-8") as handle:
                handle.write(command + "\n")
        except OSError:
            pass
        return True

    def entries(self) -> list[str]:
        return list(self._commands)

    def format(self) -> str:
        """Numbered listing, oldest first."""
        return "".join(f"{number}) {command}\n" for number, command in enumerate(self._commands, 1))

    def purge(self) -> None:
        """Empty the file and the in-memory history."""
        try:
            with open(self.path, "w", encoding="utf-8"):
                pass
        except OSError:
            pass
        self.load()

    def get(self, index: int) -> str:
        """Return the command at a 1-based position."""
        if index < 1 or index > len(self._commands):
            raise IndexError("Invalid index!")
        return self._commands[index - 1]