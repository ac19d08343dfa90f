"""The mutable state a running shell carries between commands."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field

from .bgqueue import BG_MAX, BackgroundQueue
from .history import LOG_SIZE, History

MAX_LENGTH = 4096
LOG_FILE_NAME = "logcommands.txt"
RC_FILE_NAME = "myshrc.txt"

_WHITESPACE = " \t\n\v\f\r"


def trim(text: str) -> str:
    """Strip ASCII whitespace from both ends."""
    return text.strip(_WHITESPACE)


@dataclass
class ForegroundJob:
    """The process the shell is currently waiting on."""

    pid: int
    command: str
    start_time: float = field(default_factory=time.time)
    status: int | None = None


class ShellState:
    """Directories, user, history, aliases and jobs of one shell session."""

    def __init__(
        self,
        home: str,
        username: str | None = None,
        history: History | None = None,
        aliases: dict[str, str] | None = None,
    ) -> None:
        self.home = home
        self.cwd = home
        self.prev_dir: str | None = None
        self.username = username if username is not None else os.environ.get("USER", "")
        self.shell_pid = os.getpid()
        self.history = (
            history if history is not None else History(os.path.join(home, LOG_FILE_NAME), LOG_SIZE)
        )
        self.aliases: dict[str, str] = dict(aliases) if aliases else {}
        self.background = BackgroundQueue(BG_MAX)
        self.foreground: ForegroundJob | None = None

    def change_directory(self, target: str) -> str:
        """Enter ``target`` and remember the directory left; return the new one."""
        os.chdir(target)
        self.prev_dir = self.cwd
        self.cwd = os.getcwd()
        return self.cwd

    def has_foreground(self) -> bool:
        return self.foreground is not None and self.foreground.pid != self.shell_pid

    def clear_foreground(self) -> None:
        self.foreground = None