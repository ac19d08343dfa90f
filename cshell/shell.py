"""The interactive shell: reading lines, splitting them and running commands."""

from __future__ import annotations

import os
import re
import sys
from typing import Callable

from .activities import activities_command
from .aliases import load_aliases
from .bgqueue import BackgroundQueueFull, launch_background, reap_background
from .display import prompt
from .external import run_foreground
from .history import LOG_SIZE, History
from .hop import hop_command
from .iman import iman_command
from .jobs import bg_command, fg_command, ping_command
from .neonate import neonate_command
from .pipes import run_pipeline
from .proclore import proclore_command
from .redirection import redirection_handler
from .reveal import reveal_command
from .seek import seek_command
from .signals import handle_eof, install_handlers
from .state import LOG_FILE_NAME, MAX_LENGTH, RC_FILE_NAME, ShellState, trim

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Shell:
    """Runs command lines against one shell state."""

    def __init__(self, state: ShellState) -> None:
        self.state = state
        self.last_slow: str | None = None
        self._builtins: dict[str, Callable[[list[str]], object]] = {
            "hop": lambda args: hop_command(state, args),
            "reveal": lambda args: reveal_command(state, args),
            "log": self._log,
            "seek": lambda args: seek_command(state, args),
            "proclore": lambda args: proclore_command(state, args),
            "activities": lambda args: activities_command(state),
            "ping": lambda args: ping_command(state, args),
            "bg": lambda args: bg_command(state, args),
            "fg": lambda args: fg_command(state, args),
            "iMan": iman_command,
            "neonate": neonate_command,
        }

    def tokenize(self, line: str, record: bool = True) -> None:
        """Run every ``;``-separated part of ``line``, recording it first if asked."""
        if record:
            self.state.history.add(line)
        for segment in line.split(";"):
            if not segment:
                continue
            try:
                self._run_segment(segment)
            except BackgroundQueueFull as exc:
                print(exc)
            except (ValueError, LookupError, OSError) as exc:
                print(exc, file=sys.stderr)

    def _run_segment(self, segment: str) -> None:
        if "&" in segment:
            # Only the parts ended by '&' run; any text after the last one is dropped.
            for piece in segment.split("&")[:-1]:
                command = trim(piece)
                if command:
                    launch_background(self.state.background, command)
            return
        if "<" in segment or ">" in segment:
            redirection_handler(segment, self.execute)
        elif "|" in segment:
            run_pipeline(segment, self.execute)
        else:
            self.execute(trim(segment))

    def execute(self, command: str) -> None:
        """Run one simple command: a builtin, an alias or an external program."""
        self._execute(command, frozenset())

    def _execute(self, command: str, expanding: frozenset[str]) -> None:
        args = command.split()
        if not args:
            return
        name, rest = args[0], args[1:]
        builtin = self._builtins.get(name)
        if builtin is not None:
            builtin(rest)
        elif name in self.state.aliases and name not in expanding:
            self._execute(self.state.aliases[name], expanding | {name})
        else:
            outcome = run_foreground(self.state, command)
            if outcome.label:
                self.last_slow = outcome.label

    def _log(self, args: list[str]) -> None:
        history = self.state.history
        if not args:
            print(history.format(), end="")
        elif args[0] == "execute" and len(args) > 1:
            try:
                entry = history.get(_leading_int(args[1]))
            except IndexError:
                print("Invalid index!")
                return
            print(f"Executing: {entry}")
            self.tokenize(entry, record=False)
        elif args[0] == "purge":
            history.purge()
        else:
            print("Invalid log command", file=sys.stderr)

    def handle_line(self, line: str) -> None:
        """Run a line read from the user; blank lines do nothing."""
        if not line or line == "\n":
            return
        self.tokenize(line, record=True)

    def run(self) -> None:
        """Prompt, read and run lines until input ends."""
        while True:
            for message in reap_background(self.state.background):
                print(message)
            label, self.last_slow = self.last_slow, None
            print(prompt(self.state, label), end="", flush=True)
            line = sys.stdin.readline(MAX_LENGTH - 1)
            if not line:
                handle_eof(self.state)
                return
            self.handle_line(line)


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell rooted at the current directory."""
    home = os.getcwd()
    history = History(os.path.join(home, LOG_FILE_NAME), LOG_SIZE)
    try:
        aliases = load_aliases(RC_FILE_NAME)
    except OSError as exc:
        print(f"Error opening file: {exc.strerror or exc}", file=sys.stderr)
        aliases = {}
    state = ShellState(home, os.environ.get("USER", ""), history, aliases)
    install_handlers(state)
    Shell(state).run()
    return 0