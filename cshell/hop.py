"""The ``hop`` builtin: change the working directory one step at a time."""

from __future__ import annotations

import os
import sys

from .state import ShellState


def _enter(state: ShellState, target: str, strict: bool) -> bool:
    """Move into ``target``; a failure counts only when ``strict`` is set."""
    try:
        state.change_directory(target)
    except OSError as exc:
        if strict:
            print(f"Can not be accessed: {exc.strerror or exc}", file=sys.stderr)
            return False
        state.prev_dir = state.cwd
        state.cwd = os.getcwd()
    return True


def hop_command(state: ShellState, args: list[str]) -> list[str]:
    """Visit each argument in turn, print every directory reached and return them."""
    visited: list[str] = []
    for token in args:
        strict = False
        if token == "~":
            target = state.home
        elif token == "-":
            if state.prev_dir is None:
                print("Warning : OLDPWD not set", end="")
                target = state.home
            else:
                target = state.prev_dir
        elif token in ("..", "."):
            target = token
        else:
            target = token
            strict = True
        if not _enter(state, target, strict):
            return visited
        visited.append(state.cwd)
        print(f"{state.cwd} ")
    return visited