"""The ``seek`` builtin: find files and directories by name prefix."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from typing import NamedTuple

from .hop import hop_command
from .reveal import BLUE, GREEN, RESET
from .state import ShellState


@dataclass(frozen=True)
class Match:
    """A found entry: the path as shown, the path on disk and its kind."""

    path: str
    real_path: str
    is_dir: bool


class _SeekArgs(NamedTuple):
    dirs_only: bool
    files_only: bool
    execute: bool
    target: str
    directory: str


def _walk(
    display: str,
    real: str,
    target: str,
    dirs_only: bool,
    files_only: bool,
    matches: list[Match],
    top: bool,
) -> None:
    try:
        names = sorted(os.listdir(real), key=os.fsencode)
    except OSError as exc:
        if top:
            raise
        print(f"Error opening directory: {exc.strerror or exc}", file=sys.stderr)
        return
    for name in names:
        if name.startswith("."):
            continue
        shown = f"{display}/{name}"
        path = f"{real}/{name}"
        try:
            info = os.stat(path)
        except OSError as exc:
            print(f"Error getting file status: {exc.strerror or exc}", file=sys.stderr)
            continue
        is_dir = stat.S_ISDIR(info.st_mode)
        if is_dir and not os.path.islink(path):
            _walk(shown, path, target, dirs_only, files_only, matches, False)
        if name.startswith(target) and not (is_dir and files_only) and not (not is_dir and dirs_only):
            matches.append(Match(shown, path, is_dir))


def search(root: str, target: str, dirs_only: bool = False, files_only: bool = False) -> list[Match]:
    """Entries below ``root`` whose names start with ``target``, contents before their directory."""
    matches: list[Match] = []
    _walk(".", root, target, dirs_only, files_only, matches, True)
    return matches


def parse_seek_args(args: list[str]) -> _SeekArgs:
    """Split arguments into flags, the target and the directory to search."""
    dirs_only = files_only = execute = False
    target = ""
    directory = "."
    for token in args:
        if token == "-d":
            dirs_only = True
        elif token == "-f":
            files_only = True
        elif token == "-e":
            execute = True
        elif not target:
            target = token
        else:
            directory = token
            break
    return _SeekArgs(dirs_only, files_only, execute, target, directory)


def _print_file_contents(path: str) -> None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            content = handle.read()
    except OSError:
        print(f"Error: Unable to open file {path}")
        return
    sys.stdout.write(content)
    print()


def seek_command(state: ShellState, args: list[str]) -> list[Match]:
    """Run ``seek``: print the matches and, with ``-e``, act on a single one."""
    dirs_only, files_only, execute, target, directory = parse_seek_args(args)
    if directory == "-":
        if state.prev_dir is None:
            print("Error opening directory: OLDPWD not set", file=sys.stderr)
            return []
        directory = state.prev_dir
    elif directory == "~":
        directory = state.home
    if dirs_only and files_only:
        print("Invalid Flags", end="")
        return []
    try:
        matches = search(directory, target, dirs_only, files_only)
    except OSError as exc:
        print(f"Error opening directory: {exc.strerror or exc}", file=sys.stderr)
        matches = []
    for match in matches:
        colour = BLUE if match.is_dir else GREEN
        print(f"{colour}{match.path}{RESET}")
    if not matches:
        print("No Match Found!", end="")
    if execute and len(matches) == 1:
        match = matches[0]
        if match.is_dir:
            hop_command(state, [match.real_path])
        else:
            _print_file_contents(match.real_path)
    return matches