"""The ``reveal`` builtin: list the contents of a directory."""

from __future__ import annotations

import grp
import os
import pwd
import stat
import sys
import time

from .state import ShellState

BLUE = "\033[0;34m"
GREEN = "\033[0;32m"
WHITE = "\033[0;37m"
RESET = "\033[0m"

_PERMISSIONS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def parse_reveal_args(args: list[str]) -> tuple[bool, bool, str]:
    """Return ``(show_all, long_format, path)``; flags count only before the path."""
    show_all = long_format = False
    path = ""
    seen_path = False
    for token in args:
        if token.startswith("-") and not seen_path and token != "-":
            show_all = show_all or "a" in token
            long_format = long_format or "l" in token
        else:
            seen_path = True
            path += token
    return show_all, long_format, path


def resolve_reveal_path(state: ShellState, path: str) -> str:
    """Expand the special names ``""``, ``~``, ``-`` and ``..``."""
    if path == "":
        return "."
    if path == "~":
        return state.home
    if path == "-":
        if state.prev_dir is None:
            raise FileNotFoundError("OLDPWD not set")
        return state.prev_dir
    if path == "..":
        return state.cwd + "/.."
    return path


def list_entries(path: str, show_all: bool = False) -> list[str]:
    """Names in ``path`` in byte order; hidden ones only with ``show_all``."""
    names = os.listdir(path)
    if show_all:
        names += [".", ".."]
    else:
        names = [name for name in names if not name.startswith(".")]
    return sorted(names, key=os.fsencode)


def format_mode(mode: int) -> str:
    """Render a mode as ``drwxr-xr-x``."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(char if mode & bit else "-" for bit, char in _PERMISSIONS)


def _owner(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def format_entry(path: str, name: str, long_format: bool = False) -> str:
    """One listing line for ``name`` inside ``path``, coloured by kind."""
    info = os.stat(f"{path}/{name}")
    if stat.S_ISDIR(info.st_mode):
        colour = BLUE
    elif info.st_mode & stat.S_IXUSR:
        colour = GREEN
    else:
        colour = WHITE
    coloured = f"{colour}{name}{RESET}"
    if not long_format:
        return coloured
    return (
        f"{format_mode(info.st_mode)} {info.st_nlink:4d} "
        f"{_owner(info.st_uid)} {_group(info.st_gid)} "
        f"{info.st_size:9d} {time.ctime(info.st_mtime)[4:16]} {coloured}"
    )


def reveal_command(state: ShellState, args: list[str]) -> None:
    """Print the listing that ``reveal`` with these arguments produces."""
    show_all, long_format, raw_path = parse_reveal_args(args)
    try:
        path = resolve_reveal_path(state, raw_path)
        names = list_entries(path, show_all)
    except OSError as exc:
        print(f"opendir() error: {exc.strerror or exc}", file=sys.stderr)
        return
    print(f"Entry count --> {len(names)}  ")
    if long_format:
        try:
            print(f"total block size = {os.stat(path).st_blksize}")
        except OSError as exc:
            print(f"stat() error: {exc.strerror or exc}", file=sys.stderr)
    for name in names:
        try:
            print(format_entry(path, name, long_format))
        except OSError as exc:
            print(f"stat() error: {exc.strerror or exc}", file=sys.stderr)