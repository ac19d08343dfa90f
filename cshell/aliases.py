"""Reading alias definitions from a shell startup file."""

from __future__ import annotations

import os

from .state import MAX_LENGTH, trim

MAX_ALIASES = 100
NAME_LIMIT = 49
COMMAND_LIMIT = MAX_LENGTH - 1


def remove_comment(line: str) -> str:
    """Drop everything from the first ``#``."""
    return line.split("#", 1)[0]


def parse_alias(line: str) -> tuple[str, str] | None:
    """Split ``[alias ]name = command`` into its parts, or return None."""
    name, sep, command = line.partition("=")
    if not sep:
        return None
    name = trim(name)
    command = trim(command)
    if name.startswith("alias "):
        name = trim(name[len("alias "):])
    return name[:NAME_LIMIT], command[:COMMAND_LIMIT]


def load_aliases(path: str | os.PathLike, limit: int = MAX_ALIASES) -> dict[str, str]:
    """Read aliases from ``path``; the first definition of a name wins."""
    aliases: dict[str, str] = {}
    count = 0
    with open(path, encoding="utf-8", errors="replace") as handle:
        for raw in handle:
            line = remove_comment(trim(raw))
            if not line or "=" not in line:
                continue
            if count >= limit:
                print(f"Warning: Maximum number of aliases reached. Ignoring: {line}")
                continue
            parsed = parse_alias(line)
            if parsed is None:
                continue
            name, command = parsed
            aliases.setdefault(name, command)
            count += 1
    return aliases