"""Input and output redirection for a single command."""

from __future__ import annotations

import contextlib
import os
import sys
from dataclasses import dataclass
from typing import Callable, Iterator

from .state import MAX_LENGTH, trim

_WHITESPACE = " \t\n\v\f\r"


@dataclass(frozen=True)
class Redirection:
    """A command with the files its input and output are tied to."""

    command: str
    input_file: str | None = None
    output_file: str | None = None
    append: bool = False


def is_custom_command(command: str) -> bool:
    """Whether an input file's text is appended to the command's arguments.

    Every command qualifies except those that start with ``proclore``.
    """
    return not command.startswith("proclore")


def _first_word(text: str) -> str | None:
    words = text.split()
    return words[0] if words else None


def parse_redirection(command: str) -> Redirection:
    """Split ``cmd < in > out`` or ``cmd >> out`` into its parts."""
    input_file: str | None = None
    output_file: str | None = None
    append = False
    if "<" in command:
        before, _, after = command.partition("<")
        inner, arrow, rest = after.partition(">")
        input_file = _first_word(inner)
        if arrow:
            rest = rest.lstrip(_WHITESPACE)
            if rest.startswith(">"):
                append = True
                rest = rest[1:]
            output_file = _first_word(rest)
    else:
        before, _, after = command.partition(">")
        stripped = after.lstrip(_WHITESPACE)
        if stripped.startswith(">"):
            append = True
            output_file = trim(stripped[1:].lstrip(">").split(">")[0])
        else:
            output_file = _first_word(after)
        if not output_file:
            raise ValueError("missing output file")
    program = trim(before)
    if not program:
        raise ValueError("missing command")
    return Redirection(program, input_file, output_file, append)


@contextlib.contextmanager
def _stdout_to(fd: int) -> Iterator[None]:
    """Send both descriptor 1 and ``sys.stdout`` to ``fd`` for the duration."""
    sys.stdout.flush()
    saved = os.dup(1)
    os.dup2(fd, 1)
    stream = open(os.dup(1), "w", encoding="utf-8", errors="replace")
    try:
        with contextlib.redirect_stdout(stream):
            yield
    finally:
        stream.close()
        os.dup2(saved, 1)
        os.close(saved)


def redirection_handler(command: str, execute: Callable[[str], object]) -> Redirection:
    """Run ``command`` through ``execute`` with its redirections applied."""
    spec = parse_redirection(command)
    output_fd: int | None = None
    if spec.output_file is not None:
        flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if spec.append else os.O_TRUNC)
        try:
            output_fd = os.open(spec.output_file, flags, 0o644)
        except OSError as exc:
            print(f"Error opening output file: {exc.strerror or exc}", file=sys.stderr)
            return spec
    try:
        line = spec.command
        if spec.input_file is not None and is_custom_command(spec.command):
            try:
                with open(spec.input_file, "rb") as handle:
                    data = handle.read(MAX_LENGTH - 1)
            except OSError as exc:
                print(f"Error opening input file: {exc.strerror or exc}", file=sys.stderr)
                return spec
            contents = data.decode("utf-8", errors="replace")
            line = f"{spec.command} {contents}"[: MAX_LENGTH - 1]
        guard = _stdout_to(output_fd) if output_fd is not None else contextlib.nullcontext()
        with guard:
            execute(line)
    finally:
        if output_fd is not None:
            os.close(output_fd)
    return spec