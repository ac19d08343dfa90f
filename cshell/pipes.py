"""Running commands joined by ``|``, each reading what the previous one wrote."""

from __future__ import annotations

import contextlib
import os
import sys
import tempfile
from typing import IO, Callable, Iterator

from .state import trim

MAX_COMMANDS = 256


def split_pipeline(command: str) -> list[str]:
    """The trimmed, non-blank commands between ``|`` signs, at most 256."""
    parts = (trim(part) for part in command.split("|"))
    return [part for part in parts if part][:MAX_COMMANDS]


@contextlib.contextmanager
def _redirect_fd(target: int, fd: int) -> Iterator[None]:
    saved = os.dup(target)
    os.dup2(fd, target)
    try:
        yield
    finally:
        os.dup2(saved, target)
        os.close(saved)


@contextlib.contextmanager
def _stdout_to(fd: int) -> Iterator[None]:
    sys.stdout.flush()
    with _redirect_fd(1, fd):
        stream = open(os.dup(1), "w", encoding="utf-8", errors="replace")
        try:
            with contextlib.redirect_stdout(stream):
                yield
        finally:
            stream.close()


@contextlib.contextmanager
def _streams(source: IO[bytes] | None, sink: IO[bytes] | None) -> Iterator[None]:
    with contextlib.ExitStack() as stack:
        if source is not None:
            stack.enter_context(_redirect_fd(0, source.fileno()))
        if sink is not None:
            stack.enter_context(_stdout_to(sink.fileno()))
        yield


def run_pipeline(command: str, execute: Callable[[str], object]) -> None:
    """Run each stage in turn, feeding its output to the next stage's input."""
    commands = split_pipeline(command)
    if len(commands) < 2:
        raise ValueError("Invalid use of pipe")
    previous: IO[bytes] | None = None
    try:
        for position, part in enumerate(commands, 1):
            output = tempfile.TemporaryFile() if position < len(commands) else None
            try:
                with _streams(previous, output):
                    execute(part)
            finally:
                if previous is not None:
                    previous.close()
                previous = output
            if output is not None:
                output.seek(0)
    finally:
        if previous is not None:
            previous.close()