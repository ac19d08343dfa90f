"""Bounded FIFO of background jobs and the helpers that start and reap them."""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass
from typing import Iterator

BG_MAX = 100
COMMAND_LIMIT = 255
STATE_LIMIT = 9


@dataclass
class BackgroundProcess:
    """A job the shell has sent to the background."""

    pid: int
    command: str
    state: str = "Running"


class BackgroundQueueFull(Exception):
    """Raised when no more background jobs can be tracked."""

    def __init__(self) -> None:
        super().__init__("Too many background processes running at a time.")


class BackgroundQueue:
    """A first-in, first-out queue of background jobs with a fixed capacity."""

    def __init__(self, capacity: int = BG_MAX) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[BackgroundProcess] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[BackgroundProcess]:
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def enqueue(self, pid: int, command: str, state: str = "Running") -> BackgroundProcess:
        """Add a job at the back; command and state are cut to their fixed widths."""
        if self.is_full():
            raise BackgroundQueueFull()
        process = BackgroundProcess(pid, command[:COMMAND_LIMIT], state[:STATE_LIMIT])
        self._items.append(process)
        return process

    def dequeue(self) -> BackgroundProcess:
        """Remove and return the oldest job."""
        if not self._items:
            raise IndexError("background queue is empty")
        return self._items.popleft()

    def find(self, pid: int) -> BackgroundProcess | None:
        """Return the job with this pid, or None."""
        return next((p for p in self._items if p.pid == pid), None)


def launch_background(queue: BackgroundQueue, command: str) -> int:
    """Start ``command`` under bash without waiting, print its pid and track it."""
    if queue.is_full():
        raise BackgroundQueueFull()
    pid = os.posix_spawn("/bin/bash", ["/bin/bash", "-c", command], dict(os.environ))
    print(pid, flush=True)
    queue.enqueue(pid, command, "Running")
    return pid


def reap_background(queue: BackgroundQueue) -> list[str]:
    """Collect finished jobs and return a report line for each one."""
    messages: list[str] = []
    pending = [queue.dequeue() for _ in range(len(queue))]
    for process in pending:
        try:
            pid, status = os.waitpid(process.pid, os.WNOHANG)
        except ChildProcessError:
            continue
        if pid == 0:
            queue.enqueue(process.pid, process.command, process.state)
            continue
        kind = "normally" if os.WIFEXITED(status) else "abnormally"
        messages.append(f"{process.command} exited {kind} ({process.pid})")
    return messages