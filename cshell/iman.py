"""The ``iMan`` builtin: fetch a manual page over HTTP."""

from __future__ import annotations

import socket
import sys

HOST = "man.he.net"
PORT = 80
CHUNK = 4095


def strip_tags(text: str) -> str:
    """Drop everything between ``<`` and ``>``, the brackets included."""
    kept: list[str] = []
    in_tag = False
    for char in text:
        if char == "<":
            in_tag = True
        elif char == ">":
            in_tag = False
        elif not in_tag:
            kept.append(char)
    return "".join(kept)


def build_request(topic: str) -> bytes:
    """The HTTP request asking for the manual page of ``topic``."""
    path = f"/?topic={topic}&section=all"
    return f"GET {path} HTTP/1.1\r\nHost: {HOST}\r\nConnection: close\r\n\r\n".encode()


def fetch_man_page(topic: str) -> str:
    """Download the page for ``topic`` and return its text from ``NAME`` on."""
    request = build_request(topic)
    try:
        connection = socket.create_connection((HOST, PORT))
    except socket.gaierror as exc:
        raise ConnectionError(
            f"getaddrinfo: {exc.strerror or exc}\nFailed to resolve host name!"
        ) from exc
    except OSError as exc:
        raise ConnectionError(f"Failed to connect to {HOST}") from exc
    chunks: list[bytes] = []
    with connection:
        try:
            connection.sendall(request)
        except OSError as exc:
            raise ConnectionError(f"send failed ({exc.strerror or exc})\nFailed to send request") from exc
        try:
            while chunk := connection.recv(CHUNK):
                chunks.append(chunk)
        except OSError as exc:
            print(f"recv failed ({exc.strerror or exc})", file=sys.stderr)
    text = b"".join(chunks).decode("utf-8", errors="replace")
    start = text.find("NAME")
    if start == -1:
        raise LookupError("No such command found")
    return strip_tags(text[start:])


def iman_command(args: list[str]) -> None:
    """Print the manual page named by the first argument."""
    if not args:
        print("Error: No command specified for iMan", file=sys.stderr)
        return
    try:
        page = fetch_man_page(args[0])
    except (ConnectionError, LookupError) as exc:
        print(exc.args[0] if exc.args else exc, file=sys.stderr)
        return
    sys.stdout.write(page)
    sys.stdout.flush()