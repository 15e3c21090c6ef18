"""A single-threaded TCP server speaking RESP."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Sequence

from kilodb.command import Unknown, parse_command
from kilodb.executor import execute_command
from kilodb.resp import RespError, parse_resp_array
from kilodb.store import Context

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 6379
_READ_SIZE = 512
_EMPTY_COMMAND = b"-ERR empty command\r\n"


def respond(data: bytes, context: Context) -> bytes:
    """Parse one request from raw bytes, run it, and return the reply bytes."""
    text = data.decode("utf-8", errors="replace")
    try:
        args = parse_resp_array(text)
    except RespError as exc:
        return f"-ERR {exc}\r\n".encode("utf-8")

    command = parse_command(args)
    if isinstance(command, Unknown):
        return _EMPTY_COMMAND
    return execute_command(command, context)


def handle_client(conn: socket.socket, context: Context) -> None:
    """Serve one connected client until it disconnects, then close it."""
    with conn:
        peer = conn.getpeername()
        print(f"Connected to: {peer}")
        while True:
            data = conn.recv(_READ_SIZE)
            if not data:
                print(f"Client {peer} disconnected.")
                return
            print(f"Received from {peer}:\n{data.decode('utf-8', errors='replace')}")
            conn.sendall(respond(data, context))


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, context: Context | None = None) -> None:
    """Accept clients one at a time, forever, sharing a single context."""
    if context is None:
        context = Context()
    with socket.create_server((host, port)) as listener:
        print(f"TCP server (single-threaded) listening on {host}:{port}")
        while True:
            try:
                conn, _ = listener.accept()
            except OSError as exc:
                print(f"Connection failed: {exc}", file=sys.stderr)
                continue
            try:
                handle_client(conn, context)
            except OSError as exc:
                print(f"Client error: {exc}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the server from the command line."""
    parser = argparse.ArgumentParser(prog="kilodb", description="A small RESP key-value server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    context = Context()
    print("Created singleton context for the entire program lifetime")
    try:
        serve(args.host, args.port, context)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"Server error: {exc}", file=sys.stderr)
        return 1
    return 0