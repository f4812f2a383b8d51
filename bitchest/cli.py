"""An interactive command-line client for the server."""

from __future__ import annotations

import socket
import sys
from collections.abc import Sequence
from typing import BinaryIO

DEFAULT_HOST = "localhost"
DEFAULT_PORT = "7463"
_RESPONSE_TIMEOUT = 0.1

_HELP = """\
Available commands:
  SET key value [EX seconds] [NX|XX]  - Set a key with optional expiration and conditions
  GET key                             - Get the value of a key
  DEL key1 [key2 ...]                 - Delete one or more keys
  EXISTS key1 [key2 ...]              - Check if keys exist
  KEYS                                - List all keys
  FLUSHALL                            - Remove all keys
  EXPIRE key seconds                  - Set expiration for a key
  TTL key                             - Get time to live for a key
  PING                                - Test server connection

Special commands:
  help                                - Show this help
  clear                               - Clear screen
  quit, exit                          - Close connection

Examples:
  SET user:123 name John
  SET session:456 token abc123 EX 3600
  SET counter 1 NX
  GET user:123
  TTL session:456"""


def _read_line(reader: BinaryIO) -> str:
    raw = reader.readline()
    if not raw.endswith(b"\n"):
        raise EOFError("connection closed by server")
    return raw.decode("utf-8", errors="replace").strip()


def read_array_element(reader: BinaryIO) -> str:
    """Read one array element and return it ready for display."""
    line = _read_line(reader)
    if line.startswith("$"):
        if line == "$-1":
            return "(nil)"
        return _read_line(reader)
    return line


def format_array_output(elements: Sequence[str]) -> str:
    """Format array elements: ``name=value`` lines as they are, others numbered."""
    if not elements:
        return "(empty list or set)"
    if "=" in elements[0]:
        return "\n".join(elements)
    return "\n".join(f"{n}) {element}" for n, element in enumerate(elements, start=1))


def read_response(conn: socket.socket) -> str:
    """Read one reply from ``conn``; an empty string if none arrives in time."""
    conn.settimeout(_RESPONSE_TIMEOUT)
    with conn.makefile("rb") as reader:
        try:
            first = _read_line(reader)
        except TimeoutError:
            return ""
        finally:
            conn.settimeout(None)

        if first.startswith("$"):
            if first == "$-1":
                return "(nil)"
            return _read_line(reader)
        if first.startswith("*"):
            if first == "*0":
                return "(empty list or set)"
            try:
                length = int(first[1:])
            except ValueError as exc:
                raise ValueError(f"invalid array format: {exc}") from exc
            elements = []
            for n in range(1, length + 1):
                try:
                    elements.append(read_array_element(reader))
                except (EOFError, OSError) as exc:
                    raise EOFError(f"error reading array element {n}: {exc}") from exc
            return format_array_output(elements)
        return first


def print_help() -> None:
    """Print the list of commands."""
    print(_HELP)


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to a server and run an interactive prompt."""
    args = list(sys.argv[1:] if argv is None else argv)
    host = args[0] if len(args) > 0 else DEFAULT_HOST
    port = args[1] if len(args) > 1 else DEFAULT_PORT

    try:
        conn = socket.create_connection((host, int(port)))
    except (OSError, ValueError) as exc:
        print(f"Error connecting to server {host}:{port}: {exc}")
        return 1

    with conn:
        print(f"Connected to Bitchest server at {host}:{port}")
        print("Type 'quit' or 'exit' to close the connection")
        print("Type 'help' for available commands")
        print()

        while True:
            try:
                command = input("bitchest> ").strip()
            except EOFError:
                return 0
            if not command:
                continue

            special = command.lower()
            if special in ("quit", "exit"):
                print("Goodbye!")
                return 0
            if special == "help":
                print_help()
                continue
            if special == "clear":
                print("\033[H\033[2J", end="")
                continue

            try:
                conn.sendall((command + "\n").encode("utf-8"))
            except OSError as exc:
                print(f"Error sending command: {exc}")
                return 1
            try:
                response = read_response(conn)
            except (OSError, EOFError, ValueError) as exc:
                print(f"Error reading response: {exc}")
                return 1
            if response:
                print(response)


if __name__ == "__main__":
    sys.exit(main())