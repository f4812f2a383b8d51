"""Serve one client connection: read command lines and write encoded replies."""

from __future__ import annotations

import logging
import time
from typing import BinaryIO

from bitchest import key_commands, list_commands, protocol
from bitchest.registry import CommandError, extract_command
from bitchest.store import InMemoryDB
from bitchest.tokenizer import TokenizeError, tokenize

# The command modules register their commands when imported.
_COMMAND_MODULES = (key_commands, list_commands)

log = logging.getLogger(__name__)


def execute_line(line: str, store: InMemoryDB) -> str | None:
    """Run one command line against ``store`` and return the encoded reply.

    Returns None when the line holds no command, in which case nothing is sent.
    """
    text = line.strip()
    if not text:
        return None
    try:
        parts = tokenize(text)
    except TokenizeError as exc:
        log.info("Command error: %s", exc)
        return protocol.error(str(exc))
    if not parts:
        return None

    name, *args = parts
    name = name.upper()
    command = extract_command(name)
    if command is None:
        message = f"unknown command '{name}'"
        log.info("Command error: %s", message)
        return protocol.error(message)

    started = time.perf_counter()
    try:
        reply = command.execute(args, store)
    except CommandError as exc:
        elapsed = time.perf_counter() - started
        log.info("Command '%s' failed after %.6fs: %s", name, elapsed, exc)
        return protocol.error(str(exc))
    elapsed = time.perf_counter() - started
    log.info("Command '%s' completed successfully in %.6fs", name, elapsed)
    return reply


def handle(
    rfile: BinaryIO, wfile: BinaryIO, store: InMemoryDB, client_addr: str = "unknown"
) -> None:
    """Read newline-terminated commands from ``rfile`` until the client goes away."""
    while True:
        try:
            raw = rfile.readline()
        except OSError as exc:
            log.info("[%s] Read error: %s", client_addr, exc)
            return
        if not raw.endswith(b"\n"):
            log.info("[%s] Client disconnected", client_addr)
            return

        line = raw.decode("utf-8", errors="replace").strip()
        if not line:
            continue
        log.info("[%s] Received command: %s", client_addr, line)

        reply = execute_line(line, store)
        if reply is None:
            continue
        try:
            wfile.write(reply.encode("utf-8"))
            wfile.flush()
        except OSError as exc:
            log.info("[%s] Write error: %s", client_addr, exc)
            return