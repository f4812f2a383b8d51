"""The TCP server that exposes the in-memory store."""

from __future__ import annotations

import argparse
import logging
import socket
import socketserver
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from bitchest.handler import handle
from bitchest.store import InMemoryDB

log = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 7463
MIN_PORT = 1024
MAX_PORT = 65535


class ServerError(Exception):
    """Raised when the server cannot start."""


def _join_host_port(host: str, port: int | str) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


@dataclass(frozen=True)
class Config:
    """Where the server listens."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @property
    def addr(self) -> str:
        """The ``host:port`` address, with IPv6 hosts in brackets."""
        return _join_host_port(self.host, self.port)


def parse_args(argv: Sequence[str] | None = None) -> Config:
    """Build a Config from command-line options; exits on a bad port."""
    parser = argparse.ArgumentParser(
        prog="bitchest",
        description="Bitchest - A lightweight in-memory key-value database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  %(prog)s                    # Start on localhost:7463\n"
            "  %(prog)s -port 6379         # Start on localhost:6379\n"
            "  %(prog)s -host 0.0.0.0      # Start on all interfaces\n"
            "  %(prog)s -host 0.0.0.0 -port 6379  # Start on all interfaces:6379\n"
        ),
    )
    parser.add_argument(
        "-host", "--host", default=DEFAULT_HOST, help="Host to bind the server to"
    )
    parser.add_argument(
        "-port", "--port", type=int, default=DEFAULT_PORT, help="Port to bind the server to"
    )
    options = parser.parse_args(argv)
    if not MIN_PORT <= options.port <= MAX_PORT:
        parser.error(
            f"Invalid port number: {options.port}. "
            f"Port must be between {MIN_PORT} and {MAX_PORT}"
        )
    return Config(host=options.host, port=options.port)


class _ClientHandler(socketserver.StreamRequestHandler):
    def handle(self) -> None:
        client_addr = _join_host_port(str(self.client_address[0]), self.client_address[1])
        log.info("New client connected: %s", client_addr)
        handle(self.rfile, self.wfile, self.server.store, client_addr)
        log.info("Client disconnected: %s", client_addr)


class _Server(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, address: tuple[str, int], store: InMemoryDB) -> None:
        self.store = store
        super().__init__(address, _ClientHandler)


class _Server6(_Server):
    address_family = socket.AF_INET6


def start_server(config: Config) -> None:
    """Listen on ``config.addr`` and serve clients until interrupted."""
    store = InMemoryDB()
    server_cls = _Server6 if ":" in config.host else _Server
    try:
        server = server_cls((config.host, config.port), store)
    except (OSError, OverflowError) as exc:
        raise ServerError(f"failed to bind on {config.addr}: {exc}") from exc

    with server:
        log.info("Bitchest is running on %s", config.addr)
        log.info("Waiting for connections...")
        server.serve_forever()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse options and run the server."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    config = parse_args(argv)
    try:
        start_server(config)
    except ServerError as exc:
        log.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())