"""Encoders for the RESP-style replies the server sends to clients."""

from __future__ import annotations

from collections.abc import Iterable

CRLF = "\r\n"


def simple(msg: str) -> str:
    """Encode a simple string reply such as ``+OK``."""
    return f"+{msg}{CRLF}"


def bulk(msg: str) -> str:
    """Encode a bulk string reply: a byte-length line followed by the payload."""
    return f"${len(msg.encode('utf-8'))}{CRLF}{msg}{CRLF}"


def integer(n: int) -> str:
    """Encode an integer reply."""
    return f":{n}{CRLF}"


def error(msg: str) -> str:
    """Encode an error reply with the ``ERR`` prefix."""
    return f"-ERR {msg}{CRLF}"


def array(items: Iterable[str]) -> str:
    """Encode an array reply whose elements are bulk strings."""
    elements = list(items)
    return f"*{len(elements)}{CRLF}" + "".join(bulk(item) for item in elements)


def null_bulk() -> str:
    """Encode the null bulk string reply."""
    return f"$-1{CRLF}"