"""Split a command line into arguments, honouring quotes and backslash escapes."""

from __future__ import annotations


class TokenizeError(ValueError):
    """Raised when a command line cannot be split into tokens."""


def tokenize(text: str) -> list[str]:
    """Split ``text`` into tokens.

    A quote opens a quoted token only after whitespace; elsewhere it is kept
    literally. A backslash makes the next character literal. Empty quoted
    tokens are dropped.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quote = False
    quote_char = ""
    escaped = False
    previous_space = False

    def flush() -> None:
        if current:
            tokens.append("".join(current).strip())
            current.clear()

    for ch in text:
        if escaped:
            current.append(ch)
            escaped = False
            previous_space = False
        elif ch == "\\":
            escaped = True
        elif ch in ("'", '"'):
            if in_quote:
                if ch == quote_char:
                    flush()
                    in_quote = False
                    previous_space = False
                else:
                    current.append(ch)
            elif not previous_space:
                current.append(ch)
            else:
                in_quote = True
                quote_char = ch
                previous_space = False
        elif ch.isspace():
            if in_quote:
                current.append(ch)
            elif not previous_space:
                flush()
            previous_space = True
        else:
            current.append(ch)
            previous_space = False

    if in_quote:
        raise TokenizeError("unterminated quote")

    flush()
    return tokens