"""The command interface and the registry that maps names to commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from bitchest.store import InMemoryDB


class CommandError(Exception):
    """Raised when a command cannot be carried out; the message goes to the client."""


class Command(ABC):
    """A server command that turns arguments into an encoded reply."""

    @abstractmethod
    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        """Run the command against ``store`` and return the encoded reply."""


_REGISTRY: dict[str, Command] = {}


def register_command(name: str, command: Command) -> None:
    """Register ``command`` under ``name``, ignoring case."""
    _REGISTRY[name.upper()] = command


def extract_command(name: str) -> Command | None:
    """Return the command registered under ``name`` (ignoring case), or None."""
    return _REGISTRY.get(name.upper())