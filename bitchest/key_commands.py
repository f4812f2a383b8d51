"""Commands that work on keys and string values, plus PING and MEMORY STATS."""

from __future__ import annotations

import re
import time
from collections.abc import Sequence

from bitchest import protocol
from bitchest.registry import Command, CommandError, register_command
from bitchest.store import InMemoryDB
from bitchest.values import StringValue

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int | None:
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def _parse_seconds(text: str) -> int:
    seconds = _parse_int(text)
    if seconds is None:
        raise CommandError("invalid expiration time")
    if seconds < 0:
        raise CommandError("expiration time must be non-negative")
    return seconds


class DelCommand(Command):
    """DEL key [key ...]: remove keys and reply with how many were removed."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if not args:
            raise CommandError("wrong number of arguments for 'DEL'")
        return protocol.integer(sum(1 for key in args if store.delete(key)))


class ExistsCommand(Command):
    """EXISTS key [key ...]: reply with how many of the keys exist."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if not args:
            raise CommandError("wrong number of arguments for 'EXISTS'")
        return protocol.integer(sum(1 for key in args if store.get(key) is not None))


class ExpireCommand(Command):
    """EXPIRE key seconds: reply 1 if the expiration was set, otherwise 0."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if len(args) != 2:
            raise CommandError("wrong number of arguments for 'EXPIRE'")
        key, seconds_text = args
        seconds = _parse_seconds(seconds_text)
        return protocol.integer(1 if store.set_expiration(key, seconds) else 0)


class FlushAllCommand(Command):
    """FLUSHALL: remove every key."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        store.flush_all()
        return protocol.simple("OK")


class GetCommand(Command):
    """GET key: reply with the string stored under key, or null."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if len(args) != 1:
            raise CommandError("wrong number of arguments for 'GET'")
        value = store.get(args[0])
        if value is None:
            return protocol.null_bulk()
        if not isinstance(value, StringValue):
            raise CommandError(
                "WRONGTYPE Operation against a key holding the wrong kind of value"
            )
        return protocol.bulk(value.val)


class KeysCommand(Command):
    """KEYS: reply with every live key."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if args:
            raise CommandError("wrong number of arguments for 'KEYS'")
        return protocol.array(store.keys())


class PingCommand(Command):
    """PING: reply PONG."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        return protocol.simple("PONG")


class SetCommand(Command):
    """SET key value [EX seconds] [NX|XX]: store a string value.

    Replies null when the NX or XX condition is not met.
    """

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if len(args) < 2:
            raise CommandError("wrong number of arguments for 'SET'")
        key, text, *options = args
        value = StringValue(text)
        condition_seen = False
        condition_failed = False

        remaining = iter(options)
        for option in remaining:
            if option in ("NX", "XX"):
                if condition_seen:
                    raise CommandError("multiple options NX or XX found")
                condition_seen = True
                exists = store.get(key) is not None
                if exists == (option == "NX"):
                    condition_failed = True
            elif option == "EX":
                seconds_text = next(remaining, None)
                if seconds_text is None:
                    raise CommandError("missing expiration time")
                value.expire_at = time.time() + _parse_seconds(seconds_text)
            else:
                raise CommandError("invalid option: " + option)

        if condition_failed:
            return protocol.null_bulk()
        store.set(key, value)
        return protocol.simple("OK")


class TTLCommand(Command):
    """TTL key: reply with the seconds left, -1 for no expiry, -2 if missing."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if len(args) != 1:
            raise CommandError("wrong number of arguments for 'TTL'")
        return protocol.integer(store.get_ttl(args[0]))


class MemoryStatsCommand(Command):
    """MEMORY STATS: reply with the store statistics as name=value strings."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if list(args) != ["STATS"]:
            raise CommandError("wrong number of arguments for 'MEMORY STATS'")
        stats = store.stats()
        return protocol.array(
            [
                f"keys={stats.keys}",
                f"memory_usage={stats.memory_usage}",
                f"memory_per_key={stats.memory_per_key}",
                f"peak_memory_usage={stats.peak_memory_usage}",
                f"number_of_expired_keys={stats.number_of_expired_keys}",
                f"data_size={stats.data_size}",
            ]
        )


for _name, _command in {
    "DEL": DelCommand(),
    "EXISTS": ExistsCommand(),
    "EXPIRE": ExpireCommand(),
    "FLUSHALL": FlushAllCommand(),
    "GET": GetCommand(),
    "KEYS": KeysCommand(),
    "PING": PingCommand(),
    "SET": SetCommand(),
    "TTL": TTLCommand(),
    "MEMORY": MemoryStatsCommand(),
}.items():
    register_command(_name, _command)