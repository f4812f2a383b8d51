"""Commands that work on list values: pushing, popping, indexing and ranges."""

from __future__ import annotations

import re
from collections.abc import Sequence

from bitchest import protocol
from bitchest.queue import Queue, QueueEmptyError
from bitchest.registry import Command, CommandError, register_command
from bitchest.store import InMemoryDB
from bitchest.values import ListValue

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, message: str) -> int:
    if _INTEGER.fullmatch(text) is None:
        raise CommandError(message)
    return int(text)


def _lookup_list(store: InMemoryDB, key: str, name: str) -> ListValue | None:
    """Return the list under ``key``, None if missing; raise if it is not a list."""
    value = store.get(key)
    if value is None:
        return None
    if not isinstance(value, ListValue):
        raise CommandError(f"wrong type for '{name}'")
    return value


class LIndexCommand(Command):
    """LINDEX key index: reply with the element at index, or null if out of range."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if len(args) != 2:
            raise CommandError("wrong number of arguments for 'LINDEX'")
        key, index_text = args
        index = _parse_int(index_text, "invalid index for 'LINDEX'")
        lst = _lookup_list(store, key, "LINDEX")
        if lst is None:
            return protocol.null_bulk()
        if index < 0:
            index += len(lst.items)
        try:
            return protocol.bulk(lst.items.index(index))
        except IndexError:
            return protocol.null_bulk()


class LLenCommand(Command):
    """LLEN key: reply with the length of the list, 0 if the key is missing."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if len(args) != 1:
            raise CommandError("wrong number of arguments for 'LLEN'")
        lst = _lookup_list(store, args[0], "LLEN")
        return protocol.integer(0 if lst is None else len(lst.items))


class _PopCommand(Command):
    """Shared logic for LPOP and RPOP."""

    name = ""

    def _take(self, items: Queue) -> str:
        raise NotImplementedError

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if not 1 <= len(args) <= 2:
            raise CommandError(f"wrong number of arguments for '{self.name}'")
        key = args[0]
        with_count = len(args) == 2
        count = (
            _parse_int(args[1], f"invalid count for '{self.name}'") if with_count else 1
        )
        lst = _lookup_list(store, key, self.name)
        if lst is None:
            return protocol.null_bulk()

        popped: list[str] = []
        for _ in range(count):
            try:
                popped.append(self._take(lst.items))
            except QueueEmptyError:
                break
        if not popped:
            return protocol.null_bulk()

        store.set(key, lst)
        if with_count:
            return protocol.array(popped)
        return protocol.bulk(popped[0])


class LPopCommand(_PopCommand):
    """LPOP key [count]: remove and reply with elements from the head."""

    name = "LPOP"

    def _take(self, items: Queue) -> str:
        return items.shift()

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        return super().execute(args, store)


class RPopCommand(_PopCommand):
    """RPOP key [count]: remove and reply with elements from the tail."""

    name = "RPOP"

    def _take(self, items: Queue) -> str:
        return items.pop()

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        return super().execute(args, store)


class _PushCommand(Command):
    """Shared logic for LPUSH and RPUSH."""

    name = ""

    def _put(self, items: Queue, value: str) -> None:
        raise NotImplementedError

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if len(args) < 2:
            raise CommandError(f"wrong number of arguments for '{self.name}'")
        key, *values = args
        lst = _lookup_list(store, key, self.name)
        if lst is None:
            lst = ListValue()
        for value in values:
            self._put(lst.items, value)
        store.set(key, lst)
        return protocol.integer(len(lst.items))


class LPushCommand(_PushCommand):
    """LPUSH key value [value ...]: insert values at the head, one after another."""

    name = "LPUSH"

    def _put(self, items: Queue, value: str) -> None:
        items.unshift(value)

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        return super().execute(args, store)


class RPushCommand(_PushCommand):
    """RPUSH key value [value ...]: append values at the tail."""

    name = "RPUSH"

    def _put(self, items: Queue, value: str) -> None:
        items.push(value)

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        return super().execute(args, store)


class LRangeCommand(Command):
    """LRANGE key start stop: reply with the elements between two inclusive indexes."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if len(args) != 3:
            raise CommandError("wrong number of arguments for 'LRANGE'")
        key, start_text, stop_text = args
        start = _parse_int(start_text, "invalid start index for 'LRANGE'")
        stop = _parse_int(stop_text, "invalid stop index for 'LRANGE'")
        lst = _lookup_list(store, key, "LRANGE")
        if lst is None:
            return protocol.array([])

        items = lst.items.items()
        length = len(items)
        if start < 0:
            start = max(length + start, 0)
        if stop < 0:
            stop += length
        if start >= length:
            return protocol.array([])
        stop = min(stop, length - 1)
        if start > stop:
            return protocol.array([])
        return protocol.array(items[start : stop + 1])


class LRemCommand(Command):
    """LREM key count value: remove occurrences of value and reply with how many."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if len(args) != 3:
            raise CommandError("wrong number of arguments for 'LREM'")
        key, count_text, value = args
        count = _parse_int(count_text, "invalid count for 'LREM'")
        lst = _lookup_list(store, key, "LREM")
        if lst is None:
            return protocol.integer(0)
        removed = lst.items.remove(value, count)
        store.set(key, lst)
        return protocol.integer(removed)


class LSetCommand(Command):
    """LSET key index value: replace the element at index."""

    def execute(self, args: Sequence[str], store: InMemoryDB) -> str:
        if len(args) != 3:
            raise CommandError("wrong number of arguments for 'LSET'")
        key, index_text, value = args
        index = _parse_int(index_text, "invalid index for 'LSET'")
        lst = _lookup_list(store, key, "LSET")
        if lst is None:
            return protocol.null_bulk()
        if index < 0:
            index += len(lst.items)
        try:
            lst.items.set(index, value)
        except IndexError:
            raise CommandError("index out of range") from None
        store.set(key, lst)
        return protocol.bulk("OK")


for _name, _command in {
    "LINDEX": LIndexCommand(),
    "LLEN": LLenCommand(),
    "LPOP": LPopCommand(),
    "LPUSH": LPushCommand(),
    "LRANGE": LRangeCommand(),
    "LREM": LRemCommand(),
    "LSET": LSetCommand(),
    "RPOP": RPopCommand(),
    "RPUSH": RPushCommand(),
}.items():
    register_command(_name, _command)