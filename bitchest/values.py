"""Value types that can be stored under a key."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from bitchest.queue import Queue

_EXPIRY_OVERHEAD = 8


class ValueType(str, Enum):
    """The kind of data held by a value."""

    STRING = "string"
    LIST = "list"
    SORTED_SET = "zset"


def _expired(expire_at: float | None) -> bool:
    return expire_at is not None and time.time() > expire_at


class Value(ABC):
    """Something that can be stored in the database."""

    @abstractmethod
    def value_type(self) -> ValueType:
        """Return the kind of this value."""

    @abstractmethod
    def is_expired(self) -> bool:
        """Return whether the value has passed its expiration time."""

    @abstractmethod
    def size(self) -> int:
        """Return the approximate size of the value in bytes."""


@dataclass
class StringValue(Value):
    """A string, optionally expiring at ``expire_at`` (seconds since the epoch)."""

    val: str
    expire_at: float | None = None

    def value_type(self) -> ValueType:
        return ValueType.STRING

    def is_expired(self) -> bool:
        return _expired(self.expire_at)

    def size(self) -> int:
        return len(self.val.encode("utf-8")) + _EXPIRY_OVERHEAD


@dataclass
class ListValue(Value):
    """A list of strings, optionally expiring at ``expire_at``."""

    items: Queue = field(default_factory=Queue)
    expire_at: float | None = None

    def value_type(self) -> ValueType:
        return ValueType.LIST

    def is_expired(self) -> bool:
        return _expired(self.expire_at)

    def size(self) -> int:
        return self.items.byte_size() + _EXPIRY_OVERHEAD


@dataclass
class SortedSetValue(Value):
    """A sorted set; it holds no data yet, never expires and has no size."""

    def value_type(self) -> ValueType:
        return ValueType.SORTED_SET

    def is_expired(self) -> bool:
        return False

    def size(self) -> int:
        return 0