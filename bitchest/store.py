"""The thread-safe in-memory key-value store."""

from __future__ import annotations

import dataclasses
import threading
import time
from dataclasses import dataclass

from bitchest.values import StringValue, Value


@dataclass
class Stats:
    """Counters describing the contents of the store."""

    keys: int = 0
    memory_usage: int = 0
    memory_per_key: int = 0
    peak_memory_usage: int = 0
    number_of_expired_keys: int = 0
    data_size: int = 0


class InMemoryDB:
    """A dictionary of values guarded by a lock, with expiry and statistics."""

    def __init__(self) -> None:
        self._data: dict[str, Value] = {}
        self._lock = threading.RLock()
        self._stats = Stats()

    def set(self, key: str, value: Value) -> None:
        """Store ``value`` under ``key`` and update the statistics."""
        with self._lock:
            self._data[key] = value
            stats = self._stats
            stats.keys += 1
            stats.data_size += 1
            stats.memory_usage += value.size()
            stats.memory_per_key = stats.memory_usage // stats.data_size
            stats.peak_memory_usage = max(stats.peak_memory_usage, stats.memory_usage)

    def get(self, key: str) -> Value | None:
        """Return the live value under ``key``, or None; expired keys are dropped."""
        with self._lock:
            value = self._data.get(key)
            if value is None:
                return None
            if value.is_expired():
                del self._data[key]
                self._stats.number_of_expired_keys += 1
                return None
            return value

    def keys(self) -> list[str]:
        """Return every key whose value has not expired."""
        with self._lock:
            return [key for key, value in self._data.items() if not value.is_expired()]

    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        with self._lock:
            value = self._data.pop(key, None)
            if value is None:
                return False
            stats = self._stats
            stats.keys -= 1
            stats.data_size -= 1
            stats.memory_usage -= value.size()
            stats.memory_per_key = (
                stats.memory_usage // stats.data_size if stats.data_size > 0 else 0
            )
            return True

    def flush_all(self) -> None:
        """Remove every key, keeping the peak and expired-key counters."""
        with self._lock:
            self._data = {}
            self._stats = Stats(
                peak_memory_usage=self._stats.peak_memory_usage,
                number_of_expired_keys=self._stats.number_of_expired_keys,
            )

    def set_expiration(self, key: str, seconds: int) -> bool:
        """Make ``key`` expire in ``seconds``; only string values support this."""
        with self._lock:
            value = self._data.get(key)
            if not isinstance(value, StringValue):
                return False
            value.expire_at = time.time() + seconds
            return True

    def get_ttl(self, key: str) -> int:
        """Return seconds left for ``key``: -2 if missing or expired, -1 if none set."""
        with self._lock:
            value = self._data.get(key)
            if value is None or value.is_expired():
                return -2
            if not isinstance(value, StringValue) or value.expire_at is None:
                return -1
            ttl = int(value.expire_at - time.time())
            return -2 if ttl < 0 else ttl

    def cleanup_expired(self) -> int:
        """Drop every expired key and return how many were removed."""
        with self._lock:
            expired = [key for key, value in self._data.items() if value.is_expired()]
            for key in expired:
                del self._data[key]
            return len(expired)

    def stats(self) -> Stats:
        """Return a snapshot of the statistics."""
        with self._lock:
            return dataclasses.replace(self._stats)