"""A double-ended list of strings used as the storage for list values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class QueueEmptyError(IndexError):
    """Raised when taking an item from an empty queue."""

    def __init__(self) -> None:
        super().__init__("queue is empty")


class Queue:
    """An ordered sequence of strings that can grow or shrink at either end."""

    def __init__(self, items: Iterable[str] | None = None) -> None:
        self._items: list[str] = list(items) if items is not None else []

    def push(self, item: str) -> None:
        """Append ``item`` at the tail."""
        self._items.append(item)

    def pop(self) -> str:
        """Remove and return the last item."""
        if not self._items:
            raise QueueEmptyError()
        return self._items.pop()

    def shift(self) -> str:
        """Remove and return the first item."""
        if not self._items:
            raise QueueEmptyError()
        return self._items.pop(0)

    def unshift(self, item: str) -> None:
        """Insert ``item`` at the head."""
        self._items.insert(0, item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({self._items!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self._items == other._items

    def items(self) -> list[str]:
        """Return a copy of the items in order."""
        return list(self._items)

    def byte_size(self) -> int:
        """Return the total size of the items in bytes."""
        return sum(len(item.encode("utf-8")) for item in self._items)

    def index(self, idx: int) -> str:
        """Return the item at ``idx``; negative indexes are out of range."""
        if not 0 <= idx < len(self._items):
            raise IndexError("index out of range")
        return self._items[idx]

    def set(self, idx: int, value: str) -> None:
        """Replace the item at ``idx``; negative indexes are out of range."""
        if not 0 <= idx < len(self._items):
            raise IndexError("index out of range")
        self._items[idx] = value

    def remove(self, value: str, count: int) -> int:
        """Remove occurrences of ``value`` and return how many were removed.

        ``count > 0`` removes up to ``count`` from head to tail, ``count < 0``
        up to ``-count`` from tail to head, and ``count == 0`` removes all.
        """
        matches = [i for i, item in enumerate(self._items) if item == value]
        if count > 0:
            matches = matches[:count]
        elif count < 0:
            matches = matches[count:]
        doomed = set(matches)
        self._items = [item for i, item in enumerate(self._items) if i not in doomed]
        return len(doomed)