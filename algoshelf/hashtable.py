"""A fixed-size hash table with open addressing and linear probing."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

__all__ = ["DEFAULT_SIZE", "LinearProbingTable", "TableFullError"]

DEFAULT_SIZE = 128


class TableFullError(Exception):
    """Raised when a new key is inserted into a table with no free slot."""


class _Deleted:
    """Marker left in a slot whose entry was removed, so probe chains stay intact."""


_DELETED = _Deleted()


class LinearProbingTable:
    """Map keys to values in a fixed number of slots.

    A key starts at slot ``hash(key) % size`` (the key itself for integers)
    and moves to the next slot while the slot is taken by another key.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError(f"table size must be positive, got {size!r}")
        self._slots: list[tuple[Hashable, Any] | _Deleted | None] = [None] * size
        self._count = 0

    @property
    def size(self) -> int:
        """Number of slots."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def _probe(self, key: Hashable) -> list[int]:
        start = hash(key) % len(self._slots)
        return [(start + step) % len(self._slots) for step in range(len(self._slots))]

    def _find(self, key: Hashable) -> int | None:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _DELETED and slot[0] == key:
                return index
        return None

    def insert(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Raises TableFullError if the key is new and every slot is taken.
        """
        free: int | None = None
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                if free is None:
                    free = index
                break
            if slot is _DELETED:
                if free is None:
                    free = index
            elif slot[0] == key:
                self._slots[index] = (key, value)
                return
        if free is None:
            raise TableFullError(f"no free slot for key {key!r}")
        self._slots[free] = (key, value)
        self._count += 1

    def search(self, key: Hashable) -> Any:
        """Return the value stored under ``key``; raise KeyError if absent."""
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        slot = self._slots[index]
        assert isinstance(slot, tuple)
        return slot[1]

    def remove(self, key: Hashable) -> None:
        """Delete ``key``; raise KeyError if absent."""
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        self._slots[index] = _DELETED
        self._count -= 1

    def __contains__(self, key: Hashable) -> bool:
        return self._find(key) is not None