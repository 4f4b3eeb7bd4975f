"""A fixed-capacity least-recently-used cache."""

from __future__ import annotations

from collections import OrderedDict

MISSING = -1


class LRUCache:
    """Maps integer keys to integer values, evicting the least recently used entry.

    Both reading (``get``) and writing (``put``) an entry count as a use.
    A cache with capacity zero stores nothing.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        # Most recently used entries sit at the end.
        self._entries: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value stored under ``key`` and mark it as used, or -1 if absent."""
        if key not in self._entries:
            return MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the least recently used entry if full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        self._entries[key] = value
        if len(self._entries) > self.capacity:
            self._entries.popitem(last=False)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries