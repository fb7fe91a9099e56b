"""Linked-list node backing the recency order."""

from __future__ import annotations

from typing import Any


class Entry:
    """A key/value record linked into the recency list.

    The node itself is the position handle stored in the cache index, so
    relinking an entry never requires scanning.
    """

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.prev: Entry | None = None
        self.next: Entry | None = None

    def __repr__(self) -> str:
        return f"Entry(key={self.key!r}, value={self.value!r})"
