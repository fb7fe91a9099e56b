"""Cache port: Protocol for a bounded recency cache."""

from __future__ import annotations

from typing import Hashable, Iterator, Protocol, runtime_checkable

from ..domain.value_objects import CacheStats, Lookup


@runtime_checkable
class CachePort(Protocol):
    """Structural interface shared by the plain and lock-guarded caches.

    Values are typed as ``object``; callers that need the key and value
    types hold the concrete generic class instead.
    """

    @property
    def capacity(self) -> int:
        """Maximum number of entries held."""
        ...

    def get(self, key: Hashable) -> Lookup[object]:
        """Retrieve a value and mark it most recently used."""
        ...

    def put(self, key: Hashable, value: object) -> None:
        """Store a value, evicting the least recently used entry if full."""
        ...

    def peek(self, key: Hashable) -> Lookup[object]:
        """Retrieve a value without touching recency order."""
        ...

    def remove(self, key: Hashable) -> Lookup[object]:
        """Drop an entry, returning its former value."""
        ...

    def clear(self) -> None:
        ...

    def keys(self) -> list[Hashable]:
        """Keys ordered from most to least recently used."""
        ...

    def items(self) -> list[tuple[Hashable, object]]:
        ...

    def stats(self) -> CacheStats:
        ...

    def __getitem__(self, key: Hashable) -> object:
        ...

    def __contains__(self, key: object) -> bool:
        ...

    def __iter__(self) -> Iterator[Hashable]:
        ...

    def __len__(self) -> int:
        """Return the number of cached entries."""
        ...
