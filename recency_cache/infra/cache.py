"""Bounded LRU cache backed by a dict index and an intrusive linked list."""

from __future__ import annotations

import operator
from threading import Lock
from typing import Callable, Generic, Hashable, Iterator, TypeVar

import structlog

from ..domain.errors import InvalidConfiguration
from ..domain.models import Entry
from ..domain.value_objects import NOT_FOUND, CacheStats, Lookup

logger = structlog.get_logger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

EvictionCallback = Callable[[K, V], None]


def _validate_capacity(capacity: object) -> int:
    value = 0
    if not isinstance(capacity, bool):
        try:
            value = operator.index(capacity)
        except TypeError:
            value = 0
    if value < 1:
        logger.warning("invalid_cache_capacity", capacity=repr(capacity))
        raise InvalidConfiguration(capacity)
    return value


class LRUCache(Generic[K, V]):
    """Fixed-capacity cache that evicts the least recently used entry.

    Entries live in a doubly-linked list between two sentinels, most
    recently used right after ``_head`` and least recently used right
    before ``_tail``. ``_index`` maps each key to its node, so every
    operation that touches a single key is O(1).

    Not thread-safe; wrap in :class:`SynchronizedLRUCache` for shared use.
    """

    def __init__(
        self,
        capacity: int,
        *,
        on_evict: EvictionCallback | None = None,
    ) -> None:
        self._capacity = _validate_capacity(capacity)
        self._on_evict = on_evict
        self._index: dict[K, Entry] = {}
        self._head = Entry(None, None)
        self._tail = Entry(None, None)
        self._head.next = self._tail
        self._tail.prev = self._head
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        logger.debug("cache_created", capacity=self._capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        node = self._head.next
        while node is not self._tail:
            yield node.key
            node = node.next

    def __getitem__(self, key: K) -> V:
        lookup = self.get(key)
        if not lookup.found:
            raise KeyError(key)
        return lookup.value  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self)})"

    def get(self, key: K) -> Lookup[V]:
        node = self._index.get(key)
        if node is None:
            self._misses += 1
            return NOT_FOUND
        self._hits += 1
        self._move_to_front(node)
        return Lookup.hit(node.value)

    def put(self, key: K, value: V) -> None:
        node = self._index.get(key)
        if node is not None:
            node.value = value
            self._move_to_front(node)
            return

        evicted: Entry | None = None
        if len(self._index) >= self._capacity:
            evicted = self._evict_last()

        node = Entry(key, value)
        self._index[key] = node
        self._push_front(node)

        if evicted is not None and self._on_evict is not None:
            self._on_evict(evicted.key, evicted.value)

    def peek(self, key: K) -> Lookup[V]:
        """Read a value without counting it as an access."""
        node = self._index.get(key)
        if node is None:
            return NOT_FOUND
        return Lookup.hit(node.value)

    def remove(self, key: K) -> Lookup[V]:
        node = self._index.pop(key, None)
        if node is None:
            return NOT_FOUND
        self._unlink(node)
        return Lookup.hit(node.value)

    def clear(self) -> None:
        self._index.clear()
        self._head.next = self._tail
        self._tail.prev = self._head

    def keys(self) -> list[K]:
        """Keys ordered from most to least recently used."""
        return list(self)

    def items(self) -> list[tuple[K, V]]:
        result = []
        node = self._head.next
        while node is not self._tail:
            result.append((node.key, node.value))
            node = node.next
        return result

    def stats(self) -> CacheStats:
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
            size=len(self._index),
            capacity=self._capacity,
        )

    def _push_front(self, node: Entry) -> None:
        first = self._head.next
        node.prev = self._head
        node.next = first
        first.prev = node
        self._head.next = node

    def _unlink(self, node: Entry) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None

    def _move_to_front(self, node: Entry) -> None:
        if self._head.next is node:
            return
        self._unlink(node)
        self._push_front(node)

    def _evict_last(self) -> Entry:
        node = self._tail.prev
        self._unlink(node)
        del self._index[node.key]
        self._evictions += 1
        logger.debug("cache_entry_evicted", key=repr(node.key), capacity=self._capacity)
        return node


class SynchronizedLRUCache(Generic[K, V]):
    """Thread-safe LRU cache with a bounded capacity.

    A single lock guards the index and the recency list together. The
    eviction callback runs with the lock held and must not re-enter the
    cache.
    """

    def __init__(
        self,
        capacity: int,
        *,
        on_evict: EvictionCallback | None = None,
    ) -> None:
        self._cache: LRUCache[K, V] = LRUCache(capacity, on_evict=on_evict)
        self._lock = Lock()

    @property
    def capacity(self) -> int:
        return self._cache.capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __iter__(self) -> Iterator[K]:
        with self._lock:
            return iter(self._cache.keys())

    def __getitem__(self, key: K) -> V:
        with self._lock:
            return self._cache[key]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, size={len(self)})"

    def get(self, key: K) -> Lookup[V]:
        with self._lock:
            return self._cache.get(key)

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._cache.put(key, value)

    def peek(self, key: K) -> Lookup[V]:
        with self._lock:
            return self._cache.peek(key)

    def remove(self, key: K) -> Lookup[V]:
        with self._lock:
            return self._cache.remove(key)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def keys(self) -> list[K]:
        with self._lock:
            return self._cache.keys()

    def items(self) -> list[tuple[K, V]]:
        with self._lock:
            return self._cache.items()

    def stats(self) -> CacheStats:
        with self._lock:
            return self._cache.stats()
