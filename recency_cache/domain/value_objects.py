"""Immutable value objects returned by cache reads and stats snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class Lookup(Generic[V]):
    """Tagged result of a cache read.

    ``found`` is the only reliable presence signal: a stored ``None`` or
    ``-1`` comes back as a found lookup carrying that value.
    """

    found: bool
    value: V | None = None

    def __bool__(self) -> bool:
        return self.found

    def unwrap(self) -> V:
        """Return the value, raising ``KeyError`` when absent."""
        if not self.found:
            raise KeyError("lookup has no value")
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: Any) -> V | Any:
        return self.value if self.found else default

    @classmethod
    def hit(cls, value: V) -> Lookup[V]:
        return cls(found=True, value=value)


NOT_FOUND: Lookup[Any] = Lookup(found=False)


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Point-in-time counters for a cache."""

    hits: int
    misses: int
    evictions: int
    size: int
    capacity: int

    @property
    def hit_ratio(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0

    def to_dict(self) -> dict[str, float | int]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "size": self.size,
            "capacity": self.capacity,
            "hit_ratio": self.hit_ratio,
        }
