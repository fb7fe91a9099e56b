"""Domain specific exceptions."""

from __future__ import annotations


class CacheError(Exception):
    """Base class for all recency-cache errors."""


class InvalidConfiguration(CacheError, ValueError):
    """Raised when a cache is constructed with an unusable capacity."""

    def __init__(self, capacity: object) -> None:
        self.capacity = capacity
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")
