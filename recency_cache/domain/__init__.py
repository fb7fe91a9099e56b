"""Domain types for the recency cache."""

from .errors import CacheError, InvalidConfiguration
from .models import Entry
from .value_objects import NOT_FOUND, CacheStats, Lookup

__all__ = [
    "CacheError",
    "CacheStats",
    "Entry",
    "InvalidConfiguration",
    "Lookup",
    "NOT_FOUND",
]
