"""Bounded least-recently-used cache."""

__version__ = "0.1.0"

from .domain.errors import CacheError, InvalidConfiguration
from .domain.value_objects import NOT_FOUND, CacheStats, Lookup
from .infra.cache import LRUCache, SynchronizedLRUCache
from .port.cache import CachePort
from .services.factory import create_cache

__all__ = [
    "CacheError",
    "CachePort",
    "CacheStats",
    "InvalidConfiguration",
    "LRUCache",
    "Lookup",
    "NOT_FOUND",
    "SynchronizedLRUCache",
    "create_cache",
]
