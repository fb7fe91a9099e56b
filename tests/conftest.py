"""Shared test fixtures for recency-cache tests."""

from __future__ import annotations

import logging

import pytest
import structlog

from recency_cache.infra.cache import LRUCache, SynchronizedLRUCache
from recency_cache.infra.config import Settings, get_settings


class EvictionRecorder:
    """Collects (key, value) pairs passed to an on_evict callback."""

    def __init__(self) -> None:
        self.evicted: list[tuple[object, object]] = []

    def __call__(self, key: object, value: object) -> None:
        self.evicted.append((key, value))


@pytest.fixture
def eviction_recorder() -> EvictionRecorder:
    return EvictionRecorder()


@pytest.fixture
def cache() -> LRUCache:
    """Capacity-2 cache matching the worked scenarios."""
    return LRUCache(2)


@pytest.fixture
def synchronized_cache() -> SynchronizedLRUCache:
    return SynchronizedLRUCache(2)


@pytest.fixture
def test_settings() -> Settings:
    """Minimal Settings instance for unit tests."""
    return Settings(capacity=4)


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    """Undo structlog and root-level changes made by configure_logging."""
    root = logging.getLogger()
    previous_level = root.level
    yield
    structlog.reset_defaults()
    root.setLevel(previous_level)
