"""Build caches from runtime settings."""

from __future__ import annotations

import structlog

from ..infra.cache import LRUCache, SynchronizedLRUCache
from ..infra.config import Settings, get_settings
from ..infra.logging import configure_from_settings
from ..port.cache import CachePort

logger = structlog.get_logger(__name__)


def create_cache(
    settings: Settings | None = None, *, setup_logging: bool = False
) -> CachePort:
    """Return a cache sized and guarded according to ``settings``.

    With ``setup_logging`` the process-wide structlog configuration is
    (re)built from ``settings.log_level`` and ``settings.log_format`` first.
    """

    settings = settings or get_settings()
    if setup_logging:
        configure_from_settings(settings)
    if settings.thread_safe:
        cache: CachePort = SynchronizedLRUCache(settings.capacity)
    else:
        cache = LRUCache(settings.capacity)
    logger.info(
        "cache_configured",
        capacity=settings.capacity,
        thread_safe=settings.thread_safe,
    )
    return cache
