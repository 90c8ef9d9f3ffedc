"""Implementación in-memory del cache de respuestas con TTL."""

import logging
from datetime import timedelta

from app.application.interfaces.clock import Clock
from app.application.interfaces.response_cache import CacheEntry, CacheKey, ResponseCache

logger = logging.getLogger(__name__)


class InMemoryResponseCache(ResponseCache):
    """
    Cache de proceso con expiración perezosa.

    Las entradas son inmutables y se reemplazan completas, así que lecturas y
    escrituras concurrentes dentro del event loop no necesitan lock.
    """

    def __init__(self, clock: Clock, default_ttl_seconds: float = 60.0) -> None:
        if default_ttl_seconds <= 0:
            raise ValueError("default_ttl_seconds must be > 0")
        self._clock = clock
        self._default_ttl_seconds = default_ttl_seconds
        self._entries: dict[CacheKey, CacheEntry] = {}

    @property
    def default_ttl_seconds(self) -> float:
        return self._default_ttl_seconds

    def get(self, key: CacheKey) -> bytes | None:
        entry = self._entries.get(key)
        if entry is None:
            logger.info("Response cache miss", extra={"cache_key": str(key)})
            return None
        if entry.is_expired(self._clock.now()):
            self._entries.pop(key, None)
            logger.info("Response cache entry expired", extra={"cache_key": str(key)})
            return None
        logger.info("Response cache hit", extra={"cache_key": str(key)})
        return entry.value

    def put(self, key: CacheKey, value: bytes, ttl_seconds: float | None = None) -> None:
        ttl = self._default_ttl_seconds if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            return
        expires_at = self._clock.now() + timedelta(seconds=ttl)
        self._entries[key] = CacheEntry(value=value, expires_at=expires_at)

    def evict_expired(self) -> int:
        now = self._clock.now()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            self._entries.pop(key, None)
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
