"""
Cache Manager - TTL-based Caching with LRU Eviction.

Holds fetched collections for a bounded time so repeated pipeline runs can
skip the network. Nothing is persisted; the cache lives as long as its owner
keeps a reference to it.

Design Notes:
    - TTL-based expiration for freshness
    - LRU eviction when ``max_entries`` is exceeded
    - Thread-safe with RLock, one cache may back several pipelines
    - Clock is injectable for tests
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """A cached value and the moment it stops being valid."""

    value: Any
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


@dataclass
class CacheConfig:
    """Configuration for cache manager."""

    # Seconds an entry stays valid, 0 disables expiry
    default_ttl_seconds: float = 300.0

    max_entries: int = 128

    enabled: bool = True


@dataclass
class CacheStats:
    """Cache statistics."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0
    current_entries: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class CacheManager:
    """
    TTL cache with LRU eviction.

    ``get`` returns None for missing or expired keys, so None itself is not
    a cacheable value.
    """

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize cache manager.

        Args:
            config: Cache configuration
            clock: Monotonic time source in seconds
        """
        self.config = config or CacheConfig()
        self._clock = clock
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.RLock()
        self._stats = CacheStats()

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if absent or expired."""
        if not self.config.enabled:
            return None

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._stats.misses += 1
                logger.debug(f"Cache MISS: {key}")
                return None

            if entry.is_expired(self._clock()):
                del self._entries[key]
                self._stats.expirations += 1
                self._stats.misses += 1
                logger.debug(f"Cache EXPIRED: {key}")
                return None

            self._entries.move_to_end(key)
            self._stats.hits += 1
            logger.debug(f"Cache HIT: {key}")
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        """
        Store a value.

        Args:
            key: Cache key
            value: Value to cache
            ttl_seconds: TTL in seconds (uses default if None, 0 = no expiry)
        """
        if not self.config.enabled:
            return

        ttl = self.config.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        expires_at = self._clock() + ttl if ttl > 0 else None

        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = CacheEntry(value=value, expires_at=expires_at)

            while len(self._entries) > max(1, self.config.max_entries):
                evicted, _ = self._entries.popitem(last=False)
                self._stats.evictions += 1
                logger.debug(f"Cache EVICTED (LRU): {evicted}")

    def invalidate(self, key: str) -> bool:
        """Drop one entry. Returns True if it was present."""
        with self._lock:
            if self._entries.pop(key, None) is not None:
                logger.debug(f"Cache INVALIDATED: {key}")
                return True
            return False

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()
            logger.info("Cache CLEARED")

    def get_stats(self) -> CacheStats:
        """Snapshot of the cache statistics."""
        with self._lock:
            return CacheStats(
                hits=self._stats.hits,
                misses=self._stats.misses,
                evictions=self._stats.evictions,
                expirations=self._stats.expirations,
                current_entries=len(self._entries),
            )
