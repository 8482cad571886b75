"""
Cached Record Source - Caching Wrapper for Record Sources.

Wraps any record source so successful fetches are reused until their TTL
runs out or they are invalidated.

Design Notes:
    - Decorator/Wrapper pattern
    - Failures are never cached, the next fetch retries the source
    - Callers get copies, cached collections cannot be mutated through them
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional

from blog_aggregator.caching.cache_manager import CacheConfig, CacheManager
from blog_aggregator.domain.entities import RawRecord
from blog_aggregator.pipeline.blog_pipeline import RecordSourceProtocol

logger = logging.getLogger(__name__)


class CachedRecordSource:
    """
    Caching wrapper for record sources.

    Usage:
        source = CachedRecordSource(HttpRecordSource(), cache_manager)

        # First call: cache miss, fetches from the wrapped source
        posts = source.fetch(posts_url)

        # Second call within the TTL: cache hit
        posts = source.fetch(posts_url)
    """

    KEY_PREFIX = "fetch:"

    def __init__(
        self,
        source: RecordSourceProtocol,
        cache_manager: Optional[CacheManager] = None,
        cache_config: Optional[CacheConfig] = None,
        ttl_seconds: Optional[float] = None,
    ) -> None:
        """
        Initialize cached source.

        Args:
            source: Underlying record source to wrap
            cache_manager: Cache manager instance (creates one if None)
            cache_config: Cache configuration (used if cache_manager is None)
            ttl_seconds: TTL for cached collections (cache default if None)
        """
        self.source = source
        self.cache = cache_manager or CacheManager(cache_config)
        self.ttl_seconds = ttl_seconds

        self._hits = 0
        self._misses = 0

    def fetch(self, locator: str) -> List[RawRecord]:
        """Fetch through the cache."""
        key = self._key(locator)

        cached = self.cache.get(key)
        if cached is not None:
            self._hits += 1
            logger.debug(f"Cache HIT for {locator}: {len(cached)} records")
            return copy.deepcopy(cached)

        self._misses += 1
        logger.debug(f"Cache MISS for {locator}")

        records = self.source.fetch(locator)
        self.cache.set(key, copy.deepcopy(records), self.ttl_seconds)
        return records

    def invalidate(self, locator: str) -> bool:
        """Forget the cached collection for ``locator``."""
        return self.cache.invalidate(self._key(locator))

    def clear(self) -> None:
        self.cache.clear()

    def get_cache_stats(self) -> Dict[str, Any]:
        stats = self.cache.get_stats()
        return {
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": stats.hit_rate,
            "evictions": stats.evictions,
            "expirations": stats.expirations,
            "entries": stats.current_entries,
        }

    def _key(self, locator: str) -> str:
        return f"{self.KEY_PREFIX}{locator}"
