"""
Caching Layer.

Opt-in, in-process caching of fetched collections:
    - CacheManager: TTL-based caching with LRU eviction
    - CacheConfig: Configuration for cache behavior
    - CacheStats: Statistics tracking for cache operations
"""

from blog_aggregator.caching.cache_manager import (
    CacheConfig,
    CacheEntry,
    CacheManager,
    CacheStats,
)

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "CacheManager",
    "CacheStats",
]
