"""
Adapters Package - Record Source Implementations.

Sources:
    - HttpRecordSource: JSON over HTTP via requests, with retry
    - StaticRecordSource: Canned collections for testing/offline use
    - CachedRecordSource: TTL caching wrapper for any source

Design Principles:
    - All sources expose ``fetch(locator) -> list of records``
    - Failures surface as TransportError
    - Easily swappable via Dependency Injection
"""

from blog_aggregator.adapters.cached_source import CachedRecordSource
from blog_aggregator.adapters.http_source import HttpRecordSource
from blog_aggregator.adapters.static_source import StaticRecordSource

__all__ = [
    "CachedRecordSource",
    "HttpRecordSource",
    "StaticRecordSource",
]
