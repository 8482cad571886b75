"""
Pipeline Factory - Wire Sources and Pipelines from Configuration.

Build the record source once and pass it to every pipeline so a cache, if
enabled, is shared between runs:

    source = build_record_source(config)
    first = create_blog_pipeline(config, source=source).retrieve()
    second = create_blog_pipeline(config, source=source).retrieve()  # cached
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import requests

from blog_aggregator.adapters.cached_source import CachedRecordSource
from blog_aggregator.adapters.http_source import HttpRecordSource
from blog_aggregator.caching.cache_manager import CacheConfig, CacheManager
from blog_aggregator.config.loader import load_config
from blog_aggregator.config.models import BlogConfig
from blog_aggregator.pipeline.blog_pipeline import (
    BlogContentPipeline,
    RecordSourceProtocol,
)
from blog_aggregator.resilience.error_handler import ErrorHandler, RetryConfig

logger = logging.getLogger(__name__)


def build_record_source(
    config: Optional[BlogConfig] = None,
    cache_manager: Optional[CacheManager] = None,
) -> RecordSourceProtocol:
    """
    Create the HTTP record source described by ``config``.

    The source is wrapped in a CachedRecordSource when caching is enabled
    or a cache manager is supplied.
    """
    config = config or BlogConfig()

    retry_config = RetryConfig(
        max_attempts=config.http.max_attempts,
        base_delay_seconds=config.http.retry_delay_seconds,
        max_delay_seconds=config.http.max_retry_delay_seconds,
        retryable_exceptions=(requests.RequestException,),
    )
    source: RecordSourceProtocol = HttpRecordSource(
        timeout_seconds=config.http.timeout_seconds,
        error_handler=ErrorHandler(retry_config),
    )

    if cache_manager is None and config.cache.enabled:
        cache_manager = CacheManager(
            CacheConfig(
                default_ttl_seconds=config.cache.ttl_seconds,
                max_entries=config.cache.max_entries,
            )
        )
    if cache_manager is not None:
        logger.debug("Caching fetched collections")
        source = CachedRecordSource(source, cache_manager)

    return source


def create_blog_pipeline(
    config: Optional[Union[BlogConfig, str, Path]] = None,
    source: Optional[RecordSourceProtocol] = None,
) -> BlogContentPipeline:
    """
    Create a fresh pipeline for one request.

    Args:
        config: Configuration, or the path of a YAML config file
            (defaults if None)
        source: Record source to reuse, built from config if None
    """
    if isinstance(config, (str, Path)):
        config = load_config(config)
    config = config or BlogConfig()
    return BlogContentPipeline(
        source=source or build_record_source(config),
        posts_locator=config.sources.posts_url,
        comments_locator=config.sources.comments_url,
    )
