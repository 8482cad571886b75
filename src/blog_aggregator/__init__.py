"""
Blog Aggregator - Posts and Comments Join/Filter Pipeline.

Fetches posts and comments from remote sources, nests every comment under
its post, and narrows the result with a chain of typed filters before
sorting and serializing it to JSON.

Main Components:
    - domain: Post, CompositeRecord, FetchResult
    - filters: Filter predicates and their operators
    - pipeline: Joiner, BlogContentPipeline and factory helpers
    - adapters: Record sources (HTTP, static, cached)
    - caching: TTL cache backing the cached source
    - resilience: Retry policy for transport calls
    - config: Configuration models and loaders

Example:
    >>> from blog_aggregator import Filter, Operator, create_blog_pipeline
    >>> pipeline = create_blog_pipeline()
    >>> output = (
    ...     pipeline.retrieve()
    ...     .filter([
    ...         Filter("userId", Operator.EQUALS, 1),
    ...         Filter("created_at", Operator.BETWEEN, ["2021-01-02", "2024-01-02"]),
    ...     ])
    ...     .sort()
    ...     .to_json()
    ... )

Posts without comments are always removed by ``filter()``. A filter such as
``Filter("comments", ">", 0)`` is not needed and raises InvalidFilterError,
since ``comments`` is a list.

"""

import logging

from blog_aggregator.exceptions import (
    BlogAggregatorError,
    InvalidFilterError,
    InvalidRecordError,
    TransportError,
)
from blog_aggregator.filters import Filter, Operator, Range, Scalar
from blog_aggregator.pipeline import (
    BlogContentPipeline,
    build_record_source,
    create_blog_pipeline,
    join_posts_and_comments,
)

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for the blog aggregator.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import blog_aggregator
        >>> blog_aggregator.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("blog_aggregator").setLevel(level)


__all__ = [
    "BlogAggregatorError",
    "BlogContentPipeline",
    "Filter",
    "InvalidFilterError",
    "InvalidRecordError",
    "Operator",
    "Range",
    "Scalar",
    "TransportError",
    "build_record_source",
    "configure_logging",
    "create_blog_pipeline",
    "join_posts_and_comments",
]
