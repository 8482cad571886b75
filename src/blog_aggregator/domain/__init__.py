"""
Domain Layer - Entities and Value Objects.

Entities:
    - Post: A fetched blog post
    - CompositeRecord: A post with its comments attached

Value Objects:
    - FetchResult: Records of one fetch, or the reason it degraded
"""

from blog_aggregator.domain.entities import (
    CommentRecord,
    CompositeRecord,
    Post,
    RawRecord,
)
from blog_aggregator.domain.value_objects import FetchResult

__all__ = [
    "CommentRecord",
    "CompositeRecord",
    "FetchResult",
    "Post",
    "RawRecord",
]
