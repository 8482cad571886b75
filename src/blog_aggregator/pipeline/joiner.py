"""
Joiner - Attach Comments to Their Posts.

Builds one CompositeRecord per distinct post id, in the order posts were
first seen. Comments are indexed by ``postId`` in a single pass, so each
record receives its comments in the comments collection's original order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Sequence

from pydantic import TypeAdapter, ValidationError

from blog_aggregator.domain.entities import (
    CommentRecord,
    CompositeRecord,
    Post,
    RawRecord,
)
from blog_aggregator.exceptions import InvalidRecordError

logger = logging.getLogger(__name__)

# Same coercion rules as Post.id
_POST_ID = TypeAdapter(int)


def join_posts_and_comments(
    posts: Sequence[RawRecord],
    comments: Sequence[RawRecord],
) -> Dict[int, CompositeRecord]:
    """
    Merge comments into their owning posts.

    Args:
        posts: Raw post records, each requiring ``id``
        comments: Raw comment records, each requiring ``postId``

    Returns:
        Composite records keyed by post id, in first-occurrence order

    Raises:
        InvalidRecordError: If a post lacks ``id`` or a comment lacks ``postId``
    """
    comments_by_post = _index_comments(comments)

    joined: Dict[int, CompositeRecord] = {}
    for index, raw in enumerate(posts):
        post = _parse_post(raw, index)
        if post.id in joined:
            logger.debug(f"Ignoring duplicate post id={post.id} at index {index}")
            continue
        joined[post.id] = CompositeRecord.from_post(
            post, comments_by_post.get(post.id, [])
        )

    logger.debug(
        f"Joined {len(joined)} posts with {len(comments)} comments"
    )
    return joined


def _parse_post(raw: Any, index: int) -> Post:
    if not isinstance(raw, Mapping):
        raise InvalidRecordError(
            f"Post at index {index} is not an object: {raw!r}", index=index
        )
    if raw.get("id") is None:
        raise InvalidRecordError(
            f"Post at index {index} is missing 'id'", index=index, field="id"
        )
    try:
        return Post.model_validate(dict(raw))
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise InvalidRecordError(
            f"Post at index {index} is malformed: {', '.join(fields)}",
            index=index,
            field=fields[0] if fields else None,
        ) from e


def _index_comments(comments: Sequence[RawRecord]) -> Dict[int, List[CommentRecord]]:
    index: Dict[int, List[CommentRecord]] = {}
    for position, raw in enumerate(comments):
        if not isinstance(raw, Mapping):
            raise InvalidRecordError(
                f"Comment at index {position} is not an object: {raw!r}",
                index=position,
            )
        post_id = _post_id(raw.get("postId"), position)
        index.setdefault(post_id, []).append(dict(raw))
    return index


def _post_id(value: Any, position: int) -> int:
    """Normalize a comment's foreign key so "1" and 1 join the same post."""
    if value is None:
        raise InvalidRecordError(
            f"Comment at index {position} is missing 'postId'",
            index=position,
            field="postId",
        )
    try:
        return _POST_ID.validate_python(value)
    except ValidationError as e:
        raise InvalidRecordError(
            f"Comment at index {position} has invalid 'postId': {value!r}",
            index=position,
            field="postId",
        ) from e
