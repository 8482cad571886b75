"""
Core Domain Entities.

Posts and comments as fetched from the record sources, and the composite
record produced by joining them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

# Comments carry arbitrary fields besides postId, so they stay plain mappings
CommentRecord = Dict[str, Any]

# Raw records as decoded from the transport
RawRecord = Dict[str, Any]


class Post(BaseModel):
    """A blog post as delivered by the posts source."""

    id: int = Field(..., description="Unique post identifier")

    # Passed through as delivered, only the join key is validated
    userId: Any = Field(default=None, description="Author identifier")
    title: Any = None
    body: Any = None
    created_at: Any = Field(default=None, description="Date-like creation timestamp")

    model_config = {"frozen": True}


class CompositeRecord(BaseModel):
    """A post together with every comment that references it."""

    id: int
    userId: Any = None
    title: Any = None
    body: Any = None
    created_at: Any = None
    comments: List[CommentRecord] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def from_post(
        cls, post: Post, comments: Optional[List[CommentRecord]] = None
    ) -> "CompositeRecord":
        # Only fields the source delivered, so absent ones stay unset
        delivered = post.model_dump(include=post.model_fields_set)
        return cls(**delivered, comments=list(comments or []))

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    def has_field(self, key: str) -> bool:
        """
        Check whether the record carries ``key``.

        A field the source never delivered is missing here, even though it
        still serializes as null.
        """
        return key in self.model_fields_set

    def field_value(self, key: str) -> Any:
        """
        Look up a field by name.

        Raises:
            KeyError: If the record has no such field
        """
        if not self.has_field(key):
            raise KeyError(key)
        return getattr(self, key)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict with keys in serialization order."""
        data = self.model_dump(mode="json")
        data["comments"] = [dict(c) for c in self.comments]
        return data
