"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from blog_aggregator.adapters.static_source import StaticRecordSource
from blog_aggregator.config.models import BlogConfig
from blog_aggregator.domain.entities import CompositeRecord
from blog_aggregator.pipeline.blog_pipeline import BlogContentPipeline

POSTS_URL = "memory://posts"
COMMENTS_URL = "memory://comments"


@pytest.fixture
def sample_posts() -> List[Dict[str, Any]]:
    """Posts in non-sorted id order, one without comments."""
    return [
        {
            "id": 3,
            "userId": 1,
            "title": "Third",
            "body": "c",
            "created_at": "2022-03-15",
        },
        {
            "id": 1,
            "userId": 1,
            "title": "First",
            "body": "a",
            "created_at": "2021-06-01",
        },
        {
            "id": 2,
            "userId": 2,
            "title": "Second",
            "body": "b",
            "created_at": "2023-11-20",
        },
        # No comments reference this post
        {
            "id": 4,
            "userId": 1,
            "title": "Lonely",
            "body": "d",
            "created_at": "2021-07-04",
        },
    ]


@pytest.fixture
def sample_comments() -> List[Dict[str, Any]]:
    return [
        {"postId": 1, "id": 10, "text": "first on 1"},
        {"postId": 2, "id": 11, "text": "first on 2"},
        {"postId": 1, "id": 12, "text": "second on 1"},
        {"postId": 3, "id": 13, "text": "only on 3"},
        # Orphan comment, no such post
        {"postId": 99, "id": 14, "text": "orphan"},
    ]


@pytest.fixture
def static_source(sample_posts, sample_comments) -> StaticRecordSource:
    return StaticRecordSource(
        {POSTS_URL: sample_posts, COMMENTS_URL: sample_comments}
    )


@pytest.fixture
def pipeline(static_source) -> BlogContentPipeline:
    """Pipeline over the sample collections."""
    return BlogContentPipeline(
        source=static_source,
        posts_locator=POSTS_URL,
        comments_locator=COMMENTS_URL,
    )


@pytest.fixture
def memory_config() -> BlogConfig:
    """Configuration pointing at the in-memory locators."""
    return BlogConfig.model_validate(
        {"sources": {"posts_url": POSTS_URL, "comments_url": COMMENTS_URL}}
    )


@pytest.fixture
def sample_record() -> CompositeRecord:
    """A single joined post with one comment."""
    return CompositeRecord(
        id=5,
        userId=1,
        title="A",
        body="b",
        created_at="2021-06-01",
        comments=[{"postId": 5, "text": "hi"}],
    )
