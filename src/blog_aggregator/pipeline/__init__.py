"""
Pipeline Package - Orchestration.

Components:
    - join_posts_and_comments: Attach comments to their posts
    - BlogContentPipeline: retrieve -> filter -> sort -> serialize
    - create_blog_pipeline / build_record_source: Wiring from configuration

Design Principles:
    - All dependencies injected via constructor
    - One pipeline per request, no shared instances
"""

from blog_aggregator.pipeline.blog_pipeline import (
    BlogContentPipeline,
    RecordSourceProtocol,
)
from blog_aggregator.pipeline.factory import build_record_source, create_blog_pipeline
from blog_aggregator.pipeline.joiner import join_posts_and_comments

__all__ = [
    "BlogContentPipeline",
    "RecordSourceProtocol",
    "build_record_source",
    "create_blog_pipeline",
    "join_posts_and_comments",
]
