"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_POSTS_URL = "https://coderbyte.com/api/challenges/json/all-posts"
DEFAULT_COMMENTS_URL = "https://coderbyte.com/api/challenges/json/all-comments"


class SourcesConfig(BaseModel):
    """Where the two collections are fetched from."""

    posts_url: str = Field(default=DEFAULT_POSTS_URL, min_length=1)
    comments_url: str = Field(default=DEFAULT_COMMENTS_URL, min_length=1)


class HttpConfig(BaseModel):
    """Transport policy for the HTTP record source."""

    timeout_seconds: float = Field(default=30.0, gt=0)
    max_attempts: int = Field(default=3, ge=1, le=10)
    retry_delay_seconds: float = Field(default=0.1, ge=0)
    max_retry_delay_seconds: float = Field(default=5.0, ge=0)


class CacheSettings(BaseModel):
    """In-process caching of fetched collections."""

    enabled: bool = False
    ttl_seconds: float = Field(default=300.0, ge=0)
    max_entries: int = Field(default=128, ge=1)


class BlogConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    cache: CacheSettings = Field(default_factory=CacheSettings)
