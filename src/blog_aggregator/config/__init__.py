"""
Configuration Package - Models and Loaders.

    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - BlogConfig: Root configuration object
    - SourcesConfig: Posts and comments endpoints
    - HttpConfig: Timeout and retry policy
    - CacheSettings: Optional in-process caching
"""

from blog_aggregator.config.loader import ConfigLoader, load_config
from blog_aggregator.config.models import (
    BlogConfig,
    CacheSettings,
    HttpConfig,
    SourcesConfig,
)

__all__ = [
    "BlogConfig",
    "CacheSettings",
    "ConfigLoader",
    "HttpConfig",
    "SourcesConfig",
    "load_config",
]
