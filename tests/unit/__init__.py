"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_joiner.py: Joining comments onto posts
    - test_filter.py: Filter construction and operator semantics
    - test_record_sources.py: Static, cached and HTTP sources
    - test_cache_manager.py: TTL/LRU cache
    - test_error_handler.py: Retry with backoff
    - test_config_loader.py: Configuration loading/validation
"""
