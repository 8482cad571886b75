"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Base file, profile and override layering
    ✅ Edge Cases: Empty files, no file at all
    ✅ Error Handling: Invalid values, missing files, non-mapping YAML
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from blog_aggregator.config.loader import ConfigLoader, load_config, merge_config
from blog_aggregator.config.models import (
    DEFAULT_COMMENTS_URL,
    DEFAULT_POSTS_URL,
    BlogConfig,
)

REPO_ROOT = Path(__file__).resolve().parents[2]
SHIPPED_CONFIG = REPO_ROOT / "config" / "default.yaml"


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """A base file with two profiles beside it."""
    (tmp_path / "base.yaml").write_text(
        "cache:\n  enabled: false\n  ttl_seconds: 30\n  max_entries: 8\n"
    )
    profiles = tmp_path / "profiles"
    profiles.mkdir()
    (profiles / "cached.yaml").write_text("cache:\n  enabled: true\n")
    (profiles / "slow.yaml").write_text("http:\n  timeout_seconds: 90\n")
    return tmp_path


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """
        SCENARIO: Valid YAML configuration file
        EXPECTED: BlogConfig object created, unset values defaulted
        """
        path = tmp_path / "config.yaml"
        path.write_text(
            """
version: "1.0"
sources:
  posts_url: "https://api.example.test/posts"
http:
  timeout_seconds: 5
  max_attempts: 2
"""
        )

        config = ConfigLoader(path).load()

        assert isinstance(config, BlogConfig)
        assert config.sources.posts_url == "https://api.example.test/posts"
        assert config.sources.comments_url == DEFAULT_COMMENTS_URL
        assert config.http.timeout_seconds == 5
        assert config.http.max_attempts == 2
        assert config.http.retry_delay_seconds == pytest.approx(0.1)

    def test_profile_is_merged_from_beside_the_base_file(
        self, config_dir: Path
    ) -> None:
        """
        SCENARIO: Base file plus a profile overriding one cache field
        EXPECTED: Profile value wins, sibling values kept from base
        """
        config = ConfigLoader(config_dir / "base.yaml").load(profile="cached")

        assert config.cache.enabled is True
        assert config.cache.ttl_seconds == 30
        assert config.cache.max_entries == 8

    def test_overrides_are_applied_last(self, config_dir: Path) -> None:
        config = ConfigLoader(config_dir / "base.yaml").load(
            profile="cached", overrides={"cache": {"enabled": False}}
        )

        assert config.cache.enabled is False
        assert config.cache.ttl_seconds == 30

    def test_available_profiles(self, config_dir: Path) -> None:
        loader = ConfigLoader(config_dir / "base.yaml")

        assert loader.available_profiles() == ["cached", "slow"]

    def test_no_profiles_directory(self, tmp_path: Path) -> None:
        assert ConfigLoader(tmp_path / "base.yaml").available_profiles() == []

    def test_missing_profile_lists_available(self, config_dir: Path) -> None:
        with pytest.raises(FileNotFoundError, match="available: cached, slow"):
            ConfigLoader(config_dir / "base.yaml").load(profile="nope")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ConfigLoader(tmp_path / "missing.yaml").load()

    def test_non_mapping_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="mapping"):
            ConfigLoader(path).load()

    def test_validates_invalid_config(self, tmp_path: Path) -> None:
        """
        SCENARIO: Config with out-of-range values
        EXPECTED: ValidationError raised
        """
        path = tmp_path / "bad.yaml"
        path.write_text("http:\n  timeout_seconds: 0\n")

        with pytest.raises(ValidationError):
            ConfigLoader(path).load()


class TestLoadConfig:
    """The load_config convenience function."""

    def test_without_path_gives_defaults(self) -> None:
        config = load_config()

        assert config == BlogConfig()
        assert config.sources.posts_url == DEFAULT_POSTS_URL
        assert config.cache.enabled is False

    def test_without_path_applies_overrides(self) -> None:
        config = load_config(overrides={"http": {"max_attempts": 5}})

        assert config.http.max_attempts == 5

    def test_invalid_overrides_raise(self) -> None:
        with pytest.raises(ValidationError):
            load_config(overrides={"cache": {"max_entries": 0}})

    def test_profile_without_path_raises(self) -> None:
        with pytest.raises(ValueError, match="cached"):
            load_config(profile="cached")

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "empty.yaml").write_text("")

        assert load_config(tmp_path / "empty.yaml") == BlogConfig()

    def test_shipped_default_config_is_valid(self) -> None:
        config = load_config(SHIPPED_CONFIG)

        assert config.sources.posts_url == DEFAULT_POSTS_URL
        assert config.sources.comments_url == DEFAULT_COMMENTS_URL
        assert config.cache.enabled is False

    def test_shipped_cached_profile(self) -> None:
        config = load_config(SHIPPED_CONFIG, profile="cached")

        assert config.cache.enabled is True
        assert config.cache.ttl_seconds == 600


class TestMergeConfig:
    """Deep merge of configuration mappings."""

    def test_nested_values_merge(self) -> None:
        base = {"http": {"timeout_seconds": 5, "max_attempts": 2}, "version": "1"}

        merged = merge_config(base, {"http": {"max_attempts": 4}})

        assert merged == {"http": {"timeout_seconds": 5, "max_attempts": 4}, "version": "1"}

    def test_inputs_are_not_mutated(self) -> None:
        base = {"http": {"timeout_seconds": 5}}
        overlay = {"http": {"timeout_seconds": 9}}

        merge_config(base, overlay)

        assert base == {"http": {"timeout_seconds": 5}}
        assert overlay == {"http": {"timeout_seconds": 9}}

    def test_scalar_replaces_mapping(self) -> None:
        assert merge_config({"cache": {"enabled": True}}, {"cache": None}) == {
            "cache": None
        }
