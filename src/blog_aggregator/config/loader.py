"""
Configuration Loader.

Reads a YAML file into a validated BlogConfig. Profiles are YAML files in
a ``profiles/`` directory beside the base file and are merged over it:

    config/default.yaml
    config/profiles/cached.yaml     -> load_config("config/default.yaml", "cached")

Overrides passed as a dict are merged last, so single values can be changed
without writing a file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from blog_aggregator.config.models import BlogConfig

logger = logging.getLogger(__name__)

PROFILES_DIR = "profiles"


class ConfigLoader:
    """A base configuration file together with its profiles."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.profiles_dir = self.config_path.parent / PROFILES_DIR

    def available_profiles(self) -> List[str]:
        """Names of the profiles that can be layered over the base file."""
        if not self.profiles_dir.is_dir():
            return []
        return sorted(path.stem for path in self.profiles_dir.glob("*.yaml"))

    def load(
        self,
        profile: Optional[str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> BlogConfig:
        """
        Build the configuration: base file, then profile, then overrides.

        Raises:
            FileNotFoundError: If the base file or the profile is missing
            ValueError: If a file does not hold a YAML mapping
            ValidationError: If the merged values are invalid
        """
        data = read_yaml_mapping(self.config_path)
        if profile:
            data = merge_config(data, read_yaml_mapping(self._profile_path(profile)))
        if overrides:
            data = merge_config(data, overrides)

        logger.debug(
            f"Loaded config from {self.config_path}"
            + (f" with profile '{profile}'" if profile else "")
        )
        return BlogConfig.model_validate(data)

    def _profile_path(self, profile: str) -> Path:
        path = self.profiles_dir / f"{profile}.yaml"
        if not path.is_file():
            available = ", ".join(self.available_profiles()) or "none"
            raise FileNotFoundError(
                f"Profile '{profile}' not found in {self.profiles_dir} "
                f"(available: {available})"
            )
        return path


def read_yaml_mapping(path: Path) -> Dict[str, Any]:
    """Parse a YAML file that must hold a mapping. An empty file is {}."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def merge_config(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``overlay`` over ``base`` without mutating either."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config(current, value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> BlogConfig:
    """
    Load configuration, or the built-in defaults when no file is given.

    Raises:
        ValueError: If a profile is requested without a base file
    """
    if config_path is None:
        if profile:
            raise ValueError(f"Profile '{profile}' needs a base configuration file")
        return BlogConfig.model_validate(dict(overrides or {}))
    return ConfigLoader(config_path).load(profile, overrides)
