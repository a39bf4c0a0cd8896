"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. ``config.yaml``  -- plugin configuration persisted by the host
  2. ``.env`` file    -- local developer overrides
  3. Environment vars -- ``APPLEMUSIC_*``

A YAML file looks like::

    region: us
    cache:
      ttl: 3600
      max_size: 512
    logging:
      level: DEBUG

Nested sections are flattened onto :class:`Settings` field names
(``cache.ttl`` -> ``cache_ttl``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from applemusic_meta.config.settings import Settings
from applemusic_meta.utils.errors import ConfigurationError

_SECTION_ALIASES = {
    ("cache", "ttl"): "cache_ttl",
    ("cache", "max_size"): "cache_max_size",
    ("http", "timeout"): "http_timeout",
    ("http", "user_agent"): "user_agent",
    ("http", "max_concurrency"): "max_concurrency",
    ("logging", "level"): "log_level",
    ("app", "env"): "app_env",
}


def load_config(path: str | Path = "config.yaml") -> Settings:
    """Load YAML config and overlay environment-based Settings.

    Environment variables (via Settings) win over YAML values where both set
    the same field.  A missing file is not an error; every field has a default.

    Raises:
        ConfigurationError: The file is not valid YAML, is not a mapping, or
            holds a value that fails validation (e.g. an unknown region).
    """
    config_path = Path(path)
    yaml_config: dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"Invalid YAML in {config_path}: {exc}", provider_name="settings"
            ) from exc
        if not isinstance(yaml_config, dict):
            raise ConfigurationError(
                f"{config_path} must contain a mapping", provider_name="settings"
            )

    flat = _flatten(yaml_config)
    try:
        env_settings = Settings()
        env_overrides = env_settings.model_dump(exclude_unset=True)
        return Settings(**{**flat, **env_overrides})
    except ValidationError as exc:
        raise ConfigurationError(str(exc), provider_name="settings") from exc


def _flatten(config: dict[str, Any]) -> dict[str, Any]:
    """Map nested YAML sections onto flat Settings field names."""
    flat: dict[str, Any] = {}
    for key, value in config.items():
        if isinstance(value, dict):
            for sub_key, sub_value in value.items():
                field = _SECTION_ALIASES.get((key, sub_key))
                if field is not None:
                    flat[field] = sub_value
        else:
            flat[key] = value
    return flat
