"""Plugin settings loaded from environment variables via pydantic-settings.

Sources, highest priority first:

  1. Environment variables prefixed ``APPLEMUSIC_`` (e.g. ``APPLEMUSIC_REGION=us``)
  2. A ``.env`` file in the working directory
  3. The defaults below

``region`` is the only option the host's configuration page exposes; the
rest tune the HTTP client, fan-out and the optional result cache.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RegionType(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """Apple Music storefront regions."""

    US = "us"
    JP = "jp"


class Settings(BaseSettings):
    """applemusic-meta settings."""

    model_config = SettingsConfigDict(
        env_prefix="APPLEMUSIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Catalog ===
    region: RegionType = RegionType.JP

    # === HTTP ===
    http_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    # === Fan-out ===
    # Upper bound on concurrent page fetches per metadata source.
    max_concurrency: int = Field(default=5, ge=1)

    # === Cache ===
    # 0 disables caching: every lookup re-fetches.
    cache_ttl: int = Field(default=0, ge=0)
    cache_max_size: int = Field(default=256, ge=1)

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def cache_enabled(self) -> bool:
        return self.cache_ttl > 0
