"""applemusic-meta plugin entry point.

Wires the page fetcher, scrapers, metadata source (optionally behind the TTL
cache) and the four host providers over a single shared
``httpx.AsyncClient``.  The host calls :func:`build_plugin` once at startup
and :meth:`PluginComponents.aclose` on shutdown.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import httpx
import structlog

from applemusic_meta.config.loader import load_config
from applemusic_meta.config.settings import Settings
from applemusic_meta.interfaces.metadata_source import IMetadataSource
from applemusic_meta.plugin.album_metadata_provider import AlbumMetadataProvider
from applemusic_meta.plugin.artist_metadata_provider import ArtistMetadataProvider
from applemusic_meta.plugin.image_providers import AlbumImageProvider, ArtistImageProvider
from applemusic_meta.providers.cache.memory_cache import MemoryCacheProvider
from applemusic_meta.providers.fetcher.httpx_fetcher import HttpxPageFetcher
from applemusic_meta.providers.metadata.cached_source import CachedMetadataSource
from applemusic_meta.providers.metadata.web_source import WebMetadataSource
from applemusic_meta.utils.logging import configure_logging, get_logger


@dataclass(frozen=True)
class PluginComponents:
    """Everything the host needs to register, plus the shared client."""

    http_client: httpx.AsyncClient
    source: IMetadataSource
    album_metadata: AlbumMetadataProvider
    artist_metadata: ArtistMetadataProvider
    album_images: AlbumImageProvider
    artist_images: ArtistImageProvider
    owns_client: bool = True

    async def aclose(self) -> None:
        """Close the HTTP client if :func:`build_plugin` created it."""
        if self.owns_client:
            await self.http_client.aclose()


def build_source(app_settings: Settings, http_client: httpx.AsyncClient) -> IMetadataSource:
    """Build the web metadata source, wrapped in a TTL cache when enabled."""
    fetcher = HttpxPageFetcher(http_client, user_agent=app_settings.user_agent)
    source: IMetadataSource = WebMetadataSource(
        fetcher,
        region=app_settings.region.value,
        max_concurrency=app_settings.max_concurrency,
    )
    if app_settings.cache_enabled:
        cache = MemoryCacheProvider(
            max_size=app_settings.cache_max_size, ttl=app_settings.cache_ttl
        )
        source = CachedMetadataSource(source, cache)
    return source


def build_plugin(
    custom_settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
    config_path: str | Path = "config.yaml",
) -> PluginComponents:
    """Assemble all plugin components.

    Parameters
    ----------
    custom_settings:
        Settings to use.  When omitted they are loaded from *config_path*
        with ``APPLEMUSIC_*`` environment overrides.
    http_client:
        The host's client.  When omitted a client is created with the
        configured timeout and closed by :meth:`PluginComponents.aclose`.
    config_path:
        YAML file persisted by the host; a missing file means defaults.

    Raises
    ------
    ConfigurationError
        If the YAML file or an environment value is invalid.
    """
    app_settings = custom_settings or load_config(config_path)
    configure_logging(log_level=app_settings.log_level, app_env=app_settings.app_env)
    logger: structlog.BoundLogger = get_logger(__name__)

    owns_client = http_client is None
    client = http_client or httpx.AsyncClient(timeout=app_settings.http_timeout)
    source = build_source(app_settings, client)

    logger.info(
        "plugin_built",
        region=app_settings.region.value,
        cache_enabled=app_settings.cache_enabled,
        max_concurrency=app_settings.max_concurrency,
    )
    return PluginComponents(
        http_client=client,
        source=source,
        album_metadata=AlbumMetadataProvider(source, client),
        artist_metadata=ArtistMetadataProvider(source, client),
        album_images=AlbumImageProvider(source, client),
        artist_images=ArtistImageProvider(source, client),
        owns_client=owns_client,
    )
