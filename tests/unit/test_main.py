"""Unit tests for plugin wiring in applemusic_meta.main."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import httpx
import pytest

from applemusic_meta.config.settings import RegionType, Settings
from applemusic_meta.main import build_plugin, build_source
from applemusic_meta.providers.metadata.cached_source import CachedMetadataSource
from applemusic_meta.providers.metadata.web_source import WebMetadataSource
from applemusic_meta.utils.errors import ConfigurationError


class TestBuildSource:
    def test_uncached_by_default(self) -> None:
        source = build_source(Settings(cache_ttl=0), AsyncMock())

        assert isinstance(source, WebMetadataSource)

    def test_cache_wraps_web_source(self) -> None:
        source = build_source(Settings(cache_ttl=600), AsyncMock())

        assert isinstance(source, CachedMetadataSource)

    def test_region_is_applied(self) -> None:
        source = build_source(Settings(region=RegionType.US, cache_ttl=0), AsyncMock())

        assert isinstance(source, WebMetadataSource)
        assert source.region == "us"


class TestBuildPlugin:
    @pytest.mark.asyncio
    async def test_shares_one_source_and_client(self) -> None:
        client = AsyncMock(spec=httpx.AsyncClient)

        components = build_plugin(Settings(), http_client=client)

        assert components.http_client is client
        assert components.owns_client is False
        for provider in (
            components.album_metadata,
            components.artist_metadata,
            components.album_images,
            components.artist_images,
        ):
            assert provider.name == "Apple Music"
            assert provider._source is components.source
            assert provider._http is client

        await components.aclose()
        client.aclose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self) -> None:
        components = build_plugin(Settings(http_timeout=5))

        assert isinstance(components.http_client, httpx.AsyncClient)
        assert components.owns_client is True

        await components.aclose()
        assert components.http_client.is_closed


class TestBuildPluginFromConfigFile:
    @pytest.fixture(autouse=True)
    def _isolated_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        for name in ("APPLEMUSIC_REGION", "APPLEMUSIC_CACHE_TTL"):
            monkeypatch.delenv(name, raising=False)

    def test_settings_come_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "plugin.yaml"
        path.write_text("region: us\ncache:\n  ttl: 600\n", encoding="utf-8")

        components = build_plugin(http_client=AsyncMock(), config_path=path)

        assert isinstance(components.source, CachedMetadataSource)
        assert components.source._inner.region == "us"

    def test_default_path_in_working_directory(self, tmp_path: Path) -> None:
        (tmp_path / "config.yaml").write_text("region: us\n", encoding="utf-8")

        components = build_plugin(http_client=AsyncMock())

        assert isinstance(components.source, WebMetadataSource)
        assert components.source.region == "us"

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        components = build_plugin(http_client=AsyncMock(), config_path=tmp_path / "absent.yaml")

        assert isinstance(components.source, WebMetadataSource)
        assert components.source.region == "jp"

    def test_invalid_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "plugin.yaml"
        path.write_text("region: fr\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            build_plugin(http_client=AsyncMock(), config_path=path)
