"""Shared plumbing for the host-facing Apple Music providers."""

from __future__ import annotations

import httpx

from applemusic_meta.interfaces.metadata_source import IMetadataSource
from applemusic_meta.plugin.mapping import PLUGIN_NAME
from applemusic_meta.utils.errors import FetchError


class AppleMusicProviderBase:
    """Holds the metadata source and the host's HTTP client.

    The host downloads images it picked through ``get_image_response``; the
    response is returned unread so the host can stream it.
    """

    name = PLUGIN_NAME

    def __init__(self, source: IMetadataSource, http_client: httpx.AsyncClient) -> None:
        self._source = source
        self._http = http_client

    async def get_image_response(self, url: str) -> httpx.Response:
        try:
            return await self._http.get(url, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(
                f"Image request to {url} failed: {exc}", provider_name="image_download", url=url
            ) from exc
