"""Unit tests for HttpxPageFetcher with a mocked httpx.AsyncClient."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest

from applemusic_meta.providers.fetcher.httpx_fetcher import HttpxPageFetcher
from applemusic_meta.utils.errors import FetchError

URL = "https://music.apple.com/jp/album/1001"


def _response(status_code: int, text: str = "") -> httpx.Response:
    return httpx.Response(status_code, text=text, request=httpx.Request("GET", URL))


class TestHttpxPageFetcher:
    @pytest.mark.asyncio
    async def test_returns_parsed_document(self) -> None:
        client = AsyncMock()
        client.get.return_value = _response(200, "<html><body><h1>Title</h1></body></html>")
        fetcher = HttpxPageFetcher(client, user_agent="TestAgent/1.0")

        document = await fetcher.fetch(URL)

        assert document.url == URL
        assert document.soup.select_one("h1").get_text() == "Title"
        client.get.assert_awaited_once_with(
            URL, headers={"User-Agent": "TestAgent/1.0"}, follow_redirects=True
        )

    @pytest.mark.asyncio
    async def test_no_user_agent_sends_no_header(self) -> None:
        client = AsyncMock()
        client.get.return_value = _response(200, "<html></html>")
        fetcher = HttpxPageFetcher(client)

        await fetcher.fetch(URL)

        assert client.get.await_args.kwargs["headers"] == {}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [404, 429, 503])
    async def test_error_status_raises_fetch_error(self, status_code: int) -> None:
        client = AsyncMock()
        client.get.return_value = _response(status_code, "nope")
        fetcher = HttpxPageFetcher(client)

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch(URL)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.url == URL
        assert exc_info.value.provider_name == "web_fetcher"

    @pytest.mark.asyncio
    async def test_transport_error_raises_fetch_error(self) -> None:
        client = AsyncMock()
        client.get.side_effect = httpx.ConnectError("connection refused")
        fetcher = HttpxPageFetcher(client)

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch(URL)

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert str(exc_info.value).startswith("[web_fetcher]")

    @pytest.mark.asyncio
    async def test_invalid_url_raises_fetch_error(self) -> None:
        client = AsyncMock()
        client.get.side_effect = httpx.InvalidURL("Invalid non-printable ASCII character in URL")
        fetcher = HttpxPageFetcher(client)

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch("https://music.apple.com/jp/album/\x00")

        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
        assert exc_info.value.provider_name == "web_fetcher"

    @pytest.mark.asyncio
    async def test_timeout_raises_fetch_error(self) -> None:
        client = AsyncMock()
        client.get.side_effect = httpx.ReadTimeout("timed out")
        fetcher = HttpxPageFetcher(client)

        with pytest.raises(FetchError):
            await fetcher.fetch(URL)
