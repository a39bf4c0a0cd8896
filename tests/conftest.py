"""Shared pytest fixtures for the applemusic-meta test suite.

Catalog pages are built inline from small HTML templates that carry only the
attributes the scrapers query, and served by :class:`FakePageFetcher`, which
records every URL it was asked for.
"""

from __future__ import annotations

import asyncio
from typing import Callable

import pytest
from bs4 import BeautifulSoup

from applemusic_meta.interfaces.page_fetcher import Document, IPageFetcher
from applemusic_meta.utils.errors import FetchError

BASE = "https://music.apple.com/jp"
IMAGE_600 = "https://is1-ssl.mzstatic.com/image/thumb/Music/aa/bb/cc/600x600bb.jpg"
IMAGE_1200 = "https://is1-ssl.mzstatic.com/image/thumb/Music/aa/bb/cc/1200x1200bb.jpg"
ARTIST_IMAGE = "https://is1-ssl.mzstatic.com/image/thumb/Features/dd/ee/1200x630cw.png"


# ---------------------------------------------------------------------------
# HTML builders
# ---------------------------------------------------------------------------


def build_album_html(
    name: str | None = "Album Name",
    artists: list[tuple[str, str]] | None = None,
    srcset: str | None = f"{IMAGE_600} 600w, {IMAGE_1200} 1200w",
    about: str | None = "An album about things.",
    description: str | None = "March 3, 2017 · 42 min · 2017 Some Label",
) -> str:
    if artists is None:
        artists = [
            ("Artist A", f"{BASE}/artist/artist-a/2001"),
            ("Artist B", "/jp/artist/artist-b/2002"),
        ]
    artwork = (
        '<div data-testid="artwork-component"><picture>'
        '<source type="image/webp" srcset="https://example.com/x/600x600bb.webp 600w">'
        f'<source type="image/jpeg" srcset="{srcset}">'
        "</picture></div>"
        if srcset is not None
        else ""
    )
    title = (
        f'<h1 data-testid="non-editable-product-title"> {name} </h1>' if name is not None else ""
    )
    links = ", ".join(
        f'<a data-testid="click-action" href="{href}">{artist}</a>' for artist, href in artists
    )
    about_html = f'<p data-testid="truncate-text">{about}</p>' if about is not None else ""
    footer = (
        f'<p data-testid="tracklist-footer-description">{description}</p>'
        if description is not None
        else ""
    )
    return (
        "<html><head><title>Album</title></head><body>"
        '<div data-testid="container-detail-header">'
        f"{artwork}{title}<div>{links}</div>{about_html}"
        "</div>"
        f'<div class="tracklist"><ol><li>Track 1</li></ol>{footer}</div>'
        "</body></html>"
    )


def build_artist_html(
    name: str | None = "Artist A",
    about: str | None = "Artist biography.",
    og_image: str | None = ARTIST_IMAGE,
) -> str:
    meta = f'<meta property="og:image" content="{og_image}">' if og_image is not None else ""
    title = f'<h1 data-testid="artist-header-name">{name}</h1>' if name is not None else ""
    about_html = f'<p data-testid="truncate-text">{about}</p>' if about is not None else ""
    return f"<html><head>{meta}</head><body>{title}{about_html}</body></html>"


def build_search_html(
    albums: list[str] | None = None,
    artists: list[str] | None = None,
) -> str:
    sections = []
    if albums is not None:
        rows = "".join(
            "<li>"
            f'<a data-testid="product-lockup-title" href="{href}">Album</a>'
            f'<a href="{BASE}/artist/someone/9999">Someone</a>'
            "</li>"
            for href in albums
        )
        sections.append(
            f'<div data-testid="section-container" aria-label="Albums"><ul>{rows}</ul></div>'
        )
    if artists is not None:
        rows = "".join(f'<li><a href="{href}">Artist</a></li>' for href in artists)
        sections.append(
            f'<div data-testid="section-container" aria-label="Artists"><ul>{rows}</ul></div>'
        )
    return f"<html><body>{''.join(sections)}</body></html>"


def make_document(url: str, html: str) -> Document:
    return Document(url=url, soup=BeautifulSoup(html, "html.parser"))


# ---------------------------------------------------------------------------
# Fake fetcher
# ---------------------------------------------------------------------------


class FakePageFetcher(IPageFetcher):
    """Serves registered HTML by URL; unknown URLs raise ``FetchError`` (404).

    URLs listed in ``blocked`` wait on ``release`` before answering, which
    lets tests hold a fan-out mid-flight.
    """

    def __init__(self) -> None:
        self.pages: dict[str, str] = {}
        self.calls: list[str] = []
        self.blocked: set[str] = set()
        self.release = asyncio.Event()

    def add(self, url: str, html: str) -> None:
        self.pages[url] = html

    async def fetch(self, url: str) -> Document:
        self.calls.append(url)
        if url in self.blocked:
            await self.release.wait()
        if url not in self.pages:
            raise FetchError(f"HTTP 404 for {url}", provider_name="fake", url=url, status_code=404)
        return make_document(url, self.pages[url])


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def album_html() -> Callable[..., str]:
    return build_album_html


@pytest.fixture
def artist_html() -> Callable[..., str]:
    return build_artist_html


@pytest.fixture
def search_html() -> Callable[..., str]:
    return build_search_html


@pytest.fixture
def document() -> Callable[[str, str], Document]:
    return make_document


@pytest.fixture
def fake_fetcher() -> FakePageFetcher:
    return FakePageFetcher()


@pytest.fixture
def catalog_fetcher(fake_fetcher: FakePageFetcher) -> FakePageFetcher:
    """Fetcher pre-loaded with album 1001 (artists 2001, 2002) and both artist pages."""
    fake_fetcher.add(f"{BASE}/album/1001", build_album_html())
    fake_fetcher.add(f"{BASE}/artist/2001", build_artist_html(name="Artist A"))
    fake_fetcher.add(
        f"{BASE}/artist/2002", build_artist_html(name="Artist B", about=None, og_image=None)
    )
    return fake_fetcher
