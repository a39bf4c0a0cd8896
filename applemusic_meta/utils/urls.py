"""Apple Music catalog URL helpers.

Catalog URLs always end in the item id, e.g.
``https://music.apple.com/jp/album/some-title/1440857781``.  Every URL built
here must round-trip through :func:`get_id_from_url`, because album artist
stubs are resolved by re-deriving their id from the scraped link.
"""

from __future__ import annotations

from urllib.parse import quote

APPLE_MUSIC_HOST = "https://music.apple.com"


def get_id_from_url(url: str) -> str:
    """Return the catalog id: everything after the last ``/`` in *url*."""
    return url.rsplit("/", 1)[-1]


def update_image_size(url: str, new_image_res: str) -> str:
    """Swap the trailing ``<size>.jpg`` segment of an artwork URL.

    ``new_image_res`` follows the ``<width>x<height><crop-flag>`` grammar,
    e.g. ``"1400x1400cc"``.  URLs without a ``/`` are returned unchanged.

    >>> update_image_size("https://a.mzstatic.com/x/600x600bb.jpg", "100x100cc")
    'https://a.mzstatic.com/x/100x100cc.jpg'
    """
    idx = url.rfind("/")
    if idx < 0:
        return url
    return f"{url[: idx + 1]}{new_image_res}.jpg"


def base_url(region: str) -> str:
    """Return the region-scoped catalog root, e.g. ``https://music.apple.com/us``."""
    return f"{APPLE_MUSIC_HOST}/{region}"


def album_url(region: str, album_id: str) -> str:
    return f"{base_url(region)}/album/{album_id}"


def artist_url(region: str, artist_id: str) -> str:
    return f"{base_url(region)}/artist/{artist_id}"


def search_url(region: str, term: str) -> str:
    # safe="" so "/" in a title cannot leak into the path
    return f"{base_url(region)}/search?term={quote(term, safe='')}"
