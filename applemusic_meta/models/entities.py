"""Catalog entities scraped from Apple Music pages.

Defines the two catalog item variants -- :class:`Artist` and :class:`Album`
-- as frozen Pydantic v2 models, plus the :data:`CatalogItem` tagged union
discriminated on the ``kind`` field.  The variants share a capability
surface (``id``, ``name``, ``url``, ``image_url``, ``about`` and
``has_metadata()``) but do not share a base class.

Key relationships:
    - An Album *references* its Artists; each one is resolved from its own
      catalog URL.  The first artist is the album artist.
    - ``id`` is always the trailing path segment of ``url``.
    - Records are built fresh per request and mapped to host DTOs by
      ``applemusic_meta.plugin.mapping``.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ItemType(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """Which search-page section and which detail-page grammar to apply."""

    ALBUM = "Album"
    ARTIST = "Artist"


class Artist(BaseModel):
    """An Apple Music artist.

    When produced by the album scraper the artist is only a *stub*: ``name``,
    ``url`` and the url-derived ``id`` are known, ``image_url`` and ``about``
    stay ``None`` until the artist page is resolved.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["artist"] = "artist"
    id: str
    name: str
    url: str
    image_url: str | None = None        # First srcset / og:image candidate, as scraped
    about: str | None = None            # Biography paragraph

    def has_metadata(self) -> bool:
        return bool(self.name) or self.about is not None


class Album(BaseModel):
    """An Apple Music album with its resolved artist list."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["album"] = "album"
    id: str
    name: str
    url: str
    image_url: str | None = None
    about: str | None = None
    release_date: datetime.date | None = None
    # Ordered; the first entry doubles as the album artist.
    artists: tuple[Artist, ...] = Field(default_factory=tuple)

    def has_metadata(self) -> bool:
        return bool(self.name) or self.about is not None or self.release_date is not None


CatalogItem = Annotated[Union[Artist, Album], Field(discriminator="kind")]


class AlbumDescription(BaseModel):
    """Fields parsed from the album tracklist footer text.

    Only ``date`` is carried onto :class:`Album`; the remaining fields are
    parsed data that nothing downstream consumes yet.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    runtime: int
    runtime_unit: str
    production_year: int
    producer: str
