"""Host media-server contract models.

The media server owns these shapes; this module only mirrors the fields the
Apple Music providers read or write.  Lookup-info and library-item models
are mutable because the host hands them in and expects external ids to be
written back onto them.  Result DTOs are frozen.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class ProviderKey(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    """External-id keys stored on host entities."""

    ITUNES_ALBUM = "ITunesAlbum"
    ITUNES_ARTIST = "ITunesArtist"
    ITUNES_ALBUM_ARTIST = "ITunesAlbumArtist"


class ImageType(str, Enum):  # noqa: UP042 -- StrEnum requires Python 3.11+
    PRIMARY = "Primary"


class _HasProviderIds(BaseModel):
    """Mixin for host objects that carry an external-id dictionary."""

    provider_ids: dict[str, str] = Field(default_factory=dict)

    def get_provider_id(self, key: ProviderKey) -> str | None:
        return self.provider_ids.get(key.value)

    def set_provider_id(self, key: ProviderKey, value: str) -> None:
        self.provider_ids[key.value] = value


# ---------------------------------------------------------------------------
# Lookup info passed in by the host
# ---------------------------------------------------------------------------


class AlbumInfo(_HasProviderIds):
    name: str = ""
    year: int | None = None
    album_artists: list[str] = Field(default_factory=list)


class ArtistInfo(_HasProviderIds):
    name: str = ""


# ---------------------------------------------------------------------------
# Library items
# ---------------------------------------------------------------------------


class MusicArtist(_HasProviderIds):
    name: str = ""
    overview: str | None = None


class MusicAlbum(_HasProviderIds):
    name: str = ""
    overview: str | None = None
    production_year: int | None = None
    artists: list[str] = Field(default_factory=list)
    album_artists: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Results returned to the host
# ---------------------------------------------------------------------------


class RemoteSearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    image_url: str | None = None
    overview: str | None = None
    premiere_date: datetime.date | None = None
    production_year: int | None = None
    album_artist: RemoteSearchResult | None = None
    artists: tuple[RemoteSearchResult, ...] = Field(default_factory=tuple)
    provider_ids: dict[str, str] = Field(default_factory=dict)


class RemoteImageInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    thumbnail_url: str | None = None
    width: int | None = None
    height: int | None = None
    provider_name: str
    type: ImageType = ImageType.PRIMARY


_ItemT = TypeVar("_ItemT")


class MetadataResult(BaseModel, Generic[_ItemT]):
    """Metadata lookup outcome; ``item`` is ``None`` when nothing was found."""

    item: _ItemT | None = None
    has_metadata: bool = False
    remote_images: list[tuple[str, ImageType]] = Field(default_factory=list)
