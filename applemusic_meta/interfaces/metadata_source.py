"""Abstract base class for Apple Music metadata sources.

Defines the contract the host providers call: search by term, and look up
albums or artists by catalog id.  Implementations must report "not found"
as ``None`` / an empty list and only raise for transport failures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from applemusic_meta.models.entities import Album, Artist, CatalogItem, ItemType


class IMetadataSource(ABC):
    """Contract for catalog lookups used by the metadata and image providers."""

    @abstractmethod
    async def search(self, term: str, item_type: ItemType) -> list[CatalogItem]:
        """Search the catalog for items of *item_type* matching *term*.

        Parameters
        ----------
        term:
            Free-text search term.
        item_type:
            Which search-results section to read.

        Returns
        -------
        list[CatalogItem]
            Fully resolved items in the order the catalog listed them.  Items
            whose detail page could not be scraped are omitted.

        Raises
        ------
        applemusic_meta.utils.errors.FetchError
            If any page fetch fails.
        """

    @abstractmethod
    async def get_album(self, album_id: str) -> Album | None:
        """Fetch the album with catalog id *album_id* and resolve its artists.

        Returns
        -------
        Album or None
            The album if the page could be scraped; ``None`` otherwise.
        """

    @abstractmethod
    async def get_artist(self, artist_id: str) -> Artist | None:
        """Fetch the artist with catalog id *artist_id*.

        Returns
        -------
        Artist or None
            The artist if the page could be scraped; ``None`` otherwise.
        """
