"""Page scrapers -- the only modules that know Apple Music's markup."""

from applemusic_meta.providers.scrapers.album_scraper import AlbumScraper
from applemusic_meta.providers.scrapers.artist_scraper import ArtistScraper
from applemusic_meta.providers.scrapers.search_scraper import SearchResultScraper

__all__ = ["AlbumScraper", "ArtistScraper", "SearchResultScraper"]
