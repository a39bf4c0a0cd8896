"""Utility modules for applemusic-meta.

- **concurrency** -- ordered, bounded fan-out with all-or-nothing cancellation.
- **errors** -- exception hierarchy rooted at AppleMusicError.
- **logging** -- structlog setup (console in development, JSON in production).
- **urls** -- catalog URL builders, id extraction and artwork resizing.
"""

from applemusic_meta.utils.concurrency import ordered_gather
from applemusic_meta.utils.errors import AppleMusicError, ConfigurationError, FetchError
from applemusic_meta.utils.logging import configure_logging, get_logger
from applemusic_meta.utils.urls import get_id_from_url, update_image_size

__all__ = [
    "AppleMusicError",
    "ConfigurationError",
    "FetchError",
    "configure_logging",
    "get_id_from_url",
    "get_logger",
    "ordered_gather",
    "update_image_size",
]
