"""applemusic-meta: Apple Music metadata and artwork for a media server.

Scrapes album and artist pages on ``music.apple.com`` and maps them onto the
host's metadata-provider and image-provider contracts.  Start from
:func:`applemusic_meta.main.build_plugin`.
"""

__version__ = "0.1.0"
