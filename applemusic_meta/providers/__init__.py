"""Concrete adapters for the interfaces in ``applemusic_meta.interfaces``."""
