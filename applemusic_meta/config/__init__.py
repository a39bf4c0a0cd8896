"""Configuration module -- exports Settings, RegionType and load_config."""

from applemusic_meta.config.loader import load_config
from applemusic_meta.config.settings import RegionType, Settings

__all__ = ["RegionType", "Settings", "load_config"]
