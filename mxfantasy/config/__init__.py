"""Configuration loading and settings."""

from mxfantasy.config.loader import load_race_results
from mxfantasy.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "load_race_results",
]
