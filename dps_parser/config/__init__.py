"""
Configuration module for the DPS parser.

Provides centralized configuration management for parsing, server settings,
uploads and custom game data.
"""

from .settings import (
    ApplicationSettings,
    ParserSettings,
    ServerSettings,
    UploadSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "ApplicationSettings",
    "ParserSettings",
    "ServerSettings",
    "UploadSettings",
    "get_settings",
    "reload_settings",
]
