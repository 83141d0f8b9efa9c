"""Configuration package for mongo_fixtures.

Config ownership map:
  constants.py: static constants (extensions, script marker, error codes)
  settings.py: environment settings for the command line
"""

from mongo_fixtures.config.constants import (
    DATA_EXTENSIONS,
    DEFAULT_FIXTURES_DIR,
    EXPORTS_ATTRIBUTE,
    JSON_EXTENSION,
    NAMESPACE_NOT_FOUND,
    SCRIPT_EXTENSIONS,
    SCRIPT_MARKER,
)
from mongo_fixtures.config.settings import FixtureSettings, get_settings

__all__ = [
    # Constants
    "DATA_EXTENSIONS",
    "DEFAULT_FIXTURES_DIR",
    "EXPORTS_ATTRIBUTE",
    "JSON_EXTENSION",
    "NAMESPACE_NOT_FOUND",
    "SCRIPT_EXTENSIONS",
    "SCRIPT_MARKER",
    # Settings
    "FixtureSettings",
    "get_settings",
]
