"""
Library configuration.

Defaults for unset request options and their CONFSEEK_* environment overrides.
"""

from confseek.config.settings import (
    DEFAULT_EXTENSIONS,
    DEFAULT_MANIFEST_FILENAME,
    DEFAULT_MAX_DEPTH,
    Settings,
    get_settings,
)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_MANIFEST_FILENAME",
    "DEFAULT_MAX_DEPTH",
    "Settings",
    "get_settings",
]
