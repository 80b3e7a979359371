"""
confseek - find and load configuration files by walking up the directory tree.
"""

import logging

__version__ = "0.1.0"

# Library convention: silent until the application configures logging
logging.getLogger("confseek").addHandler(logging.NullHandler())

# Programmatic API
from confseek.api import (  # noqa: E402
    build_request,
    clear_config_cache,
    config_cache,
    get_cache_stats,
    get_default_resolver,
    load_config,
    load_config_sync,
)
from confseek.cache import CacheEntry, ConfigCache  # noqa: E402
from confseek.config import Settings, get_settings  # noqa: E402

# Exceptions
from confseek.exceptions import (  # noqa: E402
    ConfigLoadError,
    ConfigNotFoundError,
    ConfseekError,
    InvalidRequestError,
    SettingsError,
)
from confseek.loaders import UNUSABLE, FileFormatParser  # noqa: E402
from confseek.manifest import MISSING, extract_property, find_manifest  # noqa: E402
from confseek.request import ResolutionRequest  # noqa: E402
from confseek.resolver import Resolver  # noqa: E402
from confseek.types import Diagnostics, Extension, FormatClass, ResolutionResult, Tier  # noqa: E402

# Logging utilities
from confseek.utils.logging import get_logger, setup_logging  # noqa: E402
from confseek.utils.text import normalize_json_text  # noqa: E402

__all__ = [
    # Loading
    "load_config",
    "load_config_sync",
    "build_request",
    "Resolver",
    "ResolutionRequest",
    "ResolutionResult",
    "Extension",
    "FormatClass",
    "Tier",
    "Diagnostics",
    # Cache
    "ConfigCache",
    "CacheEntry",
    "config_cache",
    "clear_config_cache",
    "get_cache_stats",
    "get_default_resolver",
    # Building blocks
    "FileFormatParser",
    "UNUSABLE",
    "MISSING",
    "find_manifest",
    "extract_property",
    "normalize_json_text",
    # Config
    "Settings",
    "get_settings",
    # Logging
    "setup_logging",
    "get_logger",
    # Exceptions
    "ConfseekError",
    "ConfigNotFoundError",
    "ConfigLoadError",
    "InvalidRequestError",
    "SettingsError",
]
