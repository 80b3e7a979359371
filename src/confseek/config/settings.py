"""
Library defaults and environment overrides.

Defaults apply whenever a request leaves an option unset. Each default can be
overridden per process with a CONFSEEK_* environment variable, read at the
time a request is built.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from confseek.exceptions import InvalidRequestError, SettingsError
from confseek.types import Extension

DEFAULT_EXTENSIONS: tuple[Extension, ...] = (
    Extension.PY,
    Extension.JSON,
    Extension.TOML,
    Extension.YAML,
    Extension.YML,
)
DEFAULT_MAX_DEPTH = 10
DEFAULT_MANIFEST_FILENAME = "pyproject.toml"

ENV_EXTENSIONS = "CONFSEEK_EXTENSIONS"
ENV_MAX_DEPTH = "CONFSEEK_MAX_DEPTH"
ENV_MANIFEST = "CONFSEEK_MANIFEST"
ENV_USE_CACHE = "CONFSEEK_USE_CACHE"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Defaults used to fill unset request options."""

    extensions: tuple[Extension, ...] = DEFAULT_EXTENSIONS
    max_depth: int = DEFAULT_MAX_DEPTH
    manifest_filename: str = DEFAULT_MANIFEST_FILENAME
    use_cache: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Build settings from defaults overlaid with CONFSEEK_* variables.

        Args:
            environ: Environment mapping (default: os.environ)

        Returns:
            Settings instance

        Raises:
            SettingsError: If a variable is set to an invalid value
        """
        if environ is None:
            environ = os.environ

        settings = cls()

        raw = environ.get(ENV_EXTENSIONS)
        if raw is not None and raw.strip():
            try:
                extensions = tuple(Extension.parse(item) for item in raw.split(",") if item.strip())
            except InvalidRequestError as e:
                raise SettingsError(ENV_EXTENSIONS, raw, e.message) from None
            settings = replace(settings, extensions=extensions)

        raw = environ.get(ENV_MAX_DEPTH)
        if raw is not None and raw.strip():
            try:
                max_depth = int(raw)
            except ValueError:
                raise SettingsError(ENV_MAX_DEPTH, raw, "expected a non-negative integer") from None
            if max_depth < 0:
                raise SettingsError(ENV_MAX_DEPTH, raw, "expected a non-negative integer")
            settings = replace(settings, max_depth=max_depth)

        raw = environ.get(ENV_MANIFEST)
        if raw is not None and raw.strip():
            settings = replace(settings, manifest_filename=raw.strip())

        raw = environ.get(ENV_USE_CACHE)
        if raw is not None and raw.strip():
            value = raw.strip().lower()
            if value in _TRUE_VALUES:
                settings = replace(settings, use_cache=True)
            elif value in _FALSE_VALUES:
                settings = replace(settings, use_cache=False)
            else:
                raise SettingsError(ENV_USE_CACHE, raw, "expected a boolean")

        return settings


def get_settings() -> Settings:
    """Get settings for the current process environment."""
    return Settings.from_env()
