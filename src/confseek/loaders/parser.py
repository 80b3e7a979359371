"""
File format dispatch.

Turns a candidate path into a configuration value, the UNUSABLE marker when
the file is absent, or a ConfigLoadError when the file exists but cannot be
loaded.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final

from confseek.exceptions import ConfigLoadError, InvalidRequestError
from confseek.loaders.module import load_module
from confseek.loaders.structured import load_structured
from confseek.types import Diagnostics, Extension, FormatClass
from confseek.utils.logging import get_logger
from confseek.utils.paths import extension_of, file_exists


class _Unusable:
    """Marker for a candidate file that does not exist."""

    _instance: "_Unusable | None" = None

    def __new__(cls) -> "_Unusable":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNUSABLE"

    def __bool__(self) -> bool:
        return False


UNUSABLE: Final = _Unusable()


class FileFormatParser:
    """Loads configuration files by extension."""

    def __init__(self, logger: Diagnostics | None = None) -> None:
        self.logger = logger or get_logger("confseek.loaders")

    async def parse(self, path: Path) -> Any:
        """
        Load a configuration file.

        Args:
            path: Absolute path of the candidate file

        Returns:
            The loaded value, or UNUSABLE if the file does not exist

        Raises:
            ConfigLoadError: If the file exists but cannot be loaded, or yields None
        """
        if not file_exists(path):
            self.logger.debug(f"Candidate does not exist: {path}")
            return UNUSABLE

        try:
            extension = Extension.parse(extension_of(path))
        except InvalidRequestError as e:
            raise ConfigLoadError(path, f"unsupported file type '{path.suffix}'", cause=e) from e

        self.logger.debug(f"Loading {extension.format_class.value} configuration: {path}")
        try:
            if extension.format_class is FormatClass.EXECUTABLE:
                value = await load_module(path)
            else:
                value = await load_structured(path, extension)
        except Exception as e:
            self.logger.error(f"Failed to parse config file {path}: {e}")
            raise ConfigLoadError(path, f"{type(e).__name__}: {e}", cause=e) from e

        if value is None:
            self.logger.error(f"Config file {path} produced no value")
            raise ConfigLoadError(path, "file produced no configuration value")
        return value
