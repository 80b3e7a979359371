"""
Confseek exception hierarchy.

All library exceptions inherit from ConfseekError, so callers can catch any
resolution failure with a single base class while still being able to
handle the individual cases.

Hierarchy::

    ConfseekError
    ├── InvalidRequestError   - malformed name, extensions, depth or options
    ├── SettingsError         - invalid CONFSEEK_* environment values
    ├── ConfigNotFoundError   - no tier produced a configuration
    └── ConfigLoadError       - a selected file could not be loaded
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ConfseekError(Exception):
    """Base exception for all confseek errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Requests and settings ---------------------------------------------------


class InvalidRequestError(ConfseekError, ValueError):
    """Raised when a resolution request cannot be built from the given arguments."""


class SettingsError(ConfseekError):
    """Raised when a CONFSEEK_* environment variable holds an invalid value."""

    def __init__(self, variable: str, value: str, message: str) -> None:
        super().__init__(
            f"Invalid value for {variable}: {value!r} ({message})",
            details={"variable": variable, "value": value},
        )
        self.variable = variable
        self.value = value


# --- Resolution --------------------------------------------------------------


class ConfigNotFoundError(ConfseekError):
    """Raised when every tier was exhausted without finding a configuration."""

    def __init__(
        self,
        name: str,
        extensions: Sequence[str],
        max_depth: int,
        start_directory: Path | str,
    ) -> None:
        extensions = [str(ext) for ext in extensions]
        full = (
            f"No configuration named '{name}' found "
            f"(extensions: {', '.join(extensions)}; "
            f"searched {max_depth} level(s) above {start_directory})"
        )
        super().__init__(
            full,
            details={
                "name": name,
                "extensions": extensions,
                "max_depth": max_depth,
                "start_directory": str(start_directory),
            },
        )
        self.name = name
        self.extensions = extensions
        self.max_depth = max_depth
        self.start_directory = Path(start_directory)


class ConfigLoadError(ConfseekError):
    """Raised when a selected configuration file cannot be parsed or evaluated."""

    def __init__(self, path: Path | str, reason: str, *, cause: BaseException | None = None) -> None:
        full = f"Failed to load configuration from {path}: {reason}"
        super().__init__(full, details={"path": str(path), "reason": reason})
        self.path = Path(path)
        self.reason = reason
        if cause is not None:
            self.__cause__ = cause
