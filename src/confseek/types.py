"""
Type definitions for confseek.

Provides the extension enumeration, tier markers, the diagnostics protocol
and the resolution result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar

from confseek.exceptions import InvalidRequestError

T = TypeVar("T")


class FormatClass(str, Enum):
    """
    Handling class of a configuration file.

    Modes:
        STRUCTURED: Data files decoded into plain values (JSON, TOML, YAML)
        EXECUTABLE: Python modules executed to produce the value
    """

    STRUCTURED = "structured"
    EXECUTABLE = "executable"


class Extension(str, Enum):
    """Recognized configuration file suffixes."""

    PY = ".py"
    JSON = ".json"
    TOML = ".toml"
    YAML = ".yaml"
    YML = ".yml"

    @property
    def format_class(self) -> FormatClass:
        if self is Extension.PY:
            return FormatClass.EXECUTABLE
        return FormatClass.STRUCTURED

    @classmethod
    def parse(cls, value: Extension | str) -> Extension:
        """
        Normalize a suffix to an Extension member.

        Accepts members, ".json", "json" and any casing of those.

        Raises:
            InvalidRequestError: If the suffix is not recognized
        """
        if isinstance(value, Extension):
            return value
        if not isinstance(value, str):
            raise InvalidRequestError(f"Extension must be a string, got {type(value).__name__}")
        suffix = value.strip().lower()
        if suffix and not suffix.startswith("."):
            suffix = "." + suffix
        try:
            return cls(suffix)
        except ValueError:
            supported = ", ".join(member.value for member in cls)
            raise InvalidRequestError(
                f"Unsupported extension: {value!r}. Supported extensions: {supported}",
                details={"extension": value},
            ) from None


class Tier(str, Enum):
    """Lookup strategy that produced a result, in priority order."""

    MANIFEST = "manifest"
    PREFERRED = "preferred"
    SEARCH = "search"


class Diagnostics(Protocol):
    """
    Side channel for resolution events.

    ``logging.Logger`` satisfies this protocol; any object with the same
    three methods can be injected instead.
    """

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


@dataclass(frozen=True)
class ResolutionResult(Generic[T]):
    """A loaded configuration together with the file it came from."""

    config: T
    filepath: Path
    source: Tier
    from_cache: bool = False

    def get(self, key: str, default: Any = None) -> Any:
        """Get a nested configuration value using dot notation."""
        value: Any = self.config
        for part in key.split("."):
            if isinstance(value, dict):
                if part not in value:
                    return default
                value = value[part]
            elif hasattr(value, part):
                value = getattr(value, part)
            else:
                return default
        return value
