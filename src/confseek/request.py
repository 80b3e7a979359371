"""
Resolution requests.

A request is immutable and always fully populated. Both public constructors
go through the same builder, which validates arguments and fills unset
options from the process settings.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from confseek.cache import ConfigCache
from confseek.config.settings import Settings, get_settings
from confseek.exceptions import InvalidRequestError
from confseek.types import Extension
from confseek.utils.paths import absolute

OPTION_NAMES = frozenset(
    {
        "name",
        "extensions",
        "start_directory",
        "max_depth",
        "preferred_path",
        "manifest_property",
        "manifest_filename",
        "use_cache",
    }
)


@dataclass(frozen=True)
class ResolutionRequest:
    """Everything that determines where a configuration is looked up."""

    name: str
    extensions: tuple[Extension, ...]
    start_directory: Path
    max_depth: int
    preferred_path: str | None = None
    manifest_property: str | None = None
    manifest_filename: str = "pyproject.toml"
    use_cache: bool = True

    @classmethod
    def from_name(
        cls,
        name: str,
        extensions: Iterable[Extension | str] | None = None,
        *,
        start_directory: str | os.PathLike[str] | None = None,
        max_depth: int | None = None,
        preferred_path: str | os.PathLike[str] | None = None,
        manifest_property: str | None = None,
        manifest_filename: str | None = None,
        use_cache: bool | None = None,
        settings: Settings | None = None,
    ) -> ResolutionRequest:
        """Build a request from a bare name plus optional overrides."""
        return _build(
            name=name,
            extensions=extensions,
            start_directory=start_directory,
            max_depth=max_depth,
            preferred_path=preferred_path,
            manifest_property=manifest_property,
            manifest_filename=manifest_filename,
            use_cache=use_cache,
            settings=settings,
        )

    @classmethod
    def from_options(cls, options: Mapping[str, Any], *, settings: Settings | None = None) -> ResolutionRequest:
        """
        Build a request from an options mapping.

        Keys match the ResolutionRequest fields; ``name`` is required.

        Raises:
            InvalidRequestError: On a missing name or an unknown key
        """
        unknown = set(options) - OPTION_NAMES
        if unknown:
            raise InvalidRequestError(
                f"Unknown option(s): {', '.join(sorted(unknown))}",
                details={"unknown": sorted(unknown)},
            )
        if "name" not in options:
            raise InvalidRequestError("Option 'name' is required")
        return _build(**options, settings=settings)

    @property
    def cache_key(self) -> str:
        return ConfigCache.generate_key(
            name=self.name,
            extensions=self.extensions,
            start_directory=self.start_directory,
            max_depth=self.max_depth,
            preferred_path=self.preferred_path,
            manifest_property=self.manifest_property,
            manifest_filename=self.manifest_filename,
        )


def _normalize_extensions(extensions: Iterable[Extension | str]) -> tuple[Extension, ...]:
    if isinstance(extensions, str):
        # A lone string is one extension, not a sequence of characters
        extensions = [extensions]
    result: list[Extension] = []
    for ext in extensions:
        member = Extension.parse(ext)
        if member not in result:
            result.append(member)
    if not result:
        raise InvalidRequestError("At least one extension is required")
    return tuple(result)


def _validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidRequestError("Config name must be a non-empty string", details={"name": name})
    if "/" in name or (os.sep != "/" and os.sep in name):
        raise InvalidRequestError(
            f"Config name must be a bare file name without directories: {name!r}",
            details={"name": name},
        )
    return name


def _validate_max_depth(max_depth: Any) -> int:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        raise InvalidRequestError(
            f"max_depth must be a non-negative integer, got {max_depth!r}",
            details={"max_depth": max_depth},
        )
    return max_depth


def _build(
    *,
    name: Any,
    extensions: Iterable[Extension | str] | None = None,
    start_directory: str | os.PathLike[str] | None = None,
    max_depth: int | None = None,
    preferred_path: str | os.PathLike[str] | None = None,
    manifest_property: str | None = None,
    manifest_filename: str | None = None,
    use_cache: bool | None = None,
    settings: Settings | None = None,
) -> ResolutionRequest:
    if settings is None:
        settings = get_settings()

    return ResolutionRequest(
        name=_validate_name(name),
        extensions=_normalize_extensions(settings.extensions if extensions is None else extensions),
        start_directory=absolute(os.getcwd() if start_directory is None else start_directory),
        max_depth=_validate_max_depth(settings.max_depth if max_depth is None else max_depth),
        preferred_path=os.fspath(preferred_path) if preferred_path else None,
        manifest_property=manifest_property or None,
        manifest_filename=manifest_filename or settings.manifest_filename,
        use_cache=settings.use_cache if use_cache is None else bool(use_cache),
    )
