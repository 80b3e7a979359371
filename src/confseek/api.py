"""
Programmatic API for confseek.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Any

from confseek.cache import ConfigCache
from confseek.request import ResolutionRequest
from confseek.resolver import Resolver
from confseek.types import Extension, ResolutionResult
from confseek.utils.async_utils import dual, run_blocking
from confseek.utils.logging import get_logger

logger = get_logger("confseek.api")

#: Cache shared by every call that does not pass its own resolver
config_cache = ConfigCache()

_default_resolver = Resolver(cache=config_cache)


def get_default_resolver() -> Resolver:
    """Get the resolver used when no resolver is passed explicitly."""
    return _default_resolver


def build_request(
    name_or_options: str | Mapping[str, Any] | ResolutionRequest,
    extensions: Iterable[Extension | str] | None = None,
    **options: Any,
) -> ResolutionRequest:
    """
    Normalize the accepted call forms to a ResolutionRequest.

    Args:
        name_or_options: Config name, options mapping or a ready request
        extensions: Extensions in priority order (name form only)
        **options: Remaining request options (name form only)

    Returns:
        ResolutionRequest
    """
    if isinstance(name_or_options, ResolutionRequest):
        if extensions is not None or options:
            raise TypeError("Options cannot be combined with a ResolutionRequest")
        return name_or_options
    if isinstance(name_or_options, Mapping):
        if extensions is not None or options:
            raise TypeError("Options cannot be combined with an options mapping")
        return ResolutionRequest.from_options(name_or_options)
    return ResolutionRequest.from_name(name_or_options, extensions, **options)


@dual
async def load_config(
    name_or_options: str | Mapping[str, Any] | ResolutionRequest,
    extensions: Iterable[Extension | str] | None = None,
    *,
    start_directory: str | os.PathLike[str] | None = None,
    max_depth: int | None = None,
    preferred_path: str | os.PathLike[str] | None = None,
    manifest_property: str | None = None,
    manifest_filename: str | None = None,
    use_cache: bool | None = None,
    resolver: Resolver | None = None,
) -> ResolutionResult[Any]:
    """
    Find and load a configuration, automatically works in both sync and async contexts.

    Args:
        name_or_options: Config name without extension, an options mapping
            with the same keys as the keyword arguments (plus ``name``), or a
            ResolutionRequest
        extensions: Extensions in priority order (default: .py, .json, .toml, .yaml, .yml)
        start_directory: Directory to start searching from (default: current directory)
        max_depth: Levels above start_directory to search (default: 10)
        preferred_path: File to try before searching, relative to start_directory
        manifest_property: Property of the project manifest to use as configuration
        manifest_filename: Manifest file name (default: pyproject.toml)
        use_cache: Whether to use the result cache (default: True)
        resolver: Resolver to use (default: the shared resolver)

    Returns:
        ResolutionResult with the loaded config and its file path

    Raises:
        ConfigNotFoundError: If no configuration was found
        ConfigLoadError: If a found file could not be loaded
        InvalidRequestError: If the arguments are invalid

    Examples:
        # Sync usage (auto-detected)
        result = load_config("myapp")

        # Async usage (auto-detected)
        result = await load_config("myapp", [".toml", ".json"])

        # Options mapping
        result = load_config({"name": "myapp", "manifest_property": "tool.myapp"})
    """
    options = {
        key: value
        for key, value in {
            "start_directory": start_directory,
            "max_depth": max_depth,
            "preferred_path": preferred_path,
            "manifest_property": manifest_property,
            "manifest_filename": manifest_filename,
            "use_cache": use_cache,
        }.items()
        if value is not None
    }
    request = build_request(name_or_options, extensions, **options)
    return await (resolver or _default_resolver).resolve(request)


def load_config_sync(
    name_or_options: str | Mapping[str, Any] | ResolutionRequest,
    extensions: Iterable[Extension | str] | None = None,
    **options: Any,
) -> ResolutionResult[Any]:
    """
    Synchronous wrapper for load_config().

    This explicitly runs synchronously, even if called from an async context.

    See load_config() for parameter documentation.
    """
    resolver = options.pop("resolver", None) or _default_resolver
    request = build_request(name_or_options, extensions, **options)
    return run_blocking(resolver.resolve(request))


def clear_config_cache() -> None:
    """Drop every cached result of the shared resolver."""
    config_cache.clear()
    logger.debug("Configuration cache cleared")


def get_cache_stats() -> dict[str, Any]:
    """Get the size and keys of the shared cache."""
    return {"size": config_cache.size(), "keys": config_cache.keys()}
