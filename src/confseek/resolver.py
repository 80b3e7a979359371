"""
Configuration resolution engine.

Resolution order, first success wins:

1. cached result (when the request allows caching and the source is unchanged)
2. manifest property (``manifest_property``)
3. preferred path (``preferred_path``), with extensions appended when it has none
4. upward directory walk, trying every extension at a level before moving up

A file that was found but cannot be loaded, or a manifest property set to
null, raises ConfigLoadError instead of falling through to the next
candidate. When nothing is found, ConfigNotFoundError is raised.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from confseek.cache import ConfigCache
from confseek.exceptions import ConfigLoadError, ConfigNotFoundError
from confseek.loaders.parser import UNUSABLE, FileFormatParser
from confseek.manifest import MISSING, extract_property, find_manifest
from confseek.request import ResolutionRequest
from confseek.types import Diagnostics, ResolutionResult, Tier
from confseek.utils.logging import get_logger
from confseek.utils.paths import extension_of, list_entries, resolve_from, walk_up


class Resolver:
    """
    Resolves requests to loaded configurations.

    Args:
        cache: Result cache shared by requests with ``use_cache`` set
            (default: a private cache)
        parser: File loader (default: FileFormatParser sharing ``logger``)
        logger: Diagnostics sink (default: the "confseek.resolver" logger)
    """

    def __init__(
        self,
        cache: ConfigCache | None = None,
        parser: FileFormatParser | None = None,
        logger: Diagnostics | None = None,
    ) -> None:
        self.logger = logger or get_logger("confseek.resolver")
        self.cache = cache if cache is not None else ConfigCache(logger=logger)
        self.parser = parser or FileFormatParser(logger=logger)

    async def resolve(self, request: ResolutionRequest) -> ResolutionResult[Any]:
        """
        Resolve a request.

        Returns:
            The loaded configuration and its file

        Raises:
            ConfigNotFoundError: If no tier produced a configuration
            ConfigLoadError: If a selected file could not be loaded
        """
        key = request.cache_key

        if request.use_cache:
            entry = self.cache.get(key)
            if entry is not None:
                self.logger.debug(f"Config loaded from cache for key: {key}")
                return ResolutionResult(
                    config=entry.config,
                    filepath=entry.filepath,
                    source=entry.source,
                    from_cache=True,
                )

        result = await self._resolve_uncached(request)

        if request.use_cache:
            self.cache.set(key, result.config, result.filepath, result.source)
        return result

    async def _resolve_uncached(self, request: ResolutionRequest) -> ResolutionResult[Any]:
        if request.manifest_property:
            result = await self._from_manifest(request, request.manifest_property)
            if result is not None:
                return result

        if request.preferred_path:
            result = await self._from_preferred_path(request, request.preferred_path)
            if result is not None:
                return result

        result = await self._from_search(request)
        if result is not None:
            return result

        raise ConfigNotFoundError(
            name=request.name,
            extensions=[ext.value for ext in request.extensions],
            max_depth=request.max_depth,
            start_directory=request.start_directory,
        )

    async def _from_manifest(self, request: ResolutionRequest, property_name: str) -> ResolutionResult[Any] | None:
        manifest_path = find_manifest(request.start_directory, request.max_depth, request.manifest_filename)
        if manifest_path is None:
            self.logger.warning(
                f'No {request.manifest_filename} found for property "{property_name}", '
                f"searching for {request.name} files instead."
            )
            return None

        value = await extract_property(manifest_path, property_name, self.parser)
        if value is MISSING:
            self.logger.warning(
                f'Property "{property_name}" not found in {manifest_path}, '
                f"searching for {request.name} files instead."
            )
            return None
        if value is None:
            self.logger.error(f'Property "{property_name}" of {manifest_path} is null')
            raise ConfigLoadError(manifest_path, f'property "{property_name}" is null')

        self.logger.debug(f'Config loaded from property "{property_name}" of {manifest_path}')
        return ResolutionResult(config=value, filepath=manifest_path, source=Tier.MANIFEST)

    def _preferred_candidates(self, request: ResolutionRequest, preferred_path: str) -> list[Path]:
        path = resolve_from(request.start_directory, preferred_path)
        candidates = [path]
        if not extension_of(path):
            candidates.extend(path.with_name(path.name + ext.value) for ext in request.extensions)
        return candidates

    async def _from_preferred_path(self, request: ResolutionRequest, preferred_path: str) -> ResolutionResult[Any] | None:
        for candidate in self._preferred_candidates(request, preferred_path):
            self.logger.debug(f"Trying preferred path candidate: {candidate}")
            config = await self.parser.parse(candidate)
            if config is not UNUSABLE:
                return ResolutionResult(config=config, filepath=candidate, source=Tier.PREFERRED)

        self.logger.warning(
            f'Preferred path "{preferred_path}" not found or invalid, '
            f"searching for {request.name} files instead."
        )
        return None

    async def _from_search(self, request: ResolutionRequest) -> ResolutionResult[Any] | None:
        for directory in walk_up(request.start_directory, request.max_depth):
            try:
                entries = list_entries(directory)
            except OSError as e:
                self.logger.debug(f"Cannot list {directory}: {e}")
                continue

            for ext in request.extensions:
                filename = request.name + ext.value
                if filename not in entries:
                    continue
                filepath = directory / filename
                self.logger.debug(f"Trying candidate: {filepath}")
                config = await self.parser.parse(filepath)
                if config is not UNUSABLE:
                    return ResolutionResult(config=config, filepath=filepath, source=Tier.SEARCH)
        return None
