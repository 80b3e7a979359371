"""
In-memory result cache.

Results are keyed by every request field that affects the outcome and stay
valid while the source file's modification time is unchanged. Stale entries
are evicted lazily when looked up.
"""

from __future__ import annotations

import json
import os
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from confseek.types import Diagnostics, Tier
from confseek.utils.logging import get_logger


@dataclass(frozen=True)
class CacheEntry:
    """A cached resolution result and the source mtime it was captured at."""

    config: Any
    filepath: Path
    source: Tier
    mtime_ns: int


def _mtime_ns(path: Path) -> int:
    return os.stat(path).st_mtime_ns


class ConfigCache:
    """Process-lifetime map from request keys to resolution results."""

    def __init__(self, logger: Diagnostics | None = None) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.RLock()
        self.logger = logger or get_logger("confseek.cache")

    def get(self, key: str) -> CacheEntry | None:
        """
        Get a valid entry.

        The source file is stat'ed under the lock; an entry whose file is
        gone or whose mtime changed is evicted and None is returned.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            try:
                current = _mtime_ns(entry.filepath)
            except OSError:
                self.logger.debug(f"Evicting cache entry, source vanished: {entry.filepath}")
                del self._entries[key]
                return None
            if current != entry.mtime_ns:
                self.logger.debug(f"Evicting cache entry, source modified: {entry.filepath}")
                del self._entries[key]
                return None
            return entry

    def set(self, key: str, config: Any, filepath: Path, source: Tier = Tier.SEARCH) -> bool:
        """
        Store a result, capturing the source file's current mtime.

        Returns:
            True if stored, False if the file could not be stat'ed
        """
        try:
            mtime_ns = _mtime_ns(filepath)
        except OSError:
            self.logger.warning(f"Could not cache config for {filepath}: unable to get file stats")
            return False
        with self._lock:
            self._entries[key] = CacheEntry(config=config, filepath=filepath, source=source, mtime_ns=mtime_ns)
        return True

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def has(self, key: str) -> bool:
        """Check for an entry without validating it."""
        with self._lock:
            return key in self._entries

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    @staticmethod
    def generate_key(
        name: str,
        extensions: Iterable[str],
        start_directory: Path | str,
        max_depth: int,
        preferred_path: str | None,
        manifest_property: str | None,
        manifest_filename: str,
    ) -> str:
        """
        Build a deterministic key from the fields that affect resolution.

        Extensions keep their priority order in the key: requests that list
        the same extensions in a different order can resolve to different
        files and must not share an entry.
        """
        params = {
            "name": name,
            "extensions": [getattr(ext, "value", ext) for ext in extensions],
            "start_directory": str(start_directory),
            "max_depth": max_depth,
            "preferred_path": preferred_path or "",
            "manifest_property": manifest_property or "",
            "manifest_filename": manifest_filename,
        }
        return json.dumps(params, sort_keys=True)
