"""
Path utilities for configuration lookup.

Absolutizing, extension extraction, existence probing, directory listing and
the bounded upward directory walk.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


def absolute(path: str | os.PathLike[str]) -> Path:
    """
    Return an absolute, normalized path without resolving symlinks.

    Expands ``~`` and collapses ``.``/``..`` segments so the upward walk
    sees the same parents the caller does.
    """
    return Path(os.path.abspath(os.path.expanduser(os.fspath(path))))


def resolve_from(base: Path, path: str | os.PathLike[str]) -> Path:
    """Resolve ``path`` relative to ``base``; absolute paths are returned as-is."""
    candidate = Path(os.path.expanduser(os.fspath(path)))
    if candidate.is_absolute():
        return absolute(candidate)
    return absolute(base / candidate)


def extension_of(path: Path | str) -> str:
    """Lower-cased suffix of ``path`` including the dot, or "" if it has none."""
    return Path(path).suffix.lower()


def file_exists(path: Path) -> bool:
    """Check that ``path`` is an existing file, treating any access error as absence."""
    try:
        return path.is_file()
    except OSError:
        return False


def list_entries(directory: Path) -> set[str]:
    """
    List the entry names of ``directory``.

    Raises:
        OSError: If the directory cannot be listed
    """
    return set(os.listdir(directory))


def walk_up(start: Path, max_depth: int) -> Iterator[Path]:
    """
    Yield ``start`` and then at most ``max_depth`` of its ancestors.

    The walk stops early at the filesystem root, where a directory is its
    own parent.

    Args:
        start: Absolute directory to start from
        max_depth: Number of levels above ``start`` to visit (inclusive bound)

    Yields:
        Directories from ``start`` toward the root
    """
    current = start
    depth = 0
    while True:
        yield current
        if depth >= max_depth:
            return
        parent = current.parent
        if parent == current:
            return
        current = parent
        depth += 1
