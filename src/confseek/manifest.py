"""
Project manifest property lookup.

Finds the nearest project manifest (``pyproject.toml`` by default) above a
directory and reads a configuration value out of it. The property is a
top-level key or a dotted path into nested tables, e.g. ``tool.myapp``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final

from confseek.loaders.parser import UNUSABLE, FileFormatParser
from confseek.utils.paths import file_exists, walk_up


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


#: Returned by extract_property when the manifest has no such property
MISSING: Final = _Missing()


def find_manifest(start_directory: Path, max_depth: int, filename: str) -> Path | None:
    """
    Find the nearest manifest file at or above ``start_directory``.

    Args:
        start_directory: Absolute directory to start from
        max_depth: Number of levels above the start to inspect
        filename: Manifest file name

    Returns:
        Path of the first manifest found, or None
    """
    for directory in walk_up(start_directory, max_depth):
        candidate = directory / filename
        if file_exists(candidate):
            return candidate
    return None


async def extract_property(manifest_path: Path, property_name: str, parser: FileFormatParser) -> Any:
    """
    Read a property from a manifest file.

    Args:
        manifest_path: Manifest to parse
        property_name: Top-level key or dotted path
        parser: Parser used to load the manifest

    Returns:
        The property value (None when set to null), or MISSING if the
        manifest is gone, is not a mapping or lacks the property

    Raises:
        ConfigLoadError: If the manifest exists but cannot be parsed
    """
    data = await parser.parse(manifest_path)
    if data is UNUSABLE:
        return MISSING

    # An exact top-level key wins over a dotted path
    if isinstance(data, dict) and property_name in data:
        return data[property_name]

    value = data
    for part in property_name.split("."):
        if not isinstance(value, dict) or part not in value:
            return MISSING
        value = value[part]
    return value
