"""
Structured data decoding.

Reads JSON, TOML and YAML configuration files asynchronously and decodes
them into plain Python values.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import aiofiles
import yaml

from confseek.types import Extension
from confseek.utils.text import normalize_json_text


async def read_text(path: Path) -> str:
    """
    Read a file as text without blocking the event loop.

    A leading UTF-8 byte order mark is dropped.
    """
    async with aiofiles.open(path, encoding="utf-8-sig") as f:
        return await f.read()


def decode_json(text: str) -> Any:
    """Decode lenient JSON (comments and trailing commas allowed)."""
    return json.loads(normalize_json_text(text))


def decode_toml(text: str) -> Any:
    return tomllib.loads(text)


def decode_yaml(text: str) -> Any:
    return yaml.safe_load(text)


DECODERS = {
    Extension.JSON: decode_json,
    Extension.TOML: decode_toml,
    Extension.YAML: decode_yaml,
    Extension.YML: decode_yaml,
}


async def load_structured(path: Path, extension: Extension) -> Any:
    """
    Read and decode a structured configuration file.

    Args:
        path: File to read
        extension: Extension selecting the decoder

    Returns:
        Decoded value

    Raises:
        OSError: If the file cannot be read
        ValueError: If the contents do not decode (JSON, TOML and YAML errors)
    """
    text = await read_text(path)
    decoder = DECODERS[extension]
    try:
        return decoder(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            raise ValueError(f"YAML syntax error at line {mark.line + 1}, column {mark.column + 1}: {e}") from e
        raise ValueError(f"YAML syntax error: {e}") from e
