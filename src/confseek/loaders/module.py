"""
Python module configuration files.

A ``.py`` configuration file is executed as a fresh module. Its exported
value is the module attribute ``config`` when defined, otherwise the names
listed in ``__all__``, otherwise every public non-module global. The export
is then unwrapped: a callable is called once, and an awaitable (from the
call or exported directly) is awaited once.
"""

from __future__ import annotations

import hashlib
import importlib.util
import inspect
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import Any

import aiofiles

EXPORT_NAME = "config"


class ExportKind(str, Enum):
    """How an exported value must be unwrapped."""

    RAW = "raw"
    CALLABLE = "callable"
    PENDING = "pending"


@dataclass(frozen=True)
class ModuleExport:
    """An exported value tagged with its unwrap kind."""

    kind: ExportKind
    value: Any

    @classmethod
    def of(cls, value: Any) -> ModuleExport:
        if inspect.isawaitable(value):
            return cls(ExportKind.PENDING, value)
        # Classes are values, not producers
        if callable(value) and not isinstance(value, type):
            return cls(ExportKind.CALLABLE, value)
        return cls(ExportKind.RAW, value)


async def unwrap_export(export: ModuleExport) -> Any:
    """
    Resolve an export to its final value.

    Calls a CALLABLE once with no arguments, then awaits a PENDING value
    once. A callable returned by the call is kept as a raw value.
    """
    if export.kind is ExportKind.CALLABLE:
        export = ModuleExport.of(export.value())
        if export.kind is ExportKind.CALLABLE:
            return export.value
    if export.kind is ExportKind.PENDING:
        return await export.value
    return export.value


def _module_name(path: Path) -> str:
    digest = hashlib.sha256(str(path).encode("utf-8")).hexdigest()[:12]
    return f"_confseek_{path.stem}_{digest}"


def execute_module(path: Path, source: bytes) -> ModuleType:
    """
    Execute Python source read from ``path`` as a new module object.

    The source is compiled directly, bypassing ``__pycache__``, so an edit
    is picked up even when size and whole-second mtime are unchanged. The
    module is registered in ``sys.modules`` only while it executes.

    Raises:
        ImportError: If no loader can be created for the file
        Exception: Whatever the module body raises
    """
    name = _module_name(path)
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot create a module loader for {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        exec(compile(source, str(path), "exec"), module.__dict__)
    finally:
        sys.modules.pop(name, None)
    return module


def select_export(module: ModuleType) -> Any:
    """Pick the configuration value exported by an executed module."""
    if hasattr(module, EXPORT_NAME):
        return getattr(module, EXPORT_NAME)

    names = getattr(module, "__all__", None)
    if names is not None:
        return {name: getattr(module, name) for name in names}

    return {
        name: value
        for name, value in vars(module).items()
        if not name.startswith("_") and not isinstance(value, ModuleType)
    }


async def load_module(path: Path) -> Any:
    """Execute a Python configuration file and return its unwrapped export."""
    async with aiofiles.open(path, "rb") as f:
        source = await f.read()
    module = execute_module(path, source)
    return await unwrap_export(ModuleExport.of(select_export(module)))
