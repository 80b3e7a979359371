"""
Configuration file loaders.

Structured files (JSON, TOML, YAML) are decoded; Python files are executed
and their export unwrapped.
"""

from confseek.loaders.module import ExportKind, ModuleExport, load_module, unwrap_export
from confseek.loaders.parser import UNUSABLE, FileFormatParser
from confseek.loaders.structured import load_structured

__all__ = [
    "UNUSABLE",
    "ExportKind",
    "FileFormatParser",
    "ModuleExport",
    "load_module",
    "load_structured",
    "unwrap_export",
]
