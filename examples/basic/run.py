#!/usr/bin/env python3
"""
Example script resolving configuration with confseek.

This demonstrates:
- Upward search with extension priority
- JSON with comments and trailing commas
- Executable .py configs exporting an async function
- Manifest properties in pyproject.toml
"""

from pathlib import Path

from confseek import load_config, setup_logging

if __name__ == "__main__":
    project_dir = Path(__file__).parent
    setup_logging(level="DEBUG")

    # Found next to this script, comments and trailing commas are tolerated
    result = load_config("myapp", [".json"], start_directory=project_dir)
    print(result.filepath, result.config)

    # The .py file wins on priority, its async config() is called and awaited
    result = load_config("myapp", start_directory=project_dir / "services" / "api")
    print(result.filepath, result.config)

    # Manifest property takes precedence over files on disk
    result = load_config("myapp", start_directory=project_dir, manifest_property="tool.myapp")
    print(result.source.value, result.config)
