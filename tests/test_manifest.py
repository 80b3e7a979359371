"""
Tests for manifest property lookup.
"""

import pytest

from confseek.exceptions import ConfigLoadError
from confseek.loaders import FileFormatParser
from confseek.manifest import MISSING, extract_property, find_manifest


@pytest.fixture
def parser():
    return FileFormatParser()


@pytest.mark.unit
class TestFindManifest:
    """Tests for find_manifest."""

    def test_in_start_directory(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("")
        assert find_manifest(tmp_path, 10, "pyproject.toml") == tmp_path / "pyproject.toml"

    def test_nearest_ancestor_wins(self, tmp_path):
        start = tmp_path / "a" / "b"
        start.mkdir(parents=True)
        (tmp_path / "pyproject.toml").write_text("")
        (tmp_path / "a" / "pyproject.toml").write_text("")
        assert find_manifest(start, 10, "pyproject.toml") == tmp_path / "a" / "pyproject.toml"

    def test_depth_bound(self, tmp_path):
        start = tmp_path / "a" / "b"
        start.mkdir(parents=True)
        (tmp_path / "package.json").write_text("{}")
        assert find_manifest(start, 1, "package.json") is None
        assert find_manifest(start, 2, "package.json") == tmp_path / "package.json"

    def test_not_found(self, tmp_path):
        assert find_manifest(tmp_path, 0, "pyproject.toml") is None


class TestExtractProperty:
    """Tests for extract_property."""

    @pytest.mark.asyncio
    async def test_top_level_json_key(self, parser, tmp_path):
        manifest = tmp_path / "package.json"
        manifest.write_text('{"appConfig": {"x": 1}}')
        assert await extract_property(manifest, "appConfig", parser) == {"x": 1}

    @pytest.mark.asyncio
    async def test_dotted_toml_table(self, parser, tmp_path):
        manifest = tmp_path / "pyproject.toml"
        manifest.write_text('[project]\nname = "demo"\n\n[tool.myapp]\nport = 8080\n')
        assert await extract_property(manifest, "tool.myapp", parser) == {"port": 8080}

    @pytest.mark.asyncio
    async def test_literal_dotted_key_preferred(self, parser, tmp_path):
        manifest = tmp_path / "package.json"
        manifest.write_text('{"a.b": 1, "a": {"b": 2}}')
        assert await extract_property(manifest, "a.b", parser) == 1

    @pytest.mark.asyncio
    async def test_falsy_value_is_present(self, parser, tmp_path):
        manifest = tmp_path / "package.json"
        manifest.write_text('{"flag": false, "empty": {}}')
        assert await extract_property(manifest, "flag", parser) is False
        assert await extract_property(manifest, "empty", parser) == {}

    @pytest.mark.asyncio
    async def test_missing_property(self, parser, tmp_path):
        manifest = tmp_path / "pyproject.toml"
        manifest.write_text('[tool.other]\nx = 1\n')
        assert await extract_property(manifest, "tool.myapp", parser) is MISSING
        assert await extract_property(manifest, "tool.other.x.y", parser) is MISSING

    @pytest.mark.asyncio
    async def test_null_property_is_present(self, parser, tmp_path):
        manifest = tmp_path / "package.json"
        manifest.write_text('{"appConfig": null, "tool": {"app": null}}')
        assert await extract_property(manifest, "appConfig", parser) is None
        assert await extract_property(manifest, "tool.app", parser) is None

    @pytest.mark.asyncio
    async def test_non_mapping_manifest(self, parser, tmp_path):
        manifest = tmp_path / "package.json"
        manifest.write_text("[1, 2]")
        assert await extract_property(manifest, "appConfig", parser) is MISSING

    @pytest.mark.asyncio
    async def test_vanished_manifest(self, parser, tmp_path):
        assert await extract_property(tmp_path / "package.json", "x", parser) is MISSING

    @pytest.mark.asyncio
    async def test_broken_manifest_raises(self, parser, tmp_path):
        manifest = tmp_path / "pyproject.toml"
        manifest.write_text("[tool\n")
        with pytest.raises(ConfigLoadError):
            await extract_property(manifest, "tool.myapp", parser)
