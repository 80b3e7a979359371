"""
Tests for the programmatic API.
"""

import asyncio

import pytest

import confseek
from confseek import (
    ConfigNotFoundError,
    ResolutionRequest,
    Resolver,
    clear_config_cache,
    config_cache,
    get_cache_stats,
    get_default_resolver,
    load_config,
    load_config_sync,
)
from confseek.api import build_request
from confseek.cache import ConfigCache
from confseek.types import Tier


@pytest.fixture(autouse=True)
def clean_cache():
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def project(tmp_path):
    (tmp_path / "myapp.json").write_text('{"name": "json"}')
    (tmp_path / "myapp.toml").write_text('name = "toml"\n')
    return tmp_path


class TestLoadConfigSync:
    """load_config called from synchronous code."""

    def test_sync_call_returns_result(self, project):
        result = load_config("myapp", start_directory=project)
        assert result.config == {"name": "json"}
        assert result.filepath == project / "myapp.json"

    def test_extensions_positional(self, project):
        result = load_config("myapp", [".toml", ".json"], start_directory=project)
        assert result.config == {"name": "toml"}

    def test_options_mapping(self, project):
        result = load_config({"name": "myapp", "extensions": ["toml"], "start_directory": str(project)})
        assert result.filepath == project / "myapp.toml"

    def test_request_object(self, project):
        req = ResolutionRequest.from_name("myapp", start_directory=project)
        assert load_config(req).filepath == project / "myapp.json"

    def test_defaults_to_current_directory(self, project, monkeypatch):
        monkeypatch.chdir(project)
        assert load_config("myapp").config == {"name": "json"}

    def test_not_found(self, tmp_path):
        with pytest.raises(ConfigNotFoundError):
            load_config("myapp", start_directory=tmp_path, max_depth=0)

    def test_load_config_sync(self, project):
        assert load_config_sync("myapp", start_directory=project).config == {"name": "json"}

    def test_result_dot_access(self, tmp_path):
        (tmp_path / "svc.toml").write_text("[server]\nport = 8080\n")
        result = load_config("svc", start_directory=tmp_path)
        assert result.get("server.port") == 8080
        assert result.get("server.host", "localhost") == "localhost"


class TestLoadConfigAsync:
    """load_config awaited inside an event loop."""

    @pytest.mark.asyncio
    async def test_awaitable_in_running_loop(self, project):
        pending = load_config("myapp", start_directory=project)
        assert asyncio.iscoroutine(pending)
        result = await pending
        assert result.config == {"name": "json"}

    @pytest.mark.asyncio
    async def test_load_config_sync_inside_loop(self, project):
        result = load_config_sync("myapp", start_directory=project)
        assert result.config == {"name": "json"}

    @pytest.mark.asyncio
    async def test_custom_resolver(self, project):
        cache = ConfigCache()
        result = await load_config("myapp", start_directory=project, resolver=Resolver(cache=cache))
        assert result.source is Tier.SEARCH
        assert cache.size() == 1
        assert config_cache.size() == 0


class TestSharedCache:
    """Tests for the process-wide cache helpers."""

    def test_results_cached_by_default(self, project):
        first = load_config("myapp", start_directory=project)
        second = load_config("myapp", start_directory=project)
        assert first.from_cache is False
        assert second.from_cache is True
        assert get_cache_stats()["size"] == 1

    def test_use_cache_false(self, project):
        load_config("myapp", start_directory=project, use_cache=False)
        assert get_cache_stats() == {"size": 0, "keys": []}

    def test_cache_disabled_by_environment(self, project, monkeypatch):
        monkeypatch.setenv("CONFSEEK_USE_CACHE", "0")
        load_config("myapp", start_directory=project)
        assert get_cache_stats()["size"] == 0

    def test_clear_config_cache(self, project):
        load_config("myapp", start_directory=project)
        clear_config_cache()
        assert get_cache_stats()["size"] == 0

    def test_stats_keys_match_request(self, project):
        load_config("myapp", start_directory=project)
        req = ResolutionRequest.from_name("myapp", start_directory=project)
        assert get_cache_stats()["keys"] == [req.cache_key]

    def test_default_resolver_uses_shared_cache(self):
        assert get_default_resolver().cache is config_cache


@pytest.mark.unit
class TestBuildRequest:
    """Tests for call-form normalization."""

    def test_request_passthrough(self, tmp_path):
        req = ResolutionRequest.from_name("app", start_directory=tmp_path)
        assert build_request(req) is req

    def test_request_with_options_rejected(self, tmp_path):
        req = ResolutionRequest.from_name("app", start_directory=tmp_path)
        with pytest.raises(TypeError):
            build_request(req, max_depth=1)

    def test_mapping_with_options_rejected(self):
        with pytest.raises(TypeError):
            build_request({"name": "app"}, [".json"])


def test_public_exports():
    for name in confseek.__all__:
        assert hasattr(confseek, name), name
