import httpx
import pytest

from sleeper_adp.cache.memory_store import MemoryCacheStore, NullCacheStore
from sleeper_adp.cli.factory import build_compare_context, create_cache, resolve_key_fn
from sleeper_adp.config import AppSettings
from sleeper_adp.domain.identity import name_position_key, player_id_key
from sleeper_adp.services.adp_compare import AdpCompareService
from sleeper_adp.sleeper.client import SleeperClient


def _settings(**overrides: object) -> AppSettings:
    values: dict[str, object] = {
        "base_url": "https://api.sleeper.app/v1",
        "timeout_seconds": 15.0,
        "cache_enabled": True,
        "cache_ttl_seconds": 300.0,
        "default_teams": 12,
        "season": "2025",
    }
    values.update(overrides)
    return AppSettings(**values)  # type: ignore[arg-type]


class TestResolveKeyFn:
    def test_known_modes(self) -> None:
        assert resolve_key_fn("name") is name_position_key
        assert resolve_key_fn("id") is player_id_key

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError, match="Unknown match mode"):
            resolve_key_fn("fuzzy")


class TestCreateCache:
    def test_enabled(self) -> None:
        cache = create_cache(_settings(cache_ttl_seconds=42.0))
        assert isinstance(cache, MemoryCacheStore)
        assert cache.ttl_seconds == 42.0

    def test_disabled(self) -> None:
        assert isinstance(create_cache(_settings(cache_enabled=False)), NullCacheStore)


class TestBuildCompareContext:
    async def test_wires_service(self) -> None:
        async with build_compare_context(_settings()) as cc:
            assert isinstance(cc.client, SleeperClient)
            assert isinstance(cc.service, AdpCompareService)
            assert cc.settings.default_teams == 12

    async def test_leaves_injected_http_client_open(self) -> None:
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(404)))
        client = SleeperClient(http)
        async with build_compare_context(_settings(), client=client) as cc:
            assert cc.client is client
        assert not http.is_closed
        await http.aclose()
