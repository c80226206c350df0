from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sleeper_adp.cache.memory_store import MemoryCacheStore, NullCacheStore
from sleeper_adp.cache.protocol import CacheStore
from sleeper_adp.config import AppSettings
from sleeper_adp.domain.identity import PlayerKeyFn, name_position_key, player_id_key
from sleeper_adp.services.adp_compare import AdpCompareService
from sleeper_adp.services.reconciler import LeagueGroupReconciler
from sleeper_adp.sleeper.client import SleeperClient

_KEY_FUNCTIONS: dict[str, PlayerKeyFn] = {
    "name": name_position_key,
    "id": player_id_key,
}

MATCH_MODES = tuple(_KEY_FUNCTIONS)


def resolve_key_fn(match: str) -> PlayerKeyFn:
    try:
        return _KEY_FUNCTIONS[match]
    except KeyError:
        raise ValueError(f"Unknown match mode '{match}', expected one of {', '.join(MATCH_MODES)}") from None


def create_cache(settings: AppSettings) -> CacheStore:
    if not settings.cache_enabled:
        return NullCacheStore()
    return MemoryCacheStore(ttl_seconds=settings.cache_ttl_seconds)


@dataclass(frozen=True)
class CompareContext:
    client: SleeperClient
    service: AdpCompareService
    settings: AppSettings


@asynccontextmanager
async def build_compare_context(
    settings: AppSettings,
    *,
    match: str = "name",
    client: SleeperClient | None = None,
) -> AsyncIterator[CompareContext]:
    """Wire a Sleeper client, reconciler and compare service; close the client on exit."""
    key_fn = resolve_key_fn(match)
    sleeper = client or SleeperClient(
        cache=create_cache(settings),
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
    )
    try:
        reconciler = LeagueGroupReconciler(sleeper, key_fn=key_fn, default_teams=settings.default_teams)
        yield CompareContext(client=sleeper, service=AdpCompareService(reconciler), settings=settings)
    finally:
        await sleeper.aclose()
