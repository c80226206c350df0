import logging
from typing import Any
from urllib.parse import quote

import httpx

from sleeper_adp.cache.memory_store import MemoryCacheStore
from sleeper_adp.cache.protocol import CacheStore
from sleeper_adp.domain.draft_pick import DraftPick, League, LeagueDraft
from sleeper_adp.domain.errors import InputError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.sleeper.app/v1"
DEFAULT_TIMEOUT_SECONDS = 15.0

_DRAFTS_NAMESPACE = "league_drafts"
_PICKS_NAMESPACE = "draft_picks"
_DRAFTS_EMPTY_STATUSES = frozenset({404})
_PICKS_EMPTY_STATUSES = frozenset({400, 404})


def _segment(value: str) -> str:
    return quote(value, safe="")


class SleeperClient:
    """Async client for the public Sleeper v1 API.

    League drafts and draft picks are cached in *cache*; user lookups are
    always fetched. Failed requests are not retried.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        cache: CacheStore | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds))
        self._owns_client = client is None
        self._cache: CacheStore = cache if cache is not None else MemoryCacheStore()
        self._base_url = base_url.rstrip("/")

    async def __aenter__(self) -> "SleeperClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def resolve_user(self, username: str) -> str:
        name = (username or "").strip()
        if not name:
            raise InputError("Missing username")
        url = f"{self._base_url}/user/{_segment(name)}"
        data = await self._get_json(url)
        if not isinstance(data, dict) or not data.get("user_id"):
            raise UpstreamError(f"Unknown Sleeper user '{name}'", url=url)
        return str(data["user_id"])

    async def list_user_leagues(self, user_id: str, season: str) -> list[League]:
        uid = (user_id or "").strip()
        if not uid:
            raise InputError("Missing user id")
        s = str(season or "").strip()
        if not s:
            raise InputError("Missing season")
        url = f"{self._base_url}/user/{_segment(uid)}/leagues/nfl/{_segment(s)}"
        data = await self._get_json(url)
        return [League.from_json(raw) for raw in data or []]

    async def get_user_leagues(self, username: str, season: str) -> list[League]:
        user_id = await self.resolve_user(username)
        return await self.list_user_leagues(user_id, season)

    async def list_league_drafts(self, league_id: str) -> list[LeagueDraft]:
        lid = (league_id or "").strip()
        if not lid:
            return []

        cached = self._cache.get(_DRAFTS_NAMESPACE, lid)
        if cached is not None:
            logger.debug("Cache hit for drafts of league %s", lid)
            return list(cached)

        url = f"{self._base_url}/league/{_segment(lid)}/drafts"
        data = await self._get_json(url, empty_on=_DRAFTS_EMPTY_STATUSES)
        drafts = [LeagueDraft.from_json(raw) for raw in data or []]
        self._cache.put(_DRAFTS_NAMESPACE, lid, tuple(drafts))
        return drafts

    async def fetch_draft_picks(self, draft_id: str) -> list[DraftPick]:
        did = (draft_id or "").strip()
        if not did:
            return []

        cached = self._cache.get(_PICKS_NAMESPACE, did)
        if cached is not None:
            logger.debug("Cache hit for picks of draft %s", did)
            return list(cached)

        url = f"{self._base_url}/draft/{_segment(did)}/picks"
        data = await self._get_json(url, empty_on=_PICKS_EMPTY_STATUSES)
        picks = [DraftPick.from_json(raw) for raw in data or []]
        self._cache.put(_PICKS_NAMESPACE, did, tuple(picks))
        return picks

    async def _get_json(self, url: str, *, empty_on: frozenset[int] = frozenset()) -> Any:
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url, headers={"accept": "application/json"})
        except httpx.TimeoutException as e:
            raise UpstreamError(f"Sleeper request timed out: {url}", url=url) from e
        except httpx.TransportError as e:
            raise UpstreamError(f"Sleeper request failed: {e}", url=url) from e

        if response.status_code in empty_on:
            logger.info("Sleeper returned %d for %s, treating as empty", response.status_code, url)
            return None
        if not response.is_success:
            raise UpstreamError(f"Sleeper HTTP {response.status_code}", status=response.status_code, url=url)
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"Sleeper returned a non-JSON body for {url}", status=response.status_code, url=url
            ) from e
