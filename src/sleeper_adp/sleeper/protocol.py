"""Draft data source protocol for dependency injection."""

from typing import Protocol

from sleeper_adp.domain.draft_pick import DraftPick, LeagueDraft


class DraftSource(Protocol):
    """Anything that can list a league's drafts and a draft's picks.

    ``SleeperClient`` satisfies this protocol; tests use an in-memory fake.
    Both operations return an empty list when the upstream has nothing yet.
    """

    async def list_league_drafts(self, league_id: str) -> list[LeagueDraft]: ...

    async def fetch_draft_picks(self, draft_id: str) -> list[DraftPick]: ...
