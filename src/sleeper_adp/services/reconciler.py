import asyncio
import logging
from dataclasses import dataclass

from sleeper_adp.domain.adp import GroupAggregation, GroupMeta, LeagueBreakdown
from sleeper_adp.domain.draft_pick import DraftPick, LeagueDraft
from sleeper_adp.domain.errors import InputError, LeagueShape, NoDraftsFoundError, StructuralMismatchError
from sleeper_adp.domain.identity import PlayerKeyFn, name_position_key
from sleeper_adp.domain.round_pick import DEFAULT_TEAMS, normalize_teams
from sleeper_adp.services.aggregator import AdpAccumulator
from sleeper_adp.sleeper.protocol import DraftSource

logger = logging.getLogger(__name__)


def select_primary_draft(drafts: list[LeagueDraft]) -> LeagueDraft | None:
    """Prefer a completed draft, otherwise the first one listed."""
    if not drafts:
        return None
    return next((d for d in drafts if d.is_complete), drafts[0])


def clean_league_ids(league_ids: list[str]) -> list[str]:
    seen: set[str] = set()
    cleaned: list[str] = []
    for raw in league_ids:
        lid = (raw or "").strip()
        if lid and lid not in seen:
            seen.add(lid)
            cleaned.append(lid)
    return cleaned


@dataclass(frozen=True)
class _ResolvedLeague:
    league_id: str
    name: str | None
    draft: LeagueDraft

    @property
    def shape(self) -> LeagueShape:
        return LeagueShape(self.league_id, self.name, self.draft.teams, self.draft.rounds)


class LeagueGroupReconciler:
    """Aggregates the primary drafts of a group of leagues into one ADP set.

    Every league in the group must share the same team and round counts.
    Player totals are summed over raw picks, so a league contributes in
    proportion to the number of picks it made.
    """

    def __init__(
        self,
        source: DraftSource,
        *,
        key_fn: PlayerKeyFn = name_position_key,
        default_teams: int = DEFAULT_TEAMS,
    ) -> None:
        self._source = source
        self._key_fn = key_fn
        self._default_teams = normalize_teams(default_teams)

    async def resolve_primary_draft(self, league_id: str) -> LeagueDraft | None:
        drafts = await self._source.list_league_drafts(league_id)
        return select_primary_draft(drafts)

    async def aggregate(
        self,
        league_ids: list[str],
        *,
        league_names: dict[str, str] | None = None,
        teams_override: int | None = None,
    ) -> GroupAggregation:
        ids = clean_league_ids(league_ids)
        if not ids:
            raise InputError("No league ids supplied")
        names = league_names or {}

        drafts = await asyncio.gather(*(self.resolve_primary_draft(lid) for lid in ids))
        resolved: list[_ResolvedLeague] = []
        for lid, draft in zip(ids, drafts):
            if draft is None:
                logger.info("League %s has no draft; excluding it", lid)
                continue
            resolved.append(_ResolvedLeague(lid, names.get(lid) or draft.name, draft))

        if not resolved:
            raise NoDraftsFoundError(ids)

        meta = self._validate(resolved)

        pick_lists = await asyncio.gather(*(self._source.fetch_draft_picks(r.draft.draft_id) for r in resolved))

        teams = teams_override if teams_override and teams_override > 0 else meta.teams
        return self._merge(resolved, list(pick_lists), meta, teams)

    def _validate(self, resolved: list[_ResolvedLeague]) -> GroupMeta:
        reference = resolved[0]
        expected = (reference.draft.teams, reference.draft.rounds)
        offenders = [r.shape for r in resolved[1:] if (r.draft.teams, r.draft.rounds) != expected]
        if offenders:
            raise StructuralMismatchError(reference.shape, offenders)
        return GroupMeta(teams=reference.draft.teams or self._default_teams, rounds=reference.draft.rounds or 0)

    def _merge(
        self,
        resolved: list[_ResolvedLeague],
        pick_lists: list[list[DraftPick]],
        meta: GroupMeta,
        teams: int,
    ) -> GroupAggregation:
        group = AdpAccumulator(self._key_fn)
        per_league: list[tuple[_ResolvedLeague, AdpAccumulator]] = []
        max_round = 0

        for league, picks in zip(resolved, pick_lists):
            acc = AdpAccumulator(self._key_fn)
            acc.add_all(picks)
            if acc.picks_skipped:
                logger.warning(
                    "Draft %s (league %s): skipped %d unusable picks",
                    league.draft.draft_id,
                    league.league_id,
                    acc.picks_skipped,
                )
            max_round = max([max_round, *(p.round for p in picks if p.is_usable and p.round is not None)])
            group.merge(acc)
            per_league.append((league, acc))

        if not meta.rounds and max_round:
            meta = GroupMeta(teams=meta.teams, rounds=max_round)

        breakdown = tuple(
            LeagueBreakdown(
                league_id=league.league_id,
                name=league.name,
                draft_id=league.draft.draft_id,
                teams=meta.teams,
                rounds=meta.rounds,
                aggregation=acc.finalize(teams),
            )
            for league, acc in per_league
        )

        aggregation = group.finalize(teams)
        logger.info(
            "Aggregated %d picks from %d leagues into %d players",
            aggregation.picks_used,
            len(resolved),
            len(aggregation.players),
        )
        return GroupAggregation(
            meta=meta,
            players=aggregation.players,
            cells=aggregation.cells,
            leagues=breakdown,
            picks_skipped=aggregation.picks_skipped,
        )
