import asyncio
import logging

from sleeper_adp.domain.adp import GroupAggregation
from sleeper_adp.domain.comparison import ComparisonReport
from sleeper_adp.domain.errors import InputError
from sleeper_adp.domain.round_pick import DEFAULT_TEAMS
from sleeper_adp.services.comparator import compare_players
from sleeper_adp.services.reconciler import LeagueGroupReconciler, clean_league_ids

logger = logging.getLogger(__name__)


class AdpCompareService:
    def __init__(self, reconciler: LeagueGroupReconciler) -> None:
        self._reconciler = reconciler

    async def aggregate_group(
        self,
        league_ids: list[str],
        *,
        teams: int | None = None,
        league_names: dict[str, str] | None = None,
    ) -> GroupAggregation:
        return await self._reconciler.aggregate(league_ids, league_names=league_names, teams_override=teams)

    async def compare(
        self,
        side_a: list[str],
        side_b: list[str] | None = None,
        *,
        teams: int | None = None,
        league_names: dict[str, str] | None = None,
    ) -> ComparisonReport:
        """Aggregate Side A (and Side B when given) and line their ADPs up.

        *teams* overrides the team count used for round.pick formatting; when
        omitted the count detected from Side A's drafts is used.
        """
        a_ids = clean_league_ids(side_a)
        if not a_ids:
            raise InputError("Side A needs at least one league id")
        b_ids = clean_league_ids(side_b or [])
        override = teams if teams is not None and teams > 0 else None

        if b_ids:
            group_a, group_b = await asyncio.gather(
                self.aggregate_group(a_ids, teams=override, league_names=league_names),
                self.aggregate_group(b_ids, teams=override, league_names=league_names),
            )
        else:
            group_a = await self.aggregate_group(a_ids, teams=override, league_names=league_names)
            group_b = None

        resolved_teams = override or group_a.meta.teams or DEFAULT_TEAMS
        rows = compare_players(group_a.players, group_b.players if group_b is not None else {})
        logger.info("Compared %d players across %d + %d leagues", len(rows), len(a_ids), len(b_ids))
        return ComparisonReport(side_a=group_a, side_b=group_b, teams=resolved_teams, rows=rows)
