"""Per-player and per-cell ADP aggregation over raw draft picks."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sleeper_adp.domain.adp import CellEntry, CellKey, DraftAggregation, DraftboardCell, PlayerStat
from sleeper_adp.domain.identity import name_position_key, player_name, player_position
from sleeper_adp.domain.round_pick import format_avg_round_pick, format_round_pick, normalize_teams

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sleeper_adp.domain.draft_pick import DraftPick
    from sleeper_adp.domain.identity import PlayerKeyFn

logger = logging.getLogger(__name__)


def _prefer(current: str, candidate: str) -> str:
    # Order-independent choice between two labels seen for the same key.
    if not current:
        return candidate
    if not candidate:
        return current
    return min(current, candidate)


@dataclass
class _PlayerTotals:
    name: str
    position: str
    pick_sum: int = 0
    count: int = 0
    histogram: Counter[int] = field(default_factory=Counter)

    def absorb(self, other: _PlayerTotals) -> None:
        self.name = _prefer(self.name, other.name)
        self.position = _prefer(self.position, other.position)
        self.pick_sum += other.pick_sum
        self.count += other.count
        self.histogram.update(other.histogram)


@dataclass
class _CellTotals:
    name: str
    position: str
    pick_sum: int = 0
    count: int = 0

    def absorb(self, other: _CellTotals) -> None:
        self.name = _prefer(self.name, other.name)
        self.position = _prefer(self.position, other.position)
        self.pick_sum += other.pick_sum
        self.count += other.count


class AdpAccumulator:
    """Running sums for a set of picks.

    Picks from any number of drafts can be added; two accumulators can be
    merged in either order with the same result. ``finalize`` turns the
    running sums into ``PlayerStat`` and ``DraftboardCell`` values.
    """

    def __init__(self, key_fn: PlayerKeyFn = name_position_key) -> None:
        self._key_fn = key_fn
        self._players: dict[str, _PlayerTotals] = {}
        self._cells: dict[CellKey, dict[str, _CellTotals]] = {}
        self.picks_used = 0
        self.picks_skipped = 0

    def add(self, pick: DraftPick) -> bool:
        """Accumulate *pick*; return False when it lacks pick_no, round or draft_slot."""
        if not pick.is_usable:
            self.picks_skipped += 1
            return False
        assert pick.pick_no is not None and pick.round is not None and pick.draft_slot is not None

        key = self._key_fn(pick)
        name = player_name(pick)
        position = player_position(pick)

        player = self._players.get(key)
        if player is None:
            player = self._players[key] = _PlayerTotals(name=name, position=position)
        else:
            player.name = _prefer(player.name, name)
            player.position = _prefer(player.position, position)
        player.pick_sum += pick.pick_no
        player.count += 1
        player.histogram[pick.pick_no] += 1

        bucket = self._cells.setdefault((pick.round, pick.draft_slot), {})
        cell = bucket.get(key)
        if cell is None:
            cell = bucket[key] = _CellTotals(name=name, position=position)
        else:
            cell.name = _prefer(cell.name, name)
            cell.position = _prefer(cell.position, position)
        cell.pick_sum += pick.pick_no
        cell.count += 1

        self.picks_used += 1
        return True

    def add_all(self, picks: Iterable[DraftPick]) -> None:
        for pick in picks:
            self.add(pick)

    def merge(self, other: AdpAccumulator) -> None:
        for key, totals in other._players.items():
            mine = self._players.get(key)
            if mine is None:
                mine = self._players[key] = _PlayerTotals(name=totals.name, position=totals.position)
            mine.absorb(totals)

        for cell_key, bucket in other._cells.items():
            my_bucket = self._cells.setdefault(cell_key, {})
            for key, totals in bucket.items():
                mine_cell = my_bucket.get(key)
                if mine_cell is None:
                    mine_cell = my_bucket[key] = _CellTotals(name=totals.name, position=totals.position)
                mine_cell.absorb(totals)

        self.picks_used += other.picks_used
        self.picks_skipped += other.picks_skipped

    def finalize(self, teams: int | None) -> DraftAggregation:
        t = normalize_teams(teams)

        stats: list[PlayerStat] = []
        for key, totals in self._players.items():
            avg = totals.pick_sum / totals.count
            mode = min(totals.histogram, key=lambda p: (-totals.histogram[p], p))
            stats.append(
                PlayerStat(
                    key=key,
                    name=totals.name,
                    position=totals.position,
                    count=totals.count,
                    avg_overall_pick=avg,
                    mode_overall_pick=mode,
                    avg_round_pick=format_avg_round_pick(avg, t),
                    mode_round_pick=format_round_pick(mode, t),
                )
            )
        stats.sort(key=lambda s: (s.avg_overall_pick, s.key))

        cells: dict[CellKey, DraftboardCell] = {}
        for cell_key in sorted(self._cells):
            bucket = self._cells[cell_key]
            total = sum(c.count for c in bucket.values())
            entries = [
                CellEntry(
                    name=c.name,
                    position=c.position,
                    count=c.count,
                    pct=c.count / total,
                    avg_overall_pick=c.pick_sum / c.count,
                    round_pick=format_avg_round_pick(c.pick_sum / c.count, t),
                )
                for c in bucket.values()
            ]
            entries.sort(key=lambda e: (-e.count, e.avg_overall_pick, e.name, e.position))
            rnd, slot = cell_key
            cells[cell_key] = DraftboardCell(round=rnd, draft_slot=slot, total=total, entries=tuple(entries))

        return DraftAggregation(
            players={s.key: s for s in stats},
            cells=cells,
            picks_used=self.picks_used,
            picks_skipped=self.picks_skipped,
        )


def aggregate_picks(
    picks: Iterable[DraftPick],
    teams: int | None,
    *,
    key_fn: PlayerKeyFn = name_position_key,
) -> DraftAggregation:
    """Aggregate one draft's picks into per-player and per-cell statistics.

    Picks missing ``pick_no``, ``round`` or ``draft_slot`` are skipped and
    counted in ``picks_skipped``.
    """
    acc = AdpAccumulator(key_fn)
    acc.add_all(picks)
    if acc.picks_skipped:
        logger.info("Skipped %d unusable picks out of %d", acc.picks_skipped, acc.picks_skipped + acc.picks_used)
    return acc.finalize(teams)
