from dataclasses import dataclass

CellKey = tuple[int, int]


@dataclass(frozen=True)
class PlayerStat:
    key: str
    name: str
    position: str
    count: int
    avg_overall_pick: float
    mode_overall_pick: int
    avg_round_pick: str
    mode_round_pick: str


@dataclass(frozen=True)
class CellEntry:
    name: str
    position: str
    count: int
    pct: float
    avg_overall_pick: float
    round_pick: str


@dataclass(frozen=True)
class DraftboardCell:
    round: int
    draft_slot: int
    total: int
    entries: tuple[CellEntry, ...]


@dataclass(frozen=True)
class DraftAggregation:
    players: dict[str, PlayerStat]
    cells: dict[CellKey, DraftboardCell]
    picks_used: int
    picks_skipped: int


@dataclass(frozen=True)
class GroupMeta:
    teams: int
    rounds: int


@dataclass(frozen=True)
class LeagueBreakdown:
    league_id: str
    name: str | None
    draft_id: str
    teams: int
    rounds: int
    aggregation: DraftAggregation


@dataclass(frozen=True)
class GroupAggregation:
    meta: GroupMeta
    players: dict[str, PlayerStat]
    cells: dict[CellKey, DraftboardCell]
    leagues: tuple[LeagueBreakdown, ...]
    picks_skipped: int
