from dataclasses import dataclass

from sleeper_adp.domain.adp import GroupAggregation


@dataclass(frozen=True)
class ComparisonRow:
    """One player's ADP on each side.

    ``delta`` is ``adp_a - adp_b``. A negative delta means the player went
    earlier in group A than in group B.
    """

    key: str
    name: str
    position: str
    adp_a: float | None
    adp_b: float | None
    delta: float | None
    round_pick_a: str
    round_pick_b: str


@dataclass(frozen=True)
class MoversSummary:
    risers: list[ComparisonRow]
    fallers: list[ComparisonRow]
    only_a: list[ComparisonRow]
    only_b: list[ComparisonRow]


@dataclass(frozen=True)
class ComparisonReport:
    side_a: GroupAggregation
    side_b: GroupAggregation | None
    teams: int
    rows: list[ComparisonRow]
