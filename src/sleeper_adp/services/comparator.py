import math
from collections.abc import Callable

from sleeper_adp.domain.adp import PlayerStat
from sleeper_adp.domain.comparison import ComparisonRow, MoversSummary
from sleeper_adp.domain.round_pick import PLACEHOLDER, round_pick_sort_key


def compare_players(side_a: dict[str, PlayerStat], side_b: dict[str, PlayerStat]) -> list[ComparisonRow]:
    """Build one row per player key found on either side.

    ``delta`` is ``adp_a - adp_b`` and is only set when both sides have a
    finite ADP. Rows come back in key order; callers sort as they need.
    """
    rows: list[ComparisonRow] = []
    for key in sorted(side_a.keys() | side_b.keys()):
        a = side_a.get(key)
        b = side_b.get(key)
        adp_a = a.avg_overall_pick if a is not None else None
        adp_b = b.avg_overall_pick if b is not None else None

        delta: float | None = None
        if adp_a is not None and adp_b is not None and math.isfinite(adp_a) and math.isfinite(adp_b):
            delta = adp_a - adp_b

        source = a if a is not None else b
        assert source is not None
        if a is not None and a.position:
            position = a.position
        else:
            position = b.position if b is not None else ""
        rows.append(
            ComparisonRow(
                key=key,
                name=source.name,
                position=position,
                adp_a=adp_a,
                adp_b=adp_b,
                delta=delta,
                round_pick_a=a.avg_round_pick if a is not None else PLACEHOLDER,
                round_pick_b=b.avg_round_pick if b is not None else PLACEHOLDER,
            )
        )
    return rows


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


_SORT_FIELDS: dict[str, Callable[[ComparisonRow], object]] = {
    "name": lambda r: r.name.lower(),
    "position": lambda r: r.position or None,
    "adp_a": lambda r: r.adp_a,
    "adp_b": lambda r: r.adp_b,
    "delta": lambda r: r.delta,
    "abs_delta": lambda r: abs(r.delta) if r.delta is not None else None,
    "round_pick_a": lambda r: _finite_or_none(round_pick_sort_key(r.round_pick_a)),
    "round_pick_b": lambda r: _finite_or_none(round_pick_sort_key(r.round_pick_b)),
}

SORT_FIELDS = tuple(_SORT_FIELDS)


def sort_rows(rows: list[ComparisonRow], by: str = "abs_delta", *, descending: bool = False) -> list[ComparisonRow]:
    """Sort rows by *by*; rows without a value for that field always go last."""
    if by not in _SORT_FIELDS:
        raise ValueError(f"Unknown sort field '{by}', expected one of {', '.join(SORT_FIELDS)}")
    getter = _SORT_FIELDS[by]
    present = [r for r in rows if getter(r) is not None]
    missing = [r for r in rows if getter(r) is None]
    present.sort(key=lambda r: (getter(r), r.key), reverse=descending)  # type: ignore[arg-type, return-value]
    return present + sorted(missing, key=lambda r: r.key)


def summarize_movers(rows: list[ComparisonRow], *, top: int | None = None) -> MoversSummary:
    """Split rows into risers, fallers and one-sided entries.

    A riser went earlier in group A than in group B (negative delta).
    """
    risers = sorted((r for r in rows if r.delta is not None and r.delta < 0), key=lambda r: (r.delta, r.key))
    fallers = sorted(
        (r for r in rows if r.delta is not None and r.delta > 0),
        key=lambda r: (-r.delta, r.key),  # type: ignore[operator]
    )
    only_a = sorted((r for r in rows if r.adp_a is not None and r.adp_b is None), key=lambda r: (r.adp_a, r.key))
    only_b = sorted((r for r in rows if r.adp_b is not None and r.adp_a is None), key=lambda r: (r.adp_b, r.key))

    if top is not None:
        risers = risers[:top]
        fallers = fallers[:top]

    return MoversSummary(risers=risers, fallers=fallers, only_a=only_a, only_b=only_b)
