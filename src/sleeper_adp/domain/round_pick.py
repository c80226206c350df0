"""Conversions between overall pick numbers and ``round.pick`` notation.

Overall picks are 1-based across the whole draft. With 12 teams, pick 1 is
``"1.01"``, pick 12 is ``"1.12"`` and pick 13 is ``"2.01"``.
"""

from __future__ import annotations

import math
import re

PLACEHOLDER = "—"
DEFAULT_TEAMS = 12

_ROUND_WEIGHT = 1000
_ROUND_PICK_RE = re.compile(r"^\s*(\d+)\.(\d+)(?:\.(\d{1,2}))?\s*$")


def normalize_teams(teams: int | None) -> int:
    """Return *teams*, or ``DEFAULT_TEAMS`` when it is missing or not positive."""
    if teams is None or teams <= 0:
        return DEFAULT_TEAMS
    return int(teams)


def _is_valid_pick(pick: float | None) -> bool:
    return pick is not None and math.isfinite(pick) and pick > 0


def format_round_pick(pick: float | None, teams: int | None) -> str:
    """Render an overall pick as ``round.pick``.

    A fractional pick keeps its hundredths as a third group, so 14.5 in a
    12-team draft renders as ``"2.02.50"``. Invalid picks render as the
    placeholder dash.
    """
    if not _is_valid_pick(pick):
        return PLACEHOLDER
    assert pick is not None
    t = normalize_teams(teams)
    # Whole hundredths; a fraction that rounds up carries into the next slot.
    cents = round(pick * 100)
    rnd = (cents - 100) // (t * 100) + 1
    whole, hundredths = divmod(cents - (rnd - 1) * t * 100, 100)
    if hundredths == 0:
        return f"{rnd}.{whole:02d}"
    return f"{rnd}.{whole:02d}.{hundredths:02d}"


def format_avg_round_pick(avg_pick: float | None, teams: int | None) -> str:
    """Render an average pick as ``round.pick`` after rounding to the nearest pick.

    Halves round up, so an average of 6.5 displays as pick 7.
    """
    if not _is_valid_pick(avg_pick):
        return PLACEHOLDER
    assert avg_pick is not None
    return format_round_pick(math.floor(avg_pick + 0.5), teams)


def parse_round_pick(text: str | None) -> tuple[int, int, int] | None:
    """Split ``"round.pick[.hh]"`` into ``(round, pick, hundredths)``.

    Returns None for the placeholder or anything malformed.
    """
    if not text:
        return None
    match = _ROUND_PICK_RE.match(text)
    if match is None:
        return None
    rnd = int(match.group(1))
    pick = int(match.group(2))
    hundredths = int(match.group(3)) if match.group(3) else 0
    if rnd < 1 or pick < 1:
        return None
    return rnd, pick, hundredths


def round_pick_to_overall(text: str | None, teams: int | None) -> int | None:
    """Invert ``format_round_pick`` for whole picks."""
    parsed = parse_round_pick(text)
    if parsed is None:
        return None
    rnd, pick, _ = parsed
    return (rnd - 1) * normalize_teams(teams) + pick


def round_pick_sort_key(text: str | None) -> float:
    """Map a ``round.pick`` string to a scalar that sorts rounds numerically.

    ``"10.01"`` sorts after ``"9.12"``. Placeholders and malformed strings
    return ``math.inf`` so they land last in ascending order.
    """
    parsed = parse_round_pick(text)
    if parsed is None:
        return math.inf
    rnd, pick, hundredths = parsed
    return rnd * _ROUND_WEIGHT + pick + hundredths / 100
