from sleeper_adp.domain.adp import PlayerStat
from sleeper_adp.domain.draft_pick import DraftPick, PickMetadata
from sleeper_adp.domain.round_pick import format_avg_round_pick, format_round_pick


def make_pick(
    pick_no: int | None,
    *,
    name: str = "Test Player",
    position: str = "RB",
    teams: int = 12,
    player_id: str | None = None,
    round: int | None = None,
    draft_slot: int | None = None,
) -> DraftPick:
    """Build a pick whose round and slot follow from ``pick_no`` unless given.

    When ``pick_no`` is None, round and slot stay None too unless passed.
    """
    if pick_no is not None:
        if round is None:
            round = (pick_no - 1) // teams + 1
        if draft_slot is None:
            draft_slot = (pick_no - 1) % teams + 1
    return DraftPick(
        pick_no=pick_no,
        round=round,
        draft_slot=draft_slot,
        player_id=player_id or name.lower().replace(" ", "_"),
        metadata=PickMetadata(player_name=name, position=position),
    )


def make_stat(
    name: str,
    avg: float,
    *,
    position: str = "RB",
    count: int = 1,
    mode: int | None = None,
    teams: int = 12,
) -> PlayerStat:
    mode_pick = mode if mode is not None else round(avg)
    return PlayerStat(
        key=f"{name}{position}",
        name=name,
        position=position,
        count=count,
        avg_overall_pick=avg,
        mode_overall_pick=mode_pick,
        avg_round_pick=format_avg_round_pick(avg, teams),
        mode_round_pick=format_round_pick(mode_pick, teams),
    )


def stat_map(*stats: PlayerStat) -> dict[str, PlayerStat]:
    return {s.key: s for s in stats}
