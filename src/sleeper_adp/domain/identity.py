"""Player identity heuristics for matching picks across drafts.

The default key joins the display name and position, which is best-effort:
suffixes, accents or nicknames that differ between responses produce
different keys. ``player_id_key`` uses Sleeper's stable player id instead.
"""

from collections.abc import Callable

from sleeper_adp.domain.draft_pick import DraftPick

PlayerKeyFn = Callable[[DraftPick], str]


def player_name(pick: DraftPick) -> str:
    meta = pick.metadata
    if meta.player_name:
        return meta.player_name
    full = f"{meta.first_name or ''} {meta.last_name or ''}".strip()
    if full:
        return full
    return pick.player_id


def player_position(pick: DraftPick) -> str:
    return pick.metadata.position or ""


def name_position_key(pick: DraftPick) -> str:
    return f"{player_name(pick)}{player_position(pick)}"


def player_id_key(pick: DraftPick) -> str:
    return pick.player_id or name_position_key(pick)
