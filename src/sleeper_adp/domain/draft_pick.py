from dataclasses import dataclass, field
from typing import Any


def _positive_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number >= 1 else None


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class PickMetadata:
    player_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    position: str | None = None


@dataclass(frozen=True)
class DraftPick:
    pick_no: int | None
    round: int | None
    draft_slot: int | None
    player_id: str
    metadata: PickMetadata = field(default_factory=PickMetadata)

    @property
    def is_usable(self) -> bool:
        return self.pick_no is not None and self.round is not None and self.draft_slot is not None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> "DraftPick":
        """Build a pick from a Sleeper ``/draft/{id}/picks`` element.

        Numeric fields that are missing, non-numeric or below 1 become None,
        which marks the pick as unusable for aggregation.
        """
        meta = raw.get("metadata") or {}
        return cls(
            pick_no=_positive_int(raw.get("pick_no")),
            round=_positive_int(raw.get("round")),
            draft_slot=_positive_int(raw.get("draft_slot")),
            player_id=str(raw.get("player_id") or ""),
            metadata=PickMetadata(
                player_name=_optional_str(meta.get("player_name")),
                first_name=_optional_str(meta.get("first_name")),
                last_name=_optional_str(meta.get("last_name")),
                position=_optional_str(meta.get("position")),
            ),
        )


@dataclass(frozen=True)
class LeagueDraft:
    draft_id: str
    league_id: str
    status: str | None = None
    teams: int | None = None
    rounds: int | None = None
    name: str | None = None

    @property
    def is_complete(self) -> bool:
        return (self.status or "").lower() == "complete"

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> "LeagueDraft":
        settings = raw.get("settings") or {}
        metadata = raw.get("metadata") or {}
        return cls(
            draft_id=str(raw.get("draft_id") or ""),
            league_id=str(raw.get("league_id") or ""),
            status=_optional_str(raw.get("status")),
            teams=_positive_int(settings.get("teams")),
            rounds=_positive_int(settings.get("rounds")),
            name=_optional_str(metadata.get("name")),
        )


@dataclass(frozen=True)
class League:
    league_id: str
    name: str
    season: str
    total_rosters: int | None = None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> "League":
        metadata = raw.get("metadata") or {}
        name = _optional_str(raw.get("name")) or _optional_str(metadata.get("name")) or "Unnamed League"
        return cls(
            league_id=str(raw.get("league_id") or ""),
            name=name,
            season=str(raw.get("season") or ""),
            total_rosters=_positive_int(raw.get("total_rosters")),
        )
