from dataclasses import dataclass


class AdpError(Exception):
    """Base class for every failure surfaced by sleeper_adp."""


class InputError(AdpError):
    """Required identifiers were missing; no network call was made."""


class UpstreamError(AdpError):
    def __init__(self, message: str, *, status: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.url = url


class NoDraftsFoundError(AdpError):
    def __init__(self, league_ids: list[str] | None = None) -> None:
        super().__init__("no drafts found")
        self.league_ids = list(league_ids or [])


@dataclass(frozen=True)
class LeagueShape:
    league_id: str
    name: str | None
    teams: int | None
    rounds: int | None

    def describe(self) -> str:
        label = f"{self.league_id} ({self.name})" if self.name else self.league_id
        return f"{label}: teams={self.teams}, rounds={self.rounds}"


MAX_REPORTED_OFFENDERS = 5


class StructuralMismatchError(AdpError):
    def __init__(self, reference: LeagueShape, offenders: list[LeagueShape]) -> None:
        self.reference = reference
        self.offenders = list(offenders)
        shown = "; ".join(o.describe() for o in self.offenders[:MAX_REPORTED_OFFENDERS])
        extra = len(self.offenders) - MAX_REPORTED_OFFENDERS
        if extra > 0:
            shown += f"; and {extra} more"
        super().__init__(
            f"Leagues must share the same format. Expected teams={reference.teams}, rounds={reference.rounds} "
            f"(from {reference.describe()}). Mismatched: {shown}"
        )

    @property
    def expected_teams(self) -> int | None:
        return self.reference.teams

    @property
    def expected_rounds(self) -> int | None:
        return self.reference.rounds
