"""Canonical models for the all-play standings engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Optional


class RowMixin:
    """Small helper to prepare values for JSON payloads."""

    # dataclass field name -> serialized key
    key_map: ClassVar[dict[str, str]] = {}

    def to_row(self) -> dict[str, Any]:
        return {self.key_map.get(key, key): value for key, value in asdict(self).items()}


@dataclass(frozen=True)
class Identity(RowMixin):
    roster_id: int
    owner_id: Optional[str] = None
    team_name: Optional[str] = None
    manager_name: Optional[str] = None
    avatar_url: Optional[str] = None

    def display_fields(self) -> dict[str, Any]:
        return {
            "team_name": self.team_name,
            "custom_team_name": self.team_name,
            "manager_name": self.manager_name,
            "avatar_url": self.avatar_url,
            "avatar": self.avatar_url,
        }


@dataclass(frozen=True)
class WeeklyScoreRow(RowMixin):
    roster_id: int
    points: float = 0.0


@dataclass(frozen=True)
class WeeklyAllPlay(RowMixin):
    roster_id: int
    points: float
    wins: int
    losses: int
    is_high: bool
    is_low: bool

    key_map: ClassVar[dict[str, str]] = {"is_high": "isWinner", "is_low": "isLoser"}


@dataclass
class SeasonTotals(RowMixin):
    total_points: float = 0.0
    total_wins: int = 0
    total_losses: int = 0
    high_weeks: int = 0
    low_weeks: int = 0
    weeks_played: int = 0


@dataclass(frozen=True)
class StandingsRow(RowMixin):
    roster_id: int
    rank: int
    total_points: float
    total_wins: int
    total_losses: int
    high_weeks: int
    low_weeks: int
    weeks_played: int
    games_back: float
    identity: Identity = field(compare=False)

    key_map: ClassVar[dict[str, str]] = {
        "total_points": "totalPoints",
        "total_wins": "totalWins",
        "total_losses": "totalLosses",
        "high_weeks": "highWeeks",
        "low_weeks": "lowWeeks",
        "weeks_played": "weeksPlayed",
        "games_back": "gamesBack",
    }

    def to_row(self) -> dict[str, Any]:
        row = super().to_row()
        row.pop("identity")
        row.update(self.identity.display_fields())
        return row


@dataclass(frozen=True)
class WeekState(RowMixin):
    season: str
    season_type: str
    raw_week: Optional[int]
    current_week: int
    prior_week: Optional[int]
    capped_max_week_for_standings: int
    capped_prior_for_standings: Optional[int]
    weeks_all: list[int]
    weeks_standings: list[int]


@dataclass(frozen=True)
class LineupSlot(RowMixin):
    player_id: str
    name: str
    position: str
    nfl_team: str
    points: float
    headshot_url: Optional[str] = None

    key_map: ClassVar[dict[str, str]] = {
        "player_id": "id",
        "position": "pos",
        "nfl_team": "team",
        "headshot_url": "headshot",
    }


@dataclass(frozen=True)
class Lineup(RowMixin):
    roster_id: int
    week: int
    total: float
    starters: list[LineupSlot]

    def to_row(self) -> dict[str, Any]:
        return {
            "roster_id": self.roster_id,
            "week": self.week,
            "total": self.total,
            "starters": [slot.to_row() for slot in self.starters],
        }


@dataclass(frozen=True)
class RosterProjection(RowMixin):
    roster_id: int
    projected_points: float
