"""Schema models for the standings engine."""

from .models import (
    Identity,
    Lineup,
    LineupSlot,
    RosterProjection,
    SeasonTotals,
    StandingsRow,
    WeeklyAllPlay,
    WeeklyScoreRow,
    WeekState,
)

__all__ = [
    "Identity",
    "Lineup",
    "LineupSlot",
    "RosterProjection",
    "SeasonTotals",
    "StandingsRow",
    "WeeklyAllPlay",
    "WeeklyScoreRow",
    "WeekState",
]
