"""Sleeper API fetch helpers."""

from .client import SleeperApiError, SleeperClient
from .endpoints import (
    get_league_rosters,
    get_league_users,
    get_matchups,
    get_players,
    get_projections,
    get_state,
)

__all__ = [
    "SleeperApiError",
    "SleeperClient",
    "get_league_rosters",
    "get_league_users",
    "get_matchups",
    "get_players",
    "get_projections",
    "get_state",
]
