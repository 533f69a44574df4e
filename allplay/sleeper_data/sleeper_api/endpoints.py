"""Sleeper API endpoint helpers."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .client import SleeperClient

PROJECTIONS_BASE_URL = "https://api.sleeper.app/"
PROJECTION_POSITIONS = ("QB", "RB", "WR", "TE", "K", "DEF", "FLEX")


def _client_or_default(client: Optional[SleeperClient]) -> SleeperClient:
    return client or SleeperClient()


def get_league_users(
    league_id: str, client: Optional[SleeperClient] = None
) -> list[dict[str, Any]]:
    return _client_or_default(client).get_json(f"/league/{league_id}/users")


def get_league_rosters(
    league_id: str, client: Optional[SleeperClient] = None
) -> list[dict[str, Any]]:
    return _client_or_default(client).get_json(f"/league/{league_id}/rosters")


def get_matchups(
    league_id: str, week: int, client: Optional[SleeperClient] = None
) -> list[dict[str, Any]]:
    return _client_or_default(client).get_json(f"/league/{league_id}/matchups/{week}")


def get_players(
    sport: str = "nfl", client: Optional[SleeperClient] = None
) -> dict[str, Any]:
    return _client_or_default(client).get_json(f"/players/{sport}")


def get_state(sport: str = "nfl", client: Optional[SleeperClient] = None) -> dict[str, Any]:
    return _client_or_default(client).get_json(f"/state/{sport}")


def get_projections(
    season: str,
    week: int,
    *,
    positions: Iterable[str] = PROJECTION_POSITIONS,
    client: Optional[SleeperClient] = None,
) -> Any:
    """Per-player projections for a week.

    This endpoint is undocumented and lives outside ``/v1``; its payload shape
    has changed over time, so callers normalize defensively.
    """
    base = _client_or_default(client)
    projections_client = SleeperClient(
        base_url=PROJECTIONS_BASE_URL, timeout_seconds=base.timeout_seconds
    )
    params = {"season_type": "regular", "position[]": list(positions)}
    return projections_client.get_json(f"/projections/nfl/{season}/{week}", params=params)
