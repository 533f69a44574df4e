"""Normalization helpers for player, lineup and projection payloads."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..schema.models import Lineup, LineupSlot, RosterProjection
from ._helpers import coerce_points, coerce_roster_id

HEADSHOT_BASE_URL = "https://sleepercdn.com/content/nfl/players"


def _full_name(raw_player: Mapping[str, Any]) -> str | None:
    name = raw_player.get("full_name")
    if name:
        return str(name)
    first = raw_player.get("first_name")
    last = raw_player.get("last_name")
    if first and last:
        return f"{first} {last}"
    return None


def _normalize_player_ids(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(pid) for pid in value if pid]


def find_roster_row(raw_matchups: Any, roster_id: int) -> Mapping[str, Any] | None:
    if not isinstance(raw_matchups, list):
        return None
    for raw_row in raw_matchups:
        if isinstance(raw_row, Mapping) and coerce_roster_id(raw_row.get("roster_id")) == roster_id:
            return raw_row
    return None


def normalize_lineup(
    raw_row: Mapping[str, Any],
    raw_players: Mapping[str, Any] | None,
    *,
    roster_id: int,
    week: int,
) -> Lineup:
    players = raw_players if isinstance(raw_players, Mapping) else {}
    points_map = raw_row.get("players_points")
    if not isinstance(points_map, Mapping):
        points_map = {}

    starters: list[LineupSlot] = []
    for player_id in _normalize_player_ids(raw_row.get("starters")):
        meta = players.get(player_id)
        if not isinstance(meta, Mapping):
            meta = {}
        headshot_id = meta.get("player_id")
        starters.append(
            LineupSlot(
                player_id=player_id,
                name=_full_name(meta) or "Unknown",
                position=str(meta.get("position") or ""),
                nfl_team=str(meta.get("team") or meta.get("player_team") or ""),
                points=coerce_points(points_map.get(player_id)),
                headshot_url=f"{HEADSHOT_BASE_URL}/{headshot_id}.jpg" if headshot_id else None,
            )
        )

    return Lineup(
        roster_id=roster_id,
        week=week,
        total=coerce_points(raw_row.get("points")),
        starters=starters,
    )


def _projection_points(raw_projection: Any) -> float:
    if not isinstance(raw_projection, Mapping):
        return 0.0
    stats = raw_projection.get("stats")
    if isinstance(stats, Mapping) and "pts_ppr" in stats:
        return coerce_points(stats.get("pts_ppr"))
    return coerce_points(raw_projection.get("pts_ppr"))


def _projection_index(raw_projections: Any) -> dict[str, float]:
    # Sleeper has served both {player_id: {...}} and [{"player_id": ..., "stats": {...}}].
    if isinstance(raw_projections, Mapping):
        return {str(pid): _projection_points(value) for pid, value in raw_projections.items()}
    index: dict[str, float] = {}
    if isinstance(raw_projections, list):
        for item in raw_projections:
            if isinstance(item, Mapping) and item.get("player_id") is not None:
                index[str(item["player_id"])] = _projection_points(item)
    return index


def sum_starter_projections(
    raw_matchups: Iterable[Any], raw_projections: Any
) -> list[RosterProjection]:
    projected = _projection_index(raw_projections)
    by_roster: dict[int, float] = {}
    for raw_row in raw_matchups or []:
        if not isinstance(raw_row, Mapping):
            continue
        roster_id = coerce_roster_id(raw_row.get("roster_id"))
        if roster_id is None:
            continue
        total = sum(projected.get(pid, 0.0) for pid in _normalize_player_ids(raw_row.get("starters")))
        by_roster[roster_id] = by_roster.get(roster_id, 0.0) + total
    return [
        RosterProjection(roster_id=roster_id, projected_points=round(total, 2))
        for roster_id, total in by_roster.items()
    ]
