"""Normalization helpers for weekly score payloads."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from ..schema.models import WeeklyScoreRow
from ._helpers import coerce_points, coerce_roster_id
from .identity import IdentityLookup

logger = logging.getLogger(__name__)


def normalize_week_scores(raw_rows: Any) -> list[WeeklyScoreRow]:
    """Turn one week's raw matchup payload into score rows, highest first.

    Anything that is not a list of mappings is treated as an empty week.
    Rows without a usable ``roster_id`` are dropped. A repeated roster keeps
    the position of its first row and the points of its last.
    """
    if not isinstance(raw_rows, list):
        if raw_rows is not None:
            logger.warning("Ignoring malformed week payload of type %s", type(raw_rows).__name__)
        return []

    points_by_roster: dict[int, float] = {}
    for raw_row in raw_rows:
        if not isinstance(raw_row, Mapping):
            continue
        roster_id = coerce_roster_id(raw_row.get("roster_id"))
        if roster_id is None:
            continue
        if roster_id in points_by_roster:
            logger.debug("Duplicate roster_id %s in week payload; keeping last value", roster_id)
        points_by_roster[roster_id] = coerce_points(raw_row.get("points"))

    rows = [
        WeeklyScoreRow(roster_id=roster_id, points=points)
        for roster_id, points in points_by_roster.items()
    ]
    # sorted() is stable, so ties keep input order.
    return sorted(rows, key=lambda row: row.points, reverse=True)


def enrich_week_scores(
    rows: Iterable[WeeklyScoreRow], identity: IdentityLookup
) -> list[dict[str, Any]]:
    enriched: list[dict[str, Any]] = []
    for row in rows:
        payload = row.to_row()
        payload.update(identity.resolve(row.roster_id).display_fields())
        enriched.append(payload)
    return enriched
