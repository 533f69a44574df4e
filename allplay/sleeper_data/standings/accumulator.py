"""All-play season aggregation.

Every roster is compared against every other roster each week: a roster
earns a win for each opponent it outscored and a loss for each opponent that
outscored it. Equal scores count as neither. Weekly maximum and minimum
scorers are credited with high/low weeks (all tied rosters get credit).
"""

from __future__ import annotations

import logging
import math
from bisect import bisect_left, bisect_right
from typing import Any, Iterable, Sequence

from ..normalize.identity import IdentityLookup, coerce_identity
from ..normalize.scores import normalize_week_scores
from ..schema.models import SeasonTotals, StandingsRow, WeeklyAllPlay, WeeklyScoreRow

logger = logging.getLogger(__name__)


def compute_weekly_all_play(rows: Sequence[WeeklyScoreRow]) -> list[WeeklyAllPlay]:
    """All-play record for a single week, in the order ``rows`` were given."""
    if not rows:
        return []
    ordered = sorted(row.points for row in rows)
    high = ordered[-1]
    low = ordered[0]
    count = len(ordered)
    return [
        WeeklyAllPlay(
            roster_id=row.roster_id,
            points=row.points,
            wins=bisect_left(ordered, row.points),
            losses=count - bisect_right(ordered, row.points),
            is_high=row.points == high,
            is_low=row.points == low,
        )
        for row in rows
    ]


class SeasonAccumulator:
    """Folds weekly score rows into per-roster season totals.

    Instances are single-use working state for one aggregation run.
    """

    def __init__(self) -> None:
        self._totals: dict[int, SeasonTotals] = {}
        # Point contributions per roster, summed with fsum so the total does
        # not depend on week order.
        self._points: dict[int, list[float]] = {}

    def add_week(self, rows: Sequence[WeeklyScoreRow]) -> None:
        if not rows:
            return
        for record in compute_weekly_all_play(rows):
            totals = self._totals.get(record.roster_id)
            if totals is None:
                totals = SeasonTotals()
                self._totals[record.roster_id] = totals
                self._points[record.roster_id] = []
            contributions = self._points[record.roster_id]
            contributions.append(record.points)
            totals.total_points = math.fsum(contributions)
            totals.total_wins += record.wins
            totals.total_losses += record.losses
            totals.weeks_played += 1
            if record.is_high:
                totals.high_weeks += 1
            if record.is_low:
                totals.low_weeks += 1

    def totals(self) -> dict[int, SeasonTotals]:
        return {
            roster_id: SeasonTotals(**vars(totals))
            for roster_id, totals in self._totals.items()
        }

    def standings(self, identity: IdentityLookup | None = None) -> list[StandingsRow]:
        lookup = identity or IdentityLookup()
        ranked = sorted(
            self._totals.items(),
            key=lambda item: (-item[1].total_wins, -item[1].total_points, item[0]),
        )
        if not ranked:
            return []

        leader = ranked[0][1]
        rows: list[StandingsRow] = []
        for rank, (roster_id, totals) in enumerate(ranked, start=1):
            games_back = (
                (leader.total_wins - totals.total_wins)
                + (totals.total_losses - leader.total_losses)
            ) / 2
            rows.append(
                StandingsRow(
                    roster_id=roster_id,
                    rank=rank,
                    total_points=totals.total_points,
                    total_wins=totals.total_wins,
                    total_losses=totals.total_losses,
                    high_weeks=totals.high_weeks,
                    low_weeks=totals.low_weeks,
                    weeks_played=totals.weeks_played,
                    games_back=float(games_back),
                    identity=lookup.resolve(roster_id),
                )
            )
        return rows


def has_uneven_participation(rows: Iterable[StandingsRow]) -> bool:
    """True when rosters played different numbers of weeks.

    Games back assumes every roster played the same weeks, so the value is
    not comparable across rows when this returns True.
    """
    return len({row.weeks_played for row in rows}) > 1


def compute_standings(
    weekly_feeds: Iterable[tuple[int, Any]],
    identity: Any = None,
) -> list[StandingsRow]:
    """Build ranked all-play standings from ``(week, raw_rows)`` pairs.

    ``identity`` is an :class:`IdentityLookup` or a mapping with ``rosters``
    and ``users`` (or ``owners``) lists.
    """
    lookup = coerce_identity(identity)
    accumulator = SeasonAccumulator()
    for week, raw_rows in weekly_feeds:
        rows = normalize_week_scores(raw_rows)
        if not rows:
            logger.info("Week %s has no score rows; skipping", week)
            continue
        accumulator.add_week(rows)

    standings = accumulator.standings(lookup)
    if has_uneven_participation(standings):
        logger.warning(
            "Rosters played different numbers of weeks; games back is not comparable"
        )
    return standings
