"""Normalization helpers for the NFL state payload."""

from __future__ import annotations

from typing import Any, Mapping

from ..schema.models import WeekState


def _as_week(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def derive_week_state(
    raw_state: Mapping[str, Any] | None,
    *,
    standings_max_week: int,
    regular_season_weeks: int,
) -> WeekState:
    """Derive current/prior week plus the week range used for standings."""
    state = raw_state if isinstance(raw_state, Mapping) else {}
    season = str(state.get("season") or "")
    season_type = str(state.get("season_type") or "off")
    raw_week = _as_week(state.get("week") or 1)

    current_week = min(max(raw_week or 1, 1), regular_season_weeks)
    prior_week = current_week - 1 if current_week > 1 else None

    capped_max = min(current_week, standings_max_week)
    capped_prior = capped_max - 1 if capped_max > 1 else None

    return WeekState(
        season=season,
        season_type=season_type,
        raw_week=raw_week,
        current_week=current_week,
        prior_week=prior_week,
        capped_max_week_for_standings=capped_max,
        capped_prior_for_standings=capped_prior,
        weeks_all=list(range(1, regular_season_weeks + 1)),
        weeks_standings=list(range(1, max(capped_max, 1) + 1)),
    )


def fallback_week_state(*, regular_season_weeks: int) -> WeekState:
    return WeekState(
        season="",
        season_type="off",
        raw_week=1,
        current_week=1,
        prior_week=None,
        capped_max_week_for_standings=1,
        capped_prior_for_standings=None,
        weeks_all=list(range(1, regular_season_weeks + 1)),
        weeks_standings=[1],
    )
