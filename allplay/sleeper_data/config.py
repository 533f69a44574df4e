"""Configuration helpers for the standings dashboard."""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class DashboardConfig(BaseModel):
    """Settings passed to the league service at construction time."""

    league_id: Optional[str] = Field(
        default=None, description="Sleeper league ID; only NFL-wide views work without one"
    )
    standings_max_week: int = Field(
        default=14, ge=1, description="Last week counted toward season standings"
    )
    regular_season_weeks: int = Field(default=18, ge=1, description="Weeks in the NFL season")

    # Cache lifetimes
    scores_ttl_seconds: int = Field(default=300, ge=0)
    season_ttl_seconds: int = Field(default=12 * 60 * 60, ge=0)
    league_ttl_seconds: int = Field(default=12 * 60 * 60, ge=0)
    state_ttl_seconds: int = Field(default=60, ge=0)
    players_ttl_seconds: int = Field(default=12 * 60 * 60, ge=0)

    request_timeout_seconds: int = Field(default=10, ge=1)


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer.") from exc


def load_config(
    league_id: Optional[str] = None, *, require_league: bool = True
) -> DashboardConfig:
    load_dotenv()
    resolved = (
        league_id
        or os.getenv("SLEEPER_LEAGUE_ID")
        or os.getenv("NEXT_PUBLIC_SLEEPER_LEAGUE_ID")
    )
    if not resolved and require_league:
        raise ValueError("SLEEPER_LEAGUE_ID must be set.")

    overrides: dict[str, int] = {}
    max_week = _optional_int("SLEEPER_STANDINGS_MAX_WEEK")
    if max_week is not None:
        overrides["standings_max_week"] = max_week
    timeout = _optional_int("SLEEPER_REQUEST_TIMEOUT")
    if timeout is not None:
        overrides["request_timeout_seconds"] = timeout

    return DashboardConfig(league_id=str(resolved) if resolved else None, **overrides)
