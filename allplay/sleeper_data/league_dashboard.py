"""Facade serving weekly scores and all-play standings for one league."""

from __future__ import annotations

import copy
import logging
from typing import Any, Optional

from .config import DashboardConfig, load_config
from .normalize import (
    IdentityLookup,
    build_identity_lookup,
    derive_week_state,
    enrich_week_scores,
    fallback_week_state,
    find_roster_row,
    normalize_lineup,
    normalize_week_scores,
    sum_starter_projections,
)
from .schema.models import WeekState
from .sleeper_api import (
    SleeperApiError,
    SleeperClient,
    get_league_rosters,
    get_league_users,
    get_matchups,
    get_players,
    get_projections,
    get_state,
)
from .standings import compute_standings, compute_weekly_all_play
from .store import TTLCache, cache_key

logger = logging.getLogger(__name__)


class LeagueDashboard:
    def __init__(
        self,
        league_id: Optional[str] = None,
        *,
        client: Optional[SleeperClient] = None,
        config: Optional[DashboardConfig] = None,
        cache: Optional[TTLCache] = None,
    ) -> None:
        resolved_config = config or load_config(league_id)
        self.config = resolved_config
        self.league_id = league_id or resolved_config.league_id
        self.client = client or SleeperClient(
            timeout_seconds=resolved_config.request_timeout_seconds
        )
        self.cache = cache if cache is not None else TTLCache()

    def _require_league(self) -> str:
        if not self.league_id:
            raise ValueError("SLEEPER_LEAGUE_ID must be set.")
        return self.league_id

    def _league_payload(self, name: str, fetch) -> Any:
        league_id = self._require_league()
        return self.cache.get_or_set(
            cache_key(league_id, name),
            self.config.league_ttl_seconds,
            lambda: fetch(league_id, client=self.client),
        )

    def identity(self) -> IdentityLookup:
        """Roster/owner lookup built from the league's rosters and users."""
        raw_rosters = self._league_payload("rosters", get_league_rosters)
        raw_users = self._league_payload("users", get_league_users)
        return build_identity_lookup(raw_rosters, raw_users)

    def weekly_scores(self, week: int) -> list[dict[str, Any]]:
        """Scores for one week, highest first, with that week's all-play record.

        Raises:
            ValueError: ``week`` is not a positive integer.
            SleeperApiError: The matchups or identity fetch failed.
        """
        league_id = self._require_league()
        if int(week) < 1:
            raise ValueError("week must be a positive integer.")
        key = cache_key(league_id, int(week))
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return copy.deepcopy(cached)

        raw_matchups = get_matchups(league_id, int(week), client=self.client)
        rows = normalize_week_scores(raw_matchups)
        identity = self.identity()

        enriched = enrich_week_scores(rows, identity)
        for payload, record in zip(enriched, compute_weekly_all_play(rows)):
            payload.update(record.to_row())

        self.cache.set(key, enriched, self.config.scores_ttl_seconds)
        return copy.deepcopy(enriched)

    def _last_standings_week(self, max_week: Optional[int]) -> int:
        # Sleeper serves zero-filled rows for unplayed weeks, so the default
        # range stops at the current NFL week.
        if max_week is None:
            return self.nfl_week().capped_max_week_for_standings
        return min(max(int(max_week), 1), self.config.standings_max_week)

    def _fetch_weeks(self, league_id: str, last_week: int) -> list[tuple[int, Any]]:
        feeds: list[tuple[int, Any]] = []
        for week in range(1, last_week + 1):
            try:
                feeds.append((week, get_matchups(league_id, week, client=self.client)))
            except SleeperApiError as exc:
                logger.warning("Skipping week %s: %s", week, exc)
        return feeds

    def season_standings(self, max_week: Optional[int] = None) -> list[dict[str, Any]]:
        """Cumulative all-play standings for weeks ``1..max_week``.

        ``max_week`` defaults to the current NFL week and is capped at the
        configured standings week. Weeks whose fetch fails are left out; a
        failing identity fetch raises.
        """
        league_id = self._require_league()
        last_week = self._last_standings_week(max_week)
        key = cache_key(league_id, "season", last_week)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return copy.deepcopy(cached)

        identity = self.identity()
        feeds = self._fetch_weeks(league_id, last_week)
        standings = compute_standings(feeds, identity)

        results = [row.to_row() for row in standings]
        self.cache.set(key, results, self.config.season_ttl_seconds)
        return copy.deepcopy(results)

    def nfl_week(self) -> WeekState:
        """Current NFL week; falls back to week 1 when the state fetch fails."""
        key = cache_key("nfl", "state")
        cached = self.cache.get(key)
        if cached is not None:
            return copy.deepcopy(cached)
        try:
            raw_state = get_state("nfl", client=self.client)
        except SleeperApiError as exc:
            logger.warning("NFL state unavailable, using fallback: %s", exc)
            return fallback_week_state(regular_season_weeks=self.config.regular_season_weeks)

        state = derive_week_state(
            raw_state,
            standings_max_week=self.config.standings_max_week,
            regular_season_weeks=self.config.regular_season_weeks,
        )
        self.cache.set(key, state, self.config.state_ttl_seconds)
        return copy.deepcopy(state)

    def lineup(self, week: int, roster_id: int) -> dict[str, Any]:
        """Starting lineup with per-player points for one roster and week.

        Raises:
            LookupError: The roster has no matchup row that week.
        """
        league_id = self._require_league()
        players = self.cache.get_or_set(
            cache_key("nfl", "players"),
            self.config.players_ttl_seconds,
            lambda: get_players("nfl", client=self.client),
        )
        raw_matchups = get_matchups(league_id, int(week), client=self.client)
        raw_row = find_roster_row(raw_matchups, int(roster_id))
        if raw_row is None:
            raise LookupError(f"Roster {roster_id} not found for week {week}.")
        return normalize_lineup(raw_row, players, roster_id=int(roster_id), week=int(week)).to_row()

    def projections(self, week: int) -> list[dict[str, Any]]:
        """Projected points per roster, summed over each roster's starters."""
        league_id = self._require_league()
        raw_state = get_state("nfl", client=self.client)
        season = str((raw_state or {}).get("season") or "")
        if not season:
            raise SleeperApiError("NFL state did not include a season.")
        raw_matchups = get_matchups(league_id, int(week), client=self.client)
        raw_projections = get_projections(season, int(week), client=self.client)
        return [row.to_row() for row in sum_starter_projections(raw_matchups, raw_projections)]
