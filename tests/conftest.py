import json
from pathlib import Path

import pytest

from allplay.sleeper_data.config import DashboardConfig


@pytest.fixture
def sleeper_fixture_dir() -> Path:
    return Path(__file__).parent / "fixtures" / "sleeper"


@pytest.fixture
def load_fixture(sleeper_fixture_dir: Path):
    def _load(name: str):
        path = sleeper_fixture_dir / name
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    return _load


@pytest.fixture
def sleeper_fixtures(load_fixture):
    return {
        "users": load_fixture("users.json"),
        "rosters": load_fixture("rosters.json"),
        "matchups_by_week": {
            1: load_fixture("matchups_week1.json"),
            2: load_fixture("matchups_week2.json"),
        },
        "players": load_fixture("players.json"),
        "projections_by_week": {1: load_fixture("projections_week1.json")},
        "state": load_fixture("state.json"),
    }


@pytest.fixture
def dashboard_config() -> DashboardConfig:
    return DashboardConfig(league_id="123", standings_max_week=14)


@pytest.fixture
def api_calls():
    return []


@pytest.fixture
def monkeypatch_sleeper_api(monkeypatch, sleeper_fixtures, api_calls):
    import allplay.sleeper_data.league_dashboard as dashboard

    def _recorded(name, value):
        api_calls.append(name)
        return value

    monkeypatch.setattr(
        dashboard,
        "get_league_users",
        lambda league_id, client=None: _recorded("users", sleeper_fixtures["users"]),
    )
    monkeypatch.setattr(
        dashboard,
        "get_league_rosters",
        lambda league_id, client=None: _recorded("rosters", sleeper_fixtures["rosters"]),
    )
    monkeypatch.setattr(
        dashboard,
        "get_state",
        lambda sport, client=None: _recorded("state", sleeper_fixtures["state"]),
    )
    monkeypatch.setattr(
        dashboard,
        "get_matchups",
        lambda league_id, week, client=None: _recorded(
            f"matchups:{week}", sleeper_fixtures["matchups_by_week"].get(week, [])
        ),
    )
    monkeypatch.setattr(
        dashboard,
        "get_players",
        lambda sport, client=None: _recorded("players", sleeper_fixtures["players"]),
    )
    monkeypatch.setattr(
        dashboard,
        "get_projections",
        lambda season, week, client=None: _recorded(
            f"projections:{week}", sleeper_fixtures["projections_by_week"].get(week, {})
        ),
    )

    return sleeper_fixtures
