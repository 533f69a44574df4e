import logging

from allplay.sleeper_data.normalize.identity import build_identity_lookup
from allplay.sleeper_data.schema.models import WeeklyScoreRow
from allplay.sleeper_data.standings import (
    SeasonAccumulator,
    compute_standings,
    compute_weekly_all_play,
    has_uneven_participation,
)

WEEK_ONE = [
    {"roster_id": 1, "points": 100},
    {"roster_id": 2, "points": 90},
    {"roster_id": 3, "points": 90},
]
WEEK_TWO = [
    {"roster_id": 1, "points": 80},
    {"roster_id": 2, "points": 95},
    {"roster_id": 3, "points": 85},
]


def _rows(*points):
    return [WeeklyScoreRow(roster_id=idx, points=value) for idx, value in enumerate(points, start=1)]


def test_two_week_example_totals_rank_and_games_back():
    standings = compute_standings([(1, WEEK_ONE), (2, WEEK_TWO)])

    by_roster = {row.roster_id: row for row in standings}
    assert [row.roster_id for row in standings] == [2, 1, 3]
    assert [row.rank for row in standings] == [1, 2, 3]

    assert by_roster[1].total_wins == 2
    assert by_roster[1].total_losses == 2
    assert by_roster[1].total_points == 180.0
    assert by_roster[1].high_weeks == 1
    assert by_roster[1].low_weeks == 1

    assert by_roster[2].total_wins == 2
    assert by_roster[2].total_losses == 1
    assert by_roster[2].total_points == 185.0
    assert by_roster[2].high_weeks == 1
    assert by_roster[2].low_weeks == 1

    assert by_roster[3].total_wins == 1
    assert by_roster[3].total_losses == 2
    assert by_roster[3].total_points == 175.0
    assert by_roster[3].high_weeks == 0
    assert by_roster[3].low_weeks == 1

    assert by_roster[2].games_back == 0.0
    assert by_roster[1].games_back == 0.5
    assert by_roster[3].games_back == 1.0


def test_all_play_totals_without_ties():
    rows = _rows(120.5, 99.0, 87.25, 130.0, 64.0, 101.0)
    records = compute_weekly_all_play(rows)

    k = len(rows)
    assert sum(r.wins for r in records) == k * (k - 1) // 2
    assert sum(r.losses for r in records) == k * (k - 1) // 2


def test_ties_are_neutral():
    records = {r.roster_id: r for r in compute_weekly_all_play(_rows(50.0, 50.0))}

    assert records[1].wins == 0 and records[1].losses == 0
    assert records[2].wins == 0 and records[2].losses == 0


def test_high_and_low_credit_every_tied_roster():
    accumulator = SeasonAccumulator()
    accumulator.add_week(_rows(110.0, 110.0, 110.0, 70.0, 70.0))

    totals = accumulator.totals()
    assert [totals[rid].high_weeks for rid in (1, 2, 3)] == [1, 1, 1]
    assert totals[4].high_weeks == 0
    assert [totals[rid].low_weeks for rid in (4, 5)] == [1, 1]
    assert totals[1].low_weeks == 0


def test_single_roster_week_is_both_high_and_low():
    accumulator = SeasonAccumulator()
    accumulator.add_week(_rows(42.0))

    totals = accumulator.totals()[1]
    assert (totals.total_wins, totals.total_losses) == (0, 0)
    assert (totals.high_weeks, totals.low_weeks) == (1, 1)


def test_week_order_does_not_change_totals():
    week_three = [
        {"roster_id": 1, "points": 0.1},
        {"roster_id": 2, "points": 0.2},
        {"roster_id": 3, "points": 0.3},
    ]

    def totals_for(feeds):
        return {row.roster_id: row.to_row() for row in compute_standings(feeds)}

    forward = totals_for([(1, WEEK_ONE), (2, WEEK_TWO), (3, week_three)])
    shuffled = totals_for([(3, week_three), (1, WEEK_ONE), (2, WEEK_TWO)])

    for roster_id, row in forward.items():
        for key in ("totalPoints", "totalWins", "totalLosses", "highWeeks", "lowWeeks"):
            assert row[key] == shuffled[roster_id][key]


def test_leader_has_zero_games_back():
    standings = compute_standings(
        [(1, [{"roster_id": 9, "points": 10}, {"roster_id": 4, "points": 20}])]
    )

    assert standings[0].rank == 1
    assert standings[0].games_back == 0.0


def test_equal_wins_and_points_break_ties_by_roster_id():
    standings = compute_standings(
        [
            (1, [{"roster_id": 7, "points": 50}, {"roster_id": 3, "points": 60}]),
            (2, [{"roster_id": 7, "points": 60}, {"roster_id": 3, "points": 50}]),
        ]
    )

    assert [row.roster_id for row in standings] == [3, 7]


def test_empty_and_malformed_weeks_are_skipped():
    standings = compute_standings(
        [(1, WEEK_ONE), (2, []), (3, None), (4, {"error": "rate limited"}), (5, WEEK_TWO)]
    )

    by_roster = {row.roster_id: row for row in standings}
    assert by_roster[1].weeks_played == 2
    assert by_roster[1].total_points == 180.0


def test_negative_points_are_accepted():
    standings = compute_standings([(1, [{"roster_id": 1, "points": -3.5}, {"roster_id": 2, "points": 0}])])

    by_roster = {row.roster_id: row for row in standings}
    assert by_roster[1].total_points == -3.5
    assert by_roster[1].total_losses == 1
    assert by_roster[2].total_wins == 1


def test_missing_identity_falls_back_to_roster_label():
    identity = build_identity_lookup(
        [{"roster_id": 1, "owner_id": "u1", "metadata": {"team_name": "Alpha"}}],
        [{"user_id": "u1", "display_name": "alice"}],
    )
    standings = compute_standings([(1, WEEK_ONE)], identity)

    rows = {row["roster_id"]: row for row in (s.to_row() for s in standings)}
    assert rows[1]["team_name"] == "Alpha"
    assert rows[1]["manager_name"] == "alice"
    assert rows[3]["team_name"] == "Roster 3"
    assert rows[3]["custom_team_name"] == "Roster 3"
    assert rows[3]["manager_name"] is None
    assert rows[3]["avatar_url"] is None


def test_identity_mapping_accepts_owners_key():
    standings = compute_standings(
        [(1, WEEK_ONE)],
        {
            "rosters": [{"roster_id": 2, "owner_id": "u2"}],
            "owners": [{"user_id": "u2", "display_name": "bob"}],
        },
    )

    by_roster = {row.roster_id: row for row in standings}
    assert by_roster[2].identity.manager_name == "bob"
    assert by_roster[2].identity.team_name == "bob"


def test_standings_row_serializes_camel_case_fields():
    row = compute_standings([(1, WEEK_ONE)])[0].to_row()

    for key in (
        "roster_id",
        "rank",
        "totalPoints",
        "totalWins",
        "totalLosses",
        "highWeeks",
        "lowWeeks",
        "weeksPlayed",
        "gamesBack",
        "team_name",
        "manager_name",
        "avatar_url",
    ):
        assert key in row
    assert "identity" not in row
    assert isinstance(row["gamesBack"], float)


def test_uneven_participation_is_flagged(caplog):
    feeds = [
        (1, WEEK_ONE),
        (2, [{"roster_id": 1, "points": 10}, {"roster_id": 2, "points": 20}]),
    ]

    with caplog.at_level(logging.WARNING):
        standings = compute_standings(feeds)

    assert has_uneven_participation(standings)
    assert "games back" in caplog.text


def test_even_participation_is_not_flagged():
    assert not has_uneven_participation(compute_standings([(1, WEEK_ONE), (2, WEEK_TWO)]))


def test_each_run_uses_fresh_totals():
    first = compute_standings([(1, WEEK_ONE)])
    second = compute_standings([(1, WEEK_ONE)])

    assert [row.total_points for row in first] == [row.total_points for row in second]


def test_no_weeks_yields_no_standings():
    assert compute_standings([]) == []


def test_totals_returns_copies():
    accumulator = SeasonAccumulator()
    accumulator.add_week(_rows(1.1, 2.2, 3.3))

    snapshot = accumulator.totals()
    snapshot[1].total_wins = 99

    assert accumulator.totals()[1].total_wins != 99
