"""CLI for the all-play standings dashboard.

Commands mirror the LeagueDashboard views: weekly scores, season standings,
the current NFL week, a roster's lineup and projected points.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Sequence

from dotenv import load_dotenv

from allplay.sleeper_data import LeagueDashboard, load_config
from allplay.sleeper_data.sleeper_api import SleeperApiError


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--league-id",
        help="Sleeper league id (overrides SLEEPER_LEAGUE_ID).",
    )
    common.add_argument("--json", action="store_true", help="Print raw JSON.")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")

    parser = argparse.ArgumentParser(prog="allplay")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scores = subparsers.add_parser(
        "scores", parents=[common], help="Show one week's scores with all-play record."
    )
    scores.add_argument("--week", type=int, required=True)

    season = subparsers.add_parser(
        "season", parents=[common], help="Show cumulative all-play standings."
    )
    season.add_argument(
        "--max-week",
        type=int,
        help="Last week to include (capped at the configured standings week).",
    )

    subparsers.add_parser("week", parents=[common], help="Show the current NFL week.")

    lineup = subparsers.add_parser(
        "lineup", parents=[common], help="Show a roster's starters for a week."
    )
    lineup.add_argument("--week", type=int, required=True)
    lineup.add_argument("--roster-id", type=int, required=True)

    projections = subparsers.add_parser(
        "projections", parents=[common], help="Show projected points per roster."
    )
    projections.add_argument("--week", type=int, required=True)

    return parser


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True, default=str))


def _fmt(value: Any) -> str:
    return f"{float(value or 0):.1f}"


def _print_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    widths = [len(header) for header in headers]
    cells = [[str(cell) for cell in row] for row in rows]
    for row in cells:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))
    print("  ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers)))
    print("  ".join("-" * width for width in widths))
    for row in cells:
        print("  ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(row)))


def _render_scores(rows: list[dict[str, Any]]) -> None:
    if not rows:
        print("No scores for this week.")
        return
    _print_table(
        ["#", "Team", "Manager", "Pts", "W", "L", ""],
        [
            [
                idx,
                row["team_name"],
                row.get("manager_name") or "-",
                _fmt(row["points"]),
                row["wins"],
                row["losses"],
                "HIGH" if row.get("isWinner") else "",
            ]
            for idx, row in enumerate(rows, start=1)
        ],
    )


def _render_season(rows: list[dict[str, Any]]) -> None:
    if not rows:
        print("No season data yet.")
        return
    _print_table(
        ["#", "Team", "Manager", "W", "L", "GB", "Total Points", "High", "Low"],
        [
            [
                row["rank"],
                row["team_name"],
                row.get("manager_name") or "-",
                row["totalWins"],
                row["totalLosses"],
                _fmt(row["gamesBack"]),
                _fmt(row["totalPoints"]),
                row["highWeeks"],
                row["lowWeeks"],
            ]
            for row in rows
        ],
    )


def _render_lineup(lineup: dict[str, Any]) -> None:
    print(f"Roster {lineup['roster_id']} - week {lineup['week']} - total {_fmt(lineup['total'])}")
    _print_table(
        ["Pos", "Player", "Team", "Pts"],
        [[slot["pos"], slot["name"], slot["team"], _fmt(slot["points"])] for slot in lineup["starters"]],
    )


def _render_projections(rows: list[dict[str, Any]]) -> None:
    _print_table(
        ["Roster", "Projected"],
        [[row["roster_id"], _fmt(row["projected_points"])] for row in rows],
    )


def _run(args: argparse.Namespace) -> int:
    if args.command == "week":
        # NFL state is league-independent.
        data = LeagueDashboard(config=load_config(args.league_id, require_league=False))
    else:
        data = LeagueDashboard(league_id=args.league_id)

    if args.command == "scores":
        payload: Any = data.weekly_scores(args.week)
        renderer = _render_scores
    elif args.command == "season":
        payload = data.season_standings(args.max_week)
        renderer = _render_season
    elif args.command == "week":
        payload = data.nfl_week().to_row()
        renderer = _print_json
    elif args.command == "lineup":
        payload = data.lineup(args.week, args.roster_id)
        renderer = _render_lineup
    else:
        payload = data.projections(args.week)
        renderer = _render_projections

    if args.json:
        _print_json(payload)
    else:
        renderer(payload)
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    try:
        return _run(args)
    except (SleeperApiError, LookupError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
