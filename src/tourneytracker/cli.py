"""Command line interface for Tourney Tracker."""

# Tourney Tracker
# Copyright (C) 2026  Tourney Tracker developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import logging
import sys
from typing import Dict, Optional, Sequence

from tourneytracker import APP_NAME, APP_VERSION
from tourneytracker.career import CareerAggregator, JsonFilePlayerRegistry
from tourneytracker.constants import (
    DEFAULT_ADMIN_PIN,
    FORMAT_SINGLE,
    SAVE_FILE_EXTENSION,
    TOURNAMENT_FORMATS,
)
from tourneytracker.controllers import TournamentManager
from tourneytracker.exceptions import TourneyTrackerException
from tourneytracker.models import Player, Tournament
from tourneytracker.standings import (
    compute_standings,
    get_avg_goals,
    get_biggest_wins,
    get_golden_boot,
    get_golden_glove,
    get_mvp_leaderboard,
    get_next_match,
    get_possession_kings,
    get_unlucky_index,
    get_win_rates,
)
from tourneytracker.storage import load_tournament, load_tournaments, save_tournament
from tourneytracker.utils import ROOT_LOGGER_NAME, setup_logger

logger = setup_logger(__name__)

RULE = "=" * 70


def parse_player(value: str) -> Player:
    """Parse a ``Name`` or ``Name:Team`` roster entry.

    Raises:
        argparse.ArgumentTypeError: If the name part is empty
    """
    name, _, team = value.partition(":")
    if not name.strip():
        raise argparse.ArgumentTypeError(
            f"Invalid player '{value}'. Expected 'Name' or 'Name:Team'"
        )
    return Player(name=name.strip(), team=team.strip())


def default_output_path(name: str) -> str:
    slug = "_".join(name.lower().split()) or "tournament"
    return f"{slug}{SAVE_FILE_EXTENSION}"


# ========== Commands ==========


def run_create(args: argparse.Namespace) -> int:
    manager = TournamentManager()
    tournament = manager.create_tournament(
        args.name, args.players, format=args.format, admin_pin=args.pin
    )
    output = args.output or default_output_path(tournament.name)
    save_tournament(tournament, output)

    print(f"Created '{tournament.name}' ({tournament.format})")
    print(f"  Players: {len(tournament.players)}")
    print(f"  Rounds: {tournament.max_round}")
    print(f"  Matches: {len(tournament.matches)}")
    print(f"  Saved to: {output}")
    return 0


def run_schedule(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    names = {p.id: p.name for p in tournament.players}
    next_match = get_next_match(tournament.matches)

    current_round = None
    for match in sorted(tournament.matches, key=lambda m: m.round_number):
        if match.round_number != current_round:
            current_round = match.round_number
            print(f"\n{match.stage or f'Round {current_round}'}")
        home = names.get(match.home_player_id, str(match.home))
        away = names.get(match.away_player_id, str(match.away))
        if match.is_played:
            line = f"  {home} {match.home_score}-{match.away_score} {away}"
        else:
            line = f"  {home} vs {away}"
        marker = "  <- next" if next_match is not None and match is next_match else ""
        print(f"{line}{marker}   [{match.id}]")
    return 0


def run_record(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    manager = TournamentManager()
    manager.add_tournament(tournament)
    match = manager.record_result(
        tournament, args.match_id, args.home_score, args.away_score
    )
    save_tournament(tournament, args.file)
    print(f"Recorded {match}")
    return 0


def run_complete(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    manager = TournamentManager()
    manager.add_tournament(tournament)
    entry = manager.complete_tournament(tournament)
    save_tournament(tournament, args.file)
    if entry is None:
        print(f"'{tournament.name}' completed without a champion")
    else:
        team = f" ({entry.winner_team})" if entry.winner_team else ""
        print(f"Champion of '{entry.tournament_name}': {entry.winner_name}{team}")
    return 0


def print_standings(tournament: Tournament) -> None:
    print(RULE)
    print(f"{tournament.name.upper()} - STANDINGS")
    print(RULE)
    print(
        f"{'#':>3}  {'Player':<20} {'P':>3} {'W':>3} {'D':>3} {'L':>3} "
        f"{'GF':>4} {'GA':>4} {'GD':>4} {'Pts':>4}  Form"
    )
    for position, row in enumerate(
        compute_standings(tournament.players, tournament.matches), start=1
    ):
        print(
            f"{position:>3}  {row.player_name:<20} {row.played:>3} {row.won:>3} "
            f"{row.drawn:>3} {row.lost:>3} {row.goals_for:>4} "
            f"{row.goals_against:>4} {row.goal_difference:>+4} {row.points:>4}  "
            f"{''.join(row.form)}"
        )


def run_standings(args: argparse.Namespace) -> int:
    print_standings(load_tournament(args.file))
    return 0


# Board name -> (title, function, formatter for one entry)
BOARDS: Dict[str, tuple] = {
    "golden-boot": (
        "Golden Boot",
        get_golden_boot,
        lambda e: f"{e.player_name:<20} {e.goals:>4} goals",
    ),
    "golden-glove": (
        "Golden Glove",
        get_golden_glove,
        lambda e: f"{e.player_name:<20} {e.clean_sheets:>4} clean sheets",
    ),
    "unlucky": (
        "Unlucky Index",
        get_unlucky_index,
        lambda e: (
            f"{e.player_name:<20} {e.actual_goals:>4} goals "
            f"{e.total_xg:>6.2f} xG {e.diff:>+6.2f}"
        ),
    ),
    "mvp": (
        "MVP",
        get_mvp_leaderboard,
        lambda e: (
            f"{e.player_name:<20} {e.avg_rating:>5.2f} avg "
            f"({e.matches_rated} rated, {e.motm_count} MOTM)"
        ),
    ),
    "win-rate": (
        "Win Rate",
        get_win_rates,
        lambda e: f"{e.player_name:<20} {e.win_rate:>3}% ({e.wins}/{e.played})",
    ),
    "avg-goals": (
        "Average Goals",
        get_avg_goals,
        lambda e: (
            f"{e.player_name:<20} {e.avg_goals:>5.2f} per match "
            f"({e.total_goals} in {e.played})"
        ),
    ),
    "biggest-wins": (
        "Biggest Wins",
        get_biggest_wins,
        lambda e: (
            f"R{e.round_number:<3} {e.home_player_name} {e.home_score}-"
            f"{e.away_score} {e.away_player_name} (margin {e.margin})"
        ),
    ),
    "possession": (
        "Possession Kings",
        get_possession_kings,
        lambda e: (
            f"{e.player_name:<20} {e.avg_possession:>3}% "
            f"over {e.matches_tracked} matches"
        ),
    ),
}


def run_leaderboard(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    title, compute, describe = BOARDS[args.board]
    entries = compute(tournament.players, tournament.matches)

    print(RULE)
    print(f"{tournament.name.upper()} - {title.upper()}")
    print(RULE)
    if not entries:
        print("  No results yet")
    for position, entry in enumerate(entries, start=1):
        print(f"{position:>3}  {describe(entry)}")
    return 0


def run_career(args: argparse.Namespace) -> int:
    tournaments = load_tournaments(args.files)
    registry = JsonFilePlayerRegistry(args.registry)

    aggregator = CareerAggregator(registry)
    aggregator.register_players(tournaments)
    aggregator.sync_career_stats(tournaments)

    print(RULE)
    print(f"CAREER LEADERBOARD ({len(tournaments)} tournaments)")
    print(RULE)
    print(
        f"{'#':>3}  {'Player':<20} {'MP':>4} {'W':>3} {'D':>3} {'L':>3} "
        f"{'Goals':>5} {'Win%':>5} {'Rating':>6} {'MOTM':>4}"
    )
    for position, player in enumerate(aggregator.get_career_leaderboard(), start=1):
        career = player.career
        print(
            f"{position:>3}  {player.name:<20} {career.total_matches:>4} "
            f"{career.total_wins:>3} {career.total_draws:>3} "
            f"{career.total_losses:>3} {career.total_goals:>5} "
            f"{career.win_rate * 100:>4.0f}% {career.avg_rating:>6.2f} "
            f"{career.total_motm:>4}"
        )
    return 0


# ========== Parser ==========


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="tourneytracker",
        description=f"{APP_NAME}: schedules, standings and career stats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Three player single round robin
  tourneytracker create "Friday League" -p Alice:Arsenal -p Bob:Chelsea -p Carol

  # Record a result and show the table
  tourneytracker record friday_league.json <match-id> 3 1
  tourneytracker standings friday_league.json

  # Career stats across several tournaments
  tourneytracker career season1.json season2.json --registry players.json
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {APP_VERSION}"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create a tournament")
    create.add_argument("name", help="Tournament name")
    create.add_argument(
        "-p",
        "--player",
        dest="players",
        action="append",
        type=parse_player,
        required=True,
        help="Player as 'Name' or 'Name:Team' (repeat for each player)",
    )
    create.add_argument(
        "--format",
        choices=TOURNAMENT_FORMATS,
        default=FORMAT_SINGLE,
        help=f"Tournament format (default: {FORMAT_SINGLE})",
    )
    create.add_argument(
        "--pin", default=DEFAULT_ADMIN_PIN, help="Admin PIN stored with the tournament"
    )
    create.add_argument("-o", "--output", help="Output file (default: from name)")
    create.set_defaults(handler=run_create)

    schedule = subparsers.add_parser("schedule", help="List fixtures")
    schedule.add_argument("file", help="Tournament file")
    schedule.set_defaults(handler=run_schedule)

    record = subparsers.add_parser("record", help="Record a match result")
    record.add_argument("file", help="Tournament file")
    record.add_argument("match_id", help="Match id (see 'schedule')")
    record.add_argument("home_score", type=int, help="Home goals")
    record.add_argument("away_score", type=int, help="Away goals")
    record.set_defaults(handler=run_record)

    complete = subparsers.add_parser("complete", help="Complete a tournament")
    complete.add_argument("file", help="Tournament file")
    complete.set_defaults(handler=run_complete)

    standings = subparsers.add_parser("standings", help="Show the league table")
    standings.add_argument("file", help="Tournament file")
    standings.set_defaults(handler=run_standings)

    leaderboard = subparsers.add_parser("leaderboard", help="Show a leaderboard")
    leaderboard.add_argument("file", help="Tournament file")
    leaderboard.add_argument(
        "--board",
        choices=list(BOARDS),
        default="golden-boot",
        help="Leaderboard to show (default: golden-boot)",
    )
    leaderboard.set_defaults(handler=run_leaderboard)

    career = subparsers.add_parser(
        "career", help="Sync and show career stats across tournaments"
    )
    career.add_argument("files", nargs="+", help="Tournament files")
    career.add_argument(
        "--registry", required=True, help="Player registry file (created if missing)"
    )
    career.set_defaults(handler=run_career)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)

    try:
        return args.handler(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except TourneyTrackerException as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except Exception as e:
        logger.error(f"{args.command} failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
