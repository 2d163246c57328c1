"""Tournament lifecycle: creation, results, round order and completion."""

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

from typing import Any, Dict, List, Optional, Sequence

from tourneytracker.career import CareerAggregator
from tourneytracker.constants import (
    DEFAULT_ADMIN_PIN,
    FORMAT_KNOCKOUT,
    FORMAT_SINGLE,
    STATUS_COMPLETED,
    TOURNAMENT_FORMATS,
)
from tourneytracker.controllers.result_recorder import ResultRecorder
from tourneytracker.exceptions import (
    InvalidConfigurationException,
    InvalidPlayerDataException,
    PlayerNotFoundException,
    TournamentStateException,
)
from tourneytracker.models import (
    GoalEntry,
    HallOfFameEntry,
    Match,
    MatchStats,
    Player,
    Tournament,
)
from tourneytracker.scheduling import (
    advance_byes,
    generate_knockout_schedule,
    generate_schedule,
    reorder_rounds,
)
from tourneytracker.standings import determine_champion
from tourneytracker.type_hints import RoundOrder, TournamentFormat
from tourneytracker.utils import setup_logger
from tourneytracker.utils.validation import validate_player_name, validate_roster_strict

logger = setup_logger(__name__)


class TournamentManager:
    """Coordinates tournaments and keeps derived state in step.

    The manager is the boundary of the package: it validates input and raises
    application exceptions, while the scheduling and standings functions it
    calls never raise for data problems.

    Args:
        aggregator: When given, every roster is registered with its registry
            and career stats are re-synced after each result
    """

    def __init__(self, aggregator: Optional[CareerAggregator] = None):
        self.aggregator = aggregator
        self.result_recorder = ResultRecorder()
        self.tournaments: Dict[str, Tournament] = {}
        self.hall_of_fame: List[HallOfFameEntry] = []

    # ========== Creation ==========

    def create_tournament(
        self,
        name: str,
        players: Sequence[Player],
        format: TournamentFormat = FORMAT_SINGLE,
        admin_pin: str = DEFAULT_ADMIN_PIN,
    ) -> Tournament:
        """Create a tournament and generate its fixtures.

        Args:
            name: Tournament name
            players: Roster in seeding order
            format: ``"single"``, ``"double"`` or ``"knockout"``
            admin_pin: PIN stored with the tournament

        Returns:
            The new tournament, with knockout walkovers already advanced

        Raises:
            InvalidConfigurationException: Unknown format or blank name
            TournamentStateException: Fewer than two players
            InvalidPlayerDataException: Duplicate, reserved or blank player data
        """
        if format not in TOURNAMENT_FORMATS:
            raise InvalidConfigurationException(
                f"Unknown tournament format: {format!r}"
            )
        if not name or not name.strip():
            raise InvalidConfigurationException("Tournament name cannot be empty")
        validate_roster_strict(players)

        tournament = Tournament(
            name=name.strip(),
            format=format,
            admin_pin=admin_pin,
            players=[
                Player(name=p.name.strip(), team=p.team.strip(), id=p.id)
                for p in players
            ],
        )

        if format == FORMAT_KNOCKOUT:
            tournament.matches = generate_knockout_schedule(
                tournament.players, tournament.id
            )
            advance_byes(tournament.matches)
        else:
            tournament.matches = generate_schedule(
                tournament.players, tournament.id, format
            )

        self.add_tournament(tournament)
        if self.aggregator is not None:
            for player in tournament.players:
                self.aggregator.registry.get_or_create(player.name, player.team)

        logger.info(
            f"Created {format} tournament '{tournament.name}' with "
            f"{len(tournament.players)} players and {len(tournament.matches)} matches"
        )
        return tournament

    def add_tournament(self, tournament: Tournament) -> None:
        """Track an existing tournament, e.g. one loaded from disk."""
        self.tournaments[tournament.id] = tournament

    def get_tournament(self, tournament_id: str) -> Tournament:
        tournament = self.tournaments.get(tournament_id)
        if tournament is None:
            raise TournamentStateException(f"Unknown tournament: {tournament_id}")
        return tournament

    # ========== Results ==========

    def record_result(
        self,
        tournament: Tournament,
        match_id: str,
        home_score: Any,
        away_score: Any,
        home_stats: Optional[MatchStats] = None,
        away_stats: Optional[MatchStats] = None,
        home_goalscorers: Optional[Sequence[GoalEntry]] = None,
        away_goalscorers: Optional[Sequence[GoalEntry]] = None,
    ) -> Match:
        """Record a result, then refresh career stats if tracking careers.

        See :meth:`ResultRecorder.record_result` for the exceptions raised.
        """
        match = self.result_recorder.record_result(
            tournament,
            match_id,
            home_score,
            away_score,
            home_stats=home_stats,
            away_stats=away_stats,
            home_goalscorers=home_goalscorers,
            away_goalscorers=away_goalscorers,
        )
        self._sync_careers()
        return match

    def clear_result(self, tournament: Tournament, match_id: str) -> Match:
        match = self.result_recorder.clear_result(tournament, match_id)
        self._sync_careers()
        return match

    def _sync_careers(self) -> None:
        if self.aggregator is None:
            return
        self.aggregator.sync_career_stats(list(self.tournaments.values()))

    # ========== Edits ==========

    def reorder_rounds(self, tournament: Tournament, round_order: RoundOrder) -> None:
        """Renumber a tournament's rounds.

        Raises:
            TournamentStateException: For knockout tournaments, whose round
                numbers define the bracket
            InvalidConfigurationException: If ``round_order`` is not a
                permutation of existing round numbers
        """
        if tournament.is_knockout:
            raise TournamentStateException("Knockout rounds cannot be reordered")

        existing = sorted({m.round_number for m in tournament.matches})
        if sorted(round_order) != existing:
            raise InvalidConfigurationException(
                f"Round order {round_order} must list each of rounds {existing} once"
            )

        tournament.matches = reorder_rounds(tournament.matches, round_order)
        logger.info(f"Reordered rounds of '{tournament.name}': {round_order}")

    def rename_tournament(self, tournament: Tournament, name: str) -> None:
        """Rename a tournament, including any hall of fame entry for it."""
        if not name or not name.strip():
            raise InvalidConfigurationException("Tournament name cannot be empty")
        tournament.name = name.strip()
        for entry in self.hall_of_fame:
            if entry.tournament_id == tournament.id:
                entry.tournament_name = tournament.name

    def update_player_team(
        self, tournament: Tournament, player_id: str, team: str
    ) -> Player:
        """Correct a player's team label."""
        player = tournament.get_player(player_id)
        if player is None:
            raise PlayerNotFoundException(
                f"Player {player_id} not found in tournament '{tournament.name}'"
            )
        player.team = team.strip()
        if self.aggregator is not None:
            self.aggregator.registry.get_or_create(player.name, player.team)
        return player

    def rename_player(
        self, tournament: Tournament, player_id: str, name: str
    ) -> Player:
        """Rename a player before any of their matches are played."""
        player = tournament.get_player(player_id)
        if player is None:
            raise PlayerNotFoundException(
                f"Player {player_id} not found in tournament '{tournament.name}'"
            )
        result = validate_player_name(name)
        if not result:
            raise InvalidPlayerDataException(result.error_message)
        if any(m.is_played and m.involves(player_id) for m in tournament.matches):
            raise TournamentStateException(
                f"{player.name} has played matches and can no longer be renamed"
            )
        player.name = result.sanitized_value
        return player

    # ========== Completion ==========

    def complete_tournament(self, tournament: Tournament) -> Optional[HallOfFameEntry]:
        """Mark a tournament completed and record its champion.

        Returns:
            The hall of fame entry, or None when there is no champion yet
            (e.g. an unplayed knockout final) or the tournament was already
            completed
        """
        if tournament.is_completed:
            logger.warning(f"Tournament '{tournament.name}' is already completed")
            return None

        champion = determine_champion(tournament)
        tournament.status = STATUS_COMPLETED

        if champion is None:
            logger.warning(f"Completed '{tournament.name}' without a champion")
            return None

        entry = HallOfFameEntry(
            tournament_id=tournament.id,
            tournament_name=tournament.name,
            winner_name=champion.name,
            winner_team=champion.team,
        )
        self.hall_of_fame.append(entry)
        logger.info(f"{champion} won '{tournament.name}'")
        return entry

    def get_hall_of_fame(self) -> List[HallOfFameEntry]:
        """Champions, most recent first."""
        return sorted(self.hall_of_fame, key=lambda e: e.date, reverse=True)
