"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
"""

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

from typing import Any, List, Optional, Sequence

from tourneytracker.constants import AWAY, HOME
from tourneytracker.exceptions import (
    InvalidResultException,
    MatchNotFoundException,
    TournamentStateException,
)
from tourneytracker.models import GoalEntry, Match, MatchStats, Slot, Tournament
from tourneytracker.scheduling import propagate_winner
from tourneytracker.type_hints import Side
from tourneytracker.utils import setup_logger
from tourneytracker.utils.validation import (
    validate_match_stats_strict,
    validate_score_strict,
)

logger = setup_logger(__name__)


class ResultRecorder:
    """Records and clears match results.

    This class is responsible for:
    - Validating scores, stats and goalscorers before anything is written
    - Refusing draws in knockout matches
    - Moving knockout winners into their next match
    - Clearing a result while the bracket beyond it is still unplayed
    """

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
        """Record the result of a single match.

        Args:
            tournament: Tournament the match belongs to
            match_id: Match to record
            home_score: Home goals
            away_score: Away goals
            home_stats: Optional stats for the home side
            away_stats: Optional stats for the away side
            home_goalscorers: Goals credited to the home side
            away_goalscorers: Goals credited to the away side

        Returns:
            The updated match

        Raises:
            TournamentStateException: Tournament completed, match not playable,
                or a later knockout match already depends on this result
            MatchNotFoundException: No match with ``match_id``
            ScoreValidationException: A score is missing or invalid
            StatsValidationException: Stats are out of range
            InvalidResultException: Goalscorers do not belong to the match,
                or a knockout match ended level
        """
        match = self._get_playable_match(tournament, match_id)

        home_score = validate_score_strict(home_score, "Home score")
        away_score = validate_score_strict(away_score, "Away score")

        match_players = [match.home_player_id, match.away_player_id]
        validate_match_stats_strict(home_stats, match_players)
        validate_match_stats_strict(away_stats, match_players)

        home_goals = self._validate_goalscorers(match, HOME, home_goalscorers)
        away_goals = self._validate_goalscorers(match, AWAY, away_goalscorers)

        if tournament.is_knockout and home_score == away_score:
            raise InvalidResultException(
                f"Knockout match {match.id} cannot end in a draw "
                f"({home_score}-{away_score})"
            )

        if match.is_played:
            logger.warning(f"Match {match.id} already has a result, overwriting")
            if tournament.is_knockout:
                self._withdraw_winner(tournament, match)

        match.home_score = home_score
        match.away_score = away_score
        match.home_stats = home_stats
        match.away_stats = away_stats
        match.home_goalscorers = home_goals
        match.away_goalscorers = away_goals
        match.is_played = True

        logger.info(f"Recorded result: {match}")

        if tournament.is_knockout:
            propagate_winner(tournament.matches, match)

        return match

    def clear_result(self, tournament: Tournament, match_id: str) -> Match:
        """Remove a recorded result, returning the match to unplayed.

        For a knockout match the winner is taken back out of the next match.

        Raises:
            TournamentStateException: Tournament completed, or the next
                knockout match has already been played
            MatchNotFoundException: No match with ``match_id``
        """
        match = self._get_match(tournament, match_id)
        if not match.is_played:
            logger.warning(f"Match {match.id} has no result, nothing to clear")
            return match

        if tournament.is_knockout:
            self._withdraw_winner(tournament, match)

        match.home_score = None
        match.away_score = None
        match.home_stats = None
        match.away_stats = None
        match.home_goalscorers = []
        match.away_goalscorers = []
        match.is_played = False

        logger.info(f"Cleared result of match {match.id}")
        return match

    # ========== Helpers ==========

    def _get_match(self, tournament: Tournament, match_id: str) -> Match:
        if tournament.is_completed:
            raise TournamentStateException(
                f"Tournament '{tournament.name}' is completed"
            )
        match = tournament.get_match(match_id)
        if match is None:
            raise MatchNotFoundException(
                f"Match {match_id} not found in tournament '{tournament.name}'"
            )
        return match

    def _get_playable_match(self, tournament: Tournament, match_id: str) -> Match:
        match = self._get_match(tournament, match_id)
        if match.has_bye:
            raise TournamentStateException(f"Match {match.id} is a bye")
        if not match.is_resolved:
            raise TournamentStateException(
                f"Match {match.id} is waiting for earlier results"
            )
        return match

    def _validate_goalscorers(
        self, match: Match, side: Side, goals: Optional[Sequence[GoalEntry]]
    ) -> List[GoalEntry]:
        """Check every goal is credited to a player in this match."""
        allowed = {match.home_player_id, match.away_player_id}
        checked: List[GoalEntry] = []
        for goal in goals or []:
            if goal.player_id not in allowed:
                raise InvalidResultException(
                    f"Goalscorer {goal.player_id} ({side}) is not playing "
                    f"in match {match.id}"
                )
            if goal.minute is not None and goal.minute < 0:
                raise InvalidResultException(
                    f"Goal minute cannot be negative: {goal.minute}"
                )
            checked.append(GoalEntry(player_id=goal.player_id, minute=goal.minute))
        return checked

    def _withdraw_winner(self, tournament: Tournament, match: Match) -> None:
        """Take this match's winner back out of its next match."""
        target = tournament.get_match(match.next_match_id)
        if target is None:
            return
        if target.is_played:
            raise TournamentStateException(
                f"Next match {target.id} has already been played"
            )
        if match.is_home_in_next_match:
            target.home = Slot.unresolved()
        else:
            target.away = Slot.unresolved()
        logger.debug(f"Withdrew winner of match {match.id} from match {target.id}")
