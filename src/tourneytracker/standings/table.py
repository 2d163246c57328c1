"""League table computation.

This module folds played matches into a ranked table and answers which
fixture is up next.
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

import functools
from typing import Dict, List, Optional, Sequence

from tourneytracker.constants import (
    AWAY,
    DRAW_POINTS,
    FORM_DRAW,
    FORM_LENGTH,
    FORM_LOSS,
    FORM_WIN,
    HOME,
    LOSS_POINTS,
    WIN_POINTS,
)
from tourneytracker.models import Match, Player, StandingsRow, Tournament
from tourneytracker.utils import setup_logger

logger = setup_logger(__name__)


def countable_matches(matches: Sequence[Match]) -> List[Match]:
    """Played matches between two real players, in input order."""
    return [m for m in matches if m.is_countable]


def points_for_result(goals_for: int, goals_against: int) -> int:
    if goals_for > goals_against:
        return WIN_POINTS
    if goals_for == goals_against:
        return DRAW_POINTS
    return LOSS_POINTS


def head_to_head_points(
    played: Sequence[Match], player_id: str, opponent_id: str
) -> int:
    """League points ``player_id`` earned against ``opponent_id`` only.

    Args:
        played: Countable matches
        player_id: Player whose points are counted
        opponent_id: Opponent to restrict the replay to

    Returns:
        Points from every meeting of the pair, either venue
    """
    points = 0
    for match in played:
        side = match.side_of(player_id)
        if side is None:
            continue
        if match.opponent_slot(side).player_id != opponent_id:
            continue
        points += points_for_result(match.score_for(side), match.score_against(side))
    return points


def _record(row: StandingsRow, goals_for: int, goals_against: int) -> None:
    row.played += 1
    row.goals_for += goals_for
    row.goals_against += goals_against
    row.points += points_for_result(goals_for, goals_against)
    if goals_for > goals_against:
        row.won += 1
        row.form.append(FORM_WIN)
    elif goals_for == goals_against:
        row.drawn += 1
        row.form.append(FORM_DRAW)
    else:
        row.lost += 1
        row.form.append(FORM_LOSS)


def compute_standings(
    players: Sequence[Player], matches: Sequence[Match]
) -> List[StandingsRow]:
    """Compute the league table.

    Only played matches between two rostered players count. Rows are sorted
    by points, goal difference, goals scored and finally head-to-head points
    between the two players being compared.

    Args:
        players: Tournament roster; every player gets a row
        matches: All fixtures

    Returns:
        Standings rows, best first

    Notes
    -----
    The head-to-head step is a pairwise comparison, not a mini-league. With a
    three-way cycle (A beat B, B beat C, C beat A) on otherwise equal rows the
    comparison is not transitive and the resulting order depends on input
    order. This is accepted.
    """
    played = countable_matches(matches)

    rows: Dict[str, StandingsRow] = {
        p.id: StandingsRow(player_id=p.id, player_name=p.name, team=p.team)
        for p in players
    }

    for match in played:
        home = rows.get(match.home_player_id)
        away = rows.get(match.away_player_id)
        if home is None or away is None:
            logger.debug(f"Skipping match {match.id}: player not on roster")
            continue
        _record(home, match.score_for(HOME), match.score_for(AWAY))
        _record(away, match.score_for(AWAY), match.score_for(HOME))

    for row in rows.values():
        row.goal_difference = row.goals_for - row.goals_against
        row.form = list(reversed(row.form[-FORM_LENGTH:]))

    def compare_rows(a: StandingsRow, b: StandingsRow) -> int:
        """Return -1 if ``a`` ranks higher, 1 if ``b`` does, 0 if level."""
        if a.points != b.points:
            return -1 if a.points > b.points else 1
        if a.goal_difference != b.goal_difference:
            return -1 if a.goal_difference > b.goal_difference else 1
        if a.goals_for != b.goals_for:
            return -1 if a.goals_for > b.goals_for else 1

        h2h_a = head_to_head_points(played, a.player_id, b.player_id)
        h2h_b = head_to_head_points(played, b.player_id, a.player_id)
        if h2h_a != h2h_b:
            return -1 if h2h_a > h2h_b else 1
        return 0

    return sorted(rows.values(), key=functools.cmp_to_key(compare_rows))


def get_next_match(matches: Sequence[Match]) -> Optional[Match]:
    """Return the earliest unplayed fixture between two real players.

    Args:
        matches: All fixtures

    Returns:
        The unplayed match with the lowest round number, first in list order
        among equals; None when nothing is left to play
    """
    pending = [m for m in matches if not m.is_played and m.is_resolved]
    if not pending:
        return None
    return min(pending, key=lambda m: m.round_number)


def determine_champion(tournament: Tournament) -> Optional[Player]:
    """Find the winner of a tournament.

    Knockout: the winner of the played match in the highest round. League:
    the top row of the standings.

    Args:
        tournament: Tournament to inspect

    Returns:
        The champion, or None when it cannot be determined yet (unplayed or
        drawn final, empty roster)
    """
    if tournament.is_knockout:
        final_round = tournament.max_round
        finals = [m for m in tournament.matches if m.round_number == final_round]
        if not finals or not finals[0].is_played:
            return None
        winner = finals[0].winner_slot()
        if winner is None:
            return None
        return tournament.get_player(winner.player_id)

    standings = compute_standings(tournament.players, tournament.matches)
    if not standings:
        return None
    return tournament.get_player(standings[0].player_id)
