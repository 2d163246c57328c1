"""Cross-tournament history for a single player or a pair of players.

Players are found in each tournament by name identity, so the same person
is followed across tournaments even though their roster ids differ.
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

from typing import List, Optional, Sequence

from tourneytracker.career.identity import PlayerIdentity
from tourneytracker.constants import FORM_DRAW, FORM_LOSS, FORM_WIN
from tourneytracker.models import (
    FormPoint,
    HeadToHead,
    Match,
    Player,
    PlayerMatchRecord,
    Tournament,
    TournamentBreakdown,
)
from tourneytracker.standings.table import compute_standings, countable_matches
from tourneytracker.type_hints import FormResult
from tourneytracker.utils import setup_logger

logger = setup_logger(__name__)

UNKNOWN_OPPONENT = "Unknown"


def result_letter(goals_for: int, goals_against: int) -> FormResult:
    if goals_for > goals_against:
        return FORM_WIN
    if goals_for == goals_against:
        return FORM_DRAW
    return FORM_LOSS


def find_roster_player(tournament: Tournament, name: str) -> Optional[Player]:
    """First roster player whose name matches ``name``, ignoring case."""
    identity = PlayerIdentity.from_name(name)
    for player in tournament.players:
        if identity.matches(player.name):
            return player
    logger.debug(f"{name} is not on the roster of {tournament.name}")
    return None


def _player_matches(tournament: Tournament, player: Player) -> List[Match]:
    return [m for m in countable_matches(tournament.matches) if m.involves(player.id)]


def _match_record(
    tournament: Tournament, match: Match, player: Player
) -> PlayerMatchRecord:
    side = match.side_of(player.id)
    goals_for = match.score_for(side)
    goals_against = match.score_against(side)
    opponent = tournament.get_player(match.opponent_slot(side).player_id)
    stats = match.stats(side)
    return PlayerMatchRecord(
        tournament_id=tournament.id,
        tournament_name=tournament.name,
        round_number=match.round_number,
        opponent_name=opponent.name if opponent else UNKNOWN_OPPONENT,
        opponent_team=opponent.team if opponent else "",
        goals_for=goals_for,
        goals_against=goals_against,
        result=result_letter(goals_for, goals_against),
        rating=stats.rating if stats else None,
        possession=stats.possession if stats else None,
        xg=stats.xg if stats else None,
        is_motm=bool(stats and stats.motm_player_id == player.id),
        date=tournament.created_at,
    )


def get_player_match_history(
    name: str, tournaments: Sequence[Tournament]
) -> List[PlayerMatchRecord]:
    """Every counted match ``name`` played, tournament by tournament.

    Args:
        name: Player name, matched case-insensitively
        tournaments: Tournaments to search, in the order results are wanted

    Returns:
        Match records in tournament order, then fixture order
    """
    records: List[PlayerMatchRecord] = []
    for tournament in tournaments:
        player = find_roster_player(tournament, name)
        if player is None:
            continue
        for match in _player_matches(tournament, player):
            records.append(_match_record(tournament, match, player))
    return records


def get_player_tournament_breakdowns(
    name: str, tournaments: Sequence[Tournament]
) -> List[TournamentBreakdown]:
    """Per-tournament totals and final position for ``name``.

    Tournaments where the player has no counted match are left out.
    """
    breakdowns: List[TournamentBreakdown] = []
    for tournament in tournaments:
        player = find_roster_player(tournament, name)
        if player is None:
            continue
        played = _player_matches(tournament, player)
        if not played:
            logger.debug(f"{player.name} has no counted match in {tournament.name}")
            continue

        breakdown = TournamentBreakdown(
            tournament_id=tournament.id,
            tournament_name=tournament.name,
            played=len(played),
            total_players=len(tournament.players),
        )
        ratings: List[float] = []
        for match in played:
            side = match.side_of(player.id)
            goals_for = match.score_for(side)
            goals_against = match.score_against(side)
            breakdown.goals += goals_for
            breakdown.conceded += goals_against
            if goals_for > goals_against:
                breakdown.wins += 1
            elif goals_for == goals_against:
                breakdown.draws += 1
            else:
                breakdown.losses += 1

            stats = match.stats(side)
            if stats is not None:
                ratings.append(stats.rating)
                if stats.motm_player_id == player.id:
                    breakdown.motm_count += 1

        if ratings:
            breakdown.avg_rating = sum(ratings) / len(ratings)

        standings = compute_standings(tournament.players, tournament.matches)
        for position, row in enumerate(standings, start=1):
            if row.player_id == player.id:
                breakdown.position = position
                break

        breakdowns.append(breakdown)
    return breakdowns


def get_head_to_head(
    name_a: str, name_b: str, tournaments: Sequence[Tournament]
) -> HeadToHead:
    """Lifetime record of ``name_a`` against ``name_b``.

    History is ordered newest tournament first.
    """
    h2h = HeadToHead(
        player_a=PlayerIdentity.from_name(name_a).name,
        player_b=PlayerIdentity.from_name(name_b).name,
    )

    for tournament in sorted(tournaments, key=lambda t: t.created_at, reverse=True):
        player_a = find_roster_player(tournament, name_a)
        player_b = find_roster_player(tournament, name_b)
        if player_a is None or player_b is None or player_a.id == player_b.id:
            continue

        for match in _player_matches(tournament, player_a):
            if not match.involves(player_b.id):
                continue
            record = _match_record(tournament, match, player_a)
            h2h.total_matches += 1
            h2h.a_goals += record.goals_for
            h2h.b_goals += record.goals_against
            if record.result == FORM_WIN:
                h2h.a_wins += 1
            elif record.result == FORM_LOSS:
                h2h.b_wins += 1
            else:
                h2h.draws += 1
            h2h.history.append(record)

    return h2h


def get_player_form_trend(
    name: str, tournaments: Sequence[Tournament]
) -> List[FormPoint]:
    """Chronological per-match form for ``name``.

    Tournaments are taken oldest first; missing stats read as 0.
    """
    ordered = sorted(tournaments, key=lambda t: t.created_at)
    trend: List[FormPoint] = []
    for record in get_player_match_history(name, ordered):
        trend.append(
            FormPoint(
                date=record.date,
                tournament_name=record.tournament_name,
                goals_for=record.goals_for,
                goals_against=record.goals_against,
                rating=record.rating or 0.0,
                xg=record.xg or 0.0,
                result=record.result,
            )
        )
    return trend

