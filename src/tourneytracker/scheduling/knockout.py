"""Single elimination bracket generation and winner progression.

The bracket is built from the final backwards: every match of round ``r + 1``
gets two feeder matches in round ``r``, linked by ``next_match_id``. The first
feeder sends its winner to the home slot, the second to the away slot.
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

import math
from typing import Dict, List, Optional, Sequence

from tourneytracker.constants import MIN_PLAYERS, STAGE_NAMES, STAGE_ROUND_TEMPLATE
from tourneytracker.models import Match, Player, Slot
from tourneytracker.utils import setup_logger

logger = setup_logger(__name__)


def get_stage_name(round_number: int, total_rounds: int) -> str:
    """Stage label for a knockout round.

    Args:
        round_number: Round (1-indexed)
        total_rounds: Rounds in the bracket; the last one is the final

    Returns:
        "Final", "Semi-final", "Quarter-final" or "Round {r}"
    """
    distance = total_rounds - round_number
    return STAGE_NAMES.get(
        distance, STAGE_ROUND_TEMPLATE.format(round_number=round_number)
    )


def bracket_size(num_players: int) -> int:
    """Smallest power of two holding ``num_players``."""
    return 2 ** math.ceil(math.log2(num_players))


def generate_knockout_schedule(
    players: Sequence[Player], tournament_id: str
) -> List[Match]:
    """Generate a single elimination bracket.

    Args:
        players: Roster in seeding order. The list is padded with byes up to
            the next power of two and paired in order (``1 v 2``, ``3 v 4``...)
        tournament_id: Id stamped on every match

    Returns:
        ``bracket_size - 1`` matches, the final first. First round matches
        with a bye side are left unplayed; advancing the other side is up to
        the caller (see :func:`advance_byes`). Empty for fewer than two
        players.
    """
    num_players = len(players)
    if num_players < MIN_PLAYERS:
        return []

    total_rounds = math.ceil(math.log2(num_players))
    target_size = bracket_size(num_players)

    seeds: List[Slot] = [Slot.filled(p.id) for p in players]
    seeds.extend(Slot.bye() for _ in range(target_size - num_players))

    final = Match(
        tournament_id=tournament_id,
        round_number=total_rounds,
        stage=get_stage_name(total_rounds, total_rounds),
    )
    matches: List[Match] = [final]
    parents: List[Match] = [final]

    for round_number in range(total_rounds - 1, 0, -1):
        stage = get_stage_name(round_number, total_rounds)
        feeders: List[Match] = []
        for parent in parents:
            for feeds_home in (True, False):
                feeders.append(
                    Match(
                        tournament_id=tournament_id,
                        round_number=round_number,
                        stage=stage,
                        next_match_id=parent.id,
                        is_home_in_next_match=feeds_home,
                    )
                )
        matches.extend(feeders)
        parents = feeders

    first_round = [m for m in matches if m.round_number == 1]
    for index, match in enumerate(first_round):
        match.home = seeds[2 * index]
        match.away = seeds[2 * index + 1]

    logger.debug(
        f"Built {total_rounds}-round bracket for {num_players} players "
        f"({target_size - num_players} byes)"
    )
    return matches


def _place_in_next_match(
    by_id: Dict[str, Match], match: Match, slot: Slot
) -> Optional[Match]:
    target = by_id.get(match.next_match_id) if match.next_match_id else None
    if target is None:
        return None
    if match.is_home_in_next_match:
        target.home = slot
    else:
        target.away = slot
    return target


def propagate_winner(matches: Sequence[Match], match: Match) -> Optional[Match]:
    """Move the winner of a played knockout match into its next match.

    Args:
        matches: All fixtures of the bracket
        match: The match just played

    Returns:
        The next match with its slot filled, or None when there is nothing to
        propagate (unplayed, no next match, or a draw that still needs a
        decider).
    """
    if not match.is_played or not match.next_match_id:
        return None

    winner = match.winner_slot()
    if winner is None:
        logger.warning(
            f"Match {match.id} ended level; winner must be decided "
            "before the bracket can progress"
        )
        return None

    by_id = {m.id: m for m in matches}
    target = _place_in_next_match(by_id, match, winner)
    if target is None:
        logger.warning(
            f"Match {match.id} points to unknown next match {match.next_match_id}"
        )
        return None

    logger.info(f"{winner} advances from match {match.id} to match {target.id}")
    return target


def advance_byes(matches: Sequence[Match]) -> List[Match]:
    """Walk a bracket's byes forward, round by round.

    A ``player v bye`` match sends the player on; a ``bye v bye`` match sends a
    bye on, so the next round may in turn resolve as a walkover.

    Args:
        matches: All fixtures of the bracket, modified in place

    Returns:
        Matches that had a slot filled by this call
    """
    by_id = {m.id: m for m in matches}
    updated: List[Match] = []

    for match in sorted(matches, key=lambda m: m.round_number):
        if match.is_played or not match.has_bye or not match.next_match_id:
            continue
        if match.home.is_unresolved or match.away.is_unresolved:
            continue

        moving = match.away if match.home.is_bye else match.home
        target = _place_in_next_match(by_id, match, moving)
        if target is not None:
            updated.append(target)
            logger.debug(f"Walkover in match {match.id}: {moving} moves on")

    return updated
