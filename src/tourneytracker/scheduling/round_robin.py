"""Round robin fixture generation.

Uses the circle method: one slot stays fixed while the others rotate around
it, so every pair meets exactly once per leg.
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

import copy
from typing import List, Sequence, Tuple

from tourneytracker.constants import FORMAT_DOUBLE, MIN_PLAYERS
from tourneytracker.models import Match, Player, Slot
from tourneytracker.type_hints import RoundOrder, TournamentFormat
from tourneytracker.utils import setup_logger

logger = setup_logger(__name__)

# (home, away) for every fixture of one round
RoundPairings = List[Tuple[Slot, Slot]]


def circle_method_rounds(player_ids: Sequence[str]) -> List[RoundPairings]:
    """Build one leg of round robin pairings.

    An odd roster gets a bye slot appended. Slot 0 stays fixed; after each
    round the last slot moves to index 1.

    Args:
        player_ids: Roster ids in seeding order

    Returns:
        ``n - 1`` rounds of ``n / 2`` pairings, ``n`` being the padded size
    """
    slots: List[Slot] = [Slot.filled(pid) for pid in player_ids]
    if len(slots) % 2 != 0:
        slots.append(Slot.bye())

    n = len(slots)
    rounds: List[RoundPairings] = []

    for _ in range(n - 1):
        rounds.append([(slots[i], slots[n - 1 - i]) for i in range(n // 2)])
        slots.insert(1, slots.pop())

    return rounds


def generate_schedule(
    players: Sequence[Player],
    tournament_id: str,
    format: TournamentFormat,
) -> List[Match]:
    """Generate a round robin fixture list.

    Args:
        players: Tournament roster
        tournament_id: Id stamped on every match
        format: ``"single"`` for one leg, ``"double"`` to append a mirrored
            second leg with home and away swapped

    Returns:
        Unplayed matches, round numbers 1-based and contiguous. An empty list
        when fewer than two players are given.
    """
    if len(players) < MIN_PLAYERS:
        logger.debug(
            f"Not scheduling tournament {tournament_id}: "
            f"{len(players)} player(s)"
        )
        return []

    rounds = circle_method_rounds([p.id for p in players])
    matches: List[Match] = []

    for index, pairings in enumerate(rounds):
        for home, away in pairings:
            matches.append(
                Match(
                    tournament_id=tournament_id,
                    round_number=index + 1,
                    home=home,
                    away=away,
                )
            )

    if format == FORMAT_DOUBLE:
        first_leg_rounds = len(rounds)
        for index, pairings in enumerate(rounds):
            for home, away in pairings:
                matches.append(
                    Match(
                        tournament_id=tournament_id,
                        round_number=first_leg_rounds + index + 1,
                        home=away,
                        away=home,
                    )
                )

    logger.debug(
        f"Scheduled {len(matches)} matches over "
        f"{len(rounds) * (2 if format == FORMAT_DOUBLE else 1)} rounds "
        f"for {len(players)} players ({format})"
    )
    return matches


def reorder_rounds(matches: Sequence[Match], round_order: RoundOrder) -> List[Match]:
    """Renumber rounds according to a new order.

    Args:
        matches: Current fixtures
        round_order: Old round numbers listed in their new order; the round
            at index ``i`` becomes round ``i + 1``

    Returns:
        New match objects. Rounds missing from ``round_order`` keep their
        number; the input matches are not modified.
    """
    mapping = {old: new_index + 1 for new_index, old in enumerate(round_order)}
    reordered: List[Match] = []
    for match in matches:
        moved = copy.deepcopy(match)
        moved.round_number = mapping.get(match.round_number, match.round_number)
        reordered.append(moved)
    return reordered
