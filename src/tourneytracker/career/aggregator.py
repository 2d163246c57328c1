"""Career statistics folded across tournaments."""

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

from typing import Callable, Dict, List, Optional, Sequence, Set

from tourneytracker.career.identity import PlayerIdentity
from tourneytracker.career.registry import PlayerRegistry
from tourneytracker.constants import AWAY, HOME
from tourneytracker.models import CareerStats, Match, RegisteredPlayer, Tournament
from tourneytracker.standings.table import countable_matches
from tourneytracker.type_hints import Side
from tourneytracker.utils import setup_logger

logger = setup_logger(__name__)

IdentityFactory = Callable[[str], PlayerIdentity]


def roster_ids_by_identity(
    tournament: Tournament, identity: IdentityFactory = PlayerIdentity.from_name
) -> Dict[PlayerIdentity, Set[str]]:
    """Map each identity on a roster to its tournament-scoped player ids."""
    roster: Dict[PlayerIdentity, Set[str]] = {}
    for player in tournament.players:
        roster.setdefault(identity(player.name), set()).add(player.id)
    return roster


def credit_match(career: CareerStats, match: Match, side: Side, player_id: str) -> None:
    """Add one counted match to ``career`` from ``side``'s point of view."""
    opponent = AWAY if side == HOME else HOME
    goals = match.derived_goals(side)
    conceded = match.derived_goals(opponent)

    career.total_matches += 1
    career.total_goals += goals
    career.total_conceded += conceded

    scored = match.score_for(side)
    against = match.score_against(side)
    if scored > against:
        career.total_wins += 1
    elif scored == against:
        career.total_draws += 1
    else:
        career.total_losses += 1

    if conceded == 0:
        career.total_clean_sheets += 1

    stats = match.stats(side)
    if stats is not None:
        career.total_rating_sum += stats.rating
        career.total_rated_matches += 1
        career.total_xg += stats.xg
        career.total_possession_sum += stats.possession
        career.total_possession_matches += 1
        if stats.motm_player_id == player_id:
            career.total_motm += 1


class CareerAggregator:
    """Rebuilds registered players' career stats from tournament data.

    Every sync starts from zero and folds every tournament given, so calling
    it twice with the same data gives the same totals. There is no
    incremental update.

    Args:
        registry: Store of registered players
        identity: Builds the identity used to match roster names to
            registered players
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        identity: IdentityFactory = PlayerIdentity.from_name,
    ):
        self.registry = registry
        self.identity = identity

    def register_players(self, tournaments: Sequence[Tournament]) -> None:
        """Make sure every rostered name is registered.

        Tournaments are visited oldest first so each player's team ends up as
        the most recent one used.
        """
        for tournament in sorted(tournaments, key=lambda t: t.created_at):
            for player in tournament.players:
                self.registry.get_or_create(player.name, player.team)

    def sync_career_stats(self, tournaments: Sequence[Tournament]) -> None:
        """Recompute every registered player's career and save the registry.

        Args:
            tournaments: All tournaments to fold, in order
        """
        players = self.registry.all()
        by_identity: Dict[PlayerIdentity, RegisteredPlayer] = {}
        for registered in players:
            registered.career = CareerStats()
            by_identity[self.identity(registered.name)] = registered

        for tournament in tournaments:
            roster = roster_ids_by_identity(tournament, self.identity)
            played = countable_matches(tournament.matches)

            for identity, player_ids in roster.items():
                registered = by_identity.get(identity)
                if registered is None:
                    continue

                career = registered.career
                if tournament.id not in career.tournaments_played:
                    career.tournaments_played.append(tournament.id)

                for match in played:
                    for player_id in player_ids:
                        side = match.side_of(player_id)
                        if side is not None:
                            credit_match(career, match, side, player_id)

        self.registry.save(players)
        logger.info(
            f"Synced career stats for {len(players)} players "
            f"across {len(tournaments)} tournaments"
        )

    def get_career_leaderboard(self) -> List[RegisteredPlayer]:
        """Players with at least one counted match, top scorers first.

        Ties on goals are broken by win rate.
        """
        active = [p for p in self.registry.all() if p.career.total_matches > 0]
        return sorted(
            active,
            key=lambda p: (p.career.total_goals, p.career.win_rate),
            reverse=True,
        )

    def get_career(self, name: str) -> Optional[CareerStats]:
        registered = self.registry.find(name)
        return registered.career if registered else None
