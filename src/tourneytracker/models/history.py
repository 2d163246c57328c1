"""Per-player history records spanning several tournaments."""

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

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from tourneytracker.type_hints import FormResult


@dataclass
class PlayerMatchRecord:
    """One counted match from a player's point of view.

    ``rating``, ``possession`` and ``xg`` are None when no stats were
    submitted for the player's side.
    """

    tournament_id: str
    tournament_name: str
    round_number: int
    opponent_name: str
    opponent_team: str
    goals_for: int
    goals_against: int
    result: FormResult
    rating: Optional[float] = None
    possession: Optional[int] = None
    xg: Optional[float] = None
    is_motm: bool = False
    date: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["date"] = self.date.isoformat() if self.date else None
        return data


@dataclass
class TournamentBreakdown:
    """A player's totals in a single tournament.

    Attributes
    ----------
    position : int
        Final standings position (1-based), 0 if not found.
    total_players : int
        Roster size of the tournament.
    avg_rating : float or None
        Mean rating over rated matches, None when none were rated.
    """

    tournament_id: str
    tournament_name: str
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals: int = 0
    conceded: int = 0
    avg_rating: Optional[float] = None
    motm_count: int = 0
    position: int = 0
    total_players: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class HeadToHead:
    """Lifetime record between two named players.

    Counts are from ``player_a``'s point of view; ``history`` holds
    ``player_a``'s match records against ``player_b``, newest tournament
    first.
    """

    player_a: str
    player_b: str
    total_matches: int = 0
    a_wins: int = 0
    b_wins: int = 0
    draws: int = 0
    a_goals: int = 0
    b_goals: int = 0
    history: List[PlayerMatchRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["history"] = [record.to_dict() for record in self.history]
        return data


@dataclass
class FormPoint:
    """One point of a player's form trend."""

    date: datetime
    tournament_name: str
    goals_for: int
    goals_against: int
    rating: float
    xg: float
    result: FormResult

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data
