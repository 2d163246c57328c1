"""Lifetime statistics for players registered across tournaments."""

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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from tourneytracker.models.tournament import parse_timestamp, utc_now
from tourneytracker.utils import generate_id


@dataclass
class CareerStats:
    """Totals folded from every tournament a player appeared in.

    Attributes
    ----------
    total_matches, total_wins, total_draws, total_losses : int
        Counted (played, non-bye) matches and their outcomes.
    total_goals, total_conceded : int
        Goals for and against, each side taken as
        ``max(score, goalscorer entries)``.
    total_clean_sheets : int
        Matches where the opponent's derived goals were 0.
    total_xg : float
        Sum of expected goals over matches with stats.
    total_rating_sum : float
        Sum of ratings; divide by ``total_rated_matches`` for the average.
    total_rated_matches : int
        Matches where stats were submitted for the player's side.
    total_possession_sum : int
        Sum of possession percentages over ``total_possession_matches``.
    total_possession_matches : int
        Matches with possession tracked.
    total_motm : int
        Man of the match awards.
    tournaments_played : list of str
        Tournament ids the player was entered in, in fold order.
    """

    total_matches: int = 0
    total_wins: int = 0
    total_draws: int = 0
    total_losses: int = 0
    total_goals: int = 0
    total_conceded: int = 0
    total_clean_sheets: int = 0
    total_xg: float = 0.0
    total_rating_sum: float = 0.0
    total_rated_matches: int = 0
    total_possession_sum: int = 0
    total_possession_matches: int = 0
    total_motm: int = 0
    tournaments_played: List[str] = field(default_factory=list)

    @property
    def win_rate(self) -> float:
        """Wins per counted match, 0.0 when nothing was played."""
        if self.total_matches == 0:
            return 0.0
        return self.total_wins / self.total_matches

    @property
    def avg_rating(self) -> float:
        if self.total_rated_matches == 0:
            return 0.0
        return self.total_rating_sum / self.total_rated_matches

    @property
    def avg_possession(self) -> float:
        if self.total_possession_matches == 0:
            return 0.0
        return self.total_possession_sum / self.total_possession_matches

    @property
    def goal_difference(self) -> int:
        return self.total_goals - self.total_conceded

    def to_dict(self) -> Dict[str, Any]:
        """Serialize career stats to dictionary."""
        return {
            "total_matches": self.total_matches,
            "total_wins": self.total_wins,
            "total_draws": self.total_draws,
            "total_losses": self.total_losses,
            "total_goals": self.total_goals,
            "total_conceded": self.total_conceded,
            "total_clean_sheets": self.total_clean_sheets,
            "total_xg": self.total_xg,
            "total_rating_sum": self.total_rating_sum,
            "total_rated_matches": self.total_rated_matches,
            "total_possession_sum": self.total_possession_sum,
            "total_possession_matches": self.total_possession_matches,
            "total_motm": self.total_motm,
            "tournaments_played": list(self.tournaments_played),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CareerStats":
        """Deserialize career stats from dictionary."""
        return cls(
            total_matches=data.get("total_matches", 0),
            total_wins=data.get("total_wins", 0),
            total_draws=data.get("total_draws", 0),
            total_losses=data.get("total_losses", 0),
            total_goals=data.get("total_goals", 0),
            total_conceded=data.get("total_conceded", 0),
            total_clean_sheets=data.get("total_clean_sheets", 0),
            total_xg=data.get("total_xg", 0.0),
            total_rating_sum=data.get("total_rating_sum", 0.0),
            total_rated_matches=data.get("total_rated_matches", 0),
            total_possession_sum=data.get("total_possession_sum", 0),
            total_possession_matches=data.get("total_possession_matches", 0),
            total_motm=data.get("total_motm", 0),
            tournaments_played=list(data.get("tournaments_played", [])),
        )


@dataclass
class RegisteredPlayer:
    """A player known across tournaments, matched by name.

    Attributes
    ----------
    name : str
        Display name; its case-folded form is the identity key.
    team : str
        Most recently used team label.
    career : CareerStats
        Lifetime totals, rebuilt wholesale by the career aggregator.
    created_at : datetime
        Registration time.
    id : str
        Registry identifier (unrelated to tournament-scoped player ids).
    """

    name: str
    team: str = ""
    career: CareerStats = field(default_factory=CareerStats)
    created_at: datetime = field(default_factory=utc_now)
    id: str = field(default_factory=generate_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize registered player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "team": self.team,
            "created_at": self.created_at.isoformat(),
            "career": self.career.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RegisteredPlayer":
        """Deserialize registered player from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            team=data.get("team", ""),
            created_at=parse_timestamp(data.get("created_at")),
            career=CareerStats.from_dict(data.get("career", {})),
        )
