"""Derived rows for standings tables and leaderboards.

None of these are persisted; they are rebuilt from the fixture list on every
read.
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

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from tourneytracker.type_hints import FormResult


@dataclass
class StandingsRow:
    """One player's line in a league table."""

    player_id: str
    player_name: str
    team: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0
    form: List[FormResult] = field(default_factory=list)  # Most recent first

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)


@dataclass
class ScorerEntry:
    """Golden Boot line."""

    player_id: str
    player_name: str
    team: str
    goals: int = 0


@dataclass
class CleanSheetEntry:
    """Golden Glove line."""

    player_id: str
    player_name: str
    team: str
    clean_sheets: int = 0


@dataclass
class UnluckyEntry:
    """Finishing luck: goals scored against expected goals."""

    player_id: str
    player_name: str
    team: str
    actual_goals: int = 0
    total_xg: float = 0.0
    diff: float = 0.0  # actual_goals - total_xg, negative = unlucky


@dataclass
class MvpEntry:
    """Average rating and man-of-the-match awards."""

    player_id: str
    player_name: str
    team: str
    avg_rating: float = 0.0
    matches_rated: int = 0
    motm_count: int = 0


@dataclass
class WinRateEntry:
    player_id: str
    player_name: str
    team: str
    played: int = 0
    wins: int = 0
    win_rate: int = 0  # 0-100


@dataclass
class AvgGoalsEntry:
    player_id: str
    player_name: str
    team: str
    total_goals: int = 0
    played: int = 0
    avg_goals: float = 0.0


@dataclass
class BiggestWinEntry:
    """A one-sided result, by absolute margin."""

    home_player_name: str
    away_player_name: str
    home_score: int
    away_score: int
    margin: int
    round_number: int


@dataclass
class H2HCell:
    """Record of the row player against the column player."""

    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0


@dataclass
class PossessionEntry:
    player_id: str
    player_name: str
    team: str
    avg_possession: int = 0
    matches_tracked: int = 0


@dataclass
class GoalSeries:
    """Running goal total per round for one player."""

    player_id: str
    player_name: str
    goals_per_round: List[int] = field(default_factory=list)


@dataclass
class CumulativeGoals:
    """Line-chart data: one series per player, one label per round."""

    players: List[GoalSeries] = field(default_factory=list)
    round_labels: List[str] = field(default_factory=list)
