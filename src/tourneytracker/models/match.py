"""Fixture and result data: matches, per-side stats and goal entries."""

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
from typing import Any, Dict, List, Optional, Tuple

from tourneytracker.constants import AWAY, HOME
from tourneytracker.models.slot import Slot
from tourneytracker.type_hints import Side
from tourneytracker.utils import generate_id


@dataclass
class GoalEntry:
    """A single goal credited to a player.

    Attributes
    ----------
    player_id : str
        Scorer's tournament-scoped id.
    minute : int or None
        Match minute, advisory. Only used to order a goal timeline.
    """

    player_id: str
    minute: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize goal entry to dictionary."""
        return {"player_id": self.player_id, "minute": self.minute}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GoalEntry":
        """Deserialize goal entry from dictionary."""
        return cls(player_id=data["player_id"], minute=data.get("minute"))


@dataclass
class MatchStats:
    """Manually entered statistics for one side of a match.

    Attributes
    ----------
    xg : float
        Expected goals, >= 0.
    possession : int
        Ball possession percentage, 0-100.
    tackles : int
        Tackles won.
    interceptions : int
        Interceptions made.
    motm_player_id : str or None
        Man of the match, when awarded to this side's player.
    rating : float
        Performance rating, 0.0-10.0.
    """

    xg: float = 0.0
    possession: int = 50
    tackles: int = 0
    interceptions: int = 0
    motm_player_id: Optional[str] = None
    rating: float = 6.0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize stats to dictionary."""
        return {
            "xg": self.xg,
            "possession": self.possession,
            "tackles": self.tackles,
            "interceptions": self.interceptions,
            "motm_player_id": self.motm_player_id,
            "rating": self.rating,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchStats":
        """Deserialize stats from dictionary."""
        return cls(
            xg=data.get("xg", 0.0),
            possession=data.get("possession", 50),
            tackles=data.get("tackles", 0),
            interceptions=data.get("interceptions", 0),
            motm_player_id=data.get("motm_player_id"),
            rating=data.get("rating", 6.0),
        )


@dataclass
class Match:
    """One fixture of a tournament.

    Attributes
    ----------
    id : str
        Match identifier.
    tournament_id : str
        Owning tournament.
    round_number : int
        Round (1-indexed).
    home, away : Slot
        Who plays on each side. Knockout matches beyond the first round start
        unresolved and are filled by winner progression.
    home_score, away_score : int or None
        Final score, ``None`` until recorded.
    is_played : bool
        Whether a result has been recorded. Implies both scores are set.
    stage : str or None
        Knockout stage label ("Final", "Semi-final", ...).
    next_match_id : str or None
        Knockout match the winner moves on to.
    is_home_in_next_match : bool or None
        Whether the winner takes the home slot of ``next_match_id``.
    home_stats, away_stats : MatchStats or None
        Optional per-side statistics.
    home_goalscorers, away_goalscorers : list of GoalEntry
        Goals credited to each side, in entry order.
    """

    tournament_id: str
    round_number: int
    home: Slot = field(default_factory=Slot.unresolved)
    away: Slot = field(default_factory=Slot.unresolved)
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    is_played: bool = False
    stage: Optional[str] = None
    next_match_id: Optional[str] = None
    is_home_in_next_match: Optional[bool] = None
    home_stats: Optional[MatchStats] = None
    away_stats: Optional[MatchStats] = None
    home_goalscorers: List[GoalEntry] = field(default_factory=list)
    away_goalscorers: List[GoalEntry] = field(default_factory=list)
    id: str = field(default_factory=lambda: generate_id("match"))

    # ========== Slots ==========

    @property
    def home_player_id(self) -> Optional[str]:
        """Home player id, or None for a bye or unresolved slot."""
        return self.home.player_id

    @property
    def away_player_id(self) -> Optional[str]:
        """Away player id, or None for a bye or unresolved slot."""
        return self.away.player_id

    @property
    def has_bye(self) -> bool:
        return self.home.is_bye or self.away.is_bye

    @property
    def is_resolved(self) -> bool:
        """Both sides hold a real player."""
        return self.home.is_filled and self.away.is_filled

    @property
    def is_countable(self) -> bool:
        """Played between two real players, so it feeds standings and stats."""
        return self.is_played and self.is_resolved

    def side_of(self, player_id: str) -> Optional[Side]:
        """Return which side ``player_id`` plays on, if any."""
        if self.home.is_filled and self.home.player_id == player_id:
            return HOME
        if self.away.is_filled and self.away.player_id == player_id:
            return AWAY
        return None

    def involves(self, player_id: str) -> bool:
        return self.side_of(player_id) is not None

    def slot(self, side: Side) -> Slot:
        return self.home if side == HOME else self.away

    def opponent_slot(self, side: Side) -> Slot:
        return self.away if side == HOME else self.home

    # ========== Scores ==========

    def score_for(self, side: Side) -> int:
        """Recorded score for ``side``, treating a missing score as 0."""
        score = self.home_score if side == HOME else self.away_score
        return score or 0

    def score_against(self, side: Side) -> int:
        return self.score_for(AWAY if side == HOME else HOME)

    def goalscorers(self, side: Side) -> List[GoalEntry]:
        return self.home_goalscorers if side == HOME else self.away_goalscorers

    def stats(self, side: Side) -> Optional[MatchStats]:
        return self.home_stats if side == HOME else self.away_stats

    def derived_goals(self, side: Side) -> int:
        """Goals for ``side`` as the larger of score and scorer entries.

        Tolerates a score entered without scorer detail, or scorers entered
        without the score. Inconsistent entry can over-count; this is a known
        data-quality compromise and is kept as is.
        """
        return max(self.score_for(side), len(self.goalscorers(side)))

    def winner_slot(self) -> Optional[Slot]:
        """Return the winning side's slot, or None if unplayed or drawn."""
        if not self.is_played:
            return None
        home_score = self.score_for(HOME)
        away_score = self.score_for(AWAY)
        if home_score > away_score:
            return self.home
        if away_score > home_score:
            return self.away
        return None

    def goal_timeline(self) -> List[Tuple[Side, GoalEntry]]:
        """All goals ordered by minute.

        Entries without a minute come after timed ones and keep their entry
        order (home list first, then away).
        """
        entries: List[Tuple[Side, GoalEntry]] = [
            (HOME, goal) for goal in self.home_goalscorers
        ] + [(AWAY, goal) for goal in self.away_goalscorers]
        return sorted(
            entries,
            key=lambda item: (
                item[1].minute is None,
                item[1].minute if item[1].minute is not None else 0,
            ),
        )

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "tournament_id": self.tournament_id,
            "round_number": self.round_number,
            "stage": self.stage,
            "home_player_id": self.home.to_wire(),
            "away_player_id": self.away.to_wire(),
            "home_score": self.home_score,
            "away_score": self.away_score,
            "is_played": self.is_played,
            "next_match_id": self.next_match_id,
            "is_home_in_next_match": self.is_home_in_next_match,
            "home_stats": self.home_stats.to_dict() if self.home_stats else None,
            "away_stats": self.away_stats.to_dict() if self.away_stats else None,
            "home_goalscorers": [g.to_dict() for g in self.home_goalscorers],
            "away_goalscorers": [g.to_dict() for g in self.away_goalscorers],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        home_stats = data.get("home_stats")
        away_stats = data.get("away_stats")
        return cls(
            id=data["id"],
            tournament_id=data.get("tournament_id", ""),
            round_number=data["round_number"],
            stage=data.get("stage"),
            home=Slot.from_wire(data.get("home_player_id")),
            away=Slot.from_wire(data.get("away_player_id")),
            home_score=data.get("home_score"),
            away_score=data.get("away_score"),
            is_played=data.get("is_played", False),
            next_match_id=data.get("next_match_id"),
            is_home_in_next_match=data.get("is_home_in_next_match"),
            home_stats=MatchStats.from_dict(home_stats) if home_stats else None,
            away_stats=MatchStats.from_dict(away_stats) if away_stats else None,
            home_goalscorers=[
                GoalEntry.from_dict(g) for g in data.get("home_goalscorers", [])
            ],
            away_goalscorers=[
                GoalEntry.from_dict(g) for g in data.get("away_goalscorers", [])
            ],
        )

    def __str__(self) -> str:
        label = self.stage or f"Round {self.round_number}"
        if self.is_played:
            return (
                f"{label}: {self.home} {self.score_for(HOME)}-"
                f"{self.score_for(AWAY)} {self.away}"
            )
        return f"{label}: {self.home} vs {self.away}"
