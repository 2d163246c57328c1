"""A player entered in one tournament."""

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
from typing import Any, Dict

from tourneytracker.utils import generate_id


@dataclass
class Player:
    """A tournament participant.

    Attributes
    ----------
    id : str
        Identifier, unique within the tournament.
    name : str
        Display name. Also the cross-tournament identity key (case-insensitive).
    team : str
        Team label the player uses in this tournament. The only field that may
        be corrected after the tournament starts.
    """

    name: str
    team: str = ""
    id: str = field(default_factory=lambda: generate_id("player"))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {"id": self.id, "name": self.name, "team": self.team}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            team=data.get("team", ""),
        )

    def __str__(self) -> str:
        if self.team:
            return f"{self.name} ({self.team})"
        return self.name
