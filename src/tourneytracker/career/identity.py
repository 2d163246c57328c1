"""Cross-tournament player identity."""

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
from typing import Optional


@dataclass(frozen=True)
class PlayerIdentity:
    """Identity of a player across tournaments.

    Two players are the same person when their names match ignoring case and
    extra whitespace. Tournament-scoped ids play no part.

    Attributes
    ----------
    name : str
        Name as given, stripped.
    key : str
        Normalized name used for comparison and as the registry key.
    """

    name: str = field(compare=False)
    key: str = ""

    @classmethod
    def from_name(cls, name: Optional[str]) -> "PlayerIdentity":
        cleaned = " ".join((name or "").split())
        return cls(name=cleaned, key=cleaned.casefold())

    def matches(self, name: Optional[str]) -> bool:
        """Check whether ``name`` refers to this identity."""
        return PlayerIdentity.from_name(name).key == self.key

    def __str__(self) -> str:
        return self.name
