"""Fixture slots: a filled player, a bye, or a place still to be decided."""

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

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tourneytracker.constants import BYE
from tourneytracker.exceptions import InvalidSlotException


class SlotKind(Enum):
    """What currently occupies one side of a fixture."""

    FILLED = "filled"
    BYE = "bye"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class Slot:
    """One side of a fixture.

    A tagged variant replacing the ``"BYE"`` magic string: comparisons between
    a real player id and the bye marker can no longer match by accident.

    Attributes
    ----------
    kind : SlotKind
        Filled, bye or unresolved.
    player_id : str or None
        Set only for filled slots.

    Notes
    -----
    The wire form, used by ``to_dict`` on matches, is the player id for a
    filled slot, ``"BYE"`` for a bye and ``None`` for an unresolved slot.

    Examples
    --------
    ::

        Slot.filled("p-1").player_id    # "p-1"
        Slot.from_wire("BYE").is_bye     # True
        Slot.from_wire(None).kind        # SlotKind.UNRESOLVED
    """

    kind: SlotKind
    player_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is SlotKind.FILLED:
            if not self.player_id:
                raise InvalidSlotException("A filled slot needs a player id")
            if self.player_id == BYE:
                raise InvalidSlotException(
                    f"'{BYE}' is reserved and cannot be used as a player id"
                )
        elif self.player_id is not None:
            raise InvalidSlotException(
                f"A {self.kind.value} slot cannot carry a player id"
            )

    @classmethod
    def filled(cls, player_id: str) -> "Slot":
        return cls(SlotKind.FILLED, player_id)

    @classmethod
    def bye(cls) -> "Slot":
        return cls(SlotKind.BYE)

    @classmethod
    def unresolved(cls) -> "Slot":
        return cls(SlotKind.UNRESOLVED)

    @property
    def is_filled(self) -> bool:
        return self.kind is SlotKind.FILLED

    @property
    def is_bye(self) -> bool:
        return self.kind is SlotKind.BYE

    @property
    def is_unresolved(self) -> bool:
        return self.kind is SlotKind.UNRESOLVED

    def to_wire(self) -> Optional[str]:
        """Return the storage form of this slot."""
        if self.kind is SlotKind.FILLED:
            return self.player_id
        if self.kind is SlotKind.BYE:
            return BYE
        return None

    @classmethod
    def from_wire(cls, value: Optional[str]) -> "Slot":
        """Build a slot from its storage form."""
        if not value:
            return cls.unresolved()
        if value == BYE:
            return cls.bye()
        return cls.filled(value)

    def __str__(self) -> str:
        if self.kind is SlotKind.FILLED:
            return str(self.player_id)
        if self.kind is SlotKind.BYE:
            return BYE
        return "TBD"
