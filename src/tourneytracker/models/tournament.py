"""Tournament data class."""

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
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil import tz
from dateutil.parser import isoparse

from tourneytracker.constants import (
    DEFAULT_ADMIN_PIN,
    FORMAT_KNOCKOUT,
    FORMAT_SINGLE,
    STATUS_ACTIVE,
    STATUS_COMPLETED,
)
from tourneytracker.models.match import Match
from tourneytracker.models.player import Player
from tourneytracker.type_hints import TournamentFormat, TournamentStatus
from tourneytracker.utils import generate_id


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: Optional[str]) -> datetime:
    """Parse an ISO-8601 timestamp as written by this or another store.

    Missing values fall back to the current time. Values without an offset
    are taken as UTC so they order against freshly created records.
    """
    if not value:
        return utc_now()
    parsed = isoparse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz.UTC)
    return parsed


@dataclass
class Tournament:
    """A tournament: roster, format and fixture list.

    Attributes
    ----------
    name : str
        Tournament name.
    format : str
        ``"single"`` or ``"double"`` round robin, or ``"knockout"``.
    status : str
        ``"active"`` until completed.
    players : list of Player
        Roster.
    matches : list of Match
        Fixtures in generation order.
    created_at : datetime
        Creation time, used to order tournaments chronologically.
    admin_pin : str
        Shared PIN gating result entry in the surrounding application.
    id : str
        Tournament identifier.
    """

    name: str
    format: TournamentFormat = FORMAT_SINGLE
    status: TournamentStatus = STATUS_ACTIVE
    players: List[Player] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    admin_pin: str = DEFAULT_ADMIN_PIN
    id: str = field(default_factory=lambda: generate_id("tournament"))

    @property
    def is_knockout(self) -> bool:
        return self.format == FORMAT_KNOCKOUT

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED

    def get_player(self, player_id: Optional[str]) -> Optional[Player]:
        """Look up a roster player by id."""
        if player_id is None:
            return None
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_match(self, match_id: Optional[str]) -> Optional[Match]:
        """Look up a fixture by id."""
        if match_id is None:
            return None
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    @property
    def max_round(self) -> int:
        return max((m.round_number for m in self.matches), default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "format": self.format,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "admin_pin": self.admin_pin,
            "players": [p.to_dict() for p in self.players],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", "Untitled Tournament"),
            format=data.get("format", FORMAT_SINGLE),
            status=data.get("status", STATUS_ACTIVE),
            created_at=parse_timestamp(data.get("created_at")),
            admin_pin=data.get("admin_pin", DEFAULT_ADMIN_PIN),
            players=[Player.from_dict(p) for p in data.get("players", [])],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
        )


@dataclass
class HallOfFameEntry:
    """Champion record written when a tournament is completed."""

    tournament_id: str
    tournament_name: str
    winner_name: str
    winner_team: str
    date: datetime = field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize entry to dictionary."""
        return {
            "tournament_id": self.tournament_id,
            "tournament_name": self.tournament_name,
            "winner_name": self.winner_name,
            "winner_team": self.winner_team,
            "date": self.date.isoformat(),
        }
