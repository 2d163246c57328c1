"""Stores for players registered across tournaments."""

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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from tourneytracker.career.identity import PlayerIdentity
from tourneytracker.exceptions import FileLoadException, InvalidPlayerDataException
from tourneytracker.models import RegisteredPlayer
from tourneytracker.storage import read_json, write_json
from tourneytracker.utils import setup_logger

logger = setup_logger(__name__)


class PlayerRegistry(ABC):
    """Registered players keyed by name identity.

    Subclasses provide persistence through :meth:`load` and :meth:`save`; the
    lookup logic lives here and works on the in-memory snapshot.
    """

    def __init__(self) -> None:
        self._players: Dict[str, RegisteredPlayer] = {}

    # ========== Persistence ==========

    @abstractmethod
    def load(self) -> List[RegisteredPlayer]:
        """Refresh the snapshot from the backing store and return it."""

    @abstractmethod
    def save(self, players: Iterable[RegisteredPlayer]) -> None:
        """Overwrite the backing store with ``players``."""

    # ========== Lookup ==========

    def all(self) -> List[RegisteredPlayer]:
        return list(self._players.values())

    def find(self, name: str) -> Optional[RegisteredPlayer]:
        """Find a registered player by name, ignoring case."""
        return self._players.get(PlayerIdentity.from_name(name).key)

    def get_or_create(self, name: str, team: str = "") -> RegisteredPlayer:
        """Return the player registered under ``name``, registering it if new.

        An existing player's team is updated to ``team`` when one is given,
        so the registry reflects the most recent team used.

        Raises:
            InvalidPlayerDataException: If ``name`` is blank
        """
        identity = PlayerIdentity.from_name(name)
        if not identity.key:
            raise InvalidPlayerDataException("Player name cannot be empty")

        existing = self._players.get(identity.key)
        if existing is not None:
            if team and existing.team != team:
                logger.debug(f"Updating team for {existing.name}: {team}")
                existing.team = team
            return existing

        player = RegisteredPlayer(name=identity.name, team=team)
        self._players[identity.key] = player
        logger.info(f"Registered new player {player.name}")
        return player

    def _replace_all(self, players: Iterable[RegisteredPlayer]) -> None:
        self._players = {
            PlayerIdentity.from_name(p.name).key: p for p in players
        }

    def __len__(self) -> int:
        return len(self._players)


class InMemoryPlayerRegistry(PlayerRegistry):
    """Registry kept in memory only. ``save`` stores a snapshot."""

    def __init__(self, players: Optional[Iterable[RegisteredPlayer]] = None):
        super().__init__()
        self._saved: List[RegisteredPlayer] = list(players or [])
        self._replace_all(self._saved)

    def load(self) -> List[RegisteredPlayer]:
        return self.all()

    def save(self, players: Iterable[RegisteredPlayer]) -> None:
        self._saved = list(players)
        self._replace_all(self._saved)

    @property
    def saved(self) -> List[RegisteredPlayer]:
        """Players as of the last :meth:`save`."""
        return list(self._saved)


class JsonFilePlayerRegistry(PlayerRegistry):
    """Registry persisted as a JSON list of registered players.

    A missing file is treated as an empty registry. The file is read on
    construction so a sync never starts from an empty snapshot.
    """

    def __init__(self, file_path: Union[str, Path]):
        super().__init__()
        self.file_path = Path(file_path)
        self.load()

    def load(self) -> List[RegisteredPlayer]:
        if not self.file_path.exists():
            logger.debug(f"No registry at {self.file_path}, starting empty")
            self._replace_all([])
            return []

        data = read_json(self.file_path)
        if not isinstance(data, list):
            raise FileLoadException(f"{self.file_path} does not contain a registry")
        try:
            players = [RegisteredPlayer.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise FileLoadException(
                f"Malformed registry in {self.file_path}: {e}"
            ) from e

        self._replace_all(players)
        logger.debug(f"Loaded {len(players)} registered players")
        return self.all()

    def save(self, players: Iterable[RegisteredPlayer]) -> None:
        players = list(players)
        write_json(self.file_path, [p.to_dict() for p in players])
        self._replace_all(players)
        logger.info(f"Saved {len(players)} registered players to {self.file_path}")
