"""JSON persistence for tournaments and other saved state."""

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

import json
from pathlib import Path
from typing import Any, List, Sequence, Union

from tourneytracker.exceptions import (
    FileLoadException,
    FileSaveException,
    InvalidSlotException,
)
from tourneytracker.models import Tournament
from tourneytracker.utils import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


def read_json(file_path: PathLike) -> Any:
    """Load a JSON document.

    Raises:
        FileLoadException: If the file is missing, unreadable or not JSON
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        logger.error(f"File not found: {file_path}")
        raise FileLoadException(f"File not found: {file_path}") from e
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading {file_path}: {e}")
        raise FileLoadException(f"Could not load {file_path}: {e}") from e


def write_json(file_path: PathLike, data: Any) -> None:
    """Write ``data`` as indented JSON, replacing the file.

    Raises:
        FileSaveException: If the file cannot be written
    """
    try:
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except (OSError, TypeError) as e:
        logger.error(f"Failed to save {file_path}: {e}")
        raise FileSaveException(f"Could not save {file_path}: {e}") from e
    logger.debug(f"Saved {file_path}")


def load_tournament(file_path: PathLike) -> Tournament:
    data = read_json(file_path)
    if not isinstance(data, dict):
        raise FileLoadException(f"{file_path} does not contain a tournament")
    try:
        return Tournament.from_dict(data)
    except (KeyError, TypeError, ValueError, InvalidSlotException) as e:
        raise FileLoadException(f"Malformed tournament in {file_path}: {e}") from e


def save_tournament(tournament: Tournament, file_path: PathLike) -> None:
    write_json(file_path, tournament.to_dict())
    logger.info(f"Saved tournament '{tournament.name}' to {file_path}")


def load_tournaments(file_paths: Sequence[PathLike]) -> List[Tournament]:
    """Load several tournament files, in the order given."""
    return [load_tournament(path) for path in file_paths]
