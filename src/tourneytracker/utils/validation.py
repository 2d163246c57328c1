"""Validation utilities for Tourney Tracker.

Each ``validate_*`` function returns a :class:`ValidationResult`; the
``*_strict`` variants raise instead and are meant for boundary code.
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

from typing import Any, List, Optional, Sequence

from tourneytracker.constants import (
    BYE,
    MAX_POSSESSION,
    MAX_RATING,
    MIN_PLAYERS,
    MIN_POSSESSION,
    MIN_RATING,
)
from tourneytracker.exceptions import (
    InvalidPlayerDataException,
    ScoreValidationException,
    StatsValidationException,
    TournamentStateException,
)
from tourneytracker.models import MatchStats, Player


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _invalid(message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, error_message=message)


# ========== Score Validation ==========


def validate_score(score: Any, label: str = "Score") -> ValidationResult:
    """Validate a recorded score.

    Args:
        score: Value to check; integers and integral strings are accepted
        label: Name used in the error message

    Returns:
        ValidationResult whose sanitized value is the score as an int
    """
    if score is None or isinstance(score, bool):
        return _invalid(f"{label} is required")

    if isinstance(score, str):
        score = score.strip()
        if not score.lstrip("-").isdigit():
            return _invalid(f"{label} must be a whole number: {score!r}")
        score = int(score)
    elif isinstance(score, float):
        if not score.is_integer():
            return _invalid(f"{label} must be a whole number: {score}")
        score = int(score)
    elif not isinstance(score, int):
        return _invalid(f"{label} must be a whole number: {score!r}")

    if score < 0:
        return _invalid(f"{label} cannot be negative: {score}")

    return ValidationResult(is_valid=True, sanitized_value=score)


def validate_score_strict(score: Any, label: str = "Score") -> int:
    """Validate a score and return it as an int.

    Raises:
        ScoreValidationException: If the score is missing, negative or not
            a whole number
    """
    result = validate_score(score, label)
    if not result.is_valid:
        raise ScoreValidationException(result.error_message)
    return result.sanitized_value


# ========== Stats Validation ==========


def validate_match_stats(
    stats: Optional[MatchStats], allowed_motm_ids: Sequence[str] = ()
) -> ValidationResult:
    """Validate one side's match statistics.

    Args:
        stats: Stats to check; None (no stats submitted) is valid
        allowed_motm_ids: Player ids that may receive man of the match. When
            empty, the MOTM id is not checked.

    Returns:
        ValidationResult with the stats as sanitized value
    """
    if stats is None:
        return ValidationResult(is_valid=True, sanitized_value=None)

    errors: List[str] = []
    if stats.xg < 0:
        errors.append(f"xG cannot be negative: {stats.xg}")
    if not MIN_POSSESSION <= stats.possession <= MAX_POSSESSION:
        errors.append(
            f"Possession must be between {MIN_POSSESSION} and "
            f"{MAX_POSSESSION}: {stats.possession}"
        )
    if not MIN_RATING <= stats.rating <= MAX_RATING:
        errors.append(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}: {stats.rating}"
        )
    if stats.tackles < 0:
        errors.append(f"Tackles cannot be negative: {stats.tackles}")
    if stats.interceptions < 0:
        errors.append(f"Interceptions cannot be negative: {stats.interceptions}")
    if (
        stats.motm_player_id is not None
        and allowed_motm_ids
        and stats.motm_player_id not in allowed_motm_ids
    ):
        errors.append(f"Man of the match is not in this match: {stats.motm_player_id}")

    if errors:
        return _invalid("; ".join(errors))
    return ValidationResult(is_valid=True, sanitized_value=stats)


def validate_match_stats_strict(
    stats: Optional[MatchStats], allowed_motm_ids: Sequence[str] = ()
) -> None:
    """Validate match stats and raise exception if invalid.

    Raises:
        StatsValidationException: If any value is out of range
    """
    result = validate_match_stats(stats, allowed_motm_ids)
    if not result.is_valid:
        raise StatsValidationException(result.error_message)


# ========== Player Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate a player name; the sanitized value is the stripped name."""
    if not name or not name.strip():
        return _invalid("Player name cannot be empty")
    return ValidationResult(is_valid=True, sanitized_value=" ".join(name.split()))


def validate_roster(players: Sequence[Player]) -> ValidationResult:
    """Validate a tournament roster.

    A roster needs at least two players, unique non-empty ids that are never
    the reserved bye id, and non-empty names.
    """
    if len(players) < MIN_PLAYERS:
        return _invalid(
            f"Need at least {MIN_PLAYERS} players, got {len(players)}"
        )

    seen = set()
    for player in players:
        if not player.id:
            return _invalid(f"Player {player.name!r} has no id")
        if player.id == BYE:
            return _invalid(f"Player id {BYE!r} is reserved")
        if player.id in seen:
            return _invalid(f"Duplicate player id: {player.id}")
        seen.add(player.id)

        name_result = validate_player_name(player.name)
        if not name_result:
            return _invalid(f"Player {player.id}: {name_result.error_message}")

    return ValidationResult(is_valid=True, sanitized_value=list(players))


def validate_roster_strict(players: Sequence[Player]) -> None:
    """Validate a roster and raise exception if invalid.

    Raises:
        TournamentStateException: If the roster is too small
        InvalidPlayerDataException: If a player's id or name is invalid
    """
    if len(players) < MIN_PLAYERS:
        raise TournamentStateException(
            f"Need at least {MIN_PLAYERS} players, got {len(players)}"
        )
    result = validate_roster(players)
    if not result.is_valid:
        raise InvalidPlayerDataException(result.error_message)
