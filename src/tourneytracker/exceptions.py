"""Exceptions for use in Tourney Tracker.

The scheduling, standings and career engines never raise for data-quality
problems. These exceptions belong to the boundary: tournament creation,
result recording, validation helpers and file loading.
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


# ========== Base Application Exception ==========


class TourneyTrackerException(Exception):
    """Base exception for all Tourney Tracker errors.

    All custom exceptions in the application inherit from this class so
    callers can catch every application error with a single except clause.
    """

    pass


# ========== Tournament Exceptions ==========


class TournamentException(TourneyTrackerException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class MatchNotFoundException(TournamentException):
    """Raised when a requested match does not exist in the tournament."""

    pass


class InvalidSlotException(TournamentException):
    """Raised when a fixture slot would hold the reserved BYE id."""

    pass


# ========== Player Exceptions ==========


class PlayerException(TourneyTrackerException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(TourneyTrackerException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., negative score, knockout draw)."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(TourneyTrackerException):
    """Base exception for validation errors."""

    pass


class ScoreValidationException(ValidationException):
    """Raised when a score value is invalid."""

    pass


class StatsValidationException(ValidationException):
    """Raised when submitted match stats are out of range."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(TourneyTrackerException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(TourneyTrackerException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid (e.g., unknown format)."""

    pass
