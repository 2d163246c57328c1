"""Shared helpers: logger setup and id generation."""

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

import logging
import os
import uuid

from tourneytracker.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

ROOT_LOGGER_NAME = "tourneytracker"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def _configure_root_logger() -> None:
    """Attach one stream handler to the package logger."""
    global _configured
    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    _configured = True


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the package logger.

    Args:
        name: Usually the calling module's ``__name__``

    Returns:
        The configured logger
    """
    _configure_root_logger()
    return logging.getLogger(name)


def generate_id(prefix: str = "") -> str:
    """Generate a short unique identifier.

    Args:
        prefix: Optional label prepended to the id (e.g. ``"match"``)

    Returns:
        A 16 character hex id, prefixed when ``prefix`` is given
    """
    token = uuid.uuid4().hex[:16]
    if prefix:
        return f"{prefix.lower()}_{token}"
    return token


__all__ = ["setup_logger", "generate_id"]
