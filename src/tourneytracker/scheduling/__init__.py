"""Fixture generators: round robin legs and knockout brackets."""

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

from tourneytracker.scheduling.knockout import (
    advance_byes,
    generate_knockout_schedule,
    get_stage_name,
    propagate_winner,
)
from tourneytracker.scheduling.round_robin import (
    circle_method_rounds,
    generate_schedule,
    reorder_rounds,
)

__all__ = [
    "generate_schedule",
    "reorder_rounds",
    "circle_method_rounds",
    "generate_knockout_schedule",
    "get_stage_name",
    "propagate_winner",
    "advance_byes",
]
