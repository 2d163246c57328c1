"""Player identity and statistics across tournaments."""

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

from tourneytracker.career.aggregator import CareerAggregator
from tourneytracker.career.history import (
    find_roster_player,
    get_head_to_head,
    get_player_form_trend,
    get_player_match_history,
    get_player_tournament_breakdowns,
)
from tourneytracker.career.identity import PlayerIdentity
from tourneytracker.career.registry import (
    InMemoryPlayerRegistry,
    JsonFilePlayerRegistry,
    PlayerRegistry,
)

__all__ = [
    "PlayerIdentity",
    "PlayerRegistry",
    "InMemoryPlayerRegistry",
    "JsonFilePlayerRegistry",
    "CareerAggregator",
    "find_roster_player",
    "get_player_match_history",
    "get_player_tournament_breakdowns",
    "get_head_to_head",
    "get_player_form_trend",
]
