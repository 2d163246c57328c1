"""League table and leaderboards derived from played matches."""

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

from tourneytracker.standings.leaderboards import (
    get_avg_goals,
    get_biggest_wins,
    get_cumulative_goals_per_round,
    get_golden_boot,
    get_golden_glove,
    get_h2h_matrix,
    get_mvp_leaderboard,
    get_possession_kings,
    get_unlucky_index,
    get_win_rates,
)
from tourneytracker.standings.table import (
    compute_standings,
    countable_matches,
    determine_champion,
    get_next_match,
    head_to_head_points,
)

__all__ = [
    "compute_standings",
    "countable_matches",
    "determine_champion",
    "get_next_match",
    "head_to_head_points",
    "get_golden_boot",
    "get_golden_glove",
    "get_unlucky_index",
    "get_mvp_leaderboard",
    "get_win_rates",
    "get_avg_goals",
    "get_biggest_wins",
    "get_h2h_matrix",
    "get_possession_kings",
    "get_cumulative_goals_per_round",
]
