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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
LOG_LEVEL_ENV_VAR = "TOURNEYTRACKER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Wire sentinel for a resting slot. Never a generated player id.
BYE = "BYE"

# League points
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Form results
FORM_WIN = "W"
FORM_DRAW = "D"
FORM_LOSS = "L"
FORM_LENGTH = 5  # Last N results kept, most recent first

# Leaderboard limits
BIGGEST_WINS_LIMIT = 5
UNKNOWN_PLAYER_NAME = "?"

# Match sides
HOME = "home"
AWAY = "away"

# Tournament formats
FORMAT_SINGLE = "single"
FORMAT_DOUBLE = "double"
FORMAT_KNOCKOUT = "knockout"
ROUND_ROBIN_FORMATS = (FORMAT_SINGLE, FORMAT_DOUBLE)
TOURNAMENT_FORMATS = (FORMAT_SINGLE, FORMAT_DOUBLE, FORMAT_KNOCKOUT)

# Tournament statuses
STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"

# Knockout stage names, keyed by distance from the final
STAGE_FINAL = "Final"
STAGE_SEMI_FINAL = "Semi-final"
STAGE_QUARTER_FINAL = "Quarter-final"
STAGE_NAMES = {
    0: STAGE_FINAL,
    1: STAGE_SEMI_FINAL,
    2: STAGE_QUARTER_FINAL,
}
STAGE_ROUND_TEMPLATE = "Round {round_number}"

# Match stats ranges
MIN_POSSESSION = 0
MAX_POSSESSION = 100
MIN_RATING = 0.0
MAX_RATING = 10.0

MIN_PLAYERS = 2
DEFAULT_ADMIN_PIN = "1234"
