"""Type hints used in Tourney Tracker."""

from typing import Dict, List, Literal

# Match sides (for runtime use see constants.HOME / constants.AWAY)
Side = Literal["home", "away"]

# Round-robin legs plus the bracket format
TournamentFormat = Literal["single", "double", "knockout"]
TournamentStatus = Literal["active", "completed"]

# One entry of a player's form guide
FormResult = Literal["W", "D", "L"]

# Player id -> opponent id -> cell
H2HMatrix = Dict[str, Dict[str, "H2HCell"]]

# Permutation of round numbers, new order first to last
RoundOrder = List[int]

#  LocalWords:  H2HMatrix RoundOrder
