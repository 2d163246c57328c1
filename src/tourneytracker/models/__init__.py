from tourneytracker.models.career import CareerStats, RegisteredPlayer
from tourneytracker.models.history import (
    FormPoint,
    HeadToHead,
    PlayerMatchRecord,
    TournamentBreakdown,
)
from tourneytracker.models.match import GoalEntry, Match, MatchStats
from tourneytracker.models.player import Player
from tourneytracker.models.slot import Slot, SlotKind
from tourneytracker.models.standings import (
    AvgGoalsEntry,
    BiggestWinEntry,
    CleanSheetEntry,
    CumulativeGoals,
    GoalSeries,
    H2HCell,
    MvpEntry,
    PossessionEntry,
    ScorerEntry,
    StandingsRow,
    UnluckyEntry,
    WinRateEntry,
)
from tourneytracker.models.tournament import HallOfFameEntry, Tournament

__all__ = [
    "Player",
    "Slot",
    "SlotKind",
    "GoalEntry",
    "MatchStats",
    "Match",
    "Tournament",
    "HallOfFameEntry",
    "StandingsRow",
    "ScorerEntry",
    "CleanSheetEntry",
    "UnluckyEntry",
    "MvpEntry",
    "WinRateEntry",
    "AvgGoalsEntry",
    "BiggestWinEntry",
    "H2HCell",
    "PossessionEntry",
    "GoalSeries",
    "CumulativeGoals",
    "CareerStats",
    "RegisteredPlayer",
    "PlayerMatchRecord",
    "TournamentBreakdown",
    "HeadToHead",
    "FormPoint",
]
