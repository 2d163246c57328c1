"""Tournament leaderboards.

Every board has the same shape: one pass over countable matches into a
per-player map, then one entry per roster player (players with no activity
still appear, with zeros), then a stable sort on the board's metric.
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

from collections import defaultdict
from typing import Dict, List, Sequence

from tourneytracker.constants import (
    AWAY,
    BIGGEST_WINS_LIMIT,
    HOME,
    UNKNOWN_PLAYER_NAME,
)
from tourneytracker.models import (
    AvgGoalsEntry,
    BiggestWinEntry,
    CleanSheetEntry,
    CumulativeGoals,
    GoalSeries,
    H2HCell,
    Match,
    MvpEntry,
    Player,
    PossessionEntry,
    ScorerEntry,
    UnluckyEntry,
    WinRateEntry,
)
from tourneytracker.standings.table import countable_matches
from tourneytracker.type_hints import H2HMatrix
from tourneytracker.utils import setup_logger

logger = setup_logger(__name__)

SIDES = (HOME, AWAY)


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, 0.5 rounds up."""
    return int(value + 0.5)


def get_golden_boot(
    players: Sequence[Player], matches: Sequence[Match]
) -> List[ScorerEntry]:
    """Top scorers, counted from goal entries rather than the score line."""
    goals: Dict[str, int] = defaultdict(int)
    for match in countable_matches(matches):
        for side in SIDES:
            for goal in match.goalscorers(side):
                goals[goal.player_id] += 1

    entries = [
        ScorerEntry(
            player_id=p.id, player_name=p.name, team=p.team, goals=goals.get(p.id, 0)
        )
        for p in players
    ]
    return sorted(entries, key=lambda e: e.goals, reverse=True)


def get_golden_glove(
    players: Sequence[Player], matches: Sequence[Match]
) -> List[CleanSheetEntry]:
    """Most clean sheets (opponent scored exactly 0)."""
    clean_sheets: Dict[str, int] = defaultdict(int)
    for match in countable_matches(matches):
        for side in SIDES:
            if match.score_against(side) == 0:
                clean_sheets[match.slot(side).player_id] += 1

    entries = [
        CleanSheetEntry(
            player_id=p.id,
            player_name=p.name,
            team=p.team,
            clean_sheets=clean_sheets.get(p.id, 0),
        )
        for p in players
    ]
    return sorted(entries, key=lambda e: e.clean_sheets, reverse=True)


def get_unlucky_index(
    players: Sequence[Player], matches: Sequence[Match]
) -> List[UnluckyEntry]:
    """Goals scored minus expected goals, most unlucky (most negative) first."""
    goals: Dict[str, int] = defaultdict(int)
    xg: Dict[str, float] = defaultdict(float)
    for match in countable_matches(matches):
        for side in SIDES:
            player_id = match.slot(side).player_id
            goals[player_id] += match.score_for(side)
            stats = match.stats(side)
            if stats is not None:
                xg[player_id] += stats.xg

    entries = []
    for p in players:
        actual = goals.get(p.id, 0)
        expected = xg.get(p.id, 0.0)
        entries.append(
            UnluckyEntry(
                player_id=p.id,
                player_name=p.name,
                team=p.team,
                actual_goals=actual,
                total_xg=round(expected, 2),
                diff=round(actual - expected, 2),
            )
        )
    return sorted(entries, key=lambda e: e.diff)


def get_mvp_leaderboard(
    players: Sequence[Player], matches: Sequence[Match]
) -> List[MvpEntry]:
    """Average match rating and man-of-the-match awards.

    Players never rated are listed last with an average of 0.
    """
    ratings: Dict[str, List[float]] = defaultdict(list)
    motm: Dict[str, int] = defaultdict(int)
    for match in countable_matches(matches):
        for side in SIDES:
            stats = match.stats(side)
            if stats is None:
                continue
            player_id = match.slot(side).player_id
            ratings[player_id].append(stats.rating)
            if stats.motm_player_id == player_id:
                motm[player_id] += 1

    entries = []
    for p in players:
        rated = ratings.get(p.id, [])
        avg = round(sum(rated) / len(rated), 2) if rated else 0.0
        entries.append(
            MvpEntry(
                player_id=p.id,
                player_name=p.name,
                team=p.team,
                avg_rating=avg,
                matches_rated=len(rated),
                motm_count=motm.get(p.id, 0),
            )
        )
    return sorted(
        entries, key=lambda e: (e.matches_rated > 0, e.avg_rating), reverse=True
    )


def get_win_rates(
    players: Sequence[Player], matches: Sequence[Match]
) -> List[WinRateEntry]:
    """Share of matches won, as a whole percentage."""
    played: Dict[str, int] = defaultdict(int)
    wins: Dict[str, int] = defaultdict(int)
    for match in countable_matches(matches):
        for side in SIDES:
            player_id = match.slot(side).player_id
            played[player_id] += 1
            if match.score_for(side) > match.score_against(side):
                wins[player_id] += 1

    entries = []
    for p in players:
        n_played = played.get(p.id, 0)
        n_wins = wins.get(p.id, 0)
        entries.append(
            WinRateEntry(
                player_id=p.id,
                player_name=p.name,
                team=p.team,
                played=n_played,
                wins=n_wins,
                win_rate=round_half_up(n_wins / n_played * 100) if n_played else 0,
            )
        )
    return sorted(entries, key=lambda e: e.win_rate, reverse=True)


def get_avg_goals(
    players: Sequence[Player], matches: Sequence[Match]
) -> List[AvgGoalsEntry]:
    """Goals scored per match played."""
    played: Dict[str, int] = defaultdict(int)
    goals: Dict[str, int] = defaultdict(int)
    for match in countable_matches(matches):
        for side in SIDES:
            player_id = match.slot(side).player_id
            played[player_id] += 1
            goals[player_id] += match.score_for(side)

    entries = []
    for p in players:
        n_played = played.get(p.id, 0)
        total = goals.get(p.id, 0)
        entries.append(
            AvgGoalsEntry(
                player_id=p.id,
                player_name=p.name,
                team=p.team,
                total_goals=total,
                played=n_played,
                avg_goals=round(total / n_played, 2) if n_played else 0.0,
            )
        )
    return sorted(entries, key=lambda e: e.avg_goals, reverse=True)


def get_biggest_wins(
    players: Sequence[Player],
    matches: Sequence[Match],
    limit: int = BIGGEST_WINS_LIMIT,
) -> List[BiggestWinEntry]:
    """Most one-sided results; ties keep the order they were played in."""
    names = {p.id: p.name for p in players}
    entries = [
        BiggestWinEntry(
            home_player_name=names.get(m.home_player_id, UNKNOWN_PLAYER_NAME),
            away_player_name=names.get(m.away_player_id, UNKNOWN_PLAYER_NAME),
            home_score=m.score_for(HOME),
            away_score=m.score_for(AWAY),
            margin=abs(m.score_for(HOME) - m.score_for(AWAY)),
            round_number=m.round_number,
        )
        for m in countable_matches(matches)
    ]
    return sorted(entries, key=lambda e: e.margin, reverse=True)[:limit]


def get_h2h_matrix(players: Sequence[Player], matches: Sequence[Match]) -> H2HMatrix:
    """Head-to-head record of every player against every other player.

    ``matrix[a][b]`` is a's record against b, so ``matrix[a][b].wins`` equals
    ``matrix[b][a].losses``. Self cells are omitted.
    """
    matrix: H2HMatrix = {
        p.id: {q.id: H2HCell() for q in players if q.id != p.id} for p in players
    }

    for match in countable_matches(matches):
        for side in SIDES:
            row = matrix.get(match.slot(side).player_id)
            if row is None:
                continue
            cell = row.get(match.opponent_slot(side).player_id)
            if cell is None:
                continue
            scored = match.score_for(side)
            conceded = match.score_against(side)
            cell.goals_for += scored
            cell.goals_against += conceded
            if scored > conceded:
                cell.wins += 1
            elif scored == conceded:
                cell.draws += 1
            else:
                cell.losses += 1

    return matrix


def get_possession_kings(
    players: Sequence[Player], matches: Sequence[Match]
) -> List[PossessionEntry]:
    """Average possession over matches with stats."""
    possession: Dict[str, List[int]] = defaultdict(list)
    for match in countable_matches(matches):
        for side in SIDES:
            stats = match.stats(side)
            if stats is not None:
                possession[match.slot(side).player_id].append(stats.possession)

    entries = []
    for p in players:
        values = possession.get(p.id, [])
        entries.append(
            PossessionEntry(
                player_id=p.id,
                player_name=p.name,
                team=p.team,
                avg_possession=(
                    round_half_up(sum(values) / len(values)) if values else 0
                ),
                matches_tracked=len(values),
            )
        )
    return sorted(entries, key=lambda e: e.avg_possession, reverse=True)


def get_cumulative_goals_per_round(
    players: Sequence[Player], matches: Sequence[Match]
) -> CumulativeGoals:
    """Running goal totals per round, for a line chart.

    Rounds span 1 to the highest round number of any fixture. A round where a
    player did not play repeats their previous total.
    """
    max_round = max((m.round_number for m in matches), default=0)

    per_round: Dict[str, Dict[int, int]] = defaultdict(lambda: defaultdict(int))
    for match in countable_matches(matches):
        for side in SIDES:
            per_round[match.slot(side).player_id][match.round_number] += (
                match.score_for(side)
            )

    series = []
    for p in players:
        running = 0
        totals = []
        scored = per_round.get(p.id, {})
        for round_number in range(1, max_round + 1):
            running += scored.get(round_number, 0)
            totals.append(running)
        series.append(
            GoalSeries(player_id=p.id, player_name=p.name, goals_per_round=totals)
        )

    return CumulativeGoals(
        players=series,
        round_labels=[f"R{r}" for r in range(1, max_round + 1)],
    )
