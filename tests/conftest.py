import pytest

from tourneytracker.models import GoalEntry, Player, Tournament
from tourneytracker.scheduling import generate_schedule


def record_between(
    matches,
    a_id,
    b_id,
    a_score,
    b_score,
    a_goals=None,
    b_goals=None,
    a_stats=None,
    b_stats=None,
):
    """Record a result for the first unplayed match between two players.

    Scores, goals and stats are given from ``a_id``'s point of view
    regardless of which side it plays on.
    """
    match = next(
        m
        for m in matches
        if not m.is_played
        and m.is_resolved
        and {m.home_player_id, m.away_player_id} == {a_id, b_id}
    )
    a_is_home = match.home_player_id == a_id
    home = (a_score, a_goals, a_stats) if a_is_home else (b_score, b_goals, b_stats)
    away = (b_score, b_goals, b_stats) if a_is_home else (a_score, a_goals, a_stats)

    match.home_score, match.away_score = home[0], away[0]
    match.home_goalscorers = list(home[1] or [])
    match.away_goalscorers = list(away[1] or [])
    match.home_stats, match.away_stats = home[2], away[2]
    match.is_played = True
    return match


@pytest.fixture
def record():
    return record_between


@pytest.fixture
def three_players():
    return [
        Player(name="Alice", team="Arsenal", id="alice"),
        Player(name="Bob", team="Barcelona", id="bob"),
        Player(name="Carol", team="Celtic", id="carol"),
    ]


@pytest.fixture
def scenario(three_players):
    """Alice 3-1 Bob (two scorer entries), Bob 2-2 Carol, Carol 1-0 Alice."""
    tournament = Tournament(name="Scenario", players=three_players, id="scenario")
    tournament.matches = generate_schedule(three_players, tournament.id, "single")

    record_between(
        tournament.matches,
        "alice",
        "bob",
        3,
        1,
        a_goals=[GoalEntry("alice", 12), GoalEntry("alice", 70)],
        b_goals=[GoalEntry("bob", 40)],
    )
    record_between(tournament.matches, "bob", "carol", 2, 2)
    record_between(tournament.matches, "carol", "alice", 1, 0)
    return tournament
