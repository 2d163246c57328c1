import pytest

from tourneytracker.models import Match, Player, Slot, Tournament
from tourneytracker.scheduling import generate_knockout_schedule, generate_schedule
from tourneytracker.standings import (
    compute_standings,
    determine_champion,
    get_next_match,
    head_to_head_points,
)


def _played(home, away, home_score, away_score, round_number=1):
    return Match(
        tournament_id="t1",
        round_number=round_number,
        home=Slot.filled(home),
        away=Slot.filled(away),
        home_score=home_score,
        away_score=away_score,
        is_played=True,
    )


def test_scenario_standings(scenario):
    rows = compute_standings(scenario.players, scenario.matches)

    assert [r.player_name for r in rows] == ["Carol", "Alice", "Bob"]
    assert [(r.points, r.goal_difference) for r in rows] == [(4, 1), (3, 1), (1, -2)]

    carol, alice, bob = rows
    assert (carol.goals_for, carol.goals_against) == (3, 2)
    assert (alice.goals_for, alice.goals_against) == (3, 2)
    assert (bob.goals_for, bob.goals_against) == (3, 5)


def test_scenario_schedule_shape(scenario):
    rounds = sorted({m.round_number for m in scenario.matches})
    assert rounds == [1, 2, 3]
    for round_number in rounds:
        in_round = [m for m in scenario.matches if m.round_number == round_number]
        assert sum(1 for m in in_round if m.is_resolved) == 1
        assert sum(1 for m in in_round if m.has_bye) == 1


def test_form_is_most_recent_first(scenario):
    standings = compute_standings(scenario.players, scenario.matches)
    rows = {r.player_id: r for r in standings}
    assert rows["alice"].form == ["W", "L"]
    assert rows["bob"].form == ["L", "D"]
    assert rows["carol"].form == ["W", "D"]


def test_form_keeps_last_five():
    players = [Player(name=f"P{i}", id=f"p{i}") for i in range(7)]
    matches = generate_schedule(players, "t1", "single")
    for m in matches:
        if m.is_resolved:
            m.home_score, m.away_score, m.is_played = 1, 0, True

    for row in compute_standings(players, matches):
        assert row.played == 6
        assert len(row.form) == 5


def test_points_formula_and_idempotence(scenario):
    first = compute_standings(scenario.players, scenario.matches)
    second = compute_standings(scenario.players, scenario.matches)

    assert first == second
    for row in first:
        assert row.points == 3 * row.won + row.drawn
        assert row.played == row.won + row.drawn + row.lost
        assert row.goal_difference == row.goals_for - row.goals_against


def test_head_to_head_breaks_full_tie():
    players = [
        Player(name="B", id="b"),
        Player(name="A", id="a"),
        Player(name="C", id="c"),
        Player(name="D", id="d"),
    ]
    matches = [
        _played("a", "b", 1, 0),
        _played("c", "a", 1, 0, round_number=2),
        _played("b", "d", 1, 0, round_number=3),
    ]

    rows = compute_standings(players, matches)

    assert [r.player_id for r in rows] == ["c", "a", "b", "d"]
    a_row, b_row = rows[1], rows[2]
    assert (a_row.points, a_row.goal_difference, a_row.goals_for) == (
        b_row.points,
        b_row.goal_difference,
        b_row.goals_for,
    )
    assert head_to_head_points(matches, "a", "b") == 3
    assert head_to_head_points(matches, "b", "a") == 0


def test_unplayed_bye_and_unknown_matches_do_not_count():
    players = [Player(name="A", id="a"), Player(name="B", id="b")]
    matches = [
        Match(
            tournament_id="t1",
            round_number=1,
            home=Slot.filled("a"),
            away=Slot.bye(),
            home_score=5,
            away_score=0,
            is_played=True,
        ),
        Match(
            tournament_id="t1",
            round_number=1,
            home=Slot.filled("a"),
            away=Slot.filled("b"),
            home_score=2,
            away_score=0,
        ),
        _played("a", "ghost", 4, 0),
    ]

    rows = compute_standings(players, matches)

    assert [r.played for r in rows] == [0, 0]
    assert [r.points for r in rows] == [0, 0]


def test_roster_without_matches_gets_zero_rows(three_players):
    rows = compute_standings(three_players, [])
    assert [r.player_id for r in rows] == ["alice", "bob", "carol"]
    assert all(r.played == 0 and r.form == [] for r in rows)


def test_next_match_skips_byes_and_played(three_players):
    matches = generate_schedule(three_players, "t1", "single")

    upcoming = get_next_match(matches)
    assert upcoming.round_number == 1
    assert upcoming.is_resolved

    upcoming.home_score, upcoming.away_score, upcoming.is_played = 0, 0, True
    assert get_next_match(matches).round_number == 2


def test_next_match_none_when_all_played(scenario):
    assert get_next_match(scenario.matches) is None


def test_next_match_skips_unresolved_knockout_slots():
    players = [Player(name=f"P{i}", id=f"p{i}") for i in range(1, 5)]
    matches = generate_knockout_schedule(players, "t1")
    for m in matches:
        if m.round_number == 1:
            m.home_score, m.away_score, m.is_played = 1, 0, True

    assert get_next_match(matches) is None


def test_league_champion_tops_standings(scenario):
    assert determine_champion(scenario).name == "Carol"


def test_knockout_champion_wins_final():
    players = [Player(name="A", id="a"), Player(name="B", id="b")]
    tournament = Tournament(name="Cup", format="knockout", players=players)
    tournament.matches = generate_knockout_schedule(players, tournament.id)
    final = tournament.matches[0]

    assert determine_champion(tournament) is None

    final.home_score, final.away_score, final.is_played = 1, 3, True
    assert determine_champion(tournament).id == "b"


@pytest.mark.parametrize("score", [(2, 2), (0, 0)])
def test_drawn_final_has_no_champion(score):
    players = [Player(name="A", id="a"), Player(name="B", id="b")]
    tournament = Tournament(name="Cup", format="knockout", players=players)
    tournament.matches = generate_knockout_schedule(players, tournament.id)
    final = tournament.matches[0]
    final.home_score, final.away_score = score
    final.is_played = True

    assert determine_champion(tournament) is None


def test_head_to_head_cycle_is_not_transitive():
    # a beat b, b beat c, c beat a: level on points, goal difference and goals
    matches = [
        _played("a", "b", 1, 0),
        _played("b", "c", 1, 0, round_number=2),
        _played("c", "a", 1, 0, round_number=3),
    ]
    a, b, c = (Player(name=n.upper(), id=n) for n in "abc")

    rows = compute_standings([a, b, c], matches)
    assert {(r.points, r.goal_difference, r.goals_for) for r in rows} == {(3, 0, 1)}
    assert head_to_head_points(matches, "a", "b") == 3
    assert head_to_head_points(matches, "b", "c") == 3
    assert head_to_head_points(matches, "c", "a") == 3

    first = [r.player_id for r in rows]
    second = [r.player_id for r in compute_standings([b, a, c], matches)]
    assert sorted(first) == sorted(second) == ["a", "b", "c"]
    assert first != second
