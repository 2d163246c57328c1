from collections import Counter

import pytest

from tourneytracker.models import Player, Slot
from tourneytracker.scheduling import (
    advance_byes,
    generate_knockout_schedule,
    get_stage_name,
    propagate_winner,
)


def _players(count):
    return [Player(name=f"Player {i}", id=f"p{i}") for i in range(1, count + 1)]


@pytest.mark.parametrize(
    "count, size",
    [(2, 2), (3, 4), (4, 4), (5, 8), (8, 8), (9, 16), (16, 16)],
)
def test_bracket_has_size_minus_one_matches(count, size):
    matches = generate_knockout_schedule(_players(count), "t1")
    assert len(matches) == size - 1
    assert sum(1 for m in matches if m.stage == "Final") == 1
    assert sum(1 for m in matches if m.next_match_id is None) == 1


@pytest.mark.parametrize("count", [3, 5, 6, 7, 8])
def test_first_round_covers_padded_roster_once(count):
    players = _players(count)
    matches = generate_knockout_schedule(players, "t1")
    first_round = [m for m in matches if m.round_number == 1]

    slots = [s for m in first_round for s in (m.home, m.away)]
    ids = [s.player_id for s in slots if s.is_filled]
    assert sorted(ids) == sorted(p.id for p in players)
    assert len(ids) == len(set(ids))
    assert sum(1 for s in slots if s.is_bye) == len(slots) - count


def test_seeds_are_paired_in_order():
    matches = generate_knockout_schedule(_players(4), "t1")
    first_round = [m for m in matches if m.round_number == 1]
    assert [(m.home_player_id, m.away_player_id) for m in first_round] == [
        ("p1", "p2"),
        ("p3", "p4"),
    ]


def test_every_parent_has_one_home_and_one_away_feeder():
    matches = generate_knockout_schedule(_players(8), "t1")
    by_id = {m.id: m for m in matches}

    feeders = Counter()
    for m in matches:
        if m.next_match_id is None:
            continue
        parent = by_id[m.next_match_id]
        assert parent.round_number == m.round_number + 1
        feeders[(parent.id, m.is_home_in_next_match)] += 1

    parents = {m.id for m in matches if m.round_number > 1}
    assert set(feeders) == {(p, home) for p in parents for home in (True, False)}
    assert all(n == 1 for n in feeders.values())


def test_later_rounds_start_unresolved():
    matches = generate_knockout_schedule(_players(8), "t1")
    for m in matches:
        if m.round_number > 1:
            assert m.home.is_unresolved and m.away.is_unresolved


def test_stage_names():
    matches = generate_knockout_schedule(_players(8), "t1")
    stages = {m.round_number: m.stage for m in matches}
    assert stages == {1: "Quarter-final", 2: "Semi-final", 3: "Final"}

    assert get_stage_name(1, 4) == "Round 1"
    assert get_stage_name(4, 4) == "Final"


@pytest.mark.parametrize("count", [0, 1])
def test_too_few_players_gives_empty_bracket(count):
    assert generate_knockout_schedule(_players(count), "t1") == []


def test_bye_sends_player_to_next_round():
    matches = generate_knockout_schedule(_players(3), "t1")
    final = next(m for m in matches if m.stage == "Final")

    updated = advance_byes(matches)

    assert updated == [final]
    assert final.away == Slot.filled("p3")
    assert final.home.is_unresolved


def test_double_bye_walks_over_two_rounds():
    matches = generate_knockout_schedule(_players(5), "t1")
    advance_byes(matches)

    final = next(m for m in matches if m.stage == "Final")
    semis = [m for m in matches if m.stage == "Semi-final"]

    assert semis[1].home == Slot.filled("p5")
    assert semis[1].away.is_bye
    assert final.away == Slot.filled("p5")
    assert final.home.is_unresolved


def test_advance_byes_is_noop_without_byes():
    matches = generate_knockout_schedule(_players(4), "t1")
    assert advance_byes(matches) == []


def test_winner_moves_into_next_match():
    matches = generate_knockout_schedule(_players(4), "t1")
    final = next(m for m in matches if m.stage == "Final")
    semi_home, semi_away = [m for m in matches if m.round_number == 1]

    semi_home.home_score, semi_home.away_score = 1, 2
    semi_home.is_played = True
    assert propagate_winner(matches, semi_home) is final
    assert final.home == Slot.filled("p2")

    semi_away.home_score, semi_away.away_score = 4, 0
    semi_away.is_played = True
    propagate_winner(matches, semi_away)
    assert final.away == Slot.filled("p3")
    assert final.is_resolved


def test_draw_is_not_propagated():
    matches = generate_knockout_schedule(_players(4), "t1")
    final = next(m for m in matches if m.stage == "Final")
    semi = next(m for m in matches if m.round_number == 1)

    semi.home_score, semi.away_score = 1, 1
    semi.is_played = True

    assert propagate_winner(matches, semi) is None
    assert final.home.is_unresolved


def test_unplayed_match_is_not_propagated():
    matches = generate_knockout_schedule(_players(4), "t1")
    semi = next(m for m in matches if m.round_number == 1)
    assert propagate_winner(matches, semi) is None
