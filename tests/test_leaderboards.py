import pytest

from tourneytracker.models import Match, MatchStats, Player, Slot
from tourneytracker.standings import (
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
from tourneytracker.standings.leaderboards import round_half_up

BOARDS = [
    get_golden_boot,
    get_golden_glove,
    get_unlucky_index,
    get_mvp_leaderboard,
    get_win_rates,
    get_avg_goals,
    get_possession_kings,
]


def _match(round_number, home_score, away_score, home_stats=None, away_stats=None):
    return Match(
        tournament_id="t1",
        round_number=round_number,
        home=Slot.filled("a"),
        away=Slot.filled("b"),
        home_score=home_score,
        away_score=away_score,
        is_played=True,
        home_stats=home_stats,
        away_stats=away_stats,
    )


@pytest.fixture
def players():
    return [
        Player(name="Ann", id="a"),
        Player(name="Ben", id="b"),
        Player(name="Cat", id="c"),
    ]


@pytest.fixture
def stats_matches():
    return [
        _match(
            1,
            2,
            0,
            home_stats=MatchStats(
                xg=1.2, possession=55, rating=8.0, motm_player_id="a"
            ),
            away_stats=MatchStats(xg=0.4, possession=45, rating=5.5),
        ),
        _match(2, 1, 1, home_stats=MatchStats(xg=2.5, possession=61, rating=7.0)),
        _match(3, 2, 1),
    ]


@pytest.mark.parametrize("board", BOARDS)
def test_idle_player_listed_with_zeros(board, players, stats_matches):
    entries = board(players, stats_matches)
    assert len(entries) == len(players)
    idle = next(e for e in entries if e.player_id == "c")
    assert idle.player_name == "Cat"


@pytest.mark.parametrize("board", BOARDS)
def test_boards_ignore_unplayed_and_bye_matches(board, players):
    matches = [
        Match(
            tournament_id="t1",
            round_number=1,
            home=Slot.filled("a"),
            away=Slot.bye(),
            home_score=3,
            away_score=0,
            is_played=True,
            home_stats=MatchStats(rating=9.0),
        ),
        Match(
            tournament_id="t1",
            round_number=2,
            home=Slot.filled("a"),
            away=Slot.filled("b"),
        ),
    ]
    assert board(players, matches) == board(players, [])


def test_golden_boot_counts_goal_entries(scenario):
    entries = get_golden_boot(scenario.players, scenario.matches)
    assert [(e.player_name, e.goals) for e in entries] == [
        ("Alice", 2),
        ("Bob", 1),
        ("Carol", 0),
    ]


def test_golden_glove_counts_clean_sheets(scenario):
    entries = get_golden_glove(scenario.players, scenario.matches)
    assert [(e.player_name, e.clean_sheets) for e in entries] == [
        ("Carol", 1),
        ("Alice", 0),
        ("Bob", 0),
    ]


def test_unlucky_index(players, stats_matches):
    entries = get_unlucky_index(players, stats_matches)
    by_id = {e.player_id: e for e in entries}

    assert by_id["a"].actual_goals == 5
    assert by_id["a"].total_xg == pytest.approx(3.7)
    assert by_id["a"].diff == pytest.approx(1.3)
    assert by_id["b"].diff == pytest.approx(1.6)
    assert [e.player_id for e in entries] == ["c", "a", "b"]


def test_mvp_puts_unrated_players_last(players, stats_matches):
    entries = get_mvp_leaderboard(players, stats_matches)

    assert [e.player_id for e in entries] == ["a", "b", "c"]
    ann, ben, cat = entries
    assert (ann.avg_rating, ann.matches_rated, ann.motm_count) == (7.5, 2, 1)
    assert (ben.avg_rating, ben.matches_rated, ben.motm_count) == (5.5, 1, 0)
    assert (cat.avg_rating, cat.matches_rated) == (0.0, 0)


def test_win_rate_is_whole_percentage(players, stats_matches):
    entries = get_win_rates(players, stats_matches)
    assert [(e.player_id, e.wins, e.played, e.win_rate) for e in entries] == [
        ("a", 2, 3, 67),
        ("b", 0, 3, 0),
        ("c", 0, 0, 0),
    ]


def test_avg_goals_two_decimals(players, stats_matches):
    by_id = {e.player_id: e for e in get_avg_goals(players, stats_matches)}
    assert by_id["a"].avg_goals == 1.67
    assert by_id["b"].avg_goals == 0.67
    assert by_id["c"].avg_goals == 0.0


def test_possession_kings(players, stats_matches):
    entries = get_possession_kings(players, stats_matches)
    assert [(e.player_id, e.avg_possession, e.matches_tracked) for e in entries] == [
        ("a", 58, 2),
        ("b", 45, 1),
        ("c", 0, 0),
    ]


def test_biggest_wins_ordered_by_margin(scenario):
    entries = get_biggest_wins(scenario.players, scenario.matches)
    assert [
        (e.home_player_name, e.home_score, e.away_score, e.away_player_name, e.margin)
        for e in entries
    ] == [
        ("Alice", 3, 1, "Bob", 2),
        ("Alice", 0, 1, "Carol", 1),
        ("Bob", 2, 2, "Carol", 0),
    ]


def test_biggest_wins_limit_and_unknown_names(players, stats_matches):
    entries = get_biggest_wins(players[:1], stats_matches, limit=2)
    assert len(entries) == 2
    assert entries[0].away_player_name == "?"
    assert entries[0].margin == 2


def test_h2h_matrix_is_mirrored(scenario):
    matrix = get_h2h_matrix(scenario.players, scenario.matches)

    ids = [p.id for p in scenario.players]
    for a in ids:
        assert a not in matrix[a]
        for b in ids:
            if a == b:
                continue
            assert matrix[a][b].wins == matrix[b][a].losses
            assert matrix[a][b].draws == matrix[b][a].draws
            assert matrix[a][b].goals_for == matrix[b][a].goals_against

    assert matrix["alice"]["bob"].wins == 1
    assert matrix["alice"]["bob"].goals_for == 3
    assert matrix["bob"]["carol"].draws == 1


def test_cumulative_goals_per_round(scenario):
    result = get_cumulative_goals_per_round(scenario.players, scenario.matches)

    assert result.round_labels == ["R1", "R2", "R3"]
    series = {s.player_id: s.goals_per_round for s in result.players}
    assert series == {
        "alice": [0, 0, 3],
        "bob": [2, 2, 3],
        "carol": [2, 3, 3],
    }


def test_cumulative_goals_without_matches(players):
    result = get_cumulative_goals_per_round(players, [])
    assert result.round_labels == []
    assert all(s.goals_per_round == [] for s in result.players)


@pytest.mark.parametrize(
    "value, expected", [(66.666, 67), (12.5, 13), (33.333, 33), (0.0, 0)]
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
