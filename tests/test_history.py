import logging
from datetime import datetime, timezone

from tourneytracker.career import (
    find_roster_player,
    get_head_to_head,
    get_player_form_trend,
    get_player_match_history,
    get_player_tournament_breakdowns,
)
from tourneytracker.models import MatchStats, Player, Tournament
from tourneytracker.scheduling import generate_schedule


def _rematch(record, created_at):
    """A later two player league: alice 1-1 bob, then bob 2-0 alice."""
    players = [
        Player(name="ALICE", team="Ajax", id="a2"),
        Player(name="Bob", team="Benfica", id="b2"),
    ]
    tournament = Tournament(
        name="Rematch", players=players, created_at=created_at, id="rematch"
    )
    tournament.matches = generate_schedule(players, tournament.id, "double")
    record(
        tournament.matches,
        "a2",
        "b2",
        1,
        1,
        a_stats=MatchStats(xg=0.8, rating=6.5, motm_player_id="a2"),
    )
    record(tournament.matches, "b2", "a2", 2, 0)
    return tournament


def test_find_roster_player_by_name(scenario):
    assert find_roster_player(scenario, "CAROL").id == "carol"
    assert find_roster_player(scenario, "Dave") is None


def test_match_history(scenario):
    records = get_player_match_history("alice", [scenario])

    assert [(r.round_number, r.opponent_name, r.result) for r in records] == [
        (2, "Carol", "L"),
        (3, "Bob", "W"),
    ]
    assert (records[1].goals_for, records[1].goals_against) == (3, 1)
    assert records[1].opponent_team == "Barcelona"
    assert records[1].rating is None
    assert not records[1].is_motm


def test_match_history_carries_stats(record):
    rematch = _rematch(record, datetime(2026, 3, 1, tzinfo=timezone.utc))
    first = get_player_match_history("Alice", [rematch])[0]

    assert first.result == "D"
    assert (first.rating, first.xg, first.possession) == (6.5, 0.8, 50)
    assert first.is_motm


def test_unknown_player_has_no_history(scenario):
    assert get_player_match_history("Dave", [scenario]) == []
    assert get_player_tournament_breakdowns("Dave", [scenario]) == []
    assert get_player_form_trend("Dave", [scenario]) == []


def test_skipped_roster_is_logged(scenario, caplog):
    with caplog.at_level(logging.DEBUG, logger="tourneytracker.career.history"):
        get_player_match_history("Dave", [scenario])
    assert "Dave is not on the roster of Scenario" in caplog.text


def test_tournament_breakdowns(scenario, record):
    rematch = _rematch(record, datetime(2026, 3, 1, tzinfo=timezone.utc))
    idle = Tournament(
        name="Idle",
        players=[Player(name="Alice", id="x1"), Player(name="Eve", id="x2")],
    )
    idle.matches = generate_schedule(idle.players, idle.id, "single")

    breakdowns = get_player_tournament_breakdowns("Alice", [scenario, idle, rematch])

    assert [b.tournament_name for b in breakdowns] == ["Scenario", "Rematch"]
    league, cup = breakdowns
    assert (league.played, league.wins, league.draws, league.losses) == (2, 1, 0, 1)
    assert (league.goals, league.conceded) == (3, 2)
    assert (league.position, league.total_players) == (2, 3)
    assert league.avg_rating is None

    assert (cup.played, cup.draws, cup.losses) == (2, 1, 1)
    assert cup.avg_rating == 6.5
    assert cup.motm_count == 1
    assert cup.position == 2


def test_head_to_head_spans_tournaments(scenario, record):
    scenario.created_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
    rematch = _rematch(record, datetime(2026, 3, 1, tzinfo=timezone.utc))

    h2h = get_head_to_head("alice", "BOB", [scenario, rematch])

    assert (h2h.player_a, h2h.player_b) == ("alice", "BOB")
    assert h2h.total_matches == 3
    assert (h2h.a_wins, h2h.draws, h2h.b_wins) == (1, 1, 1)
    assert (h2h.a_goals, h2h.b_goals) == (4, 4)
    assert [r.tournament_name for r in h2h.history] == [
        "Rematch",
        "Rematch",
        "Scenario",
    ]


def test_head_to_head_without_meetings(scenario):
    h2h = get_head_to_head("Alice", "Zed", [scenario])
    assert h2h.total_matches == 0
    assert h2h.history == []


def test_form_trend_is_chronological(scenario, record):
    rematch = _rematch(record, datetime(2026, 3, 1, tzinfo=timezone.utc))
    scenario.created_at = datetime(2026, 1, 1, tzinfo=timezone.utc)

    trend = get_player_form_trend("Alice", [rematch, scenario])

    assert [p.tournament_name for p in trend] == [
        "Scenario",
        "Scenario",
        "Rematch",
        "Rematch",
    ]
    assert [p.result for p in trend] == ["L", "W", "D", "L"]
    assert trend[2].rating == 6.5
    assert trend[0].rating == 0.0
    assert trend[0].date < trend[2].date


def test_stored_timestamps_without_offset_mix_with_new_ones(scenario, record):
    stored = scenario.to_dict()
    stored["created_at"] = "2026-02-01T10:00:00"
    loaded = Tournament.from_dict(stored)
    loaded.name = "Stored"
    rematch = _rematch(record, datetime.now(timezone.utc))

    trend = get_player_form_trend("Alice", [rematch, loaded])
    assert [p.tournament_name for p in trend] == [
        "Stored",
        "Stored",
        "Rematch",
        "Rematch",
    ]

    h2h = get_head_to_head("Alice", "Bob", [loaded, rematch])
    assert [r.tournament_name for r in h2h.history][-1] == "Stored"
