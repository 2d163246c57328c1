import argparse
import json
import logging

import pytest

from tourneytracker.cli import BOARDS, main, parse_player
from tourneytracker.storage import load_tournament, save_tournament


def _create(tmp_path, *extra):
    path = tmp_path / "league.json"
    args = ["create", "Friday League", "-p", "Ann:Ajax", "-p", "Ben", "-p", "Cat"]
    assert main(args + ["-o", str(path), *extra]) == 0
    return path


def test_parse_player():
    player = parse_player(" Ann : Ajax ")
    assert (player.name, player.team) == ("Ann", "Ajax")
    assert parse_player("Ben").team == ""
    with pytest.raises(argparse.ArgumentTypeError):
        parse_player(":Ajax")


def test_create_writes_tournament(tmp_path, capsys):
    path = _create(tmp_path)

    tournament = load_tournament(path)
    assert tournament.name == "Friday League"
    assert [p.team for p in tournament.players] == ["Ajax", "", ""]
    assert len(tournament.matches) == 6
    assert "Matches: 6" in capsys.readouterr().out


def test_create_knockout(tmp_path):
    path = _create(tmp_path, "--format", "knockout")
    assert load_tournament(path).is_knockout


def test_create_with_one_player_fails(tmp_path):
    path = tmp_path / "solo.json"
    assert main(["create", "Solo", "-p", "Ann", "-o", str(path)]) == 1
    assert not path.exists()


def test_record_and_standings(tmp_path, capsys):
    path = _create(tmp_path)
    tournament = load_tournament(path)
    match = next(m for m in tournament.matches if m.is_resolved)

    assert main(["record", str(path), match.id, "3", "1"]) == 0
    assert load_tournament(path).get_match(match.id).is_played

    capsys.readouterr()
    assert main(["standings", str(path)]) == 0
    out = capsys.readouterr().out
    assert "FRIDAY LEAGUE - STANDINGS" in out
    for name in ("Ann", "Ben", "Cat"):
        assert name in out


def test_record_invalid_match_fails(tmp_path):
    path = _create(tmp_path)
    assert main(["record", str(path), "nope", "1", "0"]) == 1


def test_schedule_marks_next_match(tmp_path, capsys):
    path = _create(tmp_path)
    capsys.readouterr()

    assert main(["schedule", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Round 1" in out
    assert out.count("<- next") == 1
    assert "BYE" in out


@pytest.mark.parametrize("board", sorted(BOARDS))
def test_every_leaderboard_renders(scenario, tmp_path, board):
    path = tmp_path / "scenario.json"
    save_tournament(scenario, path)
    assert main(["leaderboard", str(path), "--board", board]) == 0


def test_golden_boot_output(scenario, tmp_path, capsys):
    path = tmp_path / "scenario.json"
    save_tournament(scenario, path)

    assert main(["leaderboard", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Alice" in next(line for line in lines if line.strip().startswith("1 "))


def test_complete_prints_champion(scenario, tmp_path, capsys):
    path = tmp_path / "scenario.json"
    save_tournament(scenario, path)

    assert main(["complete", str(path)]) == 0
    assert "Champion of 'Scenario': Carol (Celtic)" in capsys.readouterr().out
    assert load_tournament(path).is_completed


def test_career_creates_registry(scenario, tmp_path, capsys):
    path = tmp_path / "scenario.json"
    registry = tmp_path / "players.json"
    save_tournament(scenario, path)

    assert main(["career", str(path), "--registry", str(registry)]) == 0
    saved = json.loads(registry.read_text(encoding="utf-8"))
    assert sorted(p["name"] for p in saved) == ["Alice", "Bob", "Carol"]
    assert "CAREER LEADERBOARD (1 tournaments)" in capsys.readouterr().out

    # Running again gives the same totals
    first = {p["name"]: p["career"] for p in saved}
    assert main(["career", str(path), "--registry", str(registry)]) == 0
    again = json.loads(registry.read_text(encoding="utf-8"))
    assert {p["name"]: p["career"] for p in again} == first


def test_missing_file_fails(tmp_path):
    assert main(["standings", str(tmp_path / "missing.json")]) == 1


def test_bad_json_fails(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert main(["standings", str(path)]) == 1


def test_verbose_flag(tmp_path):
    path = _create(tmp_path)
    logger = logging.getLogger("tourneytracker")
    previous = logger.level
    try:
        assert main(["--verbose", "standings", str(path)]) == 0
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
