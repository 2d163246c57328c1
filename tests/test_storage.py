import json

import pytest

from tourneytracker.exceptions import FileLoadException, FileSaveException
from tourneytracker.models import Slot
from tourneytracker.storage import (
    load_tournament,
    load_tournaments,
    read_json,
    save_tournament,
    write_json,
)


def test_save_and_load_keeps_results_and_byes(tmp_path, scenario):
    scenario.matches[0].home = Slot.bye()
    path = tmp_path / "scenario.json"
    save_tournament(scenario, path)

    loaded = load_tournament(path)
    assert loaded.id == "scenario"
    assert loaded.matches[0].home.is_bye
    assert [m.is_played for m in loaded.matches] == [
        m.is_played for m in scenario.matches
    ]
    assert json.loads(path.read_text(encoding="utf-8"))["matches"][0][
        "home_player_id"
    ] == "BYE"


def test_load_tournaments_keeps_order(tmp_path, scenario):
    first = tmp_path / "a.json"
    second = tmp_path / "b.json"
    save_tournament(scenario, first)
    scenario.name = "Second"
    save_tournament(scenario, second)

    names = [t.name for t in load_tournaments([second, first])]
    assert names == ["Second", "Scenario"]


def test_missing_file(tmp_path):
    with pytest.raises(FileLoadException):
        read_json(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(FileLoadException):
        load_tournament(path)


def test_not_a_tournament(tmp_path):
    path = tmp_path / "list.json"
    write_json(path, [1, 2, 3])
    with pytest.raises(FileLoadException):
        load_tournament(path)


def test_tournament_without_id(tmp_path):
    path = tmp_path / "noid.json"
    write_json(path, {"name": "No id"})
    with pytest.raises(FileLoadException):
        load_tournament(path)


def test_write_to_missing_directory(tmp_path):
    with pytest.raises(FileSaveException):
        write_json(tmp_path / "missing" / "out.json", {})
