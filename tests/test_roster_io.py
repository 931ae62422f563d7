"""
Tests for roster file loading and saving.
"""

import json

import pytest

from src.roster.io import load_roster, dump_roster, parse_roster
from src.roster.models import Player
from src.utils.constants import FORWARD, DEFENSE


class TestParseRoster:
    """Tests for parse_roster."""

    def test_object_form(self):
        players = parse_roster({"players": [
            {"id": 1, "name": "Alex", "skill": 7, "position": "forward"},
            {"id": 2, "name": "Sam", "skill": 8, "position": "defense"},
        ]})
        assert players == [
            Player(id=1, name="Alex", skill=7, position=FORWARD),
            Player(id=2, name="Sam", skill=8, position=DEFENSE),
        ]

    def test_list_form(self):
        players = parse_roster([{"id": "a1", "name": "Alex", "skill": 7}])
        assert players[0].id == "a1"
        assert players[0].position == FORWARD

    def test_skill_range_not_checked(self):
        players = parse_roster([{"id": 1, "name": "X", "skill": 42, "position": "goalie"}])
        assert players[0].skill == 42
        assert players[0].position == "goalie"

    def test_bad_types_rejected(self):
        with pytest.raises(ValueError):
            parse_roster([{"id": 1, "name": "X", "skill": "great"}])

    def test_missing_skill_rejected(self):
        with pytest.raises(ValueError):
            parse_roster([{"id": 1, "name": "X"}])

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="duplicate"):
            parse_roster([
                {"id": 1, "name": "X", "skill": 5},
                {"id": 1, "name": "Y", "skill": 6},
            ])


class TestRosterFiles:
    """Tests for load_roster and dump_roster."""

    def test_load(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"players": [{"id": 1, "name": "Alex", "skill": 7}]}))

        assert load_roster(path) == [Player(id=1, name="Alex", skill=7)]

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            load_roster(path)

    def test_dump_writes_file(self, tmp_path, four_players):
        path = tmp_path / "out.json"
        text = dump_roster(four_players, path)

        data = json.loads(path.read_text())
        assert data == json.loads(text)
        assert data["players"][1] == {"id": 2, "name": "Sam", "skill": 8, "position": "defense"}
        assert load_roster(path) == four_players
