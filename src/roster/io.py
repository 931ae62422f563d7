"""
Roster file loading and saving.

Roster files are JSON, either a bare list of players or an object with a
"players" key:

    {"players": [{"id": 1, "name": "Alex", "skill": 7, "position": "forward"}]}

Field types are checked on load. Skill range and position values are not:
they are passed through to the balancer and tournament unchanged.
"""

import json
from pathlib import Path
from typing import Any, List, Union

from pydantic import BaseModel, Field, ValidationError

from src.roster.models import Player
from src.utils.constants import FORWARD


class PlayerSchema(BaseModel):
    """Wire format of a single roster player."""
    id: Union[int, str]
    name: str = ""
    skill: int
    position: str = Field(default=FORWARD)

    def to_player(self) -> Player:
        return Player(id=self.id, name=self.name, skill=self.skill, position=self.position)

    @classmethod
    def from_player(cls, player: Player) -> 'PlayerSchema':
        return cls(id=player.id, name=player.name, skill=player.skill, position=player.position)


class RosterSchema(BaseModel):
    """Wire format of a roster file."""
    players: List[PlayerSchema]


def parse_roster(data: Any) -> List[Player]:
    """
    Convert decoded JSON roster data into players.

    Args:
        data: A list of player objects, or a dict with a "players" list

    Returns:
        Players in file order

    Raises:
        ValueError: If the data does not match the roster format
    """
    if isinstance(data, list):
        data = {"players": data}
    try:
        roster = RosterSchema.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid roster data: {e}") from e

    players = [p.to_player() for p in roster.players]

    ids = [p.id for p in players]
    if len(set(ids)) != len(ids):
        raise ValueError("Roster contains duplicate player ids")

    return players


def load_roster(path: Union[str, Path]) -> List[Player]:
    """Load a roster from a JSON file."""
    path = Path(path)
    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Roster file {path} is not valid JSON: {e}") from e
    return parse_roster(data)


def dump_roster(players: List[Player], path: Union[str, Path, None] = None) -> str:
    """
    Serialize players to roster JSON.

    Args:
        players: Players to write
        path: Optional file to write to

    Returns:
        The JSON text
    """
    roster = RosterSchema(players=[PlayerSchema.from_player(p) for p in players])
    text = json.dumps(roster.model_dump(), indent=2)
    if path is not None:
        Path(path).write_text(text + "\n")
    return text
