"""
Team containers produced by the balancer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

from src.roster.models import Player
from src.utils.constants import DEFENSE


@dataclass
class Team:
    """One side of a split: forwards and defensemen in assignment order."""
    label: str
    forwards: List[Player] = field(default_factory=list)
    defensemen: List[Player] = field(default_factory=list)

    @property
    def players(self) -> List[Player]:
        return self.forwards + self.defensemen

    @property
    def size(self) -> int:
        return len(self.forwards) + len(self.defensemen)

    def count(self, position: str) -> int:
        """Number of players on this team playing the given position."""
        if position == DEFENSE:
            return len(self.defensemen)
        return len(self.forwards)

    @property
    def average_skill(self) -> float:
        """Mean skill over all assigned players, 0 if the team is empty."""
        if self.size == 0:
            return 0.0
        return sum(p.skill for p in self.players) / self.size

    def add(self, player: Player):
        """Append a player to the list matching their position."""
        if player.is_defense:
            self.defensemen.append(player)
        else:
            self.forwards.append(player)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'forwards': [p.to_dict() for p in self.forwards],
            'defensemen': [p.to_dict() for p in self.defensemen],
        }


@dataclass
class TeamSet:
    """
    The two teams of a split.

    Labels are stored lowercase; lookup by label is case-insensitive.
    """
    team_a: Team
    team_b: Team

    @classmethod
    def empty(cls, label_a: str, label_b: str) -> 'TeamSet':
        return cls(team_a=Team(label=label_a.lower()), team_b=Team(label=label_b.lower()))

    @property
    def labels(self) -> List[str]:
        return [self.team_a.label, self.team_b.label]

    def __iter__(self) -> Iterator[Team]:
        return iter((self.team_a, self.team_b))

    def __getitem__(self, label: str) -> Team:
        key = label.lower()
        for team in self:
            if team.label == key:
                return team
        raise KeyError(label)

    @property
    def total_players(self) -> int:
        return self.team_a.size + self.team_b.size

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Label-keyed mapping, the shape persisted by the roster store."""
        return {team.label: team.to_dict() for team in self}
