"""
Roster player records shared by the team balancer and the ranking tournament.
"""

from dataclasses import dataclass, replace, asdict
from typing import Any, Dict, Hashable

from src.utils.constants import FORWARD, DEFENSE


@dataclass(frozen=True)
class Player:
    """
    A roster player.

    Skill is expected to be in 1-10 and position one of FORWARD/DEFENSE.
    Neither is validated here; the roster supplier owns that contract.
    """
    id: Hashable
    name: str
    skill: int
    position: str = FORWARD

    @property
    def is_defense(self) -> bool:
        return self.position == DEFENSE

    def with_skill(self, skill: int) -> 'Player':
        """Return a copy of this player with a different skill."""
        return replace(self, skill=skill)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
