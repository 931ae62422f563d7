"""
Shared fixtures for roster tests.
"""

import random

import pytest

from src.roster.models import Player
from src.utils.constants import FORWARD, DEFENSE


def make_roster(n: int, seed: int = 0):
    """Random roster of n players with mixed positions and skills."""
    rng = random.Random(seed)
    return [
        Player(
            id=i,
            name=f"Player {i}",
            skill=rng.randint(1, 10),
            position=rng.choice([FORWARD, DEFENSE])
        )
        for i in range(1, n + 1)
    ]


@pytest.fixture
def four_players():
    """Two forwards and two defensemen."""
    return [
        Player(id=1, name="Alex", skill=7, position=FORWARD),
        Player(id=2, name="Sam", skill=8, position=DEFENSE),
        Player(id=3, name="Jordan", skill=5, position=FORWARD),
        Player(id=4, name="Casey", skill=6, position=DEFENSE),
    ]


@pytest.fixture
def roster():
    """Factory for random rosters: roster(n, seed)."""
    return make_roster
