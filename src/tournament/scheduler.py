"""
Pairwise comparison scheduling.

Instead of a full round-robin (n*(n-1)/2 comparisons), a ranking tournament
asks for roughly 1.5 comparisons per player. Players are paired off from a
freshly shuffled list each round until the target count is reached.
"""

import math
import random
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Hashable, List, Optional

from src.utils.constants import MATCHUPS_PER_PLAYER


def generate_id() -> str:
    """Short random identifier for tournament players and matchups."""
    return uuid.uuid4().hex[:8]


@dataclass(frozen=True)
class Matchup:
    """
    A single comparison between two tournament players.

    Unresolved until a winner is recorded. `sequence` is the position of this
    result in the order results were recorded, which Elo updates follow.
    """
    id: str
    player1_id: Hashable
    player2_id: Hashable
    winner_id: Optional[Hashable] = None
    timestamp: Optional[datetime] = None
    sequence: Optional[int] = None

    @property
    def is_resolved(self) -> bool:
        return self.winner_id is not None

    @property
    def loser_id(self) -> Optional[Hashable]:
        if self.winner_id is None:
            return None
        return self.player2_id if self.winner_id == self.player1_id else self.player1_id

    def involves(self, player_id: Hashable) -> bool:
        return player_id == self.player1_id or player_id == self.player2_id

    def resolve(self, winner_id: Hashable, sequence: int, timestamp: Optional[datetime] = None) -> 'Matchup':
        """
        Return a resolved copy of this matchup.

        Raises:
            ValueError: If the winner is not one of the two participants
        """
        if not self.involves(winner_id):
            raise ValueError(f"Winner {winner_id!r} is not part of matchup {self.id}")
        return replace(
            self,
            winner_id=winner_id,
            timestamp=timestamp or datetime.now(),
            sequence=sequence
        )


def target_matchups(num_players: int, matchups_per_player: float = MATCHUPS_PER_PLAYER) -> int:
    """Number of comparisons to schedule for a tournament."""
    if num_players < 2:
        return 0
    return math.ceil(num_players * matchups_per_player)


def generate_matchups(
    player_ids: List[Hashable],
    rng: Optional[random.Random] = None,
    matchups_per_player: float = MATCHUPS_PER_PLAYER
) -> List[Matchup]:
    """
    Generate an unresolved comparison schedule.

    Args:
        player_ids: Tournament player ids
        rng: Random source for shuffling (module random if None)
        matchups_per_player: Comparisons per player to aim for (default: 1.5)

    Returns:
        List of unresolved Matchups in random order, empty if fewer than
        2 players were given
    """
    rng = rng or random
    target = target_matchups(len(player_ids), matchups_per_player)

    matchups = []
    while len(matchups) < target:
        round_players = list(player_ids)
        rng.shuffle(round_players)

        # With an odd count the last player sits this round out
        for i in range(0, len(round_players) - 1, 2):
            matchups.append(Matchup(
                id=generate_id(),
                player1_id=round_players[i],
                player2_id=round_players[i + 1]
            ))
            if len(matchups) >= target:
                break

    rng.shuffle(matchups)
    return matchups
