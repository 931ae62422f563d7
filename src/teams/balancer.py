"""
Balanced two-team assignment.

Players are processed strongest first. Each one goes to the team chosen by
the first of these that is not tied:

1. Positional balance: fewer players at this player's position
2. Squad size: fewer players overall
3. Skill: lower (or equal) current average skill; exact ties go to team A

Players with equal skill are shuffled before the stable sort so that tied
players are not always routed to the same team.
"""

import random
from typing import List, Optional

from src.roster.models import Player
from src.teams.models import Team, TeamSet
from src.utils.constants import DEFAULT_LABEL_A, DEFAULT_LABEL_B


def shuffled_by_skill(
    players: List[Player],
    rng: Optional[random.Random] = None,
    shuffle: bool = True
) -> List[Player]:
    """
    Permute players, then stable sort them by skill descending.

    Args:
        players: Players to order (not modified)
        rng: Random source for the permutation (module random if None)
        shuffle: Whether to permute before sorting (default: True)

    Returns:
        New list ordered by skill, ties in random relative order
    """
    ordered = list(players)
    if shuffle:
        (rng or random).shuffle(ordered)
    ordered.sort(key=lambda p: p.skill, reverse=True)
    return ordered


def choose_team(player: Player, team_a: Team, team_b: Team) -> Team:
    """Pick the destination team for a player given the current split."""
    position_a = team_a.count(player.position)
    position_b = team_b.count(player.position)
    if position_a != position_b:
        return team_a if position_a < position_b else team_b

    if team_a.size != team_b.size:
        return team_a if team_a.size < team_b.size else team_b

    return team_a if team_a.average_skill <= team_b.average_skill else team_b


def balance_teams(
    players: List[Player],
    label_a: str = DEFAULT_LABEL_A,
    label_b: str = DEFAULT_LABEL_B,
    rng: Optional[random.Random] = None,
    shuffle: bool = True
) -> TeamSet:
    """
    Split a roster into two balanced teams.

    The roster is expected to be pre-filtered to eligible players. Labels are
    folded to lowercase and must differ after folding (not checked).

    Args:
        players: Eligible players
        label_a: Label of the first team (wins exact ties)
        label_b: Label of the second team
        rng: Random source for tie shuffling
        shuffle: Whether to shuffle before sorting (default: True)

    Returns:
        TeamSet partitioning the input players
    """
    team_set = TeamSet.empty(label_a, label_b)

    for player in shuffled_by_skill(players, rng=rng, shuffle=shuffle):
        choose_team(player, team_set.team_a, team_set.team_b).add(player)

    return team_set
