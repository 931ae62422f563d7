"""
Statistics for checking how even a team split is.

Used by the make_teams script to sanity-check the balancer over many runs.
"""

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

import numpy as np

from src.roster.models import Player
from src.teams.balancer import balance_teams
from src.teams.models import Team, TeamSet
from src.utils.constants import DEFAULT_LABEL_A, DEFAULT_LABEL_B


@dataclass
class TeamStats:
    """Summary statistics for one team."""
    count: int
    forwards: int
    defensemen: int
    avg_skill: float
    avg_forward_skill: float
    avg_defense_skill: float


@dataclass
class BulkAnalysis:
    """Result of balancing the same roster repeatedly."""
    iterations: int
    compositions: Set[str]
    mean_skill_gap: float
    max_skill_gap: float


def _mean_skill(players: List[Player]) -> float:
    if not players:
        return 0.0
    return float(np.mean([p.skill for p in players]))


def team_stats(team: Team) -> TeamStats:
    """Compute summary statistics for a team."""
    return TeamStats(
        count=team.size,
        forwards=len(team.forwards),
        defensemen=len(team.defensemen),
        avg_skill=_mean_skill(team.players),
        avg_forward_skill=_mean_skill(team.forwards),
        avg_defense_skill=_mean_skill(team.defensemen)
    )


def analyze_teams(team_set: TeamSet) -> Dict[str, TeamStats]:
    """Statistics for both teams, keyed by label."""
    return {team.label: team_stats(team) for team in team_set}


def skill_gap(team_set: TeamSet) -> float:
    """Absolute difference between the two teams' average skill."""
    return abs(_mean_skill(team_set.team_a.players) - _mean_skill(team_set.team_b.players))


def composition(team_set: TeamSet) -> str:
    """Positional make-up of a split, e.g. 'red: 6F/5D | white: 6F/5D'."""
    return " | ".join(
        f"{team.label}: {len(team.forwards)}F/{len(team.defensemen)}D"
        for team in team_set
    )


def run_bulk_analysis(
    players: List[Player],
    iterations: int,
    label_a: str = DEFAULT_LABEL_A,
    label_b: str = DEFAULT_LABEL_B,
    rng: Optional[random.Random] = None
) -> BulkAnalysis:
    """
    Balance the same roster many times and collect the outcomes.

    Args:
        players: Eligible players
        iterations: Number of balancing runs
        label_a: Label of the first team
        label_b: Label of the second team
        rng: Random source shared across runs

    Returns:
        BulkAnalysis with distinct compositions and skill gap statistics
    """
    if iterations < 1:
        raise ValueError("iterations must be at least 1")

    compositions = set()
    gaps = np.zeros(iterations)

    for i in range(iterations):
        team_set = balance_teams(players, label_a, label_b, rng=rng)
        compositions.add(composition(team_set))
        gaps[i] = skill_gap(team_set)

    return BulkAnalysis(
        iterations=iterations,
        compositions=compositions,
        mean_skill_gap=float(gaps.mean()),
        max_skill_gap=float(gaps.max())
    )
