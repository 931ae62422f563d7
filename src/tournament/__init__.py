"""
Tournament module for ranking players by pairwise comparison.

Provides:
- EloCalculator: Standard Elo rating calculation
- TournamentEngine: Schedule, record, rank and apply operations
- TournamentSession: setup -> comparing -> results state machine
"""

from src.tournament.elo import EloCalculator, EloUpdate
from src.tournament.scheduler import Matchup, generate_matchups, target_matchups
from src.tournament.engine import (
    TournamentEngine,
    TournamentConfig,
    TournamentPlayer,
    PlayerRanking,
    normalize_rating
)
from src.tournament.session import TournamentSession, TournamentPhase
from src.tournament.display import format_leaderboard, format_matchup

__all__ = [
    'EloCalculator',
    'EloUpdate',
    'Matchup',
    'generate_matchups',
    'target_matchups',
    'TournamentEngine',
    'TournamentConfig',
    'TournamentPlayer',
    'PlayerRanking',
    'normalize_rating',
    'TournamentSession',
    'TournamentPhase',
    'format_leaderboard',
    'format_matchup',
]
