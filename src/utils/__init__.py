"""
Utilities module for roster balancing and ranking.
"""
from src.utils.constants import (
    FORWARD, DEFENSE, POSITIONS,
    SKILL_MIN, SKILL_MAX, NEUTRAL_SKILL,
    DEFAULT_LABEL_A, DEFAULT_LABEL_B,
    INITIAL_RATING, K_FACTOR, ELO_SCALE,
    MATCHUPS_PER_PLAYER, FULL_CONFIDENCE_MATCHES
)

__all__ = [
    'FORWARD', 'DEFENSE', 'POSITIONS',
    'SKILL_MIN', 'SKILL_MAX', 'NEUTRAL_SKILL',
    'DEFAULT_LABEL_A', 'DEFAULT_LABEL_B',
    'INITIAL_RATING', 'K_FACTOR', 'ELO_SCALE',
    'MATCHUPS_PER_PLAYER', 'FULL_CONFIDENCE_MATCHES',
]
