"""
Elo rating calculator for pairwise ranking tournaments.

Implements the standard Elo rating system:
- Expected score: E = 1 / (1 + 10^((R_opp - R_self) / 400))
- Rating update: R_new = R_old + K * (S - E)

Ratings are floats and unbounded. Each comparison is a single decisive
result, and updates are applied one at a time, so the final ratings depend
on the order results are fed in.
"""

from typing import Dict, Hashable, Iterable
from dataclasses import dataclass

from src.utils.constants import INITIAL_RATING, K_FACTOR, ELO_SCALE


@dataclass
class EloUpdate:
    """Result of an Elo update after a single comparison."""
    winner: Hashable
    loser: Hashable
    old_winner_rating: float
    old_loser_rating: float
    new_winner_rating: float
    new_loser_rating: float
    expected_winner: float

    @property
    def delta(self) -> float:
        """Points gained by the winner (and lost by the loser)."""
        return self.new_winner_rating - self.old_winner_rating


class EloCalculator:
    """
    Standard Elo rating calculator.

    Updates ratings after each decided comparison.
    """

    def __init__(self, k_factor: float = K_FACTOR, initial_rating: float = INITIAL_RATING):
        """
        Initialize the Elo calculator.

        Args:
            k_factor: The K-factor determines rating volatility (default: 32)
            initial_rating: Starting rating for every participant (default: 1500)
        """
        self.k_factor = k_factor
        self.initial_rating = initial_rating
        self.ratings: Dict[Hashable, float] = {}

    def get_rating(self, participant: Hashable) -> float:
        """Get current rating for a participant."""
        return self.ratings.get(participant, self.initial_rating)

    def set_initial_ratings(self, participants: Iterable[Hashable]):
        """Seed every participant at the initial rating, keeping their order."""
        for p in participants:
            self.ratings[p] = float(self.initial_rating)

    def expected_score(self, rating_a: float, rating_b: float) -> float:
        """
        Calculate expected score for player A against player B.

        Args:
            rating_a: Rating of player A
            rating_b: Rating of player B

        Returns:
            Expected score between 0 and 1
        """
        return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / ELO_SCALE))

    def record_win(self, winner: Hashable, loser: Hashable) -> EloUpdate:
        """
        Update ratings after a decided comparison.

        Args:
            winner: Participant who won
            loser: Participant who lost

        Returns:
            EloUpdate with old/new ratings and calculation details
        """
        old_winner = self.get_rating(winner)
        old_loser = self.get_rating(loser)

        expected_winner = self.expected_score(old_winner, old_loser)
        expected_loser = 1.0 - expected_winner

        new_winner = old_winner + self.k_factor * (1.0 - expected_winner)
        new_loser = old_loser + self.k_factor * (0.0 - expected_loser)

        self.ratings[winner] = new_winner
        self.ratings[loser] = new_loser

        return EloUpdate(
            winner=winner,
            loser=loser,
            old_winner_rating=old_winner,
            old_loser_rating=old_loser,
            new_winner_rating=new_winner,
            new_loser_rating=new_loser,
            expected_winner=expected_winner
        )

    def get_all_ratings(self) -> Dict[Hashable, float]:
        """Get a copy of all current ratings."""
        return self.ratings.copy()
