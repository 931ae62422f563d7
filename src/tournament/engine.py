"""
Pairwise-comparison ranking engine.

Turns "who is better?" judgments into a 1-10 skill score per player:

1. initialize: wrap each roster player in a TournamentPlayer with a fresh id
2. generate_matchups: schedule ~1.5 comparisons per player
3. record_result: resolve a matchup with its winner
4. compute_rankings: replay resolved matchups through Elo in the order they
   were recorded, rank by final rating and rescale ratings into 1-10
5. apply_to_roster: copy the scores back onto the roster players
"""

import itertools
import math
import numbers
import random
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional

from src.roster.models import Player
from src.tournament.elo import EloCalculator
from src.tournament.scheduler import Matchup, generate_matchups, generate_id
from src.utils.constants import (
    INITIAL_RATING, K_FACTOR, MATCHUPS_PER_PLAYER, FULL_CONFIDENCE_MATCHES,
    SKILL_MIN, SKILL_MAX, NEUTRAL_SKILL
)


@dataclass
class TournamentConfig:
    """Configuration for a ranking tournament."""
    initial_rating: float = INITIAL_RATING
    k_factor: float = K_FACTOR
    matchups_per_player: float = MATCHUPS_PER_PLAYER
    full_confidence_matches: int = FULL_CONFIDENCE_MATCHES


@dataclass(frozen=True)
class TournamentPlayer:
    """A roster player entered into one tournament run."""
    id: str
    name: str
    player: Player


@dataclass
class PlayerRanking:
    """Final standing of a tournament player."""
    player_id: str
    rating: float
    rank: int
    score: int
    confidence: float
    matches_played: int


def _id_sort_key(player_id: Hashable):
    # Numeric ids sort numerically and ahead of any other id type
    if isinstance(player_id, numbers.Real):
        return (0, player_id, "")
    return (1, 0, str(player_id))


def normalize_rating(rating: float, min_rating: float, max_rating: float) -> int:
    """Linearly rescale a rating into the skill range, rounding half up."""
    if max_rating == min_rating:
        return NEUTRAL_SKILL
    scaled = SKILL_MIN + (SKILL_MAX - SKILL_MIN) * (rating - min_rating) / (max_rating - min_rating)
    return int(math.floor(scaled + 0.5))


class TournamentEngine:
    """
    Stateless-per-run ranking engine.

    Holds only configuration, a random source and the counter that numbers
    results in the order they are recorded.

    Usage:
        engine = TournamentEngine()
        players = engine.initialize(roster)
        matchups = engine.generate_matchups(list(players))
        resolved = [engine.record_result(m, m.player1_id) for m in matchups]
        rankings = engine.compute_rankings(players, resolved)
        roster = engine.apply_to_roster(rankings, players, roster)
    """

    def __init__(self, config: Optional[TournamentConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the engine.

        Args:
            config: Tournament configuration (defaults if None)
            rng: Random source for schedule shuffling
        """
        self.config = config or TournamentConfig()
        self.rng = rng or random.Random()
        self._sequence = itertools.count(1)

    def initialize(self, players: List[Player]) -> Dict[str, TournamentPlayer]:
        """Wrap each roster player in a TournamentPlayer with a fresh id."""
        tournament_players = {}
        for player in players:
            tp_id = generate_id()
            while tp_id in tournament_players:
                tp_id = generate_id()
            tournament_players[tp_id] = TournamentPlayer(id=tp_id, name=player.name, player=player)
        return tournament_players

    def generate_matchups(self, player_ids: List[str]) -> List[Matchup]:
        """Schedule comparisons; empty if fewer than 2 players."""
        return generate_matchups(
            player_ids,
            rng=self.rng,
            matchups_per_player=self.config.matchups_per_player
        )

    def record_result(self, matchup: Matchup, winner_id: str) -> Matchup:
        """
        Resolve a matchup with its winner.

        Already resolved matchups are returned unchanged.

        Raises:
            ValueError: If the winner is not one of the matchup's players
        """
        if matchup.is_resolved:
            return matchup
        return matchup.resolve(winner_id, sequence=next(self._sequence))

    def resolution_order(self, matchups: List[Matchup]) -> List[Matchup]:
        """
        Resolved matchups in the order their results were recorded.

        Matchups resolved without a sequence number keep their list order
        and follow the numbered ones.
        """
        resolved = [m for m in matchups if m.is_resolved]
        numbered = sorted((m for m in resolved if m.sequence is not None), key=lambda m: m.sequence)
        unnumbered = [m for m in resolved if m.sequence is None]
        return numbered + unnumbered

    def compute_rankings(
        self,
        players: Dict[str, TournamentPlayer],
        matchups: List[Matchup]
    ) -> List[PlayerRanking]:
        """
        Rank tournament players from their comparison results.

        Args:
            players: Tournament players keyed by tournament id
            matchups: Schedule; unresolved matchups are ignored

        Returns:
            Rankings ordered best first
        """
        if not players:
            return []

        elo = EloCalculator(k_factor=self.config.k_factor, initial_rating=self.config.initial_rating)
        elo.set_initial_ratings(players)

        played = {player_id: 0 for player_id in players}
        for matchup in self.resolution_order(matchups):
            elo.record_win(matchup.winner_id, matchup.loser_id)
            for player_id in (matchup.player1_id, matchup.player2_id):
                if player_id in played:
                    played[player_id] += 1

        ratings = {player_id: elo.get_rating(player_id) for player_id in players}
        ordered = sorted(
            players,
            key=lambda pid: (-ratings[pid], _id_sort_key(players[pid].player.id))
        )

        min_rating = min(ratings.values())
        max_rating = max(ratings.values())
        full = self.config.full_confidence_matches

        rankings = []
        for rank, player_id in enumerate(ordered, 1):
            rankings.append(PlayerRanking(
                player_id=player_id,
                rating=ratings[player_id],
                rank=rank,
                score=normalize_rating(ratings[player_id], min_rating, max_rating),
                confidence=min(1.0, played[player_id] / full) if full > 0 else 1.0,
                matches_played=played[player_id]
            ))

        return rankings

    def apply_to_roster(
        self,
        rankings: List[PlayerRanking],
        tournament_players: Dict[str, TournamentPlayer],
        original_players: List[Player]
    ) -> List[Player]:
        """
        Copy tournament scores onto the roster.

        Players without a tournament counterpart or ranking pass through
        unchanged.
        """
        score_by_player = {}
        for ranking in rankings:
            tp = tournament_players.get(ranking.player_id)
            if tp is not None:
                score_by_player[tp.player.id] = ranking.score

        return [
            player.with_skill(score_by_player[player.id]) if player.id in score_by_player else player
            for player in original_players
        ]
