"""
Tournament session manager for the web interface.

Keeps active ranking tournaments in memory, keyed by tournament id. Nothing
is persisted; applying a tournament hands the updated roster back to the
caller.
"""
import logging
import random
import uuid
from typing import Any, Dict, List, Optional

from src.roster.models import Player
from src.tournament.engine import TournamentEngine
from src.tournament.session import TournamentSession

logger = logging.getLogger(__name__)


class TournamentManager:
    """
    Manages active tournament sessions.

    Handles session creation, result recording and cleanup.
    """

    def __init__(self):
        self.sessions: Dict[str, TournamentSession] = {}

    def create_tournament(self, players: List[Player], seed: Optional[int] = None) -> str:
        """
        Create and start a tournament.

        Args:
            players: Roster to rank
            seed: Optional seed for the schedule shuffle

        Returns:
            The new tournament id

        Raises:
            ValueError: If fewer than 2 players
        """
        engine = TournamentEngine(rng=random.Random(seed))
        session = TournamentSession(players, engine=engine)
        session.start()

        tournament_id = str(uuid.uuid4())
        self.sessions[tournament_id] = session
        logger.info("Started tournament %s with %d players and %d matchups",
                    tournament_id, len(players), session.total_matchups)
        return tournament_id

    def get_session(self, tournament_id: str) -> Optional[TournamentSession]:
        """Get a session by id."""
        return self.sessions.get(tournament_id)

    def record_result(self, session: TournamentSession, winner_id: str):
        session.record_result(winner_id)
        if session.rankings:
            logger.info("Tournament complete after %d results", session.completed_matchups)

    def restart(self, tournament_id: str) -> TournamentSession:
        """Reset a session and start a fresh run over the same roster."""
        session = self.sessions[tournament_id]
        session.reset()
        session.start()
        logger.info("Restarted tournament %s", tournament_id)
        return session

    def apply(self, tournament_id: str) -> List[Player]:
        """Apply rankings to the roster and close the tournament."""
        session = self.sessions[tournament_id]
        players = session.apply()
        self.end_tournament(tournament_id)
        return players

    def end_tournament(self, tournament_id: str):
        """Remove a session."""
        if self.sessions.pop(tournament_id, None) is not None:
            logger.info("Ended tournament %s", tournament_id)

    def get_state(self, tournament_id: str, session: TournamentSession) -> Dict[str, Any]:
        """Serialize a session for API responses."""
        current = session.current_matchup
        return {
            "tournament_id": tournament_id,
            "phase": session.phase.value,
            "players": {tp_id: tp.name for tp_id, tp in session.tournament_players.items()},
            "current_matchup": serialize_matchup(current) if current else None,
            "total_matchups": session.total_matchups,
            "completed_matchups": session.completed_matchups,
            "progress_percentage": session.progress_percentage,
            "rankings": [
                {
                    "player_id": r.player_id,
                    "name": session.player_name(r.player_id),
                    "rank": r.rank,
                    "rating": r.rating,
                    "score": r.score,
                    "confidence": r.confidence,
                    "matches_played": r.matches_played,
                }
                for r in session.rankings
            ],
        }

    def list_active_tournaments(self) -> List[Dict[str, Any]]:
        return [
            {
                "tournament_id": tournament_id,
                "phase": session.phase.value,
                "players": len(session.players),
                "completed_matchups": session.completed_matchups,
                "total_matchups": session.total_matchups,
            }
            for tournament_id, session in self.sessions.items()
        ]


def serialize_matchup(matchup) -> Dict[str, Any]:
    return {
        "id": matchup.id,
        "player1_id": matchup.player1_id,
        "player2_id": matchup.player2_id,
        "winner_id": matchup.winner_id,
        "timestamp": matchup.timestamp,
    }
