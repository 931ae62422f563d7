"""
Tournament session: the setup -> comparing -> results state machine.

A session owns one run's worth of state (tournament players, schedule,
resolution log, rankings) and walks a host through it one comparison at a
time. Resetting discards everything, so a new run gets new player ids.
"""

from enum import Enum
from typing import Dict, List, Optional

from src.roster.models import Player
from src.tournament.engine import TournamentEngine, TournamentPlayer, PlayerRanking
from src.tournament.scheduler import Matchup


class TournamentPhase(Enum):
    """Phase of a tournament session."""
    SETUP = "setup"          # Players known, no schedule yet
    COMPARING = "comparing"  # Schedule generated, collecting results
    RESULTS = "results"      # Rankings computed


class TournamentSession:
    """
    One ranking tournament over a roster.

    Usage:
        session = TournamentSession(roster)
        session.start()
        while session.phase == TournamentPhase.COMPARING:
            m = session.current_matchup
            session.record_result(m.player1_id)
        roster = session.apply()
    """

    def __init__(self, players: List[Player], engine: Optional[TournamentEngine] = None):
        self.players = list(players)
        self.engine = engine or TournamentEngine()
        self._clear()

    def _clear(self):
        self.phase = TournamentPhase.SETUP
        self.tournament_players: Dict[str, TournamentPlayer] = {}
        self.matchups: List[Matchup] = []
        self.results: List[Matchup] = []  # Resolved matchups in recorded order
        self.rankings: List[PlayerRanking] = []

    def _require(self, phase: TournamentPhase, action: str):
        if self.phase != phase:
            raise ValueError(f"Cannot {action} during the {self.phase.value} phase")

    def start(self):
        """
        Create tournament players and the schedule, entering the comparing phase.

        Raises:
            ValueError: If fewer than 2 players or not in the setup phase
        """
        self._require(TournamentPhase.SETUP, "start a tournament")
        if len(self.players) < 2:
            raise ValueError("Need at least 2 players for a tournament")

        self.tournament_players = self.engine.initialize(self.players)
        self.matchups = self.engine.generate_matchups(list(self.tournament_players))
        self.phase = TournamentPhase.COMPARING

    @property
    def current_matchup(self) -> Optional[Matchup]:
        """Next unresolved matchup, or None."""
        if self.phase != TournamentPhase.COMPARING:
            return None
        for matchup in self.matchups:
            if not matchup.is_resolved:
                return matchup
        return None

    @property
    def total_matchups(self) -> int:
        return len(self.matchups)

    @property
    def completed_matchups(self) -> int:
        return len(self.results)

    @property
    def progress_percentage(self) -> float:
        if self.total_matchups == 0:
            return 0.0
        return self.completed_matchups / self.total_matchups * 100

    def record_result(self, winner_id: str) -> Matchup:
        """
        Resolve the current matchup in favor of winner_id.

        Moves to the results phase once every matchup is resolved.

        Returns:
            The resolved matchup

        Raises:
            ValueError: If not comparing or the winner is not in the matchup
        """
        self._require(TournamentPhase.COMPARING, "record a result")
        current = self.current_matchup

        resolved = self.engine.record_result(current, winner_id)
        self.matchups = [resolved if m.id == current.id else m for m in self.matchups]
        self.results.append(resolved)

        if self.current_matchup is None:
            self.finish()

        return resolved

    def finish(self) -> List[PlayerRanking]:
        """Compute rankings from the results so far and enter the results phase."""
        self._require(TournamentPhase.COMPARING, "finish a tournament")
        self.rankings = self.engine.compute_rankings(self.tournament_players, self.results)
        self.phase = TournamentPhase.RESULTS
        return self.rankings

    def reset(self):
        """Discard all tournament state and return to setup."""
        self._clear()

    def apply(self) -> List[Player]:
        """
        Return the roster with skills replaced by tournament scores.

        Consumes the run: the session goes back to setup afterwards.
        """
        self._require(TournamentPhase.RESULTS, "apply rankings")
        updated = self.engine.apply_to_roster(self.rankings, self.tournament_players, self.players)
        self.players = updated
        self._clear()
        return updated

    def player_name(self, tournament_id: str) -> str:
        tp = self.tournament_players.get(tournament_id)
        return tp.name if tp else tournament_id
