"""
Tests for the tournament session state machine.
"""

import math
import random

import pytest

from src.roster.models import Player
from src.tournament.engine import TournamentEngine
from src.tournament.session import TournamentSession, TournamentPhase


@pytest.fixture
def session(four_players):
    return TournamentSession(four_players, engine=TournamentEngine(rng=random.Random(0)))


def run_to_results(session, pick=lambda m: m.player1_id):
    while session.phase == TournamentPhase.COMPARING:
        session.record_result(pick(session.current_matchup))


class TestTournamentSession:
    """Tests for TournamentSession."""

    def test_initial_phase(self, session):
        assert session.phase == TournamentPhase.SETUP
        assert session.current_matchup is None
        assert session.tournament_players == {}
        assert session.progress_percentage == 0.0

    def test_start_requires_two_players(self):
        session = TournamentSession([Player(id=1, name="Solo", skill=5)])
        with pytest.raises(ValueError, match="at least 2 players"):
            session.start()
        assert session.phase == TournamentPhase.SETUP

    def test_start_enters_comparing(self, session):
        session.start()

        assert session.phase == TournamentPhase.COMPARING
        assert len(session.tournament_players) == 4
        assert session.total_matchups == math.ceil(4 * 1.5)
        assert session.completed_matchups == 0
        assert session.current_matchup is session.matchups[0]

    def test_cannot_start_twice(self, session):
        session.start()
        with pytest.raises(ValueError):
            session.start()

    def test_record_result_outside_comparing(self, session):
        with pytest.raises(ValueError):
            session.record_result("anyone")

    def test_record_result_advances(self, session):
        session.start()
        first = session.current_matchup

        resolved = session.record_result(first.player2_id)

        assert resolved.id == first.id
        assert resolved.winner_id == first.player2_id
        assert session.completed_matchups == 1
        assert session.current_matchup.id != first.id
        assert session.progress_percentage == pytest.approx(100 / 6)

    def test_invalid_winner_leaves_state(self, session):
        session.start()
        current = session.current_matchup

        with pytest.raises(ValueError):
            session.record_result("not-a-player")

        assert session.current_matchup is current
        assert session.completed_matchups == 0

    def test_last_result_finishes(self, session):
        session.start()
        run_to_results(session)

        assert session.phase == TournamentPhase.RESULTS
        assert session.completed_matchups == session.total_matchups
        assert session.progress_percentage == pytest.approx(100.0)
        assert len(session.rankings) == 4
        assert session.current_matchup is None

    def test_results_log_in_recorded_order(self, session):
        session.start()
        run_to_results(session)

        sequences = [m.sequence for m in session.results]
        assert sequences == sorted(sequences)
        assert len(set(m.id for m in session.results)) == session.total_matchups

    def test_finish_early(self, session):
        session.start()
        session.record_result(session.current_matchup.player1_id)

        rankings = session.finish()

        assert session.phase == TournamentPhase.RESULTS
        assert len(rankings) == 4
        assert sum(r.matches_played for r in rankings) == 2

    def test_finish_with_no_results(self, session):
        session.start()
        rankings = session.finish()
        assert all(r.score == 5 for r in rankings)

    def test_reset_discards_state(self, session):
        session.start()
        old_ids = set(session.tournament_players)
        session.record_result(session.current_matchup.player1_id)

        session.reset()

        assert session.phase == TournamentPhase.SETUP
        assert session.matchups == []
        assert session.results == []
        assert session.rankings == []

        session.start()
        assert set(session.tournament_players).isdisjoint(old_ids)

    def test_apply_requires_results(self, session):
        session.start()
        with pytest.raises(ValueError):
            session.apply()

    def test_apply_updates_roster(self, session, four_players):
        session.start()
        run_to_results(session)
        scores = {session.tournament_players[r.player_id].player.id: r.score for r in session.rankings}

        updated = session.apply()

        assert [p.id for p in updated] == [p.id for p in four_players]
        assert all(p.skill == scores[p.id] for p in updated)
        assert session.players == updated
        assert session.phase == TournamentPhase.SETUP
        assert session.tournament_players == {}

    def test_consistent_winner_ranks_first(self):
        """A player who wins every comparison ranks first with the top score."""
        players = [Player(id=1, name="Ace", skill=3), Player(id=2, name="Rookie", skill=9)]
        session = TournamentSession(players, engine=TournamentEngine(rng=random.Random(5)))
        session.start()
        ace = next(tp_id for tp_id, tp in session.tournament_players.items() if tp.player.id == 1)

        run_to_results(session, lambda m: ace)

        assert session.rankings[0].player_id == ace
        assert session.rankings[0].score == 10
        assert session.rankings[1].score == 1
        assert [p.skill for p in session.apply()] == [10, 1]
