"""
Tests for team split statistics and display.
"""

import random
from pathlib import Path

import pytest

from src.roster.io import load_roster
from src.teams.analysis import analyze_teams, run_bulk_analysis, skill_gap, composition
from src.teams.balancer import balance_teams
from src.teams.display import format_team_set, format_bulk_analysis
from src.teams.models import TeamSet

SAMPLE_ROSTER = Path(__file__).parent.parent / "data" / "sample_roster.json"


class TestAnalyzeTeams:
    """Tests for per-team statistics."""

    def test_four_player_stats(self, four_players):
        teams = balance_teams(four_players, "Red", "White", rng=random.Random(0))
        stats = analyze_teams(teams)

        assert set(stats) == {"red", "white"}
        # Red: Jordan (F, 5) + Sam (D, 8); White: Alex (F, 7) + Casey (D, 6)
        assert stats["red"].count == 2
        assert stats["red"].avg_skill == pytest.approx(6.5)
        assert stats["red"].avg_forward_skill == pytest.approx(5.0)
        assert stats["red"].avg_defense_skill == pytest.approx(8.0)
        assert stats["white"].avg_skill == pytest.approx(6.5)

    def test_empty_teams_report_zero(self):
        stats = analyze_teams(TeamSet.empty("a", "b"))
        assert stats["a"].avg_skill == 0.0
        assert stats["a"].avg_forward_skill == 0.0
        assert stats["b"].count == 0

    def test_skill_gap(self, four_players):
        teams = balance_teams(four_players, "Red", "White", rng=random.Random(0))
        assert skill_gap(teams) == pytest.approx(0.0)

    def test_composition(self, four_players):
        teams = balance_teams(four_players, "Red", "White", rng=random.Random(0))
        assert composition(teams) == "red: 1F/1D | white: 1F/1D"


class TestBulkAnalysis:
    """Tests for repeated balancing runs."""

    def test_sample_roster_single_composition(self):
        """12 forwards and 10 defensemen always split 6F/5D each."""
        players = load_roster(SAMPLE_ROSTER)
        analysis = run_bulk_analysis(players, 50, rng=random.Random(3))

        assert analysis.iterations == 50
        assert analysis.compositions == {"red: 6F/5D | white: 6F/5D"}
        assert 0.0 <= analysis.mean_skill_gap <= analysis.max_skill_gap

    def test_requires_iterations(self, four_players):
        with pytest.raises(ValueError):
            run_bulk_analysis(four_players, 0)


class TestDisplay:
    """Tests for team sheet formatting."""

    def test_team_sheet(self, four_players):
        teams = balance_teams(four_players, "Red", "White", rng=random.Random(0))
        text = format_team_set(teams)

        assert "=== RED" in text
        assert "=== WHITE" in text
        for p in four_players:
            assert p.name in text

    def test_bulk_analysis_text(self, four_players):
        analysis = run_bulk_analysis(four_players, 5, "Red", "White", rng=random.Random(0))
        text = format_bulk_analysis(analysis)
        assert "5 runs" in text
        assert "red: 1F/1D | white: 1F/1D" in text
