"""
Teams module for splitting a roster into two balanced teams.

Provides:
- balance_teams: Position, size and skill balanced assignment
- Team / TeamSet: The resulting two-team split
- analyze_teams / run_bulk_analysis: Split quality statistics
"""

from src.teams.models import Team, TeamSet
from src.teams.balancer import balance_teams, shuffled_by_skill
from src.teams.analysis import analyze_teams, run_bulk_analysis, skill_gap
from src.teams.display import format_team_set, format_bulk_analysis

__all__ = [
    'Team',
    'TeamSet',
    'balance_teams',
    'shuffled_by_skill',
    'analyze_teams',
    'run_bulk_analysis',
    'skill_gap',
    'format_team_set',
    'format_bulk_analysis',
]
