"""
Display formatting for team splits.
"""

from src.teams.analysis import BulkAnalysis, team_stats
from src.teams.models import Team, TeamSet


def format_team(team: Team) -> str:
    """Format a single team as an ASCII roster."""
    stats = team_stats(team)

    lines = []
    lines.append(f"=== {team.label.upper()} ({stats.count} players, avg skill {stats.avg_skill:.2f}) ===")
    lines.append(f"{'Pos':<5}{'Player':<28}{'Skill':<6}")
    lines.append("-" * 39)

    for player in team.forwards:
        lines.append(f"{'F':<5}{player.name:<28}{player.skill:<6}")
    for player in team.defensemen:
        lines.append(f"{'D':<5}{player.name:<28}{player.skill:<6}")

    return "\n".join(lines)


def format_team_set(team_set: TeamSet) -> str:
    """Format both teams, one after the other."""
    return "\n\n".join(format_team(team) for team in team_set)


def format_bulk_analysis(analysis: BulkAnalysis) -> str:
    """Format the result of repeated balancing runs."""
    lines = []
    lines.append(f"Bulk analysis over {analysis.iterations} runs:")
    lines.append(f"  Mean skill gap: {analysis.mean_skill_gap:.3f}")
    lines.append(f"  Max skill gap:  {analysis.max_skill_gap:.3f}")
    lines.append(f"  Distinct compositions: {len(analysis.compositions)}")
    for comp in sorted(analysis.compositions):
        lines.append(f"    {comp}")
    return "\n".join(lines)
