"""
Display formatting for ranking tournaments.

Provides ASCII-formatted leaderboards and comparison prompts for terminal output.
"""

from typing import Dict, List

from src.tournament.engine import PlayerRanking, TournamentPlayer
from src.tournament.scheduler import Matchup


def format_leaderboard(
    rankings: List[PlayerRanking],
    tournament_players: Dict[str, TournamentPlayer]
) -> str:
    """
    Format the final standings as an ASCII table.

    Args:
        rankings: Rankings ordered best first
        tournament_players: Tournament players keyed by tournament id

    Returns:
        Formatted string for terminal display
    """
    lines = []
    lines.append("=== FINAL RANKINGS ===")
    lines.append("")

    # Header
    lines.append(f"{'Rank':<6}{'Player':<28}{'Rating':<10}{'Skill':<14}{'Played':<8}{'Conf':<6}")
    lines.append("-" * 72)

    for ranking in rankings:
        tp = tournament_players.get(ranking.player_id)
        name = tp.name if tp else ranking.player_id
        skill_str = f"{ranking.score}"
        if tp is not None and tp.player.skill != ranking.score:
            skill_str = f"{ranking.score} (was {tp.player.skill})"
        conf = f"{ranking.confidence:.0%}"

        lines.append(f"{ranking.rank:<6}{name:<28}{ranking.rating:<10.1f}{skill_str:<14}"
                     f"{ranking.matches_played:<8}{conf:<6}")

    return "\n".join(lines)


def format_matchup(
    matchup_num: int,
    total_matchups: int,
    matchup: Matchup,
    tournament_players: Dict[str, TournamentPlayer]
) -> str:
    """Format a comparison prompt."""
    name1 = tournament_players[matchup.player1_id].name
    name2 = tournament_players[matchup.player2_id].name
    return (f"[{matchup_num}/{total_matchups}] Who is better?\n"
            f"  1) {name1}\n"
            f"  2) {name2}")


def format_progress(completed: int, total: int) -> str:
    """Format progress line during a tournament."""
    pct = completed / total if total > 0 else 0
    return f"  Progress: {completed}/{total} ({pct:.1%})"


def format_tournament_header(num_players: int, num_matchups: int) -> str:
    """Format tournament header information."""
    lines = []
    lines.append("Ranking tournament")
    lines.append(f"Players: {num_players}")
    lines.append(f"Comparisons: {num_matchups}")
    lines.append("")
    return "\n".join(lines)
