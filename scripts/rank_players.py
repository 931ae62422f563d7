#!/usr/bin/env python3
"""
Rank a roster by pairwise comparison and derive 1-10 skills.

Presents pairs of players and asks who is better. Results feed an Elo
rating, which is rescaled to the 1-10 skill range at the end.

Usage:
    python scripts/rank_players.py roster.json

Examples:
    # Interactive ranking, print the updated roster
    python scripts/rank_players.py roster.json

    # Write the updated roster to a new file
    python scripts/rank_players.py roster.json --output ranked.json

    # Non-interactive run that prefers the higher current skill
    python scripts/rank_players.py roster.json --simulate --seed 7
"""

import argparse
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.roster.io import load_roster, dump_roster
from src.tournament.engine import TournamentEngine, TournamentConfig
from src.tournament.session import TournamentSession, TournamentPhase
from src.tournament.display import (
    format_leaderboard,
    format_matchup,
    format_progress,
    format_tournament_header
)
from src.utils.constants import K_FACTOR, INITIAL_RATING


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Rank players by pairwise comparison.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
At each prompt answer 1 or 2 for the better player, or:
  d   finish now and rank from the results so far
  q   quit without ranking
'''
    )

    parser.add_argument(
        'roster',
        type=str,
        help='Path to a JSON roster'
    )
    parser.add_argument(
        '--output', '-o',
        type=str, default=None,
        help='Write the re-skilled roster to this file instead of printing it'
    )
    parser.add_argument(
        '--seed', '-s',
        type=int, default=None,
        help='Random seed for the comparison schedule'
    )
    parser.add_argument(
        '--k-factor',
        type=float, default=K_FACTOR,
        help=f'Elo K-factor for rating volatility (default: {K_FACTOR})'
    )
    parser.add_argument(
        '--initial-rating',
        type=float, default=INITIAL_RATING,
        help=f'Starting Elo rating (default: {INITIAL_RATING})'
    )
    parser.add_argument(
        '--simulate',
        action='store_true',
        help='Answer every comparison automatically by current skill'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Minimal output (only final results)'
    )

    return parser.parse_args()


def ask_winner(session: TournamentSession, num: int) -> str:
    """
    Prompt for the winner of the current matchup.

    Returns:
        Winner's tournament id, 'done' or 'quit'
    """
    matchup = session.current_matchup
    print(format_matchup(num, session.total_matchups, matchup, session.tournament_players))

    while True:
        answer = input("> ").strip().lower()
        if answer == '1':
            return matchup.player1_id
        if answer == '2':
            return matchup.player2_id
        if answer == 'd':
            return 'done'
        if answer == 'q':
            return 'quit'
        print("Please answer 1, 2, d or q")


def simulated_winner(session: TournamentSession, rng: random.Random) -> str:
    """Pick the player with the higher current skill, ties at random."""
    matchup = session.current_matchup
    p1 = session.tournament_players[matchup.player1_id].player
    p2 = session.tournament_players[matchup.player2_id].player
    if p1.skill != p2.skill:
        return matchup.player1_id if p1.skill > p2.skill else matchup.player2_id
    return rng.choice([matchup.player1_id, matchup.player2_id])


def run_comparisons(session: TournamentSession, simulate: bool, rng: random.Random, quiet: bool) -> bool:
    """
    Drive the session through the comparing phase.

    Returns:
        False if the user quit
    """
    num = 1
    while session.phase == TournamentPhase.COMPARING:
        if simulate:
            winner = simulated_winner(session, rng)
        else:
            winner = ask_winner(session, num)

        if winner == 'quit':
            return False
        if winner == 'done':
            session.finish()
            break

        session.record_result(winner)
        if not quiet and not simulate:
            print(format_progress(session.completed_matchups, session.total_matchups))
        num += 1

    return True


def main():
    """Main entry point."""
    args = parse_args()

    try:
        players = load_roster(args.roster)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if len(players) < 2:
        print("Error: Need at least 2 players for a tournament")
        return 1

    rng = random.Random(args.seed)
    config = TournamentConfig(k_factor=args.k_factor, initial_rating=args.initial_rating)
    session = TournamentSession(players, engine=TournamentEngine(config=config, rng=rng))
    session.start()

    if not args.quiet:
        print(format_tournament_header(len(players), session.total_matchups))

    try:
        finished = run_comparisons(session, args.simulate, rng, args.quiet)
    except (EOFError, KeyboardInterrupt):
        print()
        finished = False

    if not finished:
        print("Tournament abandoned, roster unchanged.")
        return 1

    print("\n" + format_leaderboard(session.rankings, session.tournament_players))

    updated = session.apply()
    if args.output:
        dump_roster(updated, args.output)
        print(f"\nUpdated roster written to {args.output}")
    else:
        print("\n" + dump_roster(updated))

    return 0


if __name__ == "__main__":
    sys.exit(main())
