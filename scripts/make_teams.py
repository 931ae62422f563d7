#!/usr/bin/env python3
"""
Split a roster into two balanced teams.

Usage:
    python scripts/make_teams.py roster.json

Examples:
    # Default Red/White teams
    python scripts/make_teams.py roster.json

    # Custom team names and a reproducible split
    python scripts/make_teams.py roster.json --labels Dark Light --seed 42

    # Check how even the splits are over many runs
    python scripts/make_teams.py roster.json --analyze 1000

    # Write the split as JSON
    python scripts/make_teams.py roster.json --json
"""

import argparse
import json
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.roster.io import load_roster
from src.teams.balancer import balance_teams
from src.teams.analysis import run_bulk_analysis
from src.teams.display import format_team_set, format_bulk_analysis
from src.utils.constants import DEFAULT_LABEL_A, DEFAULT_LABEL_B


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Split a roster of attending players into two balanced teams.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Roster file format (JSON):
  {"players": [{"id": 1, "name": "Alex", "skill": 7, "position": "forward"}, ...]}

Players are balanced by position first, then team size, then average skill.
'''
    )

    parser.add_argument(
        'roster',
        type=str,
        help='Path to a JSON roster of eligible players'
    )
    parser.add_argument(
        '--labels', '-l',
        type=str, nargs=2, default=[DEFAULT_LABEL_A, DEFAULT_LABEL_B],
        metavar=('TEAM_A', 'TEAM_B'),
        help=f'Team labels (default: {DEFAULT_LABEL_A} {DEFAULT_LABEL_B})'
    )
    parser.add_argument(
        '--seed', '-s',
        type=int, default=None,
        help='Random seed for reproducible tie-breaking'
    )
    parser.add_argument(
        '--analyze', '-a',
        type=int, default=0, metavar='N',
        help='Also balance the roster N times and report split statistics'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the split as JSON instead of team sheets'
    )

    return parser.parse_args()


def validate_labels(label_a: str, label_b: str) -> bool:
    """Team labels must be non-empty and distinct after case folding."""
    if not label_a.strip() or not label_b.strip():
        print("Error: Team labels must not be empty")
        return False
    if label_a.lower() == label_b.lower():
        print(f"Error: Team labels must differ (got '{label_a}' twice)")
        return False
    return True


def main():
    """Main entry point."""
    args = parse_args()
    label_a, label_b = args.labels

    if not validate_labels(label_a, label_b):
        return 1

    try:
        players = load_roster(args.roster)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    rng = random.Random(args.seed)
    team_set = balance_teams(players, label_a, label_b, rng=rng)

    if args.json:
        print(json.dumps(team_set.to_dict(), indent=2))
    else:
        print(f"Balanced {len(players)} players\n")
        print(format_team_set(team_set))

    if args.analyze > 0:
        analysis = run_bulk_analysis(players, args.analyze, label_a, label_b, rng=rng)
        print("\n" + format_bulk_analysis(analysis))

    return 0


if __name__ == "__main__":
    sys.exit(main())
