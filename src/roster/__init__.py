"""
Roster module: player records and roster file handling.
"""

from src.roster.models import Player
from src.roster.io import load_roster, dump_roster, parse_roster

__all__ = [
    'Player',
    'load_roster',
    'dump_roster',
    'parse_roster',
]
