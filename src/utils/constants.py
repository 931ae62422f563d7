"""
Constants for team balancing and ranking tournaments.
"""

# Positions
FORWARD = "forward"
DEFENSE = "defense"
POSITIONS = [FORWARD, DEFENSE]

# Skill scale used across the roster
SKILL_MIN = 1
SKILL_MAX = 10
NEUTRAL_SKILL = 5  # Score given when every rating is identical

# Default team labels
DEFAULT_LABEL_A = "red"
DEFAULT_LABEL_B = "white"

# Elo parameters for ranking tournaments
INITIAL_RATING = 1500
K_FACTOR = 32
ELO_SCALE = 400.0

# Scheduling: roughly 1.5 comparisons per player instead of full round-robin
MATCHUPS_PER_PLAYER = 1.5

# Matches a player needs before their ranking is considered fully confident
FULL_CONFIDENCE_MATCHES = 5
