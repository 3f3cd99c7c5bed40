"""
Central configuration: deal sizes, simulation defaults, logging format.
"""

# Deal parameters (Texas Hold'em: 2 hole cards + 5 board cards)
NUM_PRIVATE_CARDS = 2
NUM_SHARED_CARDS = 5
NUM_DEALT_CARDS = NUM_PRIVATE_CARDS + NUM_SHARED_CARDS  # 7
HAND_SIZE = 5
DECK_SIZE = 52

# Simulation
SIM_TRIALS_DEFAULT = 1_000_000
SIM_BLOCK_SIZE = 10_000
NUM_WORKERS_DEFAULT = 1

# Sanity check against exact 7-card probabilities
Z_SCORE_TOLERANCE = 4.0

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_DEFAULT = "WARNING"
