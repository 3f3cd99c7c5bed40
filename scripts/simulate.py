#!/usr/bin/env python3
"""
Run the hand-frequency simulation from a source checkout.
Usage:
  python scripts/simulate.py [--trials 1000000] [--workers 4] [--seed 42]
"""

import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from poker_hand_sim.cli import main


if __name__ == "__main__":
    sys.exit(main())
