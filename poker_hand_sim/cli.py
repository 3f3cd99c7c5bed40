"""
Run the hand-frequency simulation and print the category table.

Usage:
  poker-hand-sim                          # SIM_TRIALS_DEFAULT trials
  poker-hand-sim --trials 200000 --workers 4 --seed 7
  poker-hand-sim --trials 1000000 --check # exit 1 if far from exact odds
"""

import argparse
import logging
import sys

from poker_hand_sim.config import (
    LOG_FORMAT,
    LOG_LEVEL_DEFAULT,
    NUM_WORKERS_DEFAULT,
    SIM_BLOCK_SIZE,
    SIM_TRIALS_DEFAULT,
    Z_SCORE_TOLERANCE,
)
from poker_hand_sim.engine.errors import PokerSimError
from poker_hand_sim.simulation import check_against_theory, print_report, simulate


def positive_int(value):
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return n


def build_parser():
    ap = argparse.ArgumentParser(
        prog="poker-hand-sim",
        description="Deal random 2+5 card hands and tally best-hand categories",
    )
    ap.add_argument("--trials", "-n", type=positive_int, default=SIM_TRIALS_DEFAULT,
                    help="Number of hands to deal")
    ap.add_argument("--workers", "-w", type=positive_int, default=NUM_WORKERS_DEFAULT,
                    help="Worker processes (1 = run in this process)")
    ap.add_argument("--block-size", type=positive_int, default=SIM_BLOCK_SIZE,
                    help="Trials per block (unit of work and of the SE estimate)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    ap.add_argument("--check", action="store_true",
                    help=f"Exit 1 if any category is more than {Z_SCORE_TOLERANCE} SE from exact odds")
    ap.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    ap.add_argument("--log-level", default=LOG_LEVEL_DEFAULT,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    print("=" * 60)
    print("Texas Hold'em — Best Hand Frequency Simulation")
    print("=" * 60)

    try:
        result = simulate(
            args.trials,
            block_size=args.block_size,
            num_workers=args.workers,
            seed=args.seed,
            show_progress=not args.no_progress,
        )
    except PokerSimError as e:
        print(f"Error: {e}")
        return 1

    print_report(result)

    if args.check:
        outliers = check_against_theory(result.counts)
        if outliers:
            print(f"\nFAILED: {len(outliers)} categories outside {Z_SCORE_TOLERANCE} SE of exact odds")
            return 1
        print("\nAll categories within tolerance of exact odds.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
