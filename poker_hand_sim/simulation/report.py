"""
Category frequency report and comparison with exact 7-card probabilities.
"""

import logging
from math import comb

import numpy as np

from poker_hand_sim.config import DECK_SIZE, NUM_DEALT_CARDS, Z_SCORE_TOLERANCE
from poker_hand_sim.engine.hand_eval import CATEGORY_NAMES, HandCategory

logger = logging.getLogger(__name__)

SEVEN_CARD_COMBOS = comb(DECK_SIZE, NUM_DEALT_CARDS)  # 133,784,560

# Number of 7-card sets whose best 5-card hand falls in each category.
THEORETICAL_COUNTS = {
    HandCategory.HIGH_CARD: 23_294_460,
    HandCategory.PAIR: 58_627_800,
    HandCategory.TWO_PAIR: 31_433_400,
    HandCategory.THREE_OF_A_KIND: 6_461_620,
    HandCategory.STRAIGHT: 6_180_020,
    HandCategory.FLUSH: 4_047_644,
    HandCategory.FULL_HOUSE: 3_473_184,
    HandCategory.FOUR_OF_A_KIND: 224_848,
    HandCategory.STRAIGHT_FLUSH: 37_260,
    HandCategory.ROYAL_FLUSH: 4_324,
}


def theoretical_probabilities():
    """Array indexed by HandCategory."""
    return np.array([THEORETICAL_COUNTS[c] for c in HandCategory]) / SEVEN_CARD_COMBOS


def z_scores(counts):
    """(observed - expected) / binomial SE, per category."""
    counts = np.asarray(counts, dtype=np.float64)
    n = counts.sum()
    if n <= 0:
        raise ValueError("cannot score an empty tally")
    p = theoretical_probabilities()
    return (counts - n * p) / np.sqrt(n * p * (1 - p))


def check_against_theory(counts, tolerance=Z_SCORE_TOLERANCE):
    """Categories whose |z| exceeds tolerance (empty list = consistent)."""
    outliers = []
    for category, z in zip(HandCategory, z_scores(counts)):
        if abs(z) > tolerance:
            logger.warning(
                "%s frequency is off by %.1f standard errors", CATEGORY_NAMES[category], z
            )
            outliers.append(category)
    return outliers


def iter_report_pairs(counts):
    """(HandCategory, count) from the strongest category down."""
    for category in sorted(HandCategory, reverse=True):
        yield category, int(counts[category])


def report_rows(result):
    """(category, count, percent, se_percent, expected_percent) per category."""
    freqs = result.frequencies * 100
    se = result.standard_errors * 100
    expected = theoretical_probabilities() * 100
    for category, count in iter_report_pairs(result.counts):
        yield category, count, freqs[category], se[category], expected[category]


def print_report(result):
    print(f"\nHand frequencies over {result.num_trials:,} trials ({result.num_blocks} blocks):")
    print(f"{'Hand':<18} {'Count':>12} {'%':>10} {'± SE':>10} {'95% CI':<22} {'Expected %':>10}")
    print("-" * 88)
    for category, count, pct, se, expected in report_rows(result):
        ci = f"[{pct - 1.96 * se:.4f}, {pct + 1.96 * se:.4f}]"
        print(
            f"{CATEGORY_NAMES[category]:<18} {count:>12,} {pct:>10.4f} {se:>10.4f} "
            f"{ci:<22} {expected:>10.4f}"
        )
