"""
Single trials and the per-category tally they accumulate into.
A tally is an int64 array indexed by HandCategory; it is passed in and
returned, never held globally.
"""

import numpy as np

from poker_hand_sim.config import NUM_PRIVATE_CARDS, NUM_SHARED_CARDS
from poker_hand_sim.engine.deck import Deck, make_rng
from poker_hand_sim.engine.hand_eval import NUM_CATEGORIES, evaluate_best_hand


def new_tally():
    return np.zeros(NUM_CATEGORIES, dtype=np.int64)


def deal_trial(rng=None):
    """Shuffle a fresh deck, deal 2 private + 5 shared, evaluate."""
    deck = Deck(rng)
    private = deck.draw_cards(NUM_PRIVATE_CARDS)
    shared = deck.draw_cards(NUM_SHARED_CARDS)
    return evaluate_best_hand(private, shared)


def run_trials(num_trials, rng=None, tally=None):
    """
    Run num_trials trials serially; add each category into tally.
    Returns the tally (a new one if none is given).
    """
    rng = make_rng(rng)
    if tally is None:
        tally = new_tally()
    for _ in range(num_trials):
        category, _cards = deal_trial(rng)
        tally[category] += 1
    return tally


def merge_tallies(tallies):
    """Element-wise sum of per-worker (or per-block) tallies."""
    total = new_tally()
    for tally in tallies:
        total += tally
    return total
