"""
Shuffled 52-card deck with sequential draw-without-replacement.
"""

import numpy as np

from poker_hand_sim.config import DECK_SIZE
from poker_hand_sim.engine.cards import FULL_DECK
from poker_hand_sim.engine.errors import ExhaustedDeck


def make_rng(rng=None):
    """Accept a numpy Generator, an int seed / SeedSequence, or None."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class Deck:
    """
    One uniformly shuffled deck, used for a single trial and then dropped.
    order: permutation of card indices 0..51; cards are drawn from the front.
    """

    __slots__ = ("order", "deck_idx")

    def __init__(self, rng=None):
        self.order = make_rng(rng).permutation(DECK_SIZE)
        self.deck_idx = 0

    @property
    def remaining(self):
        return DECK_SIZE - self.deck_idx

    def draw(self):
        if self.deck_idx >= DECK_SIZE:
            raise ExhaustedDeck(1, 0)
        card = FULL_DECK[self.order[self.deck_idx]]
        self.deck_idx += 1
        return card

    def draw_cards(self, n):
        if n < 0:
            raise ValueError(f"cannot draw a negative number of cards: {n}")
        if n > self.remaining:
            raise ExhaustedDeck(n, self.remaining)
        start = self.deck_idx
        self.deck_idx += n
        return [FULL_DECK[i] for i in self.order[start : self.deck_idx]]

    def __len__(self):
        return self.remaining
