"""
Evaluation engine: cards, deck, 5-card classification, best hand of 7.
"""

from poker_hand_sim.engine.cards import (
    Card,
    Rank,
    Suit,
    FULL_DECK,
    parse_cards,
)
from poker_hand_sim.engine.deck import Deck, make_rng
from poker_hand_sim.engine.errors import (
    PokerSimError,
    InvalidCardCount,
    DuplicateCard,
    ExhaustedDeck,
)
from poker_hand_sim.engine.hand_eval import (
    HandCategory,
    CATEGORY_NAMES,
    NUM_CATEGORIES,
    EvaluatedHand,
    five_card_combinations,
    classify_hand,
    best_category,
    evaluate_best_hand,
)

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "FULL_DECK",
    "parse_cards",
    "Deck",
    "make_rng",
    "PokerSimError",
    "InvalidCardCount",
    "DuplicateCard",
    "ExhaustedDeck",
    "HandCategory",
    "CATEGORY_NAMES",
    "NUM_CATEGORIES",
    "EvaluatedHand",
    "five_card_combinations",
    "classify_hand",
    "best_category",
    "evaluate_best_hand",
]
