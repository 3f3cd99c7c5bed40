"""
Best 5-card hand from 7 cards (2 private + 5 shared).
Every 5-card combination is classified and the highest category wins;
categories are compared only by HandCategory order (no kickers).
"""

from collections import Counter, namedtuple
from enum import IntEnum
from itertools import combinations
from operator import attrgetter

from poker_hand_sim.config import (
    HAND_SIZE,
    NUM_DEALT_CARDS,
    NUM_PRIVATE_CARDS,
    NUM_SHARED_CARDS,
)
from poker_hand_sim.engine.cards import Rank
from poker_hand_sim.engine.errors import DuplicateCard, InvalidCardCount


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def display_name(self):
        return CATEGORY_NAMES[self]


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}

NUM_CATEGORIES = len(HandCategory)

EvaluatedHand = namedtuple("EvaluatedHand", ["category", "cards"])

_WHEEL = (Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE)

_by_rank = attrgetter("rank")


def five_card_combinations(cards):
    """
    All 5-card subsets of a rank-sorted sequence, each keeping source order.
    Returns a fresh iterator on every call (21 tuples for 7 cards).
    """
    return combinations(tuple(cards), HAND_SIZE)


def _distinct(values):
    """Drop repeats, keep first-seen order."""
    return list(dict.fromkeys(values))


def _is_wheel(ranks):
    """A-2-3-4-5: the ace plays low."""
    return tuple(ranks) == _WHEEL


def _is_straight(ranks):
    """ranks: ascending distinct ranks of a 5-card hand."""
    if len(ranks) != HAND_SIZE:
        return False
    if all(b - a == 1 for a, b in zip(ranks, ranks[1:])):
        return True
    return _is_wheel(ranks)


def classify_hand(cards):
    """
    Category of exactly 5 cards, given rank-ascending.
    Pure function; checks run from the strongest category down.
    """
    if len(cards) != HAND_SIZE:
        raise InvalidCardCount(HAND_SIZE, len(cards))

    ranks = [c.rank for c in cards]
    counts = Counter(ranks)
    has_four = 4 in counts.values()
    has_three = 3 in counts.values()
    pair_count = sum(1 for n in counts.values() if n == 2)

    distinct_ranks = _distinct(ranks)
    is_straight = _is_straight(distinct_ranks)
    is_flush = len(_distinct(c.suit for c in cards)) == 1
    is_royal = is_straight and is_flush and distinct_ranks[0] == Rank.TEN

    if is_royal:
        return HandCategory.ROYAL_FLUSH
    if is_straight and is_flush:
        return HandCategory.STRAIGHT_FLUSH
    if has_four:
        return HandCategory.FOUR_OF_A_KIND
    if has_three and pair_count > 0:
        return HandCategory.FULL_HOUSE
    if is_flush:
        return HandCategory.FLUSH
    if is_straight:
        return HandCategory.STRAIGHT
    if has_three:
        return HandCategory.THREE_OF_A_KIND
    if pair_count == 2:
        return HandCategory.TWO_PAIR
    if pair_count == 1:
        return HandCategory.PAIR
    return HandCategory.HIGH_CARD


def _check_distinct(cards):
    seen = set()
    for card in cards:
        if card in seen:
            raise DuplicateCard(card)
        seen.add(card)


def best_category(cards):
    """
    Evaluate 7 already-combined cards.
    Returns EvaluatedHand(category, cards) for the first 5-card combination
    reaching the highest category.
    """
    cards = list(cards)
    if len(cards) != NUM_DEALT_CARDS:
        raise InvalidCardCount(NUM_DEALT_CARDS, len(cards))
    _check_distinct(cards)

    cards.sort(key=_by_rank)
    best = None
    best_combo = None
    for combo in five_card_combinations(cards):
        category = classify_hand(combo)
        if best is None or category > best:
            best = category
            best_combo = combo
    return EvaluatedHand(best, best_combo)


def evaluate_best_hand(private_cards, shared_cards):
    """
    Best hand from 2 private + 5 shared cards.
    Raises InvalidCardCount / DuplicateCard on malformed input.
    """
    private_cards = list(private_cards)
    shared_cards = list(shared_cards)
    total = len(private_cards) + len(shared_cards)
    if total != NUM_DEALT_CARDS:
        raise InvalidCardCount(NUM_DEALT_CARDS, total)
    if len(private_cards) != NUM_PRIVATE_CARDS:
        raise InvalidCardCount(NUM_PRIVATE_CARDS, len(private_cards), "private cards")
    if len(shared_cards) != NUM_SHARED_CARDS:
        raise InvalidCardCount(NUM_SHARED_CARDS, len(shared_cards), "shared cards")
    return best_category(private_cards + shared_cards)
