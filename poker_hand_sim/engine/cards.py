"""
Card model. Ranks are 0-12 (0=2 .. 12=A), suits 0-3.
A card's integer index is suit * 13 + rank, so FULL_DECK[i].index == i.
"""

from enum import Enum, IntEnum


class Rank(IntEnum):
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def display_name(self):
        return self.name.capitalize()

    @property
    def symbol(self):
        return RANK_SYMBOLS[self]


class Suit(Enum):
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    @property
    def display_name(self):
        return self.name.capitalize()

    @property
    def symbol(self):
        return self.name[0].lower()


RANK_SYMBOLS = dict(zip(Rank, "23456789TJQKA"))
_RANK_BY_SYMBOL = {s: r for r, s in RANK_SYMBOLS.items()}
_SUIT_BY_SYMBOL = {s.symbol: s for s in Suit}


class Card:
    """
    Immutable (rank, suit) pair.
    Equality and hashing use both fields; `<` compares rank only so that
    sorted() orders a hand by rank.
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank, suit):
        object.__setattr__(self, "_rank", Rank(rank))
        object.__setattr__(self, "_suit", Suit(suit))

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    def __delattr__(self, name):
        raise AttributeError("Card is immutable")

    @property
    def rank(self):
        return self._rank

    @property
    def suit(self):
        return self._suit

    @property
    def index(self):
        return self._suit.value * 13 + self._rank.value

    @property
    def short(self):
        """Two-character form, e.g. 'As' for the ace of spades."""
        return self._rank.symbol + self._suit.symbol

    @classmethod
    def from_index(cls, index):
        if not 0 <= index < 52:
            raise ValueError(f"card index out of range: {index}")
        return FULL_DECK[index]

    @classmethod
    def from_string(cls, card_str):
        """Parse the two-character form ('As', 'td', ...), case insensitive."""
        if not isinstance(card_str, str) or len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str!r}")
        rank = _RANK_BY_SYMBOL.get(card_str[0].upper())
        suit = _SUIT_BY_SYMBOL.get(card_str[1].lower())
        if rank is None or suit is None:
            raise ValueError(f"Invalid rank or suit in: {card_str!r}")
        return cls(rank, suit)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank == other._rank and self._suit == other._suit

    def __hash__(self):
        return hash((self._rank, self._suit))

    def __lt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank < other._rank

    def __str__(self):
        return f"{self._rank.display_name} of {self._suit.display_name}"

    def __repr__(self):
        return f"Card({self.short})"

    def __reduce__(self):
        return (Card, (self._rank.value, self._suit.value))


def parse_cards(text):
    """'As Kd 2c' -> [Card, Card, Card]."""
    return [Card.from_string(token) for token in text.split()]


FULL_DECK = tuple(Card(rank, suit) for suit in Suit for rank in Rank)
