"""
Errors raised by the engine. All of them are caller contract violations,
so they propagate instead of being retried or skipped.
"""


class PokerSimError(Exception):
    """Base class for engine errors."""


class InvalidCardCount(PokerSimError, ValueError):
    def __init__(self, expected, actual, what="cards"):
        self.expected = expected
        self.actual = actual
        self.what = what
        super().__init__(f"expected {expected} {what}, got {actual}")

    def __reduce__(self):
        return (type(self), (self.expected, self.actual, self.what))


class DuplicateCard(PokerSimError, ValueError):
    def __init__(self, card):
        self.card = card
        super().__init__(f"duplicate card: {card}")

    def __reduce__(self):
        return (type(self), (self.card,))


class ExhaustedDeck(PokerSimError, IndexError):
    def __init__(self, requested, remaining):
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"cannot draw {requested} card(s), only {remaining} left in deck"
        )

    def __reduce__(self):
        return (type(self), (self.requested, self.remaining))
