"""
Parse errors raised while turning card text into Card / Hand values.

All of them subclass ValueError so callers that only care about "bad input"
can catch one type.
"""
from typing import Any


class ParseError(ValueError):
    """Base class for every card / hand input error."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {"error": self.name, "message": self.message}


class MalformedToken(ParseError):
    def __init__(self, token: str):
        super().__init__(f"card token {token!r} must be exactly two characters (rank + suit)", token)


class InvalidRankSymbol(ParseError):
    def __init__(self, symbol: str):
        super().__init__(f"{symbol!r} is not a valid rank", symbol)


class InvalidSuitSymbol(ParseError):
    def __init__(self, symbol: str):
        super().__init__(f"{symbol!r} is not a valid suit", symbol)


class WrongCardCount(ParseError):
    def __init__(self, count: int, expected: int = 5):
        super().__init__(f"number of cards in hand ({count}) must be {expected}", count)


class DuplicateCard(ParseError):
    def __init__(self, card: Any):
        super().__init__(f"card {card} appears more than once", card)
