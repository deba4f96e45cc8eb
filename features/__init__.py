# features package
# Thin aggregator: re-export the card model and the deck

from .cards import Card, Hand, Rank, Suit  # noqa: F401
from .deck import DECK, draw_hand  # noqa: F401

__all__ = [
    "Card",
    "Hand",
    "Rank",
    "Suit",
    "DECK",
    "draw_hand",
]
