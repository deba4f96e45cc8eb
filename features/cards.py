"""
Card model shared by the parser, the deck and the classifier.
A Card is an immutable (rank, suit) pair; a Hand is exactly five distinct cards.
"""
from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from functools import total_ordering
from enum import Enum
from typing import Any, Dict, Iterable, Iterator

from core.config import CARD_DELIMITER, HAND_SIZE, RANK_SYMBOLS, SUIT_SYMBOLS
from core.errors import DuplicateCard, WrongCardCount


class Suit(Enum):
    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"
    HEARTS = "Hearts"
    SPADES = "Spades"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self.name][0]

    @property
    def label(self) -> str:
        return self.value


@total_ordering
class Rank(Enum):
    """2=2, ..., K=13, A=14"""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self.name][0]

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __lt__(self, other: Rank) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    @property
    def code(self) -> str:
        """ Card(TEN, DIAMONDS) -> 'tr' """
        return f"{self.rank.symbol}{self.suit.symbol}"

    def to_dict(self) -> Dict[str, str]:
        return {"rank": self.rank.label, "suit": self.suit.label, "code": self.code}

    def __str__(self) -> str:
        return self.code


class Hand:
    """
    Five distinct cards, kept in the order they were given.
    Construction is the only validation point, so every Hand instance is valid.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card]):
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise WrongCardCount(len(cards), HAND_SIZE)
        seen = set()
        for card in cards:
            if card in seen:
                raise DuplicateCard(card)
            seen.add(card)
        self._cards = cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __eq__(self, other: Any) -> bool:
        # 手牌無序：同樣五張牌即視為相同
        if not isinstance(other, Hand):
            return NotImplemented
        return set(self._cards) == set(other._cards)

    def __hash__(self) -> int:
        return hash(frozenset(self._cards))

    def __repr__(self) -> str:
        return f"Hand({self.notation!r})"

    def count_ranks(self) -> Counter:
        return Counter(card.rank for card in self._cards)

    def count_suits(self) -> Counter:
        return Counter(card.suit for card in self._cards)

    @property
    def notation(self) -> str:
        """ Hand -> 'tr,jr,qr,kr,1r' """
        return CARD_DELIMITER.join(card.code for card in self._cards)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cards": [card.to_dict() for card in self._cards],
            "notation": self.notation,
        }
