# evaluation/hand_eval.py
"""
Five-card hand classification.

The shape helpers below are only meaningful when checked in the order used by
classify(): e.g. a full house also "contains" three of a kind.
"""
from collections import Counter
from enum import Enum
from typing import Tuple

from features.cards import Hand, Rank

_WHEEL = frozenset({Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE})


class HandCategory(Enum):
    """Weakest first. A ten-to-ace straight flush is a plain StraightFlush."""
    HighCard = 0
    Pair = 1
    TwoPair = 2
    ThreeOfAKind = 3
    Straight = 4
    Flush = 5
    FullHouse = 6
    FourOfAKind = 7
    StraightFlush = 8

    @property
    def label(self) -> str:
        return self.name

    def __lt__(self, other):
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other):
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.value >= other.value


def count_shape(rank_counts: Counter) -> Tuple[int, ...]:
    """ {K: 3, 2: 2} -> (3, 2) """
    return tuple(sorted(rank_counts.values(), reverse=True))


def is_flush(suit_counts: Counter) -> bool:
    return len(suit_counts) == 1


def is_straight(rank_counts: Counter) -> bool:
    if len(rank_counts) != 5:
        return False
    ranks = set(rank_counts)
    # A-2-3-4-5: the only place the ace plays low
    if ranks == _WHEEL:
        return True
    values = [r.value for r in ranks]
    return max(values) - min(values) == 4


def classify(hand: Hand) -> HandCategory:
    """
    分析五張手牌，回傳最高的牌型。
    Strongest category is checked first; the first match is returned.
    """
    rank_counts = hand.count_ranks()
    suit_counts = hand.count_suits()
    shape = count_shape(rank_counts)

    straight = is_straight(rank_counts)
    flush = is_flush(suit_counts)

    if straight and flush:
        return HandCategory.StraightFlush
    if shape == (4, 1):
        return HandCategory.FourOfAKind
    if shape == (3, 2):
        return HandCategory.FullHouse
    if flush:
        return HandCategory.Flush
    if straight:
        return HandCategory.Straight
    if shape == (3, 1, 1):
        return HandCategory.ThreeOfAKind
    if shape == (2, 2, 1):
        return HandCategory.TwoPair
    if shape == (2, 1, 1, 1):
        return HandCategory.Pair
    return HandCategory.HighCard
