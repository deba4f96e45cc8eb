"""
52-card deck and random five-card draws.
"""
import itertools
import random
from typing import Optional, Tuple

from core.config import HAND_SIZE
from .cards import Card, Hand, Rank, Suit

DECK: Tuple[Card, ...] = tuple(
    Card(rank, suit) for suit, rank in itertools.product(Suit, Rank)
)


def draw_hand(rng: Optional[random.Random] = None) -> Hand:
    """
    Draw five distinct cards uniformly from the full deck (no replacement).
    Pass a seeded random.Random to get a reproducible draw.
    """
    sampler = rng if rng is not None else random
    return Hand(sampler.sample(DECK, HAND_SIZE))
