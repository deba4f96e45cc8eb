"""
Core parsing logic: card tokens and comma-separated hands.

Accepted alphabet (case-insensitive, surrounding whitespace ignored):
    ranks  1/a (ace), 2-9, t (ten), j, q, k
    suits  k/c (clubs), r/d (diamonds), h (hearts), s (spades)
"""
from typing import Dict

from core.config import CARD_DELIMITER, HAND_SIZE, RANK_SYMBOLS, SUIT_SYMBOLS
from core.errors import (
    InvalidRankSymbol,
    InvalidSuitSymbol,
    MalformedToken,
    WrongCardCount,
)
from features.cards import Card, Hand, Rank, Suit

# ==============================================================================
# Symbol Maps
# ==============================================================================

# Keys are the ASCII symbols in both cases; lookups never go through str.lower().
RANK_BY_SYMBOL: Dict[str, Rank] = {
    key: Rank[name]
    for name, symbols in RANK_SYMBOLS.items()
    for sym in symbols
    for key in (sym, sym.upper())
}
SUIT_BY_SYMBOL: Dict[str, Suit] = {
    key: Suit[name]
    for name, symbols in SUIT_SYMBOLS.items()
    for sym in symbols
    for key in (sym, sym.upper())
}

# ==============================================================================
# Card & Hand Parsing
# ==============================================================================

def parse_card(token: str) -> Card:
    """Parse a two-character token (e.g. 'tr') into a Card."""
    raw = str(token).strip()
    if len(raw) != 2:
        raise MalformedToken(token)
    rank = RANK_BY_SYMBOL.get(raw[0])
    if rank is None:
        raise InvalidRankSymbol(raw[0])
    suit = SUIT_BY_SYMBOL.get(raw[1])
    if suit is None:
        raise InvalidSuitSymbol(raw[1])
    return Card(rank, suit)


def split_tokens(text: str) -> list:
    """ 'tr,jr,qr' -> ['tr', 'jr', 'qr'] """
    if text is None:
        return []
    return str(text).split(CARD_DELIMITER)


def parse_hand(text: str) -> Hand:
    """
    Parse 'tr,jr,qr,kr,1r' into a Hand, keeping input order.
    The card count is checked before any token is parsed; the first bad token wins.
    """
    tokens = split_tokens(text)
    if len(tokens) != HAND_SIZE:
        raise WrongCardCount(len(tokens), HAND_SIZE)

    cards = [parse_card(tok) for tok in tokens]

    # Hand raises DuplicateCard
    return Hand(cards)
