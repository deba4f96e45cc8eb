# evaluation/engine.py
import random
from typing import Optional, Tuple

# 1. 解析：文字 -> Hand
from core.parser import parse_hand

# 2. 發牌
from features.cards import Hand
from features.deck import draw_hand

# 3. 牌型判斷
from .hand_eval import HandCategory, classify


def analyze(raw_text: str) -> HandCategory:
    """
    分析入口：'tr,jr,qr,kr,1r' -> HandCategory.StraightFlush
    Raises a core.errors.ParseError subclass when the text is not a valid hand.
    """
    hand = parse_hand(raw_text)
    return classify(hand)


def draw(rng: Optional[random.Random] = None) -> Tuple[Hand, HandCategory]:
    """發牌入口：隨機抽五張並回傳 (hand, category)。"""
    hand = draw_hand(rng)
    return hand, classify(hand)
