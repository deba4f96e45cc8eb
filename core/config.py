# core/config.py
"""
全域設定檔：撲克牌面符號表與服務參數
"""
import os
from pathlib import Path

from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=ENV_PATH)

# 撲克基礎
HAND_SIZE = 5
CARD_DELIMITER = ","

# Rank symbols, canonical symbol first. Ace is "1" on the wire, "a" is an alias.
RANK_SYMBOLS = {
    "ACE": "1a",
    "TWO": "2",
    "THREE": "3",
    "FOUR": "4",
    "FIVE": "5",
    "SIX": "6",
    "SEVEN": "7",
    "EIGHT": "8",
    "NINE": "9",
    "TEN": "t",
    "JACK": "j",
    "QUEEN": "q",
    "KING": "k",
}

# Suit letters follow the Norwegian names (kløver, ruter, hjerter, spar);
# "c" and "d" are accepted as English aliases.
SUIT_SYMBOLS = {
    "CLUBS": "kc",
    "DIAMONDS": "rd",
    "HEARTS": "h",
    "SPADES": "s",
}

# ==========================================
# 服務設定：從環境變數 / .env 取得
# ==========================================

SERVER_HOST = os.getenv("POKER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("POKER_PORT")) if os.getenv("POKER_PORT") else None
PORT_SCAN_RANGE = (8080, 8100)

API_URL = os.getenv("POKER_API_URL", "http://localhost:8080")
API_TIMEOUT = float(os.getenv("POKER_API_TIMEOUT", "10"))
