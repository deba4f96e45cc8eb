# tests/test_server.py
import pytest
from fastapi.testclient import TestClient

from server import app

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_draw_returns_hand_and_category():
    resp = client.get("/draw")
    assert resp.status_code == 200
    data = resp.json()
    cards = data["hand"]["cards"]
    assert len(cards) == 5
    assert len({c["code"] for c in cards}) == 5
    assert data["hand"]["notation"] == ",".join(c["code"] for c in cards)

    # the reported category must match what /analyze says for the same hand
    again = client.get(f"/analyze/{data['hand']['notation']}")
    assert again.json() == data["category"]


@pytest.mark.parametrize("cards, label", [
    ("tr,jr,qr,kr,1r", "StraightFlush"),
    ("1s,2s,3s,4s,5s", "StraightFlush"),
    ("1s,2h,3r,4k,7s", "HighCard"),
    ("7s,7h,7r,2k,2s", "FullHouse"),
    ("JS,JH,4R,5K,9S", "Pair"),
])
def test_analyze(cards, label):
    resp = client.get(f"/analyze/{cards}")
    assert resp.status_code == 200
    assert resp.json() == label


@pytest.mark.parametrize("cards, error", [
    ("tr,jr,qr,kr", "WrongCardCount"),
    ("tr,jr,qr,kr,xr", "InvalidRankSymbol"),
    ("tr,jr,qr,kr,1p", "InvalidSuitSymbol"),
    ("tr,jr,qr,kr,10r", "MalformedToken"),
    ("tr,tr,qr,kr,1r", "DuplicateCard"),
    ("\u212Ah,jr,qr,kr,1r", "InvalidRankSymbol"),
])
def test_analyze_rejects_bad_input(cards, error):
    resp = client.get(f"/analyze/{cards}")
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["error"] == error
    assert detail["message"]
