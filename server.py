# server.py
import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List
import traceback

from core.config import PORT_SCAN_RANGE, SERVER_HOST, SERVER_PORT
from core.errors import ParseError
from evaluation.engine import analyze, draw

app = FastAPI(title="Poker Hand API")


class CardOut(BaseModel):
    rank: str
    suit: str
    code: str


class HandOut(BaseModel):
    cards: List[CardOut]
    notation: str


class DrawResponse(BaseModel):
    hand: HandOut
    category: str


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/draw", response_model=DrawResponse)
def draw_and_analyze():
    """
    從 52 張牌中隨機抽五張，回傳手牌與牌型。
    """
    try:
        hand, category = draw()
    except Exception as e:
        print(f"System Error in /draw: {e}")
        traceback.print_exc()
        raise HTTPException(status_code=500, detail="Failed to draw a hand")
    return DrawResponse(hand=hand.to_dict(), category=category.label)


@app.get("/analyze/{cards}", response_model=str)
def analyze_cards(cards: str):
    """
    分析五張手牌，cards 為逗號分隔，例如 /analyze/tr,jr,qr,kr,1r -> "StraightFlush"
    """
    try:
        category = analyze(cards)
    except ParseError as pe:
        raise HTTPException(status_code=400, detail=pe.to_dict())
    except Exception as e:
        print(f"System Error in /analyze: {e}")
        traceback.print_exc()
        raise HTTPException(status_code=500, detail="Failed to analyze hand")
    return category.label


if __name__ == "__main__":
    from find_port import find_free_port

    port = SERVER_PORT
    if port is None:
        port = find_free_port(SERVER_HOST, *PORT_SCAN_RANGE)
    if not port:
        print(f"❌ Error: Could not find a free port between {PORT_SCAN_RANGE[0]} and {PORT_SCAN_RANGE[1]}.")
        exit(1)

    print(f"🚀 Starting server on {SERVER_HOST}:{port}...")

    config = uvicorn.Config(app, host=SERVER_HOST, port=port)
    server_instance = uvicorn.Server(config)
    server_instance.run()
