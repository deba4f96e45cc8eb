# evaluation package
# Hand classification plus the analyze / draw entry points used by the web layer

from .hand_eval import HandCategory, classify  # noqa: F401
from .engine import analyze, draw  # noqa: F401

__all__ = [
    "HandCategory",
    "classify",
    "analyze",
    "draw",
]
