import sys
import requests
from typing import Any, Dict, Optional

from core.config import API_TIMEOUT, API_URL


# ==========================================
# 連線設定集中管理：base URL / timeout 來自環境變數 (見 core/config.py)
# ==========================================

def _get(path: str, base_url: Optional[str] = None) -> Any:
    url = f"{(base_url or API_URL).rstrip('/')}{path}"
    response = requests.get(url, timeout=API_TIMEOUT)
    response.raise_for_status()
    return response.json()


def draw_remote(base_url: Optional[str] = None) -> Dict[str, Any]:
    """GET /draw -> {"hand": {...}, "category": "..."}"""
    return _get("/draw", base_url)


def analyze_remote(cards: str, base_url: Optional[str] = None) -> str:
    """GET /analyze/<cards> -> category label. Raises requests.HTTPError on a 400."""
    return _get(f"/analyze/{cards.strip()}", base_url)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        if args:
            print(analyze_remote(args[0]))
        else:
            data = draw_remote()
            print(f"{data['hand']['notation']} -> {data['category']}")
    except requests.HTTPError as e:
        print(f"[Error] {e.response.status_code}: {e.response.text}")
        return 1
    except requests.RequestException as e:
        print(f"[Error] API Call failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
