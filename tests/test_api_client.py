# tests/test_api_client.py
import pytest
import requests

from services import api_client


class _FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code
        self.text = str(payload)

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def calls(monkeypatch):
    seen = []
    responses = {}

    def fake_get(url, timeout=None):
        seen.append((url, timeout))
        return responses.get(url, _FakeResponse({"detail": "not found"}, 404))

    monkeypatch.setattr(api_client.requests, "get", fake_get)
    return seen, responses


def test_analyze_remote(calls):
    seen, responses = calls
    responses["http://poker.test/analyze/tr,jr,qr,kr,1r"] = _FakeResponse("StraightFlush")
    assert api_client.analyze_remote("tr,jr,qr,kr,1r", base_url="http://poker.test/") == "StraightFlush"
    assert seen == [("http://poker.test/analyze/tr,jr,qr,kr,1r", api_client.API_TIMEOUT)]


def test_draw_remote(calls):
    _, responses = calls
    payload = {"hand": {"cards": [], "notation": "2k,3k,4k,5k,6k"}, "category": "StraightFlush"}
    responses["http://poker.test/draw"] = _FakeResponse(payload)
    assert api_client.draw_remote(base_url="http://poker.test") == payload


def test_bad_hand_raises_http_error(calls):
    _, responses = calls
    responses["http://poker.test/analyze/tr,jr"] = _FakeResponse(
        {"detail": {"error": "WrongCardCount"}}, status_code=400
    )
    with pytest.raises(requests.HTTPError):
        api_client.analyze_remote("tr,jr", base_url="http://poker.test")


def test_main_prints_category(calls, monkeypatch, capsys):
    _, responses = calls
    monkeypatch.setattr(api_client, "API_URL", "http://poker.test")
    responses["http://poker.test/analyze/7s,7h,7r,2k,2s"] = _FakeResponse("FullHouse")
    assert api_client.main(["7s,7h,7r,2k,2s"]) == 0
    assert capsys.readouterr().out.strip() == "FullHouse"


def test_main_reports_http_error(calls, monkeypatch, capsys):
    monkeypatch.setattr(api_client, "API_URL", "http://poker.test")
    assert api_client.main([]) == 1
    assert "404" in capsys.readouterr().out
