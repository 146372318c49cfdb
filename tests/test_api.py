"""HTTP-level tests for the FastAPI surface."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from server.api import create_app
from stylist_app.app import StylistApp
from stylist_app.config import StylistConfig
from tools.stylist_client import AIErrorKind, AIResult, AISuggestion


class _FakeClient:
    def __init__(self, result: AIResult) -> None:
        self.result = result

    def suggest_outfits(self, wardrobe, weather, mood, occasion=None, count=3):
        return self.result


WARDROBE = [
    {"item_id": 1, "name": "Oxford shirt", "category": "top", "color": "white", "tags": ["classic"]},
    {"item_id": 2, "name": "Wool trousers", "category": "bottom", "color": "gray", "season": ["fall", "winter"]},
    {"item_id": 3, "name": "Trench", "category": "outerwear", "color": "beige", "season": ["fall", "spring"]},
    {"item_id": 4, "name": "Loafers", "category": "shoes", "color": "brown"},
]


def _client(result: AIResult | None = None) -> TestClient:
    fake = _FakeClient(result) if result is not None else None
    config = StylistConfig(api_key="test-key", environment="test", enable_ai_recommendations=fake is not None)
    return TestClient(create_app(StylistApp(config=config, client=fake)))


def test_healthcheck_reports_ai_state():
    response = _client(AIResult()).get("/healthz")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["environment"] == "test"
    assert body["ai_enabled"] is True


def test_outfits_endpoint_prefers_ai():
    suggestion = AISuggestion(name="Office classic", item_ids=[1, 2, 4], confidence=90)
    response = _client(AIResult(suggestions=[suggestion])).post(
        "/recommendations/outfits", json={"wardrobe": WARDROBE, "weather": "cloudy", "mood": "professional"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "ai"
    assert body["outfits"][0]["item_ids"] == [1, 2, 4]


def test_outfits_endpoint_falls_back_on_rate_limit():
    response = _client(AIResult.failed(AIErrorKind.RATE_LIMITED, "quota")).post(
        "/recommendations/outfits",
        json={"wardrobe": WARDROBE, "condition": "light rain", "temperature": 11, "mood": "professional", "count": 2},
    )

    body = response.json()
    assert response.status_code == 200
    assert body["source"] == "engine"
    assert body["fallback_reason"] == "rate_limited"
    assert body["weather"] == "rainy"
    assert body["outfits"]
    assert all(3 in outfit["item_ids"] for outfit in body["outfits"])


def test_fallback_endpoint_uses_engine_only():
    response = _client().post(
        "/recommendations/fallback", json={"wardrobe": WARDROBE, "weather": "cold", "mood": "confident"}
    )

    body = response.json()
    assert response.status_code == 200
    assert body["source"] == "engine"
    assert body["fallback_reason"] is None


@pytest.mark.parametrize(
    "payload",
    [
        {"wardrobe": WARDROBE, "mood": "happy"},
        {"wardrobe": WARDROBE, "weather": "tornado", "mood": "happy"},
        {"wardrobe": WARDROBE, "weather": "sunny", "mood": "grumpy"},
        {"wardrobe": WARDROBE, "weather": "sunny", "mood": "happy", "count": 0},
    ],
)
def test_malformed_requests_are_rejected(payload):
    assert _client().post("/recommendations/outfits", json=payload).status_code == 422


def test_unknown_category_entries_are_skipped():
    wardrobe = WARDROBE + [{"item_id": 9, "name": "Hoverboard", "category": "vehicle"}]
    response = _client().post(
        "/recommendations/fallback", json={"wardrobe": wardrobe, "weather": "sunny", "mood": "happy"}
    )

    body = response.json()
    assert response.status_code == 200
    assert body["outfits"]
    assert all(9 not in outfit["item_ids"] for outfit in body["outfits"])
    assert body["debug_summary"]["input_count"] == len(WARDROBE)


def test_weather_classification_endpoint():
    response = _client().post("/weather/classify", json={"temperature": 31})

    assert response.status_code == 200
    assert response.json()["weather"] == "hot"
