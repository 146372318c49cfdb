"""Tests for the Gemini stylist client and its typed failure results."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from types import SimpleNamespace

from google.api_core import exceptions as google_exceptions

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.wardrobe_item import WardrobeItem
from tools.stylist_client import AIErrorKind, GeminiStylistClient, build_prompt, classify_api_error


class _FakeModel:
    def __init__(self, text: str | None = None, error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    def generate_content(self, prompt: str):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def _wardrobe():
    return [
        WardrobeItem(item_id=1, name="Linen shirt", category="top", color="white", tags=["linen"]),
        WardrobeItem(item_id=2, name="Chinos", category="bottom", color="beige"),
    ]


def _payload(count: int = 1) -> str:
    outfits = [
        {
            "name": f"Look {index}",
            "item_ids": [1, 2],
            "styling_tip": "Roll the sleeves",
            "reasoning": "Breathable layers",
            "confidence_score": 80,
        }
        for index in range(count)
    ]
    return json.dumps({"outfits": outfits})


def test_successful_response_becomes_suggestions():
    model = _FakeModel(text=_payload(count=4))
    client = GeminiStylistClient(model=model)

    result = client.suggest_outfits(_wardrobe(), "hot", "relaxed", occasion="brunch", count=2)

    assert result.ok
    assert len(result.suggestions) == 2
    assert result.suggestions[0].item_ids == [1, 2]
    assert result.suggestions[0].confidence == 80
    assert "Occasion: brunch" in model.prompts[0]


def test_rate_limit_is_a_typed_failure():
    client = GeminiStylistClient(model=_FakeModel(error=google_exceptions.ResourceExhausted("quota exceeded")))

    result = client.suggest_outfits(_wardrobe(), "hot", "relaxed")

    assert not result.ok
    assert result.failure.kind is AIErrorKind.RATE_LIMITED
    assert result.suggestions == []


def test_permission_denied_is_auth_failure():
    client = GeminiStylistClient(model=_FakeModel(error=google_exceptions.PermissionDenied("bad key")))

    assert client.suggest_outfits(_wardrobe(), "mild", "happy").failure.kind is AIErrorKind.AUTH_FAILED


def test_malformed_json_is_invalid_response():
    client = GeminiStylistClient(model=_FakeModel(text="Sure! Here are some outfits"))

    assert client.suggest_outfits(_wardrobe(), "mild", "happy").failure.kind is AIErrorKind.INVALID_RESPONSE


def test_schema_violations_are_invalid_response():
    bad = json.dumps({"outfits": [{"name": "Empty", "item_ids": []}]})
    client = GeminiStylistClient(model=_FakeModel(text=bad))

    assert client.suggest_outfits(_wardrobe(), "mild", "happy").failure.kind is AIErrorKind.INVALID_RESPONSE


def test_missing_api_key_fails_without_calling_gemini():
    client = GeminiStylistClient(api_key=None)

    result = client.suggest_outfits(_wardrobe(), "mild", "happy")
    assert result.failure.kind is AIErrorKind.AUTH_FAILED


def test_classify_api_error_defaults_to_unknown():
    assert classify_api_error(google_exceptions.TooManyRequests("slow down")) is AIErrorKind.RATE_LIMITED
    assert classify_api_error(google_exceptions.Unauthenticated("who")) is AIErrorKind.AUTH_FAILED
    assert classify_api_error(google_exceptions.InternalServerError("boom")) is AIErrorKind.UNKNOWN


def test_prompt_lists_every_item_id():
    prompt = build_prompt(_wardrobe(), "hot", "relaxed", None, 3)

    assert "id 1: Linen shirt" in prompt
    assert "id 2: Chinos" in prompt
    assert "Occasion" not in prompt


def test_transport_errors_become_unknown_failures():
    client = GeminiStylistClient(model=_FakeModel(error=ConnectionError("connection reset by peer")))

    result = client.suggest_outfits(_wardrobe(), "mild", "happy")

    assert not result.ok
    assert result.failure.kind is AIErrorKind.UNKNOWN
    assert "ConnectionError" in result.failure.message
