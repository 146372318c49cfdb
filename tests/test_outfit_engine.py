"""Tests for the deterministic outfit engine entry points."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.contextual_filtering import season_compatible
from logic.outfit_engine import generate, recommend
from models.taxonomy import MOODS, WEATHER_CATEGORIES


def _wardrobe():
    return [
        {"id": 1, "name": "White tee", "category": "top", "color": "white", "tags": ["breathable", "casual"], "season": ["all"]},
        {"id": 2, "name": "Wool turtleneck", "category": "top", "color": "black", "tags": ["wool", "knit"], "season": ["winter"]},
        {"id": 3, "name": "Silk blouse", "category": "top", "color": "pink", "tags": ["silk", "romantic"], "season": ["spring", "summer"]},
        {"id": 4, "name": "Navy chinos", "category": "bottom", "color": "navy", "season": ["all"]},
        {"id": 5, "name": "Flannel trousers", "category": "bottom", "color": "gray", "tags": ["wool"], "season": ["fall", "winter"]},
        {"id": 6, "name": "Floral dress", "category": "dress", "color": "yellow", "tags": ["floral", "flowy"], "season": ["summer"]},
        {"id": 7, "name": "Rain jacket", "category": "outerwear", "color": "green", "tags": ["waterproof", "hooded"], "season": ["spring", "fall"]},
        {"id": 8, "name": "Puffer", "category": "outerwear", "color": "black", "tags": ["insulated", "down"], "season": ["winter"]},
        {"id": 9, "name": "Sneakers", "category": "shoes", "color": "white", "tags": ["comfortable"], "season": ["all"]},
        {"id": 10, "name": "Snow boots", "category": "shoes", "color": "brown", "tags": ["waterproof", "insulated"], "season": ["winter"]},
        {"id": 11, "name": "Tote", "category": "accessory", "color": "beige", "season": ["all"], "favorite": True},
    ]


def _slots_valid(candidate):
    categories = list(candidate.categories)
    separates = categories.count("top") == 1 and categories.count("bottom") == 1 and "dress" not in categories
    dress = categories.count("dress") == 1 and "top" not in categories and "bottom" not in categories
    return separates or dress


@pytest.mark.parametrize("weather", WEATHER_CATEGORIES)
@pytest.mark.parametrize("mood", MOODS)
def test_candidates_respect_count_slots_and_seasons(weather, mood):
    candidates = generate(_wardrobe(), weather, mood, count=4)

    assert len(candidates) <= 4
    for candidate in candidates:
        assert _slots_valid(candidate)
        assert all(season_compatible(item, weather) for item in candidate.items)
        assert 0.0 <= candidate.score <= 100.0
    scores = [candidate.score for candidate in candidates]
    assert scores == sorted(scores, reverse=True)


def test_repeated_calls_are_identical():
    first = generate(_wardrobe(), "rainy", "professional", count=5, occasion="work")
    second = generate(_wardrobe(), "rainy", "professional", count=5, occasion="work")

    assert [c.item_ids for c in first] == [c.item_ids for c in second]
    assert [c.score for c in first] == [c.score for c in second]


def test_empty_wardrobe_returns_empty_list():
    assert generate([], "sunny", "happy", 3) == []


def test_hot_day_excludes_winter_top():
    wardrobe = [
        {"id": 1, "category": "top", "color": "white", "tags": ["breathable"], "season": ["all"]},
        {"id": 2, "category": "bottom", "color": "navy", "season": ["all"]},
        {"id": 3, "category": "top", "color": "black", "tags": ["wool"], "season": ["winter"]},
    ]
    candidates = generate(wardrobe, "hot", "relaxed", 2)

    assert len(candidates) == 1
    assert candidates[0].item_ids == (1, 2)


def test_shoes_and_accessories_alone_yield_nothing():
    wardrobe = [item for item in _wardrobe() if item["category"] in {"shoes", "accessory"}]
    for weather in ("sunny", "snowy"):
        assert generate(wardrobe, weather, "happy", 3) == []


def test_rainy_outfits_include_outerwear():
    candidates = generate(_wardrobe(), "rainy", "relaxed", count=3)

    assert candidates
    assert all("outerwear" in candidate.categories for candidate in candidates)


def test_count_larger_than_candidates_returns_all():
    wardrobe = [
        {"id": 1, "category": "top", "color": "white", "season": ["all"]},
        {"id": 2, "category": "bottom", "color": "navy", "season": ["all"]},
        {"id": 3, "category": "bottom", "color": "beige", "season": ["all"]},
    ]
    assert len(generate(wardrobe, "mild", "happy", 10)) == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"weather": "tornado", "mood": "happy", "count": 3},
        {"weather": "sunny", "mood": "grumpy", "count": 3},
        {"weather": "sunny", "mood": "happy", "count": 0},
        {"weather": "sunny", "mood": "happy", "count": -2},
        {"weather": "sunny", "mood": "happy", "count": True},
    ],
)
def test_malformed_inputs_raise(kwargs):
    with pytest.raises(ValueError):
        generate(_wardrobe(), **kwargs)


def test_foreign_and_invalid_entries_are_skipped():
    wardrobe = _wardrobe() + [
        {"id": 50, "category": "top", "color": "red", "userId": 99},
        {"name": "missing id", "category": "top"},
        {"id": 51, "category": "spaceship"},
    ]
    result = recommend(wardrobe, "mild", "happy", count=20, user_id=1)

    assert result.diagnostics["input_count"] == len(_wardrobe()) + 1
    assert result.diagnostics["removed"][50] == "belongs to another user"
    assert all(50 not in candidate.item_ids for candidate in result.candidates)


def test_diagnostics_describe_each_step():
    result = recommend(_wardrobe(), "hot", "relaxed", count=2, occasion="beach trip")

    assert result.diagnostics["occasion"] == "travel"
    assert result.diagnostics["returned"] == len(result.candidates)
    assert 2 in result.diagnostics["removed"]
    assert result.diagnostics["generation"]["combinations_generated"] == result.diagnostics["candidates_scored"]
