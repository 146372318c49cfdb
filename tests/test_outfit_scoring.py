"""Tests for per-item fit helpers and the weighted outfit score."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.outfit_scoring import WEIGHTS, item_mood_fit, item_weather_fit, score_outfit
from models.mood_styles import get_mood_style, get_weather_style
from models.wardrobe_item import WardrobeItem


def _item(item_id, category, color="white", tags=None, season=None, favorite=False):
    return WardrobeItem(
        item_id=item_id,
        name=f"{category} {item_id}",
        category=category,
        color=color,
        tags=tags or [],
        season=season or ["all"],
        favorite=favorite,
    )


def test_weather_fit_rewards_suited_fabrics():
    hot = get_weather_style("hot")
    linen = _item(1, "top", tags=["linen", "breathable"], season=["summer"])
    wool = _item(2, "top", tags=["wool", "knit"], season=["winter"])

    assert item_weather_fit(linen, hot) == pytest.approx(1.0)
    assert item_weather_fit(wool, hot) == pytest.approx(0.0)


def test_mood_fit_combines_tags_and_palette():
    relaxed = get_mood_style("relaxed")
    cozy = _item(1, "top", color="beige", tags=["cozy", "soft"])
    loud = _item(2, "top", color="red", tags=["sequin"])

    assert item_mood_fit(cozy, relaxed) == pytest.approx(1.0)
    assert item_mood_fit(loud, relaxed) == pytest.approx(0.0)


def test_score_is_bounded_and_breakdown_sums_to_score():
    outfit = [_item(1, "top", "white"), _item(2, "bottom", "navy"), _item(3, "shoes", "brown")]
    result = score_outfit(outfit, "sunny", "happy", occasion="casual")

    assert 0.0 <= result.score <= 100.0
    assert sum(result.breakdown.values()) == pytest.approx(result.score, abs=1e-9)
    assert set(result.breakdown) == set(WEIGHTS)


def test_occasion_factor_is_dropped_when_unresolved():
    outfit = [_item(1, "top"), _item(2, "bottom")]
    result = score_outfit(outfit, "mild", "relaxed")

    assert "occasion" not in result.breakdown
    assert sum(result.breakdown.values()) == pytest.approx(result.score, abs=1e-9)


def test_favorites_raise_the_score():
    plain = [_item(1, "top"), _item(2, "bottom", "navy")]
    loved = [_item(1, "top", favorite=True), _item(2, "bottom", "navy")]

    assert score_outfit(loved, "mild", "happy").score > score_outfit(plain, "mild", "happy").score


def test_outerwear_lifts_weather_fit_in_rain():
    base = [_item(1, "top"), _item(2, "bottom", "navy")]
    coat = _item(3, "outerwear", "beige", tags=["waterproof"], season=["fall"])

    without = score_outfit(base, "rainy", "professional")
    with_coat = score_outfit(base + [coat], "rainy", "professional")
    assert with_coat.sub_scores["weather"] > without.sub_scores["weather"]
    assert with_coat.sub_scores["completeness"] > without.sub_scores["completeness"]


def test_clashing_colors_score_lower_than_neutrals():
    neutral = [_item(1, "top", "white"), _item(2, "bottom", "navy")]
    clashing = [_item(1, "top", "red"), _item(2, "bottom", "pink")]

    neutral_result = score_outfit(neutral, "mild", "creative")
    clash_result = score_outfit(clashing, "mild", "creative")
    assert clash_result.harmony_rule == "clash"
    assert clash_result.sub_scores["color"] < neutral_result.sub_scores["color"]


def test_perfect_outfit_points_add_up_to_exactly_one_hundred():
    coat = _item(3, "outerwear", "white", tags=["wool", "warm", "tailored", "structured"], season=["winter"], favorite=True)
    shoes = _item(4, "shoes", "white", tags=["wool", "warm", "tailored", "structured"], season=["winter"], favorite=True)
    bag = _item(5, "accessory", "white", tags=["wool", "warm", "tailored", "structured"], season=["winter"], favorite=True)
    top = _item(1, "top", "white", tags=["wool", "warm", "tailored", "structured"], season=["winter"], favorite=True)
    bottom = _item(2, "bottom", "white", tags=["wool", "warm", "tailored", "structured"], season=["winter"], favorite=True)

    result = score_outfit([top, bottom, coat, shoes, bag], "cold", "professional")

    assert result.score == pytest.approx(100.0)
    assert all(value <= 100.0 for value in result.breakdown.values())
    assert sum(result.breakdown.values()) == pytest.approx(100.0, abs=1e-9)
    assert result.breakdown["weather"] == pytest.approx(31.58)
