"""Deterministic scoring for candidate outfits."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Sequence

from models.color_theory import evaluate_harmony
from models.mood_styles import (
    OCCASION_TAGS,
    MoodStyleProfile,
    WeatherStyleProfile,
    get_mood_style,
    get_weather_style,
)
from models.taxonomy import LAYERING_WEATHER
from models.wardrobe_item import WardrobeItem

WEIGHTS = {
    "weather": 0.30,
    "mood": 0.25,
    "color": 0.25,
    "occasion": 0.15,
    "favorite": 0.10,
    "completeness": 0.05,
}

FAVORITE_RELEVANCE_BONUS = 0.25
MISSING_LAYER_SCORE = 0.4


@dataclass(frozen=True)
class ScoreResult:
    score: float
    sub_scores: Dict[str, float]
    breakdown: Dict[str, float]
    harmony_rule: str
    explanation: Dict[str, str]


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _item_terms(item: WardrobeItem) -> set:
    terms = set(item.tags)
    if item.subcategory:
        terms.add(item.subcategory)
    return terms


def item_weather_fit(item: WardrobeItem, profile: WeatherStyleProfile) -> float:
    """Reward weather-suited tags and seasons, penalise near-miss tags."""

    terms = _item_terms(item)
    favoured = len(terms.intersection(profile.favoured_tags))
    avoided = len(terms.intersection(profile.avoided_tags))
    value = 0.5 + 0.25 * min(favoured, 2) - 0.3 * min(avoided, 2)
    if set(item.season).intersection(profile.preferred_seasons):
        value += 0.15
    return _clamp(value)


def item_mood_fit(item: WardrobeItem, profile: MoodStyleProfile) -> float:
    overlap = len(_item_terms(item).intersection(profile.style_tags))
    tag_part = min(1.0, overlap / 2)
    color_part = 1.0 if item.color in profile.palette else 0.0
    return 0.7 * tag_part + 0.3 * color_part


def item_occasion_fit(item: WardrobeItem, occasion_tags: FrozenSet[str]) -> float:
    overlap = len(_item_terms(item).intersection(occasion_tags))
    return min(1.0, overlap / 2)


def item_relevance(
    item: WardrobeItem,
    weather_profile: WeatherStyleProfile,
    mood_profile: MoodStyleProfile,
    occasion: Optional[str] = None,
) -> float:
    """Single-item heuristic used to rank per-slot pools before generation."""

    value = item_weather_fit(item, weather_profile) + item_mood_fit(item, mood_profile)
    if occasion:
        value += item_occasion_fit(item, OCCASION_TAGS[occasion])
    if item.favorite:
        value += FAVORITE_RELEVANCE_BONUS
    return value


def _layering_score(items: Sequence[WardrobeItem], weather: str) -> float:
    if weather not in LAYERING_WEATHER:
        return 1.0
    return 1.0 if any(item.category == "outerwear" for item in items) else MISSING_LAYER_SCORE


def _apportion_points(points: Dict[str, float]) -> Dict[str, float]:
    """Round points to cents so that they add up to the rounded total.

    Cents lost to flooring go to the factors with the largest remainders.
    """

    total_cents = round(sum(points.values()) * 100)
    cents = {name: math.floor(value * 100) for name, value in points.items()}
    missing = max(0, total_cents - sum(cents.values()))
    by_remainder = sorted(points, key=lambda name: (-(points[name] * 100 - cents[name]), name))
    for name in by_remainder[:missing]:
        cents[name] += 1
    return {name: value / 100 for name, value in cents.items()}


def optional_slots_for(weather: str) -> Sequence[str]:
    if weather in LAYERING_WEATHER:
        return ("outerwear", "shoes", "accessory")
    return ("shoes", "accessory")


def score_outfit(
    outfit_items: Sequence[WardrobeItem],
    weather: WeatherStyleProfile | str,
    mood: MoodStyleProfile | str,
    occasion: Optional[str] = None,
) -> ScoreResult:
    """Calculate the 0-100 confidence, sub scores and per-factor points.

    ``occasion`` must already be resolved to a key of ``OCCASION_TAGS``; when
    it is ``None`` the occasion factor is left out and the remaining weights
    are renormalised.
    """

    weather_profile = weather if isinstance(weather, WeatherStyleProfile) else get_weather_style(weather)
    mood_profile = mood if isinstance(mood, MoodStyleProfile) else get_mood_style(mood)
    items = list(outfit_items)

    weather_val = _clamp(
        0.8 * _mean([item_weather_fit(item, weather_profile) for item in items])
        + 0.2 * _layering_score(items, weather_profile.name)
    )
    mood_val = _clamp(_mean([item_mood_fit(item, mood_profile) for item in items]))
    harmony = evaluate_harmony(item.color for item in items)
    color_val = _clamp(harmony.score)
    favorite_val = _clamp(_mean([1.0 if item.favorite else 0.0 for item in items]))
    optional_slots = optional_slots_for(weather_profile.name)
    filled = sum(1 for slot in optional_slots if any(item.category == slot for item in items))
    completeness_val = filled / len(optional_slots)

    sub_scores = {
        "weather": weather_val,
        "mood": mood_val,
        "color": color_val,
        "favorite": favorite_val,
        "completeness": completeness_val,
    }
    if occasion:
        sub_scores["occasion"] = _clamp(_mean([item_occasion_fit(item, OCCASION_TAGS[occasion]) for item in items]))

    total_weight = sum(WEIGHTS[name] for name in sub_scores)
    points = {name: 100.0 * WEIGHTS[name] * value / total_weight for name, value in sub_scores.items()}
    breakdown = _apportion_points(points)
    score = round(sum(breakdown.values()), 2)

    explanation = {
        "weather": f"{weather_profile.name} fit {weather_val:.2f}",
        "mood": f"mood overlap {mood_val:.2f} with {mood_profile.name}",
        "color": f"harmony {harmony.rule_used}",
        "favorite": f"{int(round(favorite_val * len(items)))} favorite pieces",
        "completeness": f"{filled}/{len(optional_slots)} optional slots filled",
    }
    if occasion:
        explanation["occasion"] = f"occasion {occasion} fit {sub_scores['occasion']:.2f}"

    return ScoreResult(
        score=score,
        sub_scores={name: round(value, 4) for name, value in sub_scores.items()},
        breakdown=breakdown,
        harmony_rule=harmony.rule_used,
        explanation=explanation,
    )


__all__ = [
    "WEIGHTS",
    "ScoreResult",
    "item_mood_fit",
    "item_occasion_fit",
    "item_relevance",
    "item_weather_fit",
    "optional_slots_for",
    "score_outfit",
]
