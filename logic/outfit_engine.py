"""Deterministic outfit recommendation engine.

``generate`` is the fallback used when the AI stylist cannot answer. It is a
pure function of its inputs: the wardrobe is filtered by ownership and by
season compatibility with the weather, category-valid combinations are
enumerated over bounded per-slot pools, every combination is scored and the
best ``count`` candidates are returned. Expected edge cases (empty wardrobe,
no complete outfit, ``count`` larger than the number of outfits) produce a
short or empty list; only malformed weather, mood or count values raise.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

from logic.contextual_filtering import filter_by_owner, filter_by_weather
from logic.outfit_builder import generate_candidates
from logic.outfit_scoring import score_outfit
from models.mood_styles import get_mood_style, get_weather_style, resolve_occasion
from models.outfit import OutfitCandidate
from models.wardrobe_item import WardrobeItem, from_raw_metadata

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 3

WardrobeInput = Iterable[Union[WardrobeItem, Dict[str, Any]]]


@dataclass(frozen=True)
class EngineResult:
    candidates: List[OutfitCandidate]
    diagnostics: Dict[str, object]


def validate_count(count: Any) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"count must be a positive integer, got {count!r}")
    if count <= 0:
        raise ValueError(f"count must be a positive integer, got {count}")
    return count


def coerce_items(raw_items: WardrobeInput) -> List[WardrobeItem]:
    items: List[WardrobeItem] = []
    for raw in raw_items:
        if isinstance(raw, WardrobeItem):
            items.append(raw)
            continue
        try:
            items.append(from_raw_metadata(raw))
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning("Skipping wardrobe entry due to validation error: %s", exc)
    return items


def recommend(
    wardrobe: WardrobeInput,
    weather: str,
    mood: str,
    count: int = DEFAULT_COUNT,
    occasion: Optional[str] = None,
    user_id: Optional[int] = None,
) -> EngineResult:
    """Run the engine and keep the per-step diagnostics alongside the ranking."""

    weather_profile = get_weather_style(weather)
    mood_profile = get_mood_style(mood)
    count = validate_count(count)
    occasion_key = resolve_occasion(occasion)

    items = coerce_items(wardrobe)
    owned = filter_by_owner(items, user_id)
    seasonal = filter_by_weather(owned.items, weather_profile.name)
    generation = generate_candidates(seasonal.items, weather_profile, mood_profile, occasion_key)

    scored: List[OutfitCandidate] = []
    for index, combo in enumerate(generation.combinations):
        result = score_outfit(combo, weather_profile, mood_profile, occasion_key)
        scored.append(
            OutfitCandidate(
                items=combo,
                score=result.score,
                sub_scores=result.sub_scores,
                breakdown=result.breakdown,
                harmony_rule=result.harmony_rule,
                explanation=result.explanation,
                rank_key=index,
            )
        )
    scored.sort(key=lambda candidate: (-candidate.score, candidate.rank_key))
    top_ranked = scored[:count]

    diagnostics: Dict[str, object] = {
        "weather": weather_profile.name,
        "mood": mood_profile.name,
        "occasion": occasion_key,
        "input_count": len(items),
        "ownership": owned.debug,
        "season_filter": seasonal.debug,
        "removed": {**owned.removed, **seasonal.removed},
        "generation": generation.diagnostics,
        "candidates_scored": len(scored),
        "returned": len(top_ranked),
    }
    logger.info(
        "Ranked %s candidates for weather=%s mood=%s, returning %s",
        len(scored),
        weather_profile.name,
        mood_profile.name,
        len(top_ranked),
    )
    return EngineResult(candidates=top_ranked, diagnostics=diagnostics)


def generate(
    wardrobe: WardrobeInput,
    weather: str,
    mood: str,
    count: int = DEFAULT_COUNT,
    occasion: Optional[str] = None,
    user_id: Optional[int] = None,
) -> List[OutfitCandidate]:
    """Return up to ``count`` outfit candidates ranked by score, best first."""

    return recommend(wardrobe, weather, mood, count, occasion=occasion, user_id=user_id).candidates


__all__ = ["DEFAULT_COUNT", "EngineResult", "coerce_items", "generate", "recommend", "validate_count"]
