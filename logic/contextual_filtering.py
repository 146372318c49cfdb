"""Deterministic filtering functions applied before outfit generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from models.taxonomy import WEATHER_SEASONS, validate_weather
from models.wardrobe_item import WardrobeItem


@dataclass(frozen=True)
class FilteringResult:
    """Captures the outcome of a single filtering step."""

    items: List[WardrobeItem]
    removed: Dict[int, str]
    debug: Dict[str, object]


def season_compatible(item: WardrobeItem, weather: str) -> bool:
    """Return True when the item's seasons allow wearing it in this weather."""

    if item.all_seasons:
        return True
    return bool(set(item.season).intersection(WEATHER_SEASONS[weather]))


def filter_by_weather(items: List[WardrobeItem], weather: str) -> FilteringResult:
    """Drop items whose season tags are incompatible with the weather category."""

    weather = validate_weather(weather)
    removed: Dict[int, str] = {}
    kept: List[WardrobeItem] = []
    for item in items:
        if season_compatible(item, weather):
            kept.append(item)
        else:
            removed[item.item_id] = f"season {item.season} not worn in {weather} weather"

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "weather": weather,
        "allowed_seasons": sorted(WEATHER_SEASONS[weather]),
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


def filter_by_owner(items: List[WardrobeItem], user_id: Optional[int]) -> FilteringResult:
    """Keep items owned by ``user_id`` and drop repeated item ids.

    Items without an owner are trusted to come from the caller's wardrobe.
    """

    removed: Dict[int, str] = {}
    kept: List[WardrobeItem] = []
    seen = set()
    for item in items:
        reason = None
        if item.item_id in seen:
            reason = "duplicate item id"
        elif user_id is not None and item.owner_id is not None and item.owner_id != int(user_id):
            reason = "belongs to another user"
        if reason:
            removed.setdefault(item.item_id, reason)
            continue
        seen.add(item.item_id)
        kept.append(item)

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "user_id": user_id,
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


__all__ = ["filter_by_weather", "filter_by_owner", "season_compatible", "FilteringResult"]
