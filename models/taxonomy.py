"""Canonical taxonomy definitions for wardrobe items and styling context.

This module centralises the closed enumerations the recommendation engine
accepts (categories, weather, moods, seasons) together with the alias tables
used to normalise loosely tagged wardrobe data. Helper functions keep
validation logic consistent across the engine, the stylist agent and the API.
"""

from typing import Dict, Iterable, List


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace("-", "_").replace(" ", "_")


CATEGORIES: List[str] = ["top", "bottom", "dress", "outerwear", "shoes", "accessory"]

CATEGORY_ALIASES: Dict[str, str] = {
    "tops": "top",
    "shirt": "top",
    "blouse": "top",
    "tee": "top",
    "t_shirt": "top",
    "sweater": "top",
    "bottoms": "bottom",
    "pants": "bottom",
    "trousers": "bottom",
    "jeans": "bottom",
    "skirt": "bottom",
    "shorts": "bottom",
    "dresses": "dress",
    "jumpsuit": "dress",
    "jacket": "outerwear",
    "coat": "outerwear",
    "outer": "outerwear",
    "footwear": "shoes",
    "shoe": "shoes",
    "sneakers": "shoes",
    "boots": "shoes",
    "accessories": "accessory",
    "bag": "accessory",
    "jewelry": "accessory",
    "jewellery": "accessory",
    "hat": "accessory",
    "scarf": "accessory",
}

WEATHER_CATEGORIES: List[str] = ["sunny", "rainy", "cloudy", "snowy", "windy", "cold", "hot", "mild"]
LAYERING_WEATHER = frozenset({"cold", "rainy", "snowy", "windy"})

MOODS: List[str] = ["happy", "confident", "relaxed", "energetic", "romantic", "professional", "creative"]

SEASONS: List[str] = ["spring", "summer", "fall", "winter", "all"]

SEASON_ALIASES: Dict[str, str] = {
    "autumn": "fall",
    "all_year": "all",
    "all_season": "all",
    "all_seasons": "all",
    "year_round": "all",
    "any": "all",
}

# Seasons whose clothing is wearable in a given weather category.
WEATHER_SEASONS: Dict[str, frozenset] = {
    "hot": frozenset({"summer", "spring"}),
    "sunny": frozenset({"summer", "spring", "fall"}),
    "mild": frozenset({"spring", "summer", "fall"}),
    "cloudy": frozenset({"spring", "summer", "fall"}),
    "windy": frozenset({"spring", "fall", "winter"}),
    "rainy": frozenset({"spring", "fall", "winter"}),
    "cold": frozenset({"fall", "winter"}),
    "snowy": frozenset({"winter"}),
}

COLOR_MAP = {
    "navy blue": "navy",
    "navy": "navy",
    "light blue": "blue",
    "sky blue": "blue",
    "denim": "blue",
    "blue": "blue",
    "black": "black",
    "white": "white",
    "off white": "white",
    "ivory": "white",
    "cream": "beige",
    "beige": "beige",
    "tan": "beige",
    "camel": "beige",
    "khaki": "beige",
    "brown": "brown",
    "chocolate": "brown",
    "gray": "gray",
    "grey": "gray",
    "charcoal": "gray",
    "silver": "gray",
    "green": "green",
    "olive": "green",
    "teal": "teal",
    "turquoise": "teal",
    "red": "red",
    "burgundy": "red",
    "maroon": "red",
    "pink": "pink",
    "coral": "pink",
    "yellow": "yellow",
    "mustard": "yellow",
    "gold": "yellow",
    "orange": "orange",
    "purple": "purple",
    "lavender": "purple",
    "violet": "purple",
}


def validate_category(value: str) -> str:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy or one of its aliases.
    """

    key = _normalize_key(value)
    key = CATEGORY_ALIASES.get(key, key)
    if key not in CATEGORIES:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {sorted(CATEGORIES)}")
    return key


def validate_weather(value: str) -> str:
    """Validate a weather category against the closed enumeration."""

    key = _normalize_key(str(value))
    if key not in WEATHER_CATEGORIES:
        raise ValueError(f"Unsupported weather '{value}'. Allowed: {WEATHER_CATEGORIES}")
    return key


def validate_mood(value: str) -> str:
    """Validate a mood category against the closed enumeration."""

    key = _normalize_key(str(value))
    if key not in MOODS:
        raise ValueError(f"Unsupported mood '{value}'. Allowed: {MOODS}")
    return key


def normalize_subcategory(value: str | None) -> str:
    return _normalize_key(value) if value else ""


def normalize_color_name(raw_string: str) -> str:
    """Map a raw color string to a canonical color name."""

    key = raw_string.strip().lower()
    return COLOR_MAP.get(key, key)


def normalise_seasons(values: Iterable[str]) -> List[str]:
    """Normalise season labels; unknown labels are dropped and empty means all."""

    normalised = []
    seen = set()
    for value in values:
        key = _normalize_key(str(value))
        key = SEASON_ALIASES.get(key, key)
        if key in SEASONS and key not in seen:
            normalised.append(key)
            seen.add(key)
    return normalised or ["all"]


def normalise_tags(values: Iterable[str]) -> List[str]:
    """Lower-case and deduplicate free-form style tags, keeping their order."""

    normalised = []
    seen = set()
    for value in values:
        key = _normalize_key(str(value))
        if key and key not in seen:
            normalised.append(key)
            seen.add(key)
    return normalised


__all__ = [
    "CATEGORIES",
    "CATEGORY_ALIASES",
    "WEATHER_CATEGORIES",
    "LAYERING_WEATHER",
    "MOODS",
    "SEASONS",
    "WEATHER_SEASONS",
    "validate_category",
    "validate_weather",
    "validate_mood",
    "normalize_subcategory",
    "normalize_color_name",
    "normalise_seasons",
    "normalise_tags",
]
