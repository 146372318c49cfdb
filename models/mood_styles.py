"""Mappings between mood, weather and occasion themes and stylistic guidance."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional

from models.taxonomy import normalize_color_name, validate_mood, validate_weather

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoodStyleProfile:
    """Represents styling preferences for a given mood."""

    name: str
    style_tags: FrozenSet[str]
    palette: FrozenSet[str]
    description: str


@dataclass(frozen=True)
class WeatherStyleProfile:
    """Tags that suit (or miss) a weather category, plus its preferred seasons."""

    name: str
    favoured_tags: FrozenSet[str]
    avoided_tags: FrozenSet[str]
    preferred_seasons: FrozenSet[str]


def _mood(name: str, tags: List[str], palette: List[str], description: str) -> MoodStyleProfile:
    return MoodStyleProfile(
        name=name,
        style_tags=frozenset(tags),
        palette=frozenset(normalize_color_name(color) for color in palette),
        description=description,
    )


_MOOD_STYLES: Dict[str, MoodStyleProfile] = {
    "happy": _mood(
        "happy",
        ["bright", "colorful", "playful", "fun", "floral", "casual"],
        ["yellow", "orange", "pink", "light blue"],
        "Bright, colorful outfits to match an upbeat mood",
    ),
    "confident": _mood(
        "confident",
        ["bold", "statement", "structured", "tailored", "sleek"],
        ["black", "red", "navy"],
        "Bold, striking choices to make a statement",
    ),
    "relaxed": _mood(
        "relaxed",
        ["soft", "neutral", "comfortable", "cozy", "casual", "loose"],
        ["beige", "gray", "white", "green"],
        "Comfortable, laid-back pieces for effortless style",
    ),
    "energetic": _mood(
        "energetic",
        ["bold", "bright", "sporty", "athletic", "vibrant"],
        ["red", "orange", "yellow"],
        "Dynamic looks to keep up with an active day",
    ),
    "romantic": _mood(
        "romantic",
        ["soft", "floral", "lace", "flowy", "feminine", "silk"],
        ["pink", "red", "white", "purple"],
        "Soft, delicate pieces for a dreamy aesthetic",
    ),
    "professional": _mood(
        "professional",
        ["tailored", "formal", "business", "structured", "classic", "polished"],
        ["navy", "black", "gray", "white"],
        "Polished, refined outfits for a commanding presence",
    ),
    "creative": _mood(
        "creative",
        ["artistic", "patterned", "vintage", "eclectic", "statement", "unique"],
        ["purple", "teal", "yellow", "green"],
        "Unique, artistic combinations for self-expression",
    ),
}


def _weather(name: str, favoured: List[str], avoided: List[str], seasons: List[str]) -> WeatherStyleProfile:
    return WeatherStyleProfile(
        name=name,
        favoured_tags=frozenset(favoured),
        avoided_tags=frozenset(avoided),
        preferred_seasons=frozenset(seasons),
    )


_WEATHER_STYLES: Dict[str, WeatherStyleProfile] = {
    "hot": _weather(
        "hot",
        ["breathable", "lightweight", "linen", "cotton", "sleeveless", "airy", "loose"],
        ["wool", "fleece", "insulated", "thermal", "heavy", "knit", "cashmere", "down"],
        ["summer"],
    ),
    "sunny": _weather(
        "sunny",
        ["breathable", "lightweight", "linen", "cotton", "bright"],
        ["heavy", "insulated", "thermal", "fleece"],
        ["summer"],
    ),
    "mild": _weather(
        "mild",
        ["cotton", "denim", "light", "versatile", "layered"],
        ["insulated", "heavy", "thermal"],
        ["spring", "fall"],
    ),
    "cloudy": _weather(
        "cloudy",
        ["layered", "denim", "knit", "versatile"],
        ["sheer"],
        ["spring", "fall"],
    ),
    "windy": _weather(
        "windy",
        ["windproof", "fitted", "layered", "structured"],
        ["flowy", "sheer", "loose"],
        ["fall"],
    ),
    "rainy": _weather(
        "rainy",
        ["waterproof", "water_resistant", "rain", "quick_dry", "hooded"],
        ["suede", "canvas", "silk", "sheer", "open_toe"],
        ["fall", "spring"],
    ),
    "cold": _weather(
        "cold",
        ["wool", "warm", "knit", "fleece", "insulated", "thermal", "cashmere"],
        ["sleeveless", "sheer", "linen", "lightweight", "open_toe"],
        ["winter"],
    ),
    "snowy": _weather(
        "snowy",
        ["insulated", "waterproof", "wool", "thermal", "warm", "fleece", "down"],
        ["sleeveless", "sheer", "linen", "lightweight", "canvas", "open_toe", "suede"],
        ["winter"],
    ),
}

OCCASION_TAGS: Dict[str, FrozenSet[str]] = {
    "work": frozenset({"business", "formal", "tailored", "professional", "classic", "structured", "polished"}),
    "casual": frozenset({"casual", "comfortable", "relaxed", "denim", "everyday"}),
    "party": frozenset({"party", "statement", "bold", "sparkly", "sequin", "glam"}),
    "date": frozenset({"romantic", "elegant", "soft", "chic", "flowy"}),
    "formal": frozenset({"formal", "elegant", "tailored", "classic", "polished"}),
    "sport": frozenset({"sporty", "athletic", "breathable", "stretch", "quick_dry"}),
    "travel": frozenset({"comfortable", "versatile", "layered", "wrinkle_free"}),
    "outdoor": frozenset({"durable", "waterproof", "comfortable", "sporty"}),
}

OCCASION_ALIASES: Dict[str, str] = {
    "office": "work",
    "business": "work",
    "meeting": "work",
    "interview": "work",
    "weekend": "casual",
    "everyday": "casual",
    "brunch": "casual",
    "night": "party",
    "club": "party",
    "celebration": "party",
    "dinner": "date",
    "romantic": "date",
    "wedding": "formal",
    "gala": "formal",
    "ceremony": "formal",
    "gym": "sport",
    "workout": "sport",
    "running": "sport",
    "vacation": "travel",
    "trip": "travel",
    "hiking": "outdoor",
    "picnic": "outdoor",
}


def get_mood_style(mood: str) -> MoodStyleProfile:
    """Return the :class:`MoodStyleProfile` for a mood.

    Raises :class:`ValueError` for moods outside the closed enumeration.
    """

    return _MOOD_STYLES[validate_mood(mood)]


def get_weather_style(weather: str) -> WeatherStyleProfile:
    return _WEATHER_STYLES[validate_weather(weather)]


def resolve_occasion(occasion: Optional[str]) -> Optional[str]:
    """Map a free-form occasion string onto a known occasion key.

    Returns ``None`` when the occasion is empty or unrecognised.
    """

    if not occasion:
        return None
    words = occasion.strip().lower().replace("-", " ").replace("_", " ").split()
    for word in words:
        if word in OCCASION_TAGS:
            return word
        if word in OCCASION_ALIASES:
            return OCCASION_ALIASES[word]
    logger.info("Unrecognised occasion '%s', ignoring occasion fit", occasion)
    return None


__all__ = [
    "MoodStyleProfile",
    "WeatherStyleProfile",
    "OCCASION_TAGS",
    "get_mood_style",
    "get_weather_style",
    "resolve_occasion",
]
