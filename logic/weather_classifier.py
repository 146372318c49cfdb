"""Map raw forecast text and temperatures onto the closed weather categories."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

# Checked in order; the first keyword found in the condition wins.
_CONDITION_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("rainy", ("rain", "drizzle", "shower", "storm", "thunder")),
    ("snowy", ("snow", "sleet", "blizzard", "flurr")),
    ("cloudy", ("cloud", "overcast", "fog", "mist")),
    ("windy", ("wind", "gust", "breez")),
    ("sunny", ("sun", "clear")),
)

COLD_BELOW_C = 5.0
HOT_ABOVE_C = 25.0


def _temperature_category(temperature: Optional[float]) -> str:
    if temperature is None:
        return "mild"
    if temperature < COLD_BELOW_C:
        return "cold"
    if temperature > HOT_ABOVE_C:
        return "hot"
    return "mild"


def classify_weather(condition: Optional[str] = None, temperature: Optional[float] = None) -> str:
    """Return the weather category for a condition string and Celsius temperature.

    Condition keywords take precedence; temperature bands decide only when the
    condition text carries no recognised signal.
    """

    text = (condition or "").strip().lower()
    for category, keywords in _CONDITION_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return _temperature_category(temperature)


def classification_thresholds() -> Dict[str, object]:
    return {
        "keywords": {category: list(keywords) for category, keywords in _CONDITION_KEYWORDS},
        "temperature_bands_c": {"cold": f"<{COLD_BELOW_C:g}", "hot": f">{HOT_ABOVE_C:g}", "mild": "otherwise"},
    }


__all__ = ["classify_weather", "classification_thresholds"]
