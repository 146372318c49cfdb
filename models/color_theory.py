"""Color compatibility table and harmony helpers for deterministic scoring."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, Iterable, List, Tuple

from models.taxonomy import normalize_color_name

logger = logging.getLogger(__name__)

NEUTRALS = frozenset({"black", "white", "gray", "beige", "navy", "brown"})

# Hue wheel used for analogous checks; neighbours wrap around.
_COLOR_WHEEL: List[str] = ["red", "orange", "yellow", "green", "teal", "blue", "purple", "pink"]

_COMPLEMENTARY_PAIRS = {
    ("red", "green"),
    ("blue", "orange"),
    ("yellow", "purple"),
    ("pink", "green"),
    ("teal", "red"),
}

_CLASHING_PAIRS = {
    ("red", "pink"),
    ("orange", "pink"),
    ("orange", "purple"),
    ("navy", "black"),
    ("brown", "gray"),
}

HARMONY_SCORES: Dict[str, float] = {
    "matching": 1.0,
    "neutral_pair": 0.9,
    "neutral_accent": 0.85,
    "complementary": 0.8,
    "analogous": 0.75,
    "unrelated": 0.5,
    "clash": 0.1,
}

# Score used when fewer than two colored pieces leave nothing to compare.
SINGLE_COLOR_SCORE = 0.7


@dataclass(frozen=True)
class HarmonyResult:
    """Represents the outcome of a harmony evaluation."""

    score: float
    rule_used: str
    relations: Dict[str, int]


def _pair_in(pairs: set, c1: str, c2: str) -> bool:
    return (c1, c2) in pairs or (c2, c1) in pairs


def complementary(color1: str, color2: str) -> bool:
    """Return True when the colors form a complementary pair."""

    c1, c2 = normalize_color_name(color1), normalize_color_name(color2)
    if c1 == c2:
        return False
    return _pair_in(_COMPLEMENTARY_PAIRS, c1, c2)


def clashing(color1: str, color2: str) -> bool:
    c1, c2 = normalize_color_name(color1), normalize_color_name(color2)
    return c1 != c2 and _pair_in(_CLASHING_PAIRS, c1, c2)


def analogous(color1: str, color2: str) -> bool:
    """Return True when the colors sit next to each other on the hue wheel."""

    c1, c2 = normalize_color_name(color1), normalize_color_name(color2)
    if c1 == c2 or c1 not in _COLOR_WHEEL or c2 not in _COLOR_WHEEL:
        return False
    distance = abs(_COLOR_WHEEL.index(c1) - _COLOR_WHEEL.index(c2))
    return min(distance, len(_COLOR_WHEEL) - distance) == 1


def pair_relation(color1: str, color2: str) -> str:
    """Classify a color pair using the fixed compatibility table.

    Clashes are checked before the neutral rules so that known bad neutral
    pairings (navy with black) are still penalised.
    """

    c1, c2 = normalize_color_name(color1), normalize_color_name(color2)
    if c1 == c2:
        return "matching"
    if clashing(c1, c2):
        return "clash"
    if complementary(c1, c2):
        return "complementary"
    if c1 in NEUTRALS and c2 in NEUTRALS:
        return "neutral_pair"
    if c1 in NEUTRALS or c2 in NEUTRALS:
        return "neutral_accent"
    if analogous(c1, c2):
        return "analogous"
    return "unrelated"


def pair_harmony(color1: str, color2: str) -> Tuple[float, str]:
    relation = pair_relation(color1, color2)
    return HARMONY_SCORES[relation], relation


def monochrome(color_list: Iterable[str]) -> bool:
    """Return True when all provided colors collapse to a single tone."""

    unique_colors = {normalize_color_name(color) for color in color_list if color}
    return len(unique_colors) <= 1


def evaluate_harmony(colors: Iterable[str]) -> HarmonyResult:
    """Average pairwise harmony over all colored pieces of an outfit."""

    palette = [normalize_color_name(color) for color in colors if color]
    if len(palette) < 2:
        return HarmonyResult(score=SINGLE_COLOR_SCORE, rule_used="single", relations={})

    relations: Dict[str, int] = {}
    total = 0.0
    pairs = list(combinations(palette, 2))
    for first, second in pairs:
        value, relation = pair_harmony(first, second)
        relations[relation] = relations.get(relation, 0) + 1
        total += value
    score = total / len(pairs)

    if monochrome(palette):
        rule_used = "monochrome"
    elif "clash" in relations:
        rule_used = "clash"
    else:
        rule_used = sorted(relations.items(), key=lambda kv: (-kv[1], -HARMONY_SCORES[kv[0]], kv[0]))[0][0]
    logger.debug("harmony %s -> %.3f via %s", palette, score, rule_used)
    return HarmonyResult(score=score, rule_used=rule_used, relations=relations)


__all__ = [
    "NEUTRALS",
    "HARMONY_SCORES",
    "HarmonyResult",
    "analogous",
    "clashing",
    "complementary",
    "evaluate_harmony",
    "monochrome",
    "pair_harmony",
    "pair_relation",
]
