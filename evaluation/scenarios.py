"""Evaluation scenarios exercising moods, weather and wardrobe shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class EvaluationScenario:
    name: str
    description: str
    weather: str
    mood: str
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    occasion: Optional[str] = None
    count: int = 3


def _item(item_id: int, name: str, category: str, color: str, season: List[str], tags: List[str], **extra) -> Dict[str, object]:
    return {
        "id": item_id,
        "name": name,
        "category": category,
        "color": color,
        "season": season,
        "tags": tags,
        **extra,
    }


def _wardrobe_fixtures() -> List[Dict[str, object]]:
    return [
        _item(1, "White linen shirt", "top", "white", ["summer", "spring"], ["breathable", "linen", "casual"]),
        _item(2, "Gray wool sweater", "top", "gray", ["winter", "fall"], ["wool", "knit", "cozy"]),
        _item(3, "Navy blazer", "top", "navy", ["all"], ["tailored", "structured", "work"], subcategory="blazer"),
        _item(4, "Beige chinos", "bottom", "beige", ["spring", "summer", "fall"], ["cotton", "casual"]),
        _item(5, "Black wool trousers", "bottom", "black", ["fall", "winter"], ["wool", "tailored", "formal"]),
        _item(6, "Red midi dress", "dress", "red", ["summer", "spring"], ["romantic", "flowy", "date"]),
        _item(7, "Trench coat", "outerwear", "beige", ["fall", "spring"], ["waterproof", "layered", "classic"]),
        _item(8, "Down parka", "outerwear", "black", ["winter"], ["insulated", "down", "warm"]),
        _item(9, "White sneakers", "shoes", "white", ["all"], ["comfortable", "casual", "sport"]),
        _item(10, "Leather boots", "shoes", "brown", ["fall", "winter"], ["waterproof", "leather", "sturdy"]),
        _item(11, "Silk scarf", "accessory", "pink", ["all"], ["statement", "romantic"], favorite=True),
    ]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="hot_relaxed",
        description="Hot day with a relaxed mood keeps winter knits out of every outfit",
        weather="hot",
        mood="relaxed",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 1, "excluded_item_ids": [2, 5, 8, 10]},
    ),
    EvaluationScenario(
        name="rainy_professional_work",
        description="Rainy workday should layer outerwear over a work look",
        weather="rainy",
        mood="professional",
        occasion="office meeting",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 1, "requires_outerwear": True},
    ),
    EvaluationScenario(
        name="snowy_confident",
        description="Snow leaves only winter or all-season pieces",
        weather="snowy",
        mood="confident",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 1, "requires_outerwear": True, "excluded_item_ids": [1, 4, 6, 7]},
    ),
    EvaluationScenario(
        name="sunny_romantic_no_bottoms",
        description="Without any bottoms the dress still completes a date outfit",
        weather="sunny",
        mood="romantic",
        occasion="date",
        wardrobe_items=[item for item in _wardrobe_fixtures() if item["category"] != "bottom"],
        expectations={"min_outfits": 1, "includes_dress": True},
    ),
    EvaluationScenario(
        name="accessories_only",
        description="A wardrobe without garments yields no outfit at all",
        weather="mild",
        mood="happy",
        wardrobe_items=[item for item in _wardrobe_fixtures() if item["category"] in {"shoes", "accessory"}],
        expectations={"min_outfits": 0, "max_outfits": 0},
    ),
]

__all__ = ["EvaluationScenario", "SCENARIOS"]
