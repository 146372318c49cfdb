"""Outfit candidate schema produced by the recommendation engine."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple

from models.wardrobe_item import WardrobeItem

SLOT_ORDER = ("top", "bottom", "dress", "outerwear", "shoes", "accessory")


@dataclass(frozen=True)
class OutfitCandidate:
    """An ephemeral, ranked outfit suggestion.

    ``breakdown`` holds the points each scoring factor contributed to
    ``score``; ``sub_scores`` holds the raw 0-1 value of every factor.
    """

    items: Tuple[WardrobeItem, ...]
    score: float
    sub_scores: Dict[str, float] = field(default_factory=dict)
    breakdown: Dict[str, float] = field(default_factory=dict)
    harmony_rule: str = "none"
    explanation: Dict[str, str] = field(default_factory=dict)
    rank_key: int = 0

    @property
    def item_ids(self) -> Tuple[int, ...]:
        return tuple(item.item_id for item in self.items)

    @property
    def item_set(self) -> FrozenSet[int]:
        return frozenset(self.item_ids)

    @property
    def categories(self) -> Tuple[str, ...]:
        return tuple(item.category for item in self.items)

    def to_dict(self) -> Dict[str, object]:
        return {
            "item_ids": list(self.item_ids),
            "items": [
                {"item_id": item.item_id, "name": item.name, "category": item.category, "color": item.color}
                for item in self.items
            ],
            "score": self.score,
            "sub_scores": dict(self.sub_scores),
            "breakdown": dict(self.breakdown),
            "harmony_rule": self.harmony_rule,
            "explanation": dict(self.explanation),
        }


def order_by_slot(items) -> Tuple[WardrobeItem, ...]:
    """Return items ordered by their category slot."""

    return tuple(sorted(items, key=lambda item: SLOT_ORDER.index(item.category)))


__all__ = ["OutfitCandidate", "SLOT_ORDER", "order_by_slot"]
