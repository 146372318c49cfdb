"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.taxonomy import (
    normalise_seasons,
    normalise_tags,
    normalize_color_name,
    normalize_subcategory,
    validate_category,
)


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


@dataclass
class WardrobeItem:
    """Represents an item in the user's wardrobe."""

    item_id: int
    name: str
    category: str
    subcategory: str = ""
    color: str = ""
    season: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    favorite: bool = False
    owner_id: Optional[int] = None

    def __post_init__(self) -> None:
        self.item_id = int(self.item_id)
        self.category = validate_category(self.category)
        self.subcategory = normalize_subcategory(self.subcategory)
        self.color = normalize_color_name(self.color or "")
        self.season = normalise_seasons(_ensure_list(self.season))
        self.tags = normalise_tags(_ensure_list(self.tags))
        self.favorite = bool(self.favorite)
        if self.owner_id is not None:
            self.owner_id = int(self.owner_id)

    @property
    def all_seasons(self) -> bool:
        return "all" in self.season


def from_raw_metadata(metadata: Dict[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from loose wardrobe-store rows.

    Accepts both snake_case and the camelCase keys used by the wardrobe API
    (``id``, ``userId``, ``isFavorite``).
    """

    item_id = metadata.get("item_id", metadata.get("id"))
    missing = [name for name, value in (("item_id", item_id), ("category", metadata.get("category"))) if value in (None, "")]
    if missing:
        raise ValueError(f"Missing required fields for WardrobeItem: {missing}")

    favorite = metadata.get("favorite", metadata.get("isFavorite", False))
    return WardrobeItem(
        item_id=int(item_id),
        name=str(metadata.get("name") or f"item-{item_id}"),
        category=str(metadata["category"]),
        subcategory=str(metadata.get("subcategory") or metadata.get("sub_category") or ""),
        color=str(metadata.get("color") or ""),
        season=_ensure_list(metadata.get("season")),
        tags=_ensure_list(metadata.get("tags")),
        favorite=bool(favorite),
        owner_id=metadata.get("owner_id", metadata.get("userId")),
    )


__all__ = ["WardrobeItem", "from_raw_metadata"]
