"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.outfit import OutfitCandidate
from models.wardrobe_item import WardrobeItem, from_raw_metadata

__all__ = ["OutfitCandidate", "WardrobeItem", "from_raw_metadata"]
