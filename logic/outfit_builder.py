"""Slot resolution and bounded candidate generation with transparent diagnostics."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import product
from typing import Dict, List, Optional, Sequence, Tuple

from logic.outfit_scoring import item_relevance, optional_slots_for
from models.mood_styles import MoodStyleProfile, WeatherStyleProfile
from models.outfit import SLOT_ORDER, order_by_slot
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

# Either slot set completes an outfit; they are never combined.
MANDATORY_SLOT_SETS: Tuple[Tuple[str, ...], ...] = (("top", "bottom"), ("dress",))
SKIPPABLE_SLOTS = ("accessory",)

# Pools larger than these limits are cut to their most relevant items, which
# keeps the cross product at or below 8 * 8 * 4 * 4 * 5 combinations.
MANDATORY_POOL_LIMIT = 8
OPTIONAL_POOL_LIMIT = 4


@dataclass(frozen=True)
class SlotPlan:
    mandatory_sets: List[Tuple[str, ...]]
    optional_slots: Tuple[str, ...]
    pools: Dict[str, List[WardrobeItem]]


@dataclass(frozen=True)
class CandidateGenerationResult:
    combinations: List[Tuple[WardrobeItem, ...]]
    diagnostics: Dict[str, object]


def group_by_category(items: Sequence[WardrobeItem]) -> Dict[str, List[WardrobeItem]]:
    grouped: Dict[str, List[WardrobeItem]] = {category: [] for category in SLOT_ORDER}
    for item in items:
        grouped[item.category].append(item)
    return grouped


def resolve_slots(items: Sequence[WardrobeItem], weather: str) -> SlotPlan:
    """Work out which mandatory slot sets the wardrobe can satisfy."""

    grouped = group_by_category(items)
    satisfiable = [slots for slots in MANDATORY_SLOT_SETS if all(grouped[slot] for slot in slots)]
    return SlotPlan(
        mandatory_sets=satisfiable,
        optional_slots=tuple(optional_slots_for(weather)),
        pools=grouped,
    )


def satisfies_slots(items: Sequence[WardrobeItem]) -> bool:
    """True when items fill each slot at most once and complete exactly one mandatory set."""

    categories = [item.category for item in items]
    if len(categories) != len(set(categories)):
        return False
    mandatory = {category for slots in MANDATORY_SLOT_SETS for category in slots}
    present = tuple(sorted(mandatory.intersection(categories)))
    return present in {tuple(sorted(slots)) for slots in MANDATORY_SLOT_SETS}


def rank_pool(
    pool: Sequence[WardrobeItem],
    limit: int,
    weather_profile: WeatherStyleProfile,
    mood_profile: MoodStyleProfile,
    occasion: Optional[str] = None,
) -> List[WardrobeItem]:
    """Order a pool by item relevance and keep the first ``limit`` items.

    Ties keep wardrobe order so truncation is deterministic.
    """

    indexed = list(enumerate(pool))
    indexed.sort(key=lambda pair: (-item_relevance(pair[1], weather_profile, mood_profile, occasion), pair[0]))
    return [item for _, item in indexed[:limit]]


def generate_candidates(
    items: Sequence[WardrobeItem],
    weather_profile: WeatherStyleProfile,
    mood_profile: MoodStyleProfile,
    occasion: Optional[str] = None,
) -> CandidateGenerationResult:
    """Enumerate category-valid combinations over the bounded per-slot pools."""

    plan = resolve_slots(items, weather_profile.name)
    diagnostics: Dict[str, object] = {
        "pool_sizes": {slot: len(pool) for slot, pool in plan.pools.items()},
        "mandatory_sets": ["+".join(slots) for slots in plan.mandatory_sets],
        "optional_slots": list(plan.optional_slots),
        "truncated_pools": [],
        "duplicates_skipped": 0,
    }
    if not plan.mandatory_sets:
        logger.info("Insufficient items for any mandatory slot set: %s", diagnostics["pool_sizes"])
        diagnostics["reason"] = "missing_required_categories"
        return CandidateGenerationResult(combinations=[], diagnostics=diagnostics)

    def bounded(slot: str, limit: int) -> List[WardrobeItem]:
        pool = plan.pools[slot]
        if len(pool) > limit:
            diagnostics["truncated_pools"].append(slot)
            logger.info("Trimming %s pool from %s to %s items", slot, len(pool), limit)
        return rank_pool(pool, limit, weather_profile, mood_profile, occasion)

    optional_options: List[List[Optional[WardrobeItem]]] = []
    for slot in plan.optional_slots:
        options: List[Optional[WardrobeItem]] = list(bounded(slot, OPTIONAL_POOL_LIMIT))
        if not options or slot in SKIPPABLE_SLOTS:
            options.append(None)
        optional_options.append(options)

    combinations: List[Tuple[WardrobeItem, ...]] = []
    seen = set()
    for slots in plan.mandatory_sets:
        mandatory_pools = [bounded(slot, MANDATORY_POOL_LIMIT) for slot in slots]
        for base in product(*mandatory_pools):
            for extras in product(*optional_options):
                combo = order_by_slot([*base, *(extra for extra in extras if extra is not None)])
                key = frozenset(item.item_id for item in combo)
                if key in seen:
                    diagnostics["duplicates_skipped"] += 1
                    continue
                seen.add(key)
                combinations.append(combo)

    diagnostics["combinations_generated"] = len(combinations)
    logger.info("Generated %s candidate combinations", len(combinations))
    return CandidateGenerationResult(combinations=combinations, diagnostics=diagnostics)


__all__ = [
    "MANDATORY_SLOT_SETS",
    "MANDATORY_POOL_LIMIT",
    "OPTIONAL_POOL_LIMIT",
    "CandidateGenerationResult",
    "SlotPlan",
    "generate_candidates",
    "group_by_category",
    "rank_pool",
    "resolve_slots",
    "satisfies_slots",
]
