"""Outfit stylist agent: AI stylist first, deterministic engine as fallback."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from logic.contextual_filtering import filter_by_owner, filter_by_weather
from logic.outfit_builder import satisfies_slots
from logic.outfit_engine import WardrobeInput, coerce_items, recommend, validate_count
from models.mood_styles import get_mood_style
from models.taxonomy import validate_weather
from models.wardrobe_item import WardrobeItem
from stylist_app.config import StylistConfig
from stylist_app.logging_config import get_logger, log_event, operation_context
from tools.observability import instrument_call
from tools.stylist_client import AIResult, AISuggestion, OutfitSuggestionClient

logger = get_logger(__name__)

SOURCE_AI = "ai"
SOURCE_ENGINE = "engine"


class OutfitStylistAgent:
    """Runs the two-stage recommendation pipeline.

    Stage one asks the injected :class:`OutfitSuggestionClient`. Its typed
    :class:`AIResult` decides whether stage two, the outfit engine, runs.
    """

    def __init__(self, config: StylistConfig, client: Optional[OutfitSuggestionClient] = None) -> None:
        self.config = config
        self.client = client

    @property
    def ai_available(self) -> bool:
        return self.client is not None and self.config.enable_ai_recommendations

    def recommend_outfits(
        self,
        wardrobe: WardrobeInput,
        weather: str,
        mood: str,
        occasion: Optional[str] = None,
        count: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> Dict[str, object]:
        """Return ranked outfits with their source and the reason for any fallback."""

        weather = validate_weather(weather)
        mood = get_mood_style(mood).name
        count = validate_count(self.config.default_outfit_count if count is None else count)
        items = filter_by_owner(coerce_items(wardrobe), user_id).items
        wearable = filter_by_weather(items, weather).items

        with operation_context("agent:stylist.recommend_outfits") as correlation_id:
            log_event(
                logger,
                level=logging.INFO,
                event="agent_call_started",
                agent="stylist",
                method="recommend_outfits",
                correlation_id=correlation_id,
                weather=weather,
                mood=mood,
                occasion=occasion,
                wardrobe_size=len(items),
            )

            fallback_reason: Optional[str] = "ai_disabled"
            ai_outfits: List[Dict[str, Any]] = []
            if self.ai_available:
                result = self.client.suggest_outfits(wearable, weather, mood, occasion=occasion, count=count)
                ai_outfits = self._usable_suggestions(result, wearable)
                if result.failure is not None:
                    fallback_reason = result.failure.kind.value
                elif not ai_outfits:
                    fallback_reason = "no_usable_result"
                else:
                    fallback_reason = None

            if fallback_reason is None:
                response = self._response(SOURCE_AI, None, ai_outfits, weather, mood, {"ai_suggestions": len(ai_outfits)})
            else:
                engine_result = self._run_engine(
                    wardrobe=items, weather=weather, mood=mood, count=count, occasion=occasion
                )
                outfits = [candidate.to_dict() for candidate in engine_result.candidates]
                response = self._response(SOURCE_ENGINE, fallback_reason, outfits, weather, mood, engine_result.diagnostics)

            log_event(
                logger,
                level=logging.INFO,
                event="agent_call_completed",
                agent="stylist",
                method="recommend_outfits",
                correlation_id=correlation_id,
                source=response["source"],
                fallback_reason=fallback_reason,
                outfit_count=len(response["outfits"]),
            )
            return response

    def recommend_fallback(
        self,
        wardrobe: WardrobeInput,
        weather: str,
        mood: str,
        occasion: Optional[str] = None,
        count: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> Dict[str, object]:
        """Serve a request from the outfit engine alone."""

        count = validate_count(self.config.default_outfit_count if count is None else count)
        engine_result = self._run_engine(
            wardrobe=wardrobe, weather=weather, mood=mood, count=count, occasion=occasion, user_id=user_id
        )
        outfits = [candidate.to_dict() for candidate in engine_result.candidates]
        return self._response(
            SOURCE_ENGINE,
            None,
            outfits,
            engine_result.diagnostics["weather"],
            engine_result.diagnostics["mood"],
            engine_result.diagnostics,
        )

    @staticmethod
    @instrument_call("outfit_engine.recommend")
    def _run_engine(**kwargs: Any):
        return recommend(**kwargs)

    @staticmethod
    def _usable_suggestions(result: AIResult, items: Sequence[WardrobeItem]) -> List[Dict[str, Any]]:
        """Keep AI suggestions built from wearable items that form a complete outfit."""

        if not result.ok:
            return []
        by_id = {item.item_id: item for item in items}
        usable: List[Dict[str, Any]] = []
        for suggestion in result.suggestions:
            if not all(item_id in by_id for item_id in suggestion.item_ids):
                logger.info("Dropping AI outfit '%s' referencing unknown or out-of-season items", suggestion.name)
                continue
            if not satisfies_slots([by_id[item_id] for item_id in suggestion.item_ids]):
                logger.info("Dropping AI outfit '%s' with an invalid slot combination", suggestion.name)
                continue
            usable.append(_serialise_suggestion(suggestion, by_id))
        return usable

    def _response(
        self,
        source: str,
        fallback_reason: Optional[str],
        outfits: List[Dict[str, Any]],
        weather: str,
        mood: str,
        debug: Dict[str, object],
    ) -> Dict[str, object]:
        if outfits:
            summary = f"Found {len(outfits)} {mood} outfits for {weather} weather."
        else:
            summary = f"No complete outfit could be built for {weather} weather from this wardrobe."
        return {
            "status": "ok",
            "source": source,
            "fallback_reason": fallback_reason,
            "weather": weather,
            "mood": mood,
            "outfits": outfits,
            "user_facing_summary": summary,
            "debug_summary": debug,
        }


def _serialise_suggestion(suggestion: AISuggestion, by_id: Dict[int, WardrobeItem]) -> Dict[str, Any]:
    payload = suggestion.to_dict()
    payload["items"] = [
        {
            "item_id": by_id[item_id].item_id,
            "name": by_id[item_id].name,
            "category": by_id[item_id].category,
            "color": by_id[item_id].color,
        }
        for item_id in suggestion.item_ids
    ]
    payload["score"] = float(suggestion.confidence) if suggestion.confidence is not None else None
    return payload


__all__ = ["OutfitStylistAgent", "SOURCE_AI", "SOURCE_ENGINE"]
