"""Pydantic schemas and helpers for validating recommendation requests."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from logic.outfit_engine import coerce_items
from logic.weather_classifier import classify_weather
from models.wardrobe_item import WardrobeItem

WeatherName = Literal["sunny", "rainy", "cloudy", "snowy", "windy", "cold", "hot", "mild"]
MoodName = Literal["happy", "confident", "relaxed", "energetic", "romantic", "professional", "creative"]


class WardrobeItemPayload(BaseModel):
    """Wire shape of a wardrobe item as supplied by the wardrobe store."""

    item_id: int
    name: str = ""
    category: str = Field(min_length=1)
    subcategory: str = ""
    color: str = ""
    season: List[str] = []
    tags: List[str] = []
    favorite: bool = False
    owner_id: Optional[int] = None


class WeatherInput(BaseModel):
    """Raw forecast signals accepted in place of a weather category."""

    condition: Optional[str] = None
    temperature: Optional[float] = None

    def category(self) -> str:
        return classify_weather(self.condition, self.temperature)


class OutfitRequest(BaseModel):
    """Envelope for outfit recommendation requests.

    Either ``weather`` or one of ``condition``/``temperature`` must be given;
    the raw signals are classified into a weather category.
    """

    wardrobe: List[WardrobeItemPayload] = []
    weather: Optional[WeatherName] = None
    condition: Optional[str] = None
    temperature: Optional[float] = None
    mood: MoodName
    occasion: Optional[str] = None
    count: Optional[int] = Field(default=None, ge=1, le=20)
    user_id: Optional[int] = None

    @model_validator(mode="after")
    def _require_weather_signal(self) -> "OutfitRequest":
        if self.weather is None and self.condition is None and self.temperature is None:
            raise ValueError("weather, condition or temperature is required")
        return self

    def resolved_weather(self) -> str:
        if self.weather is not None:
            return self.weather
        return WeatherInput(condition=self.condition, temperature=self.temperature).category()

    def wardrobe_items(self) -> List[WardrobeItem]:
        """Convert payloads to items, skipping entries the taxonomy rejects."""

        return coerce_items(payload.model_dump() for payload in self.wardrobe)


class OutfitResponse(BaseModel):
    """Structure returned by the recommendation endpoints."""

    status: Literal["ok", "error", "needs_review"]
    source: Literal["ai", "engine"]
    fallback_reason: Optional[str] = None
    weather: str
    mood: str
    outfits: List[Dict[str, Any]] = []
    user_facing_summary: Optional[str] = None
    debug_summary: Optional[Dict[str, Any]] = None


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError | ValueError) -> Dict[str, Any]:
    """Translate validation errors into a consistent review payload."""

    if isinstance(exc, ValidationError):
        details = exc.errors(include_url=False, include_context=False)
    else:
        details = [{"msg": str(exc)}]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "WardrobeItemPayload",
    "WeatherInput",
    "OutfitRequest",
    "OutfitResponse",
    "ValidationResult",
    "validation_failure",
]
