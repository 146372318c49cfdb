"""AI stylist collaborator that reports failures as typed values.

The recommendation pipeline asks the AI stylist first and falls back to the
deterministic engine. Instead of letting provider exceptions escape (and
sniffing their messages for "rate limit"), the client converts every
expected failure into an :class:`AIFailure` with an :class:`AIErrorKind`, so
the fallback decision is a plain branch on the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Protocol, Sequence

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from pydantic import BaseModel, Field, ValidationError

from logic.safety import system_instruction
from models.wardrobe_item import WardrobeItem
from stylist_app.config import DEFAULT_GEMINI_MODEL
from stylist_app.logging_config import get_logger, log_event
from tools.observability import instrument_call

LOGGER = get_logger(__name__)


class AIErrorKind(str, Enum):
    RATE_LIMITED = "rate_limited"
    AUTH_FAILED = "auth_failed"
    INVALID_RESPONSE = "invalid_response"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class AIFailure:
    kind: AIErrorKind
    message: str


@dataclass(frozen=True)
class AISuggestion:
    name: str
    item_ids: List[int]
    styling_tip: str = ""
    reasoning: str = ""
    confidence: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "item_ids": list(self.item_ids),
            "styling_tip": self.styling_tip,
            "reasoning": self.reasoning,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class AIResult:
    """Either a list of suggestions or a failure, never both."""

    suggestions: List[AISuggestion] = field(default_factory=list)
    failure: Optional[AIFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def failed(cls, kind: AIErrorKind, message: str) -> "AIResult":
        return cls(suggestions=[], failure=AIFailure(kind=kind, message=message))


class OutfitSuggestionClient(Protocol):
    """Interface the stylist agent expects from an AI collaborator."""

    def suggest_outfits(
        self,
        wardrobe: Sequence[WardrobeItem],
        weather: str,
        mood: str,
        occasion: Optional[str] = None,
        count: int = 3,
    ) -> AIResult:
        ...


class _SuggestionPayload(BaseModel):
    name: str = "Untitled outfit"
    item_ids: List[int] = Field(min_length=1)
    styling_tip: str = ""
    reasoning: str = ""
    confidence_score: Optional[int] = Field(default=None, ge=0, le=100)


class _SuggestionResponse(BaseModel):
    outfits: List[_SuggestionPayload] = []


def classify_api_error(exc: Exception) -> AIErrorKind:
    """Map a Google API exception onto the closed set of failure kinds."""

    if isinstance(exc, (google_exceptions.ResourceExhausted, google_exceptions.TooManyRequests)):
        return AIErrorKind.RATE_LIMITED
    if isinstance(exc, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)):
        return AIErrorKind.AUTH_FAILED
    return AIErrorKind.UNKNOWN


def build_prompt(
    wardrobe: Sequence[WardrobeItem], weather: str, mood: str, occasion: Optional[str], count: int
) -> str:
    lines = []
    for item in wardrobe:
        tags = ", ".join(item.tags) or "none"
        lines.append(
            f"- id {item.item_id}: {item.name} ({item.category}, {item.color or 'unknown color'}); "
            f"seasons: {', '.join(item.season)}; tags: {tags}"
        )
    context = [f"Weather: {weather}", f"Mood: {mood}"]
    if occasion:
        context.append(f"Occasion: {occasion}")
    return (
        f"Create {count} outfit recommendations from this wardrobe.\n\n"
        "Wardrobe items:\n" + "\n".join(lines) + "\n\n" + "\n".join(context) + "\n\n"
        'Reply as JSON: {"outfits": [{"name": str, "item_ids": [int], '
        '"styling_tip": str, "reasoning": str, "confidence_score": int 1-100}]}'
    )


class GeminiStylistClient:
    """Gemini-backed implementation of :class:`OutfitSuggestionClient`.

    A pre-built ``model`` (anything with ``generate_content``) can be injected;
    otherwise the Gemini model is created on first use.
    """

    def __init__(
        self,
        model_name: str = DEFAULT_GEMINI_MODEL,
        api_key: str | None = None,
        model: Any = None,
        temperature: float = 0.7,
    ) -> None:
        self.model_name = model_name
        self.api_key = api_key
        self.temperature = temperature
        self._generative_model = model

    def _model(self) -> Any:
        if self._generative_model is None:
            genai.configure(api_key=self.api_key)
            self._generative_model = genai.GenerativeModel(
                model_name=self.model_name,
                system_instruction=system_instruction("outfit stylist"),
                generation_config=genai.GenerationConfig(
                    response_mime_type="application/json",
                    temperature=self.temperature,
                ),
            )
        return self._generative_model

    @instrument_call("ai_stylist.suggest_outfits")
    def suggest_outfits(
        self,
        wardrobe: Sequence[WardrobeItem],
        weather: str,
        mood: str,
        occasion: Optional[str] = None,
        count: int = 3,
    ) -> AIResult:
        if self._generative_model is None and not self.api_key:
            return AIResult.failed(AIErrorKind.AUTH_FAILED, "Google API key is not configured")

        prompt = build_prompt(wardrobe, weather, mood, occasion, count)
        try:
            response = self._model().generate_content(prompt)
            payload = _SuggestionResponse.model_validate_json(response.text)
        except google_exceptions.GoogleAPIError as exc:
            kind = classify_api_error(exc)
            log_event(LOGGER, logging.WARNING, "ai_stylist_failed", kind=kind.value, error=str(exc))
            return AIResult.failed(kind, str(exc))
        except ValidationError as exc:
            log_event(LOGGER, logging.WARNING, "ai_stylist_invalid_response", errors=exc.error_count())
            return AIResult.failed(AIErrorKind.INVALID_RESPONSE, "AI response did not match the outfit schema")
        except ValueError as exc:
            # Raised by ``response.text`` when the candidate was blocked or empty.
            log_event(LOGGER, logging.WARNING, "ai_stylist_invalid_response", error=str(exc))
            return AIResult.failed(AIErrorKind.INVALID_RESPONSE, str(exc))
        except Exception as exc:  # noqa: BLE001
            # Transport and credential errors from outside google.api_core.
            log_event(
                LOGGER,
                logging.ERROR,
                "ai_stylist_failed",
                kind=AIErrorKind.UNKNOWN.value,
                error=str(exc),
                exc_info=True,
            )
            return AIResult.failed(AIErrorKind.UNKNOWN, f"{type(exc).__name__}: {exc}")

        suggestions = [
            AISuggestion(
                name=outfit.name,
                item_ids=list(outfit.item_ids),
                styling_tip=outfit.styling_tip,
                reasoning=outfit.reasoning,
                confidence=outfit.confidence_score,
            )
            for outfit in payload.outfits[:count]
        ]
        log_event(LOGGER, logging.INFO, "ai_stylist_completed", suggestion_count=len(suggestions))
        return AIResult(suggestions=suggestions)


__all__ = [
    "AIErrorKind",
    "AIFailure",
    "AIResult",
    "AISuggestion",
    "GeminiStylistClient",
    "OutfitSuggestionClient",
    "build_prompt",
    "classify_api_error",
]
