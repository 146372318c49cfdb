"""Stylist app bootstrap."""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from agents.outfit_stylist_agent import OutfitStylistAgent
from logic.validation import OutfitRequest, OutfitResponse, validation_failure
from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging, get_logger, log_event, operation_context
from tools.stylist_client import GeminiStylistClient, OutfitSuggestionClient

LOGGER = get_logger(__name__)


class StylistApp:
    """Wires together the config, the AI stylist client and the stylist agent."""

    def __init__(
        self,
        config: StylistConfig | None = None,
        client: Optional[OutfitSuggestionClient] = None,
    ) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging(self.config.log_level)
        self.client = client if client is not None else self._build_client()
        self.stylist = OutfitStylistAgent(config=self.config, client=self.client)

    def _build_client(self) -> Optional[OutfitSuggestionClient]:
        if not self.config.ai_enabled:
            LOGGER.info("AI stylist disabled; serving recommendations from the outfit engine")
            return None
        return GeminiStylistClient(model_name=self.config.model, api_key=self.config.api_key)

    def recommend(self, payload: Dict[str, Any], *, fallback_only: bool = False) -> Dict[str, Any]:
        """Validate a raw request payload and run it through the stylist agent.

        Malformed payloads come back as a ``needs_review`` result instead of
        raising, matching how schema failures are reported on the way out.
        """

        with operation_context("app:recommend") as correlation_id:
            try:
                request = OutfitRequest.model_validate(payload)
            except ValidationError as exc:
                log_event(
                    LOGGER,
                    level=logging.WARNING,
                    event="app_request_invalid",
                    agent="app",
                    method="recommend",
                    errors=exc.error_count(),
                    correlation_id=correlation_id,
                )
                return validation_failure("Invalid outfit request payload", exc)

            response = self.run(request, fallback_only=fallback_only)

            try:
                OutfitResponse.model_validate(response)
            except ValidationError as exc:
                log_event(
                    LOGGER,
                    level=logging.WARNING,
                    event="app_response_invalid",
                    agent="app",
                    method="recommend",
                    errors=exc.error_count(),
                    correlation_id=correlation_id,
                )
                return validation_failure("Outfit response failed schema checks", exc)
            return response

    def run(self, request: OutfitRequest, *, fallback_only: bool = False) -> Dict[str, Any]:
        """Dispatch an already validated request to the agent."""

        handler = self.stylist.recommend_fallback if fallback_only else self.stylist.recommend_outfits
        return handler(
            wardrobe=request.wardrobe_items(),
            weather=request.resolved_weather(),
            mood=request.mood,
            occasion=request.occasion,
            count=request.count,
            user_id=request.user_id,
        )


__all__ = ["StylistApp"]
