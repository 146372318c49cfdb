"""FastAPI server exposing the outfit recommendation endpoints."""

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from logic.validation import OutfitRequest, WeatherInput
from logic.weather_classifier import classification_thresholds
from stylist_app.app import StylistApp


class WeatherClassifyRequest(BaseModel):
    """Request payload for mapping raw forecast signals to a weather category."""

    condition: str | None = Field(None, description="Free-text forecast condition, e.g. 'light rain'")
    temperature: float | None = Field(None, description="Temperature in degrees Celsius")


def create_app(stylist: StylistApp | None = None) -> FastAPI:
    """Build the FastAPI app around a (possibly injected) stylist app."""

    stylist_app = stylist or StylistApp()
    app = FastAPI(title="Wardrobe Stylist", version="0.1.0")

    @app.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return {
            "status": "ok",
            "service": "wardrobe-stylist",
            "environment": stylist_app.config.environment or "local",
            "model": stylist_app.config.model,
            "ai_enabled": stylist_app.stylist.ai_available,
        }

    @app.post("/recommendations/outfits")
    def recommend_outfits(request: OutfitRequest) -> dict:
        """Ask the AI stylist first and fall back to the outfit engine."""

        try:
            return stylist_app.run(request)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/recommendations/fallback")
    def recommend_fallback(request: OutfitRequest) -> dict:
        """Serve outfits from the deterministic engine only."""

        try:
            return stylist_app.run(request, fallback_only=True)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/weather/classify")
    async def classify(request: WeatherClassifyRequest) -> dict:
        """Return the weather category the engine would use for these signals."""

        weather = WeatherInput(condition=request.condition, temperature=request.temperature).category()
        return {"weather": weather, "thresholds": classification_thresholds()}

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:create_app", host="0.0.0.0", port=8080, reload=False, factory=True)
