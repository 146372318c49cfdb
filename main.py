"""Simple entrypoint to run the wardrobe stylist locally against a sample wardrobe."""

import json

from evaluation.scenarios import SCENARIOS
from stylist_app.app import StylistApp


def main() -> None:
    app = StylistApp()
    scenario = SCENARIOS[0]
    response = app.recommend(
        {
            "wardrobe": [{"item_id": item["id"], **item} for item in scenario.wardrobe_items],
            "weather": scenario.weather,
            "mood": scenario.mood,
            "occasion": scenario.occasion,
        }
    )
    print(json.dumps(response, indent=2, default=str))


if __name__ == "__main__":
    main()
