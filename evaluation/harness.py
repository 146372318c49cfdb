"""Lightweight evaluation harness for deterministic engine scenarios."""

from __future__ import annotations

from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.outfit_engine import generate


def _evaluate_expectations(expectations: Dict[str, object], outfits: List[Dict[str, object]]) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    checks["min_outfits"] = len(outfits) >= int(expectations.get("min_outfits", 1))
    if "max_outfits" in expectations:
        checks["max_outfits"] = len(outfits) <= int(expectations["max_outfits"])
    if expectations.get("requires_outerwear"):
        checks["requires_outerwear"] = any(
            any(item.get("category") == "outerwear" for item in outfit.get("items", [])) for outfit in outfits
        )
    if expectations.get("includes_dress"):
        checks["includes_dress"] = any(
            any(item.get("category") == "dress" for item in outfit.get("items", [])) for outfit in outfits
        )
    excluded = set(expectations.get("excluded_item_ids", []))
    if excluded:
        checks["excluded_item_ids"] = not any(excluded & set(outfit.get("item_ids", [])) for outfit in outfits)
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    candidates = generate(
        scenario.wardrobe_items,
        scenario.weather,
        scenario.mood,
        count=scenario.count,
        occasion=scenario.occasion,
    )
    outfits = [candidate.to_dict() for candidate in candidates]
    evaluation = _evaluate_expectations(scenario.expectations, outfits)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"],
        "checks": evaluation["checks"],
        "outfit_count": len(outfits),
        "outfits": outfits,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
