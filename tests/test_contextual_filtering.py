"""Tests for ownership and season filtering ahead of generation."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.contextual_filtering import filter_by_owner, filter_by_weather, season_compatible
from models.wardrobe_item import WardrobeItem


def _item(item_id, season, owner_id=None, category="top"):
    return WardrobeItem(item_id=item_id, name=f"item {item_id}", category=category, season=season, owner_id=owner_id)


def test_season_compatibility_table():
    winter_coat = _item(1, ["winter"], category="outerwear")
    assert not season_compatible(winter_coat, "hot")
    assert season_compatible(winter_coat, "snowy")
    assert season_compatible(_item(2, ["all"]), "hot")
    assert season_compatible(_item(3, []), "snowy")


def test_filter_by_weather_reports_removed_items():
    items = [_item(1, ["summer"]), _item(2, ["winter"]), _item(3, ["all"])]
    result = filter_by_weather(items, "hot")

    assert [item.item_id for item in result.items] == [1, 3]
    assert set(result.removed) == {2}
    assert result.debug["removed_count"] == 1


def test_filter_by_weather_rejects_unknown_weather():
    with pytest.raises(ValueError):
        filter_by_weather([_item(1, ["all"])], "monsoon")


def test_filter_by_owner_drops_foreign_and_duplicate_items():
    items = [
        _item(1, ["all"], owner_id=10),
        _item(2, ["all"], owner_id=11),
        _item(3, ["all"]),
        _item(1, ["all"], owner_id=10),
    ]
    result = filter_by_owner(items, 10)

    assert [item.item_id for item in result.items] == [1, 3]
    assert result.removed == {2: "belongs to another user", 1: "duplicate item id"}


def test_filter_by_owner_without_user_keeps_everyone():
    items = [_item(1, ["all"], owner_id=10), _item(2, ["all"], owner_id=11)]
    assert len(filter_by_owner(items, None).items) == 2
