"""Tests for the JSON export."""

import json
from datetime import UTC, date, datetime

from catalog_tracker.containers import AppContainer
from catalog_tracker.domain.outfits import Weekday


def test_export_contains_every_collection(container: AppContainer) -> None:
    bag = container.bag_service.create_bag("Tote", brand="Celine")
    outfit = container.outfit_service.create_outfit("Linen set")
    container.outfit_service.assign_day(Weekday.MONDAY, outfit.id)
    container.journal_service.toggle_habit(date(2026, 3, 1), "Stretch")
    container.product_service.create_product("Serum", shades=["Clear"])

    exported = container.export_service.export_json(
        now=datetime(2026, 3, 1, 18, 5, tzinfo=UTC)
    )

    document = json.loads(exported)
    assert document["exported_at"] == "March 01, 2026 at 18:05 UTC"
    assert document["bags"][0]["id"] == str(bag.id)
    assert document["outfits"][0]["name"] == "Linen set"
    assert document["week_plan"]["assignments"]["monday"] == str(outfit.id)
    assert document["day_entries"][0]["checked_habits"] == ["Stretch"]
    assert document["products"][0]["shades"] == ["Clear"]
    assert document["notes"] == []
    assert document["looks"] == []
    assert exported.startswith('{\n  "exported_at"')
