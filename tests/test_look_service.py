"""Tests for the makeup look service."""

import pytest

from catalog_tracker.domain.looks import MakeupCategory, MakeupLook
from catalog_tracker.services.looks import LookService
from catalog_tracker.services.persistence import CollectionPersistence
from catalog_tracker.services.records import RecordStore
from tests.conftest import InMemoryKeyValueStore


@pytest.fixture
def service(kv_store: InMemoryKeyValueStore) -> LookService:
    return LookService(
        RecordStore(CollectionPersistence(kv_store, "looks", MakeupLook))
    )


def test_create_look_drops_blank_shades(service: LookService) -> None:
    look = service.create_look(
        "Soft glam", main_shades=["Peach", " ", " Rose "], products_used=[""]
    )

    assert look.main_shades == ("Peach", "Rose")
    assert look.products_used == ()


def test_statistics_counts_categories_and_shades(service: LookService) -> None:
    service.create_look(
        "Office", category=MakeupCategory.EVERYDAY, main_shades=["Nude", "Rose"]
    )
    party = service.create_look(
        "Party", category=MakeupCategory.PARTY, main_shades=["Gold", "Rose"]
    )
    service.toggle_favorite(party.id)

    stats = service.statistics()

    assert stats.total == 2
    assert stats.favorites == 1
    assert stats.by_category[MakeupCategory.PARTY] == 1
    assert stats.by_category[MakeupCategory.CREATIVE] == 0
    assert stats.top_shades[0] == ("Rose", 2)
