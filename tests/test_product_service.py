"""Tests for the beauty shelf service."""

from datetime import UTC, date, datetime

import pytest

from catalog_tracker.domain.products import BeautyProduct, ProductCategory
from catalog_tracker.services.persistence import CollectionPersistence
from catalog_tracker.services.products import (
    ProductService,
    is_expired,
    is_expiring_soon,
)
from catalog_tracker.services.records import RecordStore
from tests.conftest import InMemoryKeyValueStore


@pytest.fixture
def service(kv_store: InMemoryKeyValueStore) -> ProductService:
    store = RecordStore(CollectionPersistence(kv_store, "products", BeautyProduct))
    return ProductService(store, expiring_soon_days=30)


def test_record_use_increments_counter(service: ProductService) -> None:
    product = service.create_product("Mascara", brand="Maybelline")
    used_at = datetime(2026, 2, 1, tzinfo=UTC)

    service.record_use(product.id, used_at=used_at)
    updated = service.record_use(product.id, used_at=used_at)

    assert updated.usage_count == 2
    assert service.store.get(product.id).last_used_at == used_at


def test_expiration_helpers() -> None:
    today = date(2026, 6, 1)
    expired = BeautyProduct(name="Old", expiration_date=date(2026, 5, 31))
    soon = BeautyProduct(name="Soon", expiration_date=date(2026, 7, 1))
    later = BeautyProduct(name="Later", expiration_date=date(2026, 9, 1))
    undated = BeautyProduct(name="Undated")

    assert is_expired(expired, today)
    assert not is_expired(soon, today)
    assert is_expiring_soon(soon, today, 30)
    assert not is_expiring_soon(expired, today, 30)
    assert not is_expiring_soon(later, today, 30)
    assert not is_expiring_soon(undated, today, 30)


def test_locations(service: ProductService) -> None:
    service.create_product("Toner", storage_location="Bathroom")
    service.create_product("blush", storage_location="Vanity")
    service.create_product("Brow gel", storage_location="Vanity")
    service.create_product("Sample")

    assert service.locations() == ["Bathroom", "Vanity"]
    assert [p.name for p in service.products_in_location("Vanity")] == [
        "blush",
        "Brow gel",
    ]


def test_statistics(service: ProductService) -> None:
    now = datetime(2026, 6, 1, tzinfo=UTC)
    service.create_product(
        "Cleanser",
        brand="CeraVe",
        category=ProductCategory.SKINCARE,
        expiration_date=date(2026, 1, 1),
    )
    used = service.create_product(
        "Cream",
        brand="CeraVe",
        category=ProductCategory.SKINCARE,
        expiration_date=date(2026, 6, 20),
    )
    service.create_product("Perfume", category=ProductCategory.FRAGRANCE)
    service.record_use(used.id, used_at=now)

    stats = service.statistics(now=now)

    assert stats.total == 3
    assert stats.by_category[ProductCategory.SKINCARE] == 2
    assert stats.by_category[ProductCategory.HAIRCARE] == 0
    assert [p.name for p in stats.expired] == ["Cleanser"]
    assert [p.name for p in stats.expiring_soon] == ["Cream"]
    assert stats.top_brands == [("CeraVe", 2)]
    assert [p.name for p in stats.unused] == ["Cleanser", "Perfume"]


def test_expiry_uses_configured_timezone(kv_store: InMemoryKeyValueStore) -> None:
    store = RecordStore(CollectionPersistence(kv_store, "products", BeautyProduct))
    tokyo = ProductService(store, timezone_name="Asia/Tokyo")
    utc = ProductService(store)
    product = tokyo.create_product("Serum", expiration_date=date(2026, 3, 10))
    now = datetime(2026, 3, 10, 23, 30, tzinfo=UTC)

    assert tokyo.today(now) == date(2026, 3, 11)
    assert tokyo.statistics(now=now).expired == [product]
    assert utc.statistics(now=now).expired == []
    assert utc.statistics(now=now).expiring_soon == [product]
