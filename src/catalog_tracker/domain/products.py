"""Domain models for the beauty shelf."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from uuid import UUID, uuid4

from catalog_tracker.domain.timestamps import Timestamp, utc_now


class ProductCategory(StrEnum):
    """Shelf section of a product."""

    SKINCARE = "skincare"
    MAKEUP = "makeup"
    HAIRCARE = "haircare"
    FRAGRANCE = "fragrance"
    BODYCARE = "bodycare"
    OTHER = "other"


@dataclass(frozen=True)
class BeautyProduct:
    """A product stored somewhere on the shelf."""

    name: str
    brand: str = ""
    category: ProductCategory = ProductCategory.OTHER
    storage_location: str = ""
    shades: tuple[str, ...] = ()
    notes: str = ""
    expiration_date: date | None = None
    usage_count: int = 0
    last_used_at: Timestamp | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: Timestamp = field(default_factory=utc_now)


@dataclass(frozen=True)
class ProductStatistics:
    """Summary of the shelf."""

    total: int
    by_category: dict[ProductCategory, int]
    expired: list[BeautyProduct]
    expiring_soon: list[BeautyProduct]
    top_brands: list[tuple[str, int]]
    unused: list[BeautyProduct]
