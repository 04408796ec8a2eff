"""Domain models for the bag collection."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID, uuid4

from catalog_tracker.domain.timestamps import Timestamp, utc_now


class BagStyle(StrEnum):
    """Occasion a bag is meant for."""

    EVERYDAY = "everyday"
    EVENING = "evening"
    TRAVEL = "travel"
    OTHER = "other"


class UsageFrequency(StrEnum):
    """How often a bag gets carried."""

    OFTEN = "often"
    SOMETIMES = "sometimes"
    RARELY = "rarely"


@dataclass(frozen=True)
class Bag:
    """A bag in the user's collection."""

    name: str
    brand: str = ""
    style: BagStyle = BagStyle.EVERYDAY
    color: str = ""
    usage_frequency: UsageFrequency = UsageFrequency.SOMETIMES
    comment: str = ""
    is_favorite: bool = False
    last_used_at: Timestamp | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: Timestamp = field(default_factory=utc_now)


@dataclass(frozen=True)
class BagStatistics:
    """Summary of the bag collection."""

    total: int
    favorites: int
    by_style: dict[BagStyle, int]
    by_frequency: dict[UsageFrequency, int]
    top_brands: list[tuple[str, int]]
    unused: list[Bag]
