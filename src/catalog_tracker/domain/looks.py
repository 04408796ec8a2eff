"""Domain models for makeup looks."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID, uuid4

from catalog_tracker.domain.timestamps import Timestamp, utc_now


class MakeupCategory(StrEnum):
    """Occasion a look was created for."""

    EVERYDAY = "everyday"
    EVENING = "evening"
    PARTY = "party"
    NATURAL = "natural"
    CREATIVE = "creative"


@dataclass(frozen=True)
class MakeupLook:
    """A saved makeup look."""

    name: str
    category: MakeupCategory = MakeupCategory.EVERYDAY
    main_shades: tuple[str, ...] = ()
    products_used: tuple[str, ...] = ()
    result: str = ""
    is_favorite: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: Timestamp = field(default_factory=utc_now)


@dataclass(frozen=True)
class LookStatistics:
    """Summary of saved looks."""

    total: int
    favorites: int
    by_category: dict[MakeupCategory, int]
    top_shades: list[tuple[str, int]]
