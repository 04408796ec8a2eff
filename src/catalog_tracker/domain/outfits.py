"""Domain models for outfits and the weekly outfit plan."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID, uuid4

from catalog_tracker.domain.timestamps import Timestamp, utc_now


class OutfitMood(StrEnum):
    """Feeling an outfit is associated with."""

    CONFIDENT = "confident"
    RELAXED = "relaxed"
    PLAYFUL = "playful"
    ELEGANT = "elegant"
    COZY = "cozy"


class Season(StrEnum):
    """Season an outfit suits."""

    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"
    ALL_SEASON = "all_season"


class Weekday(StrEnum):
    """Day slot in the week plan, Monday first."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


@dataclass(frozen=True)
class Outfit:
    """A described outfit."""

    name: str
    description: str = ""
    mood: OutfitMood = OutfitMood.RELAXED
    season: Season = Season.ALL_SEASON
    comment: str = ""
    is_favorite: bool = False
    last_used_at: Timestamp | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: Timestamp = field(default_factory=utc_now)


@dataclass(frozen=True)
class WeekPlan:
    """Outfit assignment per weekday; unassigned days map to None."""

    assignments: dict[Weekday, UUID | None] = field(
        default_factory=lambda: dict.fromkeys(Weekday)
    )

    def outfit_for(self, day: Weekday) -> UUID | None:
        """Return the outfit id planned for a day."""
        return self.assignments.get(day)


@dataclass(frozen=True)
class OutfitStatistics:
    """Summary of the wardrobe."""

    total: int
    favorites: int
    by_mood: dict[OutfitMood, int]
    by_season: dict[Season, int]
    planned_days: int
