"""Services for outfits and the weekly outfit plan."""

import logging
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID

from catalog_tracker.domain.errors import require_text
from catalog_tracker.domain.outfits import (
    Outfit,
    OutfitMood,
    OutfitStatistics,
    Season,
    Weekday,
    WeekPlan,
)
from catalog_tracker.services.persistence import SingletonPersistence
from catalog_tracker.services.query import (
    NEWEST,
    OLDEST,
    QuerySchema,
    alphabetical,
    most_recent,
)
from catalog_tracker.services.records import RecordStore
from catalog_tracker.services.stats import count_by

_logger = logging.getLogger(__name__)

OUTFIT_QUERY: QuerySchema[Outfit] = QuerySchema(
    filters={
        "mood": lambda outfit: outfit.mood,
        "season": lambda outfit: outfit.season,
        "favorites": lambda outfit: outfit.is_favorite,
    },
    search_fields=(lambda outfit: outfit.name, lambda outfit: outfit.description),
    sorts={
        "newest": NEWEST,
        "oldest": OLDEST,
        "name": alphabetical(lambda outfit: outfit.name),
        "last_worn": most_recent(lambda outfit: outfit.last_used_at),
    },
)


@dataclass
class OutfitService:
    """Application service for outfits and their week plan."""

    store: RecordStore[Outfit]
    plan_persistence: SingletonPersistence[WeekPlan]
    _plan: WeekPlan = field(init=False, repr=False)

    def __post_init__(self) -> None:
        loaded = self.plan_persistence.load(WeekPlan())
        self._plan = WeekPlan(
            assignments={day: loaded.assignments.get(day) for day in Weekday}
        )

    def create_outfit(  # noqa: PLR0913
        self,
        name: str,
        description: str = "",
        mood: OutfitMood = OutfitMood.RELAXED,
        season: Season = Season.ALL_SEASON,
        comment: str = "",
    ) -> Outfit:
        """Validate input and add an outfit."""
        outfit = Outfit(
            name=require_text(name, "name"),
            description=description.strip(),
            mood=mood,
            season=season,
            comment=comment.strip(),
        )
        self.store.add(outfit)
        return outfit

    def update_outfit(self, outfit: Outfit) -> bool:
        """Replace an outfit after validating and trimming its text fields."""
        return self.store.update(
            replace(
                outfit,
                name=require_text(outfit.name, "name"),
                description=outfit.description.strip(),
                comment=outfit.comment.strip(),
            )
        )

    def delete_outfit(self, outfit_id: UUID) -> bool:
        """Delete an outfit and clear any week-plan days pointing at it."""
        removed = self.store.delete(outfit_id)
        if removed:
            cleared = {
                day: None if planned == outfit_id else planned
                for day, planned in self._plan.assignments.items()
            }
            if cleared != self._plan.assignments:
                _logger.info("Clearing week plan for deleted outfit %s", outfit_id)
                self._save_plan(WeekPlan(assignments=cleared))
        return removed

    def toggle_favorite(self, outfit_id: UUID) -> Outfit | None:
        """Flip the favorite flag."""
        outfit = self.store.get(outfit_id)
        if outfit is None:
            return None
        updated = replace(outfit, is_favorite=not outfit.is_favorite)
        self.store.update(updated)
        return updated

    def mark_as_worn(
        self, outfit_id: UUID, worn_at: datetime | None = None
    ) -> Outfit | None:
        """Record that an outfit was worn."""
        outfit = self.store.get(outfit_id)
        if outfit is None:
            return None
        updated = replace(outfit, last_used_at=worn_at or datetime.now(tz=UTC))
        self.store.update(updated)
        return updated

    def assign_day(self, day: Weekday, outfit_id: UUID) -> bool:
        """Plan an existing outfit for a weekday; return False if unknown."""
        if self.store.get(outfit_id) is None:
            return False
        self._save_plan(
            WeekPlan(assignments={**self._plan.assignments, day: outfit_id})
        )
        return True

    def clear_day(self, day: Weekday) -> None:
        """Remove the outfit planned for a weekday."""
        self._save_plan(WeekPlan(assignments={**self._plan.assignments, day: None}))

    @property
    def plan(self) -> WeekPlan:
        """Return the raw week plan."""
        return self._plan

    def week_plan(self) -> dict[Weekday, Outfit | None]:
        """Return the planned outfit per weekday, resolved from the store."""
        resolved: dict[Weekday, Outfit | None] = {}
        for day in Weekday:
            outfit_id = self._plan.outfit_for(day)
            resolved[day] = self.store.get(outfit_id) if outfit_id else None
        return resolved

    def statistics(self) -> OutfitStatistics:
        """Summarize the wardrobe."""
        outfits = self.store.all()
        return OutfitStatistics(
            total=len(outfits),
            favorites=sum(1 for outfit in outfits if outfit.is_favorite),
            by_mood=count_by(outfits, lambda outfit: outfit.mood, OutfitMood),
            by_season=count_by(outfits, lambda outfit: outfit.season, Season),
            planned_days=sum(
                1 for outfit in self.week_plan().values() if outfit is not None
            ),
        )

    def _save_plan(self, plan: WeekPlan) -> None:
        self._plan = plan
        self.plan_persistence.save(plan)
