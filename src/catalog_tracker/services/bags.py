"""Services for the bag collection."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from uuid import UUID

from catalog_tracker.domain.bags import Bag, BagStatistics, BagStyle, UsageFrequency
from catalog_tracker.domain.errors import require_text
from catalog_tracker.services.query import (
    NEWEST,
    OLDEST,
    QuerySchema,
    alphabetical,
    most_recent,
)
from catalog_tracker.services.records import RecordStore
from catalog_tracker.services.stats import count_by, stale_records, top_ranked

BAG_QUERY: QuerySchema[Bag] = QuerySchema(
    filters={
        "style": lambda bag: bag.style,
        "frequency": lambda bag: bag.usage_frequency,
        "color": lambda bag: bag.color,
        "favorites": lambda bag: bag.is_favorite,
    },
    search_fields=(lambda bag: bag.name, lambda bag: bag.brand),
    sorts={
        "newest": NEWEST,
        "oldest": OLDEST,
        "name": alphabetical(lambda bag: bag.name),
        "brand": alphabetical(lambda bag: bag.brand),
        "last_used": most_recent(lambda bag: bag.last_used_at),
    },
)


@dataclass
class BagService:
    """Application service for bag operations."""

    store: RecordStore[Bag]
    stale_after_days: int = 30
    top_brands_limit: int = 5

    def create_bag(  # noqa: PLR0913
        self,
        name: str,
        brand: str = "",
        style: BagStyle = BagStyle.EVERYDAY,
        color: str = "",
        usage_frequency: UsageFrequency = UsageFrequency.SOMETIMES,
        comment: str = "",
    ) -> Bag:
        """Validate input and add a new bag."""
        bag = Bag(
            name=require_text(name, "name"),
            brand=brand.strip(),
            style=style,
            color=color.strip(),
            usage_frequency=usage_frequency,
            comment=comment.strip(),
        )
        self.store.add(bag)
        return bag

    def update_bag(self, bag: Bag) -> bool:
        """Replace a bag after validating and trimming its text fields."""
        return self.store.update(
            replace(
                bag,
                name=require_text(bag.name, "name"),
                brand=bag.brand.strip(),
                color=bag.color.strip(),
                comment=bag.comment.strip(),
            )
        )

    def delete_bag(self, bag_id: UUID) -> bool:
        """Delete a bag by id."""
        return self.store.delete(bag_id)

    def mark_as_used(self, bag_id: UUID, used_at: datetime | None = None) -> Bag | None:
        """Record that a bag was carried."""
        bag = self.store.get(bag_id)
        if bag is None:
            return None
        updated = replace(bag, last_used_at=used_at or datetime.now(tz=UTC))
        self.store.update(updated)
        return updated

    def toggle_favorite(self, bag_id: UUID) -> Bag | None:
        """Flip the favorite flag."""
        bag = self.store.get(bag_id)
        if bag is None:
            return None
        updated = replace(bag, is_favorite=not bag.is_favorite)
        self.store.update(updated)
        return updated

    def set_usage_frequency(
        self, bag_id: UUID, frequency: UsageFrequency
    ) -> Bag | None:
        """Change how often a bag is carried."""
        bag = self.store.get(bag_id)
        if bag is None:
            return None
        updated = replace(bag, usage_frequency=frequency)
        self.store.update(updated)
        return updated

    def favorites(self) -> list[Bag]:
        """Return favorite bags, newest first."""
        bags = [bag for bag in self.store.all() if bag.is_favorite]
        return sorted(bags, key=lambda bag: bag.created_at, reverse=True)

    def colors(self) -> list[str]:
        """Return distinct non-empty colors in alphabetical order."""
        return sorted({bag.color for bag in self.store.all() if bag.color})

    def unused(self, now: datetime | None = None) -> list[Bag]:
        """Return bags not carried within the staleness threshold."""
        return stale_records(
            self.store.all(),
            lambda bag: bag.last_used_at,
            now or datetime.now(tz=UTC),
            self.stale_after_days,
        )

    def statistics(self, now: datetime | None = None) -> BagStatistics:
        """Summarize the collection."""
        bags = self.store.all()
        return BagStatistics(
            total=len(bags),
            favorites=sum(1 for bag in bags if bag.is_favorite),
            by_style=count_by(bags, lambda bag: bag.style, BagStyle),
            by_frequency=count_by(
                bags, lambda bag: bag.usage_frequency, UsageFrequency
            ),
            top_brands=top_ranked(
                (bag.brand for bag in bags), self.top_brands_limit
            ),
            unused=self.unused(now),
        )
