"""Services for makeup looks."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from uuid import UUID

from catalog_tracker.domain.errors import require_text
from catalog_tracker.domain.looks import LookStatistics, MakeupCategory, MakeupLook
from catalog_tracker.services.query import NEWEST, OLDEST, QuerySchema, alphabetical
from catalog_tracker.services.records import RecordStore
from catalog_tracker.services.stats import count_by, top_ranked

LOOK_QUERY: QuerySchema[MakeupLook] = QuerySchema(
    filters={
        "category": lambda look: look.category,
        "favorites": lambda look: look.is_favorite,
    },
    search_fields=(lambda look: look.name, lambda look: look.main_shades),
    sorts={
        "newest": NEWEST,
        "oldest": OLDEST,
        "name": alphabetical(lambda look: look.name),
    },
)


def clean_list(values: Iterable[str]) -> tuple[str, ...]:
    """Strip entries and drop the blank ones."""
    return tuple(value.strip() for value in values if value.strip())


@dataclass
class LookService:
    """Application service for makeup looks."""

    store: RecordStore[MakeupLook]
    top_shades_limit: int = 5

    def create_look(
        self,
        name: str,
        category: MakeupCategory = MakeupCategory.EVERYDAY,
        main_shades: Iterable[str] = (),
        products_used: Iterable[str] = (),
        result: str = "",
    ) -> MakeupLook:
        """Validate input and add a look."""
        look = MakeupLook(
            name=require_text(name, "name"),
            category=category,
            main_shades=clean_list(main_shades),
            products_used=clean_list(products_used),
            result=result.strip(),
        )
        self.store.add(look)
        return look

    def update_look(self, look: MakeupLook) -> bool:
        """Replace a look after validating its name."""
        return self.store.update(
            replace(
                look,
                name=require_text(look.name, "name"),
                result=look.result.strip(),
                main_shades=clean_list(look.main_shades),
                products_used=clean_list(look.products_used),
            )
        )

    def delete_look(self, look_id: UUID) -> bool:
        """Delete a look by id."""
        return self.store.delete(look_id)

    def toggle_favorite(self, look_id: UUID) -> MakeupLook | None:
        """Flip the favorite flag."""
        look = self.store.get(look_id)
        if look is None:
            return None
        updated = replace(look, is_favorite=not look.is_favorite)
        self.store.update(updated)
        return updated

    def statistics(self) -> LookStatistics:
        """Summarize saved looks."""
        looks = self.store.all()
        return LookStatistics(
            total=len(looks),
            favorites=sum(1 for look in looks if look.is_favorite),
            by_category=count_by(looks, lambda look: look.category, MakeupCategory),
            top_shades=top_ranked(
                (shade for look in looks for shade in look.main_shades),
                self.top_shades_limit,
            ),
        )
