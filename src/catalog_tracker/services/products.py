"""Services for the beauty shelf."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from catalog_tracker.domain.errors import require_text
from catalog_tracker.domain.products import (
    BeautyProduct,
    ProductCategory,
    ProductStatistics,
)
from catalog_tracker.services.looks import clean_list
from catalog_tracker.services.query import (
    NEWEST,
    OLDEST,
    QuerySchema,
    SortOption,
    alphabetical,
    most_recent,
)
from catalog_tracker.services.records import RecordStore
from catalog_tracker.services.stats import count_by, stale_records, top_ranked

PRODUCT_QUERY: QuerySchema[BeautyProduct] = QuerySchema(
    filters={
        "category": lambda product: product.category,
        "location": lambda product: product.storage_location,
    },
    search_fields=(
        lambda product: product.name,
        lambda product: product.brand,
        lambda product: product.shades,
    ),
    sorts={
        "newest": NEWEST,
        "oldest": OLDEST,
        "name": alphabetical(lambda product: product.name),
        "brand": alphabetical(lambda product: product.brand),
        "most_used": SortOption(
            key=lambda product: product.usage_count, descending=True
        ),
        "last_used": most_recent(lambda product: product.last_used_at),
        "expiration": SortOption(
            key=lambda product: (
                product.expiration_date is None,
                product.expiration_date or date.max,
            )
        ),
    },
)


def is_expired(product: BeautyProduct, today: date) -> bool:
    """Return True once the expiration date has passed."""
    return product.expiration_date is not None and product.expiration_date < today


def is_expiring_soon(product: BeautyProduct, today: date, within_days: int) -> bool:
    """Return True when the product expires within the window but not yet."""
    if product.expiration_date is None or is_expired(product, today):
        return False
    return product.expiration_date <= today + timedelta(days=within_days)


@dataclass
class ProductService:
    """Application service for beauty products."""

    store: RecordStore[BeautyProduct]
    expiring_soon_days: int = 30
    stale_after_days: int = 30
    top_brands_limit: int = 5
    timezone_name: str = "UTC"

    def today(self, now: datetime | None = None) -> date:
        """Return today's date in the configured timezone."""
        tz = ZoneInfo(self.timezone_name)
        resolved = now.astimezone(tz) if now else datetime.now(tz=tz)
        return resolved.date()

    def create_product(  # noqa: PLR0913
        self,
        name: str,
        brand: str = "",
        category: ProductCategory = ProductCategory.OTHER,
        storage_location: str = "",
        shades: Iterable[str] = (),
        notes: str = "",
        expiration_date: date | None = None,
    ) -> BeautyProduct:
        """Validate input and add a product."""
        product = BeautyProduct(
            name=require_text(name, "name"),
            brand=brand.strip(),
            category=category,
            storage_location=storage_location.strip(),
            shades=clean_list(shades),
            notes=notes.strip(),
            expiration_date=expiration_date,
        )
        self.store.add(product)
        return product

    def update_product(self, product: BeautyProduct) -> bool:
        """Replace a product after validating its name."""
        return self.store.update(
            replace(
                product,
                name=require_text(product.name, "name"),
                brand=product.brand.strip(),
                storage_location=product.storage_location.strip(),
                shades=clean_list(product.shades),
                notes=product.notes.strip(),
            )
        )

    def delete_product(self, product_id: UUID) -> bool:
        """Delete a product by id."""
        return self.store.delete(product_id)

    def record_use(
        self, product_id: UUID, used_at: datetime | None = None
    ) -> BeautyProduct | None:
        """Increment the usage counter and stamp the last use."""
        product = self.store.get(product_id)
        if product is None:
            return None
        updated = replace(
            product,
            usage_count=product.usage_count + 1,
            last_used_at=used_at or datetime.now(tz=UTC),
        )
        self.store.update(updated)
        return updated

    def locations(self) -> list[str]:
        """Return distinct storage locations in alphabetical order."""
        return sorted(
            {p.storage_location for p in self.store.all() if p.storage_location}
        )

    def products_in_location(self, location: str) -> list[BeautyProduct]:
        """Return products kept in a location, alphabetically."""
        products = [p for p in self.store.all() if p.storage_location == location]
        return sorted(products, key=lambda product: product.name.casefold())

    def statistics(self, now: datetime | None = None) -> ProductStatistics:
        """Summarize the shelf."""
        resolved_now = now or datetime.now(tz=UTC)
        today = self.today(resolved_now)
        products = self.store.all()
        return ProductStatistics(
            total=len(products),
            by_category=count_by(
                products, lambda product: product.category, ProductCategory
            ),
            expired=[p for p in products if is_expired(p, today)],
            expiring_soon=[
                p
                for p in products
                if is_expiring_soon(p, today, self.expiring_soon_days)
            ],
            top_brands=top_ranked(
                (product.brand for product in products), self.top_brands_limit
            ),
            unused=stale_records(
                products,
                lambda product: product.last_used_at,
                resolved_now,
                self.stale_after_days,
            ),
        )
