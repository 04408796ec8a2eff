"""Dependency container wiring for the application."""

from dataclasses import dataclass

from catalog_tracker.adapters.json_file_store import JsonFileKeyValueStore
from catalog_tracker.config import Settings
from catalog_tracker.domain.bags import Bag
from catalog_tracker.domain.journal import DayEntry
from catalog_tracker.domain.looks import MakeupLook
from catalog_tracker.domain.notes import Note
from catalog_tracker.domain.outfits import Outfit, WeekPlan
from catalog_tracker.domain.products import BeautyProduct
from catalog_tracker.services.bags import BagService
from catalog_tracker.services.export import ExportService
from catalog_tracker.services.journal import JournalService
from catalog_tracker.services.looks import LookService
from catalog_tracker.services.notes import NoteService
from catalog_tracker.services.outfits import OutfitService
from catalog_tracker.services.persistence import (
    CollectionPersistence,
    KeyValueStore,
    SingletonPersistence,
)
from catalog_tracker.services.products import ProductService
from catalog_tracker.services.records import RecordStore

BAGS_KEY = "bags"
NOTES_KEY = "notes"
LOOKS_KEY = "looks"
PRODUCTS_KEY = "products"
OUTFITS_KEY = "outfits"
WEEK_PLAN_KEY = "week_plan"
DAY_ENTRIES_KEY = "day_entries"


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    bag_service: BagService
    note_service: NoteService
    look_service: LookService
    product_service: ProductService
    outfit_service: OutfitService
    journal_service: JournalService
    export_service: ExportService


def build_container(
    settings: Settings | None = None, storage: KeyValueStore | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    kv_store = storage or JsonFileKeyValueStore(resolved_settings.data_dir)

    bag_store = RecordStore(CollectionPersistence(kv_store, BAGS_KEY, Bag))
    note_store = RecordStore(CollectionPersistence(kv_store, NOTES_KEY, Note))
    look_store = RecordStore(CollectionPersistence(kv_store, LOOKS_KEY, MakeupLook))
    product_store = RecordStore(
        CollectionPersistence(kv_store, PRODUCTS_KEY, BeautyProduct)
    )
    outfit_store = RecordStore(CollectionPersistence(kv_store, OUTFITS_KEY, Outfit))
    day_entry_store = RecordStore(
        CollectionPersistence(kv_store, DAY_ENTRIES_KEY, DayEntry)
    )

    bag_service = BagService(
        bag_store,
        stale_after_days=resolved_settings.stale_after_days,
        top_brands_limit=resolved_settings.top_ranked_limit,
    )
    note_service = NoteService(note_store)
    look_service = LookService(
        look_store, top_shades_limit=resolved_settings.top_ranked_limit
    )
    product_service = ProductService(
        product_store,
        expiring_soon_days=resolved_settings.expiring_soon_days,
        stale_after_days=resolved_settings.stale_after_days,
        top_brands_limit=resolved_settings.top_ranked_limit,
        timezone_name=resolved_settings.timezone,
    )
    outfit_service = OutfitService(
        outfit_store, SingletonPersistence(kv_store, WEEK_PLAN_KEY, WeekPlan)
    )
    journal_service = JournalService(
        day_entry_store,
        timezone_name=resolved_settings.timezone,
        first_weekday=resolved_settings.first_weekday,
    )
    export_service = ExportService(
        stores=[
            bag_store,
            note_store,
            look_store,
            product_store,
            outfit_store,
            day_entry_store,
        ],
        outfit_service=outfit_service,
        timezone_name=resolved_settings.timezone,
    )

    return AppContainer(
        settings=resolved_settings,
        bag_service=bag_service,
        note_service=note_service,
        look_service=look_service,
        product_service=product_service,
        outfit_service=outfit_service,
        journal_service=journal_service,
        export_service=export_service,
    )
