"""Pydantic request models for the catalog API."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel

from catalog_tracker.domain.bags import BagStyle, UsageFrequency
from catalog_tracker.domain.looks import MakeupCategory
from catalog_tracker.domain.outfits import OutfitMood, Season
from catalog_tracker.domain.products import ProductCategory


class BagInput(BaseModel):
    """Bag form payload."""

    name: str
    brand: str = ""
    style: BagStyle = BagStyle.EVERYDAY
    color: str = ""
    usage_frequency: UsageFrequency = UsageFrequency.SOMETIMES
    comment: str = ""


class NoteInput(BaseModel):
    """Note form payload."""

    title: str
    content: str = ""


class LookInput(BaseModel):
    """Makeup look form payload."""

    name: str
    category: MakeupCategory = MakeupCategory.EVERYDAY
    main_shades: list[str] = []
    products_used: list[str] = []
    result: str = ""


class ProductInput(BaseModel):
    """Beauty product form payload."""

    name: str
    brand: str = ""
    category: ProductCategory = ProductCategory.OTHER
    storage_location: str = ""
    shades: list[str] = []
    notes: str = ""
    expiration_date: date | None = None


class OutfitInput(BaseModel):
    """Outfit form payload."""

    name: str
    description: str = ""
    mood: OutfitMood = OutfitMood.RELAXED
    season: Season = Season.ALL_SEASON
    comment: str = ""


class PlanAssignment(BaseModel):
    """Outfit chosen for a weekday."""

    outfit_id: UUID


class HabitToggle(BaseModel):
    """Habit to check or uncheck."""

    habit: str


class DayNote(BaseModel):
    """Free-text note for a day."""

    note: str
