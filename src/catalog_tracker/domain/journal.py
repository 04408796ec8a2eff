"""Domain models for the daily habit journal."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

from catalog_tracker.domain.timestamps import Timestamp, utc_now


@dataclass(frozen=True)
class DayEntry:
    """Habits checked and a note for one calendar day."""

    day: date
    checked_habits: frozenset[str] = frozenset()
    note: str = ""
    updated_at: Timestamp | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: Timestamp = field(default_factory=utc_now)

    @property
    def is_active(self) -> bool:
        """Return True when at least one habit was checked."""
        return bool(self.checked_habits)


@dataclass(frozen=True)
class JournalStatistics:
    """Streaks and calendar buckets over the journal."""

    total_days: int
    current_streak: int
    longest_streak: int
    this_week: int
    this_month: int
    habit_counts: list[tuple[str, int]]
