"""Daily habit journal with streak statistics."""

from collections import Counter
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from catalog_tracker.domain.errors import require_text
from catalog_tracker.domain.journal import DayEntry, JournalStatistics
from catalog_tracker.services.records import RecordStore
from catalog_tracker.services.stats import (
    active_days,
    count_in_month,
    count_in_week,
    current_streak,
    longest_streak,
)


@dataclass
class JournalService:
    """Service for per-day habit entries in the user's timezone."""

    store: RecordStore[DayEntry]
    timezone_name: str = "UTC"
    first_weekday: int = 0

    def today(self, now: datetime | None = None) -> date:
        """Return today's date in the configured timezone."""
        tz = ZoneInfo(self.timezone_name)
        resolved = now.astimezone(tz) if now else datetime.now(tz=tz)
        return resolved.date()

    def entry_for(self, day: date) -> DayEntry | None:
        """Return the entry recorded for a day, if any."""
        for entry in self.store.all():
            if entry.day == day:
                return entry
        return None

    def today_entry(self, now: datetime | None = None) -> DayEntry | None:
        """Return today's entry, if any."""
        return self.entry_for(self.today(now))

    def entries(self) -> list[DayEntry]:
        """Return all entries, most recent day first."""
        return sorted(self.store.all(), key=lambda entry: entry.day, reverse=True)

    def toggle_habit(self, day: date, habit: str) -> DayEntry | None:
        """Check or uncheck a habit for a day; return the resulting entry."""
        name = require_text(habit, "habit")
        entry = self.entry_for(day) or DayEntry(day=day)
        habits = set(entry.checked_habits)
        if name in habits:
            habits.remove(name)
        else:
            habits.add(name)
        return self._store_entry(entry, replace(entry, checked_habits=frozenset(habits)))

    def set_note(self, day: date, note: str) -> DayEntry | None:
        """Replace the note for a day; return the resulting entry."""
        entry = self.entry_for(day) or DayEntry(day=day)
        return self._store_entry(entry, replace(entry, note=note.strip()))

    def statistics(self, now: datetime | None = None) -> JournalStatistics:
        """Compute streaks, calendar buckets and habit frequencies."""
        today = self.today(now)
        entries = self.store.all()
        days = active_days(entries)
        habit_counts = Counter(
            habit for entry in entries for habit in sorted(entry.checked_habits)
        )
        return JournalStatistics(
            total_days=len(days),
            current_streak=current_streak(days, today),
            longest_streak=longest_streak(days),
            this_week=count_in_week(days, today, self.first_weekday),
            this_month=count_in_month(days, today),
            habit_counts=habit_counts.most_common(),
        )

    def _store_entry(self, previous: DayEntry, entry: DayEntry) -> DayEntry | None:
        # Entries with nothing recorded are dropped rather than kept empty.
        if not entry.checked_habits and not entry.note:
            self.store.delete(previous.id)
            return None
        stamped = replace(entry, updated_at=datetime.now(tz=UTC))
        if not self.store.update(stamped):
            self.store.add(stamped)
        return stamped
