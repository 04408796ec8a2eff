"""Aggregations over record collections."""

from collections import Counter
from collections.abc import Callable, Iterable
from datetime import date, datetime, timedelta
from typing import TypeVar

from catalog_tracker.domain.journal import DayEntry

T = TypeVar("T")
K = TypeVar("K")

DEFAULT_TOP_LIMIT = 5
DEFAULT_STALE_DAYS = 30
DECEMBER = 12


def count_by(
    records: Iterable[T], key: Callable[[T], K], categories: Iterable[K]
) -> dict[K, int]:
    """Count records per category, reporting zero for absent categories."""
    counts = dict.fromkeys(categories, 0)
    for record in records:
        value = key(record)
        if value in counts:
            counts[value] += 1
    return counts


def top_ranked(
    values: Iterable[str], limit: int = DEFAULT_TOP_LIMIT
) -> list[tuple[str, int]]:
    """Rank distinct non-blank values by frequency, ties in encounter order."""
    counter = Counter(value.strip() for value in values if value.strip())
    return counter.most_common(limit)


def stale_records(
    records: Iterable[T],
    last_used: Callable[[T], datetime | None],
    now: datetime,
    threshold_days: int = DEFAULT_STALE_DAYS,
) -> list[T]:
    """Return records never used or last used at least threshold_days ago."""
    threshold = timedelta(days=threshold_days)
    stale = []
    for record in records:
        used_at = last_used(record)
        if used_at is None or now - used_at >= threshold:
            stale.append(record)
    return stale


def active_days(entries: Iterable[DayEntry]) -> set[date]:
    """Return the days that have at least one checked habit."""
    return {entry.day for entry in entries if entry.is_active}


def current_streak(days: set[date], today: date) -> int:
    """Count consecutive active days backward from today; an open today is 0."""
    cursor = today
    streak = 0
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_streak(days: set[date]) -> int:
    """Return the longest run of consecutive active days."""
    longest = 0
    for day in days:
        if day - timedelta(days=1) in days:
            continue
        length = 1
        while day + timedelta(days=length) in days:
            length += 1
        longest = max(longest, length)
    return longest


def week_bounds(today: date, first_weekday: int = 0) -> tuple[date, date]:
    """Return the half-open calendar week containing today."""
    offset = (today.weekday() - first_weekday) % 7
    start = today - timedelta(days=offset)
    return start, start + timedelta(days=7)


def month_bounds(today: date) -> tuple[date, date]:
    """Return the half-open calendar month containing today."""
    start = today.replace(day=1)
    if start.month == DECEMBER:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


def count_in_week(days: set[date], today: date, first_weekday: int = 0) -> int:
    """Count active days in the current calendar week."""
    start, end = week_bounds(today, first_weekday)
    return sum(1 for day in days if start <= day < end)


def count_in_month(days: set[date], today: date) -> int:
    """Count active days in the current calendar month."""
    start, end = month_bounds(today)
    return sum(1 for day in days if start <= day < end)
