"""Filtered, searched and sorted projections over a record store."""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Generic

from catalog_tracker.services.records import R, RecordStore

SearchField = Callable[[Any], str | Iterable[str]]


@dataclass(frozen=True)
class SortOption:
    """Sort key plus direction; ties keep stored order."""

    key: Callable[[Any], Any]
    descending: bool = False


NEWEST = SortOption(key=lambda record: record.created_at, descending=True)
OLDEST = SortOption(key=lambda record: record.created_at)


def alphabetical(getter: Callable[[Any], str]) -> SortOption:
    """Case-insensitive ascending sort on a text field."""
    return SortOption(key=lambda record: getter(record).casefold())


def most_recent(getter: Callable[[Any], Any]) -> SortOption:
    """Descending sort on an optional timestamp, missing values last."""
    return SortOption(
        key=lambda record: (getter(record) is not None, getter(record) or 0),
        descending=True,
    )


@dataclass(frozen=True)
class QuerySchema(Generic[R]):
    """Filter axes, searchable fields and sort options for one entity type."""

    filters: Mapping[str, Callable[[R], object]]
    search_fields: tuple[SearchField, ...]
    sorts: Mapping[str, SortOption]
    default_sort: str = "newest"


@dataclass(frozen=True)
class QueryState:
    """Current filter axis, search text and sort option."""

    filter_axis: str | None = None
    filter_value: object = None
    search_text: str = ""
    sort: str | None = None


def run_query(
    records: list[R], schema: QuerySchema[R], state: QueryState
) -> list[R]:
    """Apply filter, then search, then sort to a collection."""
    results = records
    if state.filter_axis is not None:
        getter = schema.filters[state.filter_axis]
        results = [
            record for record in results if getter(record) == state.filter_value
        ]
    needle = state.search_text.strip().casefold()
    if needle:
        results = [
            record
            for record in results
            if _matches(record, needle, schema.search_fields)
        ]
    option = schema.sorts[state.sort or schema.default_sort]
    return sorted(results, key=option.key, reverse=option.descending)


def _matches(record: Any, needle: str, fields: tuple[SearchField, ...]) -> bool:
    for search_field in fields:
        value = search_field(record)
        values = [value] if isinstance(value, str) else value
        if any(needle in text.casefold() for text in values):
            return True
    return False


@dataclass
class QueryView(Generic[R]):
    """Projection recomputed from the store on every read.

    At most one filter axis is active: selecting an axis replaces whatever
    axis was selected before, so category filters and quick toggles such as
    favorites never combine.
    """

    store: RecordStore[R]
    schema: QuerySchema[R]
    state: QueryState = field(default_factory=QueryState)

    def filter_by(self, axis: str, value: object) -> None:
        """Make an axis the only active filter."""
        if axis not in self.schema.filters:
            raise ValueError(f"Unknown filter axis: {axis}")
        self.state = replace(self.state, filter_axis=axis, filter_value=value)

    def clear_filter(self) -> None:
        """Show all categories."""
        self.state = replace(self.state, filter_axis=None, filter_value=None)

    def search(self, text: str) -> None:
        """Set the free-text search; blank text disables it."""
        self.state = replace(self.state, search_text=text)

    def sort_by(self, option: str) -> None:
        """Select a sort option by name."""
        if option not in self.schema.sorts:
            raise ValueError(f"Unknown sort option: {option}")
        self.state = replace(self.state, sort=option)

    def reset(self) -> None:
        """Clear filter, search and sort."""
        self.state = QueryState()

    def results(self) -> list[R]:
        """Return the current projection."""
        return run_query(self.store.all(), self.schema, self.state)
