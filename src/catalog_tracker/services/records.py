"""In-memory record store with write-through persistence."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, Protocol, TypeVar
from uuid import UUID

from catalog_tracker.domain.errors import DuplicateRecordError
from catalog_tracker.services.persistence import CollectionPersistence

_logger = logging.getLogger(__name__)


class Record(Protocol):
    """Shape shared by every stored record."""

    @property
    def id(self) -> UUID:
        """Identifier assigned at creation."""

    @property
    def created_at(self) -> datetime:
        """Creation timestamp."""


R = TypeVar("R", bound=Record)

ChangeListener = Callable[[Any], None]


@dataclass
class RecordStore(Generic[R]):
    """Authoritative collection for one entity type.

    The collection is loaded once on construction. Every applied mutation is
    saved before control returns to the caller, then listeners are notified.
    """

    persistence: CollectionPersistence[R]
    _records: list[R] = field(init=False, repr=False)
    _listeners: list[ChangeListener] = field(
        init=False, repr=False, default_factory=list
    )

    def __post_init__(self) -> None:
        self._records = self.persistence.load()

    @property
    def name(self) -> str:
        """Storage key of the collection."""
        return self.persistence.key

    def add(self, record: R) -> None:
        """Append a record carrying a fresh identifier."""
        if self._index_of(record.id) is not None:
            raise DuplicateRecordError(f"Record {record.id} already exists")
        self._records.append(record)
        _logger.debug("Record added: store=%s id=%s", self.name, record.id)
        self._commit()

    def update(self, record: R) -> bool:
        """Replace the record with the same id; return False when absent."""
        index = self._index_of(record.id)
        if index is None:
            _logger.debug("Update skipped: store=%s id=%s", self.name, record.id)
            return False
        self._records[index] = record
        self._commit()
        return True

    def delete(self, record_id: UUID) -> bool:
        """Remove a record if present; return whether anything was removed."""
        index = self._index_of(record_id)
        if index is None:
            return False
        del self._records[index]
        _logger.debug("Record deleted: store=%s id=%s", self.name, record_id)
        self._commit()
        return True

    def get(self, record_id: UUID) -> R | None:
        """Return a record by id, if present."""
        index = self._index_of(record_id)
        if index is None:
            return None
        return self._records[index]

    def all(self) -> list[R]:
        """Return every record in insertion order."""
        return list(self._records)

    def replace_all(self, records: list[R]) -> None:
        """Swap the whole collection in a single write."""
        ids = [record.id for record in records]
        if len(set(ids)) != len(ids):
            raise DuplicateRecordError("Duplicate record ids in replacement")
        self._records = list(records)
        self._commit()

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, record_id: UUID) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _commit(self) -> None:
        self.persistence.save(self._records)
        for listener in list(self._listeners):
            listener(self)
