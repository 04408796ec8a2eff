"""Lenient JSON persistence for record collections."""

import logging
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable string-keyed storage for serialized blobs."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""

    def delete(self, key: str) -> None:
        """Remove a key if present."""


@dataclass
class CollectionPersistence(Generic[T]):
    """Saves and loads a whole collection under a single key.

    Load failures degrade to an empty collection and save failures drop the
    write; both are logged and never raised to the caller. Missing fields in
    stored data fall back to the record defaults and unknown fields are
    ignored, so older blobs stay readable.
    """

    store: KeyValueStore
    key: str
    record_type: type[T]
    _adapter: TypeAdapter[list[T]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._adapter = TypeAdapter(list[self.record_type])

    def save(self, records: list[T]) -> bool:
        """Serialize the collection and write it; return False if dropped."""
        try:
            payload = self._adapter.dump_json(records).decode("utf-8")
        except PydanticSerializationError:
            _logger.warning("Failed to encode collection: key=%s", self.key)
            return False
        try:
            self.store.set(self.key, payload)
        except OSError:
            _logger.warning("Failed to write collection: key=%s", self.key)
            return False
        return True

    def load(self) -> list[T]:
        """Return the stored collection, or an empty list when unreadable."""
        try:
            raw = self.store.get(self.key)
        except (OSError, UnicodeDecodeError):
            _logger.warning("Failed to read collection: key=%s", self.key)
            return []
        if raw is None:
            return []
        try:
            return self._adapter.validate_json(raw)
        except ValidationError:
            _logger.warning("Discarding unreadable collection: key=%s", self.key)
            return []

    def dump(self, records: list[T]) -> list[object]:
        """Return the JSON-compatible form of a collection."""
        return self._adapter.dump_python(records, mode="json")


@dataclass
class SingletonPersistence(Generic[T]):
    """Saves and loads one composite value with the same lenient policy."""

    store: KeyValueStore
    key: str
    value_type: type[T]
    _adapter: TypeAdapter[T] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._adapter = TypeAdapter(self.value_type)

    def save(self, value: T) -> bool:
        """Serialize the value and write it; return False if dropped."""
        try:
            payload = self._adapter.dump_json(value).decode("utf-8")
        except PydanticSerializationError:
            _logger.warning("Failed to encode value: key=%s", self.key)
            return False
        try:
            self.store.set(self.key, payload)
        except OSError:
            _logger.warning("Failed to write value: key=%s", self.key)
            return False
        return True

    def load(self, default: T) -> T:
        """Return the stored value, or the default when absent or unreadable."""
        try:
            raw = self.store.get(self.key)
        except (OSError, UnicodeDecodeError):
            _logger.warning("Failed to read value: key=%s", self.key)
            return default
        if raw is None:
            return default
        try:
            return self._adapter.validate_json(raw)
        except ValidationError:
            _logger.warning("Discarding unreadable value: key=%s", self.key)
            return default

    def dump(self, value: T) -> object:
        """Return the JSON-compatible form of the value."""
        return self._adapter.dump_python(value, mode="json")
