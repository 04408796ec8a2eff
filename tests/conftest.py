"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from catalog_tracker.config import Settings
from catalog_tracker.containers import AppContainer, build_container
from catalog_tracker.domain.bags import Bag
from catalog_tracker.services.persistence import CollectionPersistence, KeyValueStore
from catalog_tracker.services.records import RecordStore


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for tests."""

    values: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)
    fail_writes: bool = False

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.writes.append(key)
        self.values[key] = value

    def delete(self, key: str) -> None:
        self.values.pop(key, None)


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        data_dir=tmp_path / "data",
        timezone="UTC",
        admin_token="admin-token",
    )


@pytest.fixture
def bag_store(kv_store: InMemoryKeyValueStore) -> RecordStore[Bag]:
    return RecordStore(CollectionPersistence(kv_store, "bags", Bag))


@pytest.fixture
def container(settings: Settings, kv_store: InMemoryKeyValueStore) -> AppContainer:
    return build_container(settings, storage=kv_store)
