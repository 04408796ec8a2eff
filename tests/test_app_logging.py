"""Tests for logging configuration."""

import logging

import pytest

from catalog_tracker.app_logging import configure_logging
from catalog_tracker.domain.bags import Bag
from catalog_tracker.services.persistence import CollectionPersistence
from tests.conftest import InMemoryKeyValueStore


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("catalog_tracker")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_unreadable_collection_is_logged(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logging.getLogger("catalog_tracker"), "propagate", True)
    store = InMemoryKeyValueStore(values={"bags": "oops"})

    with caplog.at_level(logging.WARNING, logger="catalog_tracker"):
        assert CollectionPersistence(store, "bags", Bag).load() == []

    assert "Discarding unreadable collection" in caplog.text
