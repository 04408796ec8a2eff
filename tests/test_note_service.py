"""Tests for the note service."""

from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from catalog_tracker.domain.errors import RecordValidationError
from catalog_tracker.domain.notes import Note
from catalog_tracker.services.notes import NoteService
from catalog_tracker.services.persistence import CollectionPersistence
from catalog_tracker.services.records import RecordStore
from tests.conftest import InMemoryKeyValueStore


@pytest.fixture
def service(kv_store: InMemoryKeyValueStore) -> NoteService:
    return NoteService(RecordStore(CollectionPersistence(kv_store, "notes", Note)))


def test_create_note_requires_title(service: NoteService) -> None:
    with pytest.raises(RecordValidationError, match="title"):
        service.create_note("\n\t", "content")


def test_update_note_stamps_updated_at(service: NoteService) -> None:
    note = service.create_note("Packing list", "passport")

    assert service.update_note(replace(note, content="passport, charger"))

    stored = service.store.get(note.id)
    assert stored.content == "passport, charger"
    assert stored.updated_at is not None


def test_list_notes_puts_pinned_first(service: NoteService) -> None:
    base = datetime(2026, 1, 1, tzinfo=UTC)
    older = Note(title="Older", created_at=base)
    newer = Note(title="Newer", created_at=base + timedelta(days=1))
    pinned = Note(title="Pinned", created_at=base - timedelta(days=5))
    for note in (older, newer, pinned):
        service.store.add(note)
    service.toggle_pin(pinned.id)

    assert [note.title for note in service.list_notes()] == [
        "Pinned",
        "Newer",
        "Older",
    ]


def test_preview_uses_first_line() -> None:
    note = Note(title="Ideas", content="first line\nsecond line")

    assert note.preview == "first line"
    assert Note(title="Long", content="x" * 150).preview.endswith("...")
