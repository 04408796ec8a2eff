"""Services for notes."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from uuid import UUID

from catalog_tracker.domain.errors import require_text
from catalog_tracker.domain.notes import Note
from catalog_tracker.services.query import NEWEST, OLDEST, QuerySchema, alphabetical
from catalog_tracker.services.records import RecordStore

NOTE_QUERY: QuerySchema[Note] = QuerySchema(
    filters={"pinned": lambda note: note.is_pinned},
    search_fields=(lambda note: note.title, lambda note: note.content),
    sorts={
        "newest": NEWEST,
        "oldest": OLDEST,
        "title": alphabetical(lambda note: note.title),
    },
)


@dataclass
class NoteService:
    """Application service for notes."""

    store: RecordStore[Note]

    def create_note(self, title: str, content: str = "") -> Note:
        """Validate input and add a note."""
        note = Note(title=require_text(title, "title"), content=content.strip())
        self.store.add(note)
        return note

    def update_note(self, note: Note) -> bool:
        """Replace a note and stamp its modification time."""
        return self.store.update(
            replace(
                note,
                title=require_text(note.title, "title"),
                content=note.content.strip(),
                updated_at=datetime.now(tz=UTC),
            )
        )

    def delete_note(self, note_id: UUID) -> bool:
        """Delete a note by id."""
        return self.store.delete(note_id)

    def toggle_pin(self, note_id: UUID) -> Note | None:
        """Pin or unpin a note."""
        note = self.store.get(note_id)
        if note is None:
            return None
        updated = replace(note, is_pinned=not note.is_pinned)
        self.store.update(updated)
        return updated

    def list_notes(self) -> list[Note]:
        """Return pinned notes first, each group newest first."""
        newest_first = sorted(
            self.store.all(), key=lambda note: note.created_at, reverse=True
        )
        return sorted(newest_first, key=lambda note: not note.is_pinned)
