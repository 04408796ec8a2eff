"""Domain models for free-form notes."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from catalog_tracker.domain.timestamps import Timestamp, utc_now


@dataclass(frozen=True)
class Note:
    """A titled note."""

    title: str
    content: str = ""
    is_pinned: bool = False
    updated_at: Timestamp | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: Timestamp = field(default_factory=utc_now)

    @property
    def preview(self) -> str:
        """First line of the content, trimmed for list display."""
        first_line = self.content.strip().split("\n", 1)[0]
        if len(first_line) > 100:  # noqa: PLR2004
            return first_line[:100] + "..."
        return first_line
