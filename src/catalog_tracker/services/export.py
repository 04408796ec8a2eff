"""Point-in-time JSON export of every collection."""

import json
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from catalog_tracker.services.outfits import OutfitService
from catalog_tracker.services.records import RecordStore

EXPORT_TIMESTAMP_FORMAT = "%B %d, %Y at %H:%M %Z"


@dataclass
class ExportService:
    """Builds a shareable snapshot of all stores."""

    stores: list[RecordStore]
    outfit_service: OutfitService
    timezone_name: str = "UTC"

    def snapshot(self, now: datetime | None = None) -> dict[str, object]:
        """Return the export document as JSON-compatible data."""
        tz = ZoneInfo(self.timezone_name)
        exported_at = now.astimezone(tz) if now else datetime.now(tz=tz)
        document: dict[str, object] = {
            "exported_at": exported_at.strftime(EXPORT_TIMESTAMP_FORMAT),
        }
        for store in self.stores:
            document[store.name] = store.persistence.dump(store.all())
        plan_persistence = self.outfit_service.plan_persistence
        document[plan_persistence.key] = plan_persistence.dump(
            self.outfit_service.plan
        )
        return document

    def export_json(self, now: datetime | None = None) -> str:
        """Return the snapshot as pretty-printed JSON."""
        return json.dumps(self.snapshot(now), indent=2, ensure_ascii=False)
