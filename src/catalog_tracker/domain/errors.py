"""Domain exceptions."""


class CatalogError(Exception):
    """Base error for catalog operations."""


class RecordValidationError(CatalogError, ValueError):
    """Raised when user input cannot produce a valid record."""


class DuplicateRecordError(CatalogError, ValueError):
    """Raised when a record id is already present in a collection."""


def require_text(value: str, field_name: str) -> str:
    """Return the stripped value or raise when it is blank."""
    cleaned = value.strip()
    if not cleaned:
        raise RecordValidationError(f"{field_name} is required")
    return cleaned
