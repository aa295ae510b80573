"""Shared field types for request and response schemas."""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, Field, StringConstraints


def _to_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def normalize_email(value: object) -> object:
    """Lowercase and trim an email before validation."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


DisplayName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
TaskName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]
UtcDatetime = Annotated[datetime, AfterValidator(_to_utc)]

Limit = Annotated[int, Field(gt=0)]
Offset = Annotated[int, Field(ge=0)]
