"""Message Schemas — Pydantic models for the message API boundary.

Invariants:
    - MessageCreate rejects unknown keys and non-string values before any handler runs
    - MessageCreate keeps submitted values untouched; trimming happens in cleaned()
    - Timestamps serialize as UTC ISO-8601 with millisecond precision and a Z suffix

Design Decisions:
    - Presence is checked by missing_fields() rather than a validator: a blank field must
      yield a 400 that echoes the received values, not a generic validation error
    - Naive datetimes (SQLite drops tzinfo) are treated as UTC so POST and GET serialize alike
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer

REQUIRED_FIELDS = ("name", "email", "message")


def format_timestamp(value: datetime) -> str:
    """UTC ISO-8601, millisecond precision, Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MessageCreate(BaseModel):
    """Message submission. Fields optional here so absence can be reported back."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    email: str | None = None
    message: str | None = None

    def received(self) -> dict[str, str | None]:
        """Values exactly as submitted."""
        return {f: getattr(self, f) for f in REQUIRED_FIELDS}

    def missing_fields(self) -> list[str]:
        """Fields that are absent or blank after trimming."""
        return [
            f for f in REQUIRED_FIELDS
            if not (getattr(self, f) or "").strip()
        ]

    def cleaned(self) -> dict[str, str]:
        """Trimmed values. Only meaningful when missing_fields() is empty."""
        return {f: (getattr(self, f) or "").strip() for f in REQUIRED_FIELDS}


class MessageResponse(BaseModel):
    """Persisted message record."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    message: str
    date: datetime

    @field_serializer("date")
    def serialize_date(self, value: datetime) -> str:
        return format_timestamp(value)


class DeleteAllResponse(BaseModel):
    message: str = "All messages deleted successfully"
    deleted_count: int = Field(serialization_alias="deletedCount")


class HealthResponse(BaseModel):
    status: str = "OK"
    database: str
    timestamp: str
