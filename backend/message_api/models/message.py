"""Message ORM — persists a single contact-form submission.

Invariants:
    - id is a UUID primary key assigned on insert, never updated
    - name, email and message are non-nullable text, already trimmed by the service layer
    - date defaults to insertion time (UTC) and is indexed for newest-first listing
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from message_api.db.base import Base


class Message(Base):
    """Contact message record. Created once, deleted only in bulk."""
    __tablename__ = "messages"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )
