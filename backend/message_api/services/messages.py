"""Message Service — list, create and bulk-delete message records.

Invariants:
    - Nothing is persisted unless name, email and message are all non-blank
    - Stored values are trimmed; date is assigned here, never taken from the client
    - Listing is newest-first by date
    - Every SQLAlchemyError becomes a StorageError carrying the endpoint's message

Design Decisions:
    - One statement plus commit per operation: no multi-step invariant to protect
    - Storage error text exposed only on create (callers debug submissions with it)
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from message_api.core.errors import MissingFieldsError, StorageError
from message_api.models.message import Message
from message_api.schemas.message import MessageCreate

logger = logging.getLogger(__name__)


async def list_messages(db: AsyncSession) -> list[Message]:
    """All messages, most recent first."""
    try:
        result = await db.execute(
            select(Message).order_by(Message.date.desc()),
        )
        messages = list(result.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Error fetching messages: {e}", extra={"operation": "list"})
        raise StorageError(
            "Failed to fetch messages", "list", details=str(e),
        ) from e
    logger.info(
        f"Found {len(messages)} messages in database",
        extra={"message_count": len(messages)},
    )
    return messages


async def create_message(db: AsyncSession, body: MessageCreate) -> Message:
    """Validate presence, trim, timestamp and persist one message."""
    logger.info(f"Received message request: {body.received()}")
    if body.missing_fields():
        raise MissingFieldsError(body.received())

    message = Message(
        **body.cleaned(), date=datetime.now(timezone.utc),
    )
    try:
        db.add(message)
        await db.commit()
        await db.refresh(message)
    except SQLAlchemyError as e:
        logger.error(
            f"Error saving message to database: {e}",
            extra={"operation": "create"},
        )
        raise StorageError(
            "Failed to save message to database", "create",
            details=str(e), expose_details=True,
        ) from e
    logger.info(
        f"Message saved: {message.id}", extra={"message_id": str(message.id)},
    )
    return message


async def delete_all_messages(db: AsyncSession) -> int:
    """Remove every message. Returns the number deleted."""
    try:
        result = await db.execute(
            delete(Message).execution_options(synchronize_session=False),
        )
        await db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Error deleting messages: {e}", extra={"operation": "delete"})
        raise StorageError(
            "Failed to delete messages", "delete", details=str(e),
        ) from e
    deleted = result.rowcount
    logger.info(
        f"Deleted {deleted} messages from database",
        extra={"deleted_count": deleted},
    )
    return deleted
