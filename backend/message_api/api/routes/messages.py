"""Message Routes — list, submit and bulk-delete contact messages.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
    - A missing or non-JSON body reads as {} and fails the presence check, not body parsing
    - Handlers delegate to services/messages.py; errors propagate to the global handlers
    - DELETE has no filter and no confirmation: it empties the collection

Design Decisions:
    - Body parsed in read_submission instead of a MessageCreate parameter: FastAPI would
      reject an absent body as a validation error before presence could be reported
"""

import json

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from message_api.infrastructure.database import get_db
from message_api.schemas.message import (
    DeleteAllResponse, MessageCreate, MessageResponse,
)
from message_api.services import messages as message_service

router = APIRouter(prefix="/api/messages", tags=["messages"])


def _is_json(content_type: str | None) -> bool:
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_submission(request: Request) -> MessageCreate:
    """Parse a JSON body into MessageCreate. Absent or non-JSON bodies count as {}."""
    data: object = {}
    raw = await request.body()
    if raw and _is_json(request.headers.get("content-type")):
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise RequestValidationError([{
                "type": "json_invalid",
                "loc": ("body",),
                "msg": "JSON decode error",
                "input": {},
                "ctx": {"error": str(e)},
            }]) from e
    try:
        return MessageCreate.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError([
            {**err, "loc": ("body", *err["loc"])} for err in e.errors()
        ]) from e


@router.get("", response_model=list[MessageResponse])
async def list_messages(db: AsyncSession = Depends(get_db)):
    """All messages, newest first."""
    return await message_service.list_messages(db)


@router.post(
    "", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={"requestBody": {"content": {"application/json": {
        "schema": MessageCreate.model_json_schema(),
    }}}},
)
async def create_message(
    body: MessageCreate = Depends(read_submission),
    db: AsyncSession = Depends(get_db),
):
    """Submit a message. 400 with the received values if any field is blank."""
    return await message_service.create_message(db, body)


@router.delete("", response_model=DeleteAllResponse)
async def delete_all_messages(db: AsyncSession = Depends(get_db)):
    """Delete every message and report how many were removed."""
    deleted = await message_service.delete_all_messages(db)
    return DeleteAllResponse(deleted_count=deleted)
