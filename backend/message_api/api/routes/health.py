"""Health Probe — reports process liveness and database connectivity.

Invariants:
    - GET /api/health always returns 200, even when the database is unreachable
    - database is "Connected" only if a live ping succeeds
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from message_api.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from message_api.schemas.message import HealthResponse, format_timestamp

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
):
    db_ok = await db_manager.health_check()
    return HealthResponse(
        database="Connected" if db_ok else "Disconnected",
        timestamp=format_timestamp(datetime.now(timezone.utc)),
    )
