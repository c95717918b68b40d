"""Message API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MessageApiError → JSON error bodies
    - CORS allow-list comes from settings
    - The DatabaseSessionManager lives on app.state; startup fails if the database is unreachable

Design Decisions:
    - create_app() factory: tests inject their own settings and session manager
    - Lifespan over @app.on_event: connect on startup, dispose on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from message_api.api.error_handlers import register_error_handlers
from message_api.api.routes import health, messages
from message_api.config import Settings, get_settings
from message_api.infrastructure.database import DatabaseSessionManager
from message_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager: DatabaseSessionManager = app.state.db_manager
    await db_manager.connect()
    logger.info(f"Server running on port {settings.port}")
    logger.info(f"Message API: http://localhost:{settings.port}/api/messages")
    logger.info(f"Health check: http://localhost:{settings.port}/api/health")
    yield
    logger.info("Message API shutting down")
    await db_manager.dispose()


def create_app(
    settings: Settings | None = None,
    db_manager: DatabaseSessionManager | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Message API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db_manager = db_manager or DatabaseSessionManager.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(messages.router)

    register_error_handlers(app)
    return app


app = create_app()
