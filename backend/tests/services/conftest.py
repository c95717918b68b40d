"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the messages table created
    - The app under test receives its DatabaseSessionManager through create_app()

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session sees the same data
    - httpx ASGITransport does not run the lifespan, so fixtures connect/dispose explicitly
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from message_api.config import Settings
from message_api.infrastructure.database import DatabaseSessionManager
from message_api.main import create_app
from message_api.models.message import Message


@pytest.fixture
def test_settings():
    return Settings(database_url="sqlite+aiosqlite://", log_format="text")


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite://", poolclass=StaticPool,
    )
    await manager.connect()
    yield manager
    await manager.dispose()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def test_app(test_settings, db_manager):
    return create_app(test_settings, db_manager)


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_messages(test_db):
    """Three messages one minute apart, inserted oldest first."""
    base = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    rows = [
        Message(
            name=f"Sender {i}", email=f"sender{i}@example.com",
            message=f"Body {i}", date=base + timedelta(minutes=i),
        )
        for i in range(3)
    ]
    test_db.add_all(rows)
    await test_db.commit()
    return rows
