"""Service test fixtures — async DB, unit of work and a controllable clock.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Every test starts at the same fixed instant; time only moves via clock.advance()

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for service tests
      (PostgreSQL-specific features not exercised here)
    - Settings built explicitly so a developer .env never changes test outcomes
"""

import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from lifedeck.config import Settings
from lifedeck.db.base import Base
from lifedeck.infrastructure.clock import FixedClock
from lifedeck.infrastructure.repositories import SqlUnitOfWork
from lifedeck.services.deck_service import DeckService
from lifedeck.services.user_locks import UserLockRegistry
import lifedeck.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def uow(test_db):
    return SqlUnitOfWork(test_db)


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        deck_max_size=5,
        swipe_threshold=100.0,
        card_ttl_days=7,
        score_increment=2.0,
        completion_points=10,
        achievements_enabled=True,
        _env_file=None,
    )


@pytest.fixture
def service(uow, clock, settings):
    return DeckService(uow, clock, settings, UserLockRegistry())


@pytest.fixture
def user_id():
    return uuid.uuid4()


@pytest.fixture
async def file_engine(tmp_path):
    """File-backed SQLite: every session gets its own connection."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'lifedeck.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def file_session_factory(file_engine):
    return async_sessionmaker(
        file_engine, class_=AsyncSession, expire_on_commit=False,
    )
