"""Shared pytest fixtures for all test suites."""

from collections.abc import Generator
from datetime import datetime

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session

from tripsync.config import Settings
from tripsync.db.context import UserContext
from tripsync.db.engine import create_engine_from_settings, create_session_factory, init_schema
from tripsync.mock.trips import create_vietnam_trip
from tripsync.models import Trip


@pytest.fixture
def today() -> datetime:
    """Fixed reference date for sample trips."""
    return datetime(2025, 9, 17, 9, 0)


@pytest.fixture
def user_ctx() -> UserContext:
    return UserContext(user_id="user-a")


@pytest.fixture
def vietnam_trip(today: datetime) -> Trip:
    return create_vietnam_trip(today)


@pytest.fixture
def sqlite_engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine with the schema created.

    Usage:
        def test_something(db_session):
            repo = SqlTripRepository(db_session)
    """
    engine = create_engine_from_settings(Settings(database_url="sqlite://"))
    init_schema(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def db_session(sqlite_engine: Engine) -> Generator[Session, None, None]:
    session_factory = create_session_factory(sqlite_engine)
    with session_factory() as session:
        yield session
