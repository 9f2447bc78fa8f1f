"""Tests for the SQL trip store (SQLite in-memory)."""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session

from tripsync.config import Settings
from tripsync.db.context import UserContext
from tripsync.db.engine import create_engine_from_settings
from tripsync.db.models import TripRecord
from tripsync.db.queries import query_trip_records
from tripsync.db.sql_repositories import SqlTripRepository
from tripsync.models import Trip


def make_trip(trip_id: str, created: datetime) -> Trip:
    """Helper to create a test trip."""
    return Trip(
        id=trip_id,
        title=trip_id.title(),
        start_date=datetime(2025, 11, 1),
        end_date=datetime(2025, 11, 5),
        created_date=created,
        last_modified=created,
    )


def test_save_then_fetch_round_trips(
    db_session: Session, vietnam_trip: Trip, user_ctx: UserContext
) -> None:
    repo = SqlTripRepository(db_session)

    repo.save(vietnam_trip, user_ctx)

    assert repo.fetch(user_ctx) == [vietnam_trip]


def test_record_stores_encoded_trip(
    db_session: Session, vietnam_trip: Trip, user_ctx: UserContext
) -> None:
    SqlTripRepository(db_session).save(vietnam_trip, user_ctx)

    record = query_trip_records(db_session, user_ctx).one()
    assert record.trip_id == "vietnam_trip_001"
    assert record.created_at == vietnam_trip.created_date
    assert record.data["regions"][0]["subRegions"][1]["id"] == "hanoi_region"


def test_save_replaces_existing_trip(
    db_session: Session, vietnam_trip: Trip, user_ctx: UserContext
) -> None:
    repo = SqlTripRepository(db_session)
    repo.save(vietnam_trip, user_ctx)

    renamed = vietnam_trip.model_copy(update={"title": "Vietnam, again"})
    repo.save(renamed, user_ctx)

    trips = repo.fetch(user_ctx)
    assert [t.title for t in trips] == ["Vietnam, again"]


def test_user_isolation(db_session: Session, vietnam_trip: Trip) -> None:
    """Test that the same trip id under two users is two separate records."""
    repo = SqlTripRepository(db_session)
    ctx_a = UserContext(user_id="user-a")
    ctx_b = UserContext(user_id="user-b")

    repo.save(vietnam_trip, ctx_a)
    repo.save(vietnam_trip.model_copy(update={"title": "B's copy"}), ctx_b)

    assert [t.title for t in repo.fetch(ctx_a)] == ["Vietnam Adventure"]
    assert [t.title for t in repo.fetch(ctx_b)] == ["B's copy"]

    assert repo.delete(vietnam_trip.id, ctx_b) is True
    assert len(repo.fetch(ctx_a)) == 1


def test_fetch_sorts_newest_first(db_session: Session, user_ctx: UserContext) -> None:
    repo = SqlTripRepository(db_session)
    base = datetime(2025, 9, 1)
    for trip_id, offset in [("middle", 1), ("oldest", 0), ("newest", 2)]:
        repo.save(make_trip(trip_id, base + timedelta(days=offset)), user_ctx)

    assert [t.id for t in repo.fetch(user_ctx)] == ["newest", "middle", "oldest"]


def test_fetch_skips_unreadable_records(
    db_session: Session, vietnam_trip: Trip, user_ctx: UserContext
) -> None:
    repo = SqlTripRepository(db_session)
    repo.save(vietnam_trip, user_ctx)
    db_session.add(
        TripRecord(
            user_id=user_ctx.user_id,
            trip_id="broken",
            data={"id": "broken", "title": "No dates"},
            created_at=datetime(2025, 9, 1),
        )
    )
    db_session.commit()

    assert [t.id for t in repo.fetch(user_ctx)] == ["vietnam_trip_001"]


def test_delete(db_session: Session, vietnam_trip: Trip, user_ctx: UserContext) -> None:
    repo = SqlTripRepository(db_session)
    repo.save(vietnam_trip, user_ctx)

    assert repo.delete(vietnam_trip.id, user_ctx) is True
    assert repo.delete(vietnam_trip.id, user_ctx) is False
    assert repo.fetch(user_ctx) == []


def test_schema_exists_on_engine(sqlite_engine: Engine) -> None:
    assert "trip_record" in TripRecord.metadata.tables
    assert sqlite_engine.dialect.name == "sqlite"


def test_engine_requires_database_url() -> None:
    with pytest.raises(ValueError):
        create_engine_from_settings(Settings(database_url=None))
