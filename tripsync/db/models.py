"""SQLAlchemy ORM models for stored trips."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class TripRecord(Base):
    """Trip record table - one encoded trip per (user, trip) key."""

    __tablename__ = "trip_record"
    __table_args__ = (Index("idx_trip_record_user_created", "user_id", "created_at"),)

    user_id: Mapped[str] = mapped_column(Text, primary_key=True)
    trip_id: Mapped[str] = mapped_column(Text, primary_key=True)
    # Encoded trip; JSONB on PostgreSQL, plain JSON elsewhere (e.g. SQLite)
    data: Mapped[dict[str, Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )
