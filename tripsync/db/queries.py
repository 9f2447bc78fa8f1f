"""User-scoped query helpers."""

from sqlalchemy.orm import Query, Session

from tripsync.db.context import UserContext
from tripsync.db.models import TripRecord


def query_trip_records(session: Session, ctx: UserContext) -> Query:
    """Query trip_record table with user scoping enforced.

    Args:
        session: SQLAlchemy session
        ctx: User context

    Returns:
        Query filtered by user_id
    """
    return session.query(TripRecord).filter(TripRecord.user_id == ctx.user_id)
