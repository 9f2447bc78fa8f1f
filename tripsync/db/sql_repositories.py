"""SQL implementation of the trip repository."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tripsync.db.codec import encode_trip
from tripsync.db.context import UserContext
from tripsync.db.models import TripRecord
from tripsync.db.queries import query_trip_records
from tripsync.db.repositories import TripStoreError, decode_fetched
from tripsync.models.trip import Trip
from tripsync.utils.logging import StructuredStoreLogger
from tripsync.utils.metrics import PrometheusStoreMetrics


class SqlTripRepository:
    """SQL implementation of TripRepository."""

    def __init__(self, session: Session) -> None:
        self._session = session
        self._log = StructuredStoreLogger("sql")
        self._metrics = PrometheusStoreMetrics("sql")

    def _fail(self, ctx: UserContext, operation: str, e: SQLAlchemyError) -> TripStoreError:
        self._session.rollback()
        self._metrics.inc_operation(operation, "error")
        self._log.log_operation(ctx, operation, "error", error_reason=type(e).__name__)
        return TripStoreError(f"Trip {operation} failed: {e}")

    def save(self, trip: Trip, ctx: UserContext) -> None:
        """Create or replace a trip."""
        record = TripRecord(
            user_id=ctx.user_id,
            trip_id=trip.id,
            data=encode_trip(trip),
            created_at=trip.created_date,
        )

        try:
            self._session.merge(record)
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail(ctx, "save", e) from e

        self._metrics.inc_operation("save", "success")
        self._log.log_operation(ctx, "save", "success", trip_id=trip.id)

    def fetch(self, ctx: UserContext) -> list[Trip]:
        """Fetch all of a user's trips, newest first."""
        try:
            records = (
                query_trip_records(self._session, ctx)
                .order_by(TripRecord.created_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            raise self._fail(ctx, "fetch", e) from e

        trips = decode_fetched((r.data for r in records), ctx, self._log, self._metrics)
        self._metrics.inc_operation("fetch", "success")
        self._log.log_operation(ctx, "fetch", "success", count=len(trips))
        return trips

    def delete(self, trip_id: str, ctx: UserContext) -> bool:
        """Delete a trip."""
        try:
            record = (
                query_trip_records(self._session, ctx)
                .filter(TripRecord.trip_id == trip_id)
                .first()
            )
            if record is None:
                self._metrics.inc_operation("delete", "not_found")
                return False

            self._session.delete(record)
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail(ctx, "delete", e) from e

        self._metrics.inc_operation("delete", "success")
        self._log.log_operation(ctx, "delete", "success", trip_id=trip_id)
        return True
