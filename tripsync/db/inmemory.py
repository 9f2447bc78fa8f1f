"""In-memory implementation of the trip repository."""

import copy
from typing import Any

from tripsync.db.codec import encode_trip
from tripsync.db.context import UserContext
from tripsync.db.repositories import decode_fetched
from tripsync.models.trip import Trip
from tripsync.utils.logging import StructuredStoreLogger
from tripsync.utils.metrics import PrometheusStoreMetrics


class InMemoryTripRepository:
    """In-memory implementation of TripRepository.

    Trips are held as encoded records, so fetches go through the same decode
    path as the real stores.
    """

    def __init__(self) -> None:
        self._records: dict[str, dict[str, dict[str, Any]]] = {}
        self._log = StructuredStoreLogger("inmemory")
        self._metrics = PrometheusStoreMetrics("inmemory")

    def save(self, trip: Trip, ctx: UserContext) -> None:
        """Create or replace a trip."""
        self._records.setdefault(ctx.user_id, {})[trip.id] = encode_trip(trip)
        self._metrics.inc_operation("save", "success")
        self._log.log_operation(ctx, "save", "success", trip_id=trip.id)

    def put_record(self, trip_id: str, record: dict[str, Any], ctx: UserContext) -> None:
        """Store a raw record as-is (imports and tests)."""
        self._records.setdefault(ctx.user_id, {})[trip_id] = copy.deepcopy(record)

    def fetch(self, ctx: UserContext) -> list[Trip]:
        """Fetch all of a user's trips, newest first."""
        records = self._records.get(ctx.user_id, {}).values()
        trips = decode_fetched(records, ctx, self._log, self._metrics)
        self._metrics.inc_operation("fetch", "success")
        self._log.log_operation(ctx, "fetch", "success", count=len(trips))
        return trips

    def delete(self, trip_id: str, ctx: UserContext) -> bool:
        """Delete a trip."""
        user_records = self._records.get(ctx.user_id, {})
        if trip_id not in user_records:
            self._metrics.inc_operation("delete", "not_found")
            return False

        del user_records[trip_id]
        self._metrics.inc_operation("delete", "success")
        self._log.log_operation(ctx, "delete", "success", trip_id=trip_id)
        return True
