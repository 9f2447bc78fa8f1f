"""Repository protocol for the remote trip store, plus shared fetch handling."""

from collections.abc import Iterable
from typing import Any, Protocol

from tripsync.db.codec import TripDecodeError, decode_trip
from tripsync.db.context import UserContext
from tripsync.models.trip import Trip
from tripsync.utils.logging import StructuredStoreLogger
from tripsync.utils.metrics import PrometheusStoreMetrics


class TripStoreError(Exception):
    """The store could not complete a save, fetch or delete."""

    pass


class TripRepository(Protocol):
    """Per-user trip store keyed by trip id."""

    def save(self, trip: Trip, ctx: UserContext) -> None:
        """Create or replace a trip.

        Args:
            trip: Trip to store under ``trip.id``
            ctx: User namespace

        Raises:
            TripStoreError: If the store is unavailable
        """
        ...

    def fetch(self, ctx: UserContext) -> list[Trip]:
        """Fetch all of a user's trips, newest ``created_date`` first.

        Records that fail to decode are skipped, not raised.

        Args:
            ctx: User namespace

        Returns:
            Decoded trips

        Raises:
            TripStoreError: If the store is unavailable
        """
        ...

    def delete(self, trip_id: str, ctx: UserContext) -> bool:
        """Delete a trip.

        Args:
            trip_id: Trip ID
            ctx: User namespace

        Returns:
            True if a trip was deleted, False if none existed

        Raises:
            TripStoreError: If the store is unavailable
        """
        ...


def decode_fetched(
    records: Iterable[Any],
    ctx: UserContext,
    store_logger: StructuredStoreLogger,
    metrics: PrometheusStoreMetrics,
) -> list[Trip]:
    """Decode fetched records, skipping bad ones, sorted newest first."""
    trips: list[Trip] = []

    for record in records:
        try:
            trips.append(decode_trip(record))
        except TripDecodeError as e:
            store_logger.log_decode_skip(ctx, e.trip_id, str(e))
            metrics.inc_decode_failure()

    # Newest first for the trip list
    trips.sort(key=lambda t: t.created_date, reverse=True)
    return trips
