"""Sample-trip seeding for new accounts."""

import logging
from datetime import datetime

from tripsync.db.context import UserContext
from tripsync.db.repositories import TripRepository
from tripsync.mock.trips import create_mock_trips
from tripsync.models.trip import Trip
from tripsync.utils.metrics import sample_trips_seeded_total

logger = logging.getLogger(__name__)


def initialize_sample_trips(
    repository: TripRepository, ctx: UserContext, today: datetime | None = None
) -> list[Trip]:
    """Give a user with no trips the sample trips.

    This function is idempotent - a user who already has any trip is left
    untouched.

    Args:
        repository: Trip store to check and write
        ctx: User whose namespace is seeded
        today: Reference date for the sample itineraries (default now)

    Returns:
        The trips that were saved (empty if the user already had trips)
    """
    existing = repository.fetch(ctx)
    if existing:
        logger.info(
            "Sample trips skipped: user already has trips",
            extra={"structured": {"user_id": ctx.user_id, "count": len(existing)}},
        )
        return []

    trips = create_mock_trips(today)
    for trip in trips:
        repository.save(trip, ctx)
        sample_trips_seeded_total.inc()

    logger.info(
        "Sample trips seeded",
        extra={"structured": {"user_id": ctx.user_id, "count": len(trips)}},
    )
    return trips
