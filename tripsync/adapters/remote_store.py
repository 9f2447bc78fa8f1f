"""Remote document-store implementation of the trip repository (httpx).

Documents live at ``{base_url}/{users}/{user_id}/{trips}/{trip_id}``. A
collection GET returns ``{"documents": [record, ...]}``.
"""

from typing import Any

import httpx

from tripsync.config import Settings
from tripsync.db.codec import encode_trip
from tripsync.db.context import UserContext
from tripsync.db.repositories import TripStoreError, decode_fetched
from tripsync.models.trip import Trip
from tripsync.utils.logging import StructuredStoreLogger
from tripsync.utils.metrics import PrometheusStoreMetrics


class HttpTripRepository:
    """HTTP implementation of TripRepository."""

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout_s: float = 10.0,
        users_collection: str = "users",
        trips_collection: str = "trips",
    ) -> None:
        """Initialize repository.

        Args:
            base_url: Document store root URL
            client: Optional httpx client (for testing with mocks)
            timeout_s: Request timeout when the repository creates its own client
            users_collection: Top-level collection holding per-user namespaces
            trips_collection: Per-user collection holding trip documents
        """
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout_s)
        self._users = users_collection
        self._trips = trips_collection
        self._log = StructuredStoreLogger("http")
        self._metrics = PrometheusStoreMetrics("http")

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpTripRepository":
        return cls(
            settings.remote_store_url,
            timeout_s=settings.remote_store_timeout_s,
            users_collection=settings.users_collection,
            trips_collection=settings.trips_collection,
        )

    def close(self) -> None:
        self._client.close()

    def _collection_url(self, ctx: UserContext) -> str:
        return f"{self._base_url}/{self._users}/{ctx.user_id}/{self._trips}"

    def _fail(
        self, ctx: UserContext, operation: str, e: Exception, trip_id: str | None = None
    ) -> TripStoreError:
        self._metrics.inc_operation(operation, "error")
        self._log.log_operation(
            ctx, operation, "error", trip_id=trip_id, error_reason=type(e).__name__
        )
        return TripStoreError(f"Trip {operation} failed: {e}")

    def save(self, trip: Trip, ctx: UserContext) -> None:
        """Create or replace a trip document."""
        url = f"{self._collection_url(ctx)}/{trip.id}"
        try:
            response = self._client.put(url, json=encode_trip(trip))
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise self._fail(ctx, "save", e, trip_id=trip.id) from e

        self._metrics.inc_operation("save", "success")
        self._log.log_operation(ctx, "save", "success", trip_id=trip.id)

    def fetch(self, ctx: UserContext) -> list[Trip]:
        """Fetch all of a user's trip documents, newest first."""
        try:
            response = self._client.get(self._collection_url(ctx))
            response.raise_for_status()
            payload: Any = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise self._fail(ctx, "fetch", e) from e

        if isinstance(payload, dict):
            records = payload.get("documents", [])
        else:
            records = payload
        if not isinstance(records, list):
            raise self._fail(ctx, "fetch", ValueError("documents is not a list"))

        trips = decode_fetched(records, ctx, self._log, self._metrics)
        self._metrics.inc_operation("fetch", "success")
        self._log.log_operation(ctx, "fetch", "success", count=len(trips))
        return trips

    def delete(self, trip_id: str, ctx: UserContext) -> bool:
        """Delete a trip document."""
        url = f"{self._collection_url(ctx)}/{trip_id}"
        try:
            response = self._client.delete(url)
            if response.status_code == httpx.codes.NOT_FOUND:
                self._metrics.inc_operation("delete", "not_found")
                return False
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise self._fail(ctx, "delete", e, trip_id=trip_id) from e

        self._metrics.inc_operation("delete", "success")
        self._log.log_operation(ctx, "delete", "success", trip_id=trip_id)
        return True
