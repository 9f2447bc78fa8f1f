"""Prometheus metrics for trip store operations."""

from prometheus_client import Counter

trip_store_operations_total = Counter(
    "trip_store_operations_total",
    "Total trip store operations",
    ["store", "operation", "outcome"],
)

trip_decode_failures_total = Counter(
    "trip_decode_failures_total",
    "Total fetched trip records skipped because they failed to decode",
    ["store"],
)

sample_trips_seeded_total = Counter(
    "sample_trips_seeded_total",
    "Total sample trips saved for new users",
)


class PrometheusStoreMetrics:
    """Prometheus-based trip store metrics implementation."""

    def __init__(self, store: str) -> None:
        self._store = store

    def inc_operation(self, operation: str, outcome: str) -> None:
        """Increment operation counter."""
        trip_store_operations_total.labels(
            store=self._store, operation=operation, outcome=outcome
        ).inc()

    def inc_decode_failure(self) -> None:
        """Increment decode failure counter."""
        trip_decode_failures_total.labels(store=self._store).inc()
