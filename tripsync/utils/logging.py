"""Structured logging for trip store operations."""

import logging
from typing import Any

from tripsync.db.context import UserContext

logger = logging.getLogger(__name__)


class StructuredStoreLogger:
    """Structured logger for one trip store backend."""

    def __init__(self, store: str) -> None:
        self._store = store

    def log_operation(
        self,
        ctx: UserContext,
        operation: str,
        outcome: str,
        trip_id: str | None = None,
        count: int | None = None,
        error_reason: str | None = None,
    ) -> None:
        """Log a save/fetch/delete with structured data."""
        log_data: dict[str, Any] = {
            "store": self._store,
            "user_id": ctx.user_id,
            "operation": operation,
            "outcome": outcome,
        }

        if trip_id is not None:
            log_data["trip_id"] = trip_id
        if count is not None:
            log_data["count"] = count
        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Trip store {self._store}: {operation} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})

    def log_decode_skip(self, ctx: UserContext, trip_id: str | None, reason: str) -> None:
        """Log a fetched record that was skipped because it failed to decode."""
        logger.warning(
            f"Trip store {self._store}: skipping unreadable record {trip_id or '<unknown>'}",
            extra={
                "structured": {
                    "store": self._store,
                    "user_id": ctx.user_id,
                    "trip_id": trip_id,
                    "reason": reason,
                }
            },
        )
