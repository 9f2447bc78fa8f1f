"""Trip <-> stored record encoding.

A record is the JSON-compatible dict form of a Trip with camelCase keys,
decimals as strings and ISO-8601 timestamps. Nested regions are encoded to
any depth.
"""

from typing import Any

from pydantic import ValidationError

from tripsync.models.trip import Trip


class TripDecodeError(Exception):
    """A stored record could not be turned back into a Trip."""

    def __init__(self, message: str, trip_id: str | None = None) -> None:
        super().__init__(message)
        self.trip_id = trip_id


def encode_trip(trip: Trip) -> dict[str, Any]:
    """Encode a trip as a JSON-compatible record."""
    return trip.model_dump(mode="json", by_alias=True)


def decode_trip(record: Any) -> Trip:
    """Decode a stored record.

    Raises:
        TripDecodeError: If the record is not a valid trip
    """
    trip_id = record.get("id") if isinstance(record, dict) else None
    try:
        return Trip.model_validate(record)
    except ValidationError as e:
        raise TripDecodeError(
            f"Invalid trip record {trip_id or '<unknown>'}: {e.error_count()} error(s)",
            trip_id=trip_id,
        ) from e


def encode_trip_json(trip: Trip) -> str:
    return trip.model_dump_json(by_alias=True)


def decode_trip_json(payload: str | bytes) -> Trip:
    """Decode a JSON document.

    Raises:
        TripDecodeError: If the payload is not valid JSON or not a valid trip
    """
    try:
        return Trip.model_validate_json(payload)
    except ValidationError as e:
        raise TripDecodeError(f"Invalid trip document: {e.error_count()} error(s)") from e
