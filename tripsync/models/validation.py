"""Shared invariant checks raised from model validators."""

from datetime import date, datetime

from pydantic_core import PydanticCustomError

INVALID_DATE_RANGE = "invalid_date_range"


def check_date_range(
    start: date | datetime,
    end: date | datetime,
    *,
    start_field: str,
    end_field: str,
    allow_equal: bool,
) -> None:
    """Reject a range whose end precedes (or equals, if not allowed) its start.

    Raises:
        PydanticCustomError: type ``invalid_date_range``
    """
    if end > start or (allow_equal and end == start):
        return
    relation = ">=" if allow_equal else ">"
    raise PydanticCustomError(
        INVALID_DATE_RANGE,
        "{end_field} must be {relation} {start_field}",
        {"start_field": start_field, "end_field": end_field, "relation": relation},
    )
