"""Leaf entities owned by a region: points of interest, stays and legs."""

from datetime import datetime, timedelta

from pydantic import Field, model_validator

from tripsync.models.common import (
    AccommodationType,
    BookingInfo,
    Coordinate,
    CoordinatePair,
    Money,
    OpeningHours,
    POICategory,
    TransportMode,
    TripSyncModel,
    new_id,
)
from tripsync.models.validation import check_date_range


class TransportationMethod(TripSyncModel):
    """A transportation leg between two named locations."""

    id: str = Field(default_factory=new_id)
    mode: TransportMode
    from_location: str
    to_location: str
    departure_time: datetime | None = None
    arrival_time: datetime | None = None
    cost: Money | None = None
    booking_reference: str | None = None
    notes: str = ""
    coordinates: CoordinatePair = Field(default_factory=CoordinatePair)

    @model_validator(mode="after")
    def validate_arrival_after_departure(self) -> "TransportationMethod":
        """Ensure arrival >= departure when both are known."""
        if self.departure_time is not None and self.arrival_time is not None:
            check_date_range(
                self.departure_time,
                self.arrival_time,
                start_field="departure_time",
                end_field="arrival_time",
                allow_equal=True,
            )
        return self

    @property
    def duration(self) -> timedelta | None:
        if self.departure_time is None or self.arrival_time is None:
            return None
        return self.arrival_time - self.departure_time


class PointOfInterest(TripSyncModel):
    """A location the traveller plans to visit inside a region.

    ``incoming_transport_id`` is a weak reference: it names a
    TransportationMethod somewhere in the trip and may fail to resolve once
    that leg is removed.
    """

    id: str = Field(default_factory=new_id)
    name: str
    category: POICategory
    coordinates: Coordinate
    address: str = ""

    # Visit details
    planned_visit_date: datetime | None = None
    estimated_duration_seconds: int = Field(default=3600, ge=0)
    visited_date: datetime | None = None
    actual_duration_seconds: int | None = Field(default=None, ge=0)

    # Financial
    entry_cost: Money | None = None
    estimated_spending: Money | None = None
    actual_spending: Money | None = None

    # Content
    description: str = ""
    rating: float | None = Field(default=None, ge=0, le=5)
    photos: list[str] = Field(default_factory=list)
    documents: list[str] = Field(default_factory=list)  # TripDocument ids

    # Logistics
    opening_hours: list[OpeningHours] = Field(default_factory=list)
    booking_required: bool = False
    booking_info: BookingInfo | None = None
    accessibility_info: str | None = None

    incoming_transport_id: str | None = None
    walking_time_from_accommodation_seconds: int | None = Field(default=None, ge=0)

    @property
    def is_visited(self) -> bool:
        return self.visited_date is not None


class Accommodation(TripSyncModel):
    """A stay booked inside a region."""

    id: str = Field(default_factory=new_id)
    name: str
    type: AccommodationType = AccommodationType.hotel
    address: str = ""
    coordinates: Coordinate | None = None
    check_in_date: datetime
    check_out_date: datetime
    total_cost: Money | None = None
    booking_reference: str | None = None
    rating: float | None = Field(default=None, ge=0, le=5)
    amenities: list[str] = Field(default_factory=list)
    notes: str = ""
    photos: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_check_out_after_check_in(self) -> "Accommodation":
        """Ensure check_out > check_in."""
        check_date_range(
            self.check_in_date,
            self.check_out_date,
            start_field="check_in_date",
            end_field="check_out_date",
            allow_equal=False,
        )
        return self

    @property
    def nights(self) -> int:
        return (self.check_out_date.date() - self.check_in_date.date()).days
