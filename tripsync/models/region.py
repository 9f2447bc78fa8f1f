"""Hierarchical region model (country -> city -> district)."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field, model_validator

from tripsync.models.common import (
    Coordinate,
    RegionPriority,
    TripSyncModel,
    WeatherInfo,
    new_id,
)
from tripsync.models.currency import default_currency_for
from tripsync.models.places import Accommodation, PointOfInterest, TransportationMethod
from tripsync.models.validation import check_date_range


class TripRegion(TripSyncModel):
    """A node in a trip's region tree.

    A region exclusively owns its sub-regions and everything listed under it.
    Sub-region dates are not checked against the parent's dates.
    """

    id: str = Field(default_factory=new_id)
    name: str
    country: str
    arrival_date: datetime
    departure_date: datetime

    # Geographical
    coordinates: Coordinate | None = None
    timezone: str = "UTC"
    local_currency: str = Field(
        default_factory=lambda data: default_currency_for(data.get("country", ""))
    )

    # Financial
    budget_allocation: Decimal | None = Field(default=None, ge=0)
    actual_spent: Decimal = Field(default=Decimal(0), ge=0)
    daily_budget_suggestion: Decimal | None = Field(default=None, ge=0)

    # Structure
    sub_regions: list["TripRegion"] = Field(default_factory=list)
    points_of_interest: list[PointOfInterest] = Field(default_factory=list)
    accommodations: list[Accommodation] = Field(default_factory=list)
    transportation_methods: list[TransportationMethod] = Field(default_factory=list)

    # Planning
    notes: str = ""
    priority: RegionPriority = RegionPriority.medium
    weather_info: WeatherInfo | None = None

    @model_validator(mode="after")
    def validate_departure_after_arrival(self) -> "TripRegion":
        """Ensure departure >= arrival."""
        check_date_range(
            self.arrival_date,
            self.departure_date,
            start_field="arrival_date",
            end_field="departure_date",
            allow_equal=True,
        )
        return self
