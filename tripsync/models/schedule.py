"""Daily schedule models."""

from datetime import date, datetime

from pydantic import Field, model_validator

from tripsync.models.common import Money, TripSyncModel, WeatherInfo, new_id
from tripsync.models.places import TransportationMethod
from tripsync.models.validation import check_date_range


class ScheduledActivity(TripSyncModel):
    """A timed activity, optionally tied to a point of interest by id."""

    id: str = Field(default_factory=new_id)
    poi_id: str | None = None
    title: str
    start_time: datetime
    end_time: datetime
    transportation_to_activity: TransportationMethod | None = None
    estimated_cost: Money | None = None
    actual_cost: Money | None = None
    completed: bool = False
    rating: float | None = Field(default=None, ge=0, le=5)
    notes: str = ""

    @model_validator(mode="after")
    def validate_end_after_start(self) -> "ScheduledActivity":
        """Ensure end_time > start_time."""
        check_date_range(
            self.start_time,
            self.end_time,
            start_field="start_time",
            end_field="end_time",
            allow_equal=False,
        )
        return self


class DailySchedule(TripSyncModel):
    """Planned and actual activities for one day in one region."""

    id: str = Field(default_factory=new_id)
    date: date
    region_id: str
    planned_activities: list[ScheduledActivity] = Field(default_factory=list)
    actual_activities: list[ScheduledActivity] = Field(default_factory=list)
    daily_budget: Money | None = None
    actual_spent: Money | None = None
    notes: str = ""
    weather_forecast: WeatherInfo | None = None
