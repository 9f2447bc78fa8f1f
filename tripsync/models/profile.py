"""User profile and travel preference models."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from tripsync.models.common import AccommodationType, TransportMode, TripSyncModel
from tripsync.models.countries import flag_for
from tripsync.models.currency import default_currency_for
from tripsync.models.trip import DEFAULT_HOME_COUNTRY


class MeasurementUnit(str, Enum):
    metric = "metric"
    imperial = "imperial"

    @property
    def display_name(self) -> str:
        if self is MeasurementUnit.metric:
            return "Metric (km, °C)"
        return "Imperial (miles, °F)"


class BudgetRange(str, Enum):
    """Daily spend band the traveller usually plans for."""

    budget = "budget"
    moderate = "moderate"
    luxury = "luxury"
    unlimited = "unlimited"

    @property
    def display_name(self) -> str:
        return _BUDGET_RANGE_NAMES[self]


_BUDGET_RANGE_NAMES = {
    BudgetRange.budget: "Budget ($0-100/day)",
    BudgetRange.moderate: "Moderate ($100-300/day)",
    BudgetRange.luxury: "Luxury ($300-500/day)",
    BudgetRange.unlimited: "Unlimited ($500+/day)",
}


class ActivityType(str, Enum):
    adventure = "adventure"
    cultural = "cultural"
    food = "food"
    nightlife = "nightlife"
    nature = "nature"
    shopping = "shopping"
    sightseeing = "sightseeing"
    sports = "sports"
    relaxation = "relaxation"
    photography = "photography"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def emoji(self) -> str:
        return _ACTIVITY_EMOJI[self]


_ACTIVITY_EMOJI = {
    ActivityType.adventure: "🏔️",
    ActivityType.cultural: "🎭",
    ActivityType.food: "🍽️",
    ActivityType.nightlife: "🌃",
    ActivityType.nature: "🌿",
    ActivityType.shopping: "🛍️",
    ActivityType.sightseeing: "🏛️",
    ActivityType.sports: "⚽",
    ActivityType.relaxation: "🧘",
    ActivityType.photography: "📸",
}


class TravelPreferences(TripSyncModel):
    """Defaults applied when the user plans a new trip."""

    default_trip_length: int = Field(default=7, ge=1)  # days
    preferred_transport_mode: TransportMode = TransportMode.flight
    budget_range: BudgetRange = BudgetRange.moderate
    accommodation_type: AccommodationType = AccommodationType.hotel
    activity_preferences: list[ActivityType] = Field(
        default_factory=lambda: [
            ActivityType.cultural,
            ActivityType.food,
            ActivityType.sightseeing,
        ]
    )
    dietary_restrictions: list[str] = Field(default_factory=list)
    accessibility_needs: list[str] = Field(default_factory=list)


class NotificationSettings(TripSyncModel):
    push_notifications: bool = True
    email_notifications: bool = True
    trip_reminders: bool = True
    flight_updates: bool = True
    document_reminders: bool = True
    budget_alerts: bool = True
    reminder_days_before: int = Field(default=7, ge=0)


class PrivacySettings(TripSyncModel):
    share_trips_with_contacts: bool = False
    allow_trip_discovery: bool = False
    share_location_data: bool = True
    analytics_opt_in: bool = True
    marketing_emails: bool = False


class UserProfile(TripSyncModel):
    """Account profile stored alongside the user's trips.

    ``id`` is the identity-provider user id. The home currency defaults from
    the home country when not given.
    """

    id: str
    first_name: str
    last_name: str
    email: str
    profile_image_url: str | None = None
    home_country: str = DEFAULT_HOME_COUNTRY
    home_currency: str = Field(
        default_factory=lambda data: default_currency_for(
            data.get("home_country", DEFAULT_HOME_COUNTRY)
        ),
        pattern=r"^[A-Z]{3}$",
    )
    preferred_units: MeasurementUnit = MeasurementUnit.metric
    language_code: str = "en"
    time_zone: str = "UTC"
    date_joined: datetime = Field(default_factory=datetime.now)
    last_updated: datetime = Field(default_factory=datetime.now)

    travel_preferences: TravelPreferences = Field(default_factory=TravelPreferences)
    notification_settings: NotificationSettings = Field(default_factory=NotificationSettings)
    privacy_settings: PrivacySettings = Field(default_factory=PrivacySettings)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def country_flag(self) -> str:
        return flag_for(self.home_country)

    def touch(self, now: datetime | None = None) -> None:
        """Mark the profile as updated."""
        self.last_updated = now or datetime.now()
