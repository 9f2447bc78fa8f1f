"""Common types and enums shared across all models."""

import uuid
from datetime import datetime, time
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Fresh entity id (UUID4 string)."""
    return str(uuid.uuid4())


class TripSyncModel(BaseModel):
    """Base model: camelCase record keys, snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Coordinate(TripSyncModel):
    """Geographic coordinates (WGS84)."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class CoordinatePair(TripSyncModel):
    """Origin/destination coordinates of a transportation leg."""

    origin: Coordinate | None = None
    destination: Coordinate | None = None


class Money(TripSyncModel):
    """Monetary amount, optionally converted into the trip's base currency.

    The conversion is fixed when the value is recorded: ``converted_amount``
    is derived from ``exchange_rate`` and is never recomputed from a newer
    rate. Without a rate the conversion stays unresolved (``None``), not zero.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., ge=0)
    currency: str = Field(..., pattern=r"^[A-Z]{3}$")
    exchange_rate: Decimal | None = Field(default=None, gt=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def converted_amount(self) -> Decimal | None:
        """Amount in the base currency at the recorded rate."""
        if self.exchange_rate is None:
            return None
        return self.amount * self.exchange_rate


class ForexSnapshot(TripSyncModel):
    """Rate table captured at a point in time.

    ``rates`` maps a currency code to the number of base-currency units one
    unit of that currency is worth.
    """

    model_config = ConfigDict(frozen=True)

    base_currency: str = Field(..., pattern=r"^[A-Z]{3}$")
    rates: dict[str, Decimal] = Field(default_factory=dict)
    last_updated: datetime = Field(default_factory=datetime.now)

    def rate_for(self, currency: str) -> Decimal | None:
        """Rate into the base currency, or None if the currency is not quoted."""
        if currency == self.base_currency:
            return Decimal(1)
        return self.rates.get(currency)


class TransportMode(str, Enum):
    """Mode of a transportation leg."""

    flight = "flight"
    car = "car"
    train = "train"
    bus = "bus"
    ferry = "ferry"
    walking = "walking"
    bicycle = "bicycle"
    taxi = "taxi"
    rideshare = "rideshare"
    public_transport = "public_transport"
    mixed = "mixed"


class POICategory(str, Enum):
    """Point of interest category."""

    restaurant = "restaurant"
    attraction = "attraction"
    museum = "museum"
    park = "park"
    shopping = "shopping"
    nightlife = "nightlife"
    accommodation = "accommodation"
    transportation = "transportation"
    medical = "medical"
    entertainment = "entertainment"
    cultural = "cultural"
    nature = "nature"
    religious = "religious"
    market = "market"
    cafe = "cafe"
    viewpoint = "viewpoint"
    beach = "beach"
    other = "other"


class RegionPriority(str, Enum):
    """How important a region is to the traveller."""

    low = "low"
    medium = "medium"
    high = "high"
    must_see = "must_see"


class AccommodationType(str, Enum):
    """Accommodation type."""

    hotel = "hotel"
    hostel = "hostel"
    airbnb = "airbnb"
    guesthouse = "guesthouse"
    resort = "resort"
    camping = "camping"
    apartment = "apartment"
    other = "other"


class DocumentType(str, Enum):
    """Trip document type."""

    flight = "flight"
    accommodation = "accommodation"
    ticket = "ticket"
    receipt = "receipt"
    map = "map"
    photo = "photo"
    itinerary = "itinerary"
    passport = "passport"
    visa = "visa"
    insurance = "insurance"
    other = "other"


class OpeningHours(TripSyncModel):
    """Opening hours for one weekday (1-7, Sunday = 1)."""

    day_of_week: int = Field(..., ge=1, le=7)
    open_time: time
    close_time: time
    is_closed: bool = False


class BookingInfo(TripSyncModel):
    """Booking details for a venue."""

    is_booked: bool = False
    booking_reference: str | None = None
    booking_date: datetime | None = None
    booking_platform: str | None = None
    contact_info: str | None = None
    cancellation_policy: str | None = None


class WeatherInfo(TripSyncModel):
    """Seasonal weather summary."""

    average_high: float
    average_low: float
    precipitation: float
    humidity: float
    season: str
    recommendations: str = ""
