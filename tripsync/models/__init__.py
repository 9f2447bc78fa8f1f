"""Models package - re-exports for convenience."""

from tripsync.models.common import (
    AccommodationType,
    BookingInfo,
    Coordinate,
    CoordinatePair,
    DocumentType,
    ForexSnapshot,
    Money,
    OpeningHours,
    POICategory,
    RegionPriority,
    TransportMode,
    TripSyncModel,
    WeatherInfo,
)
from tripsync.models.documents import TripDocument
from tripsync.models.places import Accommodation, PointOfInterest, TransportationMethod
from tripsync.models.profile import (
    ActivityType,
    BudgetRange,
    MeasurementUnit,
    NotificationSettings,
    PrivacySettings,
    TravelPreferences,
    UserProfile,
)
from tripsync.models.region import TripRegion
from tripsync.models.schedule import DailySchedule, ScheduledActivity
from tripsync.models.trip import (
    DuplicateIdError,
    PointOfInterestNotFoundError,
    RegionNotFoundError,
    Trip,
)

__all__ = [
    # Common
    "TripSyncModel",
    "Coordinate",
    "CoordinatePair",
    "Money",
    "ForexSnapshot",
    "OpeningHours",
    "BookingInfo",
    "WeatherInfo",
    "TransportMode",
    "POICategory",
    "RegionPriority",
    "AccommodationType",
    "DocumentType",
    # Entities
    "PointOfInterest",
    "Accommodation",
    "TransportationMethod",
    "TripDocument",
    "TripRegion",
    "DailySchedule",
    "ScheduledActivity",
    # Root aggregate
    "Trip",
    "RegionNotFoundError",
    "PointOfInterestNotFoundError",
    "DuplicateIdError",
    # User profile
    "UserProfile",
    "TravelPreferences",
    "NotificationSettings",
    "PrivacySettings",
    "MeasurementUnit",
    "BudgetRange",
    "ActivityType",
]
