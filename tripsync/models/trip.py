"""Trip root aggregate and its mutators."""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from pydantic import Field, model_validator

from tripsync.models.common import ForexSnapshot, Money, TransportMode, TripSyncModel, new_id
from tripsync.models.currency import DEFAULT_CURRENCY, default_currency_for
from tripsync.models.documents import TripDocument
from tripsync.models.places import PointOfInterest
from tripsync.models.region import TripRegion
from tripsync.models.schedule import DailySchedule
from tripsync.models.tree import (
    RegionCycleError,
    attach_sub_region,
    detach_region,
    find_poi,
    find_region,
    flatten_pois,
    region_ids,
)
from tripsync.models.validation import check_date_range

DEFAULT_HOME_COUNTRY = "Australia"


class RegionNotFoundError(LookupError):
    """No region with the given id exists in the trip."""

    pass


class PointOfInterestNotFoundError(LookupError):
    """No point of interest with the given id exists in the trip."""

    pass


class DuplicateIdError(ValueError):
    """An entity id is already used by another entity of the same kind in the trip."""

    pass


def _repeated(ids: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    repeated: list[str] = []
    for entity_id in ids:
        if entity_id in seen:
            repeated.append(entity_id)
        seen.add(entity_id)
    return repeated


class Trip(TripSyncModel):
    """A trip and everything it owns.

    The trip exclusively owns its region forest, documents and schedules.
    Mutator methods bump ``last_modified``; code that writes fields directly
    must call ``touch()`` itself.
    """

    id: str = Field(default_factory=new_id)
    title: str
    start_date: datetime
    end_date: datetime
    created_date: datetime = Field(default_factory=datetime.now)
    last_modified: datetime = Field(default_factory=datetime.now)

    # Geographical
    home_country: str = DEFAULT_HOME_COUNTRY
    target_countries: list[str] = Field(default_factory=list)
    is_international: bool = False

    # Financial
    base_currency: str = Field(
        default_factory=lambda data: default_currency_for(
            data.get("home_country", DEFAULT_HOME_COUNTRY)
        )
    )
    total_budget: Decimal | None = Field(default=None, ge=0)
    actual_spent: Decimal = Field(default=Decimal(0), ge=0)
    forex_snapshot: ForexSnapshot = Field(
        default_factory=lambda data: ForexSnapshot(
            base_currency=data.get("base_currency", DEFAULT_CURRENCY)
        )
    )

    # Transportation
    primary_transport_mode: TransportMode = TransportMode.car
    has_flight_details: bool = False
    flight_prompt_dismissed: bool = False

    # Structure
    regions: list[TripRegion] = Field(default_factory=list)
    documents: list[TripDocument] = Field(default_factory=list)
    daily_schedules: list[DailySchedule] = Field(default_factory=list)

    # Sharing
    is_shared: bool = False
    collaborators: list[str] = Field(default_factory=list)  # user ids
    tags: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_trip(self) -> "Trip":
        """Ensure end > start and that region, POI, document and schedule ids are unique."""
        check_date_range(
            self.start_date,
            self.end_date,
            start_field="start_date",
            end_field="end_date",
            allow_equal=False,
        )
        # Walking the forest raises RegionCycleError on a repeated id
        pois = flatten_pois(self.regions)
        for kind, ids in (
            ("point of interest", [poi.id for poi in pois]),
            ("document", [d.id for d in self.documents]),
            ("daily schedule", [s.id for s in self.daily_schedules]),
        ):
            repeated = _repeated(ids)
            if repeated:
                raise DuplicateIdError(f"Duplicate {kind} ids: {', '.join(repeated)}")
        return self

    def touch(self, now: datetime | None = None) -> None:
        """Mark the trip as modified."""
        self.last_modified = now or datetime.now()

    def _require_region(self, region_id: str) -> TripRegion:
        region = find_region(self.regions, region_id)
        if region is None:
            raise RegionNotFoundError(f"Region {region_id} not found in trip {self.id}")
        return region

    def _ensure_new_regions(self, region: TripRegion) -> None:
        overlap = region_ids(self.regions) & region_ids(region)
        if overlap:
            raise RegionCycleError(
                f"Regions already in trip {self.id}: {', '.join(sorted(overlap))}"
            )
        existing_pois = {poi.id for poi in flatten_pois(self.regions)}
        for poi in flatten_pois(region):
            self._ensure_new_poi(poi, existing_pois)
            existing_pois.add(poi.id)

    def _ensure_new_poi(self, poi: PointOfInterest, existing: set[str] | None = None) -> None:
        if existing is None:
            existing = {p.id for p in flatten_pois(self.regions)}
        if poi.id in existing:
            raise DuplicateIdError(f"POI {poi.id} already exists in trip {self.id}")

    def add_region(self, region: TripRegion, now: datetime | None = None) -> None:
        """Add a top-level region.

        Raises:
            RegionCycleError: If the region (or any descendant) is already in the trip
            DuplicateIdError: If one of its POIs reuses a POI id from the trip
        """
        self._ensure_new_regions(region)
        self.regions.append(region)
        self.touch(now)

    def add_sub_region(
        self, parent_id: str, region: TripRegion, now: datetime | None = None
    ) -> None:
        """Nest a region under an existing one.

        Raises:
            RegionNotFoundError: If parent_id is unknown
            RegionCycleError: If the region (or any descendant) is already in the trip
            DuplicateIdError: If one of its POIs reuses a POI id from the trip
        """
        parent = self._require_region(parent_id)
        self._ensure_new_regions(region)
        attach_sub_region(parent, region)
        self.touch(now)

    def remove_region(self, region_id: str, now: datetime | None = None) -> TripRegion | None:
        """Remove a region and its subtree from anywhere in the forest."""
        removed = detach_region(self.regions, region_id)
        if removed is not None:
            self.touch(now)
        return removed

    def add_point_of_interest(
        self, region_id: str, poi: PointOfInterest, now: datetime | None = None
    ) -> None:
        """Add a point of interest to a region.

        Raises:
            RegionNotFoundError: If region_id is unknown
            DuplicateIdError: If a POI with the same id is already in the trip
        """
        region = self._require_region(region_id)
        self._ensure_new_poi(poi)
        region.points_of_interest.append(poi)
        self.touch(now)

    def mark_poi_visited(
        self,
        poi_id: str,
        visited_at: datetime,
        actual_spending: Money | None = None,
        actual_duration_seconds: int | None = None,
        now: datetime | None = None,
    ) -> PointOfInterest:
        """Log a visit to a point of interest.

        Raises:
            PointOfInterestNotFoundError: If poi_id is unknown
        """
        poi = find_poi(self.regions, poi_id)
        if poi is None:
            raise PointOfInterestNotFoundError(f"POI {poi_id} not found in trip {self.id}")

        poi.visited_date = visited_at
        if actual_spending is not None:
            poi.actual_spending = actual_spending
        if actual_duration_seconds is not None:
            poi.actual_duration_seconds = actual_duration_seconds
        self.touch(now)
        return poi

    def record_region_spend(
        self, region_id: str, amount: Decimal, now: datetime | None = None
    ) -> TripRegion:
        """Add spend (in base currency) to a region's running total."""
        if amount < 0:
            raise ValueError(f"Spend must be non-negative, got {amount}")
        region = self._require_region(region_id)
        region.actual_spent += amount
        self.touch(now)
        return region

    def add_document(self, document: TripDocument, now: datetime | None = None) -> None:
        if any(d.id == document.id for d in self.documents):
            raise DuplicateIdError(f"Document {document.id} already exists in trip {self.id}")
        self.documents.append(document)
        self.touch(now)

    def remove_document(
        self, document_id: str, now: datetime | None = None
    ) -> TripDocument | None:
        for index, document in enumerate(self.documents):
            if document.id == document_id:
                del self.documents[index]
                self.touch(now)
                return document
        return None

    def add_daily_schedule(self, schedule: DailySchedule, now: datetime | None = None) -> None:
        if any(s.id == schedule.id for s in self.daily_schedules):
            raise DuplicateIdError(f"Schedule {schedule.id} already exists in trip {self.id}")
        self.daily_schedules.append(schedule)
        self.touch(now)

    def with_updated_spend(self, actual_spent: Decimal, now: datetime | None = None) -> "Trip":
        """Return a copy with a new trip-level spend; this trip is unchanged."""
        if actual_spent < 0:
            raise ValueError(f"Spend must be non-negative, got {actual_spent}")
        updated = self.model_copy(deep=True)
        updated.actual_spent = actual_spent
        updated.touch(now)
        return updated
