"""Tests for entity invariants and derived properties."""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from tripsync.models import (
    Accommodation,
    Coordinate,
    DocumentType,
    PointOfInterest,
    POICategory,
    ScheduledActivity,
    TransportationMethod,
    TransportMode,
    Trip,
    TripDocument,
    TripRegion,
)
from tripsync.models.validation import INVALID_DATE_RANGE

START = datetime(2025, 10, 1, 14, 0)


def assert_invalid_date_range(exc_info: pytest.ExceptionInfo[ValidationError]) -> None:
    """Helper to check the error type of a date range violation."""
    assert [error["type"] for error in exc_info.value.errors()] == [INVALID_DATE_RANGE]


def test_accommodation_rejects_check_out_equal_to_check_in() -> None:
    """Test that check_out must be strictly after check_in."""
    with pytest.raises(ValidationError) as exc_info:
        Accommodation(name="Hotel", check_in_date=START, check_out_date=START)

    assert_invalid_date_range(exc_info)


def test_accommodation_rejects_check_out_before_check_in() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Accommodation(name="Hotel", check_in_date=START, check_out_date=START - timedelta(days=1))

    assert_invalid_date_range(exc_info)


def test_accommodation_nights() -> None:
    stay = Accommodation(
        name="Hotel", check_in_date=START, check_out_date=START + timedelta(days=3, hours=-4)
    )

    assert stay.nights == 3


def test_transportation_allows_equal_times_and_reports_duration() -> None:
    """Test that arrival == departure is accepted (>= invariant)."""
    leg = TransportationMethod(
        mode=TransportMode.walking,
        from_location="A",
        to_location="B",
        departure_time=START,
        arrival_time=START,
    )

    assert leg.duration == timedelta(0)


def test_transportation_rejects_arrival_before_departure() -> None:
    with pytest.raises(ValidationError) as exc_info:
        TransportationMethod(
            mode=TransportMode.flight,
            from_location="SGN",
            to_location="HAN",
            departure_time=START,
            arrival_time=START - timedelta(minutes=1),
        )

    assert_invalid_date_range(exc_info)


def test_transportation_without_times_has_no_duration() -> None:
    leg = TransportationMethod(
        mode=TransportMode.train, from_location="A", to_location="B", departure_time=START
    )

    assert leg.duration is None


def test_region_rejects_departure_before_arrival() -> None:
    with pytest.raises(ValidationError) as exc_info:
        TripRegion(
            name="Tokyo",
            country="Japan",
            arrival_date=START,
            departure_date=START - timedelta(days=1),
        )

    assert_invalid_date_range(exc_info)


def test_region_allows_same_day_visit() -> None:
    region = TripRegion(name="Sentosa", country="Singapore", arrival_date=START, departure_date=START)

    assert region.actual_spent == 0
    assert region.sub_regions == []


def test_scheduled_activity_rejects_zero_length() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ScheduledActivity(title="Lunch", start_time=START, end_time=START)

    assert_invalid_date_range(exc_info)


def test_trip_rejects_end_not_after_start() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Trip(title="Nowhere", start_date=START, end_date=START)

    assert_invalid_date_range(exc_info)


@pytest.mark.parametrize(("latitude", "longitude"), [(91, 0), (-91, 0), (0, 181), (0, -181)])
def test_coordinate_bounds(latitude: float, longitude: float) -> None:
    with pytest.raises(ValidationError):
        Coordinate(latitude=latitude, longitude=longitude)


def test_coordinate_equality_by_value() -> None:
    assert Coordinate(latitude=1.5, longitude=2.5) == Coordinate(latitude=1.5, longitude=2.5)


def test_poi_rating_bounds_and_visit_flag() -> None:
    """Test rating range and the visited flag derived from the visit timestamp."""
    with pytest.raises(ValidationError):
        PointOfInterest(
            name="Too good",
            category=POICategory.park,
            coordinates=Coordinate(latitude=0, longitude=0),
            rating=5.5,
        )

    poi = PointOfInterest(
        name="Park", category=POICategory.park, coordinates=Coordinate(latitude=0, longitude=0)
    )
    assert poi.is_visited is False
    assert poi.estimated_duration_seconds == 3600

    poi.visited_date = START
    assert poi.is_visited is True


def test_document_is_uploaded_with_either_storage_reference() -> None:
    assert TripDocument(title="Visa", type=DocumentType.visa).is_uploaded is False
    assert TripDocument(title="Visa", type=DocumentType.visa, file_path="/tmp/v.pdf").is_uploaded
    assert TripDocument(
        title="Visa", type=DocumentType.visa, cloud_url="https://files.example/v.pdf"
    ).is_uploaded


def test_entities_get_distinct_generated_ids() -> None:
    first = TripDocument(title="A", type=DocumentType.other)
    second = TripDocument(title="B", type=DocumentType.other)

    assert first.id != second.id
    assert len(first.id) == 36
