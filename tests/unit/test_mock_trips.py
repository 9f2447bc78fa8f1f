"""Tests for the sample-trip builders."""

import random
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from tripsync.mock.trips import (
    create_business_trip,
    create_domestic_trip,
    create_europe_trip,
    create_japan_trip,
    create_mock_poi,
    create_mock_region,
    create_mock_trips,
    create_vietnam_trip,
)
from tripsync.models import Coordinate, POICategory, Trip
from tripsync.models.tree import (
    find_region,
    flatten_pois,
    iter_regions,
    iter_regions_with_parent,
    resolve_incoming_transport,
)


def test_create_mock_trips_returns_all_five(today: datetime) -> None:
    trips = create_mock_trips(today)

    assert [t.id for t in trips] == [
        "vietnam_trip_001",
        "japan_trip_001",
        "europe_trip_001",
        "melbourne_trip_001",
        "business_trip_001",
    ]


@pytest.mark.parametrize(
    "builder",
    [
        create_vietnam_trip,
        create_japan_trip,
        create_europe_trip,
        create_domestic_trip,
        create_business_trip,
    ],
)
def test_builders_produce_fully_nested_trips(builder, today: datetime) -> None:
    """Test that each builder fills regions, sub-regions, POIs, stays and legs."""
    trip: Trip = builder(today)
    regions = list(iter_regions(trip.regions))

    assert any(parent is not None for parent, _ in iter_regions_with_parent(trip.regions))
    assert flatten_pois(trip.regions)
    assert any(r.accommodations for r in regions)
    assert sum(len(r.transportation_methods) for r in regions) >= 1


@pytest.mark.parametrize(
    "builder",
    [
        create_vietnam_trip,
        create_japan_trip,
        create_europe_trip,
        create_domestic_trip,
        create_business_trip,
    ],
)
def test_builders_are_deterministic(builder, today: datetime) -> None:
    """Test that the same reference date always gives the same trip."""
    assert builder(today) == builder(today)


def test_every_incoming_transport_reference_resolves(today: datetime) -> None:
    for trip in create_mock_trips(today):
        for poi in flatten_pois(trip.regions):
            if poi.incoming_transport_id is not None:
                assert resolve_incoming_transport(trip.regions, poi) is not None


def test_vietnam_trip_shape(today: datetime) -> None:
    trip = create_vietnam_trip(today)

    assert trip.start_date == today + timedelta(days=30)
    assert trip.end_date == trip.start_date + timedelta(days=44)
    assert trip.base_currency == "AUD"
    assert trip.total_budget == Decimal("3500")
    assert trip.tags == ["adventure", "culture", "food", "backpacking"]

    [vietnam] = trip.regions
    assert vietnam.local_currency == "VND"
    assert [r.id for r in vietnam.sub_regions] == ["hcmc_region", "hanoi_region"]
    assert [leg.id for leg in vietnam.transportation_methods] == ["hcmc_hanoi_flight"]
    assert vietnam.transportation_methods[0].duration == timedelta(hours=2)

    hcmc = find_region(trip.regions, "hcmc_region")
    assert hcmc.local_currency == "VND"
    assert hcmc.accommodations[0].nights == 7
    assert len(hcmc.points_of_interest[0].opening_hours) == 7
    assert [d.id for d in trip.documents] == ["vietnam_flight", "passport_copy"]


def test_domestic_trip_is_three_levels_deep(today: datetime) -> None:
    trip = create_domestic_trip(today)

    cbd = find_region(trip.regions, "melbourne_cbd")
    assert cbd is not None
    assert trip.is_international is False
    assert trip.base_currency == "AUD"
    assert {p.id for p in cbd.points_of_interest} == {"hosier_lane", "queen_victoria_market"}


def test_europe_trip_regions_use_euro(today: datetime) -> None:
    trip = create_europe_trip(today)

    assert [r.id for r in trip.regions] == [
        "france_country",
        "italy_country",
        "germany_country",
        "netherlands_country",
    ]
    assert {r.local_currency for r in iter_regions(trip.regions)} == {"EUR"}


def test_create_mock_region(today: datetime) -> None:
    region = create_mock_region(
        "Bali", "Indonesia", Coordinate(latitude=-8.34, longitude=115.09), today=today
    )

    assert region.local_currency == "IDR"
    assert region.budget_allocation == Decimal("500")
    assert region.arrival_date == today
    assert region.departure_date == today + timedelta(days=3)


def test_create_mock_poi_rating_is_the_only_random_field() -> None:
    """Test that a seeded generator makes the rating reproducible."""
    coordinates = Coordinate(latitude=1.0, longitude=2.0)

    first = create_mock_poi("Spot", POICategory.beach, coordinates, random.Random(7), "spot")
    second = create_mock_poi("Spot", POICategory.beach, coordinates, random.Random(7), "spot")

    assert first == second
    assert 3.5 <= first.rating <= 5.0
    assert first.estimated_duration_seconds == 3600
    assert first.description == "A wonderful place to visit with great beach experience"


def test_create_mock_poi_generates_ids() -> None:
    coordinates = Coordinate(latitude=1.0, longitude=2.0)

    first = create_mock_poi("A", POICategory.cafe, coordinates)
    second = create_mock_poi("B", POICategory.cafe, coordinates)

    assert first.id != second.id
    assert 3.5 <= second.rating <= 5.0
