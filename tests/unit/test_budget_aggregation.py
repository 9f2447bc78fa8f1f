"""Tests for budget and spend roll-ups."""

from datetime import date, datetime, timedelta
from decimal import Decimal

from tripsync.itinerary.aggregation import (
    budget_breakdown,
    is_over_budget,
    remaining_budget,
    schedule_spend,
    total_actual_spent,
    total_budget_allocated,
    trip_duration_days,
    trip_total_spend,
)
from tripsync.models import (
    Coordinate,
    DailySchedule,
    Money,
    PointOfInterest,
    POICategory,
    ScheduledActivity,
    Trip,
    TripRegion,
)

START = datetime(2025, 10, 1)


def make_region(
    region_id: str,
    budget: str | None = None,
    spent: str = "0",
    children: list[TripRegion] | None = None,
) -> TripRegion:
    """Helper to create a test region."""
    return TripRegion(
        id=region_id,
        name=region_id,
        country="Vietnam",
        arrival_date=START,
        departure_date=START + timedelta(days=3),
        budget_allocation=Decimal(budget) if budget is not None else None,
        actual_spent=Decimal(spent),
        sub_regions=children or [],
    )


def make_trip(regions: list[TripRegion], total_budget: str | None = None) -> Trip:
    """Helper to create a test trip."""
    return Trip(
        title="Test",
        start_date=START,
        end_date=START + timedelta(days=6),
        total_budget=Decimal(total_budget) if total_budget is not None else None,
        regions=regions,
    )


def test_total_budget_allocated_sums_subtree() -> None:
    """Test the root 1500 + sub-region 2000 = 3500 roll-up."""
    root = make_region("root", budget="1500", children=[make_region("sub", budget="2000")])

    assert total_budget_allocated(root) == Decimal("3500")


def test_total_budget_allocated_treats_missing_allocation_as_zero() -> None:
    root = make_region(
        "root", children=[make_region("a", budget="250"), make_region("b", children=[])]
    )

    assert total_budget_allocated(root) == Decimal("250")


def test_aggregators_are_idempotent() -> None:
    """Test that aggregating twice over an unmodified tree gives the same value."""
    root = make_region(
        "root",
        budget="100",
        spent="10",
        children=[make_region("a", budget="200", spent="20", children=[make_region("b", "5")])],
    )

    assert total_budget_allocated(root) == total_budget_allocated(root) == Decimal("305")
    assert total_actual_spent(root) == total_actual_spent(root) == Decimal("30")


def test_total_actual_spent_includes_poi_spending() -> None:
    """Test region totals plus converted (or raw) POI actual spending."""
    child = make_region("child", spent="15")
    child.points_of_interest = [
        PointOfInterest(
            name="Market",
            category=POICategory.market,
            coordinates=Coordinate(latitude=10.77, longitude=106.69),
            actual_spending=Money(
                amount=Decimal("500000"), currency="VND", exchange_rate=Decimal("0.000041")
            ),
        ),
        PointOfInterest(
            name="Cafe",
            category=POICategory.cafe,
            coordinates=Coordinate(latitude=10.78, longitude=106.70),
            actual_spending=Money(amount=Decimal("4.50"), currency="AUD"),
        ),
        PointOfInterest(
            name="Park",
            category=POICategory.park,
            coordinates=Coordinate(latitude=10.79, longitude=106.71),
        ),
    ]
    root = make_region("root", spent="100", children=[child])

    assert total_actual_spent(root) == Decimal("140.00")


def test_trip_duration_counts_both_ends() -> None:
    """Test that day 0 to day 6 is a 7-day trip."""
    assert trip_duration_days(make_trip([])) == 7


def test_trip_duration_rounds_partial_days_up() -> None:
    trip = Trip(
        title="Partial",
        start_date=datetime(2025, 10, 1, 9, 0),
        end_date=datetime(2025, 10, 7, 18, 0),
    )

    assert trip_duration_days(trip) == 8


def test_is_over_budget_false_without_total_budget() -> None:
    """Test that a trip with no budget is never over budget."""
    trip = make_trip([make_region("root", spent="100000")])

    assert is_over_budget(trip) is False
    assert remaining_budget(trip) is None


def test_is_over_budget_and_remaining() -> None:
    trip = make_trip(
        [make_region("a", spent="700"), make_region("b", spent="400")], total_budget="1000"
    )

    assert trip_total_spend(trip) == Decimal("1100")
    assert is_over_budget(trip) is True
    assert remaining_budget(trip) == Decimal("-100")


def test_exactly_on_budget_is_not_over() -> None:
    trip = make_trip([make_region("a", spent="1000")], total_budget="1000")

    assert is_over_budget(trip) is False
    assert remaining_budget(trip) == Decimal(0)


def test_schedule_spend_prefers_recorded_total() -> None:
    activity = ScheduledActivity(
        title="Dinner",
        start_time=START,
        end_time=START + timedelta(hours=2),
        actual_cost=Money(amount=Decimal("80"), currency="AUD"),
    )
    recorded = DailySchedule(
        date=date(2025, 10, 1),
        region_id="root",
        actual_activities=[activity],
        actual_spent=Money(amount=Decimal("95"), currency="AUD"),
    )
    summed = DailySchedule(
        date=date(2025, 10, 2),
        region_id="root",
        actual_activities=[
            activity,
            ScheduledActivity(
                title="Boat",
                start_time=START + timedelta(hours=3),
                end_time=START + timedelta(hours=4),
                actual_cost=Money(
                    amount=Decimal("100000"), currency="VND", exchange_rate=Decimal("0.000041")
                ),
            ),
            ScheduledActivity(
                title="Walk", start_time=START, end_time=START + timedelta(hours=1)
            ),
        ],
    )

    assert schedule_spend(recorded) == Decimal("95")
    assert schedule_spend(summed) == Decimal("84.1")


def test_budget_breakdown_for_sample_trip(vietnam_trip: Trip) -> None:
    """Test breakdown rows for the Vietnam sample trip."""
    breakdown = budget_breakdown(vietnam_trip)

    assert breakdown.base_currency == "AUD"
    assert breakdown.total_budget == Decimal("3500")
    assert breakdown.total_allocated == Decimal("7000")
    assert breakdown.total_spent == Decimal(0)
    assert breakdown.schedule_spent == Decimal(0)
    assert breakdown.remaining == Decimal("3500")
    assert breakdown.over_budget is False

    [row] = breakdown.regions
    assert row.region_id == "vietnam_country"
    assert row.allocated == Decimal("7000")
    assert row.poi_count == 3


def test_budget_breakdown_reflects_recorded_spend(vietnam_trip: Trip) -> None:
    vietnam_trip.record_region_spend("hanoi_region", Decimal("3600"))

    breakdown = budget_breakdown(vietnam_trip)

    assert breakdown.total_spent == Decimal("3600")
    assert breakdown.remaining == Decimal("-100")
    assert breakdown.over_budget is True
