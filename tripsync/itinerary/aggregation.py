"""Budget and spend roll-ups over region trees, schedules and trips.

All functions are read-only. Missing optional figures (no budget allocation,
no recorded spending) contribute zero instead of raising.
"""

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

from tripsync.models.currency import base_amount
from tripsync.models.region import TripRegion
from tripsync.models.schedule import DailySchedule
from tripsync.models.tree import flatten_pois, iter_regions
from tripsync.models.trip import Trip


@dataclass
class RegionBudget:
    """Roll-up for one top-level region and its subtree."""

    region_id: str
    name: str
    allocated: Decimal
    spent: Decimal
    poi_count: int


@dataclass
class BudgetBreakdown:
    """Trip-wide budget summary in the trip's base currency."""

    base_currency: str
    total_budget: Decimal | None
    total_allocated: Decimal
    total_spent: Decimal
    schedule_spent: Decimal
    remaining: Decimal | None
    over_budget: bool
    regions: list[RegionBudget]


def total_budget_allocated(region: TripRegion) -> Decimal:
    """Sum of budget allocations over a region and all its descendants."""
    return sum(
        (r.budget_allocation or Decimal(0) for r in iter_regions(region)),
        Decimal(0),
    )


def total_actual_spent(region: TripRegion) -> Decimal:
    """Region running totals plus POI spending across the subtree.

    POI spending counts at its recorded conversion when it has one and at
    its raw amount otherwise.
    """
    total = Decimal(0)
    for r in iter_regions(region):
        total += r.actual_spent
        for poi in r.points_of_interest:
            total += base_amount(poi.actual_spending)
    return total


def trip_total_spend(trip: Trip) -> Decimal:
    return sum((total_actual_spent(r) for r in trip.regions), Decimal(0))


def trip_duration_days(trip: Trip) -> int:
    """Inclusive length in days: partial days round up, then both ends count."""
    delta = trip.end_date - trip.start_date
    days = delta.days
    if delta - timedelta(days=days) > timedelta(0):
        days += 1
    return days + 1


def is_over_budget(trip: Trip) -> bool:
    if trip.total_budget is None:
        return False
    return trip_total_spend(trip) > trip.total_budget


def remaining_budget(trip: Trip) -> Decimal | None:
    """Budget left (negative when overspent), or None without a budget."""
    if trip.total_budget is None:
        return None
    return trip.total_budget - trip_total_spend(trip)


def schedule_spend(schedule: DailySchedule) -> Decimal:
    """Spend for one day.

    A recorded day total wins; otherwise the actual costs of the day's
    actual activities are summed.
    """
    if schedule.actual_spent is not None:
        return base_amount(schedule.actual_spent)
    return sum(
        (base_amount(activity.actual_cost) for activity in schedule.actual_activities),
        Decimal(0),
    )


def budget_breakdown(trip: Trip) -> BudgetBreakdown:
    """Summarize allocation and spend per top-level region and for the trip."""
    rows = [
        RegionBudget(
            region_id=region.id,
            name=region.name,
            allocated=total_budget_allocated(region),
            spent=total_actual_spent(region),
            poi_count=len(flatten_pois(region)),
        )
        for region in trip.regions
    ]
    total_spent = sum((row.spent for row in rows), Decimal(0))

    return BudgetBreakdown(
        base_currency=trip.base_currency,
        total_budget=trip.total_budget,
        total_allocated=sum((row.allocated for row in rows), Decimal(0)),
        total_spent=total_spent,
        schedule_spent=sum(
            (schedule_spend(schedule) for schedule in trip.daily_schedules), Decimal(0)
        ),
        remaining=remaining_budget(trip),
        over_budget=is_over_budget(trip),
        regions=rows,
    )
