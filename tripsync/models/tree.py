"""Read-only traversal and lookup over region trees.

Functions accept either a single region or a forest (e.g. ``trip.regions``).
Traversal is pre-order, iterative and keeps insertion order; nothing here
sorts. Lookups by id return None when the id does not resolve, since weak
references (document -> POI, activity -> POI, POI -> incoming leg) may point
at entities that were removed.
"""

from collections.abc import Iterable, Iterator

from tripsync.models.documents import TripDocument
from tripsync.models.places import PointOfInterest, TransportationMethod
from tripsync.models.region import TripRegion
from tripsync.models.schedule import ScheduledActivity

Regions = TripRegion | Iterable[TripRegion]


class RegionCycleError(ValueError):
    """A region would appear more than once in a tree (shared or circular)."""

    pass


def _roots(regions: Regions) -> list[TripRegion]:
    if isinstance(regions, TripRegion):
        return [regions]
    return list(regions)


def iter_regions_with_parent(
    regions: Regions,
) -> Iterator[tuple[TripRegion | None, TripRegion]]:
    """Yield ``(parent, region)`` pairs in pre-order; roots have parent None.

    Raises:
        RegionCycleError: If a region id is reached twice
    """
    stack: list[tuple[TripRegion | None, TripRegion]] = [
        (None, root) for root in reversed(_roots(regions))
    ]
    seen: set[str] = set()

    while stack:
        parent, region = stack.pop()
        if region.id in seen:
            raise RegionCycleError(f"Region {region.id} appears more than once in the tree")
        seen.add(region.id)
        yield parent, region
        stack.extend((region, child) for child in reversed(region.sub_regions))


def iter_regions(regions: Regions) -> Iterator[TripRegion]:
    """Yield every region in pre-order."""
    for _, region in iter_regions_with_parent(regions):
        yield region


def region_ids(regions: Regions) -> set[str]:
    """Ids of every region in the tree(s)."""
    return {region.id for region in iter_regions(regions)}


def flatten_pois(region: Regions) -> list[PointOfInterest]:
    """Concatenate each level's points of interest in pre-order."""
    return [poi for r in iter_regions(region) for poi in r.points_of_interest]


def find_region(regions: Regions, region_id: str) -> TripRegion | None:
    for region in iter_regions(regions):
        if region.id == region_id:
            return region
    return None


def find_parent(regions: Regions, region_id: str) -> TripRegion | None:
    """Parent of a region, or None for a root or an unknown id."""
    for parent, region in iter_regions_with_parent(regions):
        if region.id == region_id:
            return parent
    return None


def find_poi(regions: Regions, poi_id: str) -> PointOfInterest | None:
    for region in iter_regions(regions):
        for poi in region.points_of_interest:
            if poi.id == poi_id:
                return poi
    return None


def find_transportation(regions: Regions, transport_id: str) -> TransportationMethod | None:
    for region in iter_regions(regions):
        for leg in region.transportation_methods:
            if leg.id == transport_id:
                return leg
    return None


def resolve_incoming_transport(
    regions: Regions, poi: PointOfInterest
) -> TransportationMethod | None:
    if poi.incoming_transport_id is None:
        return None
    return find_transportation(regions, poi.incoming_transport_id)


def resolve_document_poi(regions: Regions, document: TripDocument) -> PointOfInterest | None:
    if document.associated_poi_id is None:
        return None
    return find_poi(regions, document.associated_poi_id)


def resolve_document_region(regions: Regions, document: TripDocument) -> TripRegion | None:
    if document.associated_region_id is None:
        return None
    return find_region(regions, document.associated_region_id)


def resolve_activity_poi(
    regions: Regions, activity: ScheduledActivity
) -> PointOfInterest | None:
    if activity.poi_id is None:
        return None
    return find_poi(regions, activity.poi_id)


def attach_sub_region(parent: TripRegion, child: TripRegion) -> None:
    """Append ``child`` under ``parent``, refusing to create a cycle.

    Raises:
        RegionCycleError: If parent is child itself or one of its descendants
    """
    if parent.id in region_ids(child):
        raise RegionCycleError(
            f"Cannot attach region {child.id} under {parent.id}: it would become its own ancestor"
        )
    parent.sub_regions.append(child)


def detach_region(roots: list[TripRegion], region_id: str) -> TripRegion | None:
    """Remove a region (with its subtree) from wherever it sits in the forest.

    Args:
        roots: The forest list itself; top-level regions are removed from it
        region_id: Region to remove

    Returns:
        The removed region, or None if no region has that id
    """
    for parent, region in iter_regions_with_parent(roots):
        if region.id != region_id:
            continue
        siblings = roots if parent is None else parent.sub_regions
        # By identity: list.remove() would match the first *equal* sibling
        index = next(i for i, sibling in enumerate(siblings) if sibling is region)
        del siblings[index]
        return region
    return None
