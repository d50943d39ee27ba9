"""
Coordinate lookup for timeline stops.

This module joins a day's timeline to the location records that carry
coordinates, for map markers and route polylines.
"""

import logging
from typing import List

from ..schemas.plan import DayPlan
from ..schemas.transit import ResolvedLocation

logger = logging.getLogger(__name__)


def resolve_locations(day: DayPlan) -> List[ResolvedLocation]:
    """
    Coordinates for each stop of the day's display timeline, in order.

    A name is looked up in route, then restaurants, then accommodations.
    Stops with no location record are left out.

    Args:
        day: DayPlan to resolve

    Returns:
        List of ResolvedLocation in timeline order
    """
    index = day.location_index()
    locations = []

    for stop in day.display_timeline():
        record = index.get(stop.name)
        if record is None:
            logger.warning(f"Stop {stop.name} has no location record")
            continue

        locations.append(
            ResolvedLocation(
                name=stop.name,
                category=stop.category,
                lat=record.lat,
                lng=record.lng,
            )
        )

    return locations
