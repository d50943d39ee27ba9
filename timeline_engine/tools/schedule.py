"""
Schedule recomputation after an edit.

Once a stop is moved, removed or swapped, the backend's transit-aware times
no longer hold. recompute_times() reflows every display window from the first
stop's start time using an estimated dwell per category and a fixed gap
between stops.
"""

import logging
from typing import List, Optional, Tuple

from ..schemas.plan import Stop
from ..utils.config import settings
from .time_window import format_clock, format_window, parse_clock, parse_time_window

logger = logging.getLogger(__name__)


# Estimated dwell (minutes) by category keyword. First matching row wins.
DWELL_RULES: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (("카페", "커피", "cafe", "coffee"), 30),
    (("음식", "맛집", "식당", "restaurant", "food"), 60),
    (("쇼핑", "shopping"), 45),
    (("관광", "명소", "sightseeing", "attraction"), 60),
    (("공원", "산책", "park", "walk"), 45),
    (("전시", "미술관", "박물관", "exhibition", "museum"), 90),
    (("숙박", "lodging"), 60),
)


def estimate_dwell_minutes(category: Optional[str], default_duration: Optional[int] = None) -> int:
    """
    Estimated minutes spent at a stop of this category.

    Matching is case-insensitive substring search, so "한식 음식점" hits the
    restaurant row.

    Args:
        category: Stop.category
        default_duration: Fallback for unmatched categories; settings value if None

    Returns:
        Duration in minutes
    """
    if default_duration is None:
        default_duration = settings.default_dwell_minutes

    category_lower = (category or "").lower()
    for keywords, minutes in DWELL_RULES:
        if any(keyword in category_lower for keyword in keywords):
            return minutes
    return default_duration


def find_anchor_minutes(stops: List[Stop]) -> Optional[int]:
    """Start of the first stop's window in minutes, or None if it has none."""
    if not stops:
        return None
    return parse_clock(parse_time_window(stops[0].time).start)


def recompute_times(stops: List[Stop], gap_minutes: Optional[int] = None) -> List[Stop]:
    """
    Reflow display windows from the first stop's start time.

    Each stop gets ``start - end`` where end = start + its dwell, and the next
    stop starts ``gap_minutes`` after that end. Congestion tags are dropped
    since they described the old schedule. Running this on its own output
    changes nothing.

    When the list is empty, or the first stop has no parsable start time,
    the stops are returned as-is; callers detect the second case with
    find_anchor_minutes().

    Args:
        stops: Ordered timeline
        gap_minutes: Minutes between consecutive stops; settings value if None

    Returns:
        New list of Stop copies with rewritten ``time``
    """
    if not stops:
        return stops

    if gap_minutes is None:
        gap_minutes = settings.inter_stop_gap_minutes

    anchor = find_anchor_minutes(stops)
    if anchor is None:
        logger.warning(f"Cannot recompute times: first stop '{stops[0].name}' has no start time")
        return stops

    current = anchor
    updated: List[Stop] = []
    for index, stop in enumerate(stops):
        end = current + estimate_dwell_minutes(stop.category)
        updated.append(stop.model_copy(update={"time": format_window(current, end)}))
        if index < len(stops) - 1:
            current = end + gap_minutes

    logger.debug(f"Recomputed {len(updated)} stop windows from anchor {format_clock(anchor)}")
    return updated
