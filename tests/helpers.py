"""
Shared helpers for timeline engine tests.
"""

from typing import List, Optional

from timeline_engine.schemas import Stop
from timeline_engine.tools.time_window import parse_clock, parse_time_window


def window_minutes(stop: Stop) -> tuple:
    """
    Start and end of a stop's window as minutes since midnight.

    Returns (start, end); either may be None when missing.
    """
    window = parse_time_window(stop.time)
    return parse_clock(window.start), parse_clock(window.end)


def names(stops: List[Stop]) -> List[str]:
    return [stop.name for stop in stops]


def make_stop(name: str, category: str, time: str = "", transit: Optional[List[str]] = None) -> Stop:
    return Stop(name=name, category=category, time=time, transit_to_here=transit or [])
