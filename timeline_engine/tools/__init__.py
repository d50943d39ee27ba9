"""
Tools package for the timeline engine.

This package contains pure functions for:
- Transit descriptor parsing and leg summaries
- Display window and congestion tag parsing
- Schedule recomputation after edits
- Coordinate lookup for timeline stops
- Plain-text plan export
"""

from .transit_parser import (
    TRANSIT_RULES,
    TransitRule,
    parse_transit_step,
    parse_transit_steps,
    summarize_travel,
    total_transit_minutes,
)
from .time_window import (
    format_clock,
    parse_clock,
    parse_congestion_level,
    parse_time_window,
)
from .schedule import DWELL_RULES, estimate_dwell_minutes, find_anchor_minutes, recompute_times
from .geo import resolve_locations
from .share import render_share_text

__all__ = [
    "TRANSIT_RULES",
    "TransitRule",
    "parse_transit_step",
    "parse_transit_steps",
    "summarize_travel",
    "total_transit_minutes",
    "format_clock",
    "parse_clock",
    "parse_congestion_level",
    "parse_time_window",
    "DWELL_RULES",
    "estimate_dwell_minutes",
    "find_anchor_minutes",
    "recompute_times",
    "resolve_locations",
    "render_share_text",
]
