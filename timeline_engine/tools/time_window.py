"""
Clock and display-window helpers.

Stop.time strings look like ``"09:00 - 10:00"`` and may carry a trailing
congestion tag such as ``"09:00 - 10:00 [🟡 보통]"``. Everything here is
total: malformed input yields ``None`` or an empty window, never an exception.
"""

import re
from typing import Optional

from ..schemas.transit import CongestionLevel, TimeWindow

MINUTES_PER_DAY = 24 * 60

CIRCLE_GLYPHS = re.compile(r"[🟢🟡🔴]")

_CLOCK = re.compile(r"^\s*(\d{1,2}):(\d{2})")
_TRAILING_TAG = re.compile(r"\[(.+)\]\s*$")
_TRAILING_TAG_STRIP = re.compile(r"\s*\[.+\]\s*$")
_RANGE_SEPARATOR = re.compile(r"\s*-\s*")


def strip_glyphs(text: str) -> str:
    """Remove colored-circle glyphs and surrounding whitespace."""
    return CIRCLE_GLYPHS.sub("", text).strip()


def parse_clock(text: Optional[str]) -> Optional[int]:
    """
    Parse a leading ``HH:MM`` into minutes since midnight.

    Returns None for blank or malformed input.
    """
    if not text:
        return None
    match = _CLOCK.match(text)
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def format_clock(total_minutes: int) -> str:
    """Format minutes since midnight as ``HH:MM``, wrapping past midnight."""
    total_minutes %= MINUTES_PER_DAY
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def format_window(start_minutes: int, end_minutes: int) -> str:
    return f"{format_clock(start_minutes)} - {format_clock(end_minutes)}"


def _tag_severity(raw: str, cleaned: str) -> Optional[str]:
    if "🟡" in raw or "보통" in cleaned:
        return "medium"
    if "🔴" in raw or "정체" in cleaned or "지연" in cleaned:
        return "high"
    if "🟢" in raw or "여유" in cleaned:
        return "low"
    return None


def parse_time_window(time_str: Optional[str]) -> TimeWindow:
    """
    Split a display window into start, end and congestion tag.

    Args:
        time_str: Stop.time value, e.g. ``"12:10 - 13:10 [🔴 혼잡]"``

    Returns:
        TimeWindow; ``start`` is empty when there is no window yet
    """
    if not time_str:
        return TimeWindow()

    tag_match = _TRAILING_TAG.search(time_str)
    base = _TRAILING_TAG_STRIP.sub("", time_str).strip()
    parts = _RANGE_SEPARATOR.split(base, maxsplit=1) if base else [""]

    window = TimeWindow(
        start=parts[0].strip(),
        end=parts[1].strip() if len(parts) > 1 and parts[1].strip() else None,
    )
    if tag_match:
        raw_tag = tag_match.group(1)
        cleaned = strip_glyphs(raw_tag)
        window.extra_label = cleaned
        window.extra_severity = _tag_severity(raw_tag, cleaned)
    return window


def parse_congestion_level(level: Optional[str]) -> Optional[CongestionLevel]:
    """
    Classify a population_level / traffic_level tag.

    ``None``, empty strings and the backend's ``"-"`` placeholder mean there
    is nothing to show.
    """
    if not level or level.strip() == "-":
        return None

    cleaned = strip_glyphs(level)
    if "🟢" in level or "여유" in cleaned or "보통" in cleaned:
        severity = "low"
    elif "🟡" in level or "약간" in cleaned:
        severity = "medium"
    elif "🔴" in level or "붐빔" in cleaned or "혼잡" in cleaned:
        severity = "high"
    else:
        severity = None
    return CongestionLevel(text=cleaned, severity=severity)
