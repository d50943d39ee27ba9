"""
Plain-text plan export.

This module renders a plan as the short text block used when sharing an
itinerary through a messenger or the clipboard.
"""

import logging

from ..schemas.plan import Plan

logger = logging.getLogger(__name__)


def render_share_text(plan: Plan) -> str:
    """
    Render a plan as shareable text.

    Output format::

        성수동 여행 일정
        2025-05-03 ~ 2025-05-04

        Day 1:
          1. 서울숲 (09:00 - 09:45)
          2. 성수연방 (10:00 - 10:30)

    Args:
        plan: Plan to render

    Returns:
        Multi-line string
    """
    summary = plan.summary
    header = f"{summary.region} 여행 일정\n{summary.start_date} ~ {summary.end_date}"

    sections = []
    for day_number, day_key in enumerate(plan.day_keys(), start=1):
        timeline = plan.variants[day_key].timelines.fastest_version
        lines = [f"  {i}. {stop.name} ({stop.time})" for i, stop in enumerate(timeline, start=1)]
        sections.append("\n".join([f"Day {day_number}:"] + lines))

    logger.debug(f"Rendered share text for {plan.plan_id} ({len(sections)} days)")
    return header + "\n\n" + "\n\n".join(sections)
