"""
Transit descriptor parsing.

The planning backend describes each leg of travel to a stop as a short,
emoji-annotated Korean string, for example::

    "도보 : 7분"
    "[버스][241, 360] : 강남역 → 신논현역 : 5분"
    "[지하철][2호선] : 홍대입구 → 합정 : 3분 [🔴 정체 +2분]"

This module turns those strings into TransitStep objects. A trailing delay
annotation is peeled off first, then an ordered list of TransitRule objects is
evaluated top to bottom and the first rule whose predicate matches builds the
step. Anything no rule recognises becomes an ``other`` step that keeps the
text, so callers always have something to display.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from ..schemas.transit import TransitStep, TravelSummary
from ..utils.config import settings
from ..utils.logger import get_logger
from .time_window import strip_glyphs

logger = get_logger(__name__, component="transit_parser")


# Trailing "[정체 +2분]"-style annotation
_DELAY_TAG = re.compile(r"\[([^\]]*(?:지연|정체|서행)[^\]]*)\]\s*$")
_DELAY_TAG_STRIP = re.compile(r"\s*\[[^\]]*(?:지연|정체|서행)[^\]]*\]\s*$")

_WALK = re.compile(r"도보\s*[:\s]*(\d+)\s*분")
_WAIT = re.compile(r"대기\s*[:\s]*(\d+)\s*분")

# 2-4 digit bus number; minute counts, line numbers, station exits and clock
# times are not routes
_ROUTE_NUMBER = re.compile(r"(?<![\d:])\d{2,4}번?(?!\d)(?!\s*(?:분|호선|번?\s*출구|:\d))")
_BUS_ROUTES = re.compile(r"\[버스\]\[([^\]]+)\]")
_SUBWAY_LINE = re.compile(r"\[지하철\]\[([^\]]+)\]")
_BARE_LINE = re.compile(r"([^\s\[\]]*\d+호선)")
_FIRST_BRACKET = re.compile(r"\[([^\]]+)\]")

_STATIONS = re.compile(r":\s*([^:→]+)\s*→\s*([^:]+)\s*:")
_TRAILING_MINUTES = re.compile(r":\s*(\d+)\s*분\s*$")
_ANY_MINUTES = re.compile(r"(\d+)\s*분")
_TRANSIT_MENTION = re.compile(r"버스|지하철")


@dataclass(frozen=True)
class TransitRule:
    """A (predicate, extractor) pair in the classification cascade."""
    name: str
    matches: Callable[[str], bool]
    extract: Callable[[str], TransitStep]


# ============================================================================
# Delay annotation
# ============================================================================

def delay_severity(annotation: str) -> str:
    """Severity of a delay annotation; red/정체 outranks yellow/지연."""
    if "🔴" in annotation or "정체" in annotation:
        return "high"
    if "🟡" in annotation or "지연" in annotation:
        return "medium"
    return "low"


def split_delay_annotation(raw: str) -> Tuple[Optional[str], str]:
    """
    Separate a trailing delay annotation from the instruction.

    Returns:
        (annotation or None, instruction without the annotation)
    """
    match = _DELAY_TAG.search(raw)
    cleaned = _DELAY_TAG_STRIP.sub("", raw).strip()
    return (match.group(1) if match else None), cleaned


# ============================================================================
# Field extractors
# ============================================================================

def _split_labels(group: str) -> List[str]:
    return [label.strip() for label in re.split(r",\s*", group) if label.strip()]


def _minutes(pattern: re.Pattern, text: str) -> Optional[int]:
    match = pattern.search(text)
    return int(match.group(1)) if match else None


def _stations(text: str) -> Tuple[Optional[str], Optional[str]]:
    match = _STATIONS.search(text)
    if not match:
        return None, None
    return match.group(1).strip(), match.group(2).strip()


def _bus_labels(text: str) -> List[str]:
    match = _BUS_ROUTES.search(text)
    if match:
        return _split_labels(match.group(1))
    # Some responses drop the [버스] tag and lead with the route list
    fallback = _FIRST_BRACKET.search(text)
    if fallback and not any(tag in fallback.group(1) for tag in ("버스", "지하철")):
        return _split_labels(fallback.group(1))
    return []


def _subway_labels(text: str) -> List[str]:
    match = _SUBWAY_LINE.search(text)
    if match:
        return [match.group(1).strip()]
    fallback = _BARE_LINE.search(text)
    return [fallback.group(1)] if fallback else []


def _ride(step_type: str, labels: Callable[[str], List[str]]) -> Callable[[str], TransitStep]:
    def extract(text: str) -> TransitStep:
        from_station, to_station = _stations(text)
        return TransitStep(
            type=step_type,
            duration_minutes=_minutes(_TRAILING_MINUTES, text),
            route_labels=labels(text),
            from_station=from_station,
            to_station=to_station,
        )
    return extract


def _is_bus(text: str) -> bool:
    if "버스" in text:
        return True
    return "[지하철]" not in text and _ROUTE_NUMBER.search(text) is not None


def _is_subway(text: str) -> bool:
    return "지하철" in text or "호선" in text


# Order matters: a subway leg can contain numbers that look like bus routes
TRANSIT_RULES: Tuple[TransitRule, ...] = (
    TransitRule(
        name="walk",
        matches=lambda text: _WALK.search(text) is not None,
        extract=lambda text: TransitStep(type="walk", duration_minutes=_minutes(_WALK, text)),
    ),
    TransitRule(
        name="wait",
        matches=lambda text: "대기" in text,
        extract=lambda text: TransitStep(type="wait", duration_minutes=_minutes(_WAIT, text)),
    ),
    TransitRule(name="bus", matches=_is_bus, extract=_ride("bus", _bus_labels)),
    TransitRule(name="subway", matches=_is_subway, extract=_ride("subway", _subway_labels)),
)


# ============================================================================
# Public API
# ============================================================================

def classify(text: str, rules: Iterable[TransitRule] = TRANSIT_RULES) -> TransitStep:
    """Run the rule cascade over an annotation-free instruction."""
    for rule in rules:
        if rule.matches(text):
            return rule.extract(text)
    return TransitStep(type="other")


def parse_transit_step(raw: str) -> TransitStep:
    """
    Parse one raw transit instruction.

    Never raises: input that no rule recognises, or that trips an unexpected
    error, comes back as an ``other`` step carrying the text.

    Args:
        raw: One entry of Stop.transit_to_here

    Returns:
        TransitStep with ``raw_text`` set to the instruction minus any delay tag

    Example:
        step = parse_transit_step("[버스][241, 360] : 강남역 → 신논현역 : 5분")
        # step.type == "bus", step.route_labels == ["241", "360"]
    """
    text = "" if raw is None else str(raw)
    try:
        annotation, cleaned = split_delay_annotation(text)
        step = classify(cleaned)
        step.raw_text = cleaned
        if annotation is not None:
            step.delay_text = strip_glyphs(annotation)
            step.delay_severity = delay_severity(annotation)
        return step
    except Exception as e:
        logger.error("transit_parse_error", raw=text, error=str(e), error_type=type(e).__name__)
        return TransitStep(type="other", raw_text=text.strip())


def parse_transit_steps(transit: Optional[Iterable[str]]) -> List[TransitStep]:
    """Parse every instruction of a leg, in order."""
    return [parse_transit_step(raw) for raw in transit or []]


def total_transit_minutes(transit: Optional[Iterable[str]]) -> int:
    """Sum the first minute count found in each instruction."""
    total = 0
    for raw in transit or []:
        minutes = _minutes(_ANY_MINUTES, raw or "")
        if minutes is not None:
            total += minutes
    return total


def summarize_travel(transit: Optional[Iterable[str]]) -> TravelSummary:
    """
    Condense a leg for the collapsed timeline row.

    Walk instructions give a duration and a distance estimated at the
    configured walking speed; any bus or subway instruction marks the whole
    leg as transit.
    """
    summary = TravelSummary()
    for raw in transit or []:
        raw = raw or ""
        walk_minutes = _minutes(_WALK, raw)
        if walk_minutes is not None:
            km = walk_minutes / 60 * settings.walking_speed_kmh
            summary.duration_minutes = walk_minutes
            summary.distance_text = f"{km:.1f}km" if km >= 1 else f"{km * 1000:.0f}m"
            summary.mode = "walk"
        if _TRANSIT_MENTION.search(raw):
            summary.mode = "transit"
    return summary
