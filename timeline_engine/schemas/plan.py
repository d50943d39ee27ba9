"""
Pydantic schemas for plan data structures.
Matches the plan JSON returned by the planning backend.
"""
import re
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


# Location collections a stop can be classified under, in lookup order
LOCATION_KINDS: Tuple[str, ...] = ("route", "restaurants", "accommodations")

_DAY_NUMBER = re.compile(r"(\d+)")


# ============================================================================
# TIMELINE MODELS
# ============================================================================

class Stop(BaseModel):
    """One visitable place within a single day's timeline"""
    name: str = Field(..., description="Place name, unique within a day", example="성수연방")
    category: str = Field(default="", description="Primary category", example="카페")
    category2: Optional[str] = Field(default=None, description="Secondary category")
    time: str = Field(
        default="",
        description="Display window, optionally with a congestion tag",
        example="09:00 - 10:00 [🟡 보통]",
    )
    transit_to_here: List[str] = Field(
        default_factory=list,
        description="Raw transit instructions for the leg arriving here",
    )
    population_level: Optional[str] = Field(default=None, description="Crowd tag, e.g. '🟢 여유'")
    traffic_level: Optional[str] = Field(default=None, description="Traffic tag")

    class Config:
        extra = "allow"


class LocationRecord(BaseModel):
    """A stop classified by kind, carrying its coordinates"""
    name: str
    category: str = ""
    category2: Optional[str] = None
    lat: float
    lng: float

    class Config:
        extra = "allow"


class Timelines(BaseModel):
    """Alternative orderings of a day's stops"""
    fastest_version: List[Stop] = Field(default_factory=list)
    min_transfer_version: List[Stop] = Field(default_factory=list)

    class Config:
        extra = "allow"


class DayPlan(BaseModel):
    """A single day of the plan"""
    route: List[LocationRecord] = Field(default_factory=list)
    restaurants: List[LocationRecord] = Field(default_factory=list)
    accommodations: List[LocationRecord] = Field(default_factory=list)
    timelines: Timelines = Field(default_factory=Timelines)

    class Config:
        extra = "allow"

    def location_lists(self) -> List[List[LocationRecord]]:
        """All location collections, in LOCATION_KINDS order."""
        return [getattr(self, kind) for kind in LOCATION_KINDS]

    def location_index(self) -> Dict[str, LocationRecord]:
        """
        Name -> record view across every location kind.

        The first kind that holds a name wins, so a stop listed under both
        route and restaurants resolves to its route record.
        """
        index: Dict[str, LocationRecord] = {}
        for records in self.location_lists():
            for record in records:
                index.setdefault(record.name, record)
        return index

    def kinds_of(self, name: str) -> List[str]:
        """Location kinds that reference a stop name."""
        return [
            kind for kind in LOCATION_KINDS
            if any(record.name == name for record in getattr(self, kind))
        ]

    def remove_location(self, name: str) -> int:
        """Drop every location record with this name. Returns how many were removed."""
        removed = 0
        for kind in LOCATION_KINDS:
            records = getattr(self, kind)
            kept = [record for record in records if record.name != name]
            removed += len(records) - len(kept)
            setattr(self, kind, kept)
        return removed

    def replace_location(self, name: str, replacement: LocationRecord) -> List[str]:
        """
        Swap the first record named ``name`` in each kind for ``replacement``.

        Returns the kinds that were updated.
        """
        updated = []
        for kind in LOCATION_KINDS:
            records = getattr(self, kind)
            for i, record in enumerate(records):
                if record.name == name:
                    records[i] = replacement.model_copy(deep=True)
                    updated.append(kind)
                    break
        return updated

    def display_timeline(self) -> List[Stop]:
        """Timeline to show: fastest_version, else route records without times."""
        if self.timelines.fastest_version:
            return self.timelines.fastest_version
        return [
            Stop(name=record.name, category=record.category, category2=record.category2)
            for record in self.route
        ]


# ============================================================================
# PLAN
# ============================================================================

class PlanSummary(BaseModel):
    """Trip-level metadata"""
    region: str = ""
    start_date: str = Field(default="", description="Date in YYYY-MM-DD format")
    end_date: str = Field(default="", description="Date in YYYY-MM-DD format")
    transport: str = ""
    transport_mode: str = Field(default="", description="e.g. 'walkAndPublic'")

    class Config:
        extra = "allow"


class Plan(BaseModel):
    """Complete multi-day plan as produced by the planning backend"""
    plan_id: str = Field(..., description="Unique plan identifier")
    summary: PlanSummary = Field(default_factory=PlanSummary)
    variants: Dict[str, DayPlan] = Field(default_factory=dict, description="day key -> DayPlan")

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "plan_id": "plan_3f9a1c",
                "summary": {
                    "region": "성수동",
                    "start_date": "2025-05-03",
                    "end_date": "2025-05-03",
                    "transport": "대중교통",
                    "transport_mode": "walkAndPublic",
                },
                "variants": {
                    "day1": {
                        "route": [
                            {"name": "서울숲", "category": "공원", "lat": 37.5444, "lng": 127.0374}
                        ],
                        "restaurants": [],
                        "accommodations": [],
                        "timelines": {
                            "fastest_version": [
                                {
                                    "name": "서울숲",
                                    "category": "공원",
                                    "time": "09:00 - 09:45",
                                    "transit_to_here": [],
                                }
                            ],
                            "min_transfer_version": [],
                        },
                    }
                },
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Plan":
        """Build a plan from backend JSON, treating null collections as empty."""
        return cls.model_validate(_drop_null_collections(data))

    def to_dict(self) -> Dict[str, Any]:
        """Dump back to the backend JSON shape."""
        return self.model_dump(exclude_none=True)

    def day_keys(self) -> List[str]:
        """Day keys in natural order, so day2 sorts before day10."""
        def _key(day_key: str):
            match = _DAY_NUMBER.search(day_key)
            return (int(match.group(1)) if match else float("inf"), day_key)

        return sorted(self.variants, key=_key)

    def day(self, day_key: str) -> Optional[DayPlan]:
        return self.variants.get(day_key)


def _drop_null_collections(value: Any) -> Any:
    # Backend sends null for empty arrays in places; pydantic defaults cover absent keys
    if isinstance(value, dict):
        return {
            key: _drop_null_collections(item)
            for key, item in value.items()
            if not (item is None and key in _NULLABLE_COLLECTIONS)
        }
    if isinstance(value, list):
        return [_drop_null_collections(item) for item in value]
    return value


_NULLABLE_COLLECTIONS = frozenset({
    "route",
    "restaurants",
    "accommodations",
    "timelines",
    "fastest_version",
    "min_transfer_version",
    "transit_to_here",
    "time",
    "variants",
    "summary",
})
