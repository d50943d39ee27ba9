"""
Pydantic schemas for read-time views of a timeline.
None of these are persisted; they are derived from Stop fields on demand.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


TransitStepType = Literal["walk", "bus", "subway", "wait", "other"]
Severity = Literal["low", "medium", "high"]


class TransitStep(BaseModel):
    """One parsed leg of a transit_to_here instruction"""
    type: TransitStepType = Field(default="other", description="Kind of leg")
    duration_minutes: Optional[int] = Field(default=None, description="Leg duration", example=5)
    route_labels: List[str] = Field(
        default_factory=list,
        description="Bus numbers or subway line names",
        example=["241", "360"],
    )
    from_station: Optional[str] = Field(default=None, example="강남역")
    to_station: Optional[str] = Field(default=None, example="신논현역")
    delay_text: Optional[str] = Field(default=None, description="Delay annotation without glyphs")
    delay_severity: Optional[Severity] = None
    raw_text: str = Field(default="", description="Instruction with the delay annotation removed")


class TimeWindow(BaseModel):
    """A stop's display window split into its parts"""
    start: str = ""
    end: Optional[str] = None
    extra_label: Optional[str] = Field(default=None, description="Congestion tag without glyphs")
    extra_severity: Optional[Severity] = None


class CongestionLevel(BaseModel):
    """A population_level / traffic_level tag"""
    text: str
    severity: Optional[Severity] = Field(default=None, description="None when the tag is unrecognised")


class TravelSummary(BaseModel):
    """Condensed view of the leg arriving at a stop"""
    mode: Literal["walk", "transit"] = "walk"
    duration_minutes: Optional[int] = None
    distance_text: Optional[str] = Field(default=None, example="1.2km")


class ResolvedLocation(BaseModel):
    """A timeline stop joined to its coordinates"""
    name: str
    category: str
    lat: float
    lng: float
