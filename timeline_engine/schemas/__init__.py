"""
Pydantic schemas for the timeline engine
"""
from .plan import LOCATION_KINDS, Stop, LocationRecord, Timelines, DayPlan, PlanSummary, Plan
from .transit import TransitStep, TimeWindow, CongestionLevel, TravelSummary, ResolvedLocation
from .requests import Candidate, AlternativesRequest, AlternativesResponse

__all__ = [
    # Plan models
    "LOCATION_KINDS",
    "Stop",
    "LocationRecord",
    "Timelines",
    "DayPlan",
    "PlanSummary",
    "Plan",
    # Read-time views
    "TransitStep",
    "TimeWindow",
    "CongestionLevel",
    "TravelSummary",
    "ResolvedLocation",
    # Alternatives exchange
    "Candidate",
    "AlternativesRequest",
    "AlternativesResponse",
]
