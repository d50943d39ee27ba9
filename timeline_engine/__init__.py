"""
Itinerary timeline engine: transit parsing, schedule recomputation and
local plan editing for the results view.
"""
from .editing import EditResult, EditSession
from .schemas import Candidate, Plan, Stop, TransitStep
from .tools import parse_transit_step, recompute_times

__version__ = "1.0.0"

__all__ = [
    "EditSession",
    "EditResult",
    "Plan",
    "Stop",
    "Candidate",
    "TransitStep",
    "parse_transit_step",
    "recompute_times",
]
