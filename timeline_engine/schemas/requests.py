"""
Pydantic schemas for the alternative-stop exchange with the planning backend
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .plan import LocationRecord


class Candidate(BaseModel):
    """A replacement stop suggested by the backend"""
    id: Optional[str] = None
    name: str
    category: str
    category2: Optional[str] = None
    lat: float
    lng: float
    reason: Optional[str] = Field(default=None, description="Why this place was suggested")

    def to_location(self) -> LocationRecord:
        """Location record for this candidate; category2 falls back to category."""
        return LocationRecord(
            name=self.name,
            category=self.category,
            category2=self.category2 or self.category,
            lat=self.lat,
            lng=self.lng,
        )


class AlternativesRequest(BaseModel):
    """Request body for fetching replacement candidates"""
    plan_id: str
    day: str = Field(..., description="Day key", example="day1")
    spot_names: List[str] = Field(..., description="Stops the user wants replaced")
    region: Optional[str] = None


class AlternativesResponse(BaseModel):
    """Response body carrying replacement candidates"""
    alternatives: List[Candidate] = Field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AlternativesResponse":
        return cls.model_validate(data or {})
