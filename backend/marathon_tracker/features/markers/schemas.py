"""
Marker schemas.

Pydantic schemas for API request/response serialization.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from marathon_tracker.features.pacing.schemas import SplitRecordSchema, check_race_time
from marathon_tracker.features.route.schemas import CoordinatesRequest
from marathon_tracker.shared.constants import RACE_DISTANCES


class MarkerCreate(BaseModel):
    """Request to create a marker."""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    distance_km: float = Field(..., ge=0, allow_inf_nan=False)
    race_time: Optional[str] = Field(default=None, description="H:MM:SS")
    note: Optional[str] = None

    @field_validator("race_time")
    @classmethod
    def validate_race_time(cls, v: Optional[str]) -> Optional[str]:
        return check_race_time(v)


class MarkerResponse(BaseModel):
    """Stored marker."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    latitude: float
    longitude: float
    distance_km: float
    race_time: Optional[str] = None
    note: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RaceMarkerRequest(CoordinatesRequest):
    """
    Record a race time at a standard distance.

    The route is either a catalog route (route_id) or drawn coordinates.
    """
    label: str = Field(..., description="Race distance label, e.g. '10K'")
    race_time: str = Field(..., description="H:MM:SS")
    note: Optional[str] = None
    route_id: Optional[str] = None

    @field_validator("race_time")
    @classmethod
    def validate_race_time(cls, v: str) -> str:
        if not v:
            raise ValueError("Race time is required")
        return check_race_time(v)

    @field_validator("label")
    @classmethod
    def validate_label(cls, v: str) -> str:
        labels = [d.label for d in RACE_DISTANCES]
        if v not in labels:
            raise ValueError(f"Unknown race distance '{v}', expected one of: {', '.join(labels)}")
        return v


class MarkerSplitsResponse(BaseModel):
    """Splits derived from stored markers."""
    records: List[SplitRecordSchema]
    consistency: float


class MarkerImportResponse(BaseModel):
    """Result of a split CSV import."""
    imported: int
    markers: List[MarkerResponse]
