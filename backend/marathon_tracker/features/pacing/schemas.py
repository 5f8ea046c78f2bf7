"""
Pacing Schemas

Pydantic models for pace projection and split planning.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from marathon_tracker.shared.constants import (
    HALF_MARATHON_MILES,
    MARATHON_DISTANCE_MILES,
    PaceTrend,
    SplitStrategy,
)
from marathon_tracker.shared.formatters import (
    duration_seconds,
    format_duration,
    format_pace,
    parse_duration,
)

from .models import DistanceTimeSample, PaceAnalysis, PaceZone, Split, SplitRecord


def check_race_time(v: Optional[str]) -> Optional[str]:
    """Reject times that are not H:MM:SS."""
    if v is None or v == "":
        return None
    if parse_duration(v) is None:
        raise ValueError(f"Invalid time '{v}', expected H:MM:SS")
    return v.strip()


# === Request Models ===

class SampleInput(BaseModel):
    """Recorded time at a distance."""
    distance: float = Field(..., ge=0, allow_inf_nan=False, description="Miles from the start")
    time: str = Field(..., description="Elapsed time H:MM:SS")
    note: Optional[str] = None

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        if not v:
            raise ValueError("Time is required")
        return check_race_time(v)

    def to_sample(self) -> DistanceTimeSample:
        return DistanceTimeSample(
            distance=self.distance,
            elapsed=duration_seconds(self.time),
            note=self.note,
        )


class PaceRangeInput(BaseModel):
    """Target pace range in seconds per mile."""
    fast_pace_s: int = Field(default=7 * 60, gt=0)
    slow_pace_s: int = Field(default=8 * 60 + 10, gt=0)

    @model_validator(mode="after")
    def check_order(self):
        if self.fast_pace_s > self.slow_pace_s:
            raise ValueError("fast_pace_s must not be slower than slow_pace_s")
        return self


class ProjectionRequest(PaceRangeInput):
    """Request for a pace projection."""
    samples: List[SampleInput] = Field(default_factory=list)
    total_distance: float = Field(default=MARATHON_DISTANCE_MILES, gt=0, allow_inf_nan=False)
    route_id: Optional[str] = Field(
        default=None,
        description="Catalog route used for elevation adjustment"
    )


class SplitPlanRequest(PaceRangeInput):
    """Request for a split plan."""
    target_time: Optional[str] = Field(default=None, description="H:MM:SS")
    strategy: SplitStrategy = SplitStrategy.EVEN
    total_distance: float = Field(default=MARATHON_DISTANCE_MILES, gt=0, allow_inf_nan=False)
    interval_miles: float = Field(default=5.0, gt=0, allow_inf_nan=False)

    @field_validator("target_time")
    @classmethod
    def validate_target_time(cls, v: Optional[str]) -> Optional[str]:
        return check_race_time(v)


# === Response Models ===

class PaceZoneSchema(BaseModel):
    """Pace zone reference data."""
    name: str
    min_pace_s: int
    max_pace_s: int
    min_pace: str
    max_pace: str
    description: str

    @classmethod
    def from_zone(cls, zone: PaceZone) -> "PaceZoneSchema":
        return cls(
            name=zone.name,
            min_pace_s=zone.min_pace,
            max_pace_s=zone.max_pace,
            min_pace=format_pace(zone.min_pace),
            max_pace=format_pace(zone.max_pace),
            description=zone.description,
        )


class TimeValue(BaseModel):
    """Seconds with display string."""
    seconds: float
    formatted: str

    @classmethod
    def of(cls, seconds: float) -> "TimeValue":
        return cls(seconds=round(seconds, 1), formatted=format_duration(seconds))


class PaceValue(BaseModel):
    """Pace with display string."""
    seconds: float
    formatted: str

    @classmethod
    def of(cls, seconds: float) -> "PaceValue":
        return cls(seconds=round(seconds, 1), formatted=format_pace(seconds))


class CurrentPaceSchema(BaseModel):
    pace: PaceValue
    trend: PaceTrend
    zone: Optional[str] = None


class FinishScenariosSchema(BaseModel):
    best: TimeValue
    average: TimeValue
    worst: TimeValue
    current: TimeValue


class CheckpointPrediction(BaseModel):
    distance: float
    label: str
    elapsed: TimeValue


class SplitSchema(BaseModel):
    distance: float
    elapsed: TimeValue
    pace: PaceValue

    @classmethod
    def from_split(cls, split: Split) -> "SplitSchema":
        return cls(
            distance=split.distance,
            elapsed=TimeValue.of(split.elapsed),
            pace=PaceValue.of(split.pace),
        )


class SplitRecordSchema(BaseModel):
    distance: float
    elapsed: TimeValue
    split: TimeValue
    pace: PaceValue
    note: Optional[str] = None

    @classmethod
    def from_record(cls, record: SplitRecord) -> "SplitRecordSchema":
        return cls(
            distance=round(record.distance, 2),
            elapsed=TimeValue.of(record.elapsed),
            split=TimeValue.of(record.split),
            pace=PaceValue.of(record.pace),
            note=record.note,
        )


class PaceAnalysisSchema(BaseModel):
    fastest_pace: PaceValue
    slowest_pace: PaceValue
    average_pace: PaceValue
    recent_average: PaceValue
    pace_variation: float
    consistency: float
    projected_finish: dict[str, TimeValue]

    @classmethod
    def from_analysis(cls, analysis: PaceAnalysis) -> "PaceAnalysisSchema":
        return cls(
            fastest_pace=PaceValue.of(analysis.fastest_pace),
            slowest_pace=PaceValue.of(analysis.slowest_pace),
            average_pace=PaceValue.of(analysis.average_pace),
            recent_average=PaceValue.of(analysis.recent_average),
            pace_variation=round(analysis.pace_variation, 1),
            consistency=round(analysis.consistency, 1),
            projected_finish={
                key: TimeValue.of(value)
                for key, value in analysis.projected_finish.items()
            },
        )


class ProjectionResponse(BaseModel):
    """Pace projection result."""
    current: CurrentPaceSchema
    scenarios: FinishScenariosSchema
    checkpoints: List[CheckpointPrediction]
    analysis: Optional[PaceAnalysisSchema] = None


class SplitPlanResponse(BaseModel):
    """Split plan result."""
    strategy: SplitStrategy
    target_total: TimeValue
    average_pace: PaceValue
    splits: List[SplitSchema]


def checkpoint_label(distance: float, total_distance: float) -> str:
    """Display label for a prediction checkpoint."""
    if abs(distance - total_distance) < 1e-9:
        return "Finish"
    if abs(distance - HALF_MARATHON_MILES) < 1e-9:
        return "Half"
    return f"Mile {distance:g}"


def checkpoint_predictions_schema(
    predictions: List[Tuple[float, float]],
    total_distance: float,
) -> List[CheckpointPrediction]:
    return [
        CheckpointPrediction(
            distance=distance,
            label=checkpoint_label(distance, total_distance),
            elapsed=TimeValue.of(elapsed),
        )
        for distance, elapsed in predictions
    ]
