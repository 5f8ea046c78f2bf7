"""Pacing data models (dataclasses, no DB dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field

from marathon_tracker.shared.constants import PaceTrend


@dataclass(frozen=True)
class DistanceTimeSample:
    """Elapsed race time recorded at a distance."""

    distance: float  # miles
    elapsed: float  # seconds since race start
    note: str | None = None


@dataclass(frozen=True)
class PaceZone:
    """Named pace band, seconds per mile."""

    name: str
    min_pace: int
    max_pace: int
    description: str = ""

    def contains(self, pace: float) -> bool:
        return self.min_pace <= pace <= self.max_pace


@dataclass(frozen=True)
class PaceReading:
    """Current pace and how it compares to the target range."""

    pace: float  # seconds per mile
    trend: PaceTrend


@dataclass(frozen=True)
class FinishScenarios:
    """Projected finish times (seconds) under different paces."""

    best: float
    average: float
    worst: float
    current: float


@dataclass(frozen=True)
class SplitRecord:
    """A recorded sample with the split from the previous one."""

    distance: float  # miles
    elapsed: float  # seconds
    split: float  # seconds since previous record
    pace: float  # seconds per mile over the split
    note: str | None = None


@dataclass(frozen=True)
class Split:
    """Planned elapsed time at a checkpoint."""

    distance: float  # miles
    elapsed: float  # seconds
    pace: float  # average seconds per mile up to this checkpoint


@dataclass(frozen=True)
class PaceAnalysis:
    """Summary of recorded split paces."""

    fastest_pace: float
    slowest_pace: float
    average_pace: float
    recent_average: float  # last three splits
    pace_variation: float
    consistency: float  # percent
    projected_finish: dict[str, float] = field(default_factory=dict)
