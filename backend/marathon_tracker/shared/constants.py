"""
Unified constants for race distances, strategies and trends.

This module provides a single source of truth for race naming
across the entire application.
"""

from dataclasses import dataclass
from enum import Enum


MARATHON_DISTANCE_MILES = 26.2
HALF_MARATHON_MILES = 13.1
WALL_MILE = 20.0

# Milestones shown in finish-time predictions (total distance appended)
PREDICTION_CHECKPOINTS_MILES: tuple[float, ...] = (5.0, 10.0, HALF_MARATHON_MILES, WALL_MILE)


class PaceTrend(str, Enum):
    """Current pace relative to the target pace range."""
    FASTER = "faster"
    SLOWER = "slower"
    STEADY = "steady"


class SplitStrategy(str, Enum):
    """
    Pacing strategy for split planning.

    NEGATIVE finishes faster than it starts, POSITIVE fades.
    """
    EVEN = "even"
    NEGATIVE = "negative"
    POSITIVE = "positive"


@dataclass(frozen=True)
class RaceDistance:
    """A standard race checkpoint where a time can be recorded."""

    label: str
    km: float
    miles: float


RACE_DISTANCES: tuple[RaceDistance, ...] = (
    RaceDistance("5K", 5.0, 3.11),
    RaceDistance("10K", 10.0, 6.21),
    RaceDistance("15K", 15.0, 9.32),
    RaceDistance("20K", 20.0, 12.43),
    RaceDistance("Half Marathon", 21.1, 13.1),
    RaceDistance("25K", 25.0, 15.53),
    RaceDistance("30K", 30.0, 18.64),
    RaceDistance("35K", 35.0, 21.75),
    RaceDistance("40K", 40.0, 24.85),
    RaceDistance("Finish", 42.2, 26.2),
)


def get_race_distance(label: str) -> RaceDistance | None:
    """Look up a standard race distance by its label."""
    return next((d for d in RACE_DISTANCES if d.label == label), None)
