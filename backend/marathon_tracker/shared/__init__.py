"""
Shared utilities (NOT business logic).

Usage:
    from marathon_tracker.shared import haversine, format_duration
    from marathon_tracker.shared.constants import SplitStrategy
"""
from .geo import (
    haversine,
    km_to_miles,
    miles_to_km,
    meters_to_feet,
    EARTH_RADIUS_MILES,
    KM_TO_MILES,
    METERS_TO_FEET,
)
from .elevation import (
    calculate_elevation_changes,
    calculate_elevation_gain,
)
from .formatters import (
    parse_duration,
    duration_seconds,
    format_duration,
    format_pace,
    format_distance_miles,
    format_elevation,
)
from .constants import (
    MARATHON_DISTANCE_MILES,
    HALF_MARATHON_MILES,
    WALL_MILE,
    PREDICTION_CHECKPOINTS_MILES,
    PaceTrend,
    SplitStrategy,
    RaceDistance,
    RACE_DISTANCES,
    get_race_distance,
)
from .repository import BaseRepository

__all__ = [
    # geo
    "haversine",
    "km_to_miles",
    "miles_to_km",
    "meters_to_feet",
    "EARTH_RADIUS_MILES",
    "KM_TO_MILES",
    "METERS_TO_FEET",
    # elevation
    "calculate_elevation_changes",
    "calculate_elevation_gain",
    # formatters
    "parse_duration",
    "duration_seconds",
    "format_duration",
    "format_pace",
    "format_distance_miles",
    "format_elevation",
    # constants
    "MARATHON_DISTANCE_MILES",
    "HALF_MARATHON_MILES",
    "WALL_MILE",
    "PREDICTION_CHECKPOINTS_MILES",
    "PaceTrend",
    "SplitStrategy",
    "RaceDistance",
    "RACE_DISTANCES",
    "get_race_distance",
    # repository
    "BaseRepository",
]
