"""
Pace Projector

Current pace, trend against the target range, and finish-time projection
with per-mile elevation adjustment.

Nothing here raises on odd input: missing samples fall back to the
target range midpoint and missing elevation to flat projection.
"""

from __future__ import annotations

import math
import statistics
from typing import Optional, Sequence

from marathon_tracker.features.route import GeoPath, RoutePoint
from marathon_tracker.shared.constants import (
    MARATHON_DISTANCE_MILES,
    PREDICTION_CHECKPOINTS_MILES,
    PaceTrend,
)

from .models import (
    DistanceTimeSample,
    FinishScenarios,
    PaceAnalysis,
    PaceReading,
    SplitRecord,
)
from .records import build_split_records, sort_samples


# Fixed band around the target midpoint that counts as on target
TREND_TOLERANCE_S = 15

# ~10 s of pace per 100 ft of climb, relative to a 7:30 reference mile
ELEVATION_SECONDS_PER_100FT = 10
REFERENCE_PACE_S = 7.5 * 60
MIN_ELEVATION_FACTOR = 0.8
MAX_ELEVATION_FACTOR = 1.3

# Route points within this distance of a whole mile stand for that mile
MILE_MATCH_TOLERANCE = 0.1

RECENT_SPLIT_COUNT = 3


class PaceProjector:
    """
    Projects race times from recorded samples.

    Args:
        samples: Recorded distance/time samples (any order)
        fast_pace: Fast end of the target range, seconds per mile
        slow_pace: Slow end of the target range, seconds per mile
        total_distance: Race distance in miles
        path: Route geometry, used for elevation adjustment
    """

    def __init__(
        self,
        samples: Sequence[DistanceTimeSample],
        fast_pace: float,
        slow_pace: float,
        total_distance: float = MARATHON_DISTANCE_MILES,
        path: Optional[GeoPath] = None,
    ):
        self.samples = tuple(sort_samples(samples))
        self.fast_pace = fast_pace
        self.slow_pace = slow_pace
        self.total_distance = total_distance
        self.path = path

    @property
    def target_midpoint(self) -> float:
        return (self.fast_pace + self.slow_pace) / 2

    # =========================================================================
    # Current pace
    # =========================================================================

    def current_pace(self) -> PaceReading:
        """
        Pace between the two most recent samples.

        Falls back to the target midpoint (trend steady) with fewer than
        two samples or no distance between them.
        """
        midpoint = self.target_midpoint
        fallback = PaceReading(pace=midpoint, trend=PaceTrend.STEADY)

        if len(self.samples) < 2:
            return fallback

        earlier, later = self.samples[-2], self.samples[-1]
        distance_diff = later.distance - earlier.distance
        if distance_diff <= 0:
            return fallback

        pace = (later.elapsed - earlier.elapsed) / distance_diff

        trend = PaceTrend.STEADY
        if pace < midpoint - TREND_TOLERANCE_S:
            trend = PaceTrend.FASTER
        elif pace > midpoint + TREND_TOLERANCE_S:
            trend = PaceTrend.SLOWER

        return PaceReading(pace=pace, trend=trend)

    # =========================================================================
    # Projection
    # =========================================================================

    @staticmethod
    def elevation_adjustment(elevation_change_ft: float) -> float:
        """
        Pace multiplier for one mile with the given climb.

        Returns:
            Factor clamped to [0.8, 1.3]
        """
        adjustment_seconds = (elevation_change_ft / 100) * ELEVATION_SECONDS_PER_100FT
        factor = 1 + adjustment_seconds / REFERENCE_PACE_S
        return max(MIN_ELEVATION_FACTOR, min(MAX_ELEVATION_FACTOR, factor))

    def _has_elevation_profile(self) -> bool:
        return self.path is not None and self.path.has_elevation

    def _point_near_mile(self, mile: float) -> Optional[RoutePoint]:
        return next(
            (p for p in self.path if abs(p.distance - mile) < MILE_MATCH_TOLERANCE),
            None,
        )

    def _mile_factor(self, mile: float) -> float:
        current = self._point_near_mile(mile)
        following = self._point_near_mile(mile + 1)
        if (
            current is None or following is None
            or current.elevation is None or following.elevation is None
        ):
            return 1.0
        return self.elevation_adjustment(following.elevation - current.elevation)

    def projected_finish(
        self,
        pace: float,
        target_distance: Optional[float] = None,
    ) -> float:
        """
        Projected elapsed seconds at target_distance.

        Starts from the most recent sample at or before the target and
        adds the remaining distance at `pace`, adjusted mile by mile for
        elevation when the route has an elevation profile.

        Args:
            pace: Seconds per mile for the remaining distance
            target_distance: Miles, defaults to the total distance

        Returns:
            Elapsed seconds
        """
        target = self.total_distance if target_distance is None else target_distance

        base_time = 0.0
        start_mile = 0.0
        reached = [s for s in self.samples if s.distance <= target]
        if reached:
            base_time = reached[-1].elapsed
            start_mile = reached[-1].distance

        if target <= start_mile:
            return base_time

        if not self._has_elevation_profile():
            return base_time + (target - start_mile) * pace

        # Whole-mile segments; the first and last may be partial
        total = base_time
        mile = math.floor(start_mile)
        while mile < target:
            fraction = min(mile + 1, target) - max(mile, start_mile)
            if fraction > 0:
                total += pace * self._mile_factor(mile) * fraction
            mile += 1

        return total

    def finish_scenarios(self) -> FinishScenarios:
        """Finish times at the fast, midpoint, slow and current paces."""
        return FinishScenarios(
            best=self.projected_finish(self.fast_pace),
            average=self.projected_finish(self.target_midpoint),
            worst=self.projected_finish(self.slow_pace),
            current=self.projected_finish(self.current_pace().pace),
        )

    def checkpoint_predictions(self, pace: float) -> list[tuple[float, float]]:
        """
        Projected elapsed seconds at the standard checkpoints.

        Returns:
            (miles, seconds) pairs ending with the total distance
        """
        checkpoints = [
            d for d in PREDICTION_CHECKPOINTS_MILES if d < self.total_distance
        ]
        checkpoints.append(self.total_distance)
        return [(d, self.projected_finish(pace, d)) for d in checkpoints]

    # =========================================================================
    # Consistency
    # =========================================================================

    @staticmethod
    def split_consistency(paces: Sequence[float]) -> float:
        """
        Pacing consistency as 100 minus the coefficient of variation.

        Returns:
            Percentage in [0, 100]; 100 with fewer than two paces
        """
        if len(paces) < 2:
            return 100.0

        mean = statistics.fmean(paces)
        if mean <= 0:
            return 100.0

        coefficient_of_variation = statistics.pstdev(paces) / mean * 100
        return max(0.0, 100 - coefficient_of_variation)

    def analyze(
        self,
        records: Optional[Sequence[SplitRecord]] = None,
    ) -> Optional[PaceAnalysis]:
        """
        Summarize recorded split paces.

        Args:
            records: Split records, built from the samples when omitted

        Returns:
            PaceAnalysis, or None when no split has a pace
        """
        if records is None:
            records = build_split_records(self.samples)

        paces = [r.pace for r in records if r.pace > 0]
        if not paces:
            return None

        average = statistics.fmean(paces)
        recent = statistics.fmean(paces[-RECENT_SPLIT_COUNT:])
        fastest = min(paces)
        slowest = max(paces)

        projected = {
            "average": average * self.total_distance,
            "fastest": fastest * self.total_distance,
            "slowest": slowest * self.total_distance,
            "recent": recent * self.total_distance,
        }
        if self.samples:
            last = self.samples[-1]
            remaining = max(0.0, self.total_distance - last.distance)
            projected["current"] = last.elapsed + remaining * recent

        return PaceAnalysis(
            fastest_pace=fastest,
            slowest_pace=slowest,
            average_pace=average,
            recent_average=recent,
            pace_variation=slowest - fastest,
            consistency=self.split_consistency(paces),
            projected_finish=projected,
        )
