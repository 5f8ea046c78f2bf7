"""
Split Planner

Target-time split schedules for even, negative and positive strategies.
Each strategy is a two-piece pace schedule that breaks at half distance.
"""

from __future__ import annotations

import math
from typing import Optional, Union

from marathon_tracker.shared.constants import MARATHON_DISTANCE_MILES, SplitStrategy
from marathon_tracker.shared.formatters import parse_duration

from .models import Split

# Pace change either side of the half for negative/positive splits
HALF_PACE_ADJUSTMENT = 0.025

DEFAULT_INTERVAL_MILES = 5.0


class SplitPlanner:
    """
    Plans checkpoint times for a target finish.

    Args:
        target_time: 'H:MM:SS', seconds, or None
        total_distance: Race distance in miles
        strategy: Pacing strategy
        fallback_pace: Seconds per mile used when target_time is missing
            or malformed
    """

    def __init__(
        self,
        target_time: Union[str, float, None] = None,
        total_distance: float = MARATHON_DISTANCE_MILES,
        strategy: SplitStrategy = SplitStrategy.EVEN,
        fallback_pace: Optional[float] = None,
    ):
        self.total_distance = total_distance
        self.strategy = SplitStrategy(strategy)
        self.target_total = self._resolve_target(target_time, fallback_pace)

    def _resolve_target(
        self,
        target_time: Union[str, float, None],
        fallback_pace: Optional[float],
    ) -> float:
        if isinstance(target_time, str):
            parsed = parse_duration(target_time)
        else:
            parsed = target_time

        if parsed:
            return float(parsed)
        if fallback_pace:
            return self.total_distance * fallback_pace
        return 0.0

    @property
    def average_pace(self) -> float:
        if self.total_distance <= 0:
            return 0.0
        return self.target_total / self.total_distance

    @property
    def half_distance(self) -> float:
        return self.total_distance / 2

    def _half_paces(self) -> tuple[float, float]:
        """(first half pace, second half pace)."""
        average = self.average_pace
        if self.strategy == SplitStrategy.NEGATIVE:
            return average * (1 + HALF_PACE_ADJUSTMENT), average * (1 - HALF_PACE_ADJUSTMENT)
        if self.strategy == SplitStrategy.POSITIVE:
            return average * (1 - HALF_PACE_ADJUSTMENT), average * (1 + HALF_PACE_ADJUSTMENT)
        return average, average

    def pace_at(self, distance: float) -> float:
        """Scheduled pace (seconds per mile) at a distance."""
        first_half, second_half = self._half_paces()
        return first_half if distance <= self.half_distance else second_half

    def elapsed_at(self, distance: float) -> float:
        """Scheduled elapsed seconds on reaching a distance."""
        if self.strategy == SplitStrategy.EVEN:
            return self.average_pace * distance

        first_half, second_half = self._half_paces()
        if distance <= self.half_distance:
            return first_half * distance
        return first_half * self.half_distance + second_half * (distance - self.half_distance)

    def compute_splits(self, interval_miles: float = DEFAULT_INTERVAL_MILES) -> list[Split]:
        """
        Checkpoint splits every `interval_miles` up to the last whole mile.

        Returns:
            Splits with elapsed time and average pace to each checkpoint;
            empty when there is no target time or the interval is invalid
        """
        if self.target_total <= 0 or interval_miles <= 0:
            return []

        last_checkpoint = math.floor(self.total_distance)
        splits: list[Split] = []
        step = 1

        while step * interval_miles <= last_checkpoint:
            distance = step * interval_miles
            elapsed = self.elapsed_at(distance)
            splits.append(Split(
                distance=distance,
                elapsed=elapsed,
                pace=elapsed / distance,
            ))
            step += 1

        return splits
