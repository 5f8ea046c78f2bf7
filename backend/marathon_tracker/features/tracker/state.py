"""
Tracker session state.

One immutable TrackerState holds everything the tracking screen shows:
the route, recorded samples, target pace range, split strategy, target
time and the runner simulation. `apply` folds events into new states;
`build_dashboard` derives the projections shown for a state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from marathon_tracker.features.pacing import (
    DistanceTimeSample,
    FinishScenarios,
    PaceProjector,
    PaceReading,
    PaceZone,
    Split,
    SplitPlanner,
    SplitRecord,
    build_split_records,
    zone_for_pace,
)
from marathon_tracker.features.route import GeoPath, RoutePoint
from marathon_tracker.features.simulation import (
    SimulationEvent,
    SimulationState,
    advance,
    reduce,
    with_total_distance,
)
from marathon_tracker.shared.constants import MARATHON_DISTANCE_MILES, SplitStrategy
from marathon_tracker.shared.formatters import parse_duration

DEFAULT_FAST_PACE_S = 7 * 60
DEFAULT_SLOW_PACE_S = 8 * 60 + 10

# Samples closer than this are the same distance
SAMPLE_DISTANCE_TOLERANCE = 1e-6


@dataclass(frozen=True)
class TrackerState:
    """Snapshot of a tracking session."""

    path: GeoPath = field(default_factory=GeoPath.empty)
    samples: tuple[DistanceTimeSample, ...] = ()
    fast_pace: float = DEFAULT_FAST_PACE_S
    slow_pace: float = DEFAULT_SLOW_PACE_S
    strategy: SplitStrategy = SplitStrategy.EVEN
    target_time: Optional[str] = None
    simulation: SimulationState = field(default_factory=SimulationState)

    @property
    def total_distance(self) -> float:
        """Route length, or the marathon distance without a route."""
        if self.path.is_empty:
            return MARATHON_DISTANCE_MILES
        return self.path.total_distance()


# =============================================================================
# Events
# =============================================================================

@dataclass(frozen=True)
class RouteLoaded:
    path: GeoPath


@dataclass(frozen=True)
class RouteCleared:
    pass


@dataclass(frozen=True)
class SampleRecorded:
    sample: DistanceTimeSample


@dataclass(frozen=True)
class SampleRemoved:
    distance: float


@dataclass(frozen=True)
class PaceRangeChanged:
    fast_pace: float
    slow_pace: float


@dataclass(frozen=True)
class StrategyChanged:
    strategy: SplitStrategy


@dataclass(frozen=True)
class TargetTimeChanged:
    target_time: Optional[str]


@dataclass(frozen=True)
class SimulationChanged:
    event: SimulationEvent


@dataclass(frozen=True)
class Tick:
    elapsed_ms: float


TrackerEvent = Union[
    RouteLoaded,
    RouteCleared,
    SampleRecorded,
    SampleRemoved,
    PaceRangeChanged,
    StrategyChanged,
    TargetTimeChanged,
    SimulationChanged,
    Tick,
]


def _with_path(state: TrackerState, path: GeoPath) -> TrackerState:
    new_state = replace(state, path=path)
    simulation = with_total_distance(state.simulation, new_state.total_distance)
    return replace(new_state, simulation=simulation)


def _record_sample(state: TrackerState, sample: DistanceTimeSample) -> TrackerState:
    if not math.isfinite(sample.distance) or sample.distance < 0:
        raise ValueError(f"Invalid sample distance: {sample.distance}")
    if not math.isfinite(sample.elapsed) or sample.elapsed < 0:
        raise ValueError(f"Invalid sample time: {sample.elapsed}")
    if state.samples and sample.distance <= state.samples[-1].distance:
        raise ValueError(
            f"Sample at {sample.distance:.2f} mi must be beyond the last "
            f"recorded distance ({state.samples[-1].distance:.2f} mi)"
        )
    return replace(state, samples=state.samples + (sample,))


def apply(state: TrackerState, event: TrackerEvent) -> TrackerState:
    """
    Apply an event to a tracker state.

    Returns:
        New state; the input state is never modified

    Raises:
        ValueError: Event rejected (sample not beyond the last one,
            invalid pace range, malformed target time, unknown event)
    """
    if isinstance(event, RouteLoaded):
        return _with_path(state, event.path)

    if isinstance(event, RouteCleared):
        return _with_path(state, GeoPath.empty())

    if isinstance(event, SampleRecorded):
        return _record_sample(state, event.sample)

    if isinstance(event, SampleRemoved):
        samples = tuple(
            s for s in state.samples
            if abs(s.distance - event.distance) > SAMPLE_DISTANCE_TOLERANCE
        )
        return replace(state, samples=samples)

    if isinstance(event, PaceRangeChanged):
        if event.fast_pace <= 0 or event.slow_pace <= 0:
            raise ValueError("Paces must be positive")
        if event.fast_pace > event.slow_pace:
            raise ValueError("Fast pace must not be slower than slow pace")
        return replace(state, fast_pace=event.fast_pace, slow_pace=event.slow_pace)

    if isinstance(event, StrategyChanged):
        return replace(state, strategy=SplitStrategy(event.strategy))

    if isinstance(event, TargetTimeChanged):
        target = event.target_time or None
        if target is not None and parse_duration(target) is None:
            raise ValueError(f"Invalid target time '{target}', expected H:MM:SS")
        return replace(state, target_time=target)

    if isinstance(event, SimulationChanged):
        return replace(state, simulation=reduce(state.simulation, event.event))

    if isinstance(event, Tick):
        return replace(state, simulation=advance(state.simulation, event.elapsed_ms))

    raise ValueError(f"Unknown tracker event: {event!r}")


# =============================================================================
# Dashboard
# =============================================================================

@dataclass(frozen=True)
class Dashboard:
    """Everything derived from a tracker state for display."""

    simulation: SimulationState
    total_distance: float
    location: Optional[RoutePoint]
    current: PaceReading
    zone: Optional[PaceZone]
    scenarios: FinishScenarios
    checkpoints: list[tuple[float, float]]
    projected_at_position: float
    splits: list[Split]
    records: list[SplitRecord]
    consistency: float


def _fallback_pace(state: TrackerState, projector: PaceProjector) -> float:
    """Average pace so far, or the target midpoint without samples."""
    if state.samples:
        last = state.samples[-1]
        if last.distance > 0:
            return last.elapsed / last.distance
    return projector.target_midpoint


def build_dashboard(state: TrackerState) -> Dashboard:
    """Combine position, pace, projections and splits for a state."""
    total = state.total_distance
    path = None if state.path.is_empty else state.path

    projector = PaceProjector(
        state.samples,
        fast_pace=state.fast_pace,
        slow_pace=state.slow_pace,
        total_distance=total,
        path=path,
    )
    current = projector.current_pace()

    planner = SplitPlanner(
        target_time=state.target_time,
        total_distance=total,
        strategy=state.strategy,
        fallback_pace=_fallback_pace(state, projector),
    )

    records = build_split_records(state.samples)
    position = state.simulation.position

    return Dashboard(
        simulation=state.simulation,
        total_distance=total,
        location=state.path.point_at_distance(position),
        current=current,
        zone=zone_for_pace(current.pace),
        scenarios=projector.finish_scenarios(),
        checkpoints=projector.checkpoint_predictions(current.pace),
        projected_at_position=projector.projected_finish(current.pace, position),
        splits=planner.compute_splits(),
        records=records,
        consistency=projector.split_consistency([r.pace for r in records if r.pace > 0]),
    )
