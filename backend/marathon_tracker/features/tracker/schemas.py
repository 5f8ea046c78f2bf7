"""
Tracker schemas.

A dashboard request carries a whole session snapshot; it is folded into
a TrackerState through the same events the session applies.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from marathon_tracker.features.pacing.schemas import (
    CheckpointPrediction,
    CurrentPaceSchema,
    FinishScenariosSchema,
    PaceRangeInput,
    PaceValue,
    SampleInput,
    SplitRecordSchema,
    SplitSchema,
    TimeValue,
    check_race_time,
    checkpoint_predictions_schema,
)
from marathon_tracker.features.route import GeoPath
from marathon_tracker.features.route.schemas import CoordinatesRequest, RoutePointSchema
from marathon_tracker.features.simulation.schemas import (
    SimulationStateResponse,
    SimulationStateSchema,
)
from marathon_tracker.shared.constants import SplitStrategy

from .state import (
    Dashboard,
    PaceRangeChanged,
    RouteLoaded,
    SampleRecorded,
    StrategyChanged,
    TargetTimeChanged,
    TrackerState,
    apply,
)


class DashboardRequest(CoordinatesRequest, PaceRangeInput):
    """Session snapshot; the route is a catalog route_id or drawn coordinates."""
    route_id: Optional[str] = None
    samples: List[SampleInput] = Field(default_factory=list)
    strategy: SplitStrategy = SplitStrategy.EVEN
    target_time: Optional[str] = Field(default=None, description="H:MM:SS")
    simulation: SimulationStateSchema = Field(default_factory=SimulationStateSchema)

    @field_validator("target_time")
    @classmethod
    def validate_target_time(cls, v: Optional[str]) -> Optional[str]:
        return check_race_time(v)

    def to_state(self, path: GeoPath) -> TrackerState:
        """
        Fold the snapshot into a TrackerState.

        Raises:
            ValueError: Samples with repeated distances
        """
        state = TrackerState(simulation=self.simulation.to_state())
        events = [
            RouteLoaded(path),
            PaceRangeChanged(self.fast_pace_s, self.slow_pace_s),
            StrategyChanged(self.strategy),
            TargetTimeChanged(self.target_time),
        ]
        samples = sorted((s.to_sample() for s in self.samples), key=lambda s: s.distance)
        events.extend(SampleRecorded(sample) for sample in samples)

        for event in events:
            state = apply(state, event)
        return state


class DashboardResponse(BaseModel):
    """Derived tracker view."""
    simulation: SimulationStateResponse
    total_distance: float
    location: Optional[RoutePointSchema] = None
    current: CurrentPaceSchema
    scenarios: FinishScenariosSchema
    checkpoints: List[CheckpointPrediction]
    projected_at_position: TimeValue
    splits: List[SplitSchema]
    records: List[SplitRecordSchema]
    consistency: float

    @classmethod
    def from_dashboard(cls, dashboard: Dashboard) -> "DashboardResponse":
        scenarios = dashboard.scenarios
        return cls(
            simulation=SimulationStateResponse.from_state(dashboard.simulation),
            total_distance=round(dashboard.total_distance, 4),
            location=(
                RoutePointSchema.from_point(dashboard.location)
                if dashboard.location else None
            ),
            current=CurrentPaceSchema(
                pace=PaceValue.of(dashboard.current.pace),
                trend=dashboard.current.trend,
                zone=dashboard.zone.name if dashboard.zone else None,
            ),
            scenarios=FinishScenariosSchema(
                best=TimeValue.of(scenarios.best),
                average=TimeValue.of(scenarios.average),
                worst=TimeValue.of(scenarios.worst),
                current=TimeValue.of(scenarios.current),
            ),
            checkpoints=checkpoint_predictions_schema(
                dashboard.checkpoints, dashboard.total_distance
            ),
            projected_at_position=TimeValue.of(dashboard.projected_at_position),
            splits=[SplitSchema.from_split(s) for s in dashboard.splits],
            records=[SplitRecordSchema.from_record(r) for r in dashboard.records],
            consistency=round(dashboard.consistency, 1),
        )
