"""
Pacing Routes

Endpoints for pace zones, pace projection and split planning.
"""

from typing import List

from fastapi import APIRouter, Depends

from marathon_tracker.api.v1.deps import get_route_catalog, resolve_path
from marathon_tracker.features.pacing import (
    PACE_ZONES,
    PaceProjector,
    SplitPlanner,
    zone_for_pace,
)
from marathon_tracker.features.pacing.schemas import (
    CurrentPaceSchema,
    FinishScenariosSchema,
    PaceAnalysisSchema,
    PaceValue,
    PaceZoneSchema,
    ProjectionRequest,
    ProjectionResponse,
    SplitPlanRequest,
    SplitPlanResponse,
    SplitSchema,
    TimeValue,
    checkpoint_predictions_schema,
)
from marathon_tracker.features.route import RouteCatalog

router = APIRouter()


@router.get("/zones", response_model=List[PaceZoneSchema])
async def pace_zones():
    """Pace zone reference table."""
    return [PaceZoneSchema.from_zone(z) for z in PACE_ZONES]


@router.post("/projection", response_model=ProjectionResponse)
async def pace_projection(
    data: ProjectionRequest,
    catalog: RouteCatalog = Depends(get_route_catalog),
):
    """
    Current pace, finish scenarios and checkpoint predictions.

    With a route_id the projection is adjusted for the route's elevation
    and uses the route's length.
    """
    path = None
    total_distance = data.total_distance
    if data.route_id:
        path = resolve_path(catalog, data.route_id, [])
        total_distance = path.total_distance()

    projector = PaceProjector(
        [s.to_sample() for s in data.samples],
        fast_pace=data.fast_pace_s,
        slow_pace=data.slow_pace_s,
        total_distance=total_distance,
        path=path,
    )
    current = projector.current_pace()
    zone = zone_for_pace(current.pace)
    scenarios = projector.finish_scenarios()
    analysis = projector.analyze()

    return ProjectionResponse(
        current=CurrentPaceSchema(
            pace=PaceValue.of(current.pace),
            trend=current.trend,
            zone=zone.name if zone else None,
        ),
        scenarios=FinishScenariosSchema(
            best=TimeValue.of(scenarios.best),
            average=TimeValue.of(scenarios.average),
            worst=TimeValue.of(scenarios.worst),
            current=TimeValue.of(scenarios.current),
        ),
        checkpoints=checkpoint_predictions_schema(
            projector.checkpoint_predictions(current.pace), total_distance
        ),
        analysis=PaceAnalysisSchema.from_analysis(analysis) if analysis else None,
    )


@router.post("/splits", response_model=SplitPlanResponse)
async def split_plan(data: SplitPlanRequest):
    """
    Checkpoint times for a target finish and strategy.

    Without a target time, the midpoint of the pace range is used.
    """
    planner = SplitPlanner(
        target_time=data.target_time,
        total_distance=data.total_distance,
        strategy=data.strategy,
        fallback_pace=(data.fast_pace_s + data.slow_pace_s) / 2,
    )

    return SplitPlanResponse(
        strategy=planner.strategy,
        target_total=TimeValue.of(planner.target_total),
        average_pace=PaceValue.of(planner.average_pace),
        splits=[SplitSchema.from_split(s) for s in planner.compute_splits(data.interval_miles)],
    )
