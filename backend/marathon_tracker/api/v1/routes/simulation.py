"""
Simulation Routes

Stateless simulation steps; the client holds the state between calls.
"""

import logging

from fastapi import APIRouter, HTTPException

from marathon_tracker.features.simulation import advance, reduce
from marathon_tracker.features.simulation.schemas import (
    AdvanceRequest,
    EventRequest,
    SimulationStateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/advance", response_model=SimulationStateResponse)
async def advance_simulation(data: AdvanceRequest):
    """Advance by one frame of elapsed_ms."""
    state = advance(data.state.to_state(), data.elapsed_ms, data.speed_multiplier)
    return SimulationStateResponse.from_state(state)


@router.post("/event", response_model=SimulationStateResponse)
async def simulation_event(data: EventRequest):
    """Apply a control event (play, pause, seek, jump, speed)."""
    try:
        state = reduce(data.state.to_state(), data.event.to_event())
    except ValueError as e:
        logger.warning(f"Simulation event rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return SimulationStateResponse.from_state(state)
