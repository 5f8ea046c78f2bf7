"""
Simulation schemas.

Pydantic schemas for API request/response serialization.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from marathon_tracker.shared.constants import MARATHON_DISTANCE_MILES

from .state import (
    JUMP_MILES,
    JumpBackward,
    JumpForward,
    Pause,
    Play,
    Reset,
    Seek,
    SetSpeed,
    SimulationEvent,
    SimulationState,
    Toggle,
)


class SimulationEventType(str, Enum):
    """Simulation control event."""
    PLAY = "play"
    PAUSE = "pause"
    TOGGLE = "toggle"
    SEEK = "seek"
    JUMP_FORWARD = "jump_forward"
    JUMP_BACKWARD = "jump_backward"
    RESET = "reset"
    SET_SPEED = "set_speed"


class SimulationStateSchema(BaseModel):
    """Simulation state as sent by the client."""
    position: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    total_distance: float = Field(default=MARATHON_DISTANCE_MILES, ge=0, allow_inf_nan=False)
    playing: bool = False
    speed: float = Field(default=1.0, gt=0, allow_inf_nan=False)

    def to_state(self) -> SimulationState:
        return SimulationState(
            position=min(self.position, self.total_distance),
            total_distance=self.total_distance,
            playing=self.playing,
            speed=self.speed,
        )


class SimulationStateResponse(SimulationStateSchema):
    """Simulation state with derived progress."""
    progress: float = 0.0
    finished: bool = False

    @classmethod
    def from_state(cls, state: SimulationState) -> "SimulationStateResponse":
        return cls(
            position=round(state.position, 4),
            total_distance=state.total_distance,
            playing=state.playing,
            speed=state.speed,
            progress=round(state.progress, 2),
            finished=state.finished,
        )


class SimulationEventSchema(BaseModel):
    """
    Control event.

    `value` is the position for seek, the speed for set_speed and the
    miles for jumps (default 1).
    """
    type: SimulationEventType
    value: Optional[float] = Field(default=None, allow_inf_nan=False)

    @model_validator(mode="after")
    def check_value(self):
        needs_value = (SimulationEventType.SEEK, SimulationEventType.SET_SPEED)
        if self.type in needs_value and self.value is None:
            raise ValueError(f"'{self.type.value}' requires a value")
        return self

    def to_event(self) -> SimulationEvent:
        if self.type == SimulationEventType.PLAY:
            return Play()
        if self.type == SimulationEventType.PAUSE:
            return Pause()
        if self.type == SimulationEventType.TOGGLE:
            return Toggle()
        if self.type == SimulationEventType.SEEK:
            return Seek(position=self.value)
        if self.type == SimulationEventType.JUMP_FORWARD:
            return JumpForward(miles=self.value if self.value is not None else JUMP_MILES)
        if self.type == SimulationEventType.JUMP_BACKWARD:
            return JumpBackward(miles=self.value if self.value is not None else JUMP_MILES)
        if self.type == SimulationEventType.RESET:
            return Reset()
        return SetSpeed(speed=self.value)


class AdvanceRequest(BaseModel):
    """Advance the simulation by one frame."""
    state: SimulationStateSchema
    elapsed_ms: float = Field(..., allow_inf_nan=False)
    speed_multiplier: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)


class EventRequest(BaseModel):
    """Apply a control event to a simulation state."""
    state: SimulationStateSchema
    event: SimulationEventSchema
