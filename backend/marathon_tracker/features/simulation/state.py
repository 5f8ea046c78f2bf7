"""
Runner simulation state.

The refresh loop is expressed as a pure `advance` over an immutable
SimulationState, so playback can be tested without a real clock. Control
input (play, pause, seek, speed) goes through `reduce`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Union

from marathon_tracker.shared.constants import MARATHON_DISTANCE_MILES

# Simulated miles per real second at 1x speed
MILES_PER_SECOND = 0.6

JUMP_MILES = 1.0


@dataclass(frozen=True)
class SimulationState:
    """Simulated runner position along a route."""

    position: float = 0.0  # miles from the start
    total_distance: float = MARATHON_DISTANCE_MILES
    playing: bool = False
    speed: float = 1.0  # multiplier

    @property
    def finished(self) -> bool:
        return self.position >= self.total_distance

    @property
    def progress(self) -> float:
        """Completion percentage."""
        if self.total_distance <= 0:
            return 0.0
        return min(100.0, self.position / self.total_distance * 100)


def _clamp(position: float, total_distance: float) -> float:
    return max(0.0, min(total_distance, position))


def advance(
    state: SimulationState,
    elapsed_ms: float,
    speed_multiplier: Optional[float] = None,
) -> SimulationState:
    """
    Move the runner forward by one frame.

    Args:
        state: Current state
        elapsed_ms: Real time since the previous frame
        speed_multiplier: Playback speed, defaults to state.speed

    Returns:
        New state; playback stops on reaching the total distance. Paused
        states and non-positive or non-finite deltas come back unchanged.
    """
    if not state.playing or not math.isfinite(elapsed_ms) or elapsed_ms <= 0:
        return state

    multiplier = state.speed if speed_multiplier is None else speed_multiplier
    if multiplier <= 0:
        return state

    position = state.position + MILES_PER_SECOND * (elapsed_ms / 1000) * multiplier
    if position >= state.total_distance:
        return replace(state, position=state.total_distance, playing=False)
    return replace(state, position=position)


# =============================================================================
# Control events
# =============================================================================

@dataclass(frozen=True)
class Play:
    pass


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Toggle:
    pass


@dataclass(frozen=True)
class Seek:
    position: float


@dataclass(frozen=True)
class JumpForward:
    miles: float = JUMP_MILES


@dataclass(frozen=True)
class JumpBackward:
    miles: float = JUMP_MILES


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class SetSpeed:
    speed: float


SimulationEvent = Union[Play, Pause, Toggle, Seek, JumpForward, JumpBackward, Reset, SetSpeed]


def _play(state: SimulationState) -> SimulationState:
    # Playing from the finish starts over
    if state.finished:
        return replace(state, position=0.0, playing=state.total_distance > 0)
    return replace(state, playing=True)


def reduce(state: SimulationState, event: SimulationEvent) -> SimulationState:
    """
    Apply a control event.

    Raises:
        ValueError: Non-positive speed, non-finite seek target, or an
            unknown event
    """
    if isinstance(event, Play):
        return _play(state)

    if isinstance(event, Pause):
        return replace(state, playing=False)

    if isinstance(event, Toggle):
        return replace(state, playing=False) if state.playing else _play(state)

    if isinstance(event, Seek):
        if not math.isfinite(event.position):
            raise ValueError("Seek position must be a finite number")
        return replace(state, position=_clamp(event.position, state.total_distance))

    if isinstance(event, JumpForward):
        return replace(state, position=_clamp(state.position + event.miles, state.total_distance))

    if isinstance(event, JumpBackward):
        return replace(state, position=_clamp(state.position - event.miles, state.total_distance))

    if isinstance(event, Reset):
        return replace(state, position=0.0, playing=False)

    if isinstance(event, SetSpeed):
        if not math.isfinite(event.speed) or event.speed <= 0:
            raise ValueError(f"Speed must be positive, got {event.speed}")
        return replace(state, speed=event.speed)

    raise ValueError(f"Unknown simulation event: {event!r}")


def with_total_distance(state: SimulationState, total_distance: float) -> SimulationState:
    """State for a new route length; position is clamped and a finished run stops."""
    total = max(0.0, total_distance)
    position = _clamp(state.position, total)
    playing = state.playing and position < total
    return replace(state, total_distance=total, position=position, playing=playing)
