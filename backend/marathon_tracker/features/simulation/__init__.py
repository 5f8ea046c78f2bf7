"""
Runner simulation module.

Usage:
    from marathon_tracker.features.simulation import SimulationState, advance, reduce
    from marathon_tracker.features.simulation import simulate

Components:
- SimulationState: Immutable position/playback state
- advance: Pure frame step (0.6 mi/s at 1x)
- reduce: Control events (play, pause, seek, jump, speed)
- simulate: Async refresh loop over a monotonic clock
"""

from .state import (
    MILES_PER_SECOND,
    JUMP_MILES,
    SimulationState,
    SimulationEvent,
    Play,
    Pause,
    Toggle,
    Seek,
    JumpForward,
    JumpBackward,
    Reset,
    SetSpeed,
    advance,
    reduce,
    with_total_distance,
)
from .runner import simulate, DEFAULT_FRAME_INTERVAL_S

__all__ = [
    # Constants
    "MILES_PER_SECOND",
    "JUMP_MILES",
    "DEFAULT_FRAME_INTERVAL_S",
    # State
    "SimulationState",
    "advance",
    "reduce",
    "with_total_distance",
    # Events
    "SimulationEvent",
    "Play",
    "Pause",
    "Toggle",
    "Seek",
    "JumpForward",
    "JumpBackward",
    "Reset",
    "SetSpeed",
    # Loop
    "simulate",
]
