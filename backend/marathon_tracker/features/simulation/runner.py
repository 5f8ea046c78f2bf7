"""
Simulation refresh loop.

Drives `advance` from a monotonic clock at a fixed frame interval. The
clock and sleep functions are injectable for tests.
"""

import asyncio
import logging
import math
import time
from dataclasses import replace
from typing import AsyncIterator, Awaitable, Callable

from .state import SimulationState, advance

logger = logging.getLogger(__name__)

DEFAULT_FRAME_INTERVAL_S = 0.1


async def simulate(
    state: SimulationState,
    frame_interval: float = DEFAULT_FRAME_INTERVAL_S,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> AsyncIterator[SimulationState]:
    """
    Play a simulation to the finish, yielding one state per frame.

    Each frame advances by the real time measured since the previous
    frame, so slow frames do not slow the runner down. The first state
    yielded is the starting state; the last is the runner at the total
    distance with playback stopped.

    Args:
        state: Starting state (played regardless of its playing flag)
        frame_interval: Seconds between frames
        clock: Monotonic clock in seconds
        sleep: Awaitable sleep in seconds
    """
    if frame_interval <= 0:
        raise ValueError("frame_interval must be positive")
    if not math.isfinite(state.speed) or state.speed <= 0:
        raise ValueError("Speed must be positive")

    state = replace(state, playing=state.position < state.total_distance)
    yield state

    last = clock()
    frames = 0
    while state.playing:
        await sleep(frame_interval)
        now = clock()
        state = advance(state, (now - last) * 1000)
        last = now
        frames += 1
        yield state

    logger.debug(f"Simulation finished at {state.position:.2f} mi after {frames} frames")
