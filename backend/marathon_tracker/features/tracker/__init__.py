"""
Tracker session module.

Usage:
    from marathon_tracker.features.tracker import TrackerState, apply, build_dashboard

Components:
- TrackerState: Immutable session snapshot
- apply: (state, event) -> state transitions
- build_dashboard: Position, pace, projections and splits for a state
"""

from .state import (
    TrackerState,
    TrackerEvent,
    RouteLoaded,
    RouteCleared,
    SampleRecorded,
    SampleRemoved,
    PaceRangeChanged,
    StrategyChanged,
    TargetTimeChanged,
    SimulationChanged,
    Tick,
    Dashboard,
    apply,
    build_dashboard,
)

__all__ = [
    # State
    "TrackerState",
    "apply",
    # Events
    "TrackerEvent",
    "RouteLoaded",
    "RouteCleared",
    "SampleRecorded",
    "SampleRemoved",
    "PaceRangeChanged",
    "StrategyChanged",
    "TargetTimeChanged",
    "SimulationChanged",
    "Tick",
    # Dashboard
    "Dashboard",
    "build_dashboard",
]
