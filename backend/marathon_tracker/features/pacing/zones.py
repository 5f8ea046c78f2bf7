"""Static pace zone reference data."""

from typing import Optional

from .models import PaceZone


PACE_ZONES: tuple[PaceZone, ...] = (
    PaceZone(
        name="Easy",
        min_pace=8 * 60 + 30,
        max_pace=9 * 60 + 30,
        description="Comfortable, conversational pace",
    ),
    PaceZone(
        name="Target",
        min_pace=7 * 60,
        max_pace=8 * 60 + 10,
        description="Goal marathon pace",
    ),
    PaceZone(
        name="Aggressive",
        min_pace=6 * 60 + 30,
        max_pace=7 * 60,
        description="Fast, challenging pace",
    ),
    PaceZone(
        name="Elite",
        min_pace=5 * 60,
        max_pace=6 * 60 + 30,
        description="Professional level pace",
    ),
)


def zone_for_pace(pace: float) -> Optional[PaceZone]:
    """
    Find the zone a pace falls into.

    Zones touch at their edges (7:00, 6:30); the slower zone wins there.
    Paces between 8:10 and 8:30 or outside all zones return None.
    """
    return next((z for z in PACE_ZONES if z.contains(pace)), None)
