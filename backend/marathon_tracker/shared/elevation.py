"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from typing import Optional, Sequence, Tuple


def calculate_elevation_changes(
    elevations: Sequence[Optional[float]]
) -> Tuple[float, float]:
    """
    Calculate total elevation gain and loss.

    Missing elevations are skipped; the delta is taken against the last
    known value.

    Args:
        elevations: List of elevation values (None where unknown)

    Returns:
        Tuple of (gain, loss) in the input unit
    """
    gain = 0.0
    loss = 0.0
    previous = None

    for elevation in elevations:
        if elevation is None:
            continue
        if previous is not None:
            diff = elevation - previous
            if diff > 0:
                gain += diff
            else:
                loss += abs(diff)
        previous = elevation

    return gain, loss


def calculate_elevation_gain(elevations: Sequence[Optional[float]]) -> int:
    """Total ascent, descents ignored, rounded to a whole unit."""
    gain, _ = calculate_elevation_changes(elevations)
    return round(gain)
