"""
Formatting and parsing of race times and paces.

Times are "H:MM:SS" strings, paces are "M:SS" per mile.
"""

import math
import re
from typing import Optional

_DURATION_RE = re.compile(r"^\s*(\d+):([0-5]?\d):([0-5]?\d)\s*$")


def parse_duration(text: Optional[str]) -> Optional[int]:
    """
    Parse 'H:MM:SS' into seconds.

    Args:
        text: Time string (e.g., '3:30:00')

    Returns:
        Seconds, or None if the string is not a valid H:MM:SS time
    """
    if not text:
        return None
    match = _DURATION_RE.match(text)
    if not match:
        return None
    hours, minutes, seconds = (int(g) for g in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def duration_seconds(text: Optional[str]) -> int:
    """Lenient variant of parse_duration: malformed times count as zero."""
    return parse_duration(text) or 0


def format_duration(total_seconds: Optional[float]) -> str:
    """
    Format seconds as 'H:MM:SS'.

    Args:
        total_seconds: Elapsed time in seconds

    Returns:
        Formatted string (e.g., '3:30:00')
    """
    if total_seconds is None or not math.isfinite(total_seconds) or total_seconds < 0:
        return "0:00:00"

    total = int(total_seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    seconds = total % 60
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def format_pace(pace_seconds: Optional[float]) -> str:
    """
    Format pace as 'M:SS'.

    Args:
        pace_seconds: Pace in seconds per mile

    Returns:
        Formatted string (e.g., '8:01')
    """
    if pace_seconds is None or not math.isfinite(pace_seconds) or pace_seconds < 0:
        return "--:--"

    minutes = int(pace_seconds // 60)
    seconds = int(pace_seconds % 60)
    return f"{minutes}:{seconds:02d}"


def format_distance_miles(miles: float) -> str:
    """Format distance (e.g., '13.1 mi')."""
    return f"{miles:.1f} mi"


def format_elevation(feet: float) -> str:
    """
    Format elevation with sign.

    Returns:
        Formatted string (e.g., '+312 ft')
    """
    if feet >= 0:
        return f"+{int(feet)} ft"
    return f"{int(feet)} ft"
