"""Fixed-point time formatting and pace-per-500m arithmetic.

All times are tenths of a second. Pace is kept as an exact ``Fraction``
until it is formatted, so displayed values never pick up float drift.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Union

from row_report.exceptions import UndefinedPaceError

PACE_DISTANCE = 500  # pace reference distance (meters)
PACE_PLACEHOLDER = "--:--.-"

Tenths = Union[int, Fraction]


def format_time(value: Tenths) -> str:
    """Format a count of tenths of a second for display.

    Args:
        value: Non-negative elapsed time in tenths. Fractional input (a pace)
            is truncated to whole tenths, never rounded.

    Returns:
        ``MM:SS.T`` below one hour, ``HH:MM:SS.T`` from one hour up.

    Raises:
        ValueError: If *value* is negative.
    """
    if value < 0:
        raise ValueError(f"Time must be non-negative, got {value}")

    tenths_total = math.floor(value)
    total_seconds = tenths_total // 10
    tenths = tenths_total % 10
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{tenths}"
    return f"{minutes:02d}:{seconds:02d}.{tenths}"


def calculate_pace(distance: int, time: int) -> Fraction:
    """Time per 500 m, in tenths of a second.

    ``(time / distance) * 500`` computed exactly. The result is not rounded;
    pass it to :func:`format_time`, which truncates to tenths.

    Args:
        distance: Segment distance in meters.
        time: Segment time in tenths of a second.

    Raises:
        UndefinedPaceError: If *distance* is zero or negative.
    """
    if distance <= 0:
        raise UndefinedPaceError(distance, time)
    return Fraction(time * PACE_DISTANCE, distance)


def format_pace(distance: int, time: int) -> str:
    """Formatted pace, or :data:`PACE_PLACEHOLDER` when there is no distance."""
    try:
        return format_time(calculate_pace(distance, time))
    except UndefinedPaceError:
        return PACE_PLACEHOLDER
