"""Solar irradiance model.

A single sine lobe between 06:00 and 18:00 wall-clock time, peaking at
solar noon. Night minutes produce nothing.
"""

from datetime import datetime

import numpy as np

MINUTES_PER_DAY = 1440
SUNRISE_MINUTE = 360
SUNSET_MINUTE = 1080


def minute_of_day(start_time: datetime, minute: int) -> int:
    """Wall-clock minute of day reached ``minute`` minutes after ``start_time``."""
    start_minutes = start_time.hour * 60 + start_time.minute
    return (start_minutes + minute) % MINUTES_PER_DAY


def solar_efficiency(start_time: datetime, minute: int) -> float:
    """Efficiency multiplier (0-1) applied to every solar asset.

    Args:
        start_time: Wall-clock time of the blackout.
        minute: Minutes elapsed since the blackout.

    Returns:
        0 at night, ``sin(pi * (d - 360) / 720)`` during the day.
    """
    day_minute = minute_of_day(start_time, minute)
    if day_minute < SUNRISE_MINUTE or day_minute > SUNSET_MINUTE:
        return 0.0

    progress = (day_minute - SUNRISE_MINUTE) / (SUNSET_MINUTE - SUNRISE_MINUTE)
    return float(np.sin(np.pi * progress))
