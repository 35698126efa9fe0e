"""
Duration formatting for uptime reporting.
Renders whole-second durations as compact strings such as "5s", "1m30s" or "1h0m5s".
"""

import math
from datetime import timedelta
from typing import Union


def round_seconds(seconds: float) -> int:
    """Round to the nearest whole second, halves away from zero"""
    if seconds < 0:
        return -int(math.floor(-seconds + 0.5))
    return int(math.floor(seconds + 0.5))


def format_duration(duration: Union[float, timedelta]) -> str:
    """
    Format a duration rounded to the nearest second.

    Hours are never folded into days, and smaller units are always
    written once a larger unit is present:

        0      -> "0s"
        90     -> "1m30s"
        3605   -> "1h0m5s"
    """
    if isinstance(duration, timedelta):
        duration = duration.total_seconds()

    total = round_seconds(duration)
    if total == 0:
        return "0s"

    sign = "-" if total < 0 else ""
    total = abs(total)

    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"
