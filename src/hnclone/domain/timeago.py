"""Relative time formatting for item timestamps."""

import math
import time

MINUTE = 60
HOUR = 3600
DAY = 86400


def format_time_ago(timestamp: float, now: float | None = None) -> str:
    """Format an epoch timestamp as a coarse "N units ago" label.

    Floor semantics: exactly one hour old is "1 hours ago", exactly one day
    old is "1 days ago".

    Args:
        timestamp: Epoch seconds the item was created at
        now: Reference epoch seconds (defaults to the current time)

    Returns:
        Minutes-, hours- or days-based label
    """
    if now is None:
        now = time.time()
    diff = now - timestamp

    days = math.floor(diff / DAY)
    if days > 0:
        return f"{days} days ago"
    hours = math.floor(diff / HOUR)
    if hours > 0:
        return f"{hours} hours ago"
    minutes = math.floor(diff / MINUTE)
    return f"{minutes} minutes ago"
