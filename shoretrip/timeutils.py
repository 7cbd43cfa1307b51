"""Clock-time parsing, formatting and progress.

All itinerary times are zero-padded 24-hour ``HH:MM`` strings on the same
local day. Dates are ignored: only the hour and minute of ``now`` matter.
"""

from datetime import datetime
from typing import Optional

MINUTES_PER_DAY = 24 * 60


def parse_hhmm(text: str) -> int:
    """Minutes since midnight for an ``HH:MM`` string"""
    hours, minutes = text.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_of_day(now: Optional[datetime] = None) -> int:
    """Minutes since midnight of the given (or current) local time"""
    if now is None:
        now = datetime.now()
    return now.hour * 60 + now.minute


def format_minutes(total: int) -> str:
    """Render a minute count as ``1h 30min``, ``2h`` or ``45min``"""
    hours, minutes = divmod(total, 60)
    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}min"
    if hours > 0:
        return f"{hours}h"
    return f"{minutes}min"


def calculate_duration(start: str, end: str) -> str:
    """Scheduled length of an activity as ``1h 30m``, ``2h`` or ``45 min``.

    An end before the start is read as running past midnight.
    """
    diff = parse_hhmm(end) - parse_hhmm(start)
    if diff < 0:
        diff += MINUTES_PER_DAY
    hours, minutes = divmod(diff, 60)
    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h"
    return f"{minutes} min"


def calculate_gap(prev_end: str, next_start: str) -> int:
    """Minutes between two activities.

    Unlike calculate_duration there is no midnight wrap: an overlap or an
    out-of-order pair gives a negative gap, which callers do not display.
    """
    prev_end_h, prev_end_m = prev_end.split(":")
    next_start_h, next_start_m = next_start.split(":")
    return ((int(next_start_h) * 60 + int(next_start_m)) -
            (int(prev_end_h) * 60 + int(prev_end_m)))


def calculate_time_progress(start: str, end: str,
                            now: Optional[datetime] = None) -> float:
    """Percentage of the ``start``-``end`` window already elapsed, in [0, 100]"""
    current = minutes_of_day(now)
    start_minutes = parse_hhmm(start)
    end_minutes = parse_hhmm(end)

    if current < start_minutes:
        return 0
    if current >= end_minutes:
        return 100

    elapsed = current - start_minutes
    return min(100.0, max(0.0, elapsed / (end_minutes - start_minutes) * 100))


def format_countdown(onboard_time: str, now: Optional[datetime] = None) -> str:
    """Time left until ``onboard_time`` today, e.g. ``03h 05m 09s``"""
    if now is None:
        now = datetime.now()
    hours, minutes = onboard_time.split(":")
    target = now.replace(hour=int(hours), minute=int(minutes), second=0, microsecond=0)

    remaining = (target - now).total_seconds()
    if remaining <= 0:
        return "ALL ABOARD!"
    hr, rest = divmod(int(remaining), 3600)
    mn, sc = divmod(rest, 60)
    return f"{hr:02d}h {mn:02d}m {sc:02d}s"
