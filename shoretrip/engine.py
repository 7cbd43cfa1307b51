"""Itinerary progress engine.

Pure composition of the time and geo helpers: given the clock, the latest
user coordinate and the latest device heading, derive what the timeline
shows for every activity. Nothing here keeps state between calls.
"""

from datetime import datetime
from typing import Optional, Sequence

from .config import CONFIG
from .geo import calculate_distance, calculate_bearing, format_distance
from .models import Activity, ActivityView, Coordinate, GapView
from .timeutils import (
    calculate_duration,
    calculate_gap,
    calculate_time_progress,
    format_minutes,
)


def arrow_rotation(bearing: float, heading: Optional[float]) -> float:
    """Degrees to rotate an up-pointing arrow so it points at the target.

    A missing heading counts as 0, so without a compass the arrow shows the
    raw bearing from north.
    """
    return bearing - (heading or 0)


def is_nearby(distance_km: float) -> bool:
    """Close enough to show the arrived state instead of an arrow"""
    return distance_km < CONFIG["nearby_threshold"]


def gap_kind(minutes: int) -> str:
    """Label a gap as free time or as a transfer between stops"""
    return "free" if minutes > CONFIG["free_gap_threshold"] else "transfer"


def build_gap(prev: Activity, act: Activity,
              now: Optional[datetime] = None) -> Optional[GapView]:
    """Gap block between two consecutive activities, or None when not positive"""
    minutes = calculate_gap(prev.end_time, act.start_time)
    if minutes <= 0:
        return None
    return GapView(
        minutes=minutes,
        label=format_minutes(minutes),
        progress=calculate_time_progress(prev.end_time, act.start_time, now),
        kind=gap_kind(minutes),
    )


def build_activity_view(act: Activity, prev: Optional[Activity] = None,
                        now: Optional[datetime] = None,
                        user_location: Optional[Coordinate] = None,
                        heading: Optional[float] = None) -> ActivityView:
    view = ActivityView(
        activity=act,
        progress=calculate_time_progress(act.start_time, act.end_time, now),
        duration=calculate_duration(act.start_time, act.end_time),
        gap=build_gap(prev, act, now) if prev else None,
    )
    if user_location is None:
        return view

    distance = calculate_distance(
        user_location.lat, user_location.lon, act.coords.lat, act.coords.lon
    )
    bearing = calculate_bearing(
        user_location.lat, user_location.lon, act.coords.lat, act.coords.lon
    )
    view.distance_km = distance
    view.distance = format_distance(distance)
    view.bearing = bearing
    if is_nearby(distance):
        view.arrived = True
    else:
        view.arrow_rotation = arrow_rotation(bearing, heading)
    return view


def build_activity_views(itinerary: Sequence[Activity],
                         now: Optional[datetime] = None,
                         user_location: Optional[Coordinate] = None,
                         heading: Optional[float] = None) -> list[ActivityView]:
    """One view per activity, in itinerary order"""
    if now is None:
        now = datetime.now()
    views = []
    prev = None
    for act in itinerary:
        views.append(build_activity_view(act, prev, now, user_location, heading))
        prev = act
    return views
