"""Shore trip companion - itinerary progress, map, budget and guide for a cruise port day."""

from .config import CONFIG
from .models import Coordinate, Activity, Waypoint, Pronunciation, GapView, ActivityView
from .logger import Logger
from .timeutils import (
    parse_hhmm,
    format_minutes,
    calculate_duration,
    calculate_gap,
    calculate_time_progress,
    format_countdown,
)
from .geo import (
    calculate_distance,
    calculate_bearing,
    format_distance,
    bearing_to_compass,
    track_length_km,
)
from .engine import arrow_rotation, is_nearby, build_activity_views
from .sensors import LatestValue, GPS, Compass, FixedPosition, FixedHeading, GPSPlayback
from .ticker import PeriodicTask, watch_position, listen_orientation
from .markers import MarkerDB
from .weather import WeatherFetcher, DailyForecast, daily_forecast, hourly_forecast, weather_label
from .audio import Audio
from .app import Companion
from .__main__ import main

__all__ = [
    "CONFIG",
    "Coordinate",
    "Activity",
    "Waypoint",
    "Pronunciation",
    "GapView",
    "ActivityView",
    "Logger",
    "parse_hhmm",
    "format_minutes",
    "calculate_duration",
    "calculate_gap",
    "calculate_time_progress",
    "format_countdown",
    "calculate_distance",
    "calculate_bearing",
    "format_distance",
    "bearing_to_compass",
    "track_length_km",
    "arrow_rotation",
    "is_nearby",
    "build_activity_views",
    "LatestValue",
    "GPS",
    "Compass",
    "FixedPosition",
    "FixedHeading",
    "GPSPlayback",
    "PeriodicTask",
    "watch_position",
    "listen_orientation",
    "MarkerDB",
    "WeatherFetcher",
    "DailyForecast",
    "daily_forecast",
    "hourly_forecast",
    "weather_label",
    "Audio",
    "Companion",
    "main",
]
