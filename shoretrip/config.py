"""Configuration settings for the shore trip companion."""

CONFIG = {
    "tick_interval": 60,  # seconds between progress recomputations
    "gps_poll_interval": 3,  # seconds
    "compass_poll_interval": 1,  # seconds
    "nearby_threshold": 0.3,  # km - closer than this counts as arrived
    "free_gap_threshold": 30,  # minutes - longer gaps are free time, shorter ones transfers
    "log_interval": 60,  # seconds between STATE log entries
    "onboard_time": "18:30",  # all aboard
    "port_hours": (7, 19),  # first and last hour shown in the weather strip
    # Map
    "map_center": (41.8902, 12.4922),  # Colosseum
    "map_zoom": 14,
    "focus_zoom": 16,
    # Weather (Open-Meteo)
    "weather_url": "https://api.open-meteo.com/v1/forecast",
    "weather_location": (41.89, 12.49),
    "weather_timezone": "Europe/Rome",
    "weather_cache_dir": "weather_cache",
    "weather_cache_max_age": 3600,  # seconds
    "weather_timeout": 15,  # seconds
    # Local storage for user-added markers
    "markers_db": "shoretrip_markers.db",
    # Speech
    "speech_rate": 150,  # words per minute
    "guide_voice": "es",  # audio guides are written in Spanish
    "phrase_voice": "it",  # pronunciation practice
}
