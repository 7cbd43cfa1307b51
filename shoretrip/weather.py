"""Port-day forecast from the Open-Meteo API with disk caching."""

import hashlib
import json
import os
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import requests

from .config import CONFIG
from .logger import Logger


@dataclass
class HourlyForecast:
    hour: int
    temperature: float
    code: int

    @property
    def label(self) -> str:
        return weather_label(self.code)


@dataclass
class DailyForecast:
    low: float
    high: float
    code: int

    @property
    def label(self) -> str:
        return weather_label(self.code)


def weather_label(code: int) -> str:
    """Map a WMO weather code to a coarse label"""
    if code <= 1:
        return "sunny"
    if code <= 3:
        return "cloudy"
    if code <= 67:
        return "rain"
    if code <= 99:
        return "storm"
    return "sunny"


def hourly_forecast(data: dict, first_hour: Optional[int] = None,
                    last_hour: Optional[int] = None) -> list[HourlyForecast]:
    """Hourly entries within port hours (inclusive)"""
    default_first, default_last = CONFIG["port_hours"]
    first_hour = default_first if first_hour is None else first_hour
    last_hour = default_last if last_hour is None else last_hour

    hourly = data.get("hourly")
    if not hourly:
        return []

    forecast = []
    for i, stamp in enumerate(hourly["time"]):
        hour = datetime.fromisoformat(stamp).hour
        if first_hour <= hour <= last_hour:
            forecast.append(HourlyForecast(
                hour=hour,
                temperature=hourly["temperature_2m"][i],
                code=hourly["weathercode"][i],
            ))
    return forecast


def daily_forecast(data: dict) -> Optional[DailyForecast]:
    """Today's low, high and overall code; first day of the daily series"""
    daily = data.get("daily")
    if not daily or not daily.get("time"):
        return None
    return DailyForecast(
        low=daily["temperature_2m_min"][0],
        high=daily["temperature_2m_max"][0],
        code=daily["weathercode"][0],
    )


class WeatherFetcher:
    """Fetch forecasts from Open-Meteo"""

    CACHE_DIR = CONFIG["weather_cache_dir"]
    CACHE_MAX_AGE = CONFIG["weather_cache_max_age"]

    @classmethod
    def _cache_path(cls, lat: float, lon: float) -> str:
        """Generate a cache file path for the given location."""
        key = f"{lat:.2f},{lon:.2f}"
        h = hashlib.md5(key.encode()).hexdigest()[:12]
        return os.path.join(cls.CACHE_DIR, f"weather_{h}.json")

    @classmethod
    def _read_cache(cls, lat: float, lon: float) -> Optional[dict]:
        path = cls._cache_path(lat, lon)
        try:
            age = time.time() - os.path.getmtime(path)
            if age > cls.CACHE_MAX_AGE:
                return None
            with open(path) as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError):
            return None

    @classmethod
    def fetch(cls, lat: Optional[float] = None, lon: Optional[float] = None,
              logger: Optional[Logger] = None) -> dict:
        """Fetch the hourly and daily forecast; empty dict on failure."""
        if lat is None or lon is None:
            lat, lon = CONFIG["weather_location"]

        cached = cls._read_cache(lat, lon)
        if cached:
            return cached

        params = {
            "latitude": lat,
            "longitude": lon,
            "hourly": "temperature_2m,weathercode",
            "daily": "weathercode,temperature_2m_max,temperature_2m_min",
            "timezone": CONFIG["weather_timezone"],
        }

        try:
            response = requests.get(CONFIG["weather_url"], params=params,
                                    timeout=CONFIG["weather_timeout"])
            response.raise_for_status()
            data = response.json()

            if data.get("hourly"):
                os.makedirs(cls.CACHE_DIR, exist_ok=True)
                with open(cls._cache_path(lat, lon), "w") as f:
                    json.dump(data, f)

            return data
        except requests.RequestException as e:
            if logger:
                logger.log("Weather fetch failed", {"error": str(e)})
            else:
                print(f"Weather fetch error: {e}")
            return {}
