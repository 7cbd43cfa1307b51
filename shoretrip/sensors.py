"""Position and orientation sources, and the cells that hold their latest reading."""

import json
import subprocess
from typing import Generic, Optional, TypeVar

from .config import CONFIG
from .models import Coordinate

T = TypeVar("T")


class LatestValue(Generic[T]):
    """Single-writer, single-reader cell; readers always see the last write"""

    def __init__(self, value: Optional[T] = None):
        self.value = value

    def set(self, value: T) -> bool:
        """Store a reading; returns True if it differs from the previous one"""
        changed = value != self.value
        self.value = value
        return changed

    def get(self) -> Optional[T]:
        return self.value


class GPS:
    """GPS access via Termux API"""

    def __init__(self):
        self.accuracy: Optional[float] = None
        self.consecutive_failures = 0

    def get_location(self, timeout: int = 30) -> Optional[Coordinate]:
        """Get current location using termux-location"""
        try:
            result = subprocess.run(
                ["termux-location", "-p", "gps", "-r", "once"],
                capture_output=True,
                text=True,
                timeout=timeout
            )

            if result.returncode != 0 or not result.stdout.strip():
                self.consecutive_failures += 1
                return None

            data = json.loads(result.stdout)
            location = Coordinate(lat=data["latitude"], lon=data["longitude"])
            self.accuracy = data.get("accuracy")
            self.consecutive_failures = 0
            return location

        except subprocess.TimeoutExpired:
            self.consecutive_failures += 1
            return None
        except (json.JSONDecodeError, KeyError):
            self.consecutive_failures += 1
            return None
        except FileNotFoundError:
            self.consecutive_failures += 1
            return None

    def get_status(self) -> str:
        """Get GPS status string"""
        if self.consecutive_failures == 0:
            acc = f", accuracy {self.accuracy:.0f}m" if self.accuracy else ""
            return f"GPS OK{acc}"
        else:
            return f"GPS: {self.consecutive_failures} consecutive failures"


class Compass:
    """Device heading via termux-sensor.

    Reads one sample of the orientation sensor; the first value is the
    azimuth in degrees clockwise from north.
    """

    SENSOR = "orientation"

    def __init__(self):
        self.consecutive_failures = 0

    def get_heading(self, timeout: int = 10) -> Optional[float]:
        try:
            result = subprocess.run(
                ["termux-sensor", "-s", self.SENSOR, "-n", "1"],
                capture_output=True,
                text=True,
                timeout=timeout
            )

            if result.returncode != 0 or not result.stdout.strip():
                self.consecutive_failures += 1
                return None

            data = json.loads(result.stdout)
            # {"<sensor name>": {"values": [azimuth, pitch, roll]}}
            reading = next(iter(data.values()))
            heading = float(reading["values"][0]) % 360
            self.consecutive_failures = 0
            return heading

        except subprocess.TimeoutExpired:
            self.consecutive_failures += 1
            return None
        except (json.JSONDecodeError, KeyError, IndexError, StopIteration, TypeError, ValueError):
            self.consecutive_failures += 1
            return None
        except FileNotFoundError:
            self.consecutive_failures += 1
            return None

    def get_status(self) -> str:
        if self.consecutive_failures == 0:
            return "Compass OK"
        return f"Compass: {self.consecutive_failures} consecutive failures"


class FixedPosition:
    """Position source pinned to a coordinate (for testing without GPS)"""

    def __init__(self, lat: float, lon: float):
        self.location = Coordinate(lat=lat, lon=lon)

    def get_location(self, timeout: int = 30) -> Optional[Coordinate]:
        return self.location

    def get_status(self) -> str:
        return f"Fixed {self.location.lat:.5f}, {self.location.lon:.5f}"


class FixedHeading:
    """Orientation source pinned to a heading"""

    def __init__(self, heading: float):
        self.heading = heading % 360

    def get_heading(self, timeout: int = 10) -> Optional[float]:
        return self.heading

    def get_status(self) -> str:
        return f"Fixed heading {self.heading:.0f}"


class GPSPlayback:
    """Plays back a recorded trace, as both position and orientation source.

    Trace format: {"trace": [{"elapsed": s, "location": {"lat", "lon"} | null,
    "heading": deg | null}, ...]}
    """

    def __init__(self, playback_path: str, speed: float = 1.0):
        self.playback_path = playback_path
        self.speed = speed
        self.trace: list[dict] = []
        self.index = 0
        self.last_heading: Optional[float] = None
        self.consecutive_failures = 0

        with open(playback_path) as f:
            data = json.load(f)
            self.trace = data["trace"]
        print(f"Loaded GPS trace from {playback_path} ({len(self.trace)} entries)")

    def get_location(self, timeout: int = 30) -> Optional[Coordinate]:
        """Get next location from trace sequentially"""
        if self.index >= len(self.trace):
            return None

        entry = self.trace[self.index]
        self.index += 1
        if entry.get("heading") is not None:
            self.last_heading = float(entry["heading"]) % 360

        if entry.get("location"):
            self.consecutive_failures = 0
            return Coordinate.from_dict(entry["location"])
        else:
            self.consecutive_failures += 1
            return None

    def get_heading(self, timeout: int = 10) -> Optional[float]:
        """Heading of the most recently played entry"""
        return self.last_heading

    def get_poll_interval(self) -> float:
        """Get the interval to wait between polls based on trace timing and speed"""
        if self.index <= 0 or self.index >= len(self.trace):
            return CONFIG["gps_poll_interval"] / self.speed

        prev_elapsed = self.trace[self.index - 1].get("elapsed", 0)
        curr_elapsed = self.trace[self.index].get("elapsed", 0)
        delta = curr_elapsed - prev_elapsed

        interval = delta / self.speed
        return max(0.1, min(interval, 5.0))

    def is_finished(self) -> bool:
        """Check if playback is complete"""
        return self.index >= len(self.trace)

    def get_status(self) -> str:
        progress = f"{self.index}/{len(self.trace)}"
        if self.consecutive_failures == 0:
            return f"Playback OK ({progress})"
        else:
            return f"Playback: {self.consecutive_failures} failures ({progress})"
