"""Data classes for the shore trip companion."""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class Coordinate:
    lat: float
    lon: float

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "Coordinate":
        # Itineraries exported from the web app use "lng"
        lon = d["lon"] if "lon" in d else d["lng"]
        return cls(lat=float(d["lat"]), lon=float(lon))


# camelCase keys of exported itineraries -> dataclass fields
_ACTIVITY_KEYS = {
    "startTime": "start_time",
    "endTime": "end_time",
    "locationName": "location_name",
    "endLocationName": "end_location_name",
    "endCoords": "end_coords",
    "keyDetails": "key_details",
    "priceEUR": "price_eur",
    "googleMapsUrl": "google_maps_url",
    "contingencyNote": "contingency_note",
    "imageUrl": "image_url",
    "audioGuideText": "audio_guide_text",
}


@dataclass
class Activity:
    """One scheduled stop of the day. Times are local HH:MM, same day."""
    id: str
    title: str
    start_time: str
    end_time: str
    location_name: str
    coords: Coordinate
    description: str = ""
    completed: bool = False
    key_details: str = ""
    price_eur: float = 0
    type: str = "sightseeing"  # logistics, transport or sightseeing
    end_location_name: Optional[str] = None
    end_coords: Optional[Coordinate] = None
    notes: Optional[str] = None
    google_maps_url: Optional[str] = None
    contingency_note: Optional[str] = None
    image_url: Optional[str] = None
    audio_guide_text: Optional[str] = None

    @property
    def is_critical(self) -> bool:
        return self.notes == "CRITICAL"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "Activity":
        data = {_ACTIVITY_KEYS.get(k, k): v for k, v in d.items()}
        data["coords"] = Coordinate.from_dict(data["coords"])
        if data.get("end_coords"):
            data["end_coords"] = Coordinate.from_dict(data["end_coords"])
        return cls(**data)


@dataclass
class Waypoint:
    """A named point on the map; user-created ones live in the markers DB"""
    name: str
    lat: float
    lon: float
    id: Optional[int] = None
    is_user_created: bool = False


@dataclass
class Pronunciation:
    word: str
    phonetic: str
    simplified: str
    meaning: str


@dataclass
class GapView:
    """Idle time between the previous activity's end and the next start"""
    minutes: int
    label: str
    progress: float
    kind: str  # "free" or "transfer"


@dataclass
class ActivityView:
    """Display-ready values for one activity, recomputed on every update"""
    activity: Activity
    progress: float
    duration: str
    gap: Optional[GapView] = None
    distance_km: Optional[float] = None
    distance: Optional[str] = None
    bearing: Optional[float] = None
    arrow_rotation: Optional[float] = None
    arrived: bool = False
