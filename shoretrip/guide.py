"""Travel guide: port-call summary, phrases, SOS message and weather strip."""

from typing import Optional, Sequence
from urllib.parse import quote

from .audio import Audio
from .config import CONFIG
from .geo import track_length_km
from .models import Activity, Coordinate, Pronunciation
from .timeutils import calculate_duration, format_minutes, parse_hhmm
from .weather import DailyForecast, HourlyForecast


def minutes_by_type(itinerary: Sequence[Activity], kind: str) -> int:
    """Scheduled minutes spent in activities of one type"""
    total = 0
    for act in itinerary:
        if act.type == kind:
            total += parse_hhmm(act.end_time) - parse_hhmm(act.start_time)
    return total


def port_summary(itinerary: Sequence[Activity], track: Sequence[tuple[float, float]],
                 arrival: str, onboard: str) -> dict:
    """Headline figures for the day"""
    return {
        "time_in_port": calculate_duration(arrival, onboard),
        "port_window": f"{arrival} - {onboard}",
        "transfers": format_minutes(minutes_by_type(itinerary, "transport")),
        "sightseeing": format_minutes(minutes_by_type(itinerary, "sightseeing")),
        "walking": f"~{track_length_km(track):.1f} km",
    }


def sos_message(location: Optional[Coordinate]) -> str:
    if location:
        where = f"https://maps.google.com/?q={location.lat},{location.lon}"
    else:
        where = "GPS not available"
    return f"SOS! I need help in Rome. Location: {where}"


def sos_url(location: Optional[Coordinate]) -> str:
    """WhatsApp share link carrying the SOS message"""
    return f"https://wa.me/?text={quote(sos_message(location), safe='')}"


def find_phrase(phrases: Sequence[Pronunciation], key: str) -> Optional[Pronunciation]:
    """Look up a phrase by its 1-based number in the guide or by the word itself"""
    key = key.strip()
    if key.isdigit():
        index = int(key) - 1
        return phrases[index] if 0 <= index < len(phrases) else None
    for item in phrases:
        if item.word.lower() == key.lower():
            return item
    return None


def speak_phrase(item: Pronunciation):
    Audio.speak(item.word, CONFIG["phrase_voice"])


def guide_lines(summary: dict, phrases: Sequence[Pronunciation],
                forecast: Sequence[HourlyForecast],
                location: Optional[Coordinate] = None,
                today: Optional[DailyForecast] = None) -> list[str]:
    lines = [
        "Port call",
        f"  Time in port: {summary['time_in_port']} ({summary['port_window']})",
        f"  Transfers:    {summary['transfers']}",
        f"  Sightseeing:  {summary['sightseeing']}",
        f"  Walking:      {summary['walking']}",
        "",
        "Weather",
    ]
    if today:
        lines.append(f"  Today: {round(today.low)}° to {round(today.high)}°, {today.label}")
    if forecast:
        for entry in forecast:
            lines.append(f"  {entry.hour:02d}:00  {round(entry.temperature):>3}°  {entry.label}")
    else:
        lines.append("  not available")

    lines += ["", "Basic Italian"]
    for number, item in enumerate(phrases, 1):
        lines.append(f"  {number:>2}. {item.word:24} \"{item.simplified}\"  {item.meaning}")

    lines += ["", f"SOS: {sos_url(location)}"]
    return lines
