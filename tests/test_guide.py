from shoretrip.audio import Audio
from shoretrip.budget import budget_lines, format_eur, priced_activities, total_budget
from shoretrip.data import (
    PORT_ARRIVAL_TIME,
    PRONUNCIATIONS,
    ROMAN_WALK_TRACK_POINTS,
    SHIP_ONBOARD_TIME,
    initial_itinerary,
)
from shoretrip.guide import (
    find_phrase,
    guide_lines,
    minutes_by_type,
    port_summary,
    sos_message,
    sos_url,
    speak_phrase,
)
from shoretrip.models import Coordinate
from shoretrip.weather import DailyForecast, HourlyForecast


def test_total_budget():
    assert total_budget(initial_itinerary()) == 61


def test_priced_activities_keep_order():
    ids = [a.id for a in priced_activities(initial_itinerary())]
    assert ids == ["station", "colosseum", "lunch", "trevi", "pantheon"]


def test_format_eur():
    assert format_eur(61) == "€61"
    assert format_eur(2.5) == "€2.50"


def test_budget_lines():
    lines = budget_lines(initial_itinerary())
    assert lines[0] == "Estimated total: €61"
    assert len(lines) == 6
    assert "Colosseum" in lines[2]


def test_minutes_by_type():
    itinerary = initial_itinerary()
    assert minutes_by_type(itinerary, "transport") == 30 + 75 + 80
    assert minutes_by_type(itinerary, "sightseeing") == 90 + 75 + 55 + 30 + 40


def test_port_summary():
    summary = port_summary(initial_itinerary(), ROMAN_WALK_TRACK_POINTS,
                           PORT_ARRIVAL_TIME, SHIP_ONBOARD_TIME)
    assert summary["time_in_port"] == "11h 30m"
    assert summary["port_window"] == "07:00 - 18:30"
    assert summary["transfers"] == "3h 5min"
    assert summary["sightseeing"] == "4h 50min"
    assert summary["walking"].startswith("~")
    assert summary["walking"].endswith(" km")


def test_sos_message_without_fix():
    assert sos_message(None) == "SOS! I need help in Rome. Location: GPS not available"


def test_sos_message_with_fix():
    message = sos_message(Coordinate(41.9, 12.5))
    assert message.endswith("https://maps.google.com/?q=41.9,12.5")


def test_sos_url_is_encoded():
    url = sos_url(Coordinate(41.9, 12.5))
    assert url.startswith("https://wa.me/?text=SOS%21%20I%20need%20help")
    assert " " not in url
    assert "%3Fq%3D41.9%2C12.5" in url


def test_speak_phrase_uses_italian_voice(monkeypatch):
    said = []
    monkeypatch.setattr(Audio, "speak", staticmethod(lambda text, lang=None: said.append((text, lang))))
    speak_phrase(PRONUNCIATIONS[0])
    assert said == [("Buongiorno", "it")]


def test_guide_lines():
    summary = port_summary(initial_itinerary(), ROMAN_WALK_TRACK_POINTS,
                           PORT_ARRIVAL_TIME, SHIP_ONBOARD_TIME)
    lines = guide_lines(summary, PRONUNCIATIONS, [HourlyForecast(13, 21.6, 3)])
    assert "  13:00   22°  cloudy" in lines
    assert any(line.strip().startswith("2. Grazie") for line in lines)
    assert lines[-1].startswith("SOS: https://wa.me/")

    offline = guide_lines(summary, PRONUNCIATIONS, [])
    assert "  not available" in offline


def test_guide_lines_show_today_range():
    summary = port_summary(initial_itinerary(), ROMAN_WALK_TRACK_POINTS,
                           PORT_ARRIVAL_TIME, SHIP_ONBOARD_TIME)
    lines = guide_lines(summary, PRONUNCIATIONS, [], today=DailyForecast(11.2, 21.8, 61))
    assert lines[lines.index("Weather") + 1] == "  Today: 11° to 22°, rain"


def test_find_phrase():
    assert find_phrase(PRONUNCIATIONS, "2").word == "Grazie"
    assert find_phrase(PRONUNCIATIONS, " scusi ").word == "Scusi"
    assert find_phrase(PRONUNCIATIONS, "Aiuto!").word == "Aiuto!"
    assert find_phrase(PRONUNCIATIONS, "0") is None
    assert find_phrase(PRONUNCIATIONS, "9") is None
    assert find_phrase(PRONUNCIATIONS, "Ciao") is None
