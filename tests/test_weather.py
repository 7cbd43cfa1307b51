import pytest
import requests

from shoretrip import weather
from shoretrip.logger import Logger
from shoretrip.weather import WeatherFetcher, daily_forecast, hourly_forecast, weather_label

FORECAST = {
    "hourly": {
        "time": ["2026-04-16T06:00", "2026-04-16T07:00", "2026-04-16T13:00",
                 "2026-04-16T19:00", "2026-04-16T20:00"],
        "temperature_2m": [11.2, 12.0, 21.6, 17.4, 15.0],
        "weathercode": [0, 1, 3, 61, 95],
    },
    "daily": {
        "time": ["2026-04-16"],
        "weathercode": [3],
        "temperature_2m_max": [22.0],
        "temperature_2m_min": [11.0],
    },
}


class FakeResponse:
    def __init__(self, data):
        self.data = data

    def raise_for_status(self):
        pass

    def json(self):
        return self.data


@pytest.fixture
def cache_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(WeatherFetcher, "CACHE_DIR", str(tmp_path / "cache"))
    return tmp_path / "cache"


@pytest.mark.parametrize("code, label", [
    (0, "sunny"),
    (1, "sunny"),
    (2, "cloudy"),
    (3, "cloudy"),
    (61, "rain"),
    (67, "rain"),
    (80, "storm"),
    (99, "storm"),
    (100, "sunny"),
])
def test_weather_label(code, label):
    assert weather_label(code) == label


def test_hourly_forecast_keeps_port_hours():
    forecast = hourly_forecast(FORECAST)
    assert [f.hour for f in forecast] == [7, 13, 19]
    assert forecast[1].temperature == 21.6
    assert forecast[2].label == "rain"


def test_hourly_forecast_custom_window():
    assert [f.hour for f in hourly_forecast(FORECAST, 6, 7)] == [6, 7]


def test_hourly_forecast_without_data():
    assert hourly_forecast({}) == []


def test_fetch_caches_response(cache_dir, monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append(params)
        return FakeResponse(FORECAST)

    monkeypatch.setattr(weather.requests, "get", fake_get)
    assert WeatherFetcher.fetch(41.89, 12.49) == FORECAST
    assert calls[0]["latitude"] == 41.89
    assert calls[0]["timezone"] == "Europe/Rome"
    assert len(list(cache_dir.iterdir())) == 1

    assert WeatherFetcher.fetch(41.89, 12.49) == FORECAST
    assert len(calls) == 1


def test_fetch_error_returns_empty(cache_dir, monkeypatch):
    def failing_get(url, params=None, timeout=None):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(weather.requests, "get", failing_get)
    assert WeatherFetcher.fetch(41.89, 12.49) == {}
    assert not cache_dir.exists()


def test_daily_forecast():
    today = daily_forecast(FORECAST)
    assert (today.low, today.high) == (11.0, 22.0)
    assert today.label == "cloudy"
    assert daily_forecast({}) is None
    assert daily_forecast({"daily": {"time": []}}) is None


def test_fetch_error_is_logged(cache_dir, monkeypatch, tmp_path, capsys):
    def failing_get(url, params=None, timeout=None):
        raise requests.Timeout("slow network")

    monkeypatch.setattr(weather.requests, "get", failing_get)
    log_path = tmp_path / "trip.log"
    logger = Logger(str(log_path), echo=False)
    assert WeatherFetcher.fetch(41.89, 12.49, logger=logger) == {}
    logger.close()
    assert "Weather fetch failed" in log_path.read_text()
    assert "slow network" in log_path.read_text()
    assert capsys.readouterr().out == ""
