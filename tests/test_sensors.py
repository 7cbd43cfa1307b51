import json
import subprocess
from types import SimpleNamespace

import pytest

from shoretrip import sensors
from shoretrip.models import Coordinate
from shoretrip.sensors import (
    GPS,
    Compass,
    FixedHeading,
    FixedPosition,
    GPSPlayback,
    LatestValue,
)


def fake_run(stdout="", returncode=0):
    def run(cmd, **kwargs):
        return SimpleNamespace(returncode=returncode, stdout=stdout, stderr="")
    return run


def raising_run(exc):
    def run(cmd, **kwargs):
        raise exc
    return run


def test_latest_value_reports_changes():
    cell = LatestValue()
    assert cell.get() is None
    assert cell.set(Coordinate(1, 2))
    assert not cell.set(Coordinate(1, 2))
    assert cell.set(Coordinate(1, 3))
    assert cell.get() == Coordinate(1, 3)


def test_gps_fix(monkeypatch):
    payload = json.dumps({"latitude": 41.89, "longitude": 12.49, "accuracy": 8.0})
    monkeypatch.setattr(sensors.subprocess, "run", fake_run(payload))
    gps = GPS()
    assert gps.get_location() == Coordinate(lat=41.89, lon=12.49)
    assert gps.get_status() == "GPS OK, accuracy 8m"


def test_gps_failure_leaves_no_location(monkeypatch):
    monkeypatch.setattr(sensors.subprocess, "run", fake_run("", returncode=1))
    gps = GPS()
    assert gps.get_location() is None
    assert gps.consecutive_failures == 1
    assert gps.get_status() == "GPS: 1 consecutive failures"


@pytest.mark.parametrize("exc", [
    FileNotFoundError("termux-location"),
    subprocess.TimeoutExpired("termux-location", 30),
])
def test_gps_errors_are_absorbed(monkeypatch, exc):
    monkeypatch.setattr(sensors.subprocess, "run", raising_run(exc))
    gps = GPS()
    assert gps.get_location() is None
    assert gps.consecutive_failures == 1


def test_gps_bad_payload(monkeypatch):
    monkeypatch.setattr(sensors.subprocess, "run", fake_run('{"lat": 1}'))
    assert GPS().get_location() is None


def test_compass_heading(monkeypatch):
    payload = json.dumps({"Orientation Sensor": {"values": [370.5, -3.0, 1.0]}})
    monkeypatch.setattr(sensors.subprocess, "run", fake_run(payload))
    compass = Compass()
    assert compass.get_heading() == pytest.approx(10.5)
    assert compass.get_status() == "Compass OK"


@pytest.mark.parametrize("stdout", ["not json", "{}", '{"x": {"values": []}}'])
def test_compass_bad_payload(monkeypatch, stdout):
    monkeypatch.setattr(sensors.subprocess, "run", fake_run(stdout))
    compass = Compass()
    assert compass.get_heading() is None
    assert compass.consecutive_failures == 1


def test_compass_missing_tool(monkeypatch):
    monkeypatch.setattr(sensors.subprocess, "run", raising_run(FileNotFoundError("termux-sensor")))
    assert Compass().get_heading() is None


def test_fixed_sources():
    assert FixedPosition(41.9, 12.5).get_location() == Coordinate(41.9, 12.5)
    assert FixedHeading(-90).get_heading() == 270


def test_playback(tmp_path):
    trace = {"trace": [
        {"elapsed": 0, "location": {"lat": 41.89, "lon": 12.49}, "heading": 10},
        {"elapsed": 2, "location": None, "heading": 20},
        {"elapsed": 4, "location": {"lat": 41.9, "lng": 12.48}},
    ]}
    path = tmp_path / "trace.json"
    path.write_text(json.dumps(trace))

    playback = GPSPlayback(str(path), speed=2.0)
    assert playback.get_location() == Coordinate(41.89, 12.49)
    assert playback.get_heading() == 10
    assert playback.get_poll_interval() == pytest.approx(1.0)

    assert playback.get_location() is None
    assert playback.get_heading() == 20
    assert playback.consecutive_failures == 1

    assert playback.get_location() == Coordinate(41.9, 12.48)
    assert playback.get_heading() == 20
    assert playback.is_finished()
    assert playback.get_location() is None
