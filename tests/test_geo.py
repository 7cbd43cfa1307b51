import itertools
import math

import pytest

from shoretrip.geo import (
    bearing_to_compass,
    calculate_bearing,
    calculate_distance,
    format_distance,
    track_length_km,
)

COLOSSEUM = (41.8902, 12.4922)
TREVI = (41.9009, 12.4833)

POINTS = [
    COLOSSEUM,
    TREVI,
    (42.0930, 11.7880),
    (0.0, 0.0),
    (-33.8688, 151.2093),
    (64.1466, -21.9426),
    (89.9, 45.0),
    (-45.0, -179.5),
]


def test_distance_to_self_is_zero():
    assert calculate_distance(41.8902, 12.4922, 41.8902, 12.4922) == 0


@pytest.mark.parametrize("a, b", list(itertools.combinations(POINTS, 2)))
def test_distance_is_symmetric(a, b):
    assert calculate_distance(*a, *b) == pytest.approx(calculate_distance(*b, *a))


def test_one_degree_of_latitude():
    assert calculate_distance(0, 0, 1, 0) == pytest.approx(111.195, rel=1e-4)


HALF_CIRCUMFERENCE_KM = math.pi * 6371


@pytest.mark.parametrize("lat, lon", [
    (-11.056008330198168, -90.75379655126689),
    (41.8902, 12.4922),
    (0.0, 0.0),
    (89.9, 45.0),
    (-60.25, 170.125),
] + [(lat / 7, lon / 3) for lat in range(-630, 631, 45) for lon in range(-540, 541, 90)])
def test_antipodal_distance(lat, lon):
    there = calculate_distance(lat, lon, -lat, lon + 180)
    back = calculate_distance(-lat, lon + 180, lat, lon)
    assert there == pytest.approx(HALF_CIRCUMFERENCE_KM, rel=1e-6)
    assert back == pytest.approx(there)


def test_colosseum_to_trevi():
    distance = calculate_distance(*COLOSSEUM, *TREVI)
    assert distance == pytest.approx(1.40, abs=0.01)
    assert format_distance(distance) == "1.4 km"


@pytest.mark.parametrize("km, expected", [
    (0, "0 m"),
    (0.2504, "250 m"),
    (0.9994, "999 m"),
    (1.0, "1.0 km"),
    (12.34, "12.3 km"),
])
def test_format_distance(km, expected):
    assert format_distance(km) == expected


@pytest.mark.parametrize("dest, expected", [
    ((1, 0), 0),
    ((0, 1), 90),
    ((-1, 0), 180),
    ((0, -1), 270),
])
def test_cardinal_bearings(dest, expected):
    assert calculate_bearing(0, 0, *dest) == pytest.approx(expected)


@pytest.mark.parametrize("a, b", list(itertools.product(POINTS, repeat=2)))
def test_bearing_range(a, b):
    bearing = calculate_bearing(*a, *b)
    assert 0 <= bearing < 360


def test_bearing_of_identical_points():
    assert calculate_bearing(*COLOSSEUM, *COLOSSEUM) == 0


def test_bearing_is_not_reversible():
    there = calculate_bearing(40, 0, 40, 60)
    back = calculate_bearing(40, 60, 40, 0)
    # On a long east-west great circle the two initial bearings are not 180 apart
    assert abs((back - there) % 360 - 180) > 1


@pytest.mark.parametrize("bearing, expected", [
    (0, "north"),
    (350, "north"),
    (90, "east"),
    (135, "southeast"),
    (225, "southwest"),
    (300, "northwest"),
])
def test_bearing_to_compass(bearing, expected):
    assert bearing_to_compass(bearing) == expected


def test_track_length():
    assert track_length_km([(0, 0), (1, 0), (2, 0)]) == pytest.approx(2 * 111.195, rel=1e-4)
    assert track_length_km([(0, 0)]) == 0
