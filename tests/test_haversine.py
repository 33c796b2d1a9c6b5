"""Tests for Haversine distance helpers."""
import math

import pytest
from geonear.geo import EARTH_RADIUS_KM, deg2rad, haversine_distance_km, haversine_distance_m
from geonear.models import Coordinate


def c(lat: float, lng: float) -> Coordinate:
    return Coordinate(latitude=lat, longitude=lng)


def test_deg2rad():
    assert deg2rad(180) == math.pi
    assert deg2rad(0) == 0.0
    assert abs(deg2rad(90) - math.pi / 2) < 1e-12


def test_same_point_zero_distance():
    p = c(40.0, -88.0)
    assert haversine_distance_km(p, p) == 0.0


def test_one_degree_latitude_at_equator():
    d = haversine_distance_km(c(0.0, 0.0), c(1.0, 0.0))
    assert d == pytest.approx(111.19, abs=0.5)


def test_antipodal_roughly_half_circumference():
    # Antipodal points: ~ pi * EARTH_RADIUS_KM
    d = haversine_distance_km(c(0.0, 0.0), c(0.0, 180.0))
    expected = math.pi * EARTH_RADIUS_KM
    assert abs(d - expected) < 1.0


def test_known_distance_uiuc():
    # Champaign to Urbana rough distance ~5 km
    champaign = c(40.1164, -88.2434)
    urbana = c(40.1106, -88.2073)
    d = haversine_distance_km(champaign, urbana)
    assert 3.0 < d < 8.0


def test_symmetry():
    a, b = c(40.1, -88.2), c(40.2, -88.1)
    assert haversine_distance_km(a, b) == haversine_distance_km(b, a)


def test_triangle_inequality():
    a, b, mid = c(48.8566, 2.3522), c(51.5074, -0.1278), c(50.1109, 8.6821)
    assert haversine_distance_km(a, b) <= haversine_distance_km(a, mid) + haversine_distance_km(mid, b) + 1e-9


def test_meters_is_km_times_1000():
    a, b = c(40.1164, -88.2434), c(40.1106, -88.2073)
    assert haversine_distance_m(a, b) == pytest.approx(haversine_distance_km(a, b) * 1000.0)


def test_nan_input_yields_nan_without_raising():
    d = haversine_distance_km(c(float("nan"), 0.0), c(0.0, 0.0))
    assert math.isnan(d)


def test_out_of_range_coordinates_do_not_raise():
    d = haversine_distance_km(c(200.0, 500.0), c(-300.0, 10.0))
    assert isinstance(d, float)


@pytest.mark.parametrize(
    "a,b",
    [
        ((float("inf"), 0.0), (0.0, 0.0)),
        ((0.0, 0.0), (0.0, float("-inf"))),
        ((1e308, 0.0), (0.0, 0.0)),
        ((1e308, 0.0), (-1e308, 0.0)),
    ],
)
def test_infinite_or_overflowing_coordinates_yield_nan(a, b):
    assert math.isnan(haversine_distance_km(c(*a), c(*b)))
    assert math.isnan(haversine_distance_m(c(*a), c(*b)))


def test_haversine_term_outside_unit_range_yields_nan(monkeypatch):
    # Force sin() large enough that the haversine term exceeds 1
    monkeypatch.setattr(math, "sin", lambda x: 1.5)
    assert math.isnan(haversine_distance_km(c(0.0, 0.0), c(1.0, 1.0)))
