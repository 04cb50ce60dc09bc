"""Unit tests: haversine distance and display formatting."""
import math

import pytest

from registry.geo import EARTH_RADIUS_KM, format_miles, haversine, haversine_km, haversine_miles

pytestmark = pytest.mark.unit


def _reference_miles(lat1, lon1, lat2, lon2):
    """Independent haversine (atan2 form) for cross-checking."""
    r = 3958.8
    p1, p2 = math.radians(lat1), math.radians(lat2)
    dp, dl = math.radians(lat2 - lat1), math.radians(lon2 - lon1)
    a = math.sin(dp / 2) ** 2 + math.cos(p1) * math.cos(p2) * math.sin(dl / 2) ** 2
    return r * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def test_same_point_is_zero():
    """Distance from a point to itself is 0."""
    assert haversine_miles(43.0766, -89.4125, 43.0766, -89.4125) == 0.0


def test_wisconsin_fixture_about_104_miles():
    """(44.5,-89.5) to (43.0,-89.4) is roughly 104 miles."""
    miles = haversine_miles(44.5, -89.5, 43.0, -89.4)
    assert miles == pytest.approx(_reference_miles(44.5, -89.5, 43.0, -89.4), abs=0.01)
    assert 103 < miles < 105


def test_symmetric():
    """Swapping the endpoints gives the same distance."""
    a = haversine_miles(40.7128, -74.0060, 51.5074, -0.1278)
    b = haversine_miles(51.5074, -0.1278, 40.7128, -74.0060)
    assert a == pytest.approx(b, abs=1e-9)


def test_new_york_to_london_km():
    """Known long-haul pair: about 5570 km."""
    km = haversine_km(40.7128, -74.0060, 51.5074, -0.1278)
    assert km == pytest.approx(5570, rel=0.01)


def test_antipodal_points_half_circumference():
    """Antipodal points are pi * R apart (a is clamped to 1)."""
    assert haversine(0.0, 0.0, 0.0, 180.0, EARTH_RADIUS_KM) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_format_miles_two_decimals():
    """Display text keeps two decimals and the unit."""
    assert format_miles(1.4249) == "1.42 miles"
    assert format_miles(103.0) == "103.00 miles"
