import pytest

from geo.distance import haversine_km


def test_zero_for_identical_points(bangalore):
    assert haversine_km(bangalore, bangalore) == 0.0


def test_symmetric():
    a, b = (12.9716, 77.5946), (13.0827, 80.2707)
    assert haversine_km(a, b) == pytest.approx(haversine_km(b, a))


def test_one_degree_of_longitude_on_equator():
    # 2 * pi * 6371 / 360
    assert haversine_km((0.0, 0.0), (0.0, 1.0)) == pytest.approx(111.195, abs=0.01)


def test_short_hop_in_bangalore():
    distance = haversine_km((12.9716, 77.5946), (12.9720, 77.5950))
    assert 0.05 < distance < 0.1


def test_triangle_inequality():
    a, b, c = (12.9716, 77.5946), (19.0760, 72.8777), (28.7041, 77.1025)
    assert haversine_km(a, c) <= haversine_km(a, b) + haversine_km(b, c)


def test_antipodal_points_are_half_circumference():
    assert haversine_km((0.0, 0.0), (0.0, 180.0)) == pytest.approx(20015.09, abs=0.1)
