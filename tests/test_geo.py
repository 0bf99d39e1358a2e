"""Tests for sitequote/geo.py measurement functions."""
import math
import pytest
from sitequote import geo
from sitequote.geo import (
    GeoPoint, make_point, validate_points,
    distance_between, perimeter_of, closed_perimeter, open_path_length,
    area_of, measurements_for,
)
from sitequote.config import FT2_PER_M2, FT_PER_M


# --- make_point / validate_points ---

def test_make_point_coerces_strings():
    p = make_point("-37.8136", "144.9631")
    assert p == GeoPoint(-37.8136, 144.9631)


@pytest.mark.parametrize("lat,lng", [
    (float("nan"), 0.0), (0.0, float("inf")), (90.5, 0.0), (0.0, -180.1), (None, 1.0),
])
def test_make_point_rejects_bad_coordinates(lat, lng):
    with pytest.raises(ValueError):
        make_point(lat, lng)


def test_validate_points_accepts_tuples():
    pts = validate_points([(1, 2), [3, 4]])
    assert pts == [GeoPoint(1.0, 2.0), GeoPoint(3.0, 4.0)]


# --- distance_between ---

def test_distance_same_point_is_zero(melbourne_lot):
    for p in melbourne_lot:
        assert distance_between(p, p) == 0.0


def test_distance_is_symmetric(melbourne_lot):
    a, b = melbourne_lot[0], melbourne_lot[2]
    assert distance_between(a, b) == pytest.approx(distance_between(b, a), rel=1e-12)


def test_distance_melbourne_thousandth_degree_latitude():
    p1 = GeoPoint(-37.8136, 144.9631)
    p2 = GeoPoint(-37.8126, 144.9631)
    assert distance_between(p1, p2) == pytest.approx(111.2, abs=0.1)


def test_distance_antipodal_is_half_circumference():
    d = distance_between(GeoPoint(0, 0), GeoPoint(0, 180))
    assert not math.isnan(d)
    assert d == pytest.approx(math.pi * 6371000, rel=1e-9)


# --- perimeter ---

def test_perimeter_empty_and_single():
    assert perimeter_of([]) == 0
    assert perimeter_of([GeoPoint(0, 0)]) == 0
    assert open_path_length([]) == 0
    assert open_path_length([GeoPoint(0, 0)]) == 0


def test_perimeter_equator_square(equator_square):
    assert perimeter_of(equator_square) == pytest.approx(40.0, rel=0.01)


def test_two_point_closed_perimeter_doubles_segment():
    a, b = GeoPoint(-37.8136, 144.9631), GeoPoint(-37.8126, 144.9631)
    seg = distance_between(a, b)
    assert closed_perimeter([a, b]) == pytest.approx(2 * seg)
    assert open_path_length([a, b]) == pytest.approx(seg)


def test_closed_minus_open_is_closing_edge(fence_line):
    closing = distance_between(fence_line[-1], fence_line[0])
    assert closed_perimeter(fence_line) - open_path_length(fence_line) == pytest.approx(closing)


# --- area ---

def test_area_below_three_points_is_zero():
    p1, p2 = GeoPoint(0, 0), GeoPoint(0.001, 0.001)
    assert area_of([]) == 0
    assert area_of([p1]) == 0
    assert area_of([p1, p2]) == 0


def test_area_equator_square(equator_square):
    assert area_of(equator_square) == pytest.approx(100.0, rel=0.01)


def test_area_collinear_triangle_is_zero():
    pts = [GeoPoint(0.0, 0.0), GeoPoint(0.0001, 0.0001), GeoPoint(0.0002, 0.0002)]
    assert area_of(pts) == pytest.approx(0.0, abs=1e-6)


def test_area_invariant_under_rotation(melbourne_lot):
    base = area_of(melbourne_lot)
    for k in range(1, len(melbourne_lot)):
        rotated = melbourne_lot[k:] + melbourne_lot[:k]
        assert area_of(rotated) == pytest.approx(base, rel=1e-9)


def test_area_invariant_under_reversal(melbourne_lot):
    assert area_of(melbourne_lot[::-1]) == pytest.approx(area_of(melbourne_lot), rel=1e-9)


def test_area_shrinks_with_latitude():
    # Same degree footprint covers less ground away from the equator
    d = 0.0009
    sq = lambda lat: [GeoPoint(lat, 0), GeoPoint(lat, d), GeoPoint(lat + d, d), GeoPoint(lat + d, 0)]
    assert area_of(sq(-37.8)) < area_of(sq(0.0))
    assert area_of(sq(-37.8)) == pytest.approx(area_of(sq(0.0)) * math.cos(math.radians(-37.8 + d / 2)), rel=1e-3)


# --- measurements_for ---

def test_measurements_unit_conversion(melbourne_lot):
    m = measurements_for(melbourne_lot)
    assert m.area_m2 > 0
    assert abs(m.area_ft2 - m.area_m2 * FT2_PER_M2) <= 0.01
    assert abs(m.perimeter_ft - m.perimeter_m * FT_PER_M) <= 0.01


def test_measurements_round_then_scale(equator_square):
    m = measurements_for(equator_square)
    area_m2 = round(area_of(equator_square), 2)
    perimeter_m = round(perimeter_of(equator_square), 2)
    assert m.area_m2 == area_m2
    assert m.perimeter_m == perimeter_m
    assert m.area_ft2 == round(area_m2 * 10.7639, 2)
    assert m.perimeter_ft == round(perimeter_m * 3.28084, 2)


def test_measurements_partial_shape_is_zero():
    m = measurements_for([(-37.8136, 144.9631)])
    assert m == (0.0, 0.0, 0.0, 0.0)


def test_measurements_trail_has_no_area(fence_line):
    m = measurements_for(fence_line, closed=False)
    assert m.area_m2 == 0.0
    assert m.area_ft2 == 0.0
    assert m.perimeter_m == round(open_path_length(fence_line), 2)


def test_measurements_rejects_nan():
    with pytest.raises(ValueError, match="Non-finite"):
        measurements_for([(0, 0), (float("nan"), 0.0001), (0.0001, 0.0001)])


def test_measurements_rejects_infinite_before_measuring():
    # primitives would quietly measure garbage; the composite must not
    with pytest.raises(ValueError, match="Non-finite"):
        measurements_for([(0, 0), (0.0001, float("inf"))], closed=False)


def test_measurements_tie_rounds_on_binary_float(monkeypatch):
    monkeypatch.setattr(geo, "area_of", lambda pts: 250.0)
    m = measurements_for([(0, 0), (0, 0.0001), (0.0001, 0)])
    assert m.area_m2 == 250.0
    assert m.area_ft2 == round(250.0 * FT2_PER_M2, 2)
    assert abs(m.area_ft2 - 250.0 * FT2_PER_M2) <= 0.01
