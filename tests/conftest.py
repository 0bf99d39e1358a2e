"""Shared shapes for measurement and pricing tests."""
import pytest
from sitequote.geo import GeoPoint

# degrees per meter on the tangent plane (~0.00000899)
DEG_PER_M = 1 / 111320


@pytest.fixture
def equator_square():
    """10 m x 10 m square with its SW corner on (0, 0)."""
    d = 10 * DEG_PER_M
    return [GeoPoint(0.0, 0.0), GeoPoint(0.0, d), GeoPoint(d, d), GeoPoint(d, 0.0)]


@pytest.fixture
def melbourne_lot():
    """Irregular suburban lot near Melbourne CBD (clockwise)."""
    return [
        GeoPoint(-37.81360, 144.96310),
        GeoPoint(-37.81352, 144.96352),
        GeoPoint(-37.81391, 144.96365),
        GeoPoint(-37.81402, 144.96331),
        GeoPoint(-37.81384, 144.96305),
    ]


@pytest.fixture
def fence_line():
    """Open three-vertex trail along a back fence."""
    return [
        GeoPoint(-37.81360, 144.96310),
        GeoPoint(-37.81360, 144.96340),
        GeoPoint(-37.81380, 144.96340),
    ]
