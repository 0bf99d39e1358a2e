"""
Measurement engine: distance, perimeter and area of traced shapes.

Distances are great-circle (Haversine) on a sphere of EARTH_RADIUS_M.
Areas use a single flat tangent plane centered on the vertex mean, so they
are only meant for small, simple polygons at mid-latitudes (a parcel, a
lawn, a roof). Shapes spanning many kilometers, crossing the antimeridian
or touching a pole will be wrong.

Invalid input is rejected, never propagated: make_point/validate_points
raise ValueError for non-finite or out-of-range coordinates, and
measurements_for validates before measuring. The primitives
(distance_between, open_path_length, closed_perimeter, area_of) assume
already-validated points; what they return for a NaN is meaningless.
"""
import math
from typing import NamedTuple, Sequence

from .config import (
    EARTH_RADIUS_M, METERS_PER_DEG_LAT,
    FT2_PER_M2, FT_PER_M, MEASURE_DECIMALS,
)


class GeoPoint(NamedTuple):
    lat: float
    lng: float


class Measurements(NamedTuple):
    area_m2: float
    perimeter_m: float
    area_ft2: float
    perimeter_ft: float


# -----------------------------
# Input checks
# -----------------------------
def make_point(lat, lng) -> GeoPoint:
    """Build a GeoPoint, rejecting non-finite or out-of-range coordinates."""
    try:
        lat = float(lat); lng = float(lng)
    except (TypeError, ValueError):
        raise ValueError(f"Coordinates must be numbers: {lat!r}, {lng!r}")
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValueError(f"Non-finite coordinate: ({lat}, {lng})")
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"Latitude out of range: {lat}")
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"Longitude out of range: {lng}")
    return GeoPoint(lat, lng)

def validate_points(points) -> list:
    return [make_point(p[0], p[1]) for p in points]

# -----------------------------
# Primitives
# -----------------------------
def distance_between(p1: GeoPoint, p2: GeoPoint) -> float:
    lat1 = math.radians(p1[0]); lat2 = math.radians(p2[0])
    dlat = math.radians(p2[0] - p1[0])
    dlng = math.radians(p2[1] - p1[1])
    a = math.sin(dlat/2)**2 + math.cos(lat1)*math.cos(lat2)*math.sin(dlng/2)**2
    a = min(1.0, max(0.0, a))  # rounding can push a slightly outside [0, 1]
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c

def open_path_length(points: Sequence[GeoPoint]) -> float:
    """Length along the path, first vertex to last, with no closing edge."""
    if len(points) < 2:
        return 0.0
    return sum(distance_between(points[i], points[i+1]) for i in range(len(points)-1))

def closed_perimeter(points: Sequence[GeoPoint]) -> float:
    """Perimeter of the closed loop, including the edge from last back to first.

    Two points count the segment twice (there and back).
    """
    n = len(points)
    if n < 2:
        return 0.0
    return sum(distance_between(points[i], points[(i+1) % n]) for i in range(n))

perimeter_of = closed_perimeter

def _local_xy(points: Sequence[GeoPoint]):
    # Project to meters on the tangent plane at the vertex mean
    n = len(points)
    c_lat = sum(p[0] for p in points) / n
    c_lng = sum(p[1] for p in points) / n
    m_lat = METERS_PER_DEG_LAT
    m_lng = METERS_PER_DEG_LAT * math.cos(math.radians(c_lat))
    return [((p[1] - c_lng) * m_lng, (p[0] - c_lat) * m_lat) for p in points]

def area_of(points: Sequence[GeoPoint]) -> float:
    """Planar Shoelace area in m². Winding order and start vertex do not matter."""
    n = len(points)
    if n < 3:
        return 0.0
    xy = _local_xy(points)
    a = 0.0
    for i in range(n):
        x1, y1 = xy[i]; x2, y2 = xy[(i+1) % n]
        a += x1*y2 - x2*y1
    return abs(a) / 2.0

# -----------------------------
# Composite
# -----------------------------
def measurements_for(points, closed: bool = True) -> Measurements:
    """
    Area and perimeter in metric and imperial units, each rounded to 2 dp.

    Imperial values are scaled from the already-rounded metric values and
    rounded again. With closed=False the path is a trail: no area, and the
    length has no closing edge.

    Rounding is Python's round() on the binary float, so an exact .xx5 tie
    may land 0.01 below half-up rounding (250.00 m² gives
    2690.97 ft², not 2690.98). Metric and imperial still agree within 0.01.

    Raises ValueError for non-finite or out-of-range coordinates.
    """
    pts = validate_points(points)
    if closed:
        area = area_of(pts)
        perimeter = closed_perimeter(pts)
    else:
        area = 0.0
        perimeter = open_path_length(pts)

    area_m2 = round(area, MEASURE_DECIMALS)
    perimeter_m = round(perimeter, MEASURE_DECIMALS)
    return Measurements(
        area_m2=area_m2,
        perimeter_m=perimeter_m,
        area_ft2=round(area_m2 * FT2_PER_M2, MEASURE_DECIMALS),
        perimeter_ft=round(perimeter_m * FT_PER_M, MEASURE_DECIMALS),
    )
