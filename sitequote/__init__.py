"""Site-survey measurement and quoting toolkit."""
from .geo import (
    GeoPoint, Measurements, make_point,
    distance_between, perimeter_of, closed_perimeter, open_path_length,
    area_of, measurements_for,
)
from .fmt import format_area, format_distance, format_currency
