from .containment import (
    point_in_boundary,
    point_in_multi_polygon,
    point_in_polygon,
    point_in_ring,
)
from .geodesic import EARTH_RADIUS_M, area, boundary_area, distance, ring_area
from .models import ReasonCode, ValidationOptions, ValidationResult
from .snapper import distance_to_boundary, nearest_point_on_segment, snap_to_boundary
from .validator import validate_point, validate_polygon, validate_survey_data

__all__ = [
    "EARTH_RADIUS_M",
    "ReasonCode",
    "ValidationOptions",
    "ValidationResult",
    "area",
    "boundary_area",
    "distance",
    "distance_to_boundary",
    "nearest_point_on_segment",
    "point_in_boundary",
    "point_in_multi_polygon",
    "point_in_polygon",
    "point_in_ring",
    "ring_area",
    "snap_to_boundary",
    "validate_point",
    "validate_polygon",
    "validate_survey_data",
]
