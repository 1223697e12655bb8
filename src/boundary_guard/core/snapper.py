"""Project points that fall outside a boundary back onto its nearest edge."""

import math

from ..models import BoundingBox, GeoPoint, Position
from .containment import point_in_boundary
from .coords import outer_rings
from .geodesic import EARTH_RADIUS_M, distance


def nearest_point_on_segment(p: Position, a: Position, b: Position) -> Position:
    """Clamped projection of ``p`` onto segment ``a``-``b`` in degree space."""
    dx = b.lng - a.lng
    dy = b.lat - a.lat
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return a

    t = ((p.lng - a.lng) * dx + (p.lat - a.lat) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return Position(lng=a.lng + t * dx, lat=a.lat + t * dy)


def nearest_edge_point(
    p: GeoPoint, boundary, radius_m: float
) -> tuple[GeoPoint, float] | None:
    """Nearest point on any outer-ring edge, with its haversine distance.

    Holes are not snap targets. Returns None when no outer ring has an edge.
    """
    position = p.to_position()
    best: GeoPoint | None = None
    best_distance = math.inf

    for ring in outer_rings(boundary):
        for start, end in ring.edges():
            candidate = nearest_point_on_segment(position, start, end).to_geo_point()
            d = distance(p, candidate, radius_m)
            if d < best_distance:
                best, best_distance = candidate, d

    if best is None:
        return None
    return best, best_distance


def snap_to_boundary(
    p: GeoPoint, b, box: BoundingBox | None = None, radius_m: float = EARTH_RADIUS_M
) -> GeoPoint:
    """Return ``p`` if it is inside ``b``, else the nearest point on an outer edge.

    Best-effort: the projection is planar in degrees and candidates are ranked
    by great-circle distance, which is accurate enough at ward scale.
    """
    if point_in_boundary(p, b, box):
        return p

    nearest = nearest_edge_point(p, b, radius_m)
    if nearest is None:
        return p
    return nearest[0]


def distance_to_boundary(
    p: GeoPoint, b, box: BoundingBox | None = None, radius_m: float = EARTH_RADIUS_M
) -> float:
    """Meters from ``p`` to the nearest valid point; 0 when already inside."""
    snapped = snap_to_boundary(p, b, box, radius_m)
    return distance(p, snapped, radius_m)
