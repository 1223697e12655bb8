"""Ray-casting point-in-polygon tests for rings, polygons and multi-polygons.

Points lying exactly on an edge get whatever the half-open crossing test
produces: deterministic, but not guaranteed inside or outside.
"""

from ..models import BoundingBox, GeoPoint, MultiPolygon, Polygon, Position, Ring
from .coords import position_in_bounding_box


def point_in_ring(p: Position, ring: Ring) -> bool:
    """Cast a horizontal ray from ``p`` and toggle on each edge crossing."""
    positions = ring.positions
    n = len(positions)
    if n < 3:
        return False

    x, y = p.lng, p.lat
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = positions[i]
        xj, yj = positions[j]
        # (yi > y) != (yj > y) guarantees yi != yj, so the division is safe
        if (yi > y) != (yj > y) and x < xi + (y - yi) * (xj - xi) / (yj - yi):
            inside = not inside
        j = i
    return inside


def point_in_polygon(p: Position, poly: Polygon) -> bool:
    if not point_in_ring(p, poly.outer):
        return False
    return not any(point_in_ring(p, hole) for hole in poly.holes)


def point_in_multi_polygon(p: Position, mp: MultiPolygon) -> bool:
    return any(point_in_polygon(p, poly) for poly in mp.polygons)


def point_in_boundary(p: GeoPoint, b, box: BoundingBox | None = None) -> bool:
    """Test a reported point against a Polygon or MultiPolygon boundary.

    Args:
        p: Reported point (lat/lng order); converted to a Position here.
        b: The assigned boundary.
        box: Optional precomputed bounding box of ``b``, used only to reject
            points that are trivially outside before ray casting.
    """
    position = p.to_position()
    if box is not None and not position_in_bounding_box(position, box):
        return False

    if isinstance(b, Polygon):
        return point_in_polygon(position, b)
    if isinstance(b, MultiPolygon):
        return point_in_multi_polygon(position, b)
    raise TypeError(f"Unsupported boundary type: {type(b).__name__}")
