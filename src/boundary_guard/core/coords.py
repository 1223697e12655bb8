"""Coordinate conversions and bounding-box helpers for boundaries."""

import numpy as np

from ..models import BoundingBox, GeoPoint, MultiPolygon, Polygon, Position, Ring


def polygons_of(boundary) -> tuple[Polygon, ...]:
    """Member polygons of a boundary: the polygon itself, or every MultiPolygon member."""
    if isinstance(boundary, Polygon):
        return (boundary,)
    if isinstance(boundary, MultiPolygon):
        return boundary.polygons
    raise TypeError(f"Unsupported boundary type: {type(boundary).__name__}")


def outer_rings(boundary) -> list[Ring]:
    return [p.outer for p in polygons_of(boundary)]


def all_rings(boundary) -> list[Ring]:
    rings = []
    for polygon in polygons_of(boundary):
        rings.append(polygon.outer)
        rings.extend(polygon.holes)
    return rings


def lat_lngs_to_ring(points: list[GeoPoint]) -> Ring:
    """Convert map-widget style points into a GeoJSON-ordered ring."""
    return Ring(positions=tuple(p.to_position() for p in points))


def ring_to_geo_points(ring: Ring) -> list[GeoPoint]:
    return [pos.to_geo_point() for pos in ring.positions]


def bounding_box(boundary) -> BoundingBox | None:
    """Scan every vertex of every ring. Returns None when the boundary has no vertices."""
    positions = [pos for ring in all_rings(boundary) for pos in ring.positions]
    if not positions:
        return None

    coords = np.asarray(positions, dtype=float)
    lngs, lats = coords[:, 0], coords[:, 1]
    return BoundingBox(
        north=float(lats.max()),
        south=float(lats.min()),
        east=float(lngs.max()),
        west=float(lngs.min()),
    )


def point_in_bounding_box(point: GeoPoint, box: BoundingBox) -> bool:
    """Inclusive on all four edges."""
    return (
        box.south <= point.latitude <= box.north
        and box.west <= point.longitude <= box.east
    )


def position_in_bounding_box(position: Position, box: BoundingBox) -> bool:
    return (
        box.south <= position.lat <= box.north
        and box.west <= position.lng <= box.east
    )


def boundary_center(boundary) -> GeoPoint | None:
    """Center of the boundary's bounding box, for map framing and summaries."""
    box = bounding_box(boundary)
    return box.center if box is not None else None
