"""Great-circle distance and approximate polygon area on a spherical Earth."""

import math

import numpy as np

from ..models import GeoPoint, MultiPolygon, Polygon, Ring

EARTH_RADIUS_M = 6_371_000.0


def distance(a: GeoPoint, b: GeoPoint, radius_m: float = EARTH_RADIUS_M) -> float:
    """Haversine distance in meters.

    Fine for anything within a single country. Rounding can push the
    haversine term past 1 for near-antipodal pairs, so it is clamped.
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lng = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    h = min(1.0, max(0.0, h))
    return 2 * radius_m * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def ring_area(ring: Ring, radius_m: float = EARTH_RADIUS_M) -> float:
    """Approximate area of a single ring in square meters.

    Sums ``(lng2 - lng1) * (2 + sin(lat1) + sin(lat2))`` over every edge,
    including the closing one, and scales by ``R^2 / 2``. Only valid for
    ward-sized regions; this is not a spherical-excess formula.
    """
    if ring.is_degenerate:
        return 0.0

    coords = np.radians(np.asarray(ring.positions, dtype=float))
    lngs, lats = coords[:, 0], coords[:, 1]
    next_lngs = np.roll(lngs, -1)
    next_lats = np.roll(lats, -1)

    total = np.sum((next_lngs - lngs) * (2 + np.sin(lats) + np.sin(next_lats)))
    return float(abs(total) * radius_m * radius_m / 2)


def area(polygon: Polygon, radius_m: float = EARTH_RADIUS_M) -> float:
    """Outer ring area minus hole areas, never negative."""
    outer = ring_area(polygon.outer, radius_m)
    holes = sum(ring_area(h, radius_m) for h in polygon.holes)
    return max(0.0, outer - holes)


def boundary_area(boundary, radius_m: float = EARTH_RADIUS_M) -> float:
    """Total area of a Polygon or MultiPolygon boundary."""
    if isinstance(boundary, Polygon):
        return area(boundary, radius_m)
    if isinstance(boundary, MultiPolygon):
        return sum(area(p, radius_m) for p in boundary.polygons)
    raise TypeError(f"Unsupported boundary type: {type(boundary).__name__}")
