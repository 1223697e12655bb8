"""Read and write jurisdiction boundaries as GeoJSON.

This is the supplier side of the validator: whatever the boundary registry
hands over (a bare geometry, a Feature, or a FeatureCollection) is turned
into a ``Polygon`` or ``MultiPolygon``. Anything unusable becomes ``None``,
which the validator reports as ``BOUNDARY_UNAVAILABLE``.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..models import MultiPolygon, Polygon, Ring

logger = logging.getLogger(__name__)

AREAL_TYPES = ("Polygon", "MultiPolygon")


def _polygon_from_coordinates(rings: list) -> Polygon:
    if not rings:
        raise ValueError("Polygon has no rings")
    return Polygon(
        outer=Ring.from_coordinates(rings[0]),
        holes=tuple(Ring.from_coordinates(r) for r in rings[1:]),
    )


def _areal(geometry) -> dict | None:
    if isinstance(geometry, dict) and geometry.get("type") in AREAL_TYPES:
        return geometry
    return None


def _extract_geometry(obj: dict) -> dict | None:
    kind = obj.get("type")
    if kind in AREAL_TYPES:
        return obj
    if kind == "Feature":
        return _areal(obj.get("geometry"))
    if kind == "FeatureCollection":
        features = obj.get("features")
        if not isinstance(features, list):
            return None
        for feature in features:
            if isinstance(feature, dict):
                geometry = _areal(feature.get("geometry"))
                if geometry is not None:
                    return geometry
    return None


def boundary_from_geojson(obj) -> Polygon | MultiPolygon | None:
    """Parse a GeoJSON geometry, Feature or FeatureCollection into a boundary.

    Returns None (and logs a warning) for anything that does not carry a
    usable Polygon or MultiPolygon.
    """
    if not isinstance(obj, dict):
        logger.warning("Boundary GeoJSON must be an object, got %s", type(obj).__name__)
        return None

    geometry = _extract_geometry(obj)
    if geometry is None:
        logger.warning("No Polygon or MultiPolygon geometry found (type=%r)", obj.get("type"))
        return None

    coordinates = geometry.get("coordinates")
    try:
        if geometry["type"] == "Polygon":
            return _polygon_from_coordinates(coordinates)
        return MultiPolygon(
            polygons=tuple(_polygon_from_coordinates(p) for p in coordinates or [])
        )
    except (ValidationError, ValueError, TypeError, IndexError) as exc:
        logger.warning("Malformed %s coordinates: %s", geometry["type"], exc)
        return None


def _ring_coordinates(ring: Ring) -> list[list[float]]:
    coords = [[pos.lng, pos.lat] for pos in ring.positions]
    if coords:
        coords.append(list(coords[0]))
    return coords


def _polygon_coordinates(polygon: Polygon) -> list[list[list[float]]]:
    return [_ring_coordinates(polygon.outer)] + [_ring_coordinates(h) for h in polygon.holes]


def boundary_to_geojson(boundary) -> dict:
    """Serialize a boundary back to a GeoJSON geometry with closed rings."""
    if isinstance(boundary, Polygon):
        return {"type": "Polygon", "coordinates": _polygon_coordinates(boundary)}
    if isinstance(boundary, MultiPolygon):
        return {
            "type": "MultiPolygon",
            "coordinates": [_polygon_coordinates(p) for p in boundary.polygons],
        }
    raise TypeError(f"Unsupported boundary type: {type(boundary).__name__}")


def load_boundary_file(filepath: str) -> Polygon | MultiPolygon | None:
    """Load a boundary from a .geojson/.json file. Raises OSError if unreadable."""
    with open(filepath, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            logger.warning("Invalid JSON in %s: %s", Path(filepath).name, exc)
            return None
    return boundary_from_geojson(data)
