"""Jurisdiction checks for reported GPS points and drawn survey polygons.

Every entry point is a pure function returning a ``ValidationResult``. A
missing boundary, or anything that is not a ``Polygon`` or ``MultiPolygon``,
is ``BOUNDARY_UNAVAILABLE`` and never treated as unrestricted.
"""

import logging
from typing import Optional

from ..models import BoundingBox, GeoPoint, MultiPolygon, Polygon, Ring
from .containment import point_in_boundary
from .geodesic import EARTH_RADIUS_M
from .models import ReasonCode, ValidationOptions, ValidationResult
from .snapper import nearest_edge_point

logger = logging.getLogger(__name__)


def _missing(boundary) -> bool:
    return not isinstance(boundary, (Polygon, MultiPolygon))


def _unavailable(boundary) -> ValidationResult:
    if boundary is not None:
        logger.warning("Unusable boundary of type %s", type(boundary).__name__)
    return ValidationResult(is_valid=False, reason=ReasonCode.BOUNDARY_UNAVAILABLE)


def validate_point(
    p: GeoPoint,
    boundary,
    box: BoundingBox | None = None,
    radius_m: float = EARTH_RADIUS_M,
) -> ValidationResult:
    """Check a single reported point against the assigned boundary.

    When the point is outside, the result also carries the nearest point on
    the boundary's outer edges and the great-circle distance to it.
    """
    if _missing(boundary):
        return _unavailable(boundary)

    if point_in_boundary(p, boundary, box):
        return ValidationResult(is_valid=True, reason=ReasonCode.OK)

    nearest = nearest_edge_point(p, boundary, radius_m)
    logger.debug("Point (%s, %s) outside boundary", p.latitude, p.longitude)
    return ValidationResult(
        is_valid=False,
        reason=ReasonCode.OUTSIDE_BOUNDARY,
        nearest_point=nearest[0] if nearest else None,
        distance_outside_m=nearest[1] if nearest else None,
    )


def validate_polygon(
    ring: Ring, boundary, box: BoundingBox | None = None
) -> ValidationResult:
    """Check every vertex of a drawn survey ring against the boundary.

    Only the ring's own vertices are tested; edges crossing out and back in
    between two inside vertices are not detected. An empty ring is invalid.
    """
    if _missing(boundary):
        return _unavailable(boundary)

    vertices = [pos.to_geo_point() for pos in ring.positions]
    if not vertices:
        return ValidationResult(
            is_valid=False, reason=ReasonCode.OUTSIDE_BOUNDARY, percentage_inside=0.0
        )

    outside = [v for v in vertices if not point_in_boundary(v, boundary, box)]
    n = len(vertices)
    percentage = (n - len(outside)) * 100.0 / n

    if outside:
        logger.debug("%d of %d survey vertices outside boundary", len(outside), n)
        return ValidationResult(
            is_valid=False,
            reason=ReasonCode.OUTSIDE_BOUNDARY,
            outside_vertices=outside,
            percentage_inside=percentage,
        )
    return ValidationResult(is_valid=True, reason=ReasonCode.OK)


def validate_survey_data(
    point: Optional[GeoPoint],
    polygon: Optional[Ring],
    boundary,
    options: ValidationOptions | None = None,
    box: BoundingBox | None = None,
) -> ValidationResult:
    """Combined decision for a survey submission.

    Order matters: a missing boundary wins, then a failing GPS point, then the
    polygon check (with the partial-overlap tolerance), then the
    polygon-required policy.
    """
    options = options or ValidationOptions()

    if _missing(boundary):
        return _unavailable(boundary)

    if point is not None:
        point_result = validate_point(point, boundary, box)
        if not point_result.is_valid:
            return point_result

    if polygon is not None:
        polygon_result = validate_polygon(polygon, boundary, box)
        if not polygon_result.is_valid:
            if (
                options.allow_partial_overlap
                and polygon_result.outside_vertices
                and polygon_result.percentage_inside >= options.partial_overlap_threshold
            ):
                logger.debug(
                    "Accepting partial overlap at %.1f%% (threshold %.1f%%)",
                    polygon_result.percentage_inside,
                    options.partial_overlap_threshold,
                )
                return polygon_result.model_copy(
                    update={"is_valid": True, "reason": ReasonCode.PARTIAL_OVERLAP_ACCEPTED}
                )
            return polygon_result
    elif options.require_polygon:
        return ValidationResult(is_valid=False, reason=ReasonCode.POLYGON_REQUIRED)

    return ValidationResult(is_valid=True, reason=ReasonCode.OK)
