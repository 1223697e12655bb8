"""Validation tools: validate_point, validate_polygon, validate_survey, validate_gpx, snap_point."""

import json
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..models import GeoPoint
from ..core.coords import lat_lngs_to_ring
from ..core.geodesic import distance
from ..core.gpx import parse_survey_gpx
from ..core.models import ValidationResult
from ..core.snapper import snap_to_boundary
from ..core.validator import validate_point as check_point
from ..core.validator import validate_polygon as check_polygon
from ..core.validator import validate_survey_data
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def _report(result: ValidationResult) -> str:
    state.last_result = result
    return json.dumps(result.model_dump(mode="json"), indent=2)


def register_validate_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def validate_point(latitude: float, longitude: float) -> str:
        """Check whether a reported GPS point lies inside the assigned boundary.

        Without a loaded boundary the result is always invalid with reason
        boundary_unavailable. When outside, the result includes the nearest
        point on the boundary and the distance to it in meters.

        Args:
            latitude: Reported latitude (degrees).
            longitude: Reported longitude (degrees).
        """
        point = GeoPoint(latitude=latitude, longitude=longitude)
        return _report(check_point(point, state.boundary, state.bbox))

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def validate_polygon(vertices: list[GeoPoint]) -> str:
        """Check that every vertex of a drawn survey polygon is inside the boundary.

        Reports the vertices that fall outside and the percentage inside.
        The closing vertex may be repeated or omitted.

        Args:
            vertices: Polygon vertices as {latitude, longitude} objects.
        """
        ring = lat_lngs_to_ring(vertices)
        return _report(check_polygon(ring, state.boundary, state.bbox))

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def validate_survey(
        latitude: float | None = None,
        longitude: float | None = None,
        vertices: list[GeoPoint] | None = None,
    ) -> str:
        """Validate a survey submission (GPS point and/or drawn polygon) under the session policy.

        A failing GPS point always wins. A polygon may be accepted as a partial
        overlap if the policy allows it. See set_validation_policy.

        Args:
            latitude/longitude: Reported GPS point (both or neither).
            vertices: Drawn survey polygon as {latitude, longitude} objects.
        """
        if (latitude is None) != (longitude is None):
            return "Error: Provide both latitude and longitude, or neither."

        point = None
        if latitude is not None:
            point = GeoPoint(latitude=latitude, longitude=longitude)
        ring = lat_lngs_to_ring(vertices) if vertices is not None else None

        return _report(
            validate_survey_data(point, ring, state.boundary, state.options, state.bbox)
        )

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def validate_gpx(file_path: str) -> str:
        """Validate a survey recorded as a GPX file under the session policy.

        The first waypoint is taken as the reported GPS point and the first
        track as the drawn survey outline.

        Args:
            file_path: Absolute path to a .gpx file.
        """
        path = Path(file_path)
        if not path.exists():
            return f"Error: GPX file not found at {path}"

        survey = parse_survey_gpx(str(path))
        if survey["point"] is None and survey["ring"] is None:
            return "Error: GPX file has no waypoints or track points."

        logger.debug("Validating GPX survey %s (track=%r)", path.name, survey["track_name"])
        return _report(
            validate_survey_data(
                survey["point"], survey["ring"], state.boundary, state.options, state.bbox
            )
        )

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def snap_point(latitude: float, longitude: float) -> str:
        """Return the nearest point inside-or-on the assigned boundary.

        Points already inside are returned unchanged. Outside points are
        projected onto the nearest outer edge (holes are never snap targets).

        **Requires:** load_boundary first.

        Args:
            latitude: Reported latitude (degrees).
            longitude: Reported longitude (degrees).
        """
        try:
            require_state(state, boundary=True)
        except ValueError as e:
            return f"Error: {e}"

        point = GeoPoint(latitude=latitude, longitude=longitude)
        snapped = snap_to_boundary(point, state.boundary, state.bbox)
        return json.dumps(
            {
                "original": point.model_dump(),
                "snapped": snapped.model_dump(),
                "moved": snapped != point,
                "distance_m": round(distance(point, snapped), 2),
            },
            indent=2,
        )
