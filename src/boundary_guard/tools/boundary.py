"""Boundary tools: load_boundary, clear_boundary, describe_boundary."""

import json
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state, AssignedBoundary
from ..core.coords import polygons_of
from ..core.geodesic import boundary_area
from ..core.geojson import boundary_from_geojson, boundary_to_geojson, load_boundary_file
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def register_boundary_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_boundary(
        file_path: str | None = None,
        geojson: str | None = None,
        name: str = "",
    ) -> str:
        """Load the agent's assigned jurisdiction from GeoJSON.

        Provide either a path to a .geojson file or the GeoJSON text itself.
        Accepts a Polygon/MultiPolygon geometry, a Feature, or a
        FeatureCollection (the first areal feature is used).

        **Next:** validate_point, validate_polygon, validate_survey or snap_point.

        Args:
            file_path: Absolute path to a GeoJSON file.
            geojson: GeoJSON text (geometry, Feature or FeatureCollection).
            name: Optional display name for the jurisdiction (e.g. ward name).
        """
        if file_path:
            path = Path(file_path)
            if not path.exists():
                return f"Error: Boundary file not found at {path}"
            geometry = load_boundary_file(str(path))
            source = str(path)
        elif geojson:
            try:
                data = json.loads(geojson)
            except json.JSONDecodeError as e:
                return f"Error: Invalid GeoJSON text: {e}"
            geometry = boundary_from_geojson(data)
            source = "inline"
        else:
            return "Error: Provide either file_path or geojson."

        if geometry is None:
            state.clear_boundary()
            return (
                "Error: No usable Polygon or MultiPolygon found. "
                "Validations will report boundary_unavailable until a boundary is loaded."
            )

        state.assigned = AssignedBoundary.from_geometry(geometry, name=name, source=source)
        state.last_result = None
        logger.info("Loaded %s boundary %r from %s", geometry.type, name, source)

        message = (
            f"Boundary loaded: {geometry.type} with {len(polygons_of(geometry))} polygon(s), "
            f"area ~{boundary_area(geometry) / 1_000_000:.3f} km²."
        )
        b = state.assigned.bbox
        if b is not None:
            message += f" Extent: N={b.north:.6f}, S={b.south:.6f}, E={b.east:.6f}, W={b.west:.6f}"
        return message

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def clear_boundary() -> str:
        """Forget the assigned boundary. Subsequent validations report boundary_unavailable."""
        state.clear_boundary()
        return "Boundary cleared."

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def describe_boundary(include_geometry: bool = False) -> str:
        """Describe the assigned boundary: type, area, extent and center.

        **Requires:** load_boundary first.

        Args:
            include_geometry: Also return the boundary as GeoJSON (closed rings).
        """
        try:
            require_state(state, boundary=True)
        except ValueError as e:
            return f"Error: {e}"

        info = state.summary()["boundary"]
        if include_geometry:
            info["geometry"] = boundary_to_geojson(state.boundary)
        return json.dumps(info, indent=2)
