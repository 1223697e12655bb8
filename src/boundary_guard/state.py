"""Session state for the boundary-guard MCP server.

Holds the agent's assigned boundary as supplied by the caller, its cached
bounding box, and the survey validation policy. The validation core never
reads this; tools pass the boundary in explicitly on each call.
"""

from typing import Optional

from pydantic import BaseModel, Field

from boundary_guard.core.coords import bounding_box, boundary_center
from boundary_guard.core.geodesic import boundary_area
from boundary_guard.core.models import ValidationOptions, ValidationResult
from boundary_guard.models import Boundary, BoundingBox


class AssignedBoundary(BaseModel):
    """A loaded jurisdiction plus where it came from."""

    geometry: Boundary
    name: str = ""
    source: str = ""
    bbox: Optional[BoundingBox] = None

    @classmethod
    def from_geometry(cls, geometry, name: str = "", source: str = "") -> "AssignedBoundary":
        return cls(geometry=geometry, name=name, source=source, bbox=bounding_box(geometry))


class SessionState(BaseModel):
    assigned: Optional[AssignedBoundary] = None
    options: ValidationOptions = Field(default_factory=ValidationOptions)
    last_result: Optional[ValidationResult] = None

    @property
    def boundary(self):
        """The assigned geometry, or None when nothing usable has been loaded."""
        return self.assigned.geometry if self.assigned is not None else None

    @property
    def bbox(self) -> Optional[BoundingBox]:
        return self.assigned.bbox if self.assigned is not None else None

    def clear_boundary(self) -> None:
        self.assigned = None
        self.last_result = None

    def summary(self) -> dict:
        boundary_info = {"loaded": False}
        if self.assigned is not None:
            geometry = self.assigned.geometry
            center = boundary_center(geometry)
            boundary_info = {
                "loaded": True,
                "name": self.assigned.name,
                "source": self.assigned.source,
                "type": geometry.type,
                "area_m2": round(boundary_area(geometry), 1),
                "bbox": self.assigned.bbox.model_dump() if self.assigned.bbox else None,
                "center": center.model_dump() if center else None,
            }
        return {
            "boundary": boundary_info,
            "policy": self.options.model_dump(),
            "last_result": (
                self.last_result.model_dump(mode="json") if self.last_result else None
            ),
        }


# Global session state, one per MCP server process
state = SessionState()
