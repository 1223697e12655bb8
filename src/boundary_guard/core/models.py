"""Pydantic result and policy models for the validation functions."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from boundary_guard.models import GeoPoint

PARTIAL_OVERLAP_THRESHOLD = 90.0


class ReasonCode(str, Enum):
    """Why a validation passed or failed. Codes only, no user-facing text."""
    OK = "ok"
    OUTSIDE_BOUNDARY = "outside_boundary"
    BOUNDARY_UNAVAILABLE = "boundary_unavailable"
    POLYGON_REQUIRED = "polygon_required"
    PARTIAL_OVERLAP_ACCEPTED = "partial_overlap_accepted"


class ValidationResult(BaseModel):
    """Return type for every validator entry point."""
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    reason: ReasonCode
    outside_vertices: list[GeoPoint] = Field(default_factory=list)
    percentage_inside: float = Field(default=100.0, ge=0, le=100)
    nearest_point: Optional[GeoPoint] = None
    distance_outside_m: Optional[float] = Field(default=None, ge=0)


class ValidationOptions(BaseModel):
    """Caller-supplied policy for validate_survey_data."""
    model_config = ConfigDict(validate_assignment=True)

    require_polygon: bool = False
    allow_partial_overlap: bool = False
    partial_overlap_threshold: float = Field(default=PARTIAL_OVERLAP_THRESHOLD, ge=0, le=100)
