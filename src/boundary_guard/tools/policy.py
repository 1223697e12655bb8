"""Policy configuration tool: set_validation_policy."""

from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from ..state import state


def register_policy_tools(mcp: FastMCP):

    @mcp.tool()
    def set_validation_policy(
        require_polygon: bool | None = None,
        allow_partial_overlap: bool | None = None,
        partial_overlap_threshold: float | None = None,
    ) -> str:
        """Set the survey validation policy used by validate_survey and validate_gpx.

        Can be called any time; applies to subsequent validations.

        Args:
            require_polygon: Reject submissions that carry no drawn survey polygon.
            allow_partial_overlap: Accept a polygon whose vertices are mostly inside.
            partial_overlap_threshold: Minimum percentage of vertices inside (0-100,
                default 90) for a partial overlap to be accepted.
        """
        p = state.options
        if require_polygon is not None:
            p.require_polygon = require_polygon
        if allow_partial_overlap is not None:
            p.allow_partial_overlap = allow_partial_overlap
        if partial_overlap_threshold is not None:
            try:
                p.partial_overlap_threshold = partial_overlap_threshold
            except ValidationError as e:
                return f"Error: {e}"

        return (
            f"Policy: require_polygon={p.require_polygon}, "
            f"allow_partial_overlap={p.allow_partial_overlap}, "
            f"partial_overlap_threshold={p.partial_overlap_threshold}%"
        )
