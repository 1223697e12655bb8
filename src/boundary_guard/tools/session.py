"""Session persistence tools: save_session, load_session."""

import json
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from ..state import state, AssignedBoundary
from ..core.geojson import boundary_from_geojson, boundary_to_geojson
from ..core.models import ValidationOptions

logger = logging.getLogger(__name__)


def _default_path() -> Path:
    return Path.home() / ".cache" / "boundary-guard" / "session.json"


def register_session_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def save_session(path: str | None = None) -> str:
        """Save the assigned boundary and validation policy to a JSON file.

        Does NOT save the last validation result.
        **Next:** load_session in a future session to restore this configuration.

        Args:
            path: Where to save. Default: ~/.cache/boundary-guard/session.json
        """
        save_path = Path(path) if path else _default_path()
        save_path.parent.mkdir(parents=True, exist_ok=True)

        data: dict = {
            "boundary": None,
            "policy": state.options.model_dump(),
        }

        if state.assigned is not None:
            data["boundary"] = {
                "name": state.assigned.name,
                "source": state.assigned.source,
                "geometry": boundary_to_geojson(state.assigned.geometry),
            }

        with open(save_path, "w") as f:
            json.dump(data, f, indent=2)

        logger.info("Session saved to %s", save_path)
        return f"Session saved to {save_path}"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_session(path: str | None = None) -> str:
        """Load a previously saved boundary and validation policy.

        Replaces the current boundary (or clears it if the file has none) and
        discards the last validation result.

        Args:
            path: Path to load from. Default: ~/.cache/boundary-guard/session.json
        """
        load_path = Path(path) if path else _default_path()

        if not load_path.exists():
            return f"Error: Session file not found at {load_path}"

        try:
            with open(load_path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            return f"Error: Invalid session file: {e}"
        if not isinstance(data, dict):
            return "Error: Invalid session file: expected a JSON object"

        if data.get("policy"):
            try:
                state.options = ValidationOptions(**data["policy"])
            except (ValidationError, TypeError) as e:
                return f"Error: Invalid policy in session file: {e}"

        state.clear_boundary()
        saved = data.get("boundary")
        if isinstance(saved, dict):
            geometry = boundary_from_geojson(saved.get("geometry"))
            if geometry is not None:
                state.assigned = AssignedBoundary.from_geometry(
                    geometry, name=saved.get("name", ""), source=saved.get("source", "")
                )

        restored = ["policy"]
        if state.assigned is not None:
            restored.insert(0, f"boundary {state.assigned.name!r}" if state.assigned.name else "boundary")

        logger.info("Session loaded from %s", load_path)
        return f"Session restored from {load_path}. Restored: {', '.join(restored)}."
