"""Prerequisite checking helpers for MCP tools."""


def require_state(state, *, boundary: bool = False) -> None:
    """Raise ValueError with a descriptive message if required state is not set.

    Usage in a tool:
        try:
            require_state(state, boundary=True)
        except ValueError as e:
            return f"Error: {e}"
    """
    if boundary and state.assigned is None:
        raise ValueError(
            "Load an assigned boundary first with load_boundary."
        )
