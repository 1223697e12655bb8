"""Tests for the get_status tool and state://session MCP resource."""
import json
from unittest.mock import MagicMock


def test_state_resource_is_registered():
    from boundary_guard.server import mcp

    resources = {str(r.uri): r for r in mcp._resource_manager._resources.values()}
    assert "state://session" in resources, (
        f"state://session not registered. Registered: {list(resources.keys())}"
    )


def test_state_resource_content_matches_summary():
    """Resource content should return valid JSON with expected keys."""
    from boundary_guard.server import mcp
    from boundary_guard.state import state

    resources = {str(r.uri): r for r in mcp._resource_manager._resources.values()}
    resource = resources.get("state://session")
    assert resource is not None

    result = resource.fn()
    parsed = json.loads(result)
    assert parsed.keys() == state.summary().keys()


def test_get_status_returns_summary():
    from boundary_guard.tools.status import register_status_tools
    from boundary_guard.state import state

    tools = {}
    mock_mcp = MagicMock()
    def capture(**kwargs):
        def decorator(fn):
            tools[fn.__name__] = fn
            return fn
        return decorator
    mock_mcp.tool = capture
    register_status_tools(mock_mcp)

    state.clear_boundary()
    parsed = json.loads(tools["get_status"]())
    assert parsed["boundary"] == {"loaded": False}
    assert "policy" in parsed
