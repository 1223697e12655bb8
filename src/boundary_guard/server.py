"""MCP server for boundary-guard.

Registers all tools and runs via stdio transport.
"""

import json

from mcp.server.fastmcp import FastMCP

from .state import state
from .tools.boundary import register_boundary_tools
from .tools.policy import register_policy_tools
from .tools.validate import register_validate_tools
from .tools.session import register_session_tools
from .tools.status import register_status_tools

mcp = FastMCP(
    "boundary-guard",
    instructions=(
        "Check whether field survey GPS points and drawn polygons fall inside "
        "an agent's assigned administrative boundary"
    ),
)

# Register all tool groups
register_boundary_tools(mcp)
register_policy_tools(mcp)
register_validate_tools(mcp)
register_session_tools(mcp)
register_status_tools(mcp)


@mcp.resource("state://session")
def session_state() -> str:
    """Current session summary as JSON."""
    return json.dumps(state.summary(), indent=2)


def main():
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
