"""raindrop_status tool: check connection and authentication."""

from raindrop_mcp.server import mcp
from raindrop_mcp.tools import _helpers


@mcp.tool(annotations=_helpers.STATUS_ANNOTATIONS)
def raindrop_status() -> str:
    """
    <usecase>Check connection status and authentication with Raindrop.io.</usecase>
    <instructions>
    Returns authentication status and diagnostic information.
    Use this to verify your token or troubleshoot failing tools.
    </instructions>
    <examples>
    - raindrop_status()
    </examples>
    """
    from raindrop_mcp import __version__

    tool_names = sorted(tool.name for tool in mcp._tool_manager.list_tools())

    try:
        client = _helpers.get_client()
        user = client.fetch("/user").get("user") or {}

        result = {
            "authenticated": True,
            "status": "connected",
            "user": {
                "id": user.get("_id"),
                "name": user.get("fullName"),
                "email": user.get("email"),
                "pro": user.get("pro", False),
            },
            "version": __version__,
            "base_url": client.config.base_url,
            "tools": tool_names,
        }
    except Exception as e:
        result = {
            "authenticated": False,
            "status": "error",
            "error": str(e),
            "version": __version__,
            "tools": tool_names,
        }

    return _helpers.make_response(result)
