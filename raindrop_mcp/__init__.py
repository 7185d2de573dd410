"""
Raindrop MCP Server

An MCP server that exposes Raindrop.io bookmarks and collections as tools.
"""

__version__ = "0.1.0"


def get_mcp():
    """Get the MCP server instance. Only imports when called."""
    from raindrop_mcp.server import mcp

    return mcp


__all__ = [
    "get_mcp",
    "__version__",
]
