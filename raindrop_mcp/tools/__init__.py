"""
MCP Tools for Raindrop.io bookmark management.

Each tool maps its arguments to a single REST request (``get_collections``
makes two when nested collections are requested) and returns the response
as indented JSON text.
"""

# Import tool modules to trigger registration with the MCP server
from raindrop_mcp.tools import (  # noqa: F401
    browse,
    collections,
    edit,
    highlights,
    search,
    status,
    tags,
)
