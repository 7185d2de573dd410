"""
MCP Resources for direct Raindrop.io access.

Provides:
- mcp://collection/{id} - a collection as JSON
- mcp://raindrop/{id} - a bookmark as JSON
- mcp://user/profile - the account the token belongs to
"""

import logging

from raindrop_mcp.server import mcp
from raindrop_mcp.tools import _helpers

logger = logging.getLogger(__name__)

_JSON = "application/json"


def _parse_id(kind: str, raw: str) -> int:
    """Turn the id segment of a resource URI into an int."""
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid {kind} ID: {raw}") from None


@mcp.resource(
    "mcp://collection/{collection_id}",
    name="collection",
    description="A Raindrop collection by ID (e.g. mcp://collection/123456)",
    mime_type=_JSON,
)
def collection_resource(collection_id: str) -> str:
    path = f"/collection/{_parse_id('collection', collection_id)}"
    logger.debug("Reading resource %s", path)
    data = _helpers.get_client().fetch(path)
    return _helpers.make_response({"collection": data.get("item")})


@mcp.resource(
    "mcp://raindrop/{raindrop_id}",
    name="raindrop",
    description="A Raindrop bookmark by ID (e.g. mcp://raindrop/987654)",
    mime_type=_JSON,
)
def raindrop_resource(raindrop_id: str) -> str:
    path = f"/raindrop/{_parse_id('raindrop', raindrop_id)}"
    logger.debug("Reading resource %s", path)
    data = _helpers.get_client().fetch(path)
    return _helpers.make_response({"raindrop": data.get("item")})


@mcp.resource(
    "mcp://user/profile",
    name="user_profile",
    description="The Raindrop.io account behind the access token",
    mime_type=_JSON,
)
def user_profile() -> str:
    data = _helpers.get_client().fetch("/user")
    return _helpers.make_response({"profile": data.get("user")})
