"""
Raindrop MCP Server initialization.
"""

import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.fastmcp import FastMCP


def _build_instructions() -> str:
    """Build server instructions."""
    return """# Raindrop MCP Server

Manage bookmarks and collections in your Raindrop.io account.

## Available Tools

- `get_bookmarks(collectionId, search, page, perPage)` - List bookmarks in a collection
- `get_bookmark(id)` - Get a single bookmark
- `search_bookmarks(query, page, perPage)` - Search all bookmarks
- `create_bookmark(link, title, excerpt, tags, collectionId, important)` - Save a new bookmark
- `update_bookmark(id, ...)` - Change fields of an existing bookmark
- `delete_bookmark(id)` - Move a bookmark to the trash
- `bulk_edit_bookmarks(collectionId, ids, ...)` - Change many bookmarks at once
- `create_collection(title, description, public, view)` - Create a collection
- `get_collections(includeChildren)` - List collections
- `get_tags(collectionId)` - List tags with usage counts
- `manage_tags(operation, tagNames, newName, collectionId)` - Rename, merge or delete tags
- `get_highlights(collectionId, page, perPage)` - List highlights
- `manage_highlights(operation, bookmarkId, ...)` - Create, update or delete a highlight
- `raindrop_status()` - Check connection and authentication

## MCP Resources

- `mcp://collection/{id}` - a collection as JSON
- `mcp://raindrop/{id}` - a bookmark as JSON
- `mcp://user/profile` - the account behind the token

## Collection IDs

- `0` - all bookmarks
- `-1` - unsorted bookmarks
- `-99` - trash

## Recommended Workflows

### Finding Bookmarks
1. Use `search_bookmarks("tag:python")` to search with Raindrop operators
2. Use `get_bookmark(id)` to see every field of a result

### Organizing
1. Use `get_collections()` to find collection IDs
2. Use `update_bookmark(id, collectionId=...)` to move a bookmark

### Cleaning Up Tags
1. Use `get_tags()` to spot duplicates and typos
2. Use `manage_tags("merge", [...], newName=...)` to combine them

Pages hold at most 50 bookmarks; request the next page with `page`.
"""


@asynccontextmanager
async def lifespan(app: FastMCP) -> AsyncIterator[None]:
    """Lifespan context manager for the MCP server.

    Lifecycle lines go straight to stderr so LOG_LEVEL cannot hide them.
    """
    print("Raindrop MCP server started successfully", file=sys.stderr, flush=True)
    try:
        yield
    finally:
        print("Raindrop MCP server stopped", file=sys.stderr, flush=True)


# Initialize FastMCP server with lifespan and instructions
mcp = FastMCP("raindrop-mcp", instructions=_build_instructions(), lifespan=lifespan)

# Import tools and resources to register them
from raindrop_mcp import (  # noqa: E402
    resources,  # noqa: F401
    tools,  # noqa: F401
)


def run():
    """Run the MCP server over stdio."""
    mcp.run()
