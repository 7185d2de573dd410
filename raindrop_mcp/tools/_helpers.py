"""
Shared helpers and re-exports for MCP tool modules.

Tool modules access commonly-patched names through this module
(e.g., ``_helpers.get_client()``) so that a single
``unittest.mock.patch`` target works for all tools.
"""

from typing import Any, Dict, Optional
from urllib.parse import urlencode

from mcp.types import ToolAnnotations

# --- Re-exports (commonly patched in tests) ---
# Tool modules access these via ``_helpers.X()`` so tests can patch once
# at ``raindrop_mcp.tools._helpers.X``.

from raindrop_mcp.api import get_client  # noqa: F401
from raindrop_mcp.models import MAX_PER_PAGE
from raindrop_mcp.responses import make_response  # noqa: F401


# --- Helper functions ---


def _with_query(path: str, params: Dict[str, Any]) -> str:
    """Append ``params`` to ``path`` as a query string, if there are any."""
    if not params:
        return path
    return f"{path}?{urlencode(params)}"


def _page_params(page: Optional[int], per_page: Optional[int]) -> Dict[str, Any]:
    """Paging query parameters; 0 and None both mean "not given"."""
    params: Dict[str, Any] = {}
    if page:
        params["page"] = page
    if per_page:
        params["perpage"] = min(per_page, MAX_PER_PAGE)
    return params


def _collection_ref(collection_id: int) -> Dict[str, int]:
    """Body fragment that places a bookmark in a collection."""
    return {"$id": collection_id}


def _list_result(data: Dict[str, Any]) -> Dict[str, Any]:
    """Reshape a list envelope into ``{count, items}``."""
    return {
        "count": data.get("count") or 0,
        "items": data.get("items") or [],
    }


# --- Tool annotations ---

# Base annotations for read-only operations
_READ_ONLY = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": False,  # Private account, not open world
}

_WRITE = {
    "readOnlyHint": False,
    "destructiveHint": False,
    "idempotentHint": False,
    "openWorldHint": False,
}

GET_BOOKMARKS_ANNOTATIONS = ToolAnnotations(title="Get Bookmarks", **_READ_ONLY)

GET_BOOKMARK_ANNOTATIONS = ToolAnnotations(title="Get Bookmark", **_READ_ONLY)

SEARCH_ANNOTATIONS = ToolAnnotations(title="Search Bookmarks", **_READ_ONLY)

CREATE_BOOKMARK_ANNOTATIONS = ToolAnnotations(title="Create Bookmark", **_WRITE)

UPDATE_BOOKMARK_ANNOTATIONS = ToolAnnotations(
    title="Update Bookmark",
    **{**_WRITE, "idempotentHint": True},
)

DELETE_BOOKMARK_ANNOTATIONS = ToolAnnotations(
    title="Delete Bookmark",
    **{**_WRITE, "destructiveHint": True},
)

CREATE_COLLECTION_ANNOTATIONS = ToolAnnotations(title="Create Collection", **_WRITE)

GET_COLLECTIONS_ANNOTATIONS = ToolAnnotations(title="Get Collections", **_READ_ONLY)

GET_TAGS_ANNOTATIONS = ToolAnnotations(title="Get Tags", **_READ_ONLY)

STATUS_ANNOTATIONS = ToolAnnotations(title="Check Raindrop Connection", **_READ_ONLY)

MANAGE_TAGS_ANNOTATIONS = ToolAnnotations(
    title="Manage Tags",
    **{**_WRITE, "destructiveHint": True},
)

GET_HIGHLIGHTS_ANNOTATIONS = ToolAnnotations(title="Get Highlights", **_READ_ONLY)

MANAGE_HIGHLIGHTS_ANNOTATIONS = ToolAnnotations(
    title="Manage Highlights",
    **{**_WRITE, "destructiveHint": True},
)

BULK_EDIT_ANNOTATIONS = ToolAnnotations(
    title="Bulk Edit Bookmarks",
    **{**_WRITE, "idempotentHint": True},
)
