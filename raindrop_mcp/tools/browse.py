"""get_bookmarks / get_bookmark tools: read bookmarks from a collection."""

from typing import Optional

from raindrop_mcp.models import ALL_COLLECTION_ID
from raindrop_mcp.server import mcp
from raindrop_mcp.tools import _helpers


@mcp.tool(annotations=_helpers.GET_BOOKMARKS_ANNOTATIONS)
def get_bookmarks(
    collectionId: Optional[int] = None,
    search: Optional[str] = None,
    page: Optional[int] = None,
    perPage: Optional[int] = None,
) -> str:
    """
    <usecase>Get bookmarks from a collection. Use collectionId=0 for all bookmarks, -1 for unsorted, -99 for trash.</usecase>
    <instructions>
    Returns one page of bookmarks plus the total count for the collection.
    Pages are numbered from 0; at most 50 bookmarks are returned per page.
    </instructions>
    <parameters>
    - collectionId: Collection ID (0=all, -1=unsorted, -99=trash; default 0)
    - search: Search query
    - page: Page number (default 0)
    - perPage: Items per page (max 50, default 25)
    </parameters>
    <examples>
    - get_bookmarks()  # First page of all bookmarks
    - get_bookmarks(collectionId=-1, perPage=50)
    - get_bookmarks(collectionId=12345, search="python", page=1)
    </examples>
    """
    collection_id = collectionId or ALL_COLLECTION_ID

    params = {}
    if search:
        params["search"] = search
    params.update(_helpers._page_params(page, perPage))

    path = _helpers._with_query(f"/raindrops/{collection_id}", params)
    data = _helpers.get_client().fetch(path)
    return _helpers.make_response(_helpers._list_result(data))


@mcp.tool(annotations=_helpers.GET_BOOKMARK_ANNOTATIONS)
def get_bookmark(id: int) -> str:
    """
    <usecase>Get a single bookmark by ID.</usecase>
    <parameters>
    - id: Bookmark ID
    </parameters>
    <examples>
    - get_bookmark(id=123456789)
    </examples>
    """
    data = _helpers.get_client().fetch(f"/raindrop/{id}")
    return _helpers.make_response(data.get("item"))
