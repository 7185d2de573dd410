"""search_bookmarks tool: search across all bookmarks."""

from typing import Optional

from raindrop_mcp.models import ALL_COLLECTION_ID
from raindrop_mcp.server import mcp
from raindrop_mcp.tools import _helpers


@mcp.tool(annotations=_helpers.SEARCH_ANNOTATIONS)
def search_bookmarks(
    query: str, page: Optional[int] = None, perPage: Optional[int] = None
) -> str:
    """
    <usecase>Search all bookmarks with advanced query.</usecase>
    <instructions>
    The query supports Raindrop search operators such as `tag:`, `important:`,
    `type:`, `domain:` and `created:`; terms combine with AND by default.
    Searches every collection except the trash.
    </instructions>
    <parameters>
    - query: Search query (supports operators like tag:, important:, etc)
    - page: Page number
    - perPage: Results per page (max 50)
    </parameters>
    <examples>
    - search_bookmarks("tag:python")
    - search_bookmarks("important:true", perPage=50)
    - search_bookmarks("asyncio", page=2)
    </examples>
    """
    params = {}
    if query:
        params["search"] = query
    params.update(_helpers._page_params(page, perPage))

    path = _helpers._with_query(f"/raindrops/{ALL_COLLECTION_ID}", params)
    data = _helpers.get_client().fetch(path)
    return _helpers.make_response(_helpers._list_result(data))
