"""create_collection / get_collections tools."""

from typing import Any, Dict, Optional

from raindrop_mcp.models import CollectionView
from raindrop_mcp.server import mcp
from raindrop_mcp.tools import _helpers


@mcp.tool(annotations=_helpers.CREATE_COLLECTION_ANNOTATIONS)
def create_collection(
    title: str,
    description: Optional[str] = None,
    public: Optional[bool] = None,
    view: Optional[CollectionView] = None,
) -> str:
    """
    <usecase>Create a new collection.</usecase>
    <parameters>
    - title: Collection title (required)
    - description: Collection description
    - public: Make the collection publicly accessible
    - view: Display style: list, simple, grid or masonry
    </parameters>
    <examples>
    - create_collection(title="Reading list")
    - create_collection(title="Design", view="masonry", public=True)
    </examples>
    """
    body: Dict[str, Any] = {"title": title}
    if description:
        body["description"] = description
    if public is not None:
        body["public"] = public
    if view:
        body["view"] = view

    data = _helpers.get_client().fetch("/collection", method="POST", body=body)
    return _helpers.make_response(data.get("item"))


@mcp.tool(annotations=_helpers.GET_COLLECTIONS_ANNOTATIONS)
def get_collections(includeChildren: bool = False) -> str:
    """
    <usecase>List your collections.</usecase>
    <instructions>
    Returns root collections. With includeChildren=True, nested collections
    follow the root ones; each nested collection names its parent in
    `parent.$id`. Use the `_id` values as collectionId in other tools.
    </instructions>
    <parameters>
    - includeChildren: Also list nested collections (default: False)
    </parameters>
    <examples>
    - get_collections()
    - get_collections(includeChildren=True)
    </examples>
    """
    client = _helpers.get_client()
    items = list(client.fetch("/collections").get("items") or [])
    if includeChildren:
        items.extend(client.fetch("/collections/childrens").get("items") or [])

    return _helpers.make_response({"count": len(items), "items": items})
