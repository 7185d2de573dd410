"""create_bookmark / update_bookmark / delete_bookmark / bulk_edit_bookmarks tools."""

from typing import Any, Dict, List, Optional

from raindrop_mcp.clients.raindrop import RaindropError
from raindrop_mcp.server import mcp
from raindrop_mcp.tools import _helpers


def _bookmark_fields(
    title: Optional[str],
    excerpt: Optional[str],
    tags: Optional[List[str]],
    important: Optional[bool],
    collection_id: Optional[int],
) -> Dict[str, Any]:
    """Optional bookmark fields shared by create and update.

    Empty strings and a collection id of 0 count as not given; ``tags`` and
    ``important`` are sent whenever they are set, even when empty or False.
    """
    body: Dict[str, Any] = {}
    if title:
        body["title"] = title
    if excerpt:
        body["excerpt"] = excerpt
    if tags is not None:
        body["tags"] = tags
    if important is not None:
        body["important"] = important
    if collection_id:
        body["collection"] = _helpers._collection_ref(collection_id)
    return body


@mcp.tool(annotations=_helpers.CREATE_BOOKMARK_ANNOTATIONS)
def create_bookmark(
    link: str,
    title: Optional[str] = None,
    excerpt: Optional[str] = None,
    tags: Optional[List[str]] = None,
    collectionId: Optional[int] = None,
    important: Optional[bool] = None,
) -> str:
    """
    <usecase>Create a new bookmark.</usecase>
    <instructions>
    Raindrop fetches the page in the background to fill in anything not given
    (title, excerpt, cover). Without a collectionId the bookmark lands in
    Unsorted (-1).
    </instructions>
    <parameters>
    - link: URL to bookmark (required)
    - title: Bookmark title
    - excerpt: Bookmark description/excerpt
    - tags: Tags array
    - collectionId: Collection ID (default: -1 for unsorted)
    - important: Mark as favorite
    </parameters>
    <examples>
    - create_bookmark(link="https://docs.python.org/3/")
    - create_bookmark(link="https://peps.python.org/pep-0008/", tags=["python", "style"], important=True)
    </examples>
    """
    body: Dict[str, Any] = {"link": link, "pleaseParse": {}}
    body.update(_bookmark_fields(title, excerpt, tags, important, collectionId))

    data = _helpers.get_client().fetch("/raindrop", method="POST", body=body)
    return _helpers.make_response(data.get("item"))


@mcp.tool(annotations=_helpers.UPDATE_BOOKMARK_ANNOTATIONS)
def update_bookmark(
    id: int,
    link: Optional[str] = None,
    title: Optional[str] = None,
    excerpt: Optional[str] = None,
    tags: Optional[List[str]] = None,
    important: Optional[bool] = None,
    collectionId: Optional[int] = None,
) -> str:
    """
    <usecase>Update an existing bookmark.</usecase>
    <instructions>
    Only the fields you pass are changed. `tags` replaces the whole tag list.
    Pass collectionId to move the bookmark to another collection.
    </instructions>
    <parameters>
    - id: Bookmark ID (required)
    - link: URL
    - title: Title
    - excerpt: Description
    - tags: Tags
    - important: Favorite status
    - collectionId: Move to collection ID
    </parameters>
    <examples>
    - update_bookmark(id=123, title="Better title")
    - update_bookmark(id=123, collectionId=456)
    - update_bookmark(id=123, important=False)
    </examples>
    """
    body: Dict[str, Any] = {}
    if link:
        body["link"] = link
    body.update(_bookmark_fields(title, excerpt, tags, important, collectionId))

    data = _helpers.get_client().fetch(f"/raindrop/{id}", method="PUT", body=body)
    return _helpers.make_response(data.get("item"))


@mcp.tool(annotations=_helpers.DELETE_BOOKMARK_ANNOTATIONS)
def delete_bookmark(id: int) -> str:
    """
    <usecase>Delete a bookmark (moves to trash unless already in trash).</usecase>
    <instructions>
    Deleting a bookmark that is already in the trash (-99) removes it permanently.
    </instructions>
    <parameters>
    - id: Bookmark ID
    </parameters>
    <examples>
    - delete_bookmark(id=123)
    </examples>
    """
    data = _helpers.get_client().fetch(f"/raindrop/{id}", method="DELETE")
    result = data.get("result", True) if isinstance(data, dict) else True
    return _helpers.make_response({"result": result, "message": "Bookmark deleted"})


@mcp.tool(annotations=_helpers.BULK_EDIT_ANNOTATIONS)
def bulk_edit_bookmarks(
    collectionId: int,
    ids: Optional[List[int]] = None,
    important: Optional[bool] = None,
    tags: Optional[List[str]] = None,
    media: Optional[List[str]] = None,
    cover: Optional[str] = None,
    collection: Optional[int] = None,
    nested: Optional[bool] = None,
) -> str:
    """
    <usecase>Change many bookmarks of one collection at once.</usecase>
    <instructions>
    Without ids every bookmark in the collection is changed. Only the fields
    you pass are sent. `tags` and `media` replace the existing lists; pass an
    empty list to clear them. Pass `collection` to move the bookmarks.
    </instructions>
    <parameters>
    - collectionId: Collection whose bookmarks are changed (0 = all, -99 = trash)
    - ids: Only these bookmark IDs
    - important: Set or clear favorite status
    - tags: Tags to set
    - media: Media URLs to set
    - cover: Cover URL (`<screenshot>` takes a screenshot)
    - collection: Move the bookmarks to this collection ID
    - nested: Include bookmarks from nested collections
    </parameters>
    <examples>
    - bulk_edit_bookmarks(collectionId=-1, ids=[1, 2, 3], tags=["later"])
    - bulk_edit_bookmarks(collectionId=12345, important=True, nested=True)
    - bulk_edit_bookmarks(collectionId=-1, collection=12345)
    </examples>
    """
    body: Dict[str, Any] = {}
    if ids:
        body["ids"] = ids
    if important is not None:
        body["important"] = important
    if tags is not None:
        body["tags"] = tags
    if media is not None:
        body["media"] = media
    if cover:
        body["cover"] = cover
    if collection:
        body["collection"] = _helpers._collection_ref(collection)
    if nested is not None:
        body["nested"] = nested

    data = _helpers.get_client().fetch(f"/raindrops/{collectionId}", method="PUT", body=body)
    if not data.get("result"):
        raise RaindropError(data.get("errorMessage") or "Bulk edit failed")
    return _helpers.make_response({"result": True, "modified": data.get("modified")})
