"""get_tags / manage_tags tools: list, rename, merge and delete tags."""

from typing import Any, Dict, List, Optional

from raindrop_mcp.models import ALL_COLLECTION_ID, TagOperation
from raindrop_mcp.server import mcp
from raindrop_mcp.tools import _helpers


@mcp.tool(annotations=_helpers.GET_TAGS_ANNOTATIONS)
def get_tags(collectionId: Optional[int] = None) -> str:
    """
    <usecase>List tags and how many bookmarks use each.</usecase>
    <parameters>
    - collectionId: Only count bookmarks in this collection (default: all)
    </parameters>
    <examples>
    - get_tags()
    - get_tags(collectionId=12345)
    </examples>
    """
    path = f"/tags/{collectionId}" if collectionId else "/tags"
    data = _helpers.get_client().fetch(path)
    items = data.get("items") or []
    return _helpers.make_response({"count": len(items), "items": items})


@mcp.tool(annotations=_helpers.MANAGE_TAGS_ANNOTATIONS)
def manage_tags(
    operation: TagOperation,
    tagNames: List[str],
    newName: Optional[str] = None,
    collectionId: Optional[int] = None,
) -> str:
    """
    <usecase>Rename, merge or delete tags.</usecase>
    <instructions>
    - rename: give exactly one tag in tagNames and the new name in newName
    - merge: every tag in tagNames is replaced by newName
    - delete: every tag in tagNames is removed from its bookmarks
    Without a collectionId the change applies to all bookmarks.
    Use get_tags() first to see the exact tag names.
    </instructions>
    <parameters>
    - operation: "rename", "merge" or "delete"
    - tagNames: Tags to act on
    - newName: Target name (rename and merge only)
    - collectionId: Limit the change to one collection
    </parameters>
    <examples>
    - manage_tags("rename", ["pyhton"], newName="python")
    - manage_tags("merge", ["js", "javascript"], newName="javascript")
    - manage_tags("delete", ["temp"], collectionId=12345)
    </examples>
    """
    if not tagNames:
        raise ValueError("tagNames must name at least one tag")

    path = f"/tags/{collectionId or ALL_COLLECTION_ID}"
    client = _helpers.get_client()

    if operation == "delete":
        data = client.fetch(path, method="DELETE", body={"tags": tagNames})
    else:
        if not newName:
            raise ValueError(f"newName is required for {operation}")
        if operation == "rename" and len(tagNames) != 1:
            raise ValueError("rename takes exactly one tag; use merge to combine several")
        data = client.fetch(path, method="PUT", body={"tags": tagNames, "replace": newName})

    result: Dict[str, Any] = {
        "operation": operation,
        "tagNames": tagNames,
        "success": bool(data.get("result")),
    }
    if operation != "delete":
        result["newName"] = newName
    return _helpers.make_response(result)
