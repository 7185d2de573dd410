"""get_highlights / manage_highlights tools.

Highlights live on their bookmark: adding, changing and removing one are all
``PUT /raindrop/{id}`` requests carrying a ``highlights`` list. An entry
without ``_id`` is added, an entry with ``_id`` is changed, and an entry
whose ``text`` is empty is removed.
"""

from typing import Any, Dict, Optional

from raindrop_mcp.models import DEFAULT_HIGHLIGHT_COLOR, HighlightColor, HighlightOperation
from raindrop_mcp.server import mcp
from raindrop_mcp.tools import _helpers


@mcp.tool(annotations=_helpers.GET_HIGHLIGHTS_ANNOTATIONS)
def get_highlights(
    collectionId: Optional[int] = None,
    page: Optional[int] = None,
    perPage: Optional[int] = None,
) -> str:
    """
    <usecase>List highlights across all bookmarks or in one collection.</usecase>
    <instructions>
    Each highlight carries its text, note, color and the id of the bookmark it
    belongs to (`raindropRef`).
    </instructions>
    <parameters>
    - collectionId: Only highlights from this collection (default: all)
    - page: Page number
    - perPage: Results per page (max 50)
    </parameters>
    <examples>
    - get_highlights()
    - get_highlights(collectionId=12345, perPage=50)
    </examples>
    """
    base = f"/highlights/{collectionId}" if collectionId else "/highlights"
    path = _helpers._with_query(base, _helpers._page_params(page, perPage))
    items = _helpers.get_client().fetch(path).get("items") or []
    return _helpers.make_response({"count": len(items), "items": items})


@mcp.tool(annotations=_helpers.MANAGE_HIGHLIGHTS_ANNOTATIONS)
def manage_highlights(
    operation: HighlightOperation,
    bookmarkId: int,
    text: Optional[str] = None,
    note: Optional[str] = None,
    color: Optional[HighlightColor] = None,
    id: Optional[str] = None,
) -> str:
    """
    <usecase>Create, update or delete a highlight on a bookmark.</usecase>
    <instructions>
    - create: text is required; color defaults to yellow
    - update: id is required; only text, note and color that you pass change
    - delete: id is required
    Highlight ids come from get_highlights() or get_bookmark().
    </instructions>
    <parameters>
    - operation: "create", "update" or "delete"
    - bookmarkId: Bookmark the highlight belongs to
    - text: Highlighted text
    - note: Note attached to the highlight
    - color: blue, brown, cyan, gray, green, indigo, orange, pink, purple, red, teal or yellow
    - id: Highlight ID (update and delete)
    </parameters>
    <examples>
    - manage_highlights("create", bookmarkId=123, text="Readability counts.")
    - manage_highlights("update", bookmarkId=123, id="62388e9e48b63606f41e44a6", note="PEP 20")
    - manage_highlights("delete", bookmarkId=123, id="62388e9e48b63606f41e44a6")
    </examples>
    """
    entry: Dict[str, Any] = {}
    if operation == "create":
        if not text:
            raise ValueError("text is required to create a highlight")
        entry["text"] = text
        entry["color"] = color or DEFAULT_HIGHLIGHT_COLOR
        if note:
            entry["note"] = note
    else:
        if not id:
            raise ValueError(f"id is required to {operation} a highlight")
        entry["_id"] = id
        if operation == "delete":
            entry["text"] = ""
        else:
            if text:
                entry["text"] = text
            if note:
                entry["note"] = note
            if color:
                entry["color"] = color

    data = _helpers.get_client().fetch(
        f"/raindrop/{bookmarkId}", method="PUT", body={"highlights": [entry]}
    )
    item = data.get("item") or {}
    return _helpers.make_response(
        {
            "operation": operation,
            "bookmarkId": bookmarkId,
            "highlights": item.get("highlights") or [],
        }
    )
