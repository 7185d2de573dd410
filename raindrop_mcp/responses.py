"""
Response helpers for MCP tools.
"""

import json
from typing import Any

# Zero-width no-break space (also the byte-order mark)
INVISIBLE_MARKER = "\ufeff"


def sanitize(value: Any) -> Any:
    """Return ``value`` with every INVISIBLE_MARKER removed from its strings.

    Dicts (string keys included, order kept) and lists/tuples are rebuilt
    recursively; other scalars are returned as-is.
    """
    if isinstance(value, str):
        return value.replace(INVISIBLE_MARKER, "")
    if isinstance(value, dict):
        return {sanitize(key): sanitize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [sanitize(item) for item in value]
    return value


def make_response(data: Any) -> str:
    """Sanitize a payload and render it as 2-space indented JSON text."""
    return json.dumps(sanitize(data), indent=2, ensure_ascii=False)
