"""
Shared constants and types for the Raindrop.io API.
"""

from typing import Literal

# Reserved collection ids
ALL_COLLECTION_ID = 0
UNSORTED_COLLECTION_ID = -1
TRASH_COLLECTION_ID = -99

# Largest page the API serves
MAX_PER_PAGE = 50

CollectionView = Literal["list", "simple", "grid", "masonry"]

TagOperation = Literal["rename", "merge", "delete"]

HighlightOperation = Literal["create", "update", "delete"]

HighlightColor = Literal[
    "blue", "brown", "cyan", "gray", "green", "indigo",
    "orange", "pink", "purple", "red", "teal", "yellow",
]

DEFAULT_HIGHLIGHT_COLOR = "yellow"
