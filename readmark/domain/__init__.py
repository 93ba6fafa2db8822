"""
Domain layer.

Immutable, self-validating values describing a reading position:
- Progression, Locator, Motivation, BookmarkBody, BookmarkTarget
- Bookmark, the top-level entity exchanged on the wire
"""

from .entities import Bookmark
from .value_objects import (
    BookmarkBody,
    BookmarkTarget,
    Locator,
    Motivation,
    Progression,
)

__all__ = [
    "Bookmark",
    "BookmarkBody",
    "BookmarkTarget",
    "Locator",
    "Motivation",
    "Progression",
]
