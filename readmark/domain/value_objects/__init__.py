"""Value objects describing a reading position."""

from .bookmark_body import BODY_DEVICE_KEY, BODY_TIME_KEY, BookmarkBody
from .bookmark_target import BookmarkTarget
from .locator import Locator
from .motivation import Motivation
from .progression import PROGRESSION_BOUNDS, Progression

__all__ = [
    "BODY_DEVICE_KEY",
    "BODY_TIME_KEY",
    "PROGRESSION_BOUNDS",
    "BookmarkBody",
    "BookmarkTarget",
    "Locator",
    "Motivation",
    "Progression",
]
