from .body_mapper import BodyMapper
from .bookmark_mapper import BookmarkMapper
from .collection_mapper import CollectionMapper
from .locator_mapper import LocatorMapper
from .motivation_mapper import MotivationMapper
from .target_mapper import TargetMapper

__all__ = [
    "BodyMapper",
    "BookmarkMapper",
    "CollectionMapper",
    "LocatorMapper",
    "MotivationMapper",
    "TargetMapper",
]
