from .bookmark import Bookmark

__all__ = ["Bookmark"]
