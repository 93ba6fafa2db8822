"""
readmark: validation and serialization of reading positions.

Bookmarks are exchanged as W3C Web Annotation documents whose target
selector embeds a Locator document as JSON text.
"""

from .codec import (
    decode_body,
    decode_bookmark,
    decode_bookmark_collection,
    decode_locator,
    decode_motivation,
    decode_target,
    dumps_bookmark,
    dumps_locator,
    encode_body,
    encode_bookmark,
    encode_bookmark_collection,
    encode_locator,
    encode_motivation,
    encode_target,
    loads_bookmark,
    loads_locator,
    parse_json,
)
from .domain import Bookmark, BookmarkBody, BookmarkTarget, Locator, Motivation, Progression
from .exceptions import CodecError, RangeError, SchemaError, UnknownMotivationError

__version__ = "0.1.0"

__all__ = [
    "Bookmark",
    "BookmarkBody",
    "BookmarkTarget",
    "CodecError",
    "Locator",
    "Motivation",
    "Progression",
    "RangeError",
    "SchemaError",
    "UnknownMotivationError",
    "decode_body",
    "decode_bookmark",
    "decode_bookmark_collection",
    "decode_locator",
    "decode_motivation",
    "decode_target",
    "dumps_bookmark",
    "dumps_locator",
    "encode_body",
    "encode_bookmark",
    "encode_bookmark_collection",
    "encode_locator",
    "encode_motivation",
    "encode_target",
    "loads_bookmark",
    "loads_locator",
    "parse_json",
]
