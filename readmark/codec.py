"""
Encode and decode reading positions.

Each encode_* function turns a domain value into its JSON-compatible wire
form and each decode_* function does the reverse. dumps_*/loads_* work on
JSON text. Decoding either returns a complete value or raises a CodecError;
nothing is ever partially decoded. All functions are pure and safe to call
from any thread.
"""

import json
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

import structlog

from readmark.config import get_settings
from readmark.domain import Bookmark, BookmarkBody, BookmarkTarget, Locator, Motivation
from readmark.exceptions import CodecError, SchemaError
from readmark.infrastructure.mappers import (
    BodyMapper,
    BookmarkMapper,
    CollectionMapper,
    LocatorMapper,
    MotivationMapper,
    TargetMapper,
)

logger = structlog.get_logger(__name__)


@contextmanager
def _logged_decode(entity: str) -> Iterator[None]:
    try:
        yield
    except CodecError as err:
        logger.debug(f"{entity}_decode_failed", error=type(err).__name__, **err.details)
        raise


def _bookmark_mapper(strict_envelope: bool | None) -> BookmarkMapper:
    settings = get_settings()
    if strict_envelope is None:
        strict_envelope = settings.STRICT_ENVELOPE
    return BookmarkMapper(strict_envelope=strict_envelope, separators=settings.json_separators)


def parse_json(text: str | bytes) -> object:
    """
    Parse JSON text.

    Raises:
        SchemaError: With kind "invalid_json" for malformed or too deeply
            nested text
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError, RecursionError) as err:
        raise SchemaError("", "invalid_json", f"not valid JSON text: {err}") from err


def _dumps(data: object) -> str:
    return json.dumps(
        data, separators=get_settings().json_separators, ensure_ascii=False, allow_nan=False
    )


# Locator


def encode_locator(locator: Locator) -> dict[str, object]:
    """Encode a Locator as a {"@type", "idref", "progressWithinChapter"} object."""
    return LocatorMapper(get_settings().json_separators).to_wire(locator)


def decode_locator(data: object) -> Locator:
    """
    Decode a Locator object.

    Raises:
        SchemaError: If the object is malformed; an out-of-range progression
            is chained as the cause
    """
    with _logged_decode("locator"):
        return LocatorMapper().to_domain(data)


def dumps_locator(locator: Locator) -> str:
    """Encode a Locator as JSON text, the form embedded in a fragment selector."""
    return LocatorMapper(get_settings().json_separators).dumps(locator)


def loads_locator(text: str | bytes) -> Locator:
    """Decode Locator JSON text."""
    with _logged_decode("locator"):
        return LocatorMapper().to_domain(parse_json(text))


# Motivation


def encode_motivation(motivation: Motivation) -> str:
    return MotivationMapper().to_wire(motivation)


def decode_motivation(value: object) -> Motivation:
    """
    Decode a motivation URI.

    Raises:
        UnknownMotivationError: If the string matches neither known URI exactly
    """
    with _logged_decode("motivation"):
        return MotivationMapper().to_domain(value)


# Body


def encode_body(body: BookmarkBody) -> dict[str, str]:
    return BodyMapper().to_wire(body)


def decode_body(data: object) -> BookmarkBody:
    with _logged_decode("body"):
        return BodyMapper().to_domain(data)


# Target


def encode_target(target: BookmarkTarget) -> dict[str, object]:
    return TargetMapper(get_settings().json_separators).to_wire(target)


def decode_target(data: object) -> BookmarkTarget:
    with _logged_decode("target"):
        return TargetMapper().to_domain(data)


# Bookmark


def encode_bookmark(bookmark: Bookmark) -> dict[str, object]:
    """Encode a Bookmark as a Web Annotation document."""
    return _bookmark_mapper(None).to_wire(bookmark)


def decode_bookmark(data: object, *, strict_envelope: bool | None = None) -> Bookmark:
    """
    Decode a Web Annotation document into a Bookmark.

    Args:
        data: Parsed JSON document
        strict_envelope: Also require "@context" and "type"; defaults to
            the STRICT_ENVELOPE setting

    Raises:
        SchemaError: If the document shape or the embedded locator is invalid
        UnknownMotivationError: If the motivation URI is not recognized
    """
    with _logged_decode("bookmark"):
        return _bookmark_mapper(strict_envelope).to_domain(data)


def dumps_bookmark(bookmark: Bookmark) -> str:
    """Encode a Bookmark as JSON text."""
    return _dumps(encode_bookmark(bookmark))


def loads_bookmark(text: str | bytes, *, strict_envelope: bool | None = None) -> Bookmark:
    """Decode a Bookmark from JSON text."""
    with _logged_decode("bookmark"):
        return _bookmark_mapper(strict_envelope).to_domain(parse_json(text))


# Collections


def encode_bookmark_collection(
    bookmarks: Iterable[Bookmark], collection_id: str | None = None
) -> dict[str, object]:
    """Encode bookmarks as a single-page AnnotationCollection."""
    return CollectionMapper(_bookmark_mapper(None)).to_wire(bookmarks, collection_id)


def decode_bookmark_collection(
    data: object, *, strict_envelope: bool | None = None
) -> list[Bookmark]:
    """Decode the bookmarks listed in an AnnotationCollection."""
    with _logged_decode("collection"):
        return CollectionMapper(_bookmark_mapper(strict_envelope)).to_domain(data)
