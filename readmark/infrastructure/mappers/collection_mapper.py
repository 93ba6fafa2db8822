"""Mapper for annotation collection ↔ list of Bookmarks."""

from collections.abc import Iterable

from pydantic import ValidationError

from readmark.domain.entities import Bookmark
from readmark.exceptions import CodecError, SchemaError
from readmark.infrastructure.mappers.bookmark_mapper import BookmarkMapper
from readmark.infrastructure.mappers.errors import join_path, schema_error_from_validation
from readmark.infrastructure.schemas import (
    ANNOTATION_CONTEXT,
    COLLECTION_TYPES,
    PAGE_TYPE,
    AnnotationCollectionDocument,
)


class CollectionMapper:
    """
    Mapper for the AnnotationCollection servers use to list bookmarks.

    Only the first page is read; a collection without one is empty.
    """

    def __init__(self, bookmark_mapper: BookmarkMapper | None = None) -> None:
        self.bookmark_mapper = bookmark_mapper or BookmarkMapper()

    def to_domain(self, data: object) -> list[Bookmark]:
        """
        Convert a parsed collection document to bookmarks, in page order.

        Raises:
            SchemaError: If the collection is malformed or any item fails to
                decode; the item's own error is chained as the cause
        """
        try:
            document = AnnotationCollectionDocument.model_validate(data)
        except ValidationError as err:
            raise schema_error_from_validation(err) from err

        if document.first is None:
            return []

        bookmarks: list[Bookmark] = []
        for index, item in enumerate(document.first.items):
            item_path = join_path("first", "items", index)
            try:
                bookmarks.append(self.bookmark_mapper.to_domain(item, item_path))
            except CodecError as err:
                raise SchemaError(
                    item_path, "invalid_item", "collection item is not a valid bookmark", cause=err
                ) from err
        return bookmarks

    def to_wire(
        self, bookmarks: Iterable[Bookmark], collection_id: str | None = None
    ) -> dict[str, object]:
        """Convert bookmarks to a single-page annotation collection."""
        items = [self.bookmark_mapper.to_wire(bookmark) for bookmark in bookmarks]
        data: dict[str, object] = {"@context": ANNOTATION_CONTEXT}
        if collection_id is not None:
            data["id"] = collection_id
        data["type"] = list(COLLECTION_TYPES)
        data["total"] = len(items)
        data["first"] = {"type": PAGE_TYPE, "items": items}
        return data
