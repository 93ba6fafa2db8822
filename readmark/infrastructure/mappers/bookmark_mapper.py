"""Mapper for Bookmark annotation ↔ Domain conversion."""

from pydantic import ValidationError

from readmark.domain.entities import Bookmark
from readmark.domain.value_objects import BookmarkBody
from readmark.exceptions import SchemaError
from readmark.infrastructure.mappers.body_mapper import BodyMapper
from readmark.infrastructure.mappers.errors import join_path, schema_error_from_validation
from readmark.infrastructure.mappers.locator_mapper import DEFAULT_SEPARATORS
from readmark.infrastructure.mappers.motivation_mapper import MotivationMapper
from readmark.infrastructure.mappers.target_mapper import TargetMapper
from readmark.infrastructure.schemas import ANNOTATION_CONTEXT, ANNOTATION_TYPE, BookmarkDocument


class BookmarkMapper:
    """
    Mapper for Bookmark annotation ↔ Domain conversion.

    Encoding always emits "@context" and "type". Decoding only checks them
    when strict_envelope is set; otherwise they are accepted in any form
    or left out entirely.
    """

    def __init__(
        self,
        strict_envelope: bool = False,
        separators: tuple[str, str] = DEFAULT_SEPARATORS,
    ) -> None:
        self.strict_envelope = strict_envelope
        self.body_mapper = BodyMapper()
        self.motivation_mapper = MotivationMapper()
        self.target_mapper = TargetMapper(separators)

    def to_domain(self, data: object, path: str = "") -> Bookmark:
        """
        Convert a parsed annotation document to a domain Bookmark.

        Raises:
            SchemaError: If the document shape or the embedded locator is invalid
            UnknownMotivationError: If the motivation URI is not recognized
        """
        try:
            document = BookmarkDocument.model_validate(data)
        except ValidationError as err:
            raise schema_error_from_validation(err, path) from err

        if self.strict_envelope:
            self._check_envelope(document, path)

        motivation = self.motivation_mapper.to_domain(
            document.motivation, join_path(path, "motivation")
        )
        target = self.target_mapper.from_document(document.target, join_path(path, "target"))

        return Bookmark(
            target=target,
            motivation=motivation,
            body=BookmarkBody(document.body),
            bookmark_id=document.id,
        )

    def to_wire(self, bookmark: Bookmark) -> dict[str, object]:
        """Convert a domain Bookmark to its annotation document."""
        data: dict[str, object] = {
            "@context": ANNOTATION_CONTEXT,
            "type": ANNOTATION_TYPE,
        }
        if bookmark.bookmark_id is not None:
            data["id"] = bookmark.bookmark_id
        data["body"] = self.body_mapper.to_wire(bookmark.body)
        data["motivation"] = self.motivation_mapper.to_wire(bookmark.motivation)
        data["target"] = self.target_mapper.to_wire(bookmark.target)

        try:
            BookmarkDocument.model_validate(data)
        except ValidationError as err:
            raise schema_error_from_validation(err) from err
        return data

    def _check_envelope(self, document: BookmarkDocument, path: str) -> None:
        if document.context != ANNOTATION_CONTEXT:
            raise SchemaError(
                join_path(path, "@context"),
                "literal_error",
                f"expected {ANNOTATION_CONTEXT!r}",
            )
        if document.type != ANNOTATION_TYPE:
            raise SchemaError(
                join_path(path, "type"), "literal_error", f"expected {ANNOTATION_TYPE!r}"
            )
