"""Mapper for bookmark body ↔ Domain conversion."""

from pydantic import TypeAdapter, ValidationError

from readmark.domain.value_objects import BookmarkBody
from readmark.infrastructure.mappers.errors import schema_error_from_validation

_BODY_ADAPTER = TypeAdapter(dict[str, str])


class BodyMapper:
    """Mapper for the open string-to-string body object."""

    def to_domain(self, data: object, path: str = "") -> BookmarkBody:
        try:
            entries = _BODY_ADAPTER.validate_python(data, strict=True)
        except ValidationError as err:
            raise schema_error_from_validation(err, path) from err
        return BookmarkBody(entries)

    def to_wire(self, body: BookmarkBody) -> dict[str, str]:
        """Convert to a JSON object; an empty body gives {} rather than nothing."""
        if not isinstance(body, BookmarkBody):
            body = self.to_domain(body, "body")
        return body.to_json()
