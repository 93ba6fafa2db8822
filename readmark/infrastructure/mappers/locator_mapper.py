"""Mapper for Locator document ↔ Domain conversion."""

import json

from pydantic import ValidationError

from readmark.domain.value_objects import Locator, Progression
from readmark.exceptions import RangeError, SchemaError
from readmark.infrastructure.mappers.errors import join_path, schema_error_from_validation
from readmark.infrastructure.schemas import LOCATOR_TYPE, LocatorDocument

DEFAULT_SEPARATORS = (",", ":")


class LocatorMapper:
    """Mapper for Locator document ↔ Domain conversion."""

    def __init__(self, separators: tuple[str, str] = DEFAULT_SEPARATORS) -> None:
        self.separators = separators

    def to_domain(self, data: object, path: str = "") -> Locator:
        """
        Convert a parsed Locator document to a domain Locator.

        Raises:
            SchemaError: If the document is malformed. An out-of-range
                progression is chained as the cause.
        """
        try:
            document = LocatorDocument.model_validate(data)
        except ValidationError as err:
            raise schema_error_from_validation(err, path) from err

        try:
            progression = Progression(document.progress_within_chapter)
        except RangeError as err:
            raise SchemaError(
                join_path(path, "progressWithinChapter"),
                "out_of_range",
                err.message,
                cause=err,
            ) from err

        return Locator(chapter_href=document.idref, chapter_progression=progression)

    def to_wire(self, locator: Locator) -> dict[str, object]:
        """Convert a domain Locator to its JSON object form."""
        # Re-check the bound so a corrupted value never reaches the wire
        progression = Progression(locator.chapter_progression.value)
        data: dict[str, object] = {
            "@type": LOCATOR_TYPE,
            "idref": locator.chapter_href,
            "progressWithinChapter": progression.to_json(),
        }
        try:
            LocatorDocument.model_validate(data)
        except ValidationError as err:
            raise schema_error_from_validation(err) from err
        return data

    def loads(self, text: str, path: str = "") -> Locator:
        """Parse Locator JSON text, as embedded in a fragment selector."""
        try:
            data = json.loads(text)
        except (TypeError, ValueError, RecursionError) as err:
            raise SchemaError(path, "invalid_json", f"not valid JSON text: {err}") from err
        return self.to_domain(data, path)

    def dumps(self, locator: Locator) -> str:
        """Serialize a Locator to JSON text."""
        return json.dumps(
            self.to_wire(locator), separators=self.separators, ensure_ascii=False, allow_nan=False
        )
