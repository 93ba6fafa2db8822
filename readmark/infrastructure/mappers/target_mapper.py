"""Mapper for annotation target ↔ Domain conversion."""

from pydantic import ValidationError

from readmark.domain.value_objects import BookmarkTarget
from readmark.exceptions import SchemaError
from readmark.infrastructure.mappers.errors import join_path, schema_error_from_validation
from readmark.infrastructure.mappers.locator_mapper import DEFAULT_SEPARATORS, LocatorMapper
from readmark.infrastructure.schemas import FRAGMENT_SELECTOR_TYPE, TargetDocument


class TargetMapper:
    """Mapper for annotation target ↔ Domain conversion."""

    def __init__(self, separators: tuple[str, str] = DEFAULT_SEPARATORS) -> None:
        self.locator_mapper = LocatorMapper(separators)

    def to_domain(self, data: object, path: str = "") -> BookmarkTarget:
        """Convert a parsed target object to a domain BookmarkTarget."""
        try:
            document = TargetDocument.model_validate(data)
        except ValidationError as err:
            raise schema_error_from_validation(err, path) from err
        return self.from_document(document, path)

    def from_document(self, document: TargetDocument, path: str = "") -> BookmarkTarget:
        """
        Build a BookmarkTarget from an already validated target document.

        The selector value is itself a Locator document serialized as JSON
        text, so it is parsed and decoded here.

        Raises:
            SchemaError: If the embedded locator is unparseable or invalid;
                the locator error is chained as the cause
        """
        value_path = join_path(path, "selector", "value")
        try:
            locator = self.locator_mapper.loads(document.selector.value, value_path)
        except SchemaError as err:
            raise SchemaError(
                value_path, "invalid_locator", "selector value is not a valid Locator", cause=err
            ) from err
        return BookmarkTarget(locator=locator, source=document.source)

    def to_wire(self, target: BookmarkTarget) -> dict[str, object]:
        """Convert a domain BookmarkTarget to its JSON object form."""
        data: dict[str, object] = {
            "selector": {
                "type": FRAGMENT_SELECTOR_TYPE,
                "value": self.locator_mapper.dumps(target.locator),
            },
            "source": target.source,
        }
        try:
            TargetDocument.model_validate(data)
        except ValidationError as err:
            raise schema_error_from_validation(err, "target") from err
        return data
