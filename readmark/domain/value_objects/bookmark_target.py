"""BookmarkTarget value object: a locator within a specific publication."""

from dataclasses import dataclass

from readmark.domain.value_objects.locator import Locator
from readmark.domain.value_objects.text import require_text
from readmark.exceptions import SchemaError


@dataclass(frozen=True)
class BookmarkTarget:
    """
    What a bookmark points at.

    Attributes:
        locator: Position within the publication
        source: Opaque publication identifier
    """

    locator: Locator
    source: str

    def __post_init__(self) -> None:
        require_text(self.source, "source", "target source")
        if not isinstance(self.locator, Locator):
            raise SchemaError("selector", "invalid_type", "target locator must be a Locator")
