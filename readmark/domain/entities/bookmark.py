"""Bookmark entity: a reading position exchanged between clients and a server."""

from dataclasses import dataclass, field, replace

from readmark.domain.value_objects import BookmarkBody, BookmarkTarget, Locator, Motivation
from readmark.domain.value_objects.text import require_encodable
from readmark.exceptions import SchemaError


@dataclass(frozen=True)
class Bookmark:
    """
    Bookmark of a position within a publication.

    Business Rules:
    - Exactly one motivation is attached
    - The id is assigned externally (usually by the server) and is opaque
    - Equality covers every field, the id included
    """

    target: BookmarkTarget
    motivation: Motivation
    body: BookmarkBody = field(default_factory=BookmarkBody)
    bookmark_id: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not isinstance(self.motivation, Motivation):
            raise SchemaError("motivation", "invalid_type", "motivation must be a Motivation")
        if not isinstance(self.target, BookmarkTarget):
            raise SchemaError("target", "invalid_type", "target must be a BookmarkTarget")
        if self.bookmark_id is not None:
            if not isinstance(self.bookmark_id, str):
                raise SchemaError("id", "string_type", "bookmark id must be a string")
            require_encodable(self.bookmark_id, "id", "bookmark id")
        if not isinstance(self.body, BookmarkBody):
            object.__setattr__(self, "body", BookmarkBody(self.body))

    @property
    def locator(self) -> Locator:
        return self.target.locator

    @property
    def is_idle(self) -> bool:
        """Whether this is an automatically tracked reading position."""
        return self.motivation is Motivation.IDLING

    def with_id(self, bookmark_id: str) -> "Bookmark":
        """Return a copy carrying a server-assigned id."""
        return replace(self, bookmark_id=bookmark_id)

    @classmethod
    def create_bookmark(
        cls, source: str, locator: Locator, body: BookmarkBody | None = None
    ) -> "Bookmark":
        """
        Create an explicit user bookmark.

        Args:
            source: Publication identifier
            locator: Position within the publication
            body: Optional client metadata

        Returns:
            New Bookmark without an id
        """
        return cls(
            target=BookmarkTarget(locator=locator, source=source),
            motivation=Motivation.BOOKMARKING,
            body=body or BookmarkBody(),
        )

    @classmethod
    def create_idle(
        cls, source: str, locator: Locator, body: BookmarkBody | None = None
    ) -> "Bookmark":
        """Create the automatically tracked last-read position."""
        return cls(
            target=BookmarkTarget(locator=locator, source=source),
            motivation=Motivation.IDLING,
            body=body or BookmarkBody(),
        )
