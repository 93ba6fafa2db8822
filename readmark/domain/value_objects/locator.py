"""Locator value object: a position inside a publication."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from readmark.domain.value_objects.progression import Progression
from readmark.domain.value_objects.text import require_text
from readmark.exceptions import SchemaError

if TYPE_CHECKING:
    from typing import Self


@dataclass(frozen=True)
class Locator:
    """
    Chapter reference plus progress within that chapter.

    Attributes:
        chapter_href: Opaque chapter identifier (usually a spine href)
        chapter_progression: Fraction of the chapter already read
    """

    chapter_href: str
    chapter_progression: Progression

    def __post_init__(self) -> None:
        require_text(self.chapter_href, "idref", "chapter href")
        if not isinstance(self.chapter_progression, Progression):
            raise SchemaError(
                "progressWithinChapter", "invalid_type", "chapter progression must be a Progression"
            )

    @classmethod
    def create(cls, chapter_href: str, progress: float) -> Self:
        """
        Create a locator from a raw progress number.

        Raises:
            RangeError: If progress is outside [0, 1]
        """
        return cls(chapter_href=chapter_href, chapter_progression=Progression(progress))
