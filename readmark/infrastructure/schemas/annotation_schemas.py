"""Pydantic schemas for the Web Annotation wire documents.

These describe JSON shapes only. Value rules that belong to the domain
(progression bounds, motivation lookup, the embedded locator text) are
applied by the mappers when they build domain values.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ANNOTATION_CONTEXT = "http://www.w3.org/ns/anno.jsonld"
ANNOTATION_TYPE = "Annotation"
LOCATOR_TYPE = "Locator"
FRAGMENT_SELECTOR_TYPE = "oa:FragmentSelector"
COLLECTION_TYPES = ["BasicContainer", "AnnotationCollection"]
PAGE_TYPE = "AnnotationPage"


class WireModel(BaseModel):
    """Base for wire documents: strict JSON types, unknown keys ignored."""

    model_config = ConfigDict(strict=True, extra="ignore")


class LocatorDocument(WireModel):
    """Standalone or embedded Locator document."""

    type: Literal["Locator"] = Field(..., alias="@type")
    idref: str = Field(..., min_length=1, description="Chapter href")
    progress_within_chapter: float = Field(
        ..., alias="progressWithinChapter", description="Progress in [0, 1]"
    )


class FragmentSelectorDocument(WireModel):
    """Selector carrying a Locator document as JSON text."""

    type: Literal["oa:FragmentSelector"]
    value: str = Field(..., description="JSON text of a Locator document")


class TargetDocument(WireModel):
    """Annotation target: publication plus selector."""

    selector: FragmentSelectorDocument
    source: str = Field(..., min_length=1, description="Publication identifier")


class BookmarkDocument(WireModel):
    """Web Annotation document carrying a bookmark."""

    context: Any = Field(None, alias="@context")
    type: Any = None
    id: str | None = None
    body: dict[str, str] = Field(default_factory=dict, description="Open metadata map")
    motivation: str
    target: TargetDocument

    @field_validator("id", mode="before")
    @classmethod
    def reject_null_id(cls, value: Any) -> Any:  # noqa: ANN401
        """An id key that is present must hold a string; absence is the only way to omit it."""
        if value is None:
            raise ValueError("id must be a string when present")
        return value


class AnnotationPageDocument(WireModel):
    """One page of an annotation collection."""

    id: str | None = None
    type: Any = None
    items: list[dict[str, Any]] = Field(default_factory=list)


class AnnotationCollectionDocument(WireModel):
    """Container listing bookmarks, as returned by annotation servers."""

    context: Any = Field(None, alias="@context")
    id: str | None = None
    type: Any = None
    total: int | None = Field(None, ge=0)
    first: AnnotationPageDocument | None = None
