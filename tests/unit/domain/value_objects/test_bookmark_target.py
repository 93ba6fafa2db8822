"""Tests for BookmarkTarget value object."""

import pytest

from readmark.domain.value_objects import BookmarkTarget, Locator
from readmark.exceptions import SchemaError


class TestBookmarkTarget:
    """Test suite for BookmarkTarget value object."""

    def test_equality(self) -> None:
        """Targets are equal when locator and source are equal."""
        locator = Locator.create("/xyz.html", 0.5)
        assert BookmarkTarget(locator, "urn:book") == BookmarkTarget(locator, "urn:book")
        assert BookmarkTarget(locator, "urn:book") != BookmarkTarget(locator, "urn:other")

    def test_empty_source_rejected(self) -> None:
        """The publication source must be non-empty."""
        with pytest.raises(SchemaError) as exc_info:
            BookmarkTarget(Locator.create("/xyz.html", 0.5), "")

        assert exc_info.value.path == "source"

    def test_lone_surrogate_source_rejected(self) -> None:
        """A source that cannot be written as UTF-8 is rejected on construction."""
        with pytest.raises(SchemaError) as exc_info:
            BookmarkTarget(Locator.create("/xyz.html", 0.5), "urn:\ud800")

        assert exc_info.value.path == "source"
        assert exc_info.value.kind == "string_unicode"
