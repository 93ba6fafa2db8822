"""Tests for motivation and body mapping."""

import pytest

from readmark.domain.value_objects import BookmarkBody, Motivation
from readmark.exceptions import SchemaError, UnknownMotivationError
from readmark.infrastructure.mappers import BodyMapper, MotivationMapper


class TestMotivationMapper:
    """Test suite for MotivationMapper."""

    @pytest.mark.parametrize("motivation", list(Motivation))
    def test_round_trip(self, motivation: Motivation) -> None:
        """Every motivation decodes back from its URI."""
        mapper = MotivationMapper()
        assert mapper.to_domain(mapper.to_wire(motivation)) is motivation

    def test_to_wire_is_plain_string(self) -> None:
        """The wire form is the bare URI string."""
        value = MotivationMapper().to_wire(Motivation.IDLING)
        assert type(value) is str
        assert value == "http://librarysimplified.org/terms/annotation/idling"

    @pytest.mark.parametrize(
        "value",
        [
            "bogus",
            "Bookmarking",
            "HTTPS://WWW.W3.ORG/NS/OA#BOOKMARKING",
            " https://www.w3.org/ns/oa#bookmarking",
            "",
        ],
    )
    def test_unknown_values_rejected(self, value: str) -> None:
        """Matching is exact: no case folding, trimming or short names."""
        with pytest.raises(UnknownMotivationError) as exc_info:
            MotivationMapper().to_domain(value)

        assert exc_info.value.value == value

    def test_non_string_rejected(self) -> None:
        """A non-string motivation is a shape error."""
        with pytest.raises(SchemaError):
            MotivationMapper().to_domain(1)


class TestBodyMapper:
    """Test suite for BodyMapper."""

    def test_empty_body_encodes_to_empty_object(self) -> None:
        """An empty body is written as {}."""
        assert BodyMapper().to_wire(BookmarkBody()) == {}

    def test_to_domain(self) -> None:
        """Any string entries are accepted."""
        body = BodyMapper().to_domain({"a": "1", "urn:x": "2"})
        assert body == BookmarkBody({"urn:x": "2", "a": "1"})

    def test_non_object_rejected(self) -> None:
        """The body must be a JSON object."""
        with pytest.raises(SchemaError) as exc_info:
            BodyMapper().to_domain(["a"], "body")

        assert exc_info.value.path == "body"

    def test_non_string_value_rejected(self) -> None:
        """Non-string values are reported at their key."""
        with pytest.raises(SchemaError) as exc_info:
            BodyMapper().to_domain({"a": 1}, "body")

        assert exc_info.value.path == "body.a"
