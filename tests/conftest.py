"""Pytest configuration and fixtures."""

import json
from collections.abc import Generator
from typing import Any

import pytest

from readmark.config import get_settings

IDLING_BOOKMARK_ID = "urn:uuid:715885bc-23d3-4d7d-bd87-f5e7a042c4ba"
PUBLICATION_ID = "urn:uuid:1daa8de6-94e8-4711-b7d1-e43b572aa6e0"
DEVICE_ID = "urn:uuid:c83db5b1-9130-4b86-93ea-634b00235c7c"
BOOKMARK_TIME = "2021-03-12T16:32:49Z"


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def locator_document() -> dict[str, Any]:
    """Locator document from the fixture corpus."""
    return {"@type": "Locator", "idref": "/xyz.html", "progressWithinChapter": 0.5}


@pytest.fixture
def idling_bookmark_document(locator_document: dict[str, Any]) -> dict[str, Any]:
    """Idling bookmark as posted by a reading client."""
    return {
        "@context": "http://www.w3.org/ns/anno.jsonld",
        "type": "Annotation",
        "id": IDLING_BOOKMARK_ID,
        "body": {
            "http://librarysimplified.org/terms/time": BOOKMARK_TIME,
            "http://librarysimplified.org/terms/device": DEVICE_ID,
        },
        "motivation": "http://librarysimplified.org/terms/annotation/idling",
        "target": {
            "selector": {
                "type": "oa:FragmentSelector",
                "value": json.dumps(locator_document, indent=2),
            },
            "source": PUBLICATION_ID,
        },
    }
