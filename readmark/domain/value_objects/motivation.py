"""Motivation: why a bookmark exists."""

from enum import Enum


class Motivation(str, Enum):
    """
    Closed set of bookmark motivations, each bound to its wire URI.

    BOOKMARKING is an explicit user action; IDLING is the automatically
    tracked last reading position.
    """

    BOOKMARKING = "https://www.w3.org/ns/oa#bookmarking"
    IDLING = "http://librarysimplified.org/terms/annotation/idling"

    @property
    def uri(self) -> str:
        return self.value
