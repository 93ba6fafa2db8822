"""BookmarkBody value object: opaque client metadata attached to a bookmark."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from readmark.domain.value_objects.text import require_encodable
from readmark.exceptions import SchemaError

if TYPE_CHECKING:
    from typing import Self

# Body keys written by reading-position clients
BODY_TIME_KEY = "http://librarysimplified.org/terms/time"
BODY_DEVICE_KEY = "http://librarysimplified.org/terms/device"


class BookmarkBody(Mapping[str, str]):
    """
    Immutable string to string mapping.

    The mapping is deliberately open: unknown keys are carried as-is so
    clients can add metadata without a shared schema. Two bodies are equal
    when they hold the same entries, regardless of insertion order.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        items = dict(entries or {})
        for key, value in items.items():
            if not isinstance(key, str):
                raise SchemaError("", "string_type", f"body key {key!r} is not a string")
            if not isinstance(value, str):
                raise SchemaError(key, "string_type", "body values must be strings")
            require_encodable(key, "", "body key")
            require_encodable(value, key, "body value")
        self._entries = items

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._entries!r})"

    @property
    def time(self) -> str | None:
        """Client timestamp of the bookmark, if recorded."""
        return self._entries.get(BODY_TIME_KEY)

    @property
    def device(self) -> str | None:
        """Identifier of the device that created the bookmark, if recorded."""
        return self._entries.get(BODY_DEVICE_KEY)

    def with_entry(self, key: str, value: str) -> Self:
        """Return a copy with one entry added or replaced."""
        return type(self)({**self._entries, key: value})

    def to_json(self) -> dict[str, str]:
        """Serialize to a JSON object."""
        return dict(self._entries)

    @classmethod
    def for_device(cls, device: str, time: str) -> Self:
        """Create the body clients attach to reading positions."""
        return cls({BODY_DEVICE_KEY: device, BODY_TIME_KEY: time})
