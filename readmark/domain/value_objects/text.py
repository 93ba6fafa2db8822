"""Checks shared by value objects that hold wire strings."""

from readmark.exceptions import SchemaError


def require_encodable(value: str, path: str, what: str) -> None:
    """
    Reject strings that cannot be written as UTF-8 (e.g. lone surrogates).

    Raises:
        SchemaError: With kind "string_unicode", matching what the wire
            schemas report for the same input
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as err:
        raise SchemaError(path, "string_unicode", f"{what} is not valid Unicode text") from err


def require_text(value: object, path: str, what: str) -> None:
    """Require a non-empty string that can be written as UTF-8."""
    if not isinstance(value, str) or not value:
        raise SchemaError(path, "empty", f"{what} must be a non-empty string")
    require_encodable(value, path, what)
