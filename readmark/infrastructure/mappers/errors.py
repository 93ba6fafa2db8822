"""Translation of pydantic validation failures into codec errors."""

from pydantic import ValidationError

from readmark.exceptions import SchemaError


def join_path(*parts: str | int) -> str:
    """Join key path segments with dots, skipping empty segments."""
    return ".".join(str(part) for part in parts if part != "")


def schema_error_from_validation(err: ValidationError, path: str = "") -> SchemaError:
    """
    Build a SchemaError from the first error pydantic reported.

    Args:
        err: Validation error raised by a wire schema
        path: Key path of the validated value within the whole document

    Returns:
        SchemaError whose path points at the offending key
    """
    first = err.errors()[0]
    return SchemaError(join_path(path, *first["loc"]), first["type"], first["msg"])
