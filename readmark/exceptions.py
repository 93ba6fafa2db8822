"""
Codec exceptions.

Every failure raised while building, encoding or decoding a reading
position is a local validation failure. None of them are retried and none
are fatal; they carry enough context for the caller to log and report.
"""

from __future__ import annotations


class CodecError(Exception):
    """
    Base exception for all readmark errors.

    All codec exceptions inherit from this class so they can be caught
    and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-compatible dict for logging and reporting."""
        return {"error": type(self).__name__, "message": self.message, **self.details}


class RangeError(CodecError):
    """
    Raised when a number lies outside its allowed closed interval.

    Example: a chapter progression of 1.5.
    """

    def __init__(self, value: object, bounds: tuple[float, float]) -> None:
        lower, upper = bounds
        super().__init__(
            f"Value {value!r} is outside [{lower}, {upper}]",
            {"value": value, "bounds": bounds},
        )
        self.value = value
        self.bounds = bounds


class SchemaError(CodecError):
    """
    Raised when a JSON value does not match the expected shape.

    Attributes:
        path: Dotted key path of the offending value, relative to the
            document being decoded ("" for the document itself)
        kind: Short machine-readable mismatch kind, e.g. "missing",
            "string_type", "literal_error", "out_of_range", "invalid_json"
        cause: The nested codec error this one wraps, if any
    """

    def __init__(
        self,
        path: str,
        kind: str,
        message: str | None = None,
        cause: CodecError | None = None,
    ) -> None:
        where = path or "document"
        super().__init__(
            f"Invalid {where}: {message or kind}",
            {"path": path, "kind": kind},
        )
        self.path = path
        self.kind = kind
        self.cause = cause

    @property
    def root_cause(self) -> CodecError:
        """Innermost error in the chain of wrapped codec errors."""
        error: CodecError = self
        while isinstance(error, SchemaError) and error.cause is not None:
            error = error.cause
        return error

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-compatible dict, nesting the cause chain."""
        data = super().to_dict()
        if self.cause is not None:
            data["cause"] = self.cause.to_dict()
        return data


class UnknownMotivationError(CodecError):
    """Raised when a wire motivation matches neither known value."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown motivation {value!r}", {"value": value})
        self.value = value
