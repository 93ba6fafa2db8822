"""Mapper for motivation URI ↔ Domain conversion."""

from readmark.domain.value_objects import Motivation
from readmark.exceptions import SchemaError, UnknownMotivationError


class MotivationMapper:
    """Exact, case-sensitive lookup between Motivation members and their URIs."""

    def to_domain(self, value: object, path: str = "") -> Motivation:
        if not isinstance(value, str):
            raise SchemaError(path, "string_type", "motivation must be a string")
        try:
            return Motivation(value)
        except ValueError as err:
            raise UnknownMotivationError(value) from err

    def to_wire(self, motivation: Motivation) -> str:
        if not isinstance(motivation, Motivation):
            raise SchemaError("motivation", "invalid_type", "motivation must be a Motivation")
        return motivation.value
