"""Progression value object: fractional progress through a chapter.

Equality and ordering are exact on the underlying float. JSON produced by
the codec carries the shortest repr of each float, which parses back to
the identical value, so no tolerance is needed for a round trip.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from readmark.exceptions import RangeError

PROGRESSION_BOUNDS = (0.0, 1.0)


@dataclass(frozen=True, order=True)
class Progression:
    """A real number in the closed interval [0, 1]."""

    value: float

    def __post_init__(self) -> None:
        lower, upper = PROGRESSION_BOUNDS
        if isinstance(self.value, bool) or not isinstance(self.value, int | float):
            raise RangeError(self.value, PROGRESSION_BOUNDS)
        if math.isnan(self.value) or not lower <= self.value <= upper:
            raise RangeError(self.value, PROGRESSION_BOUNDS)
        # Normalise ints so Progression(1) == Progression(1.0) renders the same
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value

    def to_json(self) -> float:
        """Serialize to a JSON number."""
        return self.value
