"""Validated coverage threshold."""

from __future__ import annotations

import re
from dataclasses import dataclass

from clover_check.exceptions import InvalidThresholdError, ThresholdOutOfBoundsError

MAX_THRESHOLD = 100.0

# Plain decimal or exponent notation; no underscores, hex, inf or nan.
_NUMERIC_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")


@dataclass(frozen=True)
class Threshold:
    """Minimum acceptable coverage percentage, always within (0, 100].

    Build instances with :meth:`from_value` (or the type-specific
    constructors) so the range is validated; the value is never clamped.
    """

    value: float

    @classmethod
    def from_value(cls, threshold: str | int | float) -> Threshold:
        """Build a threshold from a string, int or float."""
        if isinstance(threshold, str):
            return cls.from_string(threshold)
        if isinstance(threshold, bool):
            raise InvalidThresholdError(str(threshold))
        if isinstance(threshold, int):
            return cls.from_int(threshold)
        if isinstance(threshold, float):
            return cls.from_float(threshold)
        raise InvalidThresholdError(repr(threshold))

    @classmethod
    def from_string(cls, threshold: str) -> Threshold:
        if not _NUMERIC_RE.match(threshold):
            raise InvalidThresholdError(threshold)
        return cls.from_float(float(threshold))

    @classmethod
    def from_int(cls, threshold: int) -> Threshold:
        # Range check first; huge ints do not convert to float.
        if not 0 < threshold <= MAX_THRESHOLD:
            raise ThresholdOutOfBoundsError(threshold)
        return cls(float(threshold))

    @classmethod
    def from_float(cls, threshold: float) -> Threshold:
        # Written as a negated range so NaN is rejected too.
        if not 0.0 < threshold <= MAX_THRESHOLD:
            raise ThresholdOutOfBoundsError(threshold)
        return cls(threshold)

    def is_met_by(self, coverage: float) -> bool:
        """Return True when *coverage* meets or exceeds the threshold."""
        return coverage >= self.value

    def formatted(self) -> str:
        """Return the threshold with two decimals, e.g. ``90.12%``."""
        return f"{self.value:.2f}%"

    def __str__(self) -> str:
        return repr(self.value).removesuffix(".0")
