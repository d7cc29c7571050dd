from __future__ import annotations

"""Error taxonomy for request validation.

All errors derive from FreqiError and carry the name of the offending field,
so callers inspecting a failed Result can tell which value was rejected.
"""

from typing import Optional


class FreqiError(ValueError):
    """Base class for all validation failures."""

    kind = "error"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class TypeMismatch(FreqiError, TypeError):
    """A field holds the wrong primitive type (e.g. a string where a number is required)."""

    kind = "type_mismatch"


class EmptyOrMissingField(FreqiError):
    """A required field is missing, a required sequence is empty, or the request is not a mapping."""

    kind = "empty_or_missing"


class RangeViolation(FreqiError):
    """A value is below its allowed minimum or zero where it must be strictly positive."""

    kind = "range_violation"
