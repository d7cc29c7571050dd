from __future__ import annotations

"""Tagged result returned by every public computation."""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .errors import FreqiError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success payload or a captured validation error.

    On failure ``value`` holds the operation's sentinel (``False`` for notes and
    scales, ``[]`` for augmentation) and ``error`` holds the exception.
    """

    ok: bool
    value: Any
    error: Optional[FreqiError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: FreqiError, sentinel: Any) -> "Result[T]":
        return cls(ok=False, value=sentinel, error=error)

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """Return the payload, re-raising the captured error on failure."""
        if not self.ok:
            if self.error is None:
                raise RuntimeError("failed Result carries no error")
            raise self.error
        return self.value
