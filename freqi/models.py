from __future__ import annotations

"""Request and configuration records.

Every record is frozen and built fresh per call. Public operations accept either
one of these records or a plain mapping with the same field names.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Sequence


@dataclass(frozen=True)
class ScaleConfig:
    """Fully-populated scale request, produced by ``normalize_config``."""

    intervals: Sequence[float]
    start_freq: float = 440
    num_semitones: float = 12
    root_note: float = 0
    interval_start_index: int = 0
    repeat_multiple: int = 0
    num_notes: Optional[int] = None
    amount_to_add: Optional[float] = None
    type: str = "unknown"

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["intervals"] = _copy_sequence(self.intervals)
        return data


@dataclass(frozen=True)
class NoteRequest:
    interval: float
    start_freq: float = 440
    num_semitones: float = 12
    upwards_scale: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "interval": self.interval,
            "start_freq": self.start_freq,
            "num_semitones": self.num_semitones,
        }
        # Omitted unless set so direction falls back to the interval's sign
        if self.upwards_scale is not None:
            data["upwards_scale"] = self.upwards_scale
        return data


@dataclass(frozen=True)
class AugmentationRequest:
    original_array: Sequence[float]
    difference: int
    repeat_multiple: int = 0
    amount_to_add: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_array": _copy_sequence(self.original_array),
            "difference": self.difference,
            "repeat_multiple": self.repeat_multiple,
            "amount_to_add": self.amount_to_add,
        }


def _copy_sequence(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return list(value)
    return value


def as_mapping(request: Any) -> Any:
    """Return a plain dict for record instances, or the argument unchanged.

    Non-mapping arguments are passed through so the validators can reject them.
    """
    if isinstance(request, (ScaleConfig, NoteRequest, AugmentationRequest)):
        return request.to_dict()
    if isinstance(request, Mapping):
        return dict(request)
    return request
