from __future__ import annotations

"""Request validation for augmentation, single notes and scales.

Each request shape has a type check and a range check. Checks raise the
appropriate FreqiError subclass; the public operations turn those into
failed Results.
"""

import math
from typing import Any, Dict, Mapping

from ..errors import EmptyOrMissingField, RangeViolation, TypeMismatch
from ..models import ScaleConfig

# Fields used as counts or indices must hold whole numbers
INTEGRAL_FIELDS = {"interval_start_index", "repeat_multiple", "num_notes", "difference"}


def is_number(value: Any) -> bool:
    """True for int/float values that are not bool and not NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # ints never NaN and may be too large to convert to float
    return not (isinstance(value, float) and math.isnan(value))


def as_integral(name: str, value: Any) -> int:
    """Return ``value`` as int, accepting whole floats like 2.0."""
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise TypeMismatch(f"{name} must be a whole number", field=name)


def ensure_mapping(request: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(request, Mapping):
        raise EmptyOrMissingField(f"{what} should be a mapping, got {type(request).__name__}")
    return request


def check_number_sequence(name: str, values: Any) -> None:
    if values is None:
        raise EmptyOrMissingField(f"{name} is missing", field=name)
    if not isinstance(values, (list, tuple)):
        raise TypeMismatch(f"{name} is not a list", field=name)
    if len(values) == 0:
        raise EmptyOrMissingField(f"{name} is empty", field=name)
    for v in values:
        if not is_number(v):
            raise TypeMismatch(f"{name} contains a value that is not a number: {v!r}", field=name)


def _check_number(name: str, value: Any) -> None:
    if not is_number(value):
        raise TypeMismatch(f"{name} is not a number: {value!r}", field=name)
    if name in INTEGRAL_FIELDS:
        as_integral(name, value)


def _require(data: Mapping[str, Any], names) -> None:
    for name in names:
        if data.get(name) is None:
            raise EmptyOrMissingField(f"{name} is missing", field=name)


# --- Augmentation ---

def check_augmentation_types(data: Mapping[str, Any]) -> None:
    check_number_sequence("original_array", data.get("original_array"))
    _require(data, ("difference", "repeat_multiple", "amount_to_add"))
    for name in ("difference", "repeat_multiple", "amount_to_add"):
        _check_number(name, data[name])


def check_augmentation_ranges(data: Mapping[str, Any]) -> None:
    if data["difference"] <= 0:
        raise RangeViolation("difference should be higher than 0", field="difference")
    if data["repeat_multiple"] < 0:
        raise RangeViolation("repeat_multiple should be 0 or higher", field="repeat_multiple")
    if data["amount_to_add"] < 0:
        raise RangeViolation("amount_to_add should be 0 or higher", field="amount_to_add")


# --- Single note ---

def check_note_types(data: Mapping[str, Any]) -> None:
    _require(data, ("interval", "start_freq", "num_semitones"))
    for name, value in data.items():
        if name == "upwards_scale":
            if value is not None and not isinstance(value, bool):
                raise TypeMismatch(f"{name} is not a boolean: {value!r}", field=name)
        else:
            _check_number(name, value)


def check_note_ranges(data: Mapping[str, Any]) -> None:
    for name, value in data.items():
        # interval may be negative for downward motion
        if name in ("interval", "upwards_scale"):
            continue
        if value < 0:
            raise RangeViolation(f"{name} must be a positive number", field=name)
    if data["num_semitones"] == 0:
        raise RangeViolation("num_semitones must be a positive number", field="num_semitones")


# --- Scale ---

def check_scale_types(config: ScaleConfig) -> None:
    check_number_sequence("intervals", config.intervals)
    for name, value in _scale_numeric_fields(config).items():
        _check_number(name, value)


def check_scale_ranges(config: ScaleConfig) -> None:
    for name, value in _scale_numeric_fields(config).items():
        if name == "root_note":
            continue
        if name == "num_semitones" and value == 0:
            raise RangeViolation("num_semitones must be a positive number", field=name)
        if value < 0:
            raise RangeViolation(f"{name} must be zero or a positive number", field=name)


def _scale_numeric_fields(config: ScaleConfig) -> Dict[str, Any]:
    return {
        "start_freq": config.start_freq,
        "num_semitones": config.num_semitones,
        "root_note": config.root_note,
        "interval_start_index": config.interval_start_index,
        "repeat_multiple": config.repeat_multiple,
        "num_notes": config.num_notes,
        "amount_to_add": config.amount_to_add,
    }
