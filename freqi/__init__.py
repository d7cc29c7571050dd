"""freqi: equal-temperament frequencies for scales, chords and single notes.

Typical use::

    from freqi import compute_scale

    result = compute_scale({"intervals": [0, 4, 7], "num_notes": 6})
    if result.ok:
        print(result.value)
"""

from __future__ import annotations

from .config import FreqiDefaults, load_defaults, normalize_config
from .errors import EmptyOrMissingField, FreqiError, RangeViolation, TypeMismatch
from .models import AugmentationRequest, NoteRequest, ScaleConfig
from .result import Result
from .table import scale_table
from .theory import (
    CHORD_INTERVALS,
    CHROMATIC_SCALE,
    SCALE_INTERVALS,
    augment_sequence,
    compute_scale,
    compute_single_note,
    intervals_for,
    pitch_class_name,
    resolve_scale,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AugmentationRequest",
    "CHORD_INTERVALS",
    "CHROMATIC_SCALE",
    "EmptyOrMissingField",
    "FreqiDefaults",
    "FreqiError",
    "NoteRequest",
    "RangeViolation",
    "Result",
    "SCALE_INTERVALS",
    "ScaleConfig",
    "TypeMismatch",
    "augment_sequence",
    "compute_scale",
    "compute_single_note",
    "intervals_for",
    "load_defaults",
    "normalize_config",
    "pitch_class_name",
    "resolve_scale",
    "scale_table",
]
