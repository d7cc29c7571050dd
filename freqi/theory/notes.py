# freqi/theory/notes.py
from __future__ import annotations
from typing import Tuple

CHROMATIC_SCALE: Tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


def pitch_class_name(interval: float, root_note: float = 0) -> str:
    """Name of the 12-TET pitch class ``root_note + interval`` semitones above C."""
    total = root_note + interval
    if isinstance(total, float):
        if not total.is_integer():
            raise ValueError(f"Interval {total} is not a whole semitone")
        total = int(total)
    return CHROMATIC_SCALE[total % 12]
