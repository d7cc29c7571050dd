from __future__ import annotations

"""Interval presets for common scales and chords in 12-TET.

Scales are stored as step patterns and expanded to semitone offsets from the
tonic; any preset can be passed directly as a scale request's ``intervals``.
"""

from itertools import accumulate
from typing import Dict, List


SCALE_PATTERNS = {
    "major": [2, 2, 1, 2, 2, 2, 1],
    "natural_minor": [2, 1, 2, 2, 1, 2, 2],
    "harmonic_minor": [2, 1, 2, 2, 1, 3, 1],
    "melodic_minor": [2, 1, 2, 2, 2, 2, 1],
    "major_pentatonic": [2, 2, 3, 2, 3],
    "minor_pentatonic": [3, 2, 2, 3, 2],
    "chromatic": [1] * 12,
}


def steps_to_intervals(steps: List[int]) -> List[int]:
    """Convert a step pattern to offsets from the tonic, dropping the octave.

    Args:
        steps: Semitone steps between consecutive degrees, summing to an octave.

    Returns:
        Offsets starting at 0, one per degree.
    """
    return [0] + list(accumulate(steps))[:-1]


SCALE_INTERVALS: Dict[str, List[int]] = {name: steps_to_intervals(steps) for name, steps in SCALE_PATTERNS.items()}

CHORD_INTERVALS: Dict[str, List[int]] = {
    "major": [0, 4, 7],
    "minor": [0, 3, 7],
    "diminished": [0, 3, 6],
    "augmented": [0, 4, 8],
    "dominant7": [0, 4, 7, 10],
    "major7": [0, 4, 7, 11],
    "minor7": [0, 3, 7, 10],
}


def intervals_for(name: str) -> List[int]:
    """Return a copy of the scale or chord preset called ``name``.

    Scale names are looked up first; prefix with ``chord:`` to force a chord,
    e.g. ``intervals_for("chord:major")``.

    Raises:
        KeyError: for unknown names.
    """
    if name.startswith("chord:"):
        key = name[len("chord:"):]
        if key not in CHORD_INTERVALS:
            raise KeyError(f"Unknown chord preset: {key}")
        return list(CHORD_INTERVALS[key])
    if name in SCALE_INTERVALS:
        return list(SCALE_INTERVALS[name])
    if name in CHORD_INTERVALS:
        return list(CHORD_INTERVALS[name])
    raise KeyError(f"Unknown scale or chord preset: {name}")
