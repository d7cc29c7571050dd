from __future__ import annotations

"""Tabular view of a computed scale."""

import logging
from typing import Any, Optional

import pandas as pd

from .config.config import FreqiDefaults
from .theory.notes import pitch_class_name
from .theory.scale import resolve_scale, synthesize_notes

COLUMNS = ["interval", "frequency", "note"]


def _note_name(interval: float, num_semitones: float) -> Optional[str]:
    if num_semitones != 12:
        return None
    try:
        return pitch_class_name(interval)
    except ValueError:
        return None


def scale_table(
    config: Any,
    *,
    verbose: bool = True,
    logger: Optional[logging.Logger] = None,
    defaults: Optional[FreqiDefaults] = None,
) -> pd.DataFrame:
    """Compute a scale and return one row per note.

    Columns:
    - interval: final semitone offset from start_freq (root_note included)
    - frequency: frequency in Hz
    - note: pitch-class name relative to C for whole-semitone 12-TET intervals, else None

    Rows match ``compute_scale`` one for one. An invalid config yields an
    empty frame with the same columns.
    """
    resolved = resolve_scale(config, verbose=verbose, logger=logger, defaults=defaults)
    if not resolved.ok:
        return pd.DataFrame(columns=COLUMNS)

    num_semitones = resolved.value.config.num_semitones
    rows = [
        {"interval": interval, "frequency": float(freq), "note": _note_name(interval, num_semitones)}
        for interval, freq in synthesize_notes(resolved.value, verbose=verbose, logger=logger)
    ]
    return pd.DataFrame(rows, columns=COLUMNS)
