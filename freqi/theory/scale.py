from __future__ import annotations

"""Scale and chord assembly.

A scale request names an interval pattern plus optional tuning, rotation and
length settings. The pattern is extended when the requested notes run past its
end, rotated by ``interval_start_index`` for inversions, shifted by
``root_note`` and turned into frequencies one note at a time.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..config.config import FreqiDefaults, normalize_config
from ..errors import FreqiError
from ..models import ScaleConfig, as_mapping
from ..result import Result
from ..util.logs import report_error, report_warning, short_number
from .augment import augment_sequence
from .temperament import compute_single_note
from .validation import as_integral, check_scale_ranges, check_scale_types, ensure_mapping


@dataclass(frozen=True)
class ResolvedScale:
    """Validated config plus the final interval of every note to synthesize."""

    config: ScaleConfig
    intervals: List[float]


def _full_intervals(config: ScaleConfig, *, verbose: bool, logger: Optional[logging.Logger]) -> Result[List[float]]:
    intervals = list(config.intervals)
    start = as_integral("interval_start_index", config.interval_start_index)
    highest_index = start + as_integral("num_notes", config.num_notes)
    if highest_index <= len(intervals):
        return Result.success(intervals)
    return augment_sequence(
        {
            "original_array": intervals,
            "difference": highest_index - len(intervals),
            "repeat_multiple": config.repeat_multiple,
            "amount_to_add": config.amount_to_add,
        },
        verbose=verbose,
        logger=logger,
    )


def resolve_scale(
    config: Any,
    *,
    verbose: bool = True,
    logger: Optional[logging.Logger] = None,
    defaults: Optional[FreqiDefaults] = None,
) -> Result[ResolvedScale]:
    """Normalize and validate a scale request and work out its note intervals.

    The returned intervals already include the rotation and ``root_note``.
    When ``interval_start_index + num_notes`` fits inside the pattern, every
    interval from the start index to the end of the pattern is kept, so
    ``num_notes`` only ever lengthens a scale.
    """
    try:
        raw = ensure_mapping(as_mapping(config), "Scale config")
        cfg = normalize_config(raw, defaults, verbose=verbose, logger=logger)
        check_scale_types(cfg)
        check_scale_ranges(cfg)
    except FreqiError as e:
        report_error(f"Check your scale config values are valid: {e}", verbose=verbose, logger=logger)
        return Result.failure(e, False)

    full = _full_intervals(cfg, verbose=verbose, logger=logger)
    if not full.ok:
        return Result.failure(full.error, False)  # type: ignore[arg-type]

    start = as_integral("interval_start_index", cfg.interval_start_index)
    final = [full.value[i] + cfg.root_note for i in range(start, len(full.value))]
    return Result.success(ResolvedScale(config=cfg, intervals=final))


def synthesize_notes(
    resolved: ResolvedScale,
    *,
    verbose: bool = True,
    logger: Optional[logging.Logger] = None,
) -> List[Tuple[float, float]]:
    """Pair each resolved interval with its frequency.

    Notes whose synthesis fails or yields NaN are logged and left out.
    """
    cfg = resolved.config
    notes: List[Tuple[float, float]] = []
    for interval in resolved.intervals:
        note = compute_single_note(
            {
                "start_freq": cfg.start_freq,
                "num_semitones": cfg.num_semitones,
                "interval": interval,
            },
            verbose=verbose,
            logger=logger,
        )
        if note.ok and not math.isnan(note.value):
            notes.append((interval, note.value))
        else:
            report_warning(f"Skipping note at interval {short_number(interval)} ({cfg.type})", verbose=verbose, logger=logger)
    return notes


def compute_scale(
    config: Any,
    *,
    verbose: bool = True,
    logger: Optional[logging.Logger] = None,
    defaults: Optional[FreqiDefaults] = None,
) -> Result[List[float]]:
    """Compute the frequencies of a scale or chord.

    Args:
        config: ScaleConfig or mapping; only ``intervals`` is required.
        verbose: Log failures and skipped notes when True.
        logger: Logger to report to; defaults to the package logger.
        defaults: Overrides the packaged normalization defaults.

    Returns:
        Result holding the list of frequencies, or ``False`` with the error.
    """
    resolved = resolve_scale(config, verbose=verbose, logger=logger, defaults=defaults)
    if not resolved.ok:
        return Result.failure(resolved.error, False)  # type: ignore[arg-type]

    return Result.success([freq for _, freq in synthesize_notes(resolved.value, verbose=verbose, logger=logger)])
