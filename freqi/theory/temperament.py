from __future__ import annotations

"""Equal-temperament frequency for a single note."""

import logging
import math
from typing import Any, Optional

from ..errors import FreqiError, RangeViolation
from ..models import as_mapping
from ..result import Result
from ..util.logs import report_error, short_number
from .validation import check_note_ranges, check_note_types, ensure_mapping


def et_frequency(interval: float, start_freq: float, num_semitones: float, upwards: Optional[bool] = None) -> float:
    """Frequency ``interval`` equal steps away from ``start_freq``.

    Direction follows the sign of ``interval`` unless ``upwards`` is given.

    Raises:
        RangeViolation: if the result is not a finite float.
    """
    up = interval >= 0 if upwards is None else upwards
    try:
        if up:
            freq = start_freq * math.pow(2, interval / num_semitones)
        else:
            freq = start_freq / math.pow(2, abs(interval) / num_semitones)
    except OverflowError as e:
        raise _out_of_range(interval, num_semitones) from e
    if not math.isfinite(freq):
        raise _out_of_range(interval, num_semitones)
    return freq


def _out_of_range(interval: float, num_semitones: float) -> RangeViolation:
    return RangeViolation(f"interval {short_number(interval)} is out of range for {short_number(num_semitones)} semitones", field="interval")


def compute_single_note(
    request: Any,
    *,
    verbose: bool = True,
    logger: Optional[logging.Logger] = None,
) -> Result[float]:
    """Compute one frequency from a signed interval.

    Args:
        request: NoteRequest or mapping with ``interval``, ``start_freq``,
            ``num_semitones`` and optionally ``upwards_scale``.
        verbose: Log validation failures when True.
        logger: Logger to report to; defaults to the package logger.

    Returns:
        Result holding the frequency in Hz, or ``False`` with the error.
    """
    data = as_mapping(request)
    try:
        ensure_mapping(data, "Note request")
        check_note_types(data)
        check_note_ranges(data)
        freq = et_frequency(
            data["interval"],
            data["start_freq"],
            data["num_semitones"],
            data.get("upwards_scale"),
        )
    except FreqiError as e:
        report_error(f"Invalid note request: {e}", verbose=verbose, logger=logger)
        return Result.failure(e, False)
    return Result.success(freq)
