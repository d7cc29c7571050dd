from __future__ import annotations

"""Cyclic extension of interval patterns.

A short pattern such as a triad ``[0, 4, 7]`` is stretched to the number of
notes a caller asks for by cycling through it. Each pass adds a running offset
to the repeated values, so by default the pattern climbs an octave per pass.
"""

import logging
from typing import Any, List, Optional, Sequence

from ..errors import FreqiError
from ..models import as_mapping
from ..result import Result
from ..util.logs import report_error
from .validation import (
    as_integral,
    check_augmentation_ranges,
    check_augmentation_types,
    ensure_mapping,
)


def extend_cyclically(
    original: Sequence[float],
    difference: int,
    repeat_multiple: int,
    amount_to_add: float,
) -> List[float]:
    """Return ``original`` followed by ``difference`` generated values.

    The offset added to repeated values starts at ``amount_to_add``. Once the
    ``repeat_multiple``-th full pass has been generated the cursor restarts and
    the offset drops to 0 for good. Before that point, every natural wrap back
    to the start of ``original`` doubles the offset.
    """
    length = len(original)
    repeat_point = length * repeat_multiple - 1
    offset = amount_to_add
    cursor = 0
    tail: List[float] = []
    for i in range(difference):
        tail.append(original[cursor] + offset)
        if i == repeat_point:
            cursor = 0
            offset = 0
        elif cursor == length - 1:
            cursor = 0
            # Doubles rather than adds amount_to_add again; kept as observed
            offset += offset
        else:
            cursor += 1
    return list(original) + tail


def augment_sequence(
    request: Any,
    *,
    verbose: bool = True,
    logger: Optional[logging.Logger] = None,
) -> Result[List[float]]:
    """Extend ``original_array`` by ``difference`` values.

    Args:
        request: AugmentationRequest or mapping with ``original_array``,
            ``difference``, ``repeat_multiple`` and ``amount_to_add``.
        verbose: Log validation failures when True.
        logger: Logger to report to; defaults to the package logger.

    Returns:
        Result holding the extended list, or ``[]`` with the error on failure.
    """
    data = as_mapping(request)
    try:
        ensure_mapping(data, "Augmentation request")
        check_augmentation_types(data)
        check_augmentation_ranges(data)
    except FreqiError as e:
        report_error(f"Invalid augmentation request: {e}", verbose=verbose, logger=logger)
        return Result.failure(e, [])

    values = extend_cyclically(
        data["original_array"],
        as_integral("difference", data["difference"]),
        as_integral("repeat_multiple", data["repeat_multiple"]),
        data["amount_to_add"],
    )
    return Result.success(values)
