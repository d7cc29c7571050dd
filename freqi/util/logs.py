from __future__ import annotations

"""Diagnostic logging helpers.

Every public operation takes ``verbose`` and ``logger`` keyword arguments; these
helpers resolve them so no call depends on process-wide state.
"""

import logging
from typing import Optional

LOGGER_NAME = "freqi"

_log = logging.getLogger(LOGGER_NAME)
_log.addHandler(logging.NullHandler())


def resolve_logger(logger: Optional[logging.Logger] = None) -> logging.Logger:
    return logger if logger is not None else _log


def report_error(msg: str, *, verbose: bool = True, logger: Optional[logging.Logger] = None) -> None:
    if verbose:
        resolve_logger(logger).error(msg)


def report_warning(msg: str, *, verbose: bool = True, logger: Optional[logging.Logger] = None) -> None:
    if verbose:
        resolve_logger(logger).warning(msg)


def short_number(value: object) -> str:
    """Printable form of a number; huge ints are summarized by bit length."""
    if isinstance(value, int) and value.bit_length() > 64:
        return f"<{value.bit_length()}-bit int>"
    return repr(value)
