from __future__ import annotations

"""Default loading and scale-request normalization.

Package defaults live in ``defaults.yml`` next to this module and are validated
through a pydantic model. ``normalize_config`` fills the unset fields of a raw
scale request from those defaults without validating the request itself.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import logging

import yaml
from pydantic import BaseModel, Field, field_validator

from ..models import ScaleConfig, as_mapping
from ..util.logs import report_warning


SCALE_FIELDS = (
    "intervals",
    "start_freq",
    "num_semitones",
    "root_note",
    "interval_start_index",
    "repeat_multiple",
    "num_notes",
    "amount_to_add",
    "type",
)

_DEFAULTS_CACHE: Optional["FreqiDefaults"] = None


class FreqiDefaults(BaseModel):
    """Defaults substituted into unset scale-request fields.

    - start_freq: reference frequency in Hz (>0)
    - num_semitones: equal divisions of the octave (>0)
    - root_note: semitone offset added to every interval
    - interval_start_index: rotation into the interval pattern (>=0)
    - repeat_multiple: full cycles before augmentation growth stops (>=0)
    - type: diagnostic label
    """

    # int stays int so integer patterns keep exact integer arithmetic
    start_freq: Union[int, float] = 440
    num_semitones: Union[int, float] = 12
    root_note: Union[int, float] = 0
    interval_start_index: int = Field(0, ge=0)
    repeat_multiple: int = Field(0, ge=0)
    type: str = "unknown"

    @field_validator("start_freq", "num_semitones")
    def _positive(cls, v: Union[int, float]) -> Union[int, float]:
        if v <= 0:
            raise ValueError("must be greater than 0")
        return v


def _defaults_path() -> Path:
    return Path(__file__).with_name("defaults.yml")


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_defaults(path: Optional[Union[str, Path]] = None) -> FreqiDefaults:
    """Load normalization defaults from YAML.

    Args:
        path: Optional path to a YAML file. If None, use the packaged defaults.

    Returns:
        A validated FreqiDefaults instance.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        pydantic.ValidationError: if the file holds out-of-range values.
    """
    global _DEFAULTS_CACHE
    if path is not None:
        return FreqiDefaults(**_load_yaml(Path(path)))
    if _DEFAULTS_CACHE is None:
        _DEFAULTS_CACHE = FreqiDefaults(**_load_yaml(_defaults_path()))
    return _DEFAULTS_CACHE


def _pick(raw: Mapping[str, Any], key: str, fallback: Any) -> Any:
    value = raw.get(key)
    return fallback if value is None else value


def normalize_config(
    raw: Any,
    defaults: Optional[FreqiDefaults] = None,
    *,
    verbose: bool = True,
    logger: Optional[logging.Logger] = None,
) -> ScaleConfig:
    """Build a fully-populated ScaleConfig from a partial scale request.

    Missing or None fields take their defaults; everything else is copied as
    given, valid or not. ``num_notes`` defaults to the interval count and
    ``amount_to_add`` to the resolved ``num_semitones``.

    Raises:
        TypeError: if ``raw`` is neither a mapping nor a ScaleConfig.
    """
    data = as_mapping(raw)
    if not isinstance(data, dict):
        raise TypeError(f"Scale config should be a mapping, got {type(raw).__name__}")
    d = defaults if defaults is not None else load_defaults()

    unknown = sorted(k for k in data if k not in SCALE_FIELDS)
    if unknown:
        report_warning(f"Ignoring unknown scale config keys: {', '.join(map(str, unknown))}", verbose=verbose, logger=logger)

    intervals = data.get("intervals")
    if isinstance(intervals, (list, tuple)):
        intervals = tuple(intervals)

    num_semitones = _pick(data, "num_semitones", d.num_semitones)
    num_notes = data.get("num_notes")
    if num_notes is None and isinstance(intervals, tuple):
        num_notes = len(intervals)

    return ScaleConfig(
        intervals=intervals,
        start_freq=_pick(data, "start_freq", d.start_freq),
        num_semitones=num_semitones,
        root_note=_pick(data, "root_note", d.root_note),
        interval_start_index=_pick(data, "interval_start_index", d.interval_start_index),
        repeat_multiple=_pick(data, "repeat_multiple", d.repeat_multiple),
        num_notes=num_notes,
        amount_to_add=_pick(data, "amount_to_add", num_semitones),
        type=data.get("type") or d.type,
    )
