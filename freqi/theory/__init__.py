"""Equal-temperament computation layer."""

from .augment import augment_sequence  # noqa: F401
from .notes import CHROMATIC_SCALE, pitch_class_name  # noqa: F401
from .scale import compute_scale, resolve_scale  # noqa: F401
from .scales import CHORD_INTERVALS, SCALE_INTERVALS, intervals_for  # noqa: F401
from .temperament import compute_single_note  # noqa: F401
