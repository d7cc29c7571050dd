from .config import FreqiDefaults, load_defaults, normalize_config  # noqa: F401
