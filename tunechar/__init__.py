"""tunechar: per-fit model characteristics for resampled hyperparameter tuning.

Prefer the stable public surface in :mod:`tunechar.api`.
"""

__version__ = "0.1.0"
