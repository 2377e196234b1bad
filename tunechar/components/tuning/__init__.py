"""Resampled hyperparameter search with a per-fit extract callback slot."""

from .grid import ResampledGridSearch

__all__ = ["ResampledGridSearch"]
