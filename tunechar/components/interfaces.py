from __future__ import annotations
from typing import Any, Iterator, Mapping, Protocol

import numpy as np

from tunechar.components.splitters.types import Resample


class ModelBuilder(Protocol):
    def make_estimator(self) -> Any:
        """Return a configured, unfitted regressor."""
        ...


class ResampleSplitter(Protocol):
    def split(self, n_samples: int) -> Iterator[Resample]:
        """Yield analysis/assessment index pairs, one per resample, in a stable order."""
        ...


class HasCharacteristics(Protocol):
    """Extractor: reads one fitted model and reports its structural summary.

    Implementations read only the model they are given and never mutate it.
    """

    def __call__(self, fitted_model: Any) -> Mapping[str, float]:
        ...


class ExtractionHook(Protocol):
    """Per-fit callback the tuner invokes with ``(fitted_model, context)``.

    Must not raise, must not keep a reference to ``fitted_model`` after
    returning, and must not touch state shared with other invocations.
    """

    def __call__(self, fitted_model: Any, context: Any) -> Any:
        ...


class TuningStrategy(Protocol):
    """
    Resampled hyperparameter search: fit every combination on every resample
    and return a structured result.
    """
    def run(self, X: np.ndarray, y: np.ndarray) -> Any:
        ...
