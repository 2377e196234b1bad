"""Public tunechar API.

This module is the **stable public surface**:

    from tunechar.api import tune_grid, extraction_hook, collect_characteristics

The underlying implementations live under :mod:`tunechar.use_cases` and
:mod:`tunechar.components`.
"""

from __future__ import annotations

from tunechar.components.characteristics import (
    CharacteristicsHook,
    FittedModel,
    average_metrics,
    collect,
    extract,
    extraction_hook,
    join,
    make_extraction_hook,
    melt_long,
    pivot_wide,
)
from tunechar.contracts.errors import MalformedInputError
from tunechar.contracts.results import ExtractionMetadata, FitContext, TuningResult
from tunechar.contracts.tuning_configs import GridConfig, ResampleConfig, TuneControl
from tunechar.registries.builtins.extractors import ACTIVE_COEF_TOL
from tunechar.registries.extractors import register_extractor
from tunechar.use_cases.characteristics import collect_characteristics, collect_metrics
from tunechar.use_cases.tuning import tune_grid

__all__ = [
    "tune_grid",
    "collect_characteristics",
    "collect_metrics",
    "collect",
    "join",
    "average_metrics",
    "pivot_wide",
    "melt_long",
    "extract",
    "extraction_hook",
    "make_extraction_hook",
    "register_extractor",
    "CharacteristicsHook",
    "FittedModel",
    "FitContext",
    "ExtractionMetadata",
    "TuningResult",
    "GridConfig",
    "ResampleConfig",
    "TuneControl",
    "MalformedInputError",
    "ACTIVE_COEF_TOL",
]
