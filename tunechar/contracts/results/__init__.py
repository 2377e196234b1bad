"""Result contracts.

Callers are expected to serialize via `model_dump()` at the boundary.
"""

from .characteristics import ExtractionMetadata, FitContext
from .common import ParamValue, RecordModel, ResultModel
from .tuning import (
    Combination,
    FitFailure,
    FitOutcome,
    FitResult,
    MetricRecord,
    TuningResult,
)

__all__ = [
    "ParamValue",
    "RecordModel",
    "ResultModel",
    "FitContext",
    "ExtractionMetadata",
    "Combination",
    "FitResult",
    "FitFailure",
    "FitOutcome",
    "MetricRecord",
    "TuningResult",
]
