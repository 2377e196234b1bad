from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .choices import RegressionMetricName, ResampleKind


class GridConfig(BaseModel):
    """
    Exhaustive grid over hyperparameters, scored on every resample.
    """
    param_grid: Dict[str, List[Any]] = Field(
        default_factory=dict,
        description="Sklearn-style param_grid: param -> list of values",
    )
    metrics: List[RegressionMetricName] = Field(default_factory=lambda: ["rmse"])


class ResampleConfig(BaseModel):
    """
    How the data is split into analysis/assessment rows.

    - bootstrap: rows drawn with replacement; assessment on out-of-bag rows.
    - kfold: sklearn KFold with shuffling.
    """
    kind: ResampleKind = "bootstrap"
    n: int = Field(default=5, ge=2)
    seed: Optional[int] = None


class TuneControl(BaseModel):
    """
    Run-level knobs for the tuner.

    ``extract`` is the per-fit callback slot. When set, it is invoked as
    ``extract(fitted_model, context)`` right after each successful fit and its
    return value is stored in :attr:`TuningResult.extracts`.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    extract: Optional[Callable[..., Any]] = None
    n_jobs: int = 1
    scale: bool = True
    verbose: bool = False
