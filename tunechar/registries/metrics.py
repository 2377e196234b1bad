from __future__ import annotations

from typing import Callable, Dict

import numpy as np
from sklearn.metrics import (
    explained_variance_score,
    mean_absolute_error,
    mean_squared_error,
    r2_score,
)

from tunechar.registries.base import Registry

# Regression metrics computed on each resample's assessment rows.
RegressionScorer = Callable[[np.ndarray, np.ndarray], float]

_REG_METRICS: Registry[str, RegressionScorer] = Registry(_name="regression_metrics")


@_REG_METRICS.register("rmse")
def _rmse(y: np.ndarray, yhat: np.ndarray) -> float:
    return float(np.sqrt(mean_squared_error(y, yhat)))


@_REG_METRICS.register("mse")
def _mse(y: np.ndarray, yhat: np.ndarray) -> float:
    return float(mean_squared_error(y, yhat))


@_REG_METRICS.register("mae")
def _mae(y: np.ndarray, yhat: np.ndarray) -> float:
    return float(mean_absolute_error(y, yhat))


@_REG_METRICS.register("r2")
def _r2(y: np.ndarray, yhat: np.ndarray) -> float:
    return float(r2_score(y, yhat))


@_REG_METRICS.register("explained_variance")
def _explained_variance(y: np.ndarray, yhat: np.ndarray) -> float:
    return float(explained_variance_score(y, yhat))


def list_metrics() -> list[str]:
    return sorted(_REG_METRICS.keys())


def get_scorer(metric_name: str) -> RegressionScorer:
    if metric_name not in _REG_METRICS:
        raise ValueError(
            f"Unknown regression metric '{metric_name}'. Supported: {list_metrics()}"
        )
    return _REG_METRICS.get(metric_name)


def make_scorers(metric_names) -> Dict[str, RegressionScorer]:
    """Resolve every requested metric up front so config errors surface before fitting."""
    return {name: get_scorer(name) for name in metric_names}
