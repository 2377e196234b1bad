"""Pytest fixtures for tunechar tests."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Tuple

import numpy as np
import pytest
from sklearn.datasets import make_regression

from tunechar.contracts.results import (
    Combination,
    ExtractionMetadata,
    FitFailure,
    FitResult,
    MetricRecord,
    TuningResult,
)
from tunechar.core.ids import format_ids

CharFn = Callable[[int, int], Dict[str, float]]
MetricFn = Callable[[int, int], Optional[float]]


def build_result(
    n_configs: int,
    n_resamples: int,
    characteristics: CharFn,
    *,
    rmse: Optional[MetricFn] = None,
    failed: Iterable[Tuple[int, int]] = (),
    without_metadata: Iterable[Tuple[int, int]] = (),
    families: Optional[Dict[int, str]] = None,
) -> TuningResult:
    """Hand-built TuningResult; configs/resamples are 1-based in the callbacks."""
    failed = set(failed)
    without_metadata = set(without_metadata)
    families = families or {}
    config_ids = format_ids("Config", n_configs)
    resample_ids = format_ids("Resample", n_resamples)

    fits, extracts, metrics = [], [], []
    for c, cid in enumerate(config_ids, start=1):
        for r, rid in enumerate(resample_ids, start=1):
            if (c, r) in failed:
                fits.append(FitFailure(config_id=cid, resample_id=rid, error="ValueError: boom"))
                metrics.append(MetricRecord(config_id=cid, resample_id=rid, metric="rmse", value=None))
                continue
            fits.append(FitResult(config_id=cid, resample_id=rid))
            if rmse is not None:
                metrics.append(MetricRecord(config_id=cid, resample_id=rid, metric="rmse", value=rmse(c, r)))
            if (c, r) not in without_metadata:
                extracts.append(
                    ExtractionMetadata(
                        config_id=cid,
                        resample_id=rid,
                        family=families.get(c, "lasso"),
                        characteristics=characteristics(c, r),
                    )
                )

    return TuningResult(
        algo="lasso",
        combinations=[
            Combination(config_id=cid, params={"alpha": 10.0 ** (c - 3)})
            for c, cid in enumerate(config_ids, start=1)
        ],
        resamples=resample_ids,
        fits=fits,
        extracts=extracts,
        metrics=metrics,
        metric_names=["rmse"] if rmse is not None else [],
    )


def scenario_active(c: int, r: int) -> Dict[str, float]:
    return {"num_active_features": c * 2 + (r % 2)}


def scenario_rmse(c: int, r: int) -> float:
    return 1.0 + c * 0.5 + r * 0.1


@pytest.fixture
def scenario_result() -> TuningResult:
    """3 combinations x 5 resamples; the fit (Config02, Resample04) failed."""
    return build_result(3, 5, scenario_active, rmse=scenario_rmse, failed=[(2, 4)])


@pytest.fixture
def mixed_family_result() -> TuningResult:
    """Config03 is a family with no extractor: its metadata is an empty mapping."""

    def chars(c: int, r: int) -> Dict[str, float]:
        return {} if c == 3 else {"num_active_features": 3 + c, "coef_l1_norm": 0.5 * r}

    return build_result(3, 4, chars, rmse=scenario_rmse, families={3: "knnreg"})


@pytest.fixture
def regression_data() -> Tuple[np.ndarray, np.ndarray]:
    X, y = make_regression(
        n_samples=120,
        n_features=12,
        n_informative=4,
        noise=5.0,
        random_state=0,
    )
    return X, y


@pytest.fixture
def result_builder() -> Callable[..., TuningResult]:
    return build_result
