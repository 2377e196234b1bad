"""Tests for the resampled grid tuner and its extract callback slot."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pytest
from pydantic import ValidationError

from tunechar.api import (
    TuneControl,
    collect,
    collect_characteristics,
    extraction_hook,
    tune_grid,
)
from tunechar.contracts.model_configs import DecisionTreeRegressorConfig, LassoRegressorConfig
from tunechar.components.splitters.resamples import BootstrapSplitter, KFoldSplitter


@pytest.fixture
def lasso_result(regression_data):
    X, y = regression_data
    return tune_grid(
        X,
        y,
        LassoRegressorConfig(),
        grid={"param_grid": {"alpha": [0.01, 1.0, 10.0]}, "metrics": ["rmse", "r2"]},
        resamples={"kind": "bootstrap", "n": 5, "seed": 7},
        control=TuneControl(extract=extraction_hook),
    )


def _exploding_hook(fitted_model, context):
    raise RuntimeError("extractor exploded")


class TestTuneGrid:
    def test_every_pair_is_fit_and_extracted(self, lasso_result) -> None:
        assert [c.config_id for c in lasso_result.combinations] == ["Config01", "Config02", "Config03"]
        assert lasso_result.resamples == [f"Resample0{i}" for i in range(1, 6)]
        assert len(lasso_result.fits) == 15
        assert lasso_result.n_failures() == 0
        assert len(lasso_result.extracts) == 15
        assert len(lasso_result.metrics) == 15 * 2
        assert lasso_result.metric_names == ["rmse", "r2"]

    def test_fits_are_in_engine_order(self, lasso_result) -> None:
        keys = [f.key for f in lasso_result.fits]
        assert keys[:2] == [("Config01", "Resample01"), ("Config01", "Resample02")]
        assert keys[-1] == ("Config03", "Resample05")

    def test_combination_params_are_logical_names(self, lasso_result) -> None:
        assert lasso_result.combinations[0].params == {"alpha": 0.01}

    def test_heavier_penalty_keeps_fewer_features(self, lasso_result) -> None:
        wide = collect_characteristics(lasso_result, add_metrics=True, wide=True).set_index("config_id")

        assert list(wide.columns) == ["alpha", "coef_l1_norm", "num_active_features", "rmse", "r2"]
        assert wide.loc["Config01", "num_active_features"] >= wide.loc["Config03", "num_active_features"]
        assert wide.loc["Config01", "num_active_features"] <= 12

    def test_without_extract_nothing_is_attached(self, regression_data) -> None:
        X, y = regression_data
        result = tune_grid(X, y, {"algo": "lasso"}, grid={"param_grid": {"alpha": [0.1, 1.0]}})

        assert result.extracts == []
        assert collect(result).empty
        wide = collect_characteristics(result, add_metrics=True, wide=True)
        assert list(wide.columns) == ["config_id", "alpha", "rmse"]
        assert len(wide) == 2

    def test_failed_fits_are_recorded_and_skipped(self, regression_data) -> None:
        X, y = regression_data
        result = tune_grid(
            X,
            y,
            LassoRegressorConfig(),
            grid={"param_grid": {"alpha": [-1.0, 0.5]}},
            resamples={"n": 3, "seed": 0},
            control=TuneControl(extract=extraction_hook),
        )

        assert result.n_failures() == 3
        assert all(f.config_id == "Config01" for f in result.fits if f.status == "failed")
        assert result.note == "3 fit(s) failed."

        table = collect(result)
        assert set(table["config_id"]) == {"Config02"}

        wide = collect_characteristics(result, add_metrics=True, wide=True).set_index("config_id")
        assert np.isnan(wide.loc["Config01", "num_active_features"])
        assert np.isnan(wide.loc["Config01", "rmse"])
        assert wide.loc["Config02", "rmse"] > 0

    def test_unsupported_family_contributes_no_rows(self, regression_data) -> None:
        X, y = regression_data
        result = tune_grid(
            X,
            y,
            {"algo": "knnreg"},
            grid={"param_grid": {"n_neighbors": [3, 9]}},
            resamples={"n": 2, "seed": 0},
            control=TuneControl(extract=extraction_hook),
        )

        assert len(result.extracts) == 4
        assert all(m.characteristics == {} for m in result.extracts)
        assert collect(result).empty

    def test_tree_characteristics(self, regression_data) -> None:
        X, y = regression_data
        result = tune_grid(
            X,
            y,
            DecisionTreeRegressorConfig(random_state=0),
            grid={"param_grid": {"max_depth": [2, 4]}},
            resamples={"kind": "kfold", "n": 3, "seed": 0},
            control=TuneControl(extract=extraction_hook),
        )

        assert result.resamples == ["Fold01", "Fold02", "Fold03"]
        wide = collect_characteristics(result, wide=True).set_index("config_id")
        assert wide.loc["Config01", "tree_depth"] <= 2
        assert wide.loc["Config02", "tree_depth"] <= 4

    def test_parallel_matches_sequential(self, regression_data) -> None:
        X, y = regression_data
        kwargs = dict(
            grid={"param_grid": {"alpha": [0.1, 1.0]}},
            resamples={"n": 3, "seed": 3},
        )

        seq = tune_grid(X, y, LassoRegressorConfig(), control=TuneControl(extract=extraction_hook), **kwargs)
        par = tune_grid(
            X, y, LassoRegressorConfig(), control=TuneControl(extract=extraction_hook, n_jobs=2), **kwargs
        )

        pd.testing.assert_frame_equal(
            collect_characteristics(par, add_metrics=True),
            collect_characteristics(seq, add_metrics=True),
        )

    def test_verbose_logs_one_line_per_combination(self, regression_data, caplog) -> None:
        X, y = regression_data
        with caplog.at_level(logging.INFO, logger="tunechar.components.tuning.grid"):
            tune_grid(
                X,
                y,
                LassoRegressorConfig(),
                grid={"param_grid": {"alpha": [0.1, 1.0]}},
                resamples={"n": 2},
                control=TuneControl(verbose=True),
            )

        lines = [r.getMessage() for r in caplog.records if "fits ok" in r.getMessage()]
        assert len(lines) == 2
        assert lines[0].startswith("Config01")

    def test_unknown_metric_is_a_config_error(self, regression_data) -> None:
        X, y = regression_data
        with pytest.raises(ValidationError):
            tune_grid(X, y, LassoRegressorConfig(), grid={"metrics": ["auc"]})

    def test_unknown_model_is_a_config_error(self, regression_data) -> None:
        X, y = regression_data
        with pytest.raises(ValidationError):
            tune_grid(X, y, {"algo": "transformer"})

    def test_raising_extract_callback_leaves_fit_ok(self, regression_data, caplog) -> None:
        X, y = regression_data
        with caplog.at_level(logging.WARNING, logger="tunechar.components.tuning.grid"):
            result = tune_grid(
                X,
                y,
                LassoRegressorConfig(),
                grid={"param_grid": {"alpha": [0.1, 1.0]}},
                resamples={"n": 2, "seed": 0},
                control=TuneControl(extract=_exploding_hook),
            )

        assert result.n_failures() == 0
        assert len(result.fits) == 4
        assert result.extracts == []
        assert all(m.value is not None for m in result.metrics)
        assert collect(result).empty
        assert "extractor exploded" in caplog.text


class TestResampleSplitters:
    def test_bootstrap_assesses_out_of_bag_rows(self) -> None:
        resamples = list(BootstrapSplitter(n=4, seed=1).split(50))

        assert [r.resample_id for r in resamples] == ["Resample01", "Resample02", "Resample03", "Resample04"]
        for r in resamples:
            assert len(r.idx_tr) == 50
            assert not set(r.idx_te) & set(r.idx_tr)

    def test_bootstrap_is_reproducible(self) -> None:
        a = list(BootstrapSplitter(n=3, seed=11).split(30))
        b = list(BootstrapSplitter(n=3, seed=11).split(30))

        for ra, rb in zip(a, b):
            np.testing.assert_array_equal(ra.idx_tr, rb.idx_tr)

    def test_kfold_partitions_rows(self) -> None:
        folds = list(KFoldSplitter(n=5, seed=0).split(23))

        assigned = np.sort(np.concatenate([f.idx_te for f in folds]))
        np.testing.assert_array_equal(assigned, np.arange(23))
