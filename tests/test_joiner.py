"""Tests for joining characteristics with resample-averaged metrics."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from tunechar.components.characteristics import average_metrics, collect, collect_metrics, join, pivot_wide
from tunechar.contracts.errors import MalformedInputError
from tunechar.contracts.results import TuningResult


def _metrics(rows) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=["config_id", "resample_id", "metric", "value"])


class TestAverageMetrics:
    def test_mean_over_successful_resamples(self, scenario_result: TuningResult) -> None:
        means = average_metrics(collect_metrics(scenario_result))

        assert list(means.columns) == ["config_id", "rmse"]
        assert list(means["config_id"]) == ["Config01", "Config02", "Config03"]
        row = means.set_index("config_id").loc["Config02"]
        assert row["rmse"] == pytest.approx(2.0 + (0.1 + 0.2 + 0.3 + 0.5) / 4)

    def test_zero_successes_is_nan(self) -> None:
        table = _metrics(
            [
                ("Config01", "Resample01", "rmse", None),
                ("Config01", "Resample02", "rmse", np.nan),
                ("Config02", "Resample01", "rmse", 2.0),
            ]
        )

        means = average_metrics(table).set_index("config_id")

        assert np.isnan(means.loc["Config01", "rmse"])
        assert means.loc["Config02", "rmse"] == 2.0

    def test_metric_columns_in_first_seen_order(self) -> None:
        table = _metrics(
            [
                ("Config01", "Resample01", "rmse", 1.0),
                ("Config01", "Resample01", "mae", 0.5),
                ("Config01", "Resample01", "r2", 0.9),
            ]
        )

        assert list(average_metrics(table).columns) == ["config_id", "rmse", "mae", "r2"]

    def test_missing_columns_raise(self) -> None:
        with pytest.raises(MalformedInputError):
            average_metrics(pd.DataFrame({"config_id": ["Config01"], "value": [1.0]}))


class TestJoin:
    def test_without_metrics_returns_input_unchanged(self, scenario_result: TuningResult) -> None:
        chars = collect(scenario_result)

        assert join(chars, collect_metrics(scenario_result), add_metrics=False) is chars

    def test_left_join_keeps_every_row_in_order(self, scenario_result: TuningResult) -> None:
        chars = collect(scenario_result)

        joined = join(chars, collect_metrics(scenario_result), add_metrics=True)

        assert len(joined) == len(chars)
        assert list(joined.columns) == [*chars.columns, "rmse"]
        pd.testing.assert_frame_equal(joined[chars.columns], chars)

    def test_every_row_gets_its_combination_mean(self, scenario_result: TuningResult) -> None:
        joined = join(collect(scenario_result), collect_metrics(scenario_result), add_metrics=True)

        per_config = joined.groupby("config_id")["rmse"].nunique()
        assert (per_config == 1).all()
        config01 = joined[joined["config_id"] == "Config01"]["rmse"].iloc[0]
        assert config01 == pytest.approx(1.5 + 0.3)

    def test_combination_absent_from_metrics_gets_nan(self, scenario_result: TuningResult) -> None:
        metrics = collect_metrics(scenario_result)
        metrics = metrics[metrics["config_id"] != "Config03"]

        joined = join(collect(scenario_result), metrics, add_metrics=True)

        config03 = joined[joined["config_id"] == "Config03"]
        assert len(config03) == 5
        assert config03["rmse"].isna().all()

    def test_matches_manual_mean_then_merge(self, scenario_result: TuningResult) -> None:
        chars = collect(scenario_result)
        metrics = collect_metrics(scenario_result)

        untouched = join(chars, metrics, add_metrics=False)
        manual_means = (
            metrics.dropna(subset=["value"])
            .groupby(["config_id", "metric"])["value"]
            .mean()
            .unstack("metric")
            .reset_index()
        )
        manual_means.columns.name = None
        manual = untouched.merge(manual_means, on="config_id", how="left")

        pd.testing.assert_frame_equal(join(chars, metrics, add_metrics=True), manual)

    def test_empty_metrics_adds_no_columns(self, scenario_result: TuningResult) -> None:
        chars = collect(scenario_result)
        empty = _metrics([])

        joined = join(chars, empty, add_metrics=True)

        assert list(joined.columns) == list(chars.columns)

    def test_metric_named_like_existing_column_is_suffixed(self, result_builder) -> None:
        def chars(c: int, r: int):
            return {"rmse": 0.25 * c}

        result = result_builder(2, 3, chars, rmse=lambda c, r: float(c + r))
        wide = pivot_wide(collect(result))

        joined = join(wide, collect_metrics(result), add_metrics=True)

        assert list(joined.columns) == ["config_id", "rmse", "rmse_metric"]
        assert list(joined["rmse"]) == [0.25, 0.5]
        assert list(joined["rmse_metric"]) == pytest.approx([3.0, 4.0])
        assert joined.attrs["characteristics"] == ["rmse"]
