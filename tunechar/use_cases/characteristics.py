"""Characteristics use-case: collect -> (join metrics) -> (pivot wide)."""

from __future__ import annotations

from typing import Any

import pandas as pd

from tunechar.components.characteristics import (
    collect,
    collect_metrics as _collect_metrics,
    combinations_frame,
    join,
    pivot_wide,
    read_tuning_result,
)


def collect_characteristics(
    tuning_result: Any,
    add_metrics: bool = False,
    wide: bool = False,
) -> pd.DataFrame:
    """Characteristics of every successful fit as a table.

    - long (default): ``config_id, resample_id, characteristic, value`` and,
      with ``add_metrics``, one column per metric holding its mean over
      resamples for the row's combination.
    - ``wide=True``: one row per attempted combination with its
      hyperparameters, one column per characteristic (mean over resamples)
      and, with ``add_metrics``, one column per metric.

    Missing pieces show up as fewer rows or NaN cells. Only a malformed
    ``tuning_result`` raises (:class:`~tunechar.contracts.errors.MalformedInputError`).
    """
    result = read_tuning_result(tuning_result)
    characteristics = collect(result)
    metrics = _collect_metrics(result) if add_metrics else None

    if not wide:
        return join(characteristics, metrics, add_metrics=add_metrics)

    table = pivot_wide(characteristics, combinations=combinations_frame(result))
    return join(table, metrics, add_metrics=add_metrics)


def collect_metrics(tuning_result: Any, summarize: bool = False) -> pd.DataFrame:
    """The tuner's metrics, per resample or summarised per combination.

    ``summarize=True`` returns ``config_id, metric, mean, n, std_err`` with
    missing resamples left out of every statistic.
    """
    metrics = _collect_metrics(tuning_result)
    if not summarize:
        return metrics

    grouped = metrics.groupby(["config_id", "metric"], sort=False)["value"]
    summary = grouped.agg(mean="mean", n="count", std="std").reset_index()
    summary["std_err"] = summary["std"] / summary["n"].pow(0.5)
    return summary.drop(columns=["std"])
