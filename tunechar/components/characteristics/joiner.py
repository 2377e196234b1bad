"""Join characteristics with the tuner's resample-level metrics.

Metrics are averaged over resamples *before* the join: characteristics and
metrics meet at combination granularity, never at resample granularity,
because a failed fit can leave the two tables with different resample sets.
"""

from __future__ import annotations

from typing import Any, List

import numpy as np
import pandas as pd

from tunechar.contracts.errors import MalformedInputError

from .collector import read_tuning_result
from .tables import CONFIG_ID, METRIC_COLUMN, METRIC_COLUMNS, column_renames


def collect_metrics(tuning_result: Any) -> pd.DataFrame:
    """Metrics Table: one row per (combination, resample, metric); NaN where not computed."""
    result = read_tuning_result(tuning_result)
    records = [
        (m.config_id, m.resample_id, m.metric, np.nan if m.value is None else float(m.value))
        for m in result.metrics
    ]
    return pd.DataFrame(records, columns=METRIC_COLUMNS).astype({"value": float})


def _check_metrics_table(metrics_table: pd.DataFrame) -> None:
    missing = [c for c in METRIC_COLUMNS if c not in metrics_table.columns]
    if missing:
        raise MalformedInputError(f"Metrics table is missing column(s): {missing}")


def average_metrics(metrics_table: pd.DataFrame) -> pd.DataFrame:
    """One row per combination, one column per metric (mean over resamples).

    Missing values are ignored; a combination with no finite value for a
    metric gets NaN. Rows and columns keep first-seen order.
    """
    _check_metrics_table(metrics_table)
    if metrics_table.empty:
        return pd.DataFrame(columns=[CONFIG_ID])

    table = metrics_table.assign(value=pd.to_numeric(metrics_table["value"], errors="coerce"))
    means = table.groupby([CONFIG_ID, "metric"], sort=False)["value"].mean().unstack("metric")
    means = means.reindex(
        index=pd.Index(pd.unique(table[CONFIG_ID]), name=CONFIG_ID),
        columns=pd.Index(pd.unique(table["metric"])),
    )
    return means.reset_index()


def metric_names(averaged: pd.DataFrame) -> List[str]:
    return [c for c in averaged.columns if c != CONFIG_ID]


def join(
    characteristics_table: pd.DataFrame,
    metrics_table: pd.DataFrame,
    add_metrics: bool = False,
) -> pd.DataFrame:
    """Left-join per-combination metric means onto ``characteristics_table``.

    With ``add_metrics=False`` the input is returned unchanged. Otherwise every
    row keeps its place and gains one column per metric; combinations absent
    from the metrics get NaN. A metric named like an existing column is added
    as ``<name>_metric`` so no input column is lost.
    """
    if not add_metrics:
        return characteristics_table

    means = average_metrics(metrics_table)
    existing = [c for c in characteristics_table.columns if c != CONFIG_ID]
    means = means.rename(columns=column_renames(metric_names(means), existing, METRIC_COLUMN))
    names = metric_names(means)
    joined = characteristics_table.merge(means, on=CONFIG_ID, how="left", sort=False)
    joined = joined.astype({name: float for name in names})
    joined.attrs.update(characteristics_table.attrs)
    return joined
