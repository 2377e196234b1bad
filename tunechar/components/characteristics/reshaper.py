"""Long <-> wide reshaping for trade-off plots.

Wide form is one row per combination. Characteristic cells hold the mean over
that combination's resamples; a characteristic the combination never
reported is NaN, not zero.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from .tables import (
    CHARACTERISTIC_COLUMNS,
    CHARACTERISTICS_ATTR,
    CONFIG_ID,
    METRIC_COLUMN,
    PARAM_COLUMN,
    column_renames,
)


def pivot_wide(
    joined_table: pd.DataFrame,
    combinations: Optional[pd.DataFrame] = None,
) -> pd.DataFrame:
    """Pivot a Characteristics (or Joined) Table to one row per combination.

    Column order: ``config_id`` (plus hyperparameter columns when
    ``combinations`` is given), characteristic columns in first-seen order,
    then any pass-through columns (metric means) in their input order.

    ``combinations`` fixes the row set and order: combinations with no
    characteristic rows still appear, with NaN cells.

    Characteristic columns always keep their names. A pass-through column
    named like a characteristic becomes ``<name>_metric``; a hyperparameter
    named like any other column becomes ``param_<name>``. The characteristic
    column names are recorded in ``wide.attrs["characteristics"]``.
    """
    table = joined_table
    passthrough = [c for c in table.columns if c not in CHARACTERISTIC_COLUMNS]

    config_index = pd.Index(pd.unique(table[CONFIG_ID]), name=CONFIG_ID)
    char_columns = pd.Index(pd.unique(table["characteristic"]))

    if table.empty:
        wide = pd.DataFrame(index=config_index, columns=char_columns, dtype=float)
    else:
        wide = (
            table.groupby([CONFIG_ID, "characteristic"], sort=False)["value"]
            .mean()
            .unstack("characteristic")
            .reindex(index=config_index, columns=char_columns)
        )
        wide.columns.name = None

    if passthrough:
        extra = table.groupby(CONFIG_ID, sort=False)[passthrough].first()
        wide = wide.join(extra.rename(columns=column_renames(passthrough, char_columns, METRIC_COLUMN)))

    wide = wide.reset_index()

    if combinations is not None:
        params = [c for c in combinations.columns if c != CONFIG_ID]
        renames = column_renames(params, wide.columns, PARAM_COLUMN)
        wide = (
            combinations[[CONFIG_ID, *params]]
            .rename(columns=renames)
            .merge(wide, on=CONFIG_ID, how="left")
        )

    wide.attrs[CHARACTERISTICS_ATTR] = [str(c) for c in char_columns]
    return wide


def melt_long(
    wide_table: pd.DataFrame,
    characteristics: Optional[Iterable[str]] = None,
) -> pd.DataFrame:
    """Melt characteristic columns of a wide table back to ``config_id, characteristic, value``.

    ``characteristics`` defaults to the names :func:`pivot_wide` recorded on
    the table, so hyperparameter and metric columns stay out of the result.
    Without that record every column except ``config_id`` is melted. NaN
    cells (not reported) are dropped.
    """
    if characteristics is None:
        recorded = wide_table.attrs.get(CHARACTERISTICS_ATTR)
        if recorded is None:
            names = [c for c in wide_table.columns if c != CONFIG_ID]
        else:
            names = [c for c in recorded if c in wide_table.columns]
    else:
        names = list(characteristics)
    long = wide_table.melt(
        id_vars=[CONFIG_ID],
        value_vars=names,
        var_name="characteristic",
        value_name="value",
    )
    long = long.dropna(subset=["value"]).reset_index(drop=True)
    return long.astype({"value": float})
