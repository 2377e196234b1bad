"""Post-hoc assembly of per-fit extraction metadata into one tidy table.

Only fits that actually happened contribute rows: the collector walks the
engine's fit list and looks each successful fit up in the extraction side
table. Failed fits, fits without metadata and metadata without a matching
successful fit all contribute nothing.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Tuple

import pandas as pd
from pydantic import ValidationError

from tunechar.contracts.errors import MalformedInputError
from tunechar.contracts.results import TuningResult

from .tables import CHARACTERISTIC_COLUMNS

logger = logging.getLogger(__name__)


def read_tuning_result(tuning_result: Any) -> TuningResult:
    """Coerce a tuning result (model, mapping or duck-typed object) into :class:`TuningResult`.

    Unknown top-level fields are ignored; ``fits`` is required.
    """
    if isinstance(tuning_result, TuningResult):
        return tuning_result

    fields = TuningResult.model_fields
    if isinstance(tuning_result, Mapping):
        payload = {k: tuning_result[k] for k in fields if k in tuning_result}
    else:
        payload = {k: getattr(tuning_result, k) for k in fields if hasattr(tuning_result, k)}

    if "fits" not in payload:
        raise MalformedInputError(
            f"Expected a tuning result with per-fit entries ('fits'); got {type(tuning_result).__name__}."
        )
    try:
        return TuningResult.model_validate(payload)
    except ValidationError as exc:
        raise MalformedInputError(f"Tuning result does not have the expected shape: {exc}") from exc


def engine_order(result: TuningResult) -> Tuple[Dict[str, int], Dict[str, int]]:
    """Position of each combination id and each resample id by first appearance in ``fits``."""
    configs: Dict[str, int] = {}
    resamples: Dict[str, int] = {}
    for c in result.combinations:
        configs.setdefault(c.config_id, len(configs))
    for r in result.resamples:
        resamples.setdefault(r, len(resamples))
    for f in result.fits:
        configs.setdefault(f.config_id, len(configs))
        resamples.setdefault(f.resample_id, len(resamples))
    return configs, resamples


def collect(tuning_result: Any) -> pd.DataFrame:
    """Characteristics Table: one row per (combination, resample, characteristic).

    Columns: ``config_id, resample_id, characteristic, value``. Rows are in
    combination order, then resample order, then characteristic name.

    Raises
    ------
    MalformedInputError
        If ``tuning_result`` is not a tuning result at all.
    """
    result = read_tuning_result(tuning_result)

    metadata = {}
    for m in result.extracts:
        metadata.setdefault(m.key, m)

    config_pos, resample_pos = engine_order(result)

    rows: List[Tuple[int, int, str, str, str, float]] = []
    seen = set()
    skipped = 0
    for fit in result.fits:
        if fit.status != "ok" or fit.key in seen:
            continue
        seen.add(fit.key)
        meta = metadata.get(fit.key)
        if meta is None:
            skipped += 1
            continue
        for name, value in meta.characteristics.items():
            rows.append(
                (
                    config_pos[fit.config_id],
                    resample_pos[fit.resample_id],
                    name,
                    fit.config_id,
                    fit.resample_id,
                    float(value),
                )
            )

    if skipped:
        logger.debug("%d successful fit(s) carried no extraction metadata", skipped)

    rows.sort(key=lambda r: (r[0], r[1], r[2]))
    table = pd.DataFrame(
        [(cid, rid, name, value) for _, _, name, cid, rid, value in rows],
        columns=CHARACTERISTIC_COLUMNS,
    )
    return table.astype({"value": float})


def combinations_frame(tuning_result: Any) -> pd.DataFrame:
    """``config_id`` plus one column per hyperparameter, one row per attempted combination."""
    result = read_tuning_result(tuning_result)
    config_pos, _ = engine_order(result)
    params = {c.config_id: dict(c.params) for c in result.combinations}
    records = [{"config_id": cid, **params.get(cid, {})} for cid in config_pos]
    return pd.DataFrame.from_records(records, columns=_param_columns(records))


def _param_columns(records: List[Dict[str, Any]]) -> List[str]:
    cols: List[str] = []
    for rec in records:
        for k in rec:
            if k not in cols:
                cols.append(k)
    return cols or ["config_id"]
