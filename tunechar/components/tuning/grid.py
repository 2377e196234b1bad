"""Resampled grid search.

Every (combination, resample) pair is one independent fit task: clone the
pipeline, set params, fit on the analysis rows, score on the assessment rows,
hand the fitted model to ``control.extract`` and drop it. Tasks run through
joblib and are reassembled in engine order (combination-major), whatever
order the workers finish in.

A fit that raises becomes a :class:`FitFailure` with ``None`` metrics; the run
carries on. An ``extract`` callback that raises is logged and the fit stays
``ok`` without extraction metadata.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import numpy as np
from joblib import Parallel, delayed
from sklearn.base import clone
from sklearn.model_selection import ParameterGrid

from tunechar.components.characteristics.extractor import FittedModel
from tunechar.components.characteristics.hook import as_extraction_metadata
from tunechar.components.splitters.types import Resample
from tunechar.contracts.model_configs import ModelConfig, get_model_family
from tunechar.contracts.results import (
    Combination,
    ExtractionMetadata,
    FitContext,
    FitFailure,
    FitResult,
    MetricRecord,
    TuningResult,
)
from tunechar.contracts.tuning_configs import GridConfig, ResampleConfig, TuneControl
from tunechar.core.ids import format_ids
from tunechar.core.sklearn_utils import finite_or_none, resolve_param_name_for_pipeline, to_py
from tunechar.factories.pipeline_factory import make_pipeline
from tunechar.factories.split_factory import make_splitter
from tunechar.registries.metrics import RegressionScorer, make_scorers

from ..interfaces import TuningStrategy

logger = logging.getLogger(__name__)


@dataclass
class _FitTask:
    combination: Combination
    pipeline_params: Dict[str, Any]
    resample: Resample


@dataclass
class _FitOutput:
    outcome: Any
    metrics: List[MetricRecord] = field(default_factory=list)
    metadata: Optional[ExtractionMetadata] = None


def _run_fit(
    template: Any,
    task: _FitTask,
    X: np.ndarray,
    y: np.ndarray,
    scorers: Dict[str, RegressionScorer],
    extract: Optional[Callable[..., Any]],
    family: str,
    group: str,
) -> _FitOutput:
    config_id = task.combination.config_id
    resample_id = task.resample.resample_id
    idx_tr, idx_te = task.resample.idx_tr, task.resample.idx_te

    def _metric_rows(values: Dict[str, Optional[float]]) -> List[MetricRecord]:
        return [
            MetricRecord(config_id=config_id, resample_id=resample_id, metric=name, value=values.get(name))
            for name in scorers
        ]

    pipe = clone(template)
    try:
        if task.pipeline_params:
            pipe.set_params(**task.pipeline_params)
        pipe.fit(X[idx_tr], y[idx_tr])
        y_hat = pipe.predict(X[idx_te])
    except Exception as exc:
        return _FitOutput(
            outcome=FitFailure(
                config_id=config_id,
                resample_id=resample_id,
                error=f"{type(exc).__name__}: {exc}",
            ),
            metrics=_metric_rows({}),
        )

    values: Dict[str, Optional[float]] = {}
    for name, scorer in scorers.items():
        try:
            values[name] = finite_or_none(scorer(y[idx_te], y_hat))
        except ValueError:
            values[name] = None

    metadata = None
    if extract is not None:
        ctx = FitContext(config_id=config_id, resample_id=resample_id, family=family)
        try:
            metadata = as_extraction_metadata(extract(FittedModel(pipe, family=family, group=group), ctx), ctx)
        except Exception as exc:
            # The fit stands; it just carries no extraction metadata.
            logger.warning("extract() failed for %s/%s: %s: %s", config_id, resample_id, type(exc).__name__, exc)

    return _FitOutput(
        outcome=FitResult(config_id=config_id, resample_id=resample_id),
        metrics=_metric_rows(values),
        metadata=metadata,
    )


@dataclass
class ResampledGridSearch(TuningStrategy):
    model: ModelConfig
    grid: GridConfig
    resamples: ResampleConfig
    control: TuneControl = field(default_factory=TuneControl)

    def _combinations(self, template: Any) -> List[tuple[Combination, Dict[str, Any]]]:
        raw_grid = self.grid.param_grid or {}
        settings = list(ParameterGrid(raw_grid)) if raw_grid else [{}]
        ids = format_ids("Config", len(settings))

        out = []
        for config_id, params in zip(ids, settings):
            logical = {k: to_py(v) for k, v in params.items()}
            resolved = {resolve_param_name_for_pipeline(template, k): v for k, v in params.items()}
            out.append((Combination(config_id=config_id, params=logical), resolved))
        return out

    def run(self, X: np.ndarray, y: np.ndarray) -> TuningResult:
        X = np.asarray(X)
        y = np.asarray(y)
        if X.ndim != 2 or X.shape[0] != y.shape[0]:
            raise ValueError(f"X must be 2D with one row per target; got X{X.shape}, y{y.shape}.")

        seed = self.resamples.seed
        template = make_pipeline(self.model, scale=self.control.scale, seed=seed)
        scorers = make_scorers(self.grid.metrics)
        combos = self._combinations(template)
        resamples = list(make_splitter(self.resamples).split(X.shape[0]))

        family = str(self.model.algo)
        group = get_model_family(self.model)

        tasks = [
            _FitTask(combination=combo, pipeline_params=resolved, resample=rs)
            for combo, resolved in combos
            for rs in resamples
        ]

        outputs = Parallel(n_jobs=self.control.n_jobs)(
            delayed(_run_fit)(template, task, X, y, scorers, self.control.extract, family, group)
            for task in tasks
        )

        fits = [o.outcome for o in outputs]
        failures = [f for f in fits if f.status == "failed"]
        if self.control.verbose:
            for combo, _ in combos:
                n_failed = sum(1 for f in failures if f.config_id == combo.config_id)
                logger.info(
                    "%s %s: %d/%d fits ok",
                    combo.config_id,
                    combo.params,
                    len(resamples) - n_failed,
                    len(resamples),
                )
        if failures:
            logger.warning("%d of %d fits failed; first error: %s", len(failures), len(fits), failures[0].error)

        return TuningResult(
            algo=family,
            combinations=[c for c, _ in combos],
            resamples=[rs.resample_id for rs in resamples],
            fits=fits,
            extracts=[o.metadata for o in outputs if o.metadata is not None],
            metrics=[m for o in outputs for m in o.metrics],
            metric_names=list(scorers),
            note=(f"{len(failures)} fit(s) failed." if failures else None),
        )
