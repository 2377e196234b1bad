"""Tuning use-case: resampled grid search with an optional extract hook."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np
from pydantic import TypeAdapter

from tunechar.contracts.model_configs import ModelConfig
from tunechar.contracts.results import TuningResult
from tunechar.contracts.tuning_configs import GridConfig, ResampleConfig, TuneControl
from tunechar.factories.tuning_factory import make_grid_search_runner

_MODEL_CONFIG = TypeAdapter(ModelConfig)


def tune_grid(
    X: Any,
    y: Any,
    model: ModelConfig | dict,
    grid: GridConfig | dict | None = None,
    resamples: ResampleConfig | dict | None = None,
    control: TuneControl | None = None,
) -> TuningResult:
    """Fit every grid combination on every resample.

    Configs may be passed as pydantic models or plain dicts. Pass
    ``control=TuneControl(extract=extraction_hook)`` to collect characteristics.
    """
    model_cfg = _MODEL_CONFIG.validate_python(model)
    grid_cfg = GridConfig.model_validate(grid or {})
    resample_cfg = ResampleConfig.model_validate(resamples or {})
    ctl: Optional[TuneControl] = control if control is not None else TuneControl()

    runner = make_grid_search_runner(model_cfg, grid_cfg, resample_cfg, ctl)
    res = runner.run(np.asarray(X), np.asarray(y))
    return TuningResult.model_validate(res)
