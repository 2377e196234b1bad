from __future__ import annotations

from typing import Optional

from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from tunechar.contracts.model_configs import ModelConfig
from tunechar.core.rng import RngManager
from tunechar.factories.model_factory import make_model


def make_pipeline(model_cfg: ModelConfig, *, scale: bool = True, seed: Optional[int] = None) -> Pipeline:
    """Build a (scale -> model) sklearn Pipeline.

    Notes
    -----
    - The final step is always named "model"; grid parameter names such as
      ``alpha`` are resolved to ``model__alpha``.
    - Penalised models should be tuned with ``scale=True`` so that the
      active-coefficient tolerance means the same thing for every feature.
    """
    model_seed = RngManager(seed).seed_for("tuning/model") if seed is not None else None
    est = make_model(model_cfg, seed=model_seed).make_estimator()

    steps: list[tuple[str, object]] = []
    if scale:
        steps.append(("scale", StandardScaler()))
    steps.append(("model", est))
    return Pipeline(steps)
