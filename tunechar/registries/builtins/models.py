"""Built-in model builder registrations.

This module is imported for side-effects by :mod:`tunechar.registries.models`.

To add a new model:
    1) create a new config + builder class
    2) register it via register_model_builder
"""

from __future__ import annotations

from tunechar.components.models.builders import (
    DecisionTreeRegressorBuilder,
    ElasticNetRegressorBuilder,
    KNNRegressorBuilder,
    LassoRegressorBuilder,
    LinRegBuilder,
    RandomForestRegressorBuilder,
    RidgeRegressorBuilder,
)
from tunechar.registries.models import register_model_builder


register_model_builder("linreg")(lambda cfg, seed: LinRegBuilder(cfg=cfg))
register_model_builder("ridgereg")(lambda cfg, seed: RidgeRegressorBuilder(cfg=cfg, seed=seed))
register_model_builder("lasso")(lambda cfg, seed: LassoRegressorBuilder(cfg=cfg, seed=seed))
register_model_builder("enet")(lambda cfg, seed: ElasticNetRegressorBuilder(cfg=cfg, seed=seed))
register_model_builder("treereg")(lambda cfg, seed: DecisionTreeRegressorBuilder(cfg=cfg, seed=seed))
register_model_builder("rfreg")(lambda cfg, seed: RandomForestRegressorBuilder(cfg=cfg, seed=seed))
register_model_builder("knnreg")(lambda cfg, seed: KNNRegressorBuilder(cfg=cfg))
