from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import Field

from .linear import (
    ElasticNetRegressorConfig,
    LassoRegressorConfig,
    LinearRegConfig,
    RidgeRegressorConfig,
)
from .neighbors import KNNRegressorConfig
from .trees import DecisionTreeRegressorConfig, RandomForestRegressorConfig


ModelConfig = Annotated[
    Union[
        LinearRegConfig,
        RidgeRegressorConfig,
        LassoRegressorConfig,
        ElasticNetRegressorConfig,
        DecisionTreeRegressorConfig,
        RandomForestRegressorConfig,
        KNNRegressorConfig,
    ],
    Field(discriminator="algo"),
]


def get_model_family(model_cfg: Any) -> str:
    """Coarse family group (``linear``, ``trees`` ...) declared on the config class."""
    return getattr(model_cfg.__class__, "family", "other")
