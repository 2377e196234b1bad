"""Per-family model configuration contracts.

Every config carries an ``algo`` discriminator, which doubles as the
family-identity tag stamped on fitted models.
"""

from .linear import (
    ElasticNetRegressorConfig,
    LassoRegressorConfig,
    LinearRegConfig,
    RidgeRegressorConfig,
)
from .neighbors import KNNRegressorConfig
from .registry import ModelConfig, get_model_family
from .trees import DecisionTreeRegressorConfig, RandomForestRegressorConfig

__all__ = [
    "ModelConfig",
    "get_model_family",
    "LinearRegConfig",
    "RidgeRegressorConfig",
    "LassoRegressorConfig",
    "ElasticNetRegressorConfig",
    "DecisionTreeRegressorConfig",
    "RandomForestRegressorConfig",
    "KNNRegressorConfig",
]
