from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sklearn.base import RegressorMixin
from sklearn.ensemble import RandomForestRegressor
from sklearn.linear_model import ElasticNet, Lasso, LinearRegression, Ridge
from sklearn.neighbors import KNeighborsRegressor
from sklearn.tree import DecisionTreeRegressor

from tunechar.contracts.model_configs import (
    DecisionTreeRegressorConfig,
    ElasticNetRegressorConfig,
    KNNRegressorConfig,
    LassoRegressorConfig,
    LinearRegConfig,
    RandomForestRegressorConfig,
    RidgeRegressorConfig,
)

from ..interfaces import ModelBuilder
from .common import estimator_kwargs


@dataclass
class LinRegBuilder(ModelBuilder):
    cfg: LinearRegConfig

    def make_estimator(self) -> RegressorMixin:
        kw = estimator_kwargs(LinearRegression, self.cfg)
        return LinearRegression(**kw)


@dataclass
class RidgeRegressorBuilder(ModelBuilder):
    cfg: RidgeRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self) -> RegressorMixin:
        kw = estimator_kwargs(Ridge, self.cfg, self.seed)
        return Ridge(**kw)


@dataclass
class LassoRegressorBuilder(ModelBuilder):
    cfg: LassoRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self) -> RegressorMixin:
        kw = estimator_kwargs(Lasso, self.cfg, self.seed)
        return Lasso(**kw)


@dataclass
class ElasticNetRegressorBuilder(ModelBuilder):
    cfg: ElasticNetRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self) -> RegressorMixin:
        kw = estimator_kwargs(ElasticNet, self.cfg, self.seed)
        return ElasticNet(**kw)


@dataclass
class DecisionTreeRegressorBuilder(ModelBuilder):
    cfg: DecisionTreeRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self) -> RegressorMixin:
        kw = estimator_kwargs(DecisionTreeRegressor, self.cfg, self.seed)
        return DecisionTreeRegressor(**kw)


@dataclass
class RandomForestRegressorBuilder(ModelBuilder):
    cfg: RandomForestRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self) -> RegressorMixin:
        kw = estimator_kwargs(RandomForestRegressor, self.cfg, self.seed)
        return RandomForestRegressor(**kw)


@dataclass
class KNNRegressorBuilder(ModelBuilder):
    cfg: KNNRegressorConfig

    def make_estimator(self) -> RegressorMixin:
        kw = estimator_kwargs(KNeighborsRegressor, self.cfg)
        return KNeighborsRegressor(**kw)
