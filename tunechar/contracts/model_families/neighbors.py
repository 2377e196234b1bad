from __future__ import annotations

from typing import ClassVar, Literal

from pydantic import BaseModel

from ..choices import KNNAlgorithm, KNNWeights


class KNNRegressorConfig(BaseModel):
    algo: Literal["knnreg"] = "knnreg"

    task: ClassVar[str] = "regression"
    family: ClassVar[str] = "neighbors"

    n_neighbors: int = 5
    weights: KNNWeights = "uniform"
    algorithm: KNNAlgorithm = "auto"
    leaf_size: int = 30
    p: int = 2
