"""Literal-based choice sets shared by the config contracts."""

from __future__ import annotations

from typing import Literal

ResampleKind = Literal["bootstrap", "kfold"]

RegressionMetricName = Literal["rmse", "mse", "mae", "r2", "explained_variance"]

RidgeSolver = Literal["auto", "svd", "cholesky", "lsqr", "sparse_cg", "sag", "saga", "lbfgs"]
CoordinateDescentSelection = Literal["cyclic", "random"]

RegTreeCriterion = Literal["squared_error", "friedman_mse", "absolute_error", "poisson"]
TreeSplitter = Literal["best", "random"]
MaxFeaturesName = Literal["sqrt", "log2"]

KNNWeights = Literal["uniform", "distance"]
KNNAlgorithm = Literal["auto", "ball_tree", "kd_tree", "brute"]
