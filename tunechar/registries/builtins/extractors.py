"""Built-in characteristic extractors.

This module is imported for side-effects by :mod:`tunechar.registries.extractors`.

Zero tolerance
--------------
A coefficient (or importance) counts as *active* iff ``abs(value) > ACTIVE_COEF_TOL``.
The threshold is fixed at 1e-10 for every built-in family: coordinate-descent
solvers (Lasso / ElasticNet) produce exact zeros for dropped features, and
anything below 1e-10 on standardised inputs is numerical noise.

Counts are returned as Python ints, everything else as Python floats.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from tunechar.registries.extractors import Characteristics, register_extractor

ACTIVE_COEF_TOL = 1e-10

# sklearn marks leaf nodes with feature == TREE_UNDEFINED (-2).
_TREE_LEAF = -2


def _active_mask(values: np.ndarray) -> np.ndarray:
    return np.abs(values) > ACTIVE_COEF_TOL


@register_extractor("linear", "linreg", "ridgereg", "lasso", "enet")
def linear_characteristics(estimator: Any) -> Characteristics:
    coef = np.atleast_2d(np.asarray(estimator.coef_, dtype=float))
    # Multi-output models: a feature is active if any output uses it.
    active = _active_mask(coef).any(axis=0)
    return {
        "num_active_features": int(active.sum()),
        "coef_l1_norm": float(np.abs(coef).sum()),
    }


@register_extractor("treereg")
def tree_characteristics(estimator: Any) -> Characteristics:
    split_features = np.asarray(estimator.tree_.feature)
    used = np.unique(split_features[split_features != _TREE_LEAF])
    return {
        "num_active_features": int(used.size),
        "num_leaves": int(estimator.get_n_leaves()),
        "tree_depth": int(estimator.get_depth()),
    }


@register_extractor("rfreg")
def forest_characteristics(estimator: Any) -> Characteristics:
    importances = np.asarray(estimator.feature_importances_, dtype=float)
    trees = list(estimator.estimators_)
    return {
        "num_active_features": int(_active_mask(importances).sum()),
        "mean_leaves": float(np.mean([t.get_n_leaves() for t in trees])),
        "mean_depth": float(np.mean([t.get_depth() for t in trees])),
    }
