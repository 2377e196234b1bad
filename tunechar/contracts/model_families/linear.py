from __future__ import annotations

from typing import ClassVar, Literal, Optional

from pydantic import BaseModel

from ..choices import CoordinateDescentSelection, RidgeSolver


class LinearRegConfig(BaseModel):
    algo: Literal["linreg"] = "linreg"

    task: ClassVar[str] = "regression"
    family: ClassVar[str] = "linear"

    fit_intercept: bool = True
    positive: bool = False


class RidgeRegressorConfig(BaseModel):
    algo: Literal["ridgereg"] = "ridgereg"

    task: ClassVar[str] = "regression"
    family: ClassVar[str] = "linear"

    alpha: float = 1.0
    fit_intercept: bool = True
    max_iter: Optional[int] = None
    tol: float = 1e-3
    solver: RidgeSolver = "auto"


class LassoRegressorConfig(BaseModel):
    algo: Literal["lasso"] = "lasso"

    task: ClassVar[str] = "regression"
    family: ClassVar[str] = "linear"

    alpha: float = 1.0
    fit_intercept: bool = True
    max_iter: int = 1000
    tol: float = 1e-4
    positive: bool = False
    random_state: Optional[int] = None
    selection: CoordinateDescentSelection = "cyclic"


class ElasticNetRegressorConfig(BaseModel):
    algo: Literal["enet"] = "enet"

    task: ClassVar[str] = "regression"
    family: ClassVar[str] = "linear"

    alpha: float = 1.0
    l1_ratio: float = 0.5
    fit_intercept: bool = True
    max_iter: int = 1000
    tol: float = 1e-4
    positive: bool = False
    random_state: Optional[int] = None
    selection: CoordinateDescentSelection = "cyclic"
