"""Small sklearn-centric helpers shared by the extractors and the tuner.

Implementation notes
--------------------
* Uses duck-typing instead of importing sklearn at import time.
* Pipelines are unwrapped to their final step; the step name is not assumed.
"""

from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np


def unwrap_final_estimator(model: Any) -> Any:
    """Return the final estimator for a Pipeline-like model, else the model itself."""
    steps = getattr(model, "steps", None)
    if isinstance(steps, list) and len(steps) > 0:
        return steps[-1][1]
    return model


def resolve_param_name_for_pipeline(pipe: Any, raw_name: str) -> str:
    """Map a logical model parameter name (e.g. 'alpha') to a Pipeline parameter name.

    - If raw_name already exists in pipe.get_params(), it is returned unchanged.
    - Otherwise we try <last_step_name>__<raw_name>.
    - If that also doesn't exist, we return raw_name and let sklearn raise.
    """
    if not raw_name:
        return raw_name

    params = pipe.get_params(deep=True)
    if raw_name in params:
        return raw_name

    if getattr(pipe, "steps", None):
        last_step_name = pipe.steps[-1][0]
        candidate = f"{last_step_name}__{raw_name}"
        if candidate in params:
            return candidate

    return raw_name


def to_py(v: Any) -> Any:
    """Convert numpy scalars/arrays into pure python types."""
    if isinstance(v, (np.generic,)):
        return v.item()
    if isinstance(v, np.ndarray):
        return v.tolist()
    return v


def finite_or_none(v: Any) -> Optional[float]:
    try:
        fv = float(v)
    except (TypeError, ValueError):
        return None
    return fv if math.isfinite(fv) else None


__all__ = ["unwrap_final_estimator", "resolve_param_name_for_pipeline", "to_py", "finite_or_none"]
