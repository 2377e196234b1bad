from __future__ import annotations

import inspect
from typing import Any, Dict, Optional

from pydantic import BaseModel


def estimator_kwargs(estimator_cls: type, cfg: BaseModel, seed: Optional[int] = None) -> Dict[str, Any]:
    """Constructor kwargs for ``estimator_cls`` taken from a model config.

    Unset fields and the ``algo`` tag are dropped, as is anything the
    estimator does not accept. ``seed`` fills ``random_state`` when the
    estimator takes one and the config leaves it unset.
    """
    accepted = inspect.signature(estimator_cls).parameters
    kw = {
        name: value
        for name, value in cfg.model_dump(exclude={"algo"}, exclude_none=True).items()
        if name in accepted
    }
    if seed is not None and "random_state" in accepted:
        kw.setdefault("random_state", int(seed))
    return kw
