"""Characteristic extraction for one fitted model.

Dispatch is driven by the family tag carried on :class:`FittedModel`, never by
inspecting the estimator's Python type. Families without a registered
extractor get an empty mapping.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from tunechar.core.sklearn_utils import to_py, unwrap_final_estimator
from tunechar.registries.extractors import has_extractor, resolve_extractor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FittedModel:
    """A fitted estimator (or Pipeline) stamped with its family-identity tag.

    ``family`` is the config ``algo`` (``lasso``, ``treereg`` ...), ``group``
    the coarse family the config declares (``linear``, ``trees`` ...).
    """

    estimator: Any
    family: Optional[str] = None
    group: Optional[str] = None


def family_tags(fitted_model: Any) -> tuple[Optional[str], Optional[str]]:
    return getattr(fitted_model, "family", None), getattr(fitted_model, "group", None)


def clean_characteristics(raw: Mapping[str, Any]) -> Dict[str, float]:
    """Keep finite numeric values, keyed by ``str`` name, in name order.

    Ints stay ints so counts are reported exactly.
    """
    out: Dict[str, float] = {}
    for name in sorted(raw, key=str):
        v = to_py(raw[name])
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            continue
        if isinstance(v, float) and not math.isfinite(v):
            continue
        out[str(name)] = v
    return out


def extract(fitted_model: Any) -> Dict[str, float]:
    """Return ``{characteristic_name: number}`` for one fitted model.

    Pure: reads ``fitted_model`` only. An unsupported family is not an error,
    it just has nothing to report.
    """
    tag, group = family_tags(fitted_model)
    if not has_extractor(tag, group):
        logger.debug("No characteristic extractor for family %r (group %r)", tag, group)
        return {}

    estimator = getattr(fitted_model, "estimator", fitted_model)
    fn = resolve_extractor(tag, group)
    return clean_characteristics(fn(unwrap_final_estimator(estimator)))
