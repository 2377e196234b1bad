"""Characteristic extractor registry.

Extractors are keyed by family-identity tag. A fitted model's tag is the
``algo`` of the config it was built from (``lasso``, ``treereg`` ...); configs
also declare a coarse family group (``linear``, ``trees`` ...). Resolution
tries the exact tag, then the group, then the no-op default which reports
nothing.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from tunechar.components.interfaces import HasCharacteristics
from tunechar.registries.base import Registry

Characteristics = Dict[str, float]
ExtractorFn = HasCharacteristics


def no_characteristics(estimator: Any) -> Characteristics:
    """Default extractor for families without characteristic definitions."""
    return {}


_EXTRACTORS: Registry[str, ExtractorFn] = Registry(_name="characteristic_extractors")
_EXTRACTORS.set_default(no_characteristics)

_BUILTINS_LOADED = False


def register_extractor(*tags: str) -> Callable[[ExtractorFn], ExtractorFn]:
    """Decorator to register an extractor for one or more family tags.

    The decorated callable receives the *final* estimator (pipelines are
    unwrapped before dispatch) and returns ``{name: number}``.
    """

    return _EXTRACTORS.register(*[str(t) for t in tags])


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    from tunechar.registries.builtins import extractors as _  # noqa: F401

    _BUILTINS_LOADED = True


def has_extractor(tag: Optional[str], group: Optional[str] = None) -> bool:
    _ensure_builtins()
    return any(t is not None and t in _EXTRACTORS for t in (tag, group))


def resolve_extractor(tag: Optional[str], group: Optional[str] = None) -> ExtractorFn:
    """Return the extractor for ``tag`` (falling back to ``group``, then the no-op default)."""
    _ensure_builtins()
    fn = _EXTRACTORS.resolve([tag, group])
    return fn if fn is not None else no_characteristics


def registered_tags() -> list[str]:
    _ensure_builtins()
    return sorted(_EXTRACTORS.keys())
