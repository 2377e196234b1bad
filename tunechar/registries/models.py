from __future__ import annotations

from typing import Callable, Optional

from tunechar.components.interfaces import ModelBuilder
from tunechar.contracts.model_configs import ModelConfig
from tunechar.registries.base import Registry


# Factory takes (cfg, seed) and returns a ModelBuilder.
ModelBuilderFactory = Callable[[ModelConfig, Optional[int]], ModelBuilder]


_BUILDERS_BY_ALGO: Registry[str, ModelBuilderFactory] = Registry(_name="model_builders_by_algo")

_BUILTINS_LOADED = False


def register_model_builder(algo: str) -> Callable[[ModelBuilderFactory], ModelBuilderFactory]:
    """Decorator to register a ModelBuilder factory under a config ``algo`` key."""

    return _BUILDERS_BY_ALGO.register(str(algo))


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    # Import triggers registration side-effects.
    from tunechar.registries.builtins import models as _  # noqa: F401

    _BUILTINS_LOADED = True


def make_model_builder(cfg: ModelConfig, *, seed: Optional[int] = None) -> ModelBuilder:
    """Return a ModelBuilder for the provided config."""

    _ensure_builtins()

    algo = getattr(cfg, "algo", None)
    factory = _BUILDERS_BY_ALGO.try_get(str(algo))
    if factory is None:
        raise ValueError(f"No model builder registered for algo={algo!r} ({type(cfg).__name__}).")
    return factory(cfg, seed)
