from __future__ import annotations

from tunechar.components.interfaces import ModelBuilder
from tunechar.contracts.model_configs import ModelConfig
from tunechar.registries.models import make_model_builder


def make_model(cfg: ModelConfig, *, seed: int | None = None) -> ModelBuilder:
    """Thin wrapper around the model builder registry."""

    return make_model_builder(cfg, seed=seed)
