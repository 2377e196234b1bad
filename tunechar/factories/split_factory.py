from __future__ import annotations

from tunechar.components.interfaces import ResampleSplitter
from tunechar.components.splitters.resamples import BootstrapSplitter, KFoldSplitter
from tunechar.contracts.tuning_configs import ResampleConfig


def make_splitter(cfg: ResampleConfig) -> ResampleSplitter:
    if cfg.kind == "bootstrap":
        return BootstrapSplitter(n=cfg.n, seed=cfg.seed)
    if cfg.kind == "kfold":
        return KFoldSplitter(n=cfg.n, seed=cfg.seed)
    raise ValueError(f"Unknown resample kind: {cfg.kind!r}")
