from __future__ import annotations

from tunechar.components.interfaces import TuningStrategy
from tunechar.components.tuning import ResampledGridSearch
from tunechar.contracts.model_configs import ModelConfig
from tunechar.contracts.tuning_configs import GridConfig, ResampleConfig, TuneControl


def make_grid_search_runner(
    model_cfg: ModelConfig,
    grid_cfg: GridConfig,
    resample_cfg: ResampleConfig,
    control: TuneControl,
) -> TuningStrategy:
    """
    Factory for the resampled grid-search tuning strategy.
    """
    return ResampledGridSearch(model=model_cfg, grid=grid_cfg, resamples=resample_cfg, control=control)
